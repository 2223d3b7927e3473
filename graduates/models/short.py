from graduates.extensions import db
from graduates.models.base import IdType, TimestampMixin, new_id, utcnow


class Short(TimestampMixin, db.Model):
    __tablename__ = "shorts"

    id = db.Column(IdType, primary_key=True, default=new_id)
    user_id = db.Column(IdType, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    media = db.Column(db.String(500), nullable=False)
    data = db.Column(db.Text, nullable=False, default="")
    archived = db.Column(db.Boolean, nullable=False, default=False, index=True)
    date_posted = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    user = db.relationship("User", back_populates="shorts")
    tags = db.relationship("ShortTag", back_populates="short", passive_deletes=True)
    reports = db.relationship("ShortReport", back_populates="short", passive_deletes=True)


class ShortTag(TimestampMixin, db.Model):
    __tablename__ = "short_tags"

    short_id = db.Column(IdType, db.ForeignKey("shorts.id", ondelete="CASCADE"), primary_key=True)
    tag = db.Column(db.String(64), primary_key=True, index=True)

    short = db.relationship("Short", back_populates="tags")


class ShortReport(TimestampMixin, db.Model):
    __tablename__ = "short_reports"

    short_id = db.Column(IdType, db.ForeignKey("shorts.id", ondelete="CASCADE"), primary_key=True)
    user_id = db.Column(IdType, db.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    reason = db.Column(db.Text, nullable=False, default="")

    short = db.relationship("Short", back_populates="reports")
