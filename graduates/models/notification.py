from graduates.extensions import db
from graduates.models.base import IdType, TimestampMixin, new_id


class Notification(TimestampMixin, db.Model):
    __tablename__ = "notifications"

    id = db.Column(IdType, primary_key=True, default=new_id)
    user_id_to = db.Column(IdType, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id_from = db.Column(IdType, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    notification_type = db.Column(db.String(64), nullable=False, index=True)
    status = db.Column(db.String(32), nullable=False, default="Pending")
    seen = db.Column(db.Boolean, nullable=False, default=False, index=True)

    user_to = db.relationship("User", back_populates="received_notifications", foreign_keys=[user_id_to])
    user_from = db.relationship("User", back_populates="sent_notifications", foreign_keys=[user_id_from])

    __table_args__ = (
        db.Index("ix_notifications_to_type", "user_id_to", "notification_type"),
    )
