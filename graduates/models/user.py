from graduates.extensions import db
from graduates.models.base import IdType, TimestampMixin, new_id


class User(TimestampMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(IdType, primary_key=True, default=new_id)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    username = db.Column(db.String(120), nullable=True)

    shorts = db.relationship("Short", back_populates="user", lazy="dynamic")
    received_notifications = db.relationship(
        "Notification",
        back_populates="user_to",
        lazy="dynamic",
        foreign_keys="Notification.user_id_to",
    )
    sent_notifications = db.relationship(
        "Notification",
        back_populates="user_from",
        lazy="dynamic",
        foreign_keys="Notification.user_id_from",
    )
