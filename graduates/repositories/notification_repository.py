from flask import current_app

from graduates.extensions import db
from graduates.models import Notification, User


class NotificationsRepository:
    @staticmethod
    def find_all():
        return Notification.query.order_by(Notification.created_at.desc()).all()

    @staticmethod
    def find_by_id(notification_id):
        return db.session.get(Notification, notification_id)

    @staticmethod
    def find_received(user_id):
        return (
            Notification.query.filter_by(user_id_to=user_id)
            .order_by(Notification.created_at.desc())
            .all()
        )

    @staticmethod
    def find_sent(user_id):
        return (
            Notification.query.filter_by(user_id_from=user_id)
            .order_by(Notification.created_at.desc())
            .all()
        )

    @staticmethod
    def find_by_type(user_id, notification_type):
        return (
            Notification.query.filter_by(user_id_to=user_id, notification_type=notification_type)
            .order_by(Notification.created_at.desc())
            .all()
        )

    @staticmethod
    def create_request(user_id_to, user_id_from, notification_type):
        notification = Notification(
            user_id_to=user_id_to,
            user_id_from=user_id_from,
            notification_type=notification_type,
            status=current_app.config["NOTIFICATION_DEFAULT_STATUS"],
            seen=False,
        )
        db.session.add(notification)
        db.session.commit()
        return notification

    @staticmethod
    def update_status(notification_id, status):
        notification = db.session.get(Notification, notification_id)
        if not notification:
            return None
        notification.status = status
        db.session.commit()
        return notification

    @staticmethod
    def update_seen(notification_id, seen):
        notification = db.session.get(Notification, notification_id)
        if not notification:
            return None
        notification.seen = bool(seen)
        db.session.commit()
        return notification

    @staticmethod
    def find_user_by_id(user_id):
        return db.session.get(User, user_id)
