from typing import List

import strawberry

from graduates.api.types import Notification, User
from graduates.errors import NotFoundError
from graduates.services import NotificationsService


def _notifications(rows):
    return [Notification.from_model(row) for row in rows]


@strawberry.type
class NotificationQueries:
    @strawberry.field
    def get_all_notifications(self) -> List[Notification]:
        return _notifications(NotificationsService.get_all_notifications())

    @strawberry.field
    def get_notification_by_id(self, id: strawberry.ID) -> Notification:
        notification = NotificationsService.get_notification_by_id(id)
        if not notification:
            raise NotFoundError("Notification not found")
        return Notification.from_model(notification)

    @strawberry.field
    def get_notifications_received(self, user_id: strawberry.ID) -> List[Notification]:
        return _notifications(NotificationsService.get_notifications_received(user_id))

    @strawberry.field
    def get_notifications_sent(self, user_id: strawberry.ID) -> List[Notification]:
        return _notifications(NotificationsService.get_notifications_sent(user_id))

    @strawberry.field
    def get_notifications_by_type(self, user_id: strawberry.ID, notification_type: str) -> List[Notification]:
        return _notifications(NotificationsService.get_notifications_by_type(user_id, notification_type))

    @strawberry.field
    def get_user_object(self, user_id: strawberry.ID) -> User:
        user = NotificationsService.get_user_object(user_id)
        if not user:
            raise NotFoundError("User not found")
        return User.from_model(user)


@strawberry.type
class NotificationMutations:
    @strawberry.mutation
    def create_request_notification(
        self,
        user_id_to: strawberry.ID,
        user_id_from: strawberry.ID,
        notification_type: str,
    ) -> Notification:
        return Notification.from_model(
            NotificationsService.create_request_notification(user_id_to, user_id_from, notification_type)
        )

    @strawberry.mutation
    def update_request_notification(self, id: strawberry.ID, status: str) -> Notification:
        notification = NotificationsService.update_request_notification(id, status)
        if not notification:
            raise NotFoundError("Notification not found")
        return Notification.from_model(notification)

    @strawberry.mutation
    def update_seen(self, id: strawberry.ID, seen: bool) -> Notification:
        notification = NotificationsService.update_seen(id, seen)
        if not notification:
            raise NotFoundError("Notification not found")
        return Notification.from_model(notification)

    @strawberry.mutation
    def send_mail(self, email_from: str, email_to: str, subject: str, text: str) -> bool:
        NotificationsService.send_to_mail(email_from, email_to, subject, text)
        return True

    @strawberry.mutation(name="requestCV")
    def request_cv(self, user_email_from: str, user_email_to: str) -> bool:
        NotificationsService.request_cv(user_email_from, user_email_to)
        return True

    @strawberry.mutation
    def request_contact_details(self, user_email_from: str, user_email_to: str) -> bool:
        NotificationsService.request_contact_details(user_email_from, user_email_to)
        return True

    @strawberry.mutation
    def request_academic_record(self, user_email_from: str, user_email_to: str) -> bool:
        NotificationsService.request_academic_record(user_email_from, user_email_to)
        return True
