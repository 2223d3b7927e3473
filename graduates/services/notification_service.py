from graduates.cqrs.notifications import (
    CreateRequestNotificationCommand,
    GetAllUserNotificationsQuery,
    GetNotificationByIdQuery,
    GetNotificationsByTypeQuery,
    GetNotificationsReceivedQuery,
    GetNotificationsSentQuery,
    GetUserObjectQuery,
    SendMailCommand,
    UpdateRequestNotificationCommand,
    UpdateSeenCommand,
)
from graduates.extensions import command_bus, query_bus

REQUEST_SUBJECT = "Graduates: Request for your {item}"
REQUEST_BODY = "Good day {to}\nYour {item} has been requested by {sender} please forward it as soon as possible"


class NotificationsService:
    @staticmethod
    def get_all_notifications():
        return query_bus.execute(GetAllUserNotificationsQuery())

    @staticmethod
    def get_notification_by_id(notification_id):
        return query_bus.execute(GetNotificationByIdQuery(notification_id))

    @staticmethod
    def get_notifications_received(user_id):
        return query_bus.execute(GetNotificationsReceivedQuery(user_id))

    @staticmethod
    def get_notifications_sent(user_id):
        return query_bus.execute(GetNotificationsSentQuery(user_id))

    @staticmethod
    def get_notifications_by_type(user_id, notification_type):
        return query_bus.execute(GetNotificationsByTypeQuery(user_id, notification_type))

    @staticmethod
    def create_request_notification(user_id_to, user_id_from, notification_type):
        return command_bus.execute(CreateRequestNotificationCommand(user_id_to, user_id_from, notification_type))

    @staticmethod
    def update_request_notification(notification_id, status):
        return command_bus.execute(UpdateRequestNotificationCommand(notification_id, status))

    @staticmethod
    def update_seen(notification_id, seen):
        return command_bus.execute(UpdateSeenCommand(notification_id, seen))

    @staticmethod
    def get_user_object(user_id):
        return query_bus.execute(GetUserObjectQuery(user_id))

    @staticmethod
    def send_to_mail(email_from, email_to, subject, text):
        return command_bus.execute(SendMailCommand(email_from, email_to, subject, text))

    @staticmethod
    def _send_request(item, email_from, email_to, body_item=None):
        subject = REQUEST_SUBJECT.format(item=item)
        body = REQUEST_BODY.format(to=email_to, item=body_item or item, sender=email_from)
        NotificationsService.send_to_mail(email_from, email_to, subject, body)

    @staticmethod
    def request_cv(email_from, email_to):
        NotificationsService._send_request("CV", email_from, email_to)

    @staticmethod
    def request_contact_details(email_from, email_to):
        NotificationsService._send_request("Contact details", email_from, email_to, body_item="contact details")

    @staticmethod
    def request_academic_record(email_from, email_to):
        NotificationsService._send_request("Academic Record", email_from, email_to)
