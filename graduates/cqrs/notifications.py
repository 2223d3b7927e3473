from dataclasses import dataclass

from graduates.mail import MailService
from graduates.repositories import NotificationsRepository


@dataclass(frozen=True)
class GetAllUserNotificationsQuery:
    pass


@dataclass(frozen=True)
class GetNotificationByIdQuery:
    id: str


@dataclass(frozen=True)
class GetNotificationsReceivedQuery:
    user_id: str


@dataclass(frozen=True)
class GetNotificationsSentQuery:
    user_id: str


@dataclass(frozen=True)
class GetNotificationsByTypeQuery:
    user_id: str
    notification_type: str


@dataclass(frozen=True)
class GetUserObjectQuery:
    user_id: str


@dataclass(frozen=True)
class CreateRequestNotificationCommand:
    user_id_to: str
    user_id_from: str
    notification_type: str


@dataclass(frozen=True)
class UpdateRequestNotificationCommand:
    id: str
    status: str


@dataclass(frozen=True)
class UpdateSeenCommand:
    id: str
    seen: bool


@dataclass(frozen=True)
class SendMailCommand:
    email_from: str
    email_to: str
    subject: str
    text: str


@dataclass(frozen=True)
class SendMailEvent:
    email_from: str
    email_to: str
    subject: str
    text: str


def register(query_bus, command_bus, event_bus):
    query_bus.register(GetAllUserNotificationsQuery, lambda _q: NotificationsRepository.find_all())
    query_bus.register(GetNotificationByIdQuery, lambda q: NotificationsRepository.find_by_id(q.id))
    query_bus.register(GetNotificationsReceivedQuery, lambda q: NotificationsRepository.find_received(q.user_id))
    query_bus.register(GetNotificationsSentQuery, lambda q: NotificationsRepository.find_sent(q.user_id))
    query_bus.register(
        GetNotificationsByTypeQuery,
        lambda q: NotificationsRepository.find_by_type(q.user_id, q.notification_type),
    )
    query_bus.register(GetUserObjectQuery, lambda q: NotificationsRepository.find_user_by_id(q.user_id))

    command_bus.register(
        CreateRequestNotificationCommand,
        lambda c: NotificationsRepository.create_request(c.user_id_to, c.user_id_from, c.notification_type),
    )
    command_bus.register(
        UpdateRequestNotificationCommand,
        lambda c: NotificationsRepository.update_status(c.id, c.status),
    )
    command_bus.register(UpdateSeenCommand, lambda c: NotificationsRepository.update_seen(c.id, c.seen))

    def send_mail(command):
        event_bus.publish(SendMailEvent(command.email_from, command.email_to, command.subject, command.text))

    command_bus.register(SendMailCommand, send_mail)
    event_bus.subscribe(SendMailEvent, deliver_mail)


def deliver_mail(event):
    MailService.send(event.email_from, event.email_to, event.subject, event.text)
