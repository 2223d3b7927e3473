from graduates.repositories.notification_repository import NotificationsRepository
from graduates.repositories.short_repository import ShortsRepository, TagOperationResult

__all__ = [
    "NotificationsRepository",
    "ShortsRepository",
    "TagOperationResult",
]
