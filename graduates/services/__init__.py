from graduates.services.file_service import FileService, StorageFolder
from graduates.services.notification_service import NotificationsService
from graduates.services.short_service import ShortsReportsService, ShortsService, ShortsTagsService

__all__ = [
    "FileService",
    "NotificationsService",
    "ShortsReportsService",
    "ShortsService",
    "ShortsTagsService",
    "StorageFolder",
]
