from graduates.models.notification import Notification
from graduates.models.short import Short, ShortReport, ShortTag
from graduates.models.user import User

__all__ = [
    "User",
    "Notification",
    "Short",
    "ShortTag",
    "ShortReport",
]
