from datetime import datetime
from typing import List, Optional

import strawberry

from graduates.services import (
    NotificationsService,
    ShortsReportsService,
    ShortsService,
    ShortsTagsService,
    StorageFolder,
)

strawberry.enum(StorageFolder, description="Destination folder for uploaded files.")


@strawberry.type
class User:
    id: strawberry.ID
    email: str
    username: Optional[str] = None

    @classmethod
    def from_model(cls, user):
        if user is None:
            return None
        return cls(id=user.id, email=user.email, username=user.username)


@strawberry.type
class ShortTag:
    short_id: strawberry.ID
    tag: str

    @classmethod
    def from_model(cls, row):
        return cls(short_id=row.short_id, tag=row.tag)


@strawberry.type
class ShortReport:
    short_id: strawberry.ID
    user_id: strawberry.ID
    reason: str
    created_at: datetime

    @classmethod
    def from_model(cls, row):
        return cls(short_id=row.short_id, user_id=row.user_id, reason=row.reason, created_at=row.created_at)


@strawberry.type
class Short:
    id: strawberry.ID
    user_id: strawberry.ID
    media: str
    data: str
    archived: bool
    date_posted: datetime

    @classmethod
    def from_model(cls, short):
        return cls(
            id=short.id,
            user_id=short.user_id,
            media=short.media,
            data=short.data,
            archived=short.archived,
            date_posted=short.date_posted,
        )

    @strawberry.field
    def user(self) -> Optional[User]:
        return User.from_model(ShortsService.find_user_by_id(self.user_id))

    @strawberry.field
    def short_tag(self) -> List[ShortTag]:
        return [ShortTag.from_model(row) for row in ShortsTagsService.find_tags_by_short_id(self.id)]

    @strawberry.field
    def short_report(self) -> List[ShortReport]:
        return [ShortReport.from_model(row) for row in ShortsReportsService.get_reports_for_short(self.id)]


@strawberry.type
class TagOperationResult:
    success: bool
    affected: int
    message: str

    @classmethod
    def from_result(cls, result):
        return cls(success=result.success, affected=result.affected, message=result.message)


@strawberry.type
class Notification:
    id: strawberry.ID
    user_id_to: strawberry.ID
    user_id_from: strawberry.ID
    notification_type: str
    status: str
    seen: bool
    created_at: datetime

    @classmethod
    def from_model(cls, notification):
        return cls(
            id=notification.id,
            user_id_to=notification.user_id_to,
            user_id_from=notification.user_id_from,
            notification_type=notification.notification_type,
            status=notification.status,
            seen=notification.seen,
            created_at=notification.created_at,
        )

    @strawberry.field
    def user_to(self) -> Optional[User]:
        return User.from_model(NotificationsService.get_user_object(self.user_id_to))

    @strawberry.field
    def user_from(self) -> Optional[User]:
        return User.from_model(NotificationsService.get_user_object(self.user_id_from))


@strawberry.input
class ShortTagInput:
    tag: str


@strawberry.input
class ShortCreateInput:
    media: str
    data: str
    archived: bool = False
    short_tag: List[ShortTagInput] = strawberry.field(default_factory=list)


@strawberry.input
class ShortUpdateInput:
    id: strawberry.ID
    media: str
    data: str
    archived: bool


@strawberry.input
class ShortCreateTagInput:
    short_id: strawberry.ID
    tag: str
