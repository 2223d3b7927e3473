from typing import List
from uuid import uuid4

import strawberry
from flask import current_app

from graduates.api.types import (
    Short,
    ShortCreateInput,
    ShortCreateTagInput,
    ShortReport,
    ShortTag,
    ShortUpdateInput,
    StorageFolder,
    TagOperationResult,
)
from graduates.errors import NotFoundError, UpstreamError, ValidationFailedError
from graduates.services import FileService, ShortsReportsService, ShortsService, ShortsTagsService


def _require(value, label):
    if value is None or not str(value).strip():
        raise ValidationFailedError(f"{label} is required")


@strawberry.type
class ShortQueries:
    @strawberry.field
    def get_all_shorts(self) -> List[Short]:
        return [Short.from_model(row) for row in ShortsService.find_all_shorts()]

    @strawberry.field
    def get_short_by_id(self, id: strawberry.ID) -> Short:
        short = ShortsService.find_short_by_id(id)
        if not short:
            raise NotFoundError("Short not found")
        return Short.from_model(short)

    @strawberry.field
    def get_shorts_by_user(self, user_id: strawberry.ID) -> List[Short]:
        if not ShortsService.find_user_by_id(user_id):
            raise NotFoundError("User not found")
        return [Short.from_model(row) for row in ShortsService.find_shorts_by_user(user_id)]

    @strawberry.field
    def get_shorts_by_tag(self, tag_id: str) -> List[Short]:
        return [Short.from_model(row) for row in ShortsService.find_shorts_by_tag(tag_id)]

    @strawberry.field
    def get_all_tags(self) -> List[ShortTag]:
        return [ShortTag.from_model(row) for row in ShortsTagsService.find_all_tags()]

    @strawberry.field
    def get_tags_by_short_id(self, id: strawberry.ID) -> List[ShortTag]:
        return [ShortTag.from_model(row) for row in ShortsTagsService.find_tags_by_short_id(id)]

    @strawberry.field
    def get_reports_for_short(self, id: strawberry.ID) -> List[ShortReport]:
        return [ShortReport.from_model(row) for row in ShortsReportsService.get_reports_for_short(id)]


@strawberry.type
class ShortMutations:
    @strawberry.mutation
    def create_short(
        self,
        short: ShortCreateInput,
        user_id: strawberry.ID,
        file: str,
        folder: StorageFolder,
    ) -> Short:
        _require(user_id, "User id")
        _require(file, "File")
        if ShortsService.find_user_by_id(user_id) is None:
            raise NotFoundError("User not found")
        stored_path = FileService.upload_as_base64_string(file, uuid4().hex, folder)
        if not stored_path:
            raise UpstreamError("Upload failed")

        created = ShortsService.create_short(
            user_id=user_id,
            media=short.media,
            data=short.data,
            archived=short.archived,
            tags=[item.tag for item in short.short_tag],
        )
        current_app.logger.info("Short %s created for user %s (file %s)", created.id, user_id, stored_path)
        return Short.from_model(created)

    @strawberry.mutation
    def update_short(self, short: ShortUpdateInput) -> Short:
        updated = ShortsService.update_short(short.id, short.media, short.data, short.archived)
        if not updated:
            raise NotFoundError("Short not found")
        return Short.from_model(updated)

    @strawberry.mutation
    def delete_short(self, id: strawberry.ID) -> Short:
        deleted = ShortsService.delete_short(id)
        if not deleted:
            raise NotFoundError("Short not found")
        return Short.from_model(deleted)

    @strawberry.mutation
    def create_tag(self, tag: ShortCreateTagInput) -> ShortTag:
        _require(tag.tag, "Tag")
        created = ShortsTagsService.create_tag(tag.short_id, tag.tag)
        if not created:
            raise NotFoundError("Short not found")
        return ShortTag.from_model(created)

    @strawberry.mutation
    def update_tags(self, tag: str, new_tag: str) -> TagOperationResult:
        _require(new_tag, "New tag")
        return TagOperationResult.from_result(ShortsTagsService.update_tags(tag, new_tag))

    @strawberry.mutation
    def update_tag_by_short(self, short_id: strawberry.ID, tag: str, new_tag: str) -> TagOperationResult:
        _require(new_tag, "New tag")
        return TagOperationResult.from_result(ShortsTagsService.update_tag_by_short(short_id, tag, new_tag))

    @strawberry.mutation
    def delete_tags(self, tag: str) -> TagOperationResult:
        return TagOperationResult.from_result(ShortsTagsService.delete_tags(tag))

    @strawberry.mutation
    def delete_tags_by_short_id(self, short_id: strawberry.ID) -> TagOperationResult:
        return TagOperationResult.from_result(ShortsTagsService.delete_tags_by_short_id(short_id))

    @strawberry.mutation
    def delete_tag_by_short_tag(self, short_id: strawberry.ID, tag: str) -> TagOperationResult:
        return TagOperationResult.from_result(ShortsTagsService.delete_tag_by_short_tag(short_id, tag))
