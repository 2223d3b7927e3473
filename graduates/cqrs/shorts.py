from dataclasses import dataclass, field
from typing import Tuple

from graduates.errors import NotFoundError
from graduates.repositories import ShortsRepository


@dataclass(frozen=True)
class GetAllShortsQuery:
    pass


@dataclass(frozen=True)
class GetShortByIdQuery:
    id: str


@dataclass(frozen=True)
class GetShortsByUserQuery:
    user_id: str


@dataclass(frozen=True)
class GetShortsByTagQuery:
    tag: str


@dataclass(frozen=True)
class GetUserByIdQuery:
    user_id: str


@dataclass(frozen=True)
class GetAllTagsQuery:
    pass


@dataclass(frozen=True)
class GetTagsByShortIdQuery:
    short_id: str


@dataclass(frozen=True)
class GetAllReportsQuery:
    pass


@dataclass(frozen=True)
class GetReportsByShortIdQuery:
    short_id: str


@dataclass(frozen=True)
class CreateShortCommand:
    user_id: str
    media: str
    data: str
    archived: bool = False
    tags: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class UpdateShortCommand:
    id: str
    media: str
    data: str
    archived: bool


@dataclass(frozen=True)
class DeleteShortCommand:
    id: str


@dataclass(frozen=True)
class CreateTagCommand:
    short_id: str
    tag: str


@dataclass(frozen=True)
class UpdateTagsCommand:
    tag: str
    new_tag: str


@dataclass(frozen=True)
class UpdateTagByShortCommand:
    short_id: str
    tag: str
    new_tag: str


@dataclass(frozen=True)
class DeleteTagsCommand:
    tag: str


@dataclass(frozen=True)
class DeleteTagsByShortIdCommand:
    short_id: str


@dataclass(frozen=True)
class DeleteTagByShortTagCommand:
    short_id: str
    tag: str


def create_short(command):
    if not ShortsRepository.find_user_by_id(command.user_id):
        raise NotFoundError("User not found")
    return ShortsRepository.create_short(
        media=command.media,
        data=command.data,
        archived=command.archived,
        tags=list(command.tags),
        user_id=command.user_id,
    )


def register(query_bus, command_bus):
    query_bus.register(GetAllShortsQuery, lambda _q: ShortsRepository.find_all())
    query_bus.register(GetShortByIdQuery, lambda q: ShortsRepository.find_by_id(q.id))
    query_bus.register(GetShortsByUserQuery, lambda q: ShortsRepository.find_by_user(q.user_id))
    query_bus.register(GetShortsByTagQuery, lambda q: ShortsRepository.find_by_tag(q.tag))
    query_bus.register(GetUserByIdQuery, lambda q: ShortsRepository.find_user_by_id(q.user_id))
    query_bus.register(GetAllTagsQuery, lambda _q: ShortsRepository.find_all_tags())
    query_bus.register(GetTagsByShortIdQuery, lambda q: ShortsRepository.find_tag_by_short_id(q.short_id))
    query_bus.register(GetAllReportsQuery, lambda _q: ShortsRepository.find_all_reports())
    query_bus.register(GetReportsByShortIdQuery, lambda q: ShortsRepository.find_reports_by_short_id(q.short_id))

    command_bus.register(CreateShortCommand, create_short)
    command_bus.register(
        UpdateShortCommand,
        lambda c: ShortsRepository.update_short(c.id, c.media, c.data, c.archived),
    )
    command_bus.register(DeleteShortCommand, lambda c: ShortsRepository.delete_short(c.id))
    command_bus.register(CreateTagCommand, lambda c: ShortsRepository.create_tag(c.short_id, c.tag))
    command_bus.register(UpdateTagsCommand, lambda c: ShortsRepository.update_tags(c.tag, c.new_tag))
    command_bus.register(
        UpdateTagByShortCommand,
        lambda c: ShortsRepository.update_tag_by_short(c.short_id, c.tag, c.new_tag),
    )
    command_bus.register(DeleteTagsCommand, lambda c: ShortsRepository.delete_tags(c.tag))
    command_bus.register(DeleteTagsByShortIdCommand, lambda c: ShortsRepository.delete_tags_by_short_id(c.short_id))
    command_bus.register(
        DeleteTagByShortTagCommand,
        lambda c: ShortsRepository.delete_tag_by_short_tag(c.short_id, c.tag),
    )
