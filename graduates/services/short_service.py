from graduates.cqrs.shorts import (
    CreateShortCommand,
    CreateTagCommand,
    DeleteShortCommand,
    DeleteTagByShortTagCommand,
    DeleteTagsByShortIdCommand,
    DeleteTagsCommand,
    GetAllReportsQuery,
    GetAllShortsQuery,
    GetAllTagsQuery,
    GetReportsByShortIdQuery,
    GetShortByIdQuery,
    GetShortsByTagQuery,
    GetShortsByUserQuery,
    GetTagsByShortIdQuery,
    GetUserByIdQuery,
    UpdateShortCommand,
    UpdateTagByShortCommand,
    UpdateTagsCommand,
)
from graduates.extensions import command_bus, query_bus


class ShortsService:
    @staticmethod
    def find_all_shorts():
        return query_bus.execute(GetAllShortsQuery())

    @staticmethod
    def find_short_by_id(short_id):
        return query_bus.execute(GetShortByIdQuery(short_id))

    @staticmethod
    def find_shorts_by_user(user_id):
        return query_bus.execute(GetShortsByUserQuery(user_id))

    @staticmethod
    def find_shorts_by_tag(tag):
        return query_bus.execute(GetShortsByTagQuery(tag))

    @staticmethod
    def find_user_by_id(user_id):
        return query_bus.execute(GetUserByIdQuery(user_id))

    @staticmethod
    def create_short(user_id, media, data, archived=False, tags=()):
        return command_bus.execute(
            CreateShortCommand(user_id=user_id, media=media, data=data, archived=archived, tags=tuple(tags))
        )

    @staticmethod
    def update_short(short_id, media, data, archived):
        return command_bus.execute(UpdateShortCommand(short_id, media, data, archived))

    @staticmethod
    def delete_short(short_id):
        return command_bus.execute(DeleteShortCommand(short_id))


class ShortsTagsService:
    @staticmethod
    def find_all_tags():
        return query_bus.execute(GetAllTagsQuery())

    @staticmethod
    def find_tags_by_short_id(short_id):
        return query_bus.execute(GetTagsByShortIdQuery(short_id))

    @staticmethod
    def create_tag(short_id, tag):
        return command_bus.execute(CreateTagCommand(short_id, tag))

    @staticmethod
    def update_tags(tag, new_tag):
        return command_bus.execute(UpdateTagsCommand(tag, new_tag))

    @staticmethod
    def update_tag_by_short(short_id, tag, new_tag):
        return command_bus.execute(UpdateTagByShortCommand(short_id, tag, new_tag))

    @staticmethod
    def delete_tags(tag):
        return command_bus.execute(DeleteTagsCommand(tag))

    @staticmethod
    def delete_tags_by_short_id(short_id):
        return command_bus.execute(DeleteTagsByShortIdCommand(short_id))

    @staticmethod
    def delete_tag_by_short_tag(short_id, tag):
        return command_bus.execute(DeleteTagByShortTagCommand(short_id, tag))


class ShortsReportsService:
    @staticmethod
    def get_all_reports():
        return query_bus.execute(GetAllReportsQuery())

    @staticmethod
    def get_reports_for_short(short_id):
        return query_bus.execute(GetReportsByShortIdQuery(short_id))
