from dataclasses import dataclass

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from graduates.extensions import db
from graduates.models import Short, ShortReport, ShortTag, User
from graduates.models.base import utcnow


@dataclass(frozen=True)
class TagOperationResult:
    affected: int
    message: str

    @property
    def success(self):
        return self.affected > 0

    @classmethod
    def from_count(cls, count, failure_message):
        return cls(affected=count, message="success" if count > 0 else failure_message)


def _unique(values):
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


class ShortsRepository:
    @staticmethod
    def find_all():
        return Short.query.order_by(Short.date_posted.desc()).all()

    @staticmethod
    def find_user_by_id(user_id):
        return db.session.get(User, user_id)

    @staticmethod
    def find_by_id(short_id):
        return db.session.get(Short, short_id)

    @staticmethod
    def find_by_user(user_id):
        if not current_app.config["SHORTS_FILTER_BY_RELATION"]:
            return []
        return Short.query.filter_by(user_id=user_id).order_by(Short.date_posted.desc()).all()

    @staticmethod
    def find_by_tag(tag):
        if not current_app.config["SHORTS_FILTER_BY_RELATION"]:
            return []
        return (
            Short.query.filter(Short.tags.any(ShortTag.tag == tag))
            .order_by(Short.date_posted.desc())
            .all()
        )

    @staticmethod
    def create_short(media, data, archived, tags, user_id):
        short = Short(
            user_id=user_id,
            media=media,
            data=data,
            archived=bool(archived),
            date_posted=utcnow(),
        )
        short.tags = [ShortTag(tag=tag) for tag in _unique(tags or [])]
        db.session.add(short)
        db.session.commit()
        return short

    @staticmethod
    def update_short(short_id, media, data, archived):
        short = db.session.get(Short, short_id)
        if not short:
            return None
        short.media = media
        short.data = data
        short.archived = bool(archived)
        db.session.commit()
        return short

    @staticmethod
    def delete_short(short_id):
        short = db.session.get(Short, short_id)
        if not short:
            return None

        # Detached copy: the persistent row is gone once the transaction commits.
        deleted = Short(
            id=short.id,
            user_id=short.user_id,
            media=short.media,
            data=short.data,
            archived=short.archived,
            date_posted=short.date_posted,
            created_at=short.created_at,
            updated_at=short.updated_at,
        )
        try:
            ShortTag.query.filter_by(short_id=short_id).delete()
            Short.query.filter_by(id=short_id).delete()
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        current_app.logger.info("Deleted short %s and its tags", short_id)
        return deleted

    @staticmethod
    def find_all_tags():
        return ShortTag.query.order_by(ShortTag.tag.asc()).all()

    @staticmethod
    def find_tag_by_short_id(short_id):
        return ShortTag.query.filter_by(short_id=short_id).order_by(ShortTag.tag.asc()).all()

    @staticmethod
    def create_tag(short_id, tag):
        if not db.session.get(Short, short_id):
            return None
        row = ShortTag(short_id=short_id, tag=tag)
        db.session.add(row)
        db.session.commit()
        return row

    @staticmethod
    def update_tags(tag, new_tag):
        count = ShortTag.query.filter_by(tag=tag).update({"tag": new_tag}, synchronize_session=False)
        db.session.commit()
        return TagOperationResult.from_count(count, "No tags updated")

    @staticmethod
    def update_tag_by_short(short_id, tag, new_tag):
        count = ShortTag.query.filter_by(short_id=short_id, tag=tag).update(
            {"tag": new_tag}, synchronize_session=False
        )
        db.session.commit()
        return TagOperationResult.from_count(count, "Tag not found")

    @staticmethod
    def delete_tags(tag):
        count = ShortTag.query.filter_by(tag=tag).delete()
        db.session.commit()
        return TagOperationResult.from_count(count, "No tags deleted")

    @staticmethod
    def delete_tags_by_short_id(short_id):
        count = ShortTag.query.filter_by(short_id=short_id).delete()
        db.session.commit()
        return TagOperationResult.from_count(count, "No tags deleted")

    @staticmethod
    def delete_tag_by_short_tag(short_id, tag):
        count = ShortTag.query.filter_by(short_id=short_id, tag=tag).delete()
        db.session.commit()
        return TagOperationResult.from_count(count, "Tag not found")

    @staticmethod
    def find_all_reports():
        return ShortReport.query.order_by(ShortReport.created_at.desc()).all()

    @staticmethod
    def find_reports_by_short_id(short_id):
        return ShortReport.query.filter_by(short_id=short_id).order_by(ShortReport.created_at.desc()).all()
