from datetime import datetime, timezone
from uuid import uuid4

from graduates.extensions import db


def utcnow():
    return datetime.now(timezone.utc)


def new_id():
    return str(uuid4())


# String UUIDs keep ids opaque to clients and identical across backends.
IdType = db.String(36)


class TimestampMixin:
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
