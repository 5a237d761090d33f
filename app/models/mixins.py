"""
Column mixins shared by every table.

All primary keys are UUID strings so ids stay opaque to the public site
(slugs are the external identifier) and portable across PostgreSQL and SQLite.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UUIDPrimaryKeyMixin:
    id = Column(String(36), primary_key=True, default=generate_uuid)


class TimestampMixin:
    # created_at is written once; updated_at is bumped on every mutation
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
