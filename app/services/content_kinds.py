"""
Content kinds served by ``LocalizedRepository``.

Each kind names its entity/translation tables, the entity columns an admin
may write, the translated columns, and how those columns are sanitized.
"""

from datetime import datetime, timezone
from typing import Any, Mapping

from app.exceptions import ValidationError
from app.models import (
    BlogPost,
    BlogPostTranslation,
    Event,
    EventStatus,
    EventTranslation,
    PublicationStatus,
    Resource,
    ResourceTranslation,
)
from app.services.localized_repository import ORDER_UPCOMING, ContentKind
from app.utils.sanitize import sanitize_plain_text, sanitize_rich_content, sanitize_tags


def _as_utc(moment: datetime) -> datetime:
    # SQLite returns naive datetimes; read them as UTC
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


def check_event_dates(values: Mapping[str, Any]) -> None:
    start, end = values.get("start_date"), values.get("end_date")
    if start is not None and end is not None and _as_utc(end) < _as_utc(start):
        raise ValidationError("end_date must not be before start_date", field="end_date")


BLOG = ContentKind(
    name="Blog post",
    entity=BlogPost,
    translation=BlogPostTranslation,
    parent_key="blog_post_id",
    entity_fields=("status", "featured_image", "read_time"),
    translation_fields=(
        "title",
        "excerpt",
        "content",
        "author",
        "category",
        "tags",
        "seo_title",
        "seo_description",
    ),
    statuses=tuple(s.value for s in PublicationStatus),
    counter="views",
    sanitizers={
        "title": sanitize_plain_text,
        "excerpt": sanitize_rich_content,
        "content": sanitize_rich_content,
        "author": sanitize_plain_text,
        "category": sanitize_plain_text,
        "tags": sanitize_tags,
        "seo_title": sanitize_plain_text,
        "seo_description": sanitize_plain_text,
    },
)

EVENTS = ContentKind(
    name="Event",
    entity=Event,
    translation=EventTranslation,
    parent_key="event_id",
    entity_fields=(
        "start_date",
        "end_date",
        "location",
        "max_attendees",
        "price",
        "currency",
        "registration_url",
        "status",
    ),
    translation_fields=("title", "description", "category", "tags"),
    statuses=tuple(s.value for s in EventStatus),
    required_fields=("slug", "start_date"),
    order=ORDER_UPCOMING,
    entity_check=check_event_dates,
    sanitizers={
        "title": sanitize_plain_text,
        "description": sanitize_rich_content,
        "category": sanitize_plain_text,
        "tags": sanitize_tags,
    },
)

RESOURCES = ContentKind(
    name="Resource",
    entity=Resource,
    translation=ResourceTranslation,
    parent_key="resource_id",
    entity_fields=("file_url", "file_size", "file_type", "status"),
    translation_fields=("title", "description", "type", "category", "tags"),
    statuses=tuple(s.value for s in PublicationStatus),
    required_fields=("slug", "file_url"),
    filter_fields=("category", "type"),
    counter="downloads",
    sanitizers={
        "title": sanitize_plain_text,
        "description": sanitize_rich_content,
        "type": sanitize_plain_text,
        "category": sanitize_plain_text,
        "tags": sanitize_tags,
    },
)
