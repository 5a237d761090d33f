"""
Localized Repository

Async data access for the Entity + Translation pattern shared by blog
posts, events and resources. One ``ContentKind`` describes the tables and
fields of a kind; one ``LocalizedRepository`` instance serves that kind.

Operations:
    list               : page of entities joined to one language's translation
    get_by_slug        : single flattened record for (slug, language)
    create             : entity + its translations in one transaction
    update             : entity fields + full translation replacement
    delete             : entity (translations cascade)
    list_categories    : distinct categories for one language
    list_tags          : union of tags for one language
    increment_counter  : +1 on the kind's view/download counter

Reads never fall back to another language: an entity without a translation
in the requested language is absent from that language's results.
"""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator, Callable, Iterable, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import String, and_, cast, delete, distinct, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.database import Database
from app.exceptions import (
    CMSError,
    DatabaseError,
    DuplicateResourceError,
    ResourceNotFoundError,
    UnsupportedLanguageError,
    ValidationError,
)
from app.i18n.locale import SUPPORTED_LANGUAGES, normalize_language
from app.models.mixins import generate_uuid, utcnow
from app.utils.pagination import Page, page_offset

logger = logging.getLogger(__name__)

PUBLISHED = "published"

ORDER_RECENT = "recent"
ORDER_UPCOMING = "upcoming"


@dataclass(frozen=True)
class ContentKind:
    """Table and field mapping for one translatable content kind."""

    name: str
    entity: type
    translation: type
    parent_key: str
    entity_fields: tuple[str, ...]
    translation_fields: tuple[str, ...]
    statuses: tuple[str, ...]
    required_fields: tuple[str, ...] = ("slug",)
    filter_fields: tuple[str, ...] = ("category",)
    order: str = ORDER_RECENT
    counter: str | None = None
    sanitizers: Mapping[str, Callable[[Any], Any]] = field(default_factory=dict)
    # Cross-field rule over the full entity values; raises ValidationError
    entity_check: Callable[[Mapping[str, Any]], None] | None = None

    @property
    def parent_column(self):
        return getattr(self.translation, self.parent_key)


class LocalizedRepository:
    def __init__(
        self,
        kind: ContentKind,
        database: Database,
        supported_languages: Iterable[str] = SUPPORTED_LANGUAGES,
    ):
        self.kind = kind
        self.database = database
        self.supported_languages = tuple(supported_languages)

    # ── Reads ────────────────────────────────────────────────────────────────

    async def list(
        self,
        language: str,
        *,
        page: int = 1,
        limit: int = 10,
        status: str | None = PUBLISHED,
        filters: Mapping[str, str | None] | None = None,
    ) -> Page[dict[str, Any]]:
        """Return one page of entities that have a translation in ``language``.

        ``status=None`` lists every status. ``filters`` accepts the kind's
        filter fields (equality on translation columns) and ``tag``
        (membership in the translation's tags).
        """
        language = self._check_language(language)
        filters = filters or {}
        entity, translation = self.kind.entity, self.kind.translation

        query = self._apply_filters(select(entity, translation), language, status, filters)
        query = query.order_by(*self._ordering()).offset(page_offset(page, limit)).limit(limit)

        count_query = self._apply_filters(select(func.count()).select_from(entity), language, status, filters)

        async with self._guard("list"):
            async with self.database.session() as db:
                total = (await db.execute(count_query)).scalar_one()
                rows = (await db.execute(query)).all()

        return Page(
            items=[self._flatten(e, t) for e, t in rows],
            total=total,
            page=page,
            limit=limit,
        )

    async def get_by_slug(self, slug: str, language: str, *, status: str | None = PUBLISHED) -> dict[str, Any]:
        language = self._check_language(language)
        entity, translation = self.kind.entity, self.kind.translation

        query = (
            select(entity, translation)
            .join(translation, self._join_condition(language))
            .where(entity.slug == slug)
        )
        if status:
            query = query.where(entity.status == status)

        async with self._guard("get"):
            async with self.database.session() as db:
                row = (await db.execute(query)).first()

        if row is None:
            raise ResourceNotFoundError(self.kind.name, slug)
        return self._flatten(row[0], row[1])

    async def list_categories(self, language: str) -> list[str]:
        language = self._check_language(language)
        translation = self.kind.translation

        query = (
            select(distinct(translation.category))
            .where(translation.language == language, translation.category.isnot(None))
            .order_by(translation.category)
        )
        async with self._guard("list categories"):
            async with self.database.session() as db:
                result = await db.execute(query)
                return [category for category in result.scalars().all() if category]

    async def list_tags(self, language: str) -> list[str]:
        language = self._check_language(language)
        translation = self.kind.translation

        query = select(translation.tags).where(translation.language == language, translation.tags.isnot(None))
        async with self._guard("list tags"):
            async with self.database.session() as db:
                result = await db.execute(query)
                tag_lists = result.scalars().all()

        tags: set[str] = set()
        for tag_list in tag_lists:
            tags.update(tag for tag in tag_list or [] if tag)
        return sorted(tags)

    # ── Writes ───────────────────────────────────────────────────────────────

    async def create(self, fields: Mapping[str, Any], translations: list[Mapping[str, Any]]) -> str:
        """Insert an entity and all of its translations atomically. Returns the new id."""
        for name in self.kind.required_fields:
            if fields.get(name) in (None, ""):
                raise ValidationError(f"'{name}' is required", field=name)

        slug = fields["slug"]
        values = self._entity_values(fields)
        values.setdefault("status", "draft")
        if self.kind.entity_check is not None:
            self.kind.entity_check(values)
        translation_rows = self._prepare_translations(translations)

        entity_id = generate_uuid()
        new_entity = self.kind.entity(
            id=entity_id,
            slug=slug,
            translations=[self.kind.translation(**row) for row in translation_rows],
            **values,
        )

        conflict = DuplicateResourceError(self.kind.name, "slug", slug)
        async with self._guard("create", conflict=conflict, slug=slug):
            async with self.database.session() as db:
                async with db.begin():
                    existing = await db.execute(select(self.kind.entity.id).where(self.kind.entity.slug == slug))
                    if existing.first() is not None:
                        raise conflict
                    db.add(new_entity)

        logger.info(
            "%s created: slug=%s languages=%s",
            self.kind.name,
            slug,
            ",".join(row["language"] for row in translation_rows),
        )
        return entity_id

    async def update(self, slug: str, fields: Mapping[str, Any], translations: list[Mapping[str, Any]]) -> None:
        """Update entity fields and replace the whole translation set.

        Translations missing from ``translations`` are deleted; nothing is
        written when the slug does not exist.
        """
        values = self._entity_values(fields)
        for name in self.kind.required_fields:
            if name in values and values[name] in (None, ""):
                raise ValidationError(f"'{name}' cannot be empty", field=name)
        translation_rows = self._prepare_translations(translations)

        async with self._guard("update"):
            async with self.database.session() as db:
                async with db.begin():
                    result = await db.execute(select(self.kind.entity).where(self.kind.entity.slug == slug))
                    existing = result.scalars().first()
                    if existing is None:
                        raise ResourceNotFoundError(self.kind.name, slug)

                    if self.kind.entity_check is not None:
                        merged = {name: getattr(existing, name) for name in self.kind.entity_fields}
                        merged.update(values)
                        self.kind.entity_check(merged)

                    for name, value in values.items():
                        setattr(existing, name, value)
                    existing.updated_at = utcnow()

                    await db.execute(delete(self.kind.translation).where(self.kind.parent_column == existing.id))
                    db.add_all(
                        self.kind.translation(**{self.kind.parent_key: existing.id}, **row)
                        for row in translation_rows
                    )

        logger.info(
            "%s updated: slug=%s languages=%s",
            self.kind.name,
            slug,
            ",".join(row["language"] for row in translation_rows),
        )

    async def delete(self, slug: str) -> None:
        async with self._guard("delete"):
            async with self.database.session() as db:
                async with db.begin():
                    result = await db.execute(select(self.kind.entity).where(self.kind.entity.slug == slug))
                    existing = result.scalars().first()
                    if existing is None:
                        raise ResourceNotFoundError(self.kind.name, slug)
                    await db.delete(existing)

        logger.info("%s deleted: slug=%s", self.kind.name, slug)

    async def increment_counter(self, entity_id: str) -> None:
        """Add one to the kind's counter column (views or downloads)."""
        counter = self.kind.counter
        if counter is None:
            return
        entity = self.kind.entity
        column = getattr(entity, counter)

        async with self._guard("increment counter"):
            async with self.database.session() as db:
                async with db.begin():
                    # updated_at is pinned so a page view is not reported as an edit
                    await db.execute(
                        update(entity)
                        .where(entity.id == entity_id)
                        .values({counter: column + 1, "updated_at": entity.updated_at})
                    )

    async def record_hit(self, entity_id: str) -> None:
        """Best-effort counter increment, run after the read response is sent."""
        try:
            await self.increment_counter(entity_id)
        except Exception as e:
            logger.warning(f"Failed to increment {self.kind.counter} for {self.kind.name} {entity_id}: {e}")

    # ── Helpers ──────────────────────────────────────────────────────────────

    def _check_language(self, language: str) -> str:
        code = normalize_language(language or "")
        if code not in self.supported_languages:
            raise UnsupportedLanguageError(language, list(self.supported_languages))
        return code

    def _join_condition(self, language: str):
        return and_(
            self.kind.parent_column == self.kind.entity.id,
            self.kind.translation.language == language,
        )

    def _apply_filters(self, query, language: str, status: str | None, filters: Mapping[str, str | None]):
        entity, translation = self.kind.entity, self.kind.translation
        query = query.join(translation, self._join_condition(language))

        if status:
            query = query.where(entity.status == status)

        for name in self.kind.filter_fields:
            value = filters.get(name)
            if value:
                query = query.where(getattr(translation, name) == value)

        tag = filters.get("tag")
        if tag:
            # tags are stored as a JSON list; match the quoted element
            query = query.where(cast(translation.tags, String).contains(json.dumps(tag), autoescape=True))

        return query

    def _ordering(self):
        entity = self.kind.entity
        if self.kind.order == ORDER_UPCOMING:
            return (entity.start_date.asc(), entity.id.asc())
        return (entity.created_at.desc(), entity.id.desc())

    def _entity_values(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        values = {name: fields[name] for name in self.kind.entity_fields if name in fields}
        status = values.get("status")
        if "status" in values and status not in self.kind.statuses:
            raise ValidationError(
                f"Invalid status '{status}' for {self.kind.name}",
                field="status",
                details={"allowed": list(self.kind.statuses)},
            )
        return values

    def _prepare_translations(self, translations: list[Mapping[str, Any]] | None) -> list[dict[str, Any]]:
        if not isinstance(translations, list) or not translations:
            raise ValidationError("At least one translation is required", field="translations")

        rows = []
        seen: set[str] = set()
        for data in translations:
            language = self._check_language(data.get("language") or "")
            if language in seen:
                raise ValidationError(
                    f"Duplicate translation for language '{language}'",
                    field="translations",
                    details={"language": language},
                )
            seen.add(language)

            row = {"id": generate_uuid(), "language": language}
            for name in self.kind.translation_fields:
                value = data.get(name)
                sanitizer = self.kind.sanitizers.get(name)
                if value is not None and sanitizer is not None:
                    value = sanitizer(value)
                row[name] = value

            if not row.get("title"):
                raise ValidationError(
                    f"Translation '{language}' requires a title",
                    field="translations.title",
                    details={"language": language},
                )
            rows.append(row)
        return rows

    def _flatten(self, entity_row, translation_row) -> dict[str, Any]:
        record = {column.key: getattr(entity_row, column.key) for column in self.kind.entity.__table__.columns}
        localized = {
            "id": translation_row.id,
            self.kind.parent_key: entity_row.id,
            "language": translation_row.language,
        }
        for name in self.kind.translation_fields:
            localized[name] = getattr(translation_row, name)
        record["translation"] = localized
        return record

    async def _slug_exists(self, slug: str) -> bool:
        try:
            async with self.database.session() as db:
                result = await db.execute(select(self.kind.entity.id).where(self.kind.entity.slug == slug))
                return result.first() is not None
        except SQLAlchemyError as e:
            logger.warning(f"Could not re-check slug '{slug}' after an integrity failure: {e}")
            return False

    @asynccontextmanager
    async def _guard(
        self, operation: str, conflict: CMSError | None = None, slug: str | None = None
    ) -> AsyncIterator[None]:
        """Translate driver failures into repository errors.

        An integrity failure is only reported as ``conflict`` when ``slug`` is
        now taken (a concurrent insert won the race); any other constraint
        failure is a repository failure.
        """
        try:
            yield
        except CMSError:
            raise
        except IntegrityError as e:
            if conflict is not None and slug is not None and await self._slug_exists(slug):
                raise conflict from e
            logger.error(f"{self.kind.name} {operation} violated a constraint: {e}", exc_info=True)
            raise DatabaseError(f"Failed to {operation} {self.kind.name.lower()}", operation=operation) from e
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"{self.kind.name} {operation} failed: {e}", exc_info=True)
            raise DatabaseError(f"Failed to {operation} {self.kind.name.lower()}", operation=operation) from e
