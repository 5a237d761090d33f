"""
Router factory for translatable content (blog posts, events, resources).

Every kind exposes the same endpoints; only the payload/response schemas,
the list filters and the success messages differ.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status

from app.auth import optional_admin, require_admin
from app.database import get_database
from app.models.admin_user import AdminUser
from app.schemas.common import CategoriesResponse, CreatedResponse, MessageResponse, TagsResponse
from app.services.localized_repository import PUBLISHED, ContentKind, LocalizedRepository
from app.utils.pagination import PaginationParams


@dataclass(frozen=True)
class Messages:
    created: str
    updated: str
    deleted: str


def content_filters(
    category: Optional[str] = Query(None, description="Exact category in the requested language"),
    tag: Optional[str] = Query(None, description="Only items carrying this tag"),
) -> dict:
    return {"category": category, "tag": tag}


def resource_filters(
    category: Optional[str] = Query(None, description="Exact category in the requested language"),
    tag: Optional[str] = Query(None, description="Only items carrying this tag"),
    type: Optional[str] = Query(None, description="Document type in the requested language"),
) -> dict:
    return {"category": category, "tag": tag, "type": type}


def build_localized_router(
    kind: ContentKind,
    *,
    create_schema,
    update_schema,
    item_schema,
    list_schema,
    messages: Messages,
    filters: Callable[..., dict] = content_filters,
) -> APIRouter:
    router = APIRouter()

    def get_repository(request: Request) -> LocalizedRepository:
        return LocalizedRepository(
            kind,
            get_database(request),
            request.app.state.settings.supported_languages,
        )

    def resolve_language(request: Request, language: Optional[str]) -> str:
        return language or request.app.state.settings.default_language

    @router.get("", response_model=list_schema)
    async def list_items(
        request: Request,
        language: Optional[str] = Query(None, description="fr, en or ar (defaults to fr)"),
        status_filter: Optional[str] = Query(None, alias="status", description="Admins only"),
        pagination: PaginationParams = Depends(),
        list_filters: dict = Depends(filters),
        admin: Optional[AdminUser] = Depends(optional_admin),
        repository: LocalizedRepository = Depends(get_repository),
    ):
        # Anonymous callers only ever see published content
        visible_status = status_filter if admin is not None else PUBLISHED
        page = await repository.list(
            resolve_language(request, language),
            page=pagination.page,
            limit=pagination.limit,
            status=visible_status,
            filters=list_filters,
        )
        return page.to_dict()

    @router.get("/meta/categories", response_model=CategoriesResponse)
    async def list_categories(
        request: Request,
        language: Optional[str] = Query(None),
        repository: LocalizedRepository = Depends(get_repository),
    ):
        return {"categories": await repository.list_categories(resolve_language(request, language))}

    @router.get("/meta/tags", response_model=TagsResponse)
    async def list_tags(
        request: Request,
        language: Optional[str] = Query(None),
        repository: LocalizedRepository = Depends(get_repository),
    ):
        return {"tags": await repository.list_tags(resolve_language(request, language))}

    @router.get("/{slug}", response_model=item_schema)
    async def get_item(
        slug: str,
        request: Request,
        background_tasks: BackgroundTasks,
        language: Optional[str] = Query(None),
        admin: Optional[AdminUser] = Depends(optional_admin),
        repository: LocalizedRepository = Depends(get_repository),
    ):
        item = await repository.get_by_slug(
            slug,
            resolve_language(request, language),
            status=None if admin is not None else PUBLISHED,
        )
        if kind.counter:
            background_tasks.add_task(repository.record_hit, item["id"])
        return item

    @router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
    async def create_item(
        payload: create_schema,
        admin: AdminUser = Depends(require_admin),
        repository: LocalizedRepository = Depends(get_repository),
    ):
        fields = payload.model_dump(exclude={"translations"})
        translations = [translation.model_dump() for translation in payload.translations]
        entity_id = await repository.create(fields, translations)
        return {"id": entity_id, "message": messages.created}

    @router.put("/{slug}", response_model=MessageResponse)
    async def update_item(
        slug: str,
        payload: update_schema,
        admin: AdminUser = Depends(require_admin),
        repository: LocalizedRepository = Depends(get_repository),
    ):
        fields = payload.model_dump(exclude={"translations"}, exclude_unset=True)
        translations = [translation.model_dump() for translation in payload.translations]
        await repository.update(slug, fields, translations)
        return {"message": messages.updated}

    @router.delete("/{slug}", response_model=MessageResponse)
    async def delete_item(
        slug: str,
        admin: AdminUser = Depends(require_admin),
        repository: LocalizedRepository = Depends(get_repository),
    ):
        await repository.delete(slug)
        return {"message": messages.deleted}

    return router
