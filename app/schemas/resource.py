from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from app.schemas.common import PaginationMeta, TranslationIn, TranslationOut

ResourceStatus = Literal["draft", "published", "archived"]


class ResourceTranslationIn(TranslationIn):
    description: str | None = None
    type: str | None = Field(None, description="Document kind shown to readers, e.g. guide or report")


class ResourceCreate(BaseModel):
    slug: str = Field(..., min_length=1, max_length=200)
    file_url: str = Field(..., min_length=1)
    file_size: int | None = Field(None, ge=0, description="Size in bytes")
    file_type: str | None = None
    status: ResourceStatus = "draft"
    translations: list[ResourceTranslationIn]


class ResourceUpdate(BaseModel):
    file_url: str | None = Field(None, min_length=1)
    file_size: int | None = Field(None, ge=0)
    file_type: str | None = None
    status: ResourceStatus | None = None
    translations: list[ResourceTranslationIn]


class ResourceTranslationOut(TranslationOut):
    resource_id: str
    description: str | None = None
    type: str | None = None


class ResourceOut(BaseModel):
    id: str
    slug: str
    file_url: str
    file_size: int | None = None
    file_type: str | None = None
    downloads: int
    status: str
    created_at: datetime
    updated_at: datetime
    translation: ResourceTranslationOut


class ResourceList(BaseModel):
    items: list[ResourceOut]
    pagination: PaginationMeta
