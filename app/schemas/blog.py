from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from app.schemas.common import PaginationMeta, TranslationIn, TranslationOut

BlogStatus = Literal["draft", "published", "archived"]


class BlogPostTranslationIn(TranslationIn):
    excerpt: str | None = None
    content: str | None = None
    author: str | None = None
    seo_title: str | None = None
    seo_description: str | None = None


class BlogPostCreate(BaseModel):
    slug: str = Field(..., min_length=1, max_length=200)
    status: BlogStatus = "draft"
    featured_image: str | None = None
    read_time: int | None = Field(None, ge=0, description="Estimated read time in minutes")
    translations: list[BlogPostTranslationIn]


class BlogPostUpdate(BaseModel):
    status: BlogStatus | None = None
    featured_image: str | None = None
    read_time: int | None = Field(None, ge=0)
    translations: list[BlogPostTranslationIn]


class BlogPostTranslationOut(TranslationOut):
    blog_post_id: str
    excerpt: str | None = None
    content: str | None = None
    author: str | None = None
    seo_title: str | None = None
    seo_description: str | None = None


class BlogPostOut(BaseModel):
    id: str
    slug: str
    status: str
    featured_image: str | None = None
    views: int
    likes: int
    comments: int
    read_time: int | None = None
    created_at: datetime
    updated_at: datetime
    translation: BlogPostTranslationOut


class BlogPostList(BaseModel):
    items: list[BlogPostOut]
    pagination: PaginationMeta
