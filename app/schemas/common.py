from pydantic import BaseModel, Field

from app.utils.pagination import PaginationMeta


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(BaseModel):
    id: str
    message: str


class CategoriesResponse(BaseModel):
    categories: list[str]


class TagsResponse(BaseModel):
    tags: list[str]


class LanguageInfo(BaseModel):
    code: str
    name: str
    is_rtl: bool


class LanguagesResponse(BaseModel):
    default: str
    languages: list[LanguageInfo]


class TranslationIn(BaseModel):
    """Fields every translation payload carries."""

    language: str = Field(..., min_length=2, max_length=5, description="Language code: fr, en or ar")
    title: str = Field(..., min_length=1, max_length=500)
    category: str | None = None
    tags: list[str] | None = None


class TranslationOut(BaseModel):
    id: str
    language: str
    title: str
    category: str | None = None
    tags: list[str] | None = None


__all__ = [
    "CategoriesResponse",
    "CreatedResponse",
    "LanguageInfo",
    "LanguagesResponse",
    "MessageResponse",
    "PaginationMeta",
    "TagsResponse",
    "TranslationIn",
    "TranslationOut",
]
