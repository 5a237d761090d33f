from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from app.schemas.common import PaginationMeta, TranslationIn, TranslationOut

EventStatusLiteral = Literal["draft", "published", "archived", "cancelled"]


class EventTranslationIn(TranslationIn):
    description: str | None = None


class _EventDates(BaseModel):
    @model_validator(mode="after")
    def check_dates(self):
        start = getattr(self, "start_date", None)
        end = getattr(self, "end_date", None)
        if start is not None and end is not None and end < start:
            raise ValueError("end_date must not be before start_date")
        return self


class EventCreate(_EventDates):
    slug: str = Field(..., min_length=1, max_length=200)
    start_date: datetime
    end_date: datetime | None = None
    location: str | None = None
    max_attendees: int | None = Field(None, ge=0)
    price: float | None = Field(None, ge=0)
    currency: str | None = Field(None, min_length=3, max_length=3)
    registration_url: str | None = None
    status: EventStatusLiteral = "draft"
    translations: list[EventTranslationIn]


class EventUpdate(_EventDates):
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = None
    max_attendees: int | None = Field(None, ge=0)
    price: float | None = Field(None, ge=0)
    currency: str | None = Field(None, min_length=3, max_length=3)
    registration_url: str | None = None
    status: EventStatusLiteral | None = None
    translations: list[EventTranslationIn]


class EventTranslationOut(TranslationOut):
    event_id: str
    description: str | None = None


class EventOut(BaseModel):
    id: str
    slug: str
    start_date: datetime
    end_date: datetime | None = None
    location: str | None = None
    max_attendees: int | None = None
    price: float | None = None
    currency: str | None = None
    registration_url: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime
    translation: EventTranslationOut


class EventList(BaseModel):
    items: list[EventOut]
    pagination: PaginationMeta
