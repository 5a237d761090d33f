from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.utils.pagination import PaginationMeta

MemberStatusLiteral = Literal["pending", "active", "inactive"]
MembershipTypeLiteral = Literal["individual", "corporate", "student"]


class MemberCreate(BaseModel):
    email: EmailStr = Field(..., description="A valid email address.")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    company: str | None = Field(None, max_length=200)
    position: str | None = Field(None, max_length=200)
    phone: str | None = Field(None, max_length=50)
    membership_type: MembershipTypeLiteral | None = None


class MemberUpdate(BaseModel):
    email: EmailStr | None = None
    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    company: str | None = Field(None, max_length=200)
    position: str | None = Field(None, max_length=200)
    phone: str | None = Field(None, max_length=50)
    membership_type: MembershipTypeLiteral | None = None
    status: MemberStatusLiteral | None = None


class MemberOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    position: str | None = None
    phone: str | None = None
    membership_type: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime


class MemberList(BaseModel):
    items: list[MemberOut]
    pagination: PaginationMeta


class MemberEnvelope(BaseModel):
    member: MemberOut
    message: str


class MemberSummary(BaseModel):
    total_members: int
    active_members: int
    pending_members: int
    inactive_members: int
    individual_members: int
    corporate_members: int


class MonthlySignups(BaseModel):
    month: str = Field(..., description="Calendar month, YYYY-MM")
    new_members: int


class MemberStats(BaseModel):
    summary: MemberSummary
    monthly_stats: list[MonthlySignups]
