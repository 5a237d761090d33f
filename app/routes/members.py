from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from app.auth import require_admin
from app.database import get_database
from app.middleware.rate_limit import limiter, signup_limit
from app.models.admin_user import AdminUser
from app.schemas.common import MessageResponse
from app.schemas.member import (
    MemberCreate,
    MemberEnvelope,
    MemberList,
    MemberOut,
    MemberStats,
    MemberStatusLiteral,
    MembershipTypeLiteral,
    MemberUpdate,
)
from app.services.member_service import MemberRepository
from app.utils.pagination import PaginationParams

router = APIRouter()


def get_member_repository(request: Request) -> MemberRepository:
    return MemberRepository(get_database(request))


@router.get("", response_model=MemberList)
async def list_members(
    pagination: PaginationParams = Depends(),
    status_filter: Optional[MemberStatusLiteral] = Query(None, alias="status"),
    membership_type: Optional[MembershipTypeLiteral] = Query(None),
    admin: AdminUser = Depends(require_admin),
    repository: MemberRepository = Depends(get_member_repository),
):
    page = await repository.list(
        page=pagination.page,
        limit=pagination.limit,
        status=status_filter,
        membership_type=membership_type,
    )
    return page.to_dict()


@router.get("/stats/summary", response_model=MemberStats)
async def member_stats(
    admin: AdminUser = Depends(require_admin),
    repository: MemberRepository = Depends(get_member_repository),
):
    return await repository.stats()


@router.get("/{member_id}", response_model=MemberOut)
async def get_member(
    member_id: str,
    admin: AdminUser = Depends(require_admin),
    repository: MemberRepository = Depends(get_member_repository),
):
    return await repository.get(member_id)


@router.post("", response_model=MemberEnvelope, status_code=status.HTTP_201_CREATED)
@limiter.limit(signup_limit)
async def create_member(
    request: Request,
    payload: MemberCreate,
    repository: MemberRepository = Depends(get_member_repository),
):
    """Public membership signup. New members wait in ``pending`` until an admin reviews them."""
    member = await repository.create(payload.model_dump())
    return {"member": member, "message": "Demande d'adhésion soumise avec succès"}


@router.put("/{member_id}", response_model=MemberEnvelope)
async def update_member(
    member_id: str,
    payload: MemberUpdate,
    admin: AdminUser = Depends(require_admin),
    repository: MemberRepository = Depends(get_member_repository),
):
    member = await repository.update(member_id, payload.model_dump(exclude_unset=True))
    return {"member": member, "message": "Membre mis à jour avec succès"}


@router.delete("/{member_id}", response_model=MessageResponse)
async def delete_member(
    member_id: str,
    admin: AdminUser = Depends(require_admin),
    repository: MemberRepository = Depends(get_member_repository),
):
    await repository.delete(member_id)
    return {"message": "Membre supprimé avec succès"}
