"""
Member Service

Membership signups and their administration. Emails are stored lower-cased
so uniqueness is case insensitive.
"""

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.database import Database
from app.exceptions import CMSError, DatabaseError, DuplicateResourceError, MemberNotFoundError
from app.models.member import Member, MembershipType, MemberStatus
from app.models.mixins import utcnow
from app.utils.pagination import Page, page_offset
from app.utils.sanitize import sanitize_email, sanitize_plain_text

logger = logging.getLogger(__name__)

STATS_MONTHS = 12

# Free-text member fields, plain-texted before storage
_TEXT_FIELDS = ("first_name", "last_name", "company", "position", "phone")


def month_key(moment: datetime) -> str:
    return f"{moment.year:04d}-{moment.month:02d}"


def trailing_months(now: datetime, count: int = STATS_MONTHS) -> list[str]:
    """Return ``count`` "YYYY-MM" keys ending at ``now``'s month, newest first."""
    year, month = now.year, now.month
    keys = []
    for _ in range(count):
        keys.append(f"{year:04d}-{month:02d}")
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return keys


def window_start(now: datetime, count: int = STATS_MONTHS) -> datetime:
    """First instant (UTC) of the oldest month in the trailing ``count``-month window."""
    year, month = (int(part) for part in trailing_months(now, count)[-1].split("-"))
    return datetime(year, month, 1, tzinfo=timezone.utc)


class MemberRepository:
    def __init__(self, database: Database):
        self.database = database

    async def list(
        self,
        *,
        page: int = 1,
        limit: int = 10,
        status: Optional[str] = None,
        membership_type: Optional[str] = None,
    ) -> Page[Member]:
        query = select(Member)
        count_query = select(func.count()).select_from(Member)
        if status:
            query = query.where(Member.status == status)
            count_query = count_query.where(Member.status == status)
        if membership_type:
            query = query.where(Member.membership_type == membership_type)
            count_query = count_query.where(Member.membership_type == membership_type)

        query = query.order_by(Member.created_at.desc(), Member.id.desc())
        query = query.offset(page_offset(page, limit)).limit(limit)

        try:
            async with self.database.session() as db:
                total = (await db.execute(count_query)).scalar_one()
                members = (await db.execute(query)).scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list members: {e}", exc_info=True)
            raise DatabaseError("Failed to list members", operation="list") from e

        return Page(items=list(members), total=total, page=page, limit=limit)

    async def get(self, member_id: str) -> Member:
        try:
            async with self.database.session() as db:
                member = await db.get(Member, member_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch member {member_id}: {e}", exc_info=True)
            raise DatabaseError("Failed to fetch member", operation="get") from e

        if member is None:
            raise MemberNotFoundError(member_id)
        return member

    async def create(self, data: Mapping[str, Any]) -> Member:
        """Register a new member. Signups always start as ``pending``."""
        email = sanitize_email(data.get("email"))
        member = Member(
            email=email,
            membership_type=data.get("membership_type"),
            status=MemberStatus.pending.value,
            **{name: self._clean(data.get(name)) for name in _TEXT_FIELDS},
        )

        conflict = DuplicateResourceError("Member", "email", email)
        try:
            async with self.database.session() as db:
                async with db.begin():
                    existing = await db.execute(select(Member.id).where(Member.email == email))
                    if existing.first() is not None:
                        raise conflict
                    db.add(member)
        except CMSError:
            raise
        except IntegrityError as e:
            if await self._email_taken(email):
                raise conflict from e
            logger.error(f"Member insert violated a constraint: {e}", exc_info=True)
            raise DatabaseError("Failed to create member", operation="create") from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to create member: {e}", exc_info=True)
            raise DatabaseError("Failed to create member", operation="create") from e

        logger.info(f"Member signup: id={member.id} type={member.membership_type}")
        return member

    async def update(self, member_id: str, data: Mapping[str, Any]) -> Member:
        """Apply the provided fields only. ``status`` is admin controlled."""
        changes: dict[str, Any] = {}
        for name, value in data.items():
            if name == "email":
                if value is not None:
                    changes["email"] = sanitize_email(value)
            elif name in _TEXT_FIELDS:
                changes[name] = self._clean(value)
            elif name in ("membership_type", "status") and value is not None:
                changes[name] = value

        try:
            async with self.database.session() as db:
                async with db.begin():
                    member = await db.get(Member, member_id)
                    if member is None:
                        raise MemberNotFoundError(member_id)

                    new_email = changes.get("email")
                    if new_email and new_email != member.email:
                        clash = await db.execute(
                            select(Member.id).where(Member.email == new_email, Member.id != member_id)
                        )
                        if clash.first() is not None:
                            raise DuplicateResourceError("Member", "email", new_email)

                    for name, value in changes.items():
                        setattr(member, name, value)
                    member.updated_at = utcnow()
        except CMSError:
            raise
        except IntegrityError as e:
            new_email = changes.get("email")
            if new_email and await self._email_taken(new_email, exclude_id=member_id):
                raise DuplicateResourceError("Member", "email", new_email) from e
            logger.error(f"Member update violated a constraint: {e}", exc_info=True)
            raise DatabaseError("Failed to update member", operation="update") from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to update member {member_id}: {e}", exc_info=True)
            raise DatabaseError("Failed to update member", operation="update") from e

        logger.info(f"Member updated: id={member_id} fields={sorted(changes)}")
        return member

    async def delete(self, member_id: str) -> None:
        try:
            async with self.database.session() as db:
                async with db.begin():
                    member = await db.get(Member, member_id)
                    if member is None:
                        raise MemberNotFoundError(member_id)
                    await db.delete(member)
        except CMSError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete member {member_id}: {e}", exc_info=True)
            raise DatabaseError("Failed to delete member", operation="delete") from e

        logger.info(f"Member deleted: id={member_id}")

    async def stats(self, now: Optional[datetime] = None) -> dict[str, Any]:
        """
        Membership summary counts plus signups per month.

        ``monthly_stats`` covers the trailing 12 calendar months including
        the current one, newest first, with 0 for months without signups.
        """
        now = now or datetime.now(timezone.utc)
        months = trailing_months(now)

        try:
            async with self.database.session() as db:
                status_rows = (
                    await db.execute(select(Member.status, func.count()).group_by(Member.status))
                ).all()
                type_rows = (
                    await db.execute(
                        select(Member.membership_type, func.count()).group_by(Member.membership_type)
                    )
                ).all()
                created = (
                    await db.execute(select(Member.created_at).where(Member.created_at >= window_start(now)))
                ).scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to compute member stats: {e}", exc_info=True)
            raise DatabaseError("Failed to compute member stats", operation="stats") from e

        by_status = dict(status_rows)
        by_type = dict(type_rows)
        signups = Counter(month_key(moment) for moment in created if moment is not None)

        return {
            "summary": {
                "total_members": sum(by_status.values()),
                "active_members": by_status.get(MemberStatus.active.value, 0),
                "pending_members": by_status.get(MemberStatus.pending.value, 0),
                "inactive_members": by_status.get(MemberStatus.inactive.value, 0),
                "individual_members": by_type.get(MembershipType.individual.value, 0),
                "corporate_members": by_type.get(MembershipType.corporate.value, 0),
            },
            "monthly_stats": [{"month": key, "new_members": signups.get(key, 0)} for key in months],
        }

    async def _email_taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        query = select(Member.id).where(Member.email == email)
        if exclude_id is not None:
            query = query.where(Member.id != exclude_id)
        try:
            async with self.database.session() as db:
                return (await db.execute(query)).first() is not None
        except SQLAlchemyError as e:
            logger.warning(f"Could not re-check member email after an integrity failure: {e}")
            return False

    @staticmethod
    def _clean(value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return sanitize_plain_text(value) or None
