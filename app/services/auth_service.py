import logging
from typing import Optional

from sqlalchemy import select

from app.auth import hash_password, verify_password
from app.database import Database
from app.exceptions import InvalidCredentialsError
from app.models.admin_user import AdminUser
from app.models.mixins import utcnow
from app.utils.sanitize import sanitize_email

logger = logging.getLogger(__name__)


async def authenticate_admin(email: str, password: str, database: Database) -> AdminUser:
    email = sanitize_email(email)
    async with database.session() as db:
        async with db.begin():
            result = await db.execute(select(AdminUser).where(AdminUser.email == email))
            admin = result.scalars().first()
            if admin is None or not admin.is_active or not verify_password(password, admin.hashed_password):
                logger.warning(f"Login failed for email: {email}")
                raise InvalidCredentialsError()
            admin.last_login_at = utcnow()

    logger.info(f"Admin logged in: {admin.email}")
    return admin


async def create_admin(
    email: str, password: str, database: Database, full_name: Optional[str] = None
) -> Optional[AdminUser]:
    """Create an admin account unless one with this email already exists."""
    email = sanitize_email(email)
    async with database.session() as db:
        async with db.begin():
            result = await db.execute(select(AdminUser).where(AdminUser.email == email))
            if result.scalars().first():
                return None

            admin = AdminUser(
                email=email,
                hashed_password=hash_password(password),
                full_name=full_name,
                is_active=True,
            )
            db.add(admin)

    logger.info(f"Admin account created: {email}")
    return admin


async def ensure_bootstrap_admin(settings, database: Database) -> None:
    if not (settings.admin_email and settings.admin_password):
        return
    await create_admin(settings.admin_email, settings.admin_password, database)
