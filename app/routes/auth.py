from fastapi import APIRouter, Depends, Request
from fastapi.security import OAuth2PasswordRequestForm
from datetime import timedelta
from ..auth import create_access_token, require_admin
from ..database import get_database
from ..middleware.rate_limit import limiter, login_limit
from ..models.admin_user import AdminUser
from ..schemas.token import AdminUserOut, Token
from ..services.auth_service import authenticate_admin
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/token", response_model=Token)
@limiter.limit(login_limit)
async def login_for_access_token(
    request: Request,
    form_data: OAuth2PasswordRequestForm = Depends(),
):
    """
    Issue a bearer token for an admin account (``username`` is the email).
    """
    settings = request.app.state.settings
    admin = await authenticate_admin(form_data.username, form_data.password, get_database(request))

    expires = timedelta(minutes=settings.access_token_expire_minutes)
    access_token = create_access_token({"sub": admin.email}, settings.secret_key, expires)
    logger.info(f"Access token created for admin: {admin.email}")

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_in": int(expires.total_seconds()),
    }


@router.get("/me", response_model=AdminUserOut)
async def read_current_admin(admin: AdminUser = Depends(require_admin)):
    return admin
