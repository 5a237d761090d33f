from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt, ExpiredSignatureError
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
from app.database import get_database
from app.exceptions import AuthenticationError, AuthorizationError, DatabaseError, InvalidTokenError, TokenExpiredError
from app.models.admin_user import AdminUser
import logging

# Initialize logging
logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# OAuth2 scheme for token validation; missing tokens are handled by the dependencies below
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)


# Function to hash a password
def hash_password(password: str) -> str:
    return pwd_context.hash(password)


# Function to verify a password
def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# Function to create an access token with an expiration time
def create_access_token(data: dict, secret_key: str, expires_delta: timedelta) -> str:
    to_encode = data.copy()
    if "sub" not in to_encode:
        raise ValueError("Missing 'sub' claim (admin email) in token data.")

    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)


# Function to decode an access token
def decode_access_token(token: str, secret_key: str) -> str:
    try:
        payload = jwt.decode(token, secret_key, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        logger.warning("Token expired")
        raise TokenExpiredError()
    except JWTError as e:
        logger.warning(f"JWT decoding failed: {str(e)}")
        raise InvalidTokenError()

    email: Optional[str] = payload.get("sub")
    if email is None:
        logger.warning("Token is missing 'sub' claim")
        raise InvalidTokenError("Token does not contain 'sub' field")
    return email


async def _load_admin(request: Request, token: str) -> AdminUser:
    email = decode_access_token(token, request.app.state.settings.secret_key)

    database = get_database(request)
    try:
        async with database.session() as db:
            result = await db.execute(select(AdminUser).where(AdminUser.email == email))
            admin = result.scalars().first()
    except SQLAlchemyError as e:
        logger.error(f"Database query failed: {e}")
        raise DatabaseError("Failed to fetch admin user", operation="authenticate") from e

    if admin is None:
        logger.warning(f"Token presented for unknown admin '{email}'")
        raise InvalidTokenError("Could not validate credentials")
    if not admin.is_active:
        logger.warning(f"Token presented for deactivated admin '{email}'")
        raise AuthorizationError("Admin account is deactivated")
    return admin


async def require_admin(request: Request, token: Optional[str] = Depends(oauth2_scheme)) -> AdminUser:
    """Dependency for write endpoints: a valid bearer token of an active admin."""
    if not token:
        raise AuthenticationError("Not authenticated")
    return await _load_admin(request, token)


async def optional_admin(request: Request, token: Optional[str] = Depends(oauth2_scheme)) -> Optional[AdminUser]:
    """
    Dependency for public reads.

    Returns the admin when a valid token is sent, ``None`` for anonymous
    callers. A token that is present but invalid is still rejected.
    """
    if not token:
        return None
    return await _load_admin(request, token)
