# security.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from .config import Settings, get_settings
from .models import Role
from .schemas import TokenData

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

BEARER_PREFIX = "Bearer "


class DirectoryError(Exception):
    """Base class for errors surfaced verbatim to API callers."""


class AuthenticationError(DirectoryError):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AuthorizationError(DirectoryError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(
        data: dict,
        settings: Optional[Settings] = None,
        expires_delta: Optional[timedelta] = None
) -> str:
    settings = settings or get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> TokenData:
    """Verifies signature and expiry; raises JWTError or ValidationError."""
    settings = settings or get_settings()
    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    return TokenData.model_validate(payload)


def identity_from_authorization(
        authorization: Optional[str],
        settings: Optional[Settings] = None
) -> Optional[TokenData]:
    """
    Resolves the caller from an Authorization header.
    Anything short of a valid bearer token is an anonymous caller, not an error.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None

    token = authorization[len(BEARER_PREFIX):].strip()
    try:
        return decode_access_token(token, settings)
    except (JWTError, ValidationError) as exc:
        logger.warning("Authentication failed: %s", exc)
        return None


def require_admin(identity: Optional[TokenData]) -> TokenData:
    if identity is None or identity.role != Role.ADMIN:
        raise AuthorizationError()
    return identity
