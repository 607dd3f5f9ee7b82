# earshop/core/security.py
"""
Credential manager: bcrypt password digests and signed, time-limited bearer tokens.
"""
import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from earshop.core.config import get_settings
from earshop.domain.errors import AuthError

logger = logging.getLogger(__name__)


@lru_cache
def _pwd_context() -> CryptContext:
    settings = get_settings()
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return _pwd_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return _pwd_context().verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # malformed digest or non-string input never verifies
        return False


def create_access_token(claims: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.TOKEN_EXPIRE_MINUTES))
    to_encode = dict(claims)
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.TOKEN_SECRET, algorithm=settings.TOKEN_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Return the claims of a valid token. Expired, malformed or badly signed tokens raise AuthError."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.TOKEN_SECRET, algorithms=[settings.TOKEN_ALGORITHM])
    except JWTError as e:
        logger.warning("Rejected access token: %s", e.__class__.__name__)
        raise AuthError() from e


def claims_for_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """Token claims come from the stored user record, never from the login payload."""
    return {
        "sub": str(user["_id"]),
        "username": user.get("username"),
        "firstname": user.get("firstname"),
        "lastname": user.get("lastname"),
        "email": user.get("email"),
    }


def dummy_verify() -> None:
    """Spend about one verification worth of time, for lookups that found no user."""
    _pwd_context().dummy_verify()
