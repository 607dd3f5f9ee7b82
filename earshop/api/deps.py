# earshop/api/deps.py
import logging
from typing import Any, Dict, Optional

from fastapi import Depends, Header, Request

from earshop.core.security import decode_access_token
from earshop.db.mongo import get_db
from earshop.domain.errors import AuthError, MissingToken
from earshop.domain.repositories.earphone_repo import EarphoneRepo
from earshop.domain.repositories.user_repo import UserRepo

logger = logging.getLogger(__name__)


# Dependency for injecting the MongoDB database into endpoints/services
async def mongo_db(db = Depends(get_db)):
    return db


def earphone_repo(db = Depends(mongo_db)) -> EarphoneRepo:
    return EarphoneRepo(db)


def user_repo(db = Depends(mongo_db)) -> UserRepo:
    return UserRepo(db)


async def require_token(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> Dict[str, Any]:
    """
    Access gate for mutating routes. Only presence and validity of the bearer
    token are checked; the claims are attached to request.state.user.
    """
    if not authorization:
        logger.warning("Rejected %s %s: no access token", request.method, request.url.path)
        raise MissingToken()

    parts = authorization.split()
    if len(parts) < 2:
        logger.warning("Rejected %s %s: malformed authorization header", request.method, request.url.path)
        raise AuthError()

    claims = decode_access_token(parts[1])
    request.state.user = claims
    return claims
