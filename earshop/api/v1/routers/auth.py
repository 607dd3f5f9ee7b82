# earshop/api/v1/routers/auth.py
from typing import Annotated
import logging

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from earshop.api.deps import user_repo
from earshop.api.v1.schemas.responses import Message
from earshop.api.v1.schemas.user import LoginIn, SignupIn
from earshop.core.security import (
    claims_for_user,
    create_access_token,
    dummy_verify,
    hash_password,
    verify_password,
)
from earshop.domain.errors import InvalidCredentials
from earshop.domain.models.user import LoginResult
from earshop.domain.repositories.user_repo import UserRepo

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

UsersDep = Annotated[UserRepo, Depends(user_repo)]


@router.post("/signup", status_code=201, response_model=Message)
async def signup(payload: SignupIn, users: UsersDep):
    fields = payload.model_dump(exclude_unset=True)
    # bcrypt is CPU bound, keep it off the event loop
    fields["password"] = await run_in_threadpool(hash_password, payload.password)
    user = await users.create(fields)
    logger.info("Signed up user id=%s", user.id)
    return {"message": f"{user.email} is registered successfully"}


@router.post("/login", response_model=LoginResult)
async def login(payload: LoginIn, users: UsersDep):
    """
    Exchange email and password for a bearer token. Unknown email and wrong
    password give the same answer.
    """
    user = await users.find_by_email(payload.email)
    if user is None:
        await run_in_threadpool(dummy_verify)  # keep timing close to a real comparison
        raise InvalidCredentials()
    valid = isinstance(payload.password, str) and await run_in_threadpool(
        verify_password, payload.password, user.get("password", "")
    )
    if not valid:
        logger.info("Failed login for user id=%s", user["_id"])
        raise InvalidCredentials()

    token = create_access_token(claims_for_user(user))
    logger.info("Issued token for user id=%s", user["_id"])
    return LoginResult.model_validate({**user, "token": token})
