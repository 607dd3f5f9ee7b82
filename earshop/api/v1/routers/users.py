# earshop/api/v1/routers/users.py
from typing import Annotated, List
import logging

from fastapi import APIRouter, Depends, Query

from earshop.api.deps import earphone_repo, require_token, user_repo
from earshop.api.v1.schemas.common import EmailPath, IdPath
from earshop.api.v1.schemas.query import SearchQuery
from earshop.api.v1.schemas.responses import Envelope, Message, Page
from earshop.api.v1.schemas.user import UserUpdateIn
from earshop.domain.errors import ResourceNotFound
from earshop.domain.models.earphone import UserReview
from earshop.domain.models.user import User
from earshop.domain.repositories.earphone_repo import EarphoneRepo
from earshop.domain.repositories.user_repo import UserRepo
from earshop.domain.services.filters import Pagination

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

UsersDep = Annotated[UserRepo, Depends(user_repo)]


@router.get("/user", response_model=List[User])
async def list_users(users: UsersDep):
    return await users.list_all()


@router.get("/user/{user_id}", response_model=User)
async def get_user(user_id: IdPath, users: UsersDep):
    return await users.get(user_id)


@router.get("/user/{user_id}/{email}/review", response_model=Page[UserReview])
async def get_user_reviews(
    user_id: IdPath,
    email: EmailPath,
    query: Annotated[SearchQuery, Query()],
    users: UsersDep,
    earphones: Annotated[EarphoneRepo, Depends(earphone_repo)],
):
    """
    Reviews written by this user across all products. The email must be the
    one registered for `user_id`.
    """
    if not await users.has_email(user_id, email):
        raise ResourceNotFound(f"User {user_id} with email {email} not found")
    pagination = Pagination(page=query.page, limit=query.limit)
    result = await earphones.reviews_by_email(email, pagination)
    logger.info("Response: get_user_reviews user_id=%s count=%s", user_id, len(result))
    return {"page": pagination.page, "limit": pagination.limit, "result": result}


@router.put(
    "/user/{user_id}",
    response_model=Envelope[User],
    dependencies=[Depends(require_token)],
)
async def update_user(user_id: IdPath, payload: UserUpdateIn, users: UsersDep):
    user = await users.update(user_id, payload.model_dump(exclude_unset=True))
    logger.info("Updated user id=%s", user_id)
    return {"result": user, "message": "Updated successfully"}


@router.delete(
    "/user/{user_id}",
    response_model=Message,
    dependencies=[Depends(require_token)],
)
async def delete_user(user_id: IdPath, users: UsersDep):
    await users.delete(user_id)
    logger.info("Deleted user id=%s", user_id)
    return {"message": "Deleted successfully"}
