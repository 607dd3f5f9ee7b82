# earshop/api/v1/routers/earphones.py
from typing import Annotated
import logging
import time

from fastapi import APIRouter, Depends, Query

from earshop.api.deps import earphone_repo, require_token
from earshop.api.v1.schemas.common import IdPath
from earshop.api.v1.schemas.earphone import EarphoneIn
from earshop.api.v1.schemas.query import SearchQuery
from earshop.api.v1.schemas.responses import Envelope, Message, Page
from earshop.domain.models.earphone import Earphone, EarphoneSummary
from earshop.domain.repositories.earphone_repo import EarphoneRepo
from earshop.domain.services.filters import Pagination, build_search_filter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["earphones"])

RepoDep = Annotated[EarphoneRepo, Depends(earphone_repo)]


@router.post(
    "/add",
    status_code=201,
    response_model=Envelope[Earphone],
    dependencies=[Depends(require_token)],
)
async def add_earphone(payload: EarphoneIn, repo: RepoDep):
    earphone = await repo.create(payload.model_dump(exclude_unset=True))
    logger.info("Created earphone id=%s brandModel=%s", earphone.id, earphone.brandModel)
    return {"result": earphone, "message": "Created successfully"}


@router.get("/earphone", response_model=Page[EarphoneSummary])
async def search_earphones(query: Annotated[SearchQuery, Query()], repo: RepoDep):
    """
    Search products. Every supplied filter must hold; results are ordered by id
    and paged with `page` / `limit`.
    """
    start_time = time.perf_counter()
    criteria = build_search_filter(query.model_dump(exclude_none=True))
    pagination = Pagination(page=query.page, limit=query.limit)
    logger.info("Request: search_earphones criteria=%s page=%s limit=%s", criteria, pagination.page, pagination.limit)

    result = await repo.search(criteria, pagination)

    logger.info(
        "Response: search_earphones count=%s elapsed_time=%.4fs",
        len(result), time.perf_counter() - start_time,
    )
    return {"page": pagination.page, "limit": pagination.limit, "result": result}


@router.get("/earphone/{earphone_id}", response_model=Earphone)
async def get_earphone(earphone_id: IdPath, repo: RepoDep):
    return await repo.get(earphone_id)


@router.put(
    "/earphone/{earphone_id}",
    response_model=Envelope[Earphone],
    dependencies=[Depends(require_token)],
)
async def update_earphone(earphone_id: IdPath, payload: EarphoneIn, repo: RepoDep):
    earphone = await repo.update(earphone_id, payload.model_dump(exclude_unset=True))
    logger.info("Updated earphone id=%s", earphone_id)
    return {"result": earphone, "message": "Updated successfully"}


@router.delete(
    "/earphone/{earphone_id}",
    response_model=Message,
    dependencies=[Depends(require_token)],
)
async def delete_earphone(earphone_id: IdPath, repo: RepoDep):
    await repo.delete(earphone_id)
    logger.info("Deleted earphone id=%s", earphone_id)
    return {"message": "Deleted successfully"}
