# earshop/api/v1/routers/reviews.py
from typing import Annotated
import logging

from fastapi import APIRouter, Depends

from earshop.api.deps import earphone_repo
from earshop.api.v1.schemas.common import IdPath
from earshop.api.v1.schemas.responses import Envelope, Message
from earshop.api.v1.schemas.review import ReviewEdit, ReviewIn
from earshop.domain.models.earphone import Review, ReviewList
from earshop.domain.repositories.earphone_repo import EarphoneRepo
from earshop.domain.services.reviews import merge_review, new_review_doc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reviews"])

RepoDep = Annotated[EarphoneRepo, Depends(earphone_repo)]


@router.post("/earphone/{earphone_id}/review", status_code=201, response_model=Envelope[ReviewList])
async def add_review(earphone_id: IdPath, payload: ReviewIn, repo: RepoDep):
    doc = new_review_doc(payload.model_dump(exclude_unset=True))
    reviews = await repo.add_review(earphone_id, doc)
    logger.info("Added review id=%s to earphone id=%s", doc["_id"], earphone_id)
    return {"result": reviews, "message": "Created successfully"}


@router.get("/earphone/{earphone_id}/review", response_model=ReviewList)
async def list_reviews(earphone_id: IdPath, repo: RepoDep):
    return await repo.get_reviews(earphone_id)


@router.put("/earphone/{earphone_id}/review/{review_id}", response_model=Envelope[Review])
async def edit_review(earphone_id: IdPath, review_id: IdPath, payload: ReviewEdit, repo: RepoDep):
    # read-then-write: concurrent edits of one review are last-writer-wins
    current = await repo.find_review_doc(earphone_id, review_id)
    merged = merge_review(current, payload.model_dump(exclude_unset=True))
    review = await repo.replace_review(earphone_id, review_id, merged)
    logger.info("Edited review id=%s on earphone id=%s", review_id, earphone_id)
    return {"result": review, "message": "Updated successfully"}


@router.delete("/earphone/{earphone_id}/review/{review_id}", response_model=Message)
async def delete_review(earphone_id: IdPath, review_id: IdPath, repo: RepoDep):
    await repo.delete_review(earphone_id, review_id)
    logger.info("Deleted review id=%s from earphone id=%s", review_id, earphone_id)
    return {"message": "Deleted successfully"}
