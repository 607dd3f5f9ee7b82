# earshop/domain/repositories/earphone_repo.py

from __future__ import annotations
import logging
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from earshop.domain.errors import ResourceNotFound
from earshop.domain.models.earphone import Earphone, EarphoneSummary, Review, ReviewList, UserReview
from earshop.domain.repositories.ids import to_object_id
from earshop.domain.services.constants import EARPHONE_COLLECTION, SEARCH_PROJECTION
from earshop.domain.services.filters import Pagination

logger = logging.getLogger(__name__)


class EarphoneRepo:
    """
    Product repository backed by the 'earphone' collection.
    Reviews live embedded in each product document under 'review':
      review = [{ _id, email, comments, rating, date }, ...]
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = EARPHONE_COLLECTION):
        self.col = db[collection_name]

    async def create(self, fields: Dict[str, Any]) -> Earphone:
        doc = dict(fields)
        doc["review"] = []
        res = await self.col.insert_one(doc)
        logger.debug("earphone created id=%s", res.inserted_id)
        return Earphone.model_validate({**doc, "_id": res.inserted_id})

    async def search(self, criteria: Dict[str, Any], pagination: Pagination) -> List[EarphoneSummary]:
        cursor = self.col.find(
            criteria,
            SEARCH_PROJECTION,
            sort=[("_id", 1)],
            skip=pagination.offset,
            limit=pagination.limit,
        )
        return [EarphoneSummary.model_validate(doc) async for doc in cursor]

    async def get(self, earphone_id: str) -> Earphone:
        doc = await self.col.find_one({"_id": to_object_id(earphone_id, "Earphone")})
        if doc is None:
            raise ResourceNotFound(f"Earphone {earphone_id} not found")
        return Earphone.model_validate(doc)

    async def update(self, earphone_id: str, changes: Dict[str, Any]) -> Earphone:
        oid = to_object_id(earphone_id, "Earphone")
        res = await self.col.update_one({"_id": oid}, {"$set": changes})
        if res.matched_count == 0:
            raise ResourceNotFound(f"Earphone {earphone_id} not found")
        logger.debug("earphone updated id=%s modified=%s", earphone_id, res.modified_count)
        return await self.get(earphone_id)

    async def delete(self, earphone_id: str) -> None:
        res = await self.col.delete_one({"_id": to_object_id(earphone_id, "Earphone")})
        if res.deleted_count == 0:
            raise ResourceNotFound(f"Earphone {earphone_id} not found")

    # ----- Embedded reviews -------------------------------------------------

    async def add_review(self, earphone_id: str, review: Dict[str, Any]) -> ReviewList:
        oid = to_object_id(earphone_id, "Earphone")
        res = await self.col.update_one({"_id": oid}, {"$push": {"review": review}})
        if res.matched_count == 0:
            raise ResourceNotFound(f"Earphone {earphone_id} not found")
        return await self.get_reviews(earphone_id)

    async def get_reviews(self, earphone_id: str) -> ReviewList:
        doc = await self.col.find_one(
            {"_id": to_object_id(earphone_id, "Earphone")},
            {"_id": 1, "brandModel": 1, "review": 1},
        )
        if doc is None:
            raise ResourceNotFound(f"Earphone {earphone_id} not found")
        return ReviewList.model_validate(doc)

    async def find_review_doc(self, earphone_id: str, review_id: str) -> Dict[str, Any]:
        """Raw stored review, matched by both the product id and the review id."""
        oid = to_object_id(earphone_id, "Earphone")
        rid = to_object_id(review_id, "Review")
        doc = await self.col.find_one({"_id": oid, "review._id": rid}, {"review": 1})
        for review in (doc or {}).get("review") or []:
            if review.get("_id") == rid:
                return review
        raise ResourceNotFound(f"Review {review_id} not found on earphone {earphone_id}")

    async def replace_review(self, earphone_id: str, review_id: str, review: Dict[str, Any]) -> Review:
        oid = to_object_id(earphone_id, "Earphone")
        rid = to_object_id(review_id, "Review")
        res = await self.col.update_one(
            {"_id": oid, "review._id": rid},
            {"$set": {"review.$": review}},
        )
        if res.matched_count == 0:
            # removed between the read and this write
            raise ResourceNotFound(f"Review {review_id} not found on earphone {earphone_id}")
        return Review.model_validate(review)

    async def delete_review(self, earphone_id: str, review_id: str) -> None:
        oid = to_object_id(earphone_id, "Earphone")
        rid = to_object_id(review_id, "Review")
        res = await self.col.update_one({"_id": oid}, {"$pull": {"review": {"_id": rid}}})
        if res.modified_count == 0:
            raise ResourceNotFound(f"Review {review_id} not found on earphone {earphone_id}")

    async def reviews_by_email(self, email: str, pagination: Pagination) -> List[UserReview]:
        """All reviews written with `email`, across products, one entry per review."""
        pipeline: List[Dict[str, Any]] = [
            {"$match": {"review.email": email}},
            {"$unwind": "$review"},
            {"$match": {"review.email": email}},
            {"$sort": {"_id": 1, "review._id": 1}},
            {"$skip": pagination.offset},
            {"$limit": pagination.limit},
            {"$project": {"_id": 1, "brandModel": 1, "review": 1}},
        ]
        cursor = self.col.aggregate(pipeline)
        return [UserReview.model_validate(doc) async for doc in cursor]
