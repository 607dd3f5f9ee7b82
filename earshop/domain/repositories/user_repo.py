# earshop/domain/repositories/user_repo.py

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from earshop.domain.errors import Conflict, ResourceNotFound
from earshop.domain.models.user import User
from earshop.domain.repositories.ids import to_object_id
from earshop.domain.services.constants import PUBLIC_USER_PROJECTION, USER_COLLECTION

logger = logging.getLogger(__name__)


class UserRepo:
    """User accounts in the 'user' collection. Emails are unique; passwords are stored as digests only."""

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = USER_COLLECTION):
        self.col = db[collection_name]

    async def ensure_indexes(self) -> None:
        await self.col.create_index("email", unique=True)

    async def list_all(self) -> List[User]:
        cursor = self.col.find({}, PUBLIC_USER_PROJECTION, sort=[("_id", 1)])
        return [User.model_validate(doc) async for doc in cursor]

    async def get(self, user_id: str) -> User:
        doc = await self.col.find_one({"_id": to_object_id(user_id, "User")}, PUBLIC_USER_PROJECTION)
        if doc is None:
            raise ResourceNotFound(f"User {user_id} not found")
        return User.model_validate(doc)

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Raw record including the password digest, for credential checks only."""
        return await self.col.find_one({"email": email})

    async def has_email(self, user_id: str, email: str) -> bool:
        doc = await self.col.find_one({"_id": to_object_id(user_id, "User"), "email": email}, {"_id": 1})
        return doc is not None

    async def create(self, fields: Dict[str, Any]) -> User:
        email = fields["email"]
        if await self.find_by_email(email):
            raise Conflict(f"{email} is already registered")
        doc = dict(fields)
        try:
            res = await self.col.insert_one(doc)
        except DuplicateKeyError as e:
            # lost the race against a concurrent signup, the unique index decides
            raise Conflict(f"{email} is already registered") from e
        logger.debug("user created id=%s", res.inserted_id)
        doc.pop("password", None)
        return User.model_validate({**doc, "_id": res.inserted_id})

    async def update(self, user_id: str, changes: Dict[str, Any]) -> User:
        oid = to_object_id(user_id, "User")
        res = await self.col.update_one({"_id": oid}, {"$set": changes})
        if res.matched_count == 0:
            raise ResourceNotFound(f"User {user_id} not found")
        return await self.get(user_id)

    async def delete(self, user_id: str) -> None:
        res = await self.col.delete_one({"_id": to_object_id(user_id, "User")})
        if res.deleted_count == 0:
            raise ResourceNotFound(f"User {user_id} not found")
