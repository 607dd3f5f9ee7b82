# earshop/core/lifespan.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pymongo.errors import PyMongoError

from earshop.db import mongo
from earshop.domain.repositories.user_repo import UserRepo

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup ---
    await mongo.connect()
    try:
        await UserRepo(mongo.get_db()).ensure_indexes()
    except PyMongoError as e:
        # the unique email index is retried on next startup; signup still checks before insert
        logger.warning("Could not ensure user indexes: %s", e)

    yield

    # --- Shutdown ---
    await mongo.disconnect()
    logger.info("Mongo disconnected")
