# earshop/db/mongo.py
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from earshop.core.config import get_settings
import certifi

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None


def get_db() -> AsyncIOMotorDatabase:
    assert _db is not None, "Mongo DB not initialized"
    return _db


def _new_client() -> AsyncIOMotorClient:
    settings = get_settings()
    options = dict(
        uuidRepresentation="standard",
        tz_aware=True,                         # dates come back as UTC-aware datetimes
        serverSelectionTimeoutMS=6000,
        connectTimeoutMS=6000,
        timeoutMS=settings.MONGO_TIMEOUT_MS,   # bounds every store call
    )
    if settings.MONGO_TLS or settings.MONGO_URI.startswith("mongodb+srv://"):
        options.update(tls=True, tlsCAFile=certifi.where())
    return AsyncIOMotorClient(settings.MONGO_URI, **options)


async def connect():
    """
    Create the Motor client once for the process lifetime.
    A failed startup ping is logged but not fatal: the client stays lazy and
    the first real query tries again.
    """
    global _client, _db
    settings = get_settings()

    _client = _new_client()
    _db = _client[settings.MONGO_DB]
    try:
        await _client.admin.command("ping")
        logger.info("Mongo connected (ping ok) db=%s", settings.MONGO_DB)
    except Exception as e:
        logger.warning("Mongo ping at startup failed, will connect lazily: %s", e)


async def disconnect():
    global _client, _db
    if _client:
        _client.close()
    _client = None
    _db = None
