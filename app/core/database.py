"""
MongoDB connection management with lazy client creation and startup retries
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import ConnectionFailure, OperationFailure, ServerSelectionTimeoutError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from app.core.config import settings
from app.core.logging import log


BRANDS = "brands"
MODELS = "models"
VARIANTS = "variants"

# Case-insensitive comparison for the unique name indexes
CASE_INSENSITIVE = {"locale": "en", "strength": 2}


# Retry decorator for connecting at startup
db_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    reraise=True,
    retry=retry_if_exception_type((ConnectionFailure, ServerSelectionTimeoutError)),
)


class MongoManager:
    """Owns the process-wide motor client"""

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None

    @property
    def client(self) -> AsyncIOMotorClient:
        if self._client is None:
            self._client = AsyncIOMotorClient(
                settings.mongodb_uri,
                serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
                tz_aware=True,
            )
        return self._client

    @property
    def db(self) -> AsyncIOMotorDatabase:
        return self.client[settings.mongodb_db]

    @db_retry
    async def init(self):
        """Verify the connection and create indexes"""
        await self.client.admin.command("ping")
        log.info("MongoDB connection established", database=settings.mongodb_db)
        await ensure_indexes(self.db)

    def close(self):
        if self._client is None:
            return

        self._client.close()
        self._client = None
        log.info("MongoDB connection closed")


# Server codes for an index that already exists with other options or another key spec
INDEX_CONFLICT_CODES = (85, 86)


async def _create_index(collection, keys, **kwargs):
    """Create an index under the server's default name; an existing conflicting index is kept"""
    try:
        await collection.create_index(keys, **kwargs)
    except OperationFailure as e:
        if e.code not in INDEX_CONFLICT_CODES:
            raise
        log.warning(
            "Keeping existing conflicting index",
            collection=collection.name,
            keys=keys,
            code=e.code,
            error=str(e),
        )


async def ensure_indexes(db: AsyncIOMotorDatabase):
    """Create the indexes backing uniqueness and parent lookups"""
    await _create_index(db[BRANDS], [("name", ASCENDING)], unique=True, collation=CASE_INSENSITIVE)
    await _create_index(db[BRANDS], [("createdAt", DESCENDING)])
    await _create_index(
        db[MODELS], [("brandId", ASCENDING), ("name", ASCENDING)], unique=True, collation=CASE_INSENSITIVE
    )
    await _create_index(db[VARIANTS], [("brandId", ASCENDING)])
    await _create_index(db[VARIANTS], [("modelId", ASCENDING), ("name", ASCENDING)])
    log.info("MongoDB indexes ensured")


# Global manager instance
mongo_manager = MongoManager()


async def get_database() -> AsyncIOMotorDatabase:
    """Database dependency"""
    return mongo_manager.db


__all__ = [
    "BRANDS",
    "MODELS",
    "VARIANTS",
    "MongoManager",
    "mongo_manager",
    "ensure_indexes",
    "get_database",
    "db_retry",
]
