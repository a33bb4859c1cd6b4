"""
Base repository pattern implementation over MongoDB collections
"""
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.exceptions import ConflictError, DatabaseError
from app.core.logging import log


ReadSchemaType = TypeVar("ReadSchemaType", bound=BaseModel)

SortSpec = Sequence[Tuple[str, int]]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseRepository(Generic[ReadSchemaType]):
    """
    Generic repository for document access.
    Implements common CRUD operations and maps driver failures onto API errors:
    duplicate keys become ConflictError, anything else DatabaseError.
    """

    collection_name: str
    label: str

    def __init__(self, read_schema: Type[ReadSchemaType], db: AsyncIOMotorDatabase):
        self.read_schema = read_schema
        self.collection = db[self.collection_name]

    def _to_read(self, doc: Optional[Dict[str, Any]]) -> Optional[ReadSchemaType]:
        if doc is None:
            return None
        return self.read_schema.model_validate(doc)

    def _conflict(self, e: DuplicateKeyError) -> ConflictError:
        log.warning(f"Duplicate key on {self.collection_name}", error=str(e))
        return ConflictError(
            f"{self.label.capitalize()} already exists",
            details=f"A {self.label} with this name already exists in the system",
        )

    async def create(self, *, data: Dict[str, Any]) -> ReadSchemaType:
        """Insert a new document with timestamps"""
        now = utcnow()
        doc = {**data, "createdAt": now, "updatedAt": now}
        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise self._conflict(e)
        except PyMongoError as e:
            log.error(f"Database error creating {self.label}", error=str(e))
            raise DatabaseError(f"Failed to create {self.label}", details=str(e))

        doc["_id"] = result.inserted_id
        log.info(f"Created {self.label}", id=str(result.inserted_id))
        return self._to_read(doc)

    async def get(self, *, filters: Dict[str, Any]) -> Optional[ReadSchemaType]:
        """Get a single document"""
        try:
            doc = await self.collection.find_one(filters)
        except PyMongoError as e:
            log.error(f"Database error fetching {self.label}", error=str(e))
            raise DatabaseError(f"Failed to fetch {self.label}", details=str(e))
        return self._to_read(doc)

    async def get_multi(
        self,
        *,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None
    ) -> List[ReadSchemaType]:
        """Get every matching document in the given order"""
        try:
            cursor = self.collection.find(filters or {})
            if sort:
                cursor = cursor.sort(list(sort))
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            log.error(f"Database error listing {self.label}s", error=str(e))
            raise DatabaseError(f"Failed to fetch {self.label}s", details=str(e))
        return [self._to_read(doc) for doc in docs]

    async def exists(self, *, filters: Dict[str, Any]) -> bool:
        try:
            return await self.collection.find_one(filters, {"_id": 1}) is not None
        except PyMongoError as e:
            log.error(f"Database error checking {self.label}", error=str(e))
            raise DatabaseError(f"Failed to fetch {self.label}", details=str(e))

    async def update(self, *, filters: Dict[str, Any], values: Dict[str, Any]) -> Optional[ReadSchemaType]:
        """$set the given values and return the updated document, or None"""
        try:
            doc = await self.collection.find_one_and_update(
                filters,
                {"$set": {**values, "updatedAt": utcnow()}},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise self._conflict(e)
        except PyMongoError as e:
            log.error(f"Database error updating {self.label}", error=str(e))
            raise DatabaseError(f"Failed to update {self.label}", details=str(e))

        if doc is not None:
            log.info(f"Updated {self.label}", id=str(doc["_id"]))
        return self._to_read(doc)

    async def delete(self, *, filters: Dict[str, Any]) -> Optional[ReadSchemaType]:
        """Delete a document and return what was removed, or None"""
        try:
            doc = await self.collection.find_one_and_delete(filters)
        except PyMongoError as e:
            log.error(f"Database error deleting {self.label}", error=str(e))
            raise DatabaseError(f"Failed to delete {self.label}", details=str(e))

        if doc is not None:
            log.info(f"Deleted {self.label}", id=str(doc["_id"]))
        return self._to_read(doc)
