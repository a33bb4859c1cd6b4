"""
Brand repository
"""
from typing import List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING

from app.core.database import BRANDS
from app.repositories.base import BaseRepository
from app.schemas.brand import BrandRead
from app.utils.normalization import exact_match_ci


class BrandRepository(BaseRepository[BrandRead]):
    """Repository for brand operations"""

    collection_name = BRANDS
    label = "brand"

    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(BrandRead, db)

    async def list_newest_first(self) -> List[BrandRead]:
        return await self.get_multi(sort=[("createdAt", DESCENDING)])

    async def get_by_name(self, name: str, exclude_id: Optional[ObjectId] = None) -> Optional[BrandRead]:
        """Get brand by name, ignoring case"""
        filters = {"name": exact_match_ci(name)}
        if exclude_id is not None:
            filters["_id"] = {"$ne": exclude_id}
        return await self.get(filters=filters)
