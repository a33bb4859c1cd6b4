"""
Vehicle model repository
"""
from typing import List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from app.core.database import MODELS
from app.repositories.base import BaseRepository
from app.schemas.car_model import CarModelRead
from app.utils.normalization import exact_match_ci


class CarModelRepository(BaseRepository[CarModelRead]):
    """Repository for models; every lookup is scoped to the owning brand"""

    collection_name = MODELS
    label = "model"

    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(CarModelRead, db)

    async def list_by_brand(self, brand_id: ObjectId) -> List[CarModelRead]:
        return await self.get_multi(filters={"brandId": brand_id}, sort=[("name", ASCENDING)])

    async def get_by_name(
        self,
        brand_id: ObjectId,
        name: str,
        exclude_id: Optional[ObjectId] = None
    ) -> Optional[CarModelRead]:
        """Get a model of the brand by name, ignoring case"""
        filters = {"brandId": brand_id, "name": exact_match_ci(name)}
        if exclude_id is not None:
            filters["_id"] = {"$ne": exclude_id}
        return await self.get(filters=filters)
