"""
Variant repository
"""
from typing import List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from app.core.database import VARIANTS
from app.repositories.base import BaseRepository
from app.schemas.variant import VariantRead


class VariantRepository(BaseRepository[VariantRead]):
    collection_name = VARIANTS
    label = "variant"

    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(VariantRead, db)

    async def list_by_model(self, model_id: ObjectId) -> List[VariantRead]:
        return await self.get_multi(filters={"modelId": model_id}, sort=[("name", ASCENDING)])
