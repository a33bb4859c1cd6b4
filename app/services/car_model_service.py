"""
Vehicle model service
"""

from typing import List

from app.core.exceptions import BadRequestError, ConflictError, NotFoundError
from app.core.logging import log
from app.repositories.car_model import CarModelRepository
from app.schemas.car_model import CarModelCreate, CarModelRead, CarModelUpdate
from app.utils.object_id import parse_object_id


INVALID_BRAND_ID = "Invalid brand ID"
INVALID_ID = "Invalid id format"


class CarModelService:
    """Service layer for models; names are unique within a brand regardless of case"""

    def __init__(self, model_repo: CarModelRepository):
        self.model_repo = model_repo

    async def list_models(self, brand_id: str) -> List[CarModelRead]:
        brand_oid = parse_object_id(brand_id, INVALID_BRAND_ID)
        models = await self.model_repo.list_by_brand(brand_oid)
        log.debug("Listed models", brand_id=brand_id, count=len(models))
        return models

    async def get_model(self, brand_id: str, model_id: str) -> CarModelRead:
        filters = self._scoped_filter(brand_id, model_id)
        model = await self.model_repo.get(filters=filters)
        if model is None:
            raise NotFoundError("Model not found")
        return model

    async def create_model(self, brand_id: str, model_data: CarModelCreate) -> CarModelRead:
        brand_oid = parse_object_id(brand_id, INVALID_BRAND_ID)
        if not model_data.name or not model_data.image_url:
            raise BadRequestError("Name and image URL are required")

        existing = await self.model_repo.get_by_name(brand_oid, model_data.name)
        if existing:
            raise self._duplicate(existing)

        model = await self.model_repo.create(
            data={
                "name": model_data.name,
                "brandId": brand_oid,
                "imageUrl": model_data.image_url,
                "description": model_data.description or "",
            }
        )

        log.info("Created model", model_id=model.id, brand_id=brand_id, name=model.name)

        return model

    async def update_model(self, brand_id: str, model_id: str, model_update: CarModelUpdate) -> CarModelRead:
        """Update name and description; the image is only replaced when a new URL is sent"""
        filters = self._scoped_filter(brand_id, model_id)
        if not model_update.name:
            raise BadRequestError("Name is required")

        existing = await self.model_repo.get_by_name(filters["brandId"], model_update.name, exclude_id=filters["_id"])
        if existing:
            raise self._duplicate(existing)

        values = {"name": model_update.name, "description": model_update.description or ""}
        if model_update.image_url:
            values["imageUrl"] = model_update.image_url

        model = await self.model_repo.update(filters=filters, values=values)
        if model is None:
            raise NotFoundError("Model not found")

        return model

    async def delete_model(self, brand_id: str, model_id: str) -> CarModelRead:
        """Delete a model; its variants are left in place"""
        filters = self._scoped_filter(brand_id, model_id)
        model = await self.model_repo.delete(filters=filters)
        if model is None:
            raise NotFoundError("Model not found")
        return model

    @staticmethod
    def _scoped_filter(brand_id: str, model_id: str) -> dict:
        brand_oid = parse_object_id(brand_id, INVALID_ID)
        model_oid = parse_object_id(model_id, INVALID_ID)
        return {"_id": model_oid, "brandId": brand_oid}

    @staticmethod
    def _duplicate(existing: CarModelRead) -> ConflictError:
        return ConflictError(
            "Model already exists",
            details=f'A model with the name "{existing.name}" already exists for this brand',
            existing_id=existing.id,
        )
