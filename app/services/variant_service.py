"""
Variant service

Variants live under a model. Updates write only the fields that were sent,
normalize programming info with the "Not Applicable" sentinel and can move a
variant to another model via ``newModelId``.
"""

from typing import Any, Dict, List

from app.core.exceptions import BadRequestError, NotFoundError
from app.core.logging import log
from app.repositories.car_model import CarModelRepository
from app.repositories.variant import VariantRepository
from app.schemas.variant import VariantCreate, VariantRead, VariantUpdate
from app.utils.normalization import normalize_programming_info
from app.utils.object_id import parse_object_id


INVALID_ID = "Invalid id format"

# Nested sections written as a whole when present in an update
NESTED_SECTIONS = ("vehicle_info", "key_blade_profiles", "pathways", "resources")


def _dump(value: Any) -> Any:
    if isinstance(value, list):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    if hasattr(value, "model_dump"):
        return value.model_dump(by_alias=True, exclude_none=True)
    return value


class VariantService:
    """Service layer for variant operations"""

    def __init__(self, variant_repo: VariantRepository, model_repo: CarModelRepository):
        self.variant_repo = variant_repo
        self.model_repo = model_repo

    async def list_variants(self, brand_id: str, model_id: str) -> List[VariantRead]:
        parse_object_id(brand_id, "Invalid brandId")
        model_oid = parse_object_id(model_id, "Invalid modelId")
        return await self.variant_repo.list_by_model(model_oid)

    async def get_variant(self, brand_id: str, model_id: str, variant_id: str) -> VariantRead:
        variant = await self.variant_repo.get(filters=self._scoped_filter(brand_id, model_id, variant_id))
        if variant is None:
            raise NotFoundError("Variant not found")
        return variant

    async def create_variant(self, brand_id: str, model_id: str, variant_data: VariantCreate) -> VariantRead:
        """Create a variant; nested sections are stored as sent, without defaults"""
        brand_oid = parse_object_id(brand_id, "Invalid IDs")
        model_oid = parse_object_id(model_id, "Invalid IDs")
        if not variant_data.name:
            raise BadRequestError("Name is required")

        doc = {
            key: value
            for key, value in variant_data.model_dump(by_alias=True, exclude_none=True).items()
            if value != ""
        }
        doc["brandId"] = brand_oid
        doc["modelId"] = model_oid

        variant = await self.variant_repo.create(data=doc)

        log.info("Created variant", variant_id=variant.id, model_id=model_id, name=variant.name)

        return variant

    async def update_variant(
        self,
        brand_id: str,
        model_id: str,
        variant_id: str,
        variant_update: VariantUpdate
    ) -> VariantRead:
        filters = self._scoped_filter(brand_id, model_id, variant_id)
        if not variant_update.name:
            raise BadRequestError("Name is required")

        values = self._update_values(variant_update)

        if variant_update.new_model_id:
            new_model_oid = parse_object_id(variant_update.new_model_id, "Invalid newModelId")
            if not await self.model_repo.exists(filters={"_id": new_model_oid}):
                raise NotFoundError("Target model not found")
            values["modelId"] = new_model_oid

        variant = await self.variant_repo.update(filters=filters, values=values)
        if variant is None:
            raise NotFoundError("Variant not found")

        if "modelId" in values:
            log.info("Moved variant", variant_id=variant_id, from_model=model_id, to_model=variant.model_id)

        return variant

    async def delete_variant(self, brand_id: str, model_id: str, variant_id: str) -> VariantRead:
        variant = await self.variant_repo.delete(filters=self._scoped_filter(brand_id, model_id, variant_id))
        if variant is None:
            raise NotFoundError("Variant not found")
        return variant

    @staticmethod
    def _update_values(variant_update: VariantUpdate) -> Dict[str, Any]:
        """The $set document for an update: only what the request carried"""
        values: Dict[str, Any] = {"name": variant_update.name}

        if variant_update.rkid:
            values["rkid"] = variant_update.rkid
        if variant_update.image_url:
            values["imageUrl"] = variant_update.image_url
        if variant_update.images is not None:
            values["images"] = {"car": variant_update.images.car} if variant_update.images.car else {}

        for field in NESTED_SECTIONS:
            section = getattr(variant_update, field)
            if section is not None:
                values[VariantUpdate.model_fields[field].alias] = _dump(section)

        if variant_update.programming_info is not None:
            values["programmingInfo"] = normalize_programming_info(_dump(variant_update.programming_info))

        return values

    @staticmethod
    def _scoped_filter(brand_id: str, model_id: str, variant_id: str) -> dict:
        parse_object_id(brand_id, INVALID_ID)
        model_oid = parse_object_id(model_id, INVALID_ID)
        variant_oid = parse_object_id(variant_id, INVALID_ID)
        return {"_id": variant_oid, "modelId": model_oid}
