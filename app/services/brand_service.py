"""
Brand service with business logic
"""

from typing import List

from app.core.exceptions import BadRequestError, ConflictError, NotFoundError
from app.core.logging import log
from app.repositories.brand import BrandRepository
from app.schemas.brand import BrandCreate, BrandRead, BrandUpdate
from app.utils.object_id import parse_object_id


INVALID_BRAND_ID = "Invalid brand ID"


class BrandService:
    """Service layer for brand operations"""

    def __init__(self, brand_repo: BrandRepository):
        self.brand_repo = brand_repo

    async def list_brands(self) -> List[BrandRead]:
        """All brands, newest first"""
        return await self.brand_repo.list_newest_first()

    async def get_brand(self, brand_id: str) -> BrandRead:
        oid = parse_object_id(brand_id, INVALID_BRAND_ID)
        brand = await self.brand_repo.get(filters={"_id": oid})
        if brand is None:
            raise NotFoundError("Brand not found")
        return brand

    async def create_brand(self, brand_data: BrandCreate) -> BrandRead:
        """Create new brand; names are unique regardless of case"""
        self._require_fields(brand_data)

        existing = await self.brand_repo.get_by_name(brand_data.name)
        if existing:
            raise self._duplicate(existing)

        brand = await self.brand_repo.create(data={"name": brand_data.name, "logoUrl": brand_data.logo_url})

        log.info("Created brand", brand_id=brand.id, name=brand.name)

        return brand

    async def update_brand(self, brand_id: str, brand_update: BrandUpdate) -> BrandRead:
        """Replace name and logo; the brand itself is excluded from the duplicate check"""
        oid = parse_object_id(brand_id, INVALID_BRAND_ID)
        self._require_fields(brand_update)

        existing = await self.brand_repo.get_by_name(brand_update.name, exclude_id=oid)
        if existing:
            raise self._duplicate(existing)

        brand = await self.brand_repo.update(
            filters={"_id": oid},
            values={"name": brand_update.name, "logoUrl": brand_update.logo_url},
        )
        if brand is None:
            raise NotFoundError("Brand not found")

        return brand

    async def delete_brand(self, brand_id: str) -> BrandRead:
        """
        Delete a brand.

        Models and variants of the brand are left in place and the logo stays
        in object storage.
        """
        oid = parse_object_id(brand_id, INVALID_BRAND_ID)
        brand = await self.brand_repo.delete(filters={"_id": oid})
        if brand is None:
            raise NotFoundError("Brand not found")
        return brand

    @staticmethod
    def _require_fields(brand_data: BrandCreate) -> None:
        if not brand_data.name or not brand_data.logo_url:
            raise BadRequestError("Brand name and logo are required")

    @staticmethod
    def _duplicate(existing: BrandRead) -> ConflictError:
        return ConflictError(
            "Brand already exists",
            details=f'A brand with the name "{existing.name}" already exists',
            existing_id=existing.id,
        )
