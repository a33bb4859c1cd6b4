"""
Brand API endpoints
"""
from typing import List

from fastapi import APIRouter, status

from app.api.deps import BrandServiceDep, RequestIdDep
from app.core.exceptions import ErrorResponse
from app.core.logging import log
from app.schemas.brand import BrandCreate, BrandDeleteResponse, BrandRead, BrandUpdate


router = APIRouter(
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    }
)


@router.get(
    "",
    response_model=List[BrandRead],
    summary="List brands",
    description="Get all brands, newest first"
)
async def list_brands(brand_service: BrandServiceDep) -> List[BrandRead]:
    return await brand_service.list_brands()


@router.post(
    "",
    response_model=BrandRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create brand",
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}}
)
async def create_brand(
    brand_in: BrandCreate,
    brand_service: BrandServiceDep,
    request_id: RequestIdDep
) -> BrandRead:
    """
    Create a new brand.

    The name is trimmed and must be unique regardless of case. The logo is
    uploaded beforehand through `/uploads/presign`; only its URL is sent here.
    """
    log.info("Creating brand", request_id=request_id, brand_name=brand_in.name)

    return await brand_service.create_brand(brand_in)


@router.get(
    "/{brand_id}",
    response_model=BrandRead,
    summary="Get brand"
)
async def get_brand(brand_id: str, brand_service: BrandServiceDep) -> BrandRead:
    """Get brand details by ID"""
    return await brand_service.get_brand(brand_id)


@router.put(
    "/{brand_id}",
    response_model=BrandRead,
    summary="Update brand",
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}}
)
async def update_brand(
    brand_id: str,
    brand_update: BrandUpdate,
    brand_service: BrandServiceDep,
    request_id: RequestIdDep
) -> BrandRead:
    log.info("Updating brand", request_id=request_id, brand_id=brand_id)

    return await brand_service.update_brand(brand_id, brand_update)


@router.delete(
    "/{brand_id}/delete",
    response_model=BrandDeleteResponse,
    summary="Delete brand",
    description="Delete a brand. Its models, variants and logo file are kept."
)
async def delete_brand(
    brand_id: str,
    brand_service: BrandServiceDep,
    request_id: RequestIdDep
) -> BrandDeleteResponse:
    log.info("Deleting brand", request_id=request_id, brand_id=brand_id)

    brand = await brand_service.delete_brand(brand_id)
    return BrandDeleteResponse(message="Brand deleted successfully", brand=brand)
