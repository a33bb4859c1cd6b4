"""
Variant API endpoints, nested under brand and model
"""
from typing import List

from fastapi import APIRouter, status

from app.api.deps import RequestIdDep, VariantServiceDep
from app.core.exceptions import ErrorResponse
from app.core.logging import log
from app.schemas.variant import VariantCreate, VariantDeleteResponse, VariantRead, VariantUpdate


router = APIRouter(
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    }
)

VARIANTS_PATH = "/{brand_id}/models/{model_id}/variants"


@router.get(
    VARIANTS_PATH,
    response_model=List[VariantRead],
    summary="List variants of a model",
    description="Variants of the model sorted by name"
)
async def list_variants(brand_id: str, model_id: str, variant_service: VariantServiceDep) -> List[VariantRead]:
    return await variant_service.list_variants(brand_id, model_id)


@router.post(
    VARIANTS_PATH,
    response_model=VariantRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create variant"
)
async def create_variant(
    brand_id: str,
    model_id: str,
    variant_in: VariantCreate,
    variant_service: VariantServiceDep,
    request_id: RequestIdDep
) -> VariantRead:
    log.info("Creating variant", request_id=request_id, model_id=model_id, variant_name=variant_in.name)

    return await variant_service.create_variant(brand_id, model_id, variant_in)


@router.get(
    VARIANTS_PATH + "/{variant_id}",
    response_model=VariantRead,
    summary="Get variant"
)
async def get_variant(
    brand_id: str,
    model_id: str,
    variant_id: str,
    variant_service: VariantServiceDep
) -> VariantRead:
    return await variant_service.get_variant(brand_id, model_id, variant_id)


@router.put(
    VARIANTS_PATH + "/{variant_id}",
    response_model=VariantRead,
    summary="Update variant"
)
async def update_variant(
    brand_id: str,
    model_id: str,
    variant_id: str,
    variant_update: VariantUpdate,
    variant_service: VariantServiceDep,
    request_id: RequestIdDep
) -> VariantRead:
    """
    Update a variant.

    - Only fields present in the body are written
    - `programmingInfo` entries get "Not Applicable" for a blank name, Color or models
    - `newModelId` moves the variant to another model
    """
    log.info("Updating variant", request_id=request_id, model_id=model_id, variant_id=variant_id)

    return await variant_service.update_variant(brand_id, model_id, variant_id, variant_update)


@router.delete(
    VARIANTS_PATH + "/{variant_id}",
    response_model=VariantDeleteResponse,
    summary="Delete variant"
)
async def delete_variant(
    brand_id: str,
    model_id: str,
    variant_id: str,
    variant_service: VariantServiceDep,
    request_id: RequestIdDep
) -> VariantDeleteResponse:
    log.info("Deleting variant", request_id=request_id, model_id=model_id, variant_id=variant_id)

    variant = await variant_service.delete_variant(brand_id, model_id, variant_id)
    return VariantDeleteResponse(message="Variant deleted", variant=variant)
