"""
Model API endpoints, nested under their brand
"""
from typing import List

from fastapi import APIRouter, status

from app.api.deps import ModelServiceDep, RequestIdDep
from app.core.exceptions import ErrorResponse
from app.core.logging import log
from app.schemas.car_model import CarModelCreate, CarModelDeleteResponse, CarModelRead, CarModelUpdate


router = APIRouter(
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    }
)


@router.get(
    "/{brand_id}/models",
    response_model=List[CarModelRead],
    summary="List models of a brand"
)
async def list_models(brand_id: str, model_service: ModelServiceDep) -> List[CarModelRead]:
    return await model_service.list_models(brand_id)


@router.post(
    "/{brand_id}/models",
    response_model=CarModelRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create model",
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}}
)
async def create_model(
    brand_id: str,
    model_in: CarModelCreate,
    model_service: ModelServiceDep,
    request_id: RequestIdDep
) -> CarModelRead:
    """
    Create a model under a brand.

    The name is stored upper-cased and must be unique within the brand.
    """
    log.info("Creating model", request_id=request_id, brand_id=brand_id, model_name=model_in.name)

    return await model_service.create_model(brand_id, model_in)


@router.get(
    "/{brand_id}/models/{model_id}",
    response_model=CarModelRead,
    summary="Get model"
)
async def get_model(brand_id: str, model_id: str, model_service: ModelServiceDep) -> CarModelRead:
    return await model_service.get_model(brand_id, model_id)


@router.put(
    "/{brand_id}/models/{model_id}",
    response_model=CarModelRead,
    summary="Update model",
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}}
)
async def update_model(
    brand_id: str,
    model_id: str,
    model_update: CarModelUpdate,
    model_service: ModelServiceDep,
    request_id: RequestIdDep
) -> CarModelRead:
    log.info("Updating model", request_id=request_id, brand_id=brand_id, model_id=model_id)

    return await model_service.update_model(brand_id, model_id, model_update)


@router.delete(
    "/{brand_id}/models/{model_id}",
    response_model=CarModelDeleteResponse,
    summary="Delete model",
    description="Delete a model. Its variants are kept."
)
async def delete_model(
    brand_id: str,
    model_id: str,
    model_service: ModelServiceDep,
    request_id: RequestIdDep
) -> CarModelDeleteResponse:
    log.info("Deleting model", request_id=request_id, brand_id=brand_id, model_id=model_id)

    model = await model_service.delete_model(brand_id, model_id)
    return CarModelDeleteResponse(message="Model deleted", model=model)
