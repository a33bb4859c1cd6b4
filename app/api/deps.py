"""
API Dependencies for dependency injection
"""
import uuid
from typing import Annotated, Optional

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.database import get_database
from app.repositories import BrandRepository, CarModelRepository, VariantRepository
from app.services import BrandService, CarModelService, UploadService, VariantService


# Database
DatabaseDep = Annotated[AsyncIOMotorDatabase, Depends(get_database)]


# Repositories
async def get_brand_repository(db: DatabaseDep) -> BrandRepository:
    """Get brand repository instance"""
    return BrandRepository(db)


async def get_model_repository(db: DatabaseDep) -> CarModelRepository:
    """Get model repository instance"""
    return CarModelRepository(db)


async def get_variant_repository(db: DatabaseDep) -> VariantRepository:
    """Get variant repository instance"""
    return VariantRepository(db)


BrandRepoDep = Annotated[BrandRepository, Depends(get_brand_repository)]
ModelRepoDep = Annotated[CarModelRepository, Depends(get_model_repository)]
VariantRepoDep = Annotated[VariantRepository, Depends(get_variant_repository)]


# Services
async def get_brand_service(brand_repo: BrandRepoDep) -> BrandService:
    """Get brand service instance"""
    return BrandService(brand_repo)


async def get_model_service(model_repo: ModelRepoDep) -> CarModelService:
    """Get model service instance"""
    return CarModelService(model_repo)


async def get_variant_service(variant_repo: VariantRepoDep, model_repo: ModelRepoDep) -> VariantService:
    """Get variant service instance"""
    return VariantService(variant_repo, model_repo)


_upload_service: Optional[UploadService] = None


def get_upload_service() -> UploadService:
    """Shared upload service; the boto3 client is created on first use"""
    global _upload_service
    if _upload_service is None:
        _upload_service = UploadService()
    return _upload_service


BrandServiceDep = Annotated[BrandService, Depends(get_brand_service)]
ModelServiceDep = Annotated[CarModelService, Depends(get_model_service)]
VariantServiceDep = Annotated[VariantService, Depends(get_variant_service)]
UploadServiceDep = Annotated[UploadService, Depends(get_upload_service)]


# Request ID and correlation
async def get_request_id(request: Request) -> str:
    """Request ID assigned by RequestIDMiddleware"""
    return getattr(request.state, "request_id", None) or uuid.uuid4().hex


RequestIdDep = Annotated[str, Depends(get_request_id)]
