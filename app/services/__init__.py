"""
Service layer for business logic
"""

from .brand_service import BrandService
from .car_model_service import CarModelService
from .upload_service import UploadService
from .variant_service import VariantService

__all__ = ["BrandService", "CarModelService", "VariantService", "UploadService"]
