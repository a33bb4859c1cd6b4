"""
API Schemas (Pydantic models for request/response)
"""

from .brand import BrandCreate, BrandDeleteResponse, BrandRead, BrandUpdate
from .car_model import CarModelCreate, CarModelDeleteResponse, CarModelRead, CarModelUpdate
from .common import HealthCheckResponse
from .upload import PresignRequest, PresignResponse
from .variant import (
    KeyBladeProfile,
    Pathway,
    ProgrammingInfo,
    ProgrammingOption,
    Resources,
    VariantCreate,
    VariantDeleteResponse,
    VariantRead,
    VariantUpdate,
    VehicleInfo,
)

__all__ = [
    # Brand
    "BrandCreate",
    "BrandUpdate",
    "BrandRead",
    "BrandDeleteResponse",
    # Model
    "CarModelCreate",
    "CarModelUpdate",
    "CarModelRead",
    "CarModelDeleteResponse",
    # Variant
    "VariantCreate",
    "VariantUpdate",
    "VariantRead",
    "VariantDeleteResponse",
    "VehicleInfo",
    "KeyBladeProfile",
    "ProgrammingInfo",
    "ProgrammingOption",
    "Pathway",
    "Resources",
    # Uploads
    "PresignRequest",
    "PresignResponse",
    # Common
    "HealthCheckResponse",
]
