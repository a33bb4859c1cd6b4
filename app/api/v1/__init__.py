"""
API v1 routers
"""

from fastapi import APIRouter

from .brands import router as brands_router
from .car_models import router as car_models_router
from .health import router as health_router
from .uploads import router as uploads_router
from .variants import router as variants_router

api_router = APIRouter()

# Include routers
api_router.include_router(health_router, tags=["health"])
api_router.include_router(brands_router, prefix="/brands", tags=["brands"])
api_router.include_router(car_models_router, prefix="/brands", tags=["models"])
api_router.include_router(variants_router, prefix="/brands", tags=["variants"])
api_router.include_router(uploads_router, prefix="/uploads", tags=["uploads"])
