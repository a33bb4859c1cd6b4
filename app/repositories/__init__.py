"""
Repository implementations
"""

from .base import BaseRepository
from .brand import BrandRepository
from .car_model import CarModelRepository
from .variant import VariantRepository

__all__ = [
    "BaseRepository",
    "BrandRepository",
    "CarModelRepository",
    "VariantRepository",
]
