"""
Brand API schemas
"""
from typing import Optional

from pydantic import field_validator

from app.schemas.common import CamelModel, DocumentRead


class BrandBase(CamelModel):
    """Base brand schema with common fields"""
    name: Optional[str] = None
    logo_url: Optional[str] = None

    @field_validator("name", "logo_url")
    @classmethod
    def strip_whitespace(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if isinstance(value, str) else value


class BrandCreate(BrandBase):
    """Schema for creating a brand"""
    pass


class BrandUpdate(BrandBase):
    """Schema for updating a brand; name and logo are both required"""
    pass


class BrandRead(DocumentRead):
    """Schema for reading a brand"""
    name: str
    logo_url: Optional[str] = None


class BrandDeleteResponse(CamelModel):
    message: str
    brand: BrandRead
