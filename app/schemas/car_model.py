"""
Vehicle model API schemas
"""
from typing import Optional

from pydantic import field_validator

from app.schemas.common import CamelModel, DocumentRead, ObjectIdStr


class CarModelBase(CamelModel):
    """Model names are always stored trimmed and upper-cased"""
    name: Optional[str] = None
    image_url: Optional[str] = None
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def uppercase_name(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("image_url")
    @classmethod
    def strip_url(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if isinstance(value, str) else value


class CarModelCreate(CarModelBase):
    pass


class CarModelUpdate(CarModelBase):
    pass


class CarModelRead(DocumentRead):
    name: str
    brand_id: ObjectIdStr
    image_url: Optional[str] = None
    description: str = ""


class CarModelDeleteResponse(CamelModel):
    message: str
    model: CarModelRead
