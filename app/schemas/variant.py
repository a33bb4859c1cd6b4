"""
Variant API schemas

A variant carries the bulk of the reference data: vehicle details, key blade
profiles, the nine programming categories, navigation pathways and
resources. Wire names match the stored documents, including the historical
capitalised keys (``Color``, ``KingParts``, ``Lishi``).
"""
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BeforeValidator, Field, field_validator

from app.schemas.common import CamelModel, DocumentRead, ObjectIdStr


class VehicleInfo(CamelModel):
    make: Optional[str] = None
    model: Optional[str] = None
    series: Optional[str] = None
    year_range: Optional[str] = None
    key_type: Optional[str] = None
    remote_frequency: Optional[str] = None
    # transponder_chip[i] pairs with transponder_chip_links[i]
    transponder_chip: Optional[List[str]] = None
    transponder_chip_links: Optional[List[str]] = None
    king_parts: Optional[List[str]] = Field(None, alias="KingParts")
    king_parts_links: Optional[List[str]] = Field(None, alias="KingPartsLinks")
    lishi: Optional[str] = Field(None, alias="Lishi")
    lishi_link: Optional[str] = Field(None, alias="LishiLink")


class KeyBladeProfile(CamelModel):
    ref_no: Optional[str] = None
    link: Optional[str] = None


def _list_or_none(value: Any) -> Any:
    return value if isinstance(value, list) else None


def _mapping_or_none(value: Any) -> Any:
    return value if isinstance(value, (dict, CamelModel)) else None


# Malformed shapes are accepted as missing and later filled with "Not Applicable"
LenientList = BeforeValidator(_list_or_none)


class ProgrammingOption(CamelModel):
    name: Optional[str] = None
    color: Optional[str] = Field(None, alias="Color")
    models: Annotated[Optional[List[str]], LenientList] = None


ProgrammingOptions = Annotated[
    Optional[List[Annotated[Optional[ProgrammingOption], BeforeValidator(_mapping_or_none)]]],
    LenientList,
]


class ProgrammingInfo(CamelModel):
    remote_options: ProgrammingOptions = None
    key_blade_options: ProgrammingOptions = None
    cloning_options: ProgrammingOptions = None
    all_keys_lost: ProgrammingOptions = None
    add_spare_key: ProgrammingOptions = None
    add_remote: ProgrammingOptions = None
    pin_required: ProgrammingOptions = None
    pin_reading: ProgrammingOptions = None
    remote_programming: ProgrammingOptions = None


class Pathway(CamelModel):
    name: Optional[str] = None
    path: Optional[str] = None


class QuickReference(CamelModel):
    emergency_start: Optional[str] = None
    obd_port_location: Optional[str] = None


class Video(CamelModel):
    title: Optional[str] = None
    embed_id: Optional[str] = None


class ResourceDocument(CamelModel):
    title: Optional[str] = None
    link: Optional[str] = None


class Resources(CamelModel):
    quick_reference: Optional[QuickReference] = None
    videos: Optional[List[Video]] = None
    documents: Optional[List[ResourceDocument]] = None


class VariantImages(CamelModel):
    car: Optional[str] = None


class VariantBase(CamelModel):
    name: Optional[str] = None
    rkid: Optional[str] = None
    image_url: Optional[str] = None
    images: Optional[VariantImages] = None
    vehicle_info: Optional[VehicleInfo] = None
    key_blade_profiles: Optional[Dict[str, KeyBladeProfile]] = None
    programming_info: Optional[ProgrammingInfo] = None
    pathways: Optional[List[Pathway]] = None
    resources: Optional[Resources] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if isinstance(value, str) else value


class VariantCreate(VariantBase):
    """Nested structures are stored exactly as sent"""
    pass


class VariantUpdate(VariantBase):
    """Only the fields present are written; ``new_model_id`` moves the variant"""
    new_model_id: Optional[str] = None


class VariantRead(DocumentRead, VariantBase):
    name: str
    brand_id: ObjectIdStr
    model_id: ObjectIdStr


class VariantDeleteResponse(CamelModel):
    message: str
    variant: VariantRead
