"""
Common schemas used across the API
"""
from datetime import datetime
from typing import Annotated, Optional

from bson import ObjectId
from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _object_id_to_str(value):
    return str(value) if isinstance(value, ObjectId) else value


# ObjectIds leave the API as 24-char hex strings
ObjectIdStr = Annotated[str, BeforeValidator(_object_id_to_str)]


class CamelModel(BaseModel):
    """Snake case in Python, camelCase on the wire and in MongoDB"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())


class DocumentRead(CamelModel):
    """Fields every stored document carries"""

    id: ObjectIdStr = Field(validation_alias=AliasChoices("_id", "id"))
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class HealthCheckResponse(BaseModel):
    """Health check response"""
    status: str = "ok"
    timestamp: str
    version: str
    database: str = "unknown"
