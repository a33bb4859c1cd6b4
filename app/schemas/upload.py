"""
Upload authorization schemas
"""
from typing import Dict, Optional

from app.schemas.common import CamelModel


class PresignRequest(CamelModel):
    filename: Optional[str] = None
    content_type: Optional[str] = None
    brand_name: Optional[str] = None
    folder: Optional[str] = None


class PresignResponse(CamelModel):
    """Presigned POST target; ``fields`` also carries the object ``key``"""
    url: str
    fields: Dict[str, str]
    public_url: str
