"""
ObjectId helpers
"""
import re
from typing import Any

from bson import ObjectId

from app.core.exceptions import BadRequestError


OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


def is_valid_object_id(value: Any) -> bool:
    return isinstance(value, str) and OBJECT_ID_PATTERN.fullmatch(value) is not None


def parse_object_id(value: Any, error: str = "Invalid id format") -> ObjectId:
    """Convert a 24-char hex id, raising BadRequestError for anything else"""
    if not is_valid_object_id(value):
        raise BadRequestError(error)
    return ObjectId(value)
