"""
Text normalization utilities for names, storage keys and programming info
"""
import re
from typing import Any, Dict, List, Optional


NOT_APPLICABLE = "Not Applicable"

PROGRAMMING_CATEGORIES = (
    "remoteOptions",
    "keyBladeOptions",
    "cloningOptions",
    "allKeysLost",
    "addSpareKey",
    "addRemote",
    "pinRequired",
    "pinReading",
    "remoteProgramming",
)


def clean_text(value: Any) -> str:
    """Trimmed string form of an optional value"""
    if value is None:
        return ""
    return str(value).strip()


def exact_match_ci(value: str) -> Dict[str, str]:
    """
    Mongo filter matching ``value`` exactly, ignoring case.
    The value is escaped so names like "A+B (EU)" match literally.
    """
    return {"$regex": f"^{re.escape(value)}$", "$options": "i"}


def slugify(text: str) -> str:
    """
    Make text safe for storage keys:
    - Lowercase
    - Collapse runs of anything but [a-z0-9] into one hyphen
    - Trim leading/trailing hyphens
    """
    slug = re.sub(r"[^a-z0-9]+", "-", (text or "").lower())
    return slug.strip("-")


def file_extension(filename: str) -> Optional[str]:
    """Text after the last dot, or None when there is no dot"""
    if "." not in filename:
        return None
    ext = filename.rsplit(".", 1)[1]
    return ext or None


def ensure_option_defaults(option: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Fill a programming option with the "Not Applicable" sentinel.
    Each field is checked on its own: blank name, blank Color and an
    empty models list are replaced independently.
    """
    option = option or {}
    name = clean_text(option.get("name")) or NOT_APPLICABLE
    color = clean_text(option.get("Color")) or NOT_APPLICABLE
    models = option.get("models")
    if not isinstance(models, list) or not models:
        models = [NOT_APPLICABLE]

    return {"name": name, "Color": color, "models": models}


def normalize_programming_info(programming_info: Optional[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Apply the sentinel defaults to all nine categories; none is left empty"""
    programming_info = programming_info or {}
    normalized = {}
    for category in PROGRAMMING_CATEGORIES:
        options = programming_info.get(category)
        if isinstance(options, list) and options:
            normalized[category] = [ensure_option_defaults(option) for option in options]
        else:
            normalized[category] = [ensure_option_defaults({})]
    return normalized
