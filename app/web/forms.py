"""
Form handling for the admin pages

Repeating structures of a variant (programming options, pathways, videos,
chip lists, ...) are edited as text blocks: one row per line, columns
separated by ``|``. These helpers turn submitted forms into API schemas and
stored documents back into form values.
"""
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence

from app.schemas.brand import BrandCreate
from app.schemas.car_model import CarModelCreate
from app.schemas.variant import VariantCreate, VariantRead, VariantUpdate
from app.utils.normalization import PROGRAMMING_CATEGORIES, clean_text, normalize_programming_info


COLUMN_SEPARATOR = "|"
LIST_SEPARATOR = ","
ESCAPE = "\\"
# Characters that take a backslash inside a cell
ESCAPED_CHARS = (ESCAPE, COLUMN_SEPARATOR, LIST_SEPARATOR)
ESCAPE_RE = re.compile(r"\\([\\|,])")
SPECIAL_RE = re.compile(r"([\\|,])")

PROGRAMMING_LABELS = {
    "remoteOptions": "Remote Options",
    "keyBladeOptions": "Key Blade Options",
    "cloningOptions": "Cloning Options",
    "allKeysLost": "All Keys Lost",
    "addSpareKey": "Add Spare Key",
    "addRemote": "Add Remote",
    "pinRequired": "PIN Required",
    "pinReading": "PIN Reading",
    "remoteProgramming": "Remote Programming",
}

VEHICLE_TEXT_FIELDS = ("make", "model", "series", "yearRange", "keyType", "remoteFrequency", "Lishi", "LishiLink")


def escape_cell(value: Any) -> str:
    return SPECIAL_RE.sub(r"\\\1", clean_text(value))


def unescape_cell(cell: str) -> str:
    return ESCAPE_RE.sub(r"\1", cell)


def split_escaped(text: str, separator: str, maxsplit: int = -1) -> List[str]:
    """Split on separators not preceded by a backslash; escapes are kept"""
    parts = []
    start = i = 0
    while i < len(text):
        char = text[i]
        if char == ESCAPE and text[i + 1:i + 2] in ESCAPED_CHARS:
            i += 2
            continue
        if char == separator and (maxsplit < 0 or len(parts) < maxsplit):
            parts.append(text[start:i])
            start = i + 1
        i += 1
    parts.append(text[start:])
    return parts


def parse_rows(text: Optional[str], columns: int, list_columns: Sequence[int] = ()) -> List[List[Any]]:
    """
    Split a text block into rows of exactly ``columns`` trimmed cells.
    Blank lines are skipped, missing cells are empty and unescaped extra
    separators stay in the last cell. Cells at ``list_columns`` become
    lists split on commas. ``\\|``, ``\\,`` and ``\\\\`` stand for the
    literal characters.
    """
    rows = []
    for line in (text or "").splitlines():
        if not line.strip():
            continue
        cells: List[Any] = [cell.strip() for cell in split_escaped(line, COLUMN_SEPARATOR, columns - 1)]
        cells.extend([""] * (columns - len(cells)))
        for index, cell in enumerate(cells):
            if index in list_columns:
                cells[index] = parse_list_cell(cell)
            else:
                cells[index] = unescape_cell(cell)
        rows.append(cells)
    return rows


def format_rows(rows: List[List[Any]]) -> str:
    """Inverse of ``parse_rows``; list cells are joined with commas"""
    lines = []
    for row in rows:
        cells = [format_list_cell(cell) if isinstance(cell, list) else escape_cell(cell) for cell in row]
        while cells and not cells[-1]:
            cells.pop()
        lines.append(f" {COLUMN_SEPARATOR} ".join(cells))
    return "\n".join(lines)


def parse_list_cell(cell: str) -> List[str]:
    parts = (part.strip() for part in split_escaped(cell, LIST_SEPARATOR))
    return [unescape_cell(part) for part in parts if part]


def format_list_cell(items: List[Any]) -> str:
    return f"{LIST_SEPARATOR} ".join(escape_cell(item) for item in items)


def brand_from_form(form: Mapping[str, Any]) -> BrandCreate:
    return BrandCreate(name=form.get("name"), logo_url=form.get("logo_url"))


def car_model_from_form(form: Mapping[str, Any]) -> CarModelCreate:
    """The page always sends model names upper-cased"""
    return CarModelCreate(
        name=clean_text(form.get("name")).upper(),
        image_url=form.get("image_url"),
        description=clean_text(form.get("description")),
    )


def variant_payload_from_form(form: Mapping[str, Any], fill_defaults: bool = False) -> Dict[str, Any]:
    """
    Build the JSON body the variant endpoints accept.

    With ``fill_defaults`` the programming info gets the "Not Applicable"
    sentinel before sending, which is what the new-variant page does.
    """
    image_url = clean_text(form.get("image_url"))

    vehicle_info: Dict[str, Any] = {field: clean_text(form.get(field)) for field in VEHICLE_TEXT_FIELDS}
    chips = parse_rows(form.get("transponder_chips"), 2)
    vehicle_info["transponderChip"] = [name for name, _ in chips]
    vehicle_info["transponderChipLinks"] = [link for _, link in chips]
    king_parts = parse_rows(form.get("king_parts"), 2)
    vehicle_info["KingParts"] = [name for name, _ in king_parts]
    vehicle_info["KingPartsLinks"] = [link for _, link in king_parts]

    key_blade_profiles = {}
    for name, ref_no, link in parse_rows(form.get("key_blade_profiles"), 3):
        if not name:
            continue
        key_blade_profiles[name] = {"refNo": ref_no or None, "link": link or None}

    programming_info = {}
    for category in PROGRAMMING_CATEGORIES:
        programming_info[category] = [
            {"name": name, "Color": color, "models": models}
            for name, color, models in parse_rows(form.get(f"programming_{category}"), 3, list_columns=(2,))
        ]
    if fill_defaults:
        programming_info = normalize_programming_info(programming_info)

    payload: Dict[str, Any] = {
        "name": clean_text(form.get("name")),
        "rkid": clean_text(form.get("rkid")) or None,
        "imageUrl": image_url or None,
        "images": {"car": image_url} if image_url else None,
        "vehicleInfo": vehicle_info,
        "keyBladeProfiles": key_blade_profiles,
        "programmingInfo": programming_info,
        "pathways": [{"name": name, "path": path} for name, path in parse_rows(form.get("pathways"), 2)],
        "resources": {
            "quickReference": {
                "emergencyStart": clean_text(form.get("emergency_start")),
                "obdPortLocation": clean_text(form.get("obd_port_location")),
            },
            "videos": [{"title": t, "embedId": e} for t, e in parse_rows(form.get("videos"), 2)],
            "documents": [{"title": t, "link": link} for t, link in parse_rows(form.get("documents"), 2)],
        },
    }

    new_model_id = clean_text(form.get("new_model_id"))
    current_model_id = clean_text(form.get("current_model_id"))
    if new_model_id and new_model_id != current_model_id:
        payload["newModelId"] = new_model_id

    return {key: value for key, value in payload.items() if value is not None}


def variant_form_values(variant: Optional[VariantRead]) -> Dict[str, str]:
    """Prefill values for the variant editor"""
    if variant is None:
        return {}

    data = variant.model_dump(by_alias=True, exclude_none=True)
    vehicle = data.get("vehicleInfo", {})
    resources = data.get("resources", {})
    quick = resources.get("quickReference", {})
    programming = data.get("programmingInfo", {})

    values = {
        "name": data.get("name", ""),
        "rkid": data.get("rkid", ""),
        "image_url": data.get("images", {}).get("car") or data.get("imageUrl", ""),
        "transponder_chips": format_rows(_pairs(vehicle, "transponderChip", "transponderChipLinks")),
        "king_parts": format_rows(_pairs(vehicle, "KingParts", "KingPartsLinks")),
        "key_blade_profiles": format_rows(
            [[name, p.get("refNo"), p.get("link")] for name, p in data.get("keyBladeProfiles", {}).items()]
        ),
        "pathways": format_rows([[p.get("name"), p.get("path")] for p in data.get("pathways", [])]),
        "emergency_start": quick.get("emergencyStart", ""),
        "obd_port_location": quick.get("obdPortLocation", ""),
        "videos": format_rows([[v.get("title"), v.get("embedId")] for v in resources.get("videos", [])]),
        "documents": format_rows([[d.get("title"), d.get("link")] for d in resources.get("documents", [])]),
    }
    for field in VEHICLE_TEXT_FIELDS:
        values[field] = vehicle.get(field, "")
    for category in PROGRAMMING_CATEGORIES:
        values[f"programming_{category}"] = format_rows(
            [[o.get("name"), o.get("Color"), o.get("models", [])] for o in programming.get(category, []) if o]
        )
    return values


def _pairs(section: Dict[str, Any], names_key: str, links_key: str) -> List[List[str]]:
    names = section.get(names_key, [])
    links = section.get(links_key, [])
    return [[name, links[i] if i < len(links) else ""] for i, name in enumerate(names)]


def variant_create_from_form(form: Mapping[str, Any]) -> VariantCreate:
    return VariantCreate.model_validate(variant_payload_from_form(form, fill_defaults=True))


def variant_update_from_form(form: Mapping[str, Any]) -> VariantUpdate:
    return VariantUpdate.model_validate(variant_payload_from_form(form))
