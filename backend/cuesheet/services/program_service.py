"""Program rules: per-type required fields and the shaping of stored documents."""

import re
from collections.abc import Mapping

from pydantic.alias_generators import to_camel

from cuesheet.core.numerals import normalize_localized_digits

SONG = "Song"
DEFAULT_TYPE = "*"

TEXT_FIELDS = (
    "serial",
    "broadcast_time",
    "program_details",
    "day",
    "shift",
    "period",
    "artist",
    "lyricist",
    "composer",
    "cd_cut",
    "duration",
)
SONG_ONLY_FIELDS = ("artist", "lyricist", "composer", "cd_cut", "duration")
SLOT_FIELDS = ("day", "shift", "serial", "broadcast_time", "period")
REORDER_FIELDS = frozenset({"serial", "order_index"})

# programType -> required fields; DEFAULT_TYPE covers every other type.
PROGRAM_REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    SONG: ("artist", "order_index"),
    DEFAULT_TYPE: (
        "program_type",
        "serial",
        "broadcast_time",
        "program_details",
        "day",
        "shift",
        "period",
        "order_index",
    ),
}

SPECIAL_REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    DEFAULT_TYPE: ("program_type", "order_index"),
}

_INTEGER = re.compile(r"^[+-]?\d+$")


class ProgramValidationError(ValueError):
    def __init__(self, message: str, missing_fields: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.missing_fields = missing_fields or []


def _is_blank(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def find_missing_fields(values: Mapping, required_fields: Mapping[str, tuple[str, ...]]) -> list[str]:
    """Return the wire names of required fields that are absent or blank."""
    program_type = values.get("program_type")
    required = required_fields.get(program_type, required_fields[DEFAULT_TYPE])
    return [to_camel(name) for name in required if _is_blank(values.get(name))]


def coerce_order_index(value) -> int:
    if isinstance(value, bool):
        raise ProgramValidationError("orderIndex must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = normalize_localized_digits(value.strip())
        if _INTEGER.match(text):
            return int(text)
    raise ProgramValidationError("orderIndex must be an integer")


def normalize_serial(value) -> str:
    if value is None:
        return ""
    return normalize_localized_digits(str(value))


def _text(value) -> str:
    return "" if value is None else str(value)


def build_program_document(
    values: Mapping,
    required_fields: Mapping[str, tuple[str, ...]] = PROGRAM_REQUIRED_FIELDS,
) -> dict:
    """Validate a create payload and return column values for a new row.

    Song entries never carry slot fields; other types never carry song-only fields.
    """
    missing = find_missing_fields(values, required_fields)
    if missing:
        raise ProgramValidationError(f"Missing required fields: {', '.join(missing)}", missing)

    doc = {name: _text(values.get(name)) for name in TEXT_FIELDS}
    doc["program_type"] = values["program_type"]
    doc["serial"] = normalize_serial(values.get("serial"))
    doc["order_index"] = coerce_order_index(values["order_index"])

    cleared = SLOT_FIELDS if doc["program_type"] == SONG else SONG_ONLY_FIELDS
    for name in cleared:
        doc[name] = ""
    return doc


def build_special_document(values: Mapping) -> dict:
    doc = build_program_document(values, SPECIAL_REQUIRED_FIELDS)
    doc["day"] = ""
    doc["shift"] = ""
    doc["source"] = values.get("source") or "unknown"
    return doc


def _normalize_changes(changes: Mapping) -> dict:
    prepared = dict(changes)
    for key in ("id", "_id"):
        prepared.pop(key, None)
    for name in TEXT_FIELDS:
        if name in prepared:
            prepared[name] = _text(prepared[name])
    if "serial" in prepared:
        prepared["serial"] = normalize_serial(prepared["serial"])
    if "order_index" in prepared:
        prepared["order_index"] = coerce_order_index(prepared["order_index"])
    if "program_type" in prepared and prepared["program_type"] is None:
        del prepared["program_type"]
    return prepared


def prepare_program_update(changes: Mapping, stored_type: str) -> dict:
    prepared = _normalize_changes(changes)
    if prepared.get("program_type", stored_type) == SONG:
        for name in SLOT_FIELDS:
            prepared[name] = ""
    return prepared


def is_reorder_only(changes: Mapping) -> bool:
    return set(changes) <= REORDER_FIELDS


def prepare_special_update(changes: Mapping, stored_type: str) -> dict:
    """Prepare a special-program change set.

    A change set touching only serial/orderIndex is a reorder and is applied as is.
    Anything else must carry programDetails and is reshaped for its programType.
    """
    prepared = _normalize_changes(changes)
    if is_reorder_only(prepared):
        return prepared

    details = prepared.get("program_details")
    if _is_blank(details):
        raise ProgramValidationError("programDetails is required", ["programDetails"])

    if "source" in prepared:
        prepared["source"] = prepared["source"] or "unknown"

    if prepared.get("program_type", stored_type) == SONG:
        for name in SLOT_FIELDS:
            prepared[name] = ""
    else:
        for name in SONG_ONLY_FIELDS:
            prepared[name] = prepared.get(name) or ""
        prepared["day"] = ""
        prepared["shift"] = ""
    return prepared
