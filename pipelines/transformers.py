"""
Value Transformers

Lenient coercion of fixture values. The feed mixes numbers, numeric strings
and decorated strings ("140*", "12.3 ov"); a leading number is used when
present and anything unparseable falls back to a default instead of failing
the import.
"""

import re
from datetime import datetime
from typing import Any

from db.models.cricket import ZONE_NAMES

_INT_RE = re.compile(r"^\s*([-+]?\d+)")
_FLOAT_RE = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+))")

_DATETIME_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%d",
)


def parse_int(value: Any, default: int | None = 0) -> int | None:
    """Leading integer of value, or default."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value else default
    match = _INT_RE.match(str(value))
    return int(match.group(1)) if match else default


def parse_float(value: Any, default: float | None = None) -> float | None:
    """Leading decimal number of value, or default."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        value = float(value)
        return value if value == value else default
    match = _FLOAT_RE.match(str(value))
    return float(match.group(1)) if match else default


def parse_flag(value: Any) -> bool:
    """The feed encodes booleans as the string "true"."""
    return value is True or value == "true"


def parse_datetime(value: Any) -> datetime | None:
    if not value:
        return None
    text = str(value).strip()
    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_score(scores: Any) -> tuple[int, int]:
    """Split a "runs/wickets" string. A bare "178" counts as 0 wickets."""
    if not scores:
        return 0, 0
    parts = str(scores).split("/")
    runs = parse_int(parts[0])
    wickets = parse_int(parts[1]) if len(parts) > 1 else 0
    return runs, wickets


def zone_name(zone_id: Any) -> str | None:
    """Map a wagon wheel zone id to its fielding region."""
    index = parse_int(zone_id, default=None)
    if index is None or not 0 <= index < len(ZONE_NAMES):
        return None
    return ZONE_NAMES[index]


def optional_pid(value: Any) -> int | None:
    """Player id reference, None when absent or blank."""
    if value in (None, "", 0, "0"):
        return None
    return parse_int(value, default=None)
