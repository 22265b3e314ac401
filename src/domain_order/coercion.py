"""
Primitive coercion helpers shared by the expand and flatten transforms.

Configuration maps arrive untyped. These helpers read a single key with a
type check and never raise: a missing or wrong-typed value yields the
caller's fallback.
"""

import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

# RFC 3339 date-time, e.g. 2024-05-01T10:00:00Z or 2024-05-01T10:00:00.5+02:00
RFC3339_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(\.\d+)?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))$"
)


def get_string(data: dict, key: str, default: str = "") -> str:
    value = data.get(key)
    return value if isinstance(value, str) else default


def get_optional_string(data: dict, key: str) -> Optional[str]:
    """Return the value when the key holds a string (even empty), else None."""
    value = data.get(key)
    return value if isinstance(value, str) else None


def get_non_empty_string(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if isinstance(value, str) and value != "":
        return value
    return None


def get_bool(data: dict, key: str, default: bool = False) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else default


def get_int(data: dict, key: str, default: int = 0) -> int:
    value = data.get(key)
    # bool is an int subclass; a flag is not a count
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


def get_float(data: dict, key: str) -> Optional[float]:
    """Return the value only when it is a float."""
    value = data.get(key)
    return value if isinstance(value, float) else None


def get_map(data: dict, key: str) -> Optional[dict]:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def get_string_list(data: dict, key: str) -> list[str]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def to_uint32(value: float) -> int:
    """Truncate a float toward zero and wrap it into the unsigned 32-bit range."""
    if not math.isfinite(value):
        return 0
    return int(value) % (1 << 32)


def parse_rfc3339(value: Any) -> Optional[datetime]:
    """
    Parse an RFC 3339 timestamp.

    Returns None for anything that is not a well-formed RFC 3339 string,
    including out-of-range dates.
    """
    if not isinstance(value, str):
        return None

    match = RFC3339_PATTERN.match(value)
    if match is None:
        return None

    (year, month, day, hour, minute, second,
     fraction, zulu, sign, offset_hours, offset_minutes) = match.groups()

    if zulu:
        tz = timezone.utc
    else:
        offset = timedelta(hours=int(offset_hours), minutes=int(offset_minutes))
        if offset >= timedelta(hours=24):
            return None
        tz = timezone(-offset if sign == "-" else offset)
        if offset == timedelta(0):
            tz = timezone.utc

    microsecond = int(fraction[1:7].ljust(6, "0")) if fraction else 0

    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second),
            microsecond, tzinfo=tz,
        )
    except ValueError:
        return None


def format_rfc3339(value: datetime) -> str:
    """
    Render a timestamp as RFC 3339 text with second precision.

    UTC renders with a ``Z`` suffix; naive datetimes are taken as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    if value.utcoffset() == timedelta(0):
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    return value.isoformat(timespec="seconds")
