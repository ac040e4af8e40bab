"""Timestamp encoding and field decoding shared by the model types."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

ZERO_TIME = "0001-01-01T00:00:00Z"

_TIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)


def _is_zero(value: datetime) -> bool:
    return value.utcoffset() == timedelta(0) and value.replace(tzinfo=None) == datetime(1, 1, 1)


def format_time(value: datetime | None) -> str:
    """Render a timestamp as RFC 3339 with trimmed fractional seconds.

    ``None`` stands for the zero time. Naive datetimes are taken as UTC.
    """
    if value is None:
        return ZERO_TIME
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    if _is_zero(value):
        return ZERO_TIME
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def parse_time(text: str) -> datetime | None:
    """Parse an RFC 3339 timestamp; the zero time comes back as ``None``."""
    if not isinstance(text, str):
        raise TypeError(f"timestamp must be a string, got {type(text).__name__}")
    match = _TIME_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int(fraction[:6].ljust(6, "0")) if fraction else 0
    try:
        if zone in ("Z", "z"):
            tz = timezone.utc
        else:
            sign = -1 if zone[0] == "-" else 1
            tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
        value = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), micro, tzinfo=tz,
        )
    except ValueError as exc:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}") from exc
    return None if _is_zero(value) else value


def _mapping(data: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{name}: expected an object, got {type(data).__name__}")
    return data


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r}: expected a string, got {type(value).__name__}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"field {key!r}: expected a boolean, got {type(value).__name__}")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field {key!r}: expected an integer, got {type(value).__name__}")
    return value


def _float(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"field {key!r}: expected a number, got {type(value).__name__}")
    return float(value)


def _str_map(data: Mapping[str, Any], key: str) -> dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise TypeError(f"field {key!r}: expected an object of strings")
    return dict(value)


def _str_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"field {key!r}: expected a list of strings")
    return list(value)


def _time(data: Mapping[str, Any], key: str) -> datetime | None:
    value = data.get(key)
    if value is None:
        return None
    return parse_time(value)


def _object(data: Mapping[str, Any], key: str, cls: Any) -> Any:
    value = data.get(key)
    return cls() if value is None else cls.from_dict(value)


def _object_list(data: Mapping[str, Any], key: str, cls: Any) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field {key!r}: expected a list, got {type(value).__name__}")
    return [cls.from_dict(item) for item in value]