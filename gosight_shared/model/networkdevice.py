"""Syslog-emitting network appliances and filters over them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from gosight_shared.model.codec import _int, _mapping, _str, parse_time

_STRING_COLUMNS = (
    "id", "name", "vendor", "address", "protocol",
    "format", "facility", "syslog_id", "status",
)
_INT_COLUMNS = ("port", "rate_limit")
_TIME_COLUMNS = ("created_at", "updated_at")


def _row_time(row: Mapping[str, Any], key: str) -> datetime | None:
    value = row.get(key)
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return parse_time(value)
    raise TypeError(f"column {key!r}: expected a timestamp, got {type(value).__name__}")


@dataclass
class NetworkDevice:
    """A network appliance sending syslog; attributes match its database columns."""

    id: str = ""
    name: str = ""
    vendor: str = ""
    address: str = ""
    port: int = 0
    protocol: str = ""
    format: str = ""
    facility: str = ""
    syslog_id: str = ""
    rate_limit: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    status: str = ""

    def to_row(self) -> dict[str, Any]:
        """Return the device as a mapping of column name to value."""
        return {
            "id": self.id,
            "name": self.name,
            "vendor": self.vendor,
            "address": self.address,
            "port": self.port,
            "protocol": self.protocol,
            "format": self.format,
            "facility": self.facility,
            "syslog_id": self.syslog_id,
            "rate_limit": self.rate_limit,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "status": self.status,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> NetworkDevice:
        """Build a device from a mapping of column name to value."""
        row = _mapping(row, cls.__name__)
        values: dict[str, Any] = {key: _str(row, key) for key in _STRING_COLUMNS}
        values.update({key: _int(row, key) for key in _INT_COLUMNS})
        values.update({key: _row_time(row, key) for key in _TIME_COLUMNS})
        return cls(**values)


@dataclass
class NetworkDeviceFilter:
    """Criteria, ordering and paging for network device lookups."""

    name: str = ""
    vendor: str = ""
    address: str = ""
    port: int = 0
    protocol: str = ""
    format: str = ""
    facility: str = ""
    syslog_id: str = ""
    rate_limit: int = 0
    limit: int = 0
    order: str = ""
    offset: int = 0
    status: str = ""