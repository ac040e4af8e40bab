"""Tags attached to endpoints."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tag:
    """A key and value attached to one endpoint."""

    endpoint_id: str = ""
    key: str = ""
    value: str = ""