"""Containers seen on monitored hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Container:
    """A container and its last known state; ``updated`` marks in-memory changes."""

    container_id: str = ""
    name: str = ""
    image_name: str = ""
    image_id: str = ""
    runtime: str = ""
    status: str = ""
    heartbeat: str = ""
    endpoint_id: str = ""
    host_id: str = ""
    last_seen: datetime | None = None
    labels: dict[str, str] = field(default_factory=dict)
    updated: bool = False