"""Processes running on monitored hosts, snapshots and queries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from gosight_shared.model.codec import (
    _float,
    _int,
    _mapping,
    _object_list,
    _str,
    _str_map,
    _time,
    format_time,
)
from gosight_shared.model.meta import Meta


def _optional_meta(data: Mapping[str, Any]) -> Meta | None:
    value = data.get("meta")
    return None if value is None else Meta.from_dict(value)


@dataclass
class ProcessInfo:
    """A single process and its resource use."""

    pid: int = 0
    ppid: int = 0
    user: str = ""
    executable: str = ""
    cmdline: str = ""
    cpu_percent: float = 0.0
    mem_percent: float = 0.0
    threads: int = 0
    start_time: datetime | None = None
    tags: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "pid": self.pid,
            "ppid": self.ppid,
            "user": self.user,
            "exe": self.executable,
            "cmdline": self.cmdline,
            "cpu_percent": self.cpu_percent,
            "mem_percent": self.mem_percent,
            "threads": self.threads,
            "start_time": format_time(self.start_time),
        }
        if self.tags:
            out["tags"] = dict(self.tags)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProcessInfo:
        data = _mapping(data, cls.__name__)
        return cls(
            pid=_int(data, "pid"),
            ppid=_int(data, "ppid"),
            user=_str(data, "user"),
            executable=_str(data, "exe"),
            cmdline=_str(data, "cmdline"),
            cpu_percent=_float(data, "cpu_percent"),
            mem_percent=_float(data, "mem_percent"),
            threads=_int(data, "threads"),
            start_time=_time(data, "start_time"),
            tags=_str_map(data, "tags"),
        )


@dataclass
class ProcessSnapshot:
    """The processes running on a host at one moment."""

    timestamp: datetime | None = None
    host_id: str = ""
    endpoint_id: str = ""
    processes: list[ProcessInfo] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": format_time(self.timestamp),
            "host_id": self.host_id,
            "endpoint_id": self.endpoint_id,
            "processes": [process.to_dict() for process in self.processes],
            "meta": None if self.meta is None else self.meta.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProcessSnapshot:
        data = _mapping(data, cls.__name__)
        return cls(
            timestamp=_time(data, "timestamp"),
            host_id=_str(data, "host_id"),
            endpoint_id=_str(data, "endpoint_id"),
            processes=_object_list(data, "processes", ProcessInfo),
            meta=_optional_meta(data),
        )


@dataclass
class ProcessPayload:
    """Processes reported by one agent, packaged at ``timestamp``."""

    agent_id: str = ""
    host_id: str = ""
    hostname: str = ""
    endpoint_id: str = ""
    processes: list[ProcessInfo] = field(default_factory=list)
    meta: Meta | None = None
    timestamp: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "agent_id": self.agent_id,
            "host_id": self.host_id,
            "hostname": self.hostname,
            "endpoint_id": self.endpoint_id,
            "processes": [process.to_dict() for process in self.processes],
        }
        if self.meta is not None:
            out["meta"] = self.meta.to_dict()
        out["timestamp"] = format_time(self.timestamp)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProcessPayload:
        data = _mapping(data, cls.__name__)
        return cls(
            agent_id=_str(data, "agent_id"),
            host_id=_str(data, "host_id"),
            hostname=_str(data, "hostname"),
            endpoint_id=_str(data, "endpoint_id"),
            processes=_object_list(data, "processes", ProcessInfo),
            meta=_optional_meta(data),
            timestamp=_time(data, "timestamp"),
        )


@dataclass
class ProcessQueryFilter:
    """Criteria, sorting and paging for process queries."""

    endpoint_id: str = ""
    start: datetime | None = None
    end: datetime | None = None
    min_cpu: float = 0.0
    max_cpu: float = 0.0
    min_memory: float = 0.0
    max_memory: float = 0.0
    user: str = ""
    pid: int = 0
    ppid: int = 0
    exe_contains: str = ""
    cmdline_contains: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    sort_by: str = ""
    sort_desc: bool = False
    limit: int = 0
    offset: int = 0