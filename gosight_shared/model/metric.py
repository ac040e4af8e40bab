"""Metric data points, payloads and query shapes."""

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


def _optional(data: Mapping[str, Any], key: str, cls: Any) -> Any:
    value = data.get(key)
    return None if value is None else cls.from_dict(value)


@dataclass
class StatisticValues:
    """Minimum, maximum, sample count and sum of a metric."""

    minimum: float = 0.0
    maximum: float = 0.0
    sample_count: int = 0
    sum: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "min": self.minimum,
            "max": self.maximum,
            "count": self.sample_count,
            "sum": self.sum,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StatisticValues:
        data = _mapping(data, cls.__name__)
        return cls(
            minimum=_float(data, "min"),
            maximum=_float(data, "max"),
            sample_count=_int(data, "count"),
            sum=_float(data, "sum"),
        )


@dataclass
class Point:
    """A value at a timestamp given as text."""

    timestamp: str = ""
    value: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"timestamp": self.timestamp, "value": self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Point:
        data = _mapping(data, cls.__name__)
        return cls(timestamp=_str(data, "timestamp"), value=_float(data, "value"))


@dataclass
class Metric:
    """A single metric data point."""

    namespace: str = ""
    subnamespace: str = ""
    name: str = ""
    timestamp: datetime | None = None
    value: float = 0.0
    statistic_values: StatisticValues | None = None
    unit: str = ""
    dimensions: dict[str, str] = field(default_factory=dict)
    storage_resolution: int = 0
    type: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.namespace:
            out["namespace"] = self.namespace
        if self.subnamespace:
            out["subnamespace"] = self.subnamespace
        out["name"] = self.name
        out["timestamp"] = format_time(self.timestamp)
        out["value"] = self.value
        out["stats"] = None if self.statistic_values is None else self.statistic_values.to_dict()
        if self.unit:
            out["unit"] = self.unit
        if self.dimensions:
            out["dimensions"] = dict(self.dimensions)
        if self.storage_resolution:
            out["resolution"] = self.storage_resolution
        if self.type:
            out["type"] = self.type
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Metric:
        data = _mapping(data, cls.__name__)
        return cls(
            namespace=_str(data, "namespace"),
            subnamespace=_str(data, "subnamespace"),
            name=_str(data, "name"),
            timestamp=_time(data, "timestamp"),
            value=_float(data, "value"),
            statistic_values=_optional(data, "stats", StatisticValues),
            unit=_str(data, "unit"),
            dimensions=_str_map(data, "dimensions"),
            storage_resolution=_int(data, "resolution"),
            type=_str(data, "type"),
        )


@dataclass
class MetricPayload:
    """Metrics from one agent, packaged at ``timestamp``."""

    agent_id: str = ""
    host_id: str = ""
    hostname: str = ""
    endpoint_id: str = ""
    metrics: list[Metric] = field(default_factory=list)
    meta: Meta | None = None
    timestamp: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "agent_id": self.agent_id,
            "host_id": self.host_id,
            "hostname": self.hostname,
            "endpoint_id": self.endpoint_id,
            "metrics": [metric.to_dict() for metric in self.metrics],
        }
        if self.meta is not None:
            out["meta"] = self.meta.to_dict()
        out["timestamp"] = format_time(self.timestamp)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MetricPayload:
        data = _mapping(data, cls.__name__)
        return cls(
            agent_id=_str(data, "agent_id"),
            host_id=_str(data, "host_id"),
            hostname=_str(data, "hostname"),
            endpoint_id=_str(data, "endpoint_id"),
            metrics=_object_list(data, "metrics", Metric),
            meta=_optional(data, "meta", Meta),
            timestamp=_time(data, "timestamp"),
        )


@dataclass
class MetricRow:
    """A tagged value at a Unix time in milliseconds."""

    value: float = 0.0
    tags: dict[str, str] = field(default_factory=dict)
    timestamp: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "tags": dict(self.tags), "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MetricRow:
        data = _mapping(data, cls.__name__)
        return cls(
            value=_float(data, "value"),
            tags=_str_map(data, "tags"),
            timestamp=_int(data, "timestamp"),
        )


@dataclass
class MetricPoint:
    """A value at a Unix time in milliseconds."""

    timestamp: int = 0
    value: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"timestamp": self.timestamp, "value": self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MetricPoint:
        data = _mapping(data, cls.__name__)
        return cls(timestamp=_int(data, "timestamp"), value=_float(data, "value"))


@dataclass
class MetricSelector:
    """Names a metric; ``instant`` selects a single current value over a series."""

    name: str = ""
    namespace: str = ""
    subnamespace: str = ""
    instant: bool = False