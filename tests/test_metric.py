import json
from datetime import datetime, timezone

import pytest

from gosight_shared.model.codec import ZERO_TIME, format_time
from gosight_shared.model.meta import Meta
from gosight_shared.model.metric import (
    Metric,
    MetricPayload,
    MetricPoint,
    MetricRow,
    MetricSelector,
    Point,
    StatisticValues,
)

TS = datetime(2025, 5, 6, 7, 8, 9, 500000, tzinfo=timezone.utc)


def _metric() -> Metric:
    return Metric(
        namespace="System",
        subnamespace="CPU",
        name="usage_percent",
        timestamp=TS,
        value=42.5,
        statistic_values=StatisticValues(minimum=1.0, maximum=99.0, sample_count=10, sum=420.0),
        unit="percent",
        dimensions={"core": "0"},
        storage_resolution=60,
        type="gauge",
    )


def test_statistic_values_wire_keys():
    out = StatisticValues(minimum=1.0, maximum=2.0, sample_count=3, sum=4.0).to_dict()
    assert out == {"min": 1.0, "max": 2.0, "count": 3, "sum": 4.0}
    assert StatisticValues.from_dict(out).sample_count == 3


def test_point_round_trip():
    point = Point(timestamp="t0", value=3.25)
    assert Point.from_dict(point.to_dict()) == point


def test_metric_round_trip():
    metric = _metric()
    out = metric.to_dict()
    assert out["timestamp"] == format_time(TS)
    assert out["resolution"] == 60
    assert Metric.from_dict(json.loads(json.dumps(out))) == metric


def test_metric_minimal_encoding():
    out = Metric(name="up").to_dict()
    assert out == {"name": "up", "timestamp": ZERO_TIME, "value": 0.0, "stats": None}


def test_metric_integer_value_decodes_as_float():
    metric = Metric.from_dict({"name": "n", "value": 7})
    assert metric.value == 7.0
    assert isinstance(metric.value, float)
    assert metric.statistic_values is None


def test_metric_rejects_string_value():
    with pytest.raises(TypeError):
        Metric.from_dict({"value": "7"})


def test_payload_round_trip_with_meta():
    payload = MetricPayload(
        agent_id="agent-1",
        host_id="host-1",
        hostname="web01",
        endpoint_id="host-host-1",
        metrics=[_metric(), Metric(name="up", value=1.0)],
        meta=Meta(hostname="web01"),
        timestamp=TS,
    )
    out = payload.to_dict()
    assert len(out["metrics"]) == 2
    assert MetricPayload.from_dict(json.loads(json.dumps(out))) == payload


def test_payload_omits_missing_meta():
    out = MetricPayload(agent_id="a").to_dict()
    assert "meta" not in out
    assert out["metrics"] == []
    assert MetricPayload.from_dict(out).meta is None


def test_payload_rejects_non_list_metrics():
    with pytest.raises(TypeError):
        MetricPayload.from_dict({"metrics": {"name": "x"}})


def test_metric_row_and_point_round_trip():
    row = MetricRow(value=1.5, tags={"host": "web01"}, timestamp=1_700_000_000_000)
    assert MetricRow.from_dict(json.loads(json.dumps(row.to_dict()))) == row
    point = MetricPoint(timestamp=1_700_000_000_000, value=2.0)
    assert MetricPoint.from_dict(point.to_dict()) == point


def test_metric_point_rejects_float_timestamp():
    with pytest.raises(TypeError):
        MetricPoint.from_dict({"timestamp": 1.5, "value": 1.0})


def test_metric_selector_fields():
    selector = MetricSelector(name="mem", namespace="System", instant=True)
    assert selector.instant is True
    assert selector.subnamespace == ""
    assert selector.name == "mem"