# gosight-shared

Data models and small utilities shared by GoSight monitoring agents and
servers: metrics, host metadata, processes, containers, network devices and
tags, with helpers that identify endpoints, match tags, log to split streams
and write JSON.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Models

The `gosight_shared.model` package holds dataclasses. Every field has an
empty default, and timestamps are `datetime` values or `None` for "not set".

- `meta.Meta`: agent, host, cloud, container, application and network
  details, plus free-form `tags`.
- `metric`: `StatisticValues`, `Point`, `Metric`, `MetricPayload`,
  `MetricRow`, `MetricPoint` and `MetricSelector`.
- `process`: `ProcessInfo`, `ProcessSnapshot`, `ProcessPayload` and
  `ProcessQueryFilter`.
- `container.Container`: a container and its last known state.
- `networkdevice.NetworkDevice` and `NetworkDeviceFilter`: syslog-emitting
  appliances. `NetworkDevice.to_row()` and `NetworkDevice.from_row(row)`
  convert to and from a mapping of database column names; `from_row` accepts
  timestamps as `datetime` or RFC 3339 text.
- `tag.Tag`: an immutable endpoint id, key and value.

Models that travel as JSON have `to_dict()` and a `from_dict()` class method.
They use the wire field names, leave out empty optional fields, and write
timestamps in RFC 3339 form, with `None` written as
`0001-01-01T00:00:00Z`. `from_dict()` raises `TypeError` for a field of the
wrong type and `ValueError` for a malformed timestamp. The timestamp
conversion itself is available as `codec.format_time(value)` and
`codec.parse_time(text)`.

```python
from gosight_shared.model.meta import Meta
from gosight_shared.model.metric import Metric, MetricPayload

meta = Meta(host_id="abc123", hostname="web-1")
payload = MetricPayload(
    host_id="abc123",
    hostname="web-1",
    metrics=[Metric(name="cpu.usage", value=12.5)],
    meta=meta,
)
wire = payload.to_dict()
assert MetricPayload.from_dict(wire) == payload
```

## Utilities

The `gosight_shared.utils` package holds:

- `ids.generate_endpoint_id(meta)`: a stable endpoint id. Cloud identifiers
  come first (`aws-`, `gcp-`, `azure-`), then the container id (`ctr-`), then
  the host id (`host-`), each id cut to 12 characters; `"unknown"` if none
  is set. `ids.get_namespace(meta)` gives the namespace such as `AWS/EC2`,
  `K8s/Pod`, `Podman` or `System`. `ids.new_uuid()` returns a random UUID.
- `tags.match_all_tags(required, actual)` and `tags.safe_copy_tags(meta)`.
- `maps.merge_maps(base, override)` and `maps.parse_tag_string(text)`, which
  reads `"env=prod, team=ops"` into a dictionary.
- `helpers.parse_int_or_default(text, default)` and
  `helpers.truncate(text, limit)`, which shortens by characters and ends
  with an ellipsis.
- `logger.init_logger(app_log_file, error_log_file, access_log_file,
  debug_log_file, log_level)` with `info`, `warn`, `error`, `debug`,
  `access`, `fatal` and `must`. Messages are written as JSON lines to the
  application, error, access and debug files; an empty path discards that
  stream. A level of `"debug"` enables `debug()` and echoes every message to
  standard output. `fatal` and `must` exit with status 1.
- `net.get_local_ip()`: the first non-loopback IPv4 address, or
  `"unknown"`. `net.get_client_ip(headers, remote_addr)` reads
  `X-Forwarded-For`, then `X-Real-IP`, then the peer address.
- `jsonio.write_json(filename, value)` writes `<filename>_<timestamp>.json`
  in the working directory and returns its path;
  `jsonio.write_json_response(handler, status, data)` sends JSON through an
  `http.server.BaseHTTPRequestHandler`.
- `path.get_working_dir()`.

```python
from gosight_shared.model.meta import Meta
from gosight_shared.utils.ids import generate_endpoint_id

print(generate_endpoint_id(Meta(container_id="0123456789abcdef")))
# ctr-0123456789ab
```

## What this package does not do

It is a library only: there is no command, server or storage. It has no
models for alert rules, events, log entries, remote commands, agents,
endpoints or action routes, and no helpers that build label maps from
metadata.