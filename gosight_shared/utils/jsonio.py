"""JSON output for HTTP responses and inspection dumps."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _escape_html(text: str) -> str:
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def _encode(value: Any, indent: int | None) -> str:
    separators = (",", ": ") if indent else (",", ":")
    text = json.dumps(
        value, default=_default, ensure_ascii=False, indent=indent, separators=separators
    )
    return _escape_html(text)


def write_json_response(handler: Any, status: int, data: Any) -> None:
    """Send ``data`` as a JSON response with ``status`` through an HTTP request handler.

    ``handler`` is a ``http.server.BaseHTTPRequestHandler`` or anything with the
    same ``send_response``, ``send_header``, ``end_headers`` and ``wfile``.
    A value that cannot be encoded leaves the body empty.
    """
    handler.send_response(status)
    handler.send_header("Content-Type", "application/json")
    handler.end_headers()
    try:
        body = _encode(data, None) + "\n"
    except (TypeError, ValueError):
        return
    handler.wfile.write(body.encode("utf-8"))


def write_json(filename: str, value: Any) -> Path:
    """Dump ``value`` as indented JSON to ``<filename>_<timestamp>.json`` in the working directory.

    Returns the path written. Raises ``ValueError`` if the value cannot be
    encoded and ``OSError`` if the file cannot be written.
    """
    stamp = time.strftime("%Y-%m-%dT%H-%M-%S")
    path = Path(".") / f"{filename}_{stamp}.json"
    try:
        text = _encode(value, 2)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"marshal error: {exc}") from exc
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"write error: {exc}") from exc
    return path