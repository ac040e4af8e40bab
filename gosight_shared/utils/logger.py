"""Split-stream logging: application, error, access and debug logs as JSON lines."""

from __future__ import annotations

import json
import re
import sys
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import IO, Any, NoReturn

_CONSOLE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_VERB_RE = re.compile(r"%([-+# 0]*\d*(?:\.\d+)?)([a-zA-Z%])")
_VERB_MAP = {"v": "s", "t": "s", "w": "s", "q": "r"}


@dataclass
class _Sinks:
    info: list[IO[str]] = field(default_factory=list)
    error: list[IO[str]] = field(default_factory=list)
    access: list[IO[str]] = field(default_factory=list)
    debug: list[IO[str]] = field(default_factory=list)
    files: list[IO[str]] = field(default_factory=list)
    console: bool = False
    debug_enabled: bool = False

    def close(self) -> None:
        for handle in self.files:
            handle.close()
        self.files.clear()


_lock = threading.Lock()
_sinks = _Sinks()


def _format(message: str, args: tuple[Any, ...]) -> str:
    def convert(match: re.Match[str]) -> str:
        flags, verb = match.groups()
        if verb == "%":
            return match.group(0)
        return "%" + flags + _VERB_MAP.get(verb, verb)

    converted = _VERB_RE.sub(convert, message)
    if not args:
        return converted.replace("%%", "%")
    try:
        return converted % args
    except (TypeError, ValueError):
        return " ".join([message, *(str(arg) for arg in args)])


def _timestamp(now: datetime) -> str:
    text = now.isoformat(timespec="seconds")
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _open(path: str) -> IO[str]:
    return open(path, "a", encoding="utf-8")


def init_logger(
    app_log_file: str,
    error_log_file: str,
    access_log_file: str,
    debug_log_file: str,
    log_level: str,
) -> None:
    """Open the log files and set the level; an empty path discards that stream.

    A ``log_level`` of "debug" (any case) enables debug messages and echoes
    every stream to standard output. Raises ``OSError`` if a file cannot be opened.
    """
    global _sinks
    new = _Sinks()
    try:
        for path, target in (
            (app_log_file, new.info),
            (error_log_file, new.error),
            (access_log_file, new.access),
            (debug_log_file, new.debug),
        ):
            if path:
                handle = _open(path)
                new.files.append(handle)
                target.append(handle)
    except OSError:
        new.close()
        raise

    if log_level.lower() == "debug":
        new.debug_enabled = True
        new.console = True

    with _lock:
        old, _sinks = _sinks, new
    old.close()


def _emit(stream: str, level: str, message: str, **fields: Any) -> None:
    now = datetime.now().astimezone()
    record: dict[str, Any] = {"level": level, "time": _timestamp(now)}
    record.update(fields)
    record["message"] = message
    line = json.dumps(record, ensure_ascii=False) + "\n"
    with _lock:
        for handle in getattr(_sinks, stream):
            handle.write(line)
            handle.flush()
        if _sinks.console:
            extras = "".join(f" {key}={value}" for key, value in fields.items())
            console_line = f"{now.strftime(_CONSOLE_TIME_FORMAT)} {level.upper()[:3]} {message}{extras}\n"
            sys.stdout.write(console_line)
            sys.stdout.flush()


def info(message: str, *args: Any) -> None:
    """Log a normal application message."""
    _emit("info", "info", _format(message, args))


def warn(message: str, *args: Any) -> None:
    """Log a warning to the error stream."""
    _emit("error", "warn", _format(message, args))


def error(message: str, *args: Any) -> None:
    """Log an error to the error stream."""
    _emit("error", "error", _format(message, args))


def fatal(message: str, *args: Any) -> NoReturn:
    """Log an error and exit with status 1."""
    _emit("error", "error", _format(message, args))
    raise SystemExit(1)


def debug(message: str, *args: Any) -> None:
    """Log a debug message; ignored unless the logger was set to debug."""
    if _sinks.debug_enabled:
        _emit("debug", "debug", _format(message, args))


def access(message: str, *args: Any) -> None:
    """Log a traffic, authentication or API access record."""
    _emit("access", "access", _format(message, args))


def must(label: str, err: BaseException | None) -> None:
    """Exit with status 1 after logging if ``err`` is set; do nothing otherwise."""
    if err is not None:
        _emit("error", "fatal", f"{label} init failed", error=str(err))
        raise SystemExit(1)