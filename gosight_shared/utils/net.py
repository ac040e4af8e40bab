"""Local and client IP address lookup."""

from __future__ import annotations

import ipaddress
import socket
from collections.abc import Mapping
from typing import Any

import psutil

UNKNOWN = "unknown"


def get_local_ip() -> str:
    """Return the first non-loopback IPv4 address of this machine, or "unknown"."""
    try:
        interfaces = psutil.net_if_addrs()
    except OSError:
        return UNKNOWN
    for addresses in interfaces.values():
        for addr in addresses:
            if addr.family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.IPv4Address(addr.address)
            except ValueError:
                continue
            if not ip.is_loopback:
                return str(ip)
    return UNKNOWN


def _header(headers: Any, name: str) -> str:
    if headers is None:
        return ""
    value = headers.get(name)
    if value is None and isinstance(headers, Mapping):
        folded = name.casefold()
        value = next(
            (v for k, v in headers.items() if isinstance(k, str) and k.casefold() == folded),
            None,
        )
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return value or ""


def _split_host_port(address: str) -> str | None:
    if address.startswith("["):
        end = address.find("]")
        if end < 0 or not address[end + 1:].startswith(":"):
            return None
        if ":" in address[end + 2:]:
            return None
        return address[1:end]
    host, sep, _ = address.rpartition(":")
    if not sep or ":" in host or "[" in host or "]" in host:
        return None
    return host


def get_client_ip(headers: Any, remote_addr: str) -> str:
    """Return the client's IP from X-Forwarded-For, X-Real-IP or the peer address.

    ``headers`` is any mapping with ``get``; names are matched ignoring case.
    If ``remote_addr`` is not "host:port" it is returned unchanged.
    """
    forwarded = _header(headers, "X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = _header(headers, "X-Real-IP")
    if real_ip:
        return real_ip.strip()
    host = _split_host_port(remote_addr)
    return remote_addr if host is None else host