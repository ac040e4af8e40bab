"""Helpers for string-to-string maps."""

from __future__ import annotations

from collections.abc import Mapping


def merge_maps(
    base: Mapping[str, str] | None, override: Mapping[str, str] | None
) -> dict[str, str]:
    """Return a new map of ``base`` updated with ``override``; inputs are left untouched."""
    result = dict(base or {})
    result.update(override or {})
    return result


def parse_tag_string(text: str) -> dict[str, str]:
    """Parse ``"k1=v1,k2=v2"`` into a map.

    Keys and values are stripped; pairs without ``=`` or with an empty key
    are skipped, and a value may itself contain ``=``.
    """
    tags: dict[str, str] = {}
    for pair in text.split(","):
        key, sep, value = pair.partition("=")
        if not sep:
            continue
        key = key.strip()
        if key:
            tags[key] = value.strip()
    return tags