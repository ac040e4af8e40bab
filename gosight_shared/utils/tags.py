"""Tag matching and safe access to metadata tags."""

from __future__ import annotations

from collections.abc import Mapping

from gosight_shared.model.meta import Meta


def match_all_tags(required: Mapping[str, str], actual: Mapping[str, str]) -> bool:
    """Return True if every required tag is present in ``actual`` with the same value."""
    return all(key in actual and actual[key] == value for key, value in required.items())


def safe_copy_tags(meta: Meta | None) -> dict[str, str]:
    """Return the tags of ``meta``, never ``None``.

    If ``meta`` has no tag map, one is created and stored on it. Without
    ``meta`` a fresh empty map is returned.
    """
    if meta is None:
        return {}
    if meta.tags is None:
        meta.tags = {}
    return meta.tags