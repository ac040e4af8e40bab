"""Filesystem path helpers."""

from __future__ import annotations

import os

from gosight_shared.utils import logger


def get_working_dir() -> str:
    """Return the current working directory, or "" after logging an error if it is gone."""
    try:
        return os.getcwd()
    except OSError as exc:
        logger.error("Failed to get working directory: %v", exc)
        return ""