"""Shared data models and utilities for GoSight monitoring."""

__version__ = "0.1.0"