"""Helpers for identifiers, tags, maps, strings, logging, JSON output, networking and paths."""