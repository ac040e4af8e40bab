"""Identifiers for endpoints and the namespace they report under."""

from __future__ import annotations

import uuid

from gosight_shared.model.meta import Meta

UNKNOWN = "unknown"
_TRIM_LENGTH = 12


def _trim(text: str) -> str:
    return text[:_TRIM_LENGTH]


def _sanitize(text: str) -> str:
    return text.replace(" ", "-").lower()


def generate_endpoint_id(meta: Meta | None) -> str:
    """Derive a stable endpoint id from metadata.

    Cloud identifiers come first, then the container id, then the host id;
    ``"unknown"`` if none is available.
    """
    if meta is None:
        return UNKNOWN

    provider = meta.cloud_provider.lower()
    if provider == "aws" and meta.account_id and meta.instance_id:
        return f"aws-{_sanitize(meta.account_id)}-{_trim(meta.instance_id)}"
    if provider == "gcp" and meta.project_id and meta.instance_id:
        return f"gcp-{_sanitize(meta.project_id)}-{_trim(meta.instance_id)}"
    if provider == "azure" and meta.resource_group and meta.instance_id:
        return f"azure-{_sanitize(meta.resource_group)}-{_trim(meta.instance_id)}"

    if meta.container_id:
        return "ctr-" + _trim(meta.container_id)
    if meta.host_id:
        return "host-" + _trim(meta.host_id)
    return UNKNOWN


def get_namespace(meta: Meta) -> str:
    """Return the metric namespace for the platform described by ``meta``."""
    if meta is None:
        raise TypeError("meta is required")
    provider = meta.cloud_provider.lower()
    if provider == "aws":
        return "AWS/ECS" if meta.service_id == "ecs" else "AWS/EC2"
    if provider == "gcp":
        return "GCP/Compute"
    if provider == "azure":
        return "Azure/VM"
    if meta.container_id and meta.cluster_name:
        return "K8s/Pod"
    if meta.container_id:
        return "Podman"
    return "System"


def new_uuid() -> str:
    """Return a new random UUID as text."""
    return str(uuid.uuid4())