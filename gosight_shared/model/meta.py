"""Metadata describing the host, agent and environment behind collected data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from gosight_shared.model.codec import _mapping, _str, _str_map

# (attribute, wire key, omitted when empty)
_FIELDS: tuple[tuple[str, str, bool], ...] = (
    ("agent_id", "agent_id", False),
    ("agent_version", "agent_version", False),
    ("host_id", "host_id", False),
    ("endpoint_id", "endpoint_id", False),
    ("hostname", "hostname", False),
    ("ip_address", "ip_address", False),
    ("os", "os", True),
    ("os_version", "os_version", True),
    ("platform", "platform", True),
    ("platform_family", "platform_family", True),
    ("platform_version", "platform_version", True),
    ("kernel_architecture", "kernel_architecture", True),
    ("virtualization_system", "virtualization_system", True),
    ("virtualization_role", "virtualization_role", True),
    ("kernel_version", "kernel_version", True),
    ("architecture", "architecture", True),
    ("cloud_provider", "cloud_provider", True),
    ("region", "region", True),
    ("availability_zone", "availability_zone", True),
    ("instance_id", "instance_id", True),
    ("instance_type", "instance_type", True),
    ("account_id", "account_id", True),
    ("project_id", "project_id", True),
    ("resource_group", "resource_group", True),
    ("vpc_id", "vpc_id", True),
    ("subnet_id", "subnet_id", True),
    ("image_id", "image_id", True),
    ("service_id", "service_id", True),
    ("container_id", "container_id", True),
    ("container_name", "container_name", True),
    ("pod_name", "pod_name", True),
    ("namespace", "namespace", True),
    ("cluster_name", "cluster_name", True),
    ("node_name", "node_name", True),
    ("container_image_id", "contianer_image_id", True),
    ("container_image_name", "image_name", True),
    ("application", "application", True),
    ("environment", "environment", True),
    ("service", "service", True),
    ("version", "version", True),
    ("deployment_id", "deployment_id", True),
    ("public_ip", "public_ip", True),
    ("private_ip", "private_ip", True),
    ("mac_address", "mac_address", True),
    ("network_interface", "network_interface", True),
)


@dataclass
class Meta:
    """Context about where data was collected: agent, host, cloud, container, app."""

    agent_id: str = ""
    agent_version: str = ""

    host_id: str = ""
    endpoint_id: str = ""
    hostname: str = ""
    ip_address: str = ""
    os: str = ""
    os_version: str = ""
    platform: str = ""
    platform_family: str = ""
    platform_version: str = ""
    kernel_architecture: str = ""
    virtualization_system: str = ""
    virtualization_role: str = ""
    kernel_version: str = ""
    architecture: str = ""

    cloud_provider: str = ""
    region: str = ""
    availability_zone: str = ""
    instance_id: str = ""
    instance_type: str = ""
    account_id: str = ""
    project_id: str = ""
    resource_group: str = ""
    vpc_id: str = ""
    subnet_id: str = ""
    image_id: str = ""
    service_id: str = ""

    container_id: str = ""
    container_name: str = ""
    pod_name: str = ""
    namespace: str = ""
    cluster_name: str = ""
    node_name: str = ""
    container_image_id: str = ""
    container_image_name: str = ""

    application: str = ""
    environment: str = ""
    service: str = ""
    version: str = ""
    deployment_id: str = ""

    public_ip: str = ""
    private_ip: str = ""
    mac_address: str = ""
    network_interface: str = ""

    tags: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for attr, key, omit_empty in _FIELDS:
            value = getattr(self, attr)
            if value or not omit_empty:
                out[key] = value
        if self.tags:
            out["tags"] = dict(self.tags)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Meta:
        data = _mapping(data, cls.__name__)
        values: dict[str, Any] = {attr: _str(data, key) for attr, key, _ in _FIELDS}
        return cls(tags=_str_map(data, "tags"), **values)