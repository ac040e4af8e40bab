import uuid

import pytest

from gosight_shared.model.meta import Meta
from gosight_shared.utils.ids import generate_endpoint_id, get_namespace, new_uuid


def test_no_meta_is_unknown():
    assert generate_endpoint_id(None) == "unknown"


def test_empty_meta_is_unknown():
    assert generate_endpoint_id(Meta()) == "unknown"


def test_aws_sanitizes_account_and_trims_instance():
    meta = Meta(cloud_provider="AWS", account_id="My Account", instance_id="i-0123456789abcdef")
    assert generate_endpoint_id(meta) == "aws-my-account-i-0123456789"


def test_gcp_uses_project():
    meta = Meta(cloud_provider="gcp", project_id="proj", instance_id="vm1")
    assert generate_endpoint_id(meta) == "gcp-" + "proj" + "-" + "vm1"


def test_azure_uses_resource_group():
    meta = Meta(cloud_provider="Azure", resource_group="rg", instance_id="vm2")
    assert generate_endpoint_id(meta) == "azure-" + "rg" + "-" + "vm2"


def test_incomplete_cloud_falls_back_to_host():
    meta = Meta(cloud_provider="aws", account_id="acct", host_id="h1")
    assert generate_endpoint_id(meta) == "host-" + "h1"


def test_container_preferred_over_host():
    meta = Meta(container_id="abc", host_id="h1")
    assert generate_endpoint_id(meta) == "ctr-" + "abc"


def test_long_host_id_is_trimmed_to_twelve():
    host_id = "0123456789abcdefghij"
    result = generate_endpoint_id(Meta(host_id=host_id))
    assert result.startswith("host-")
    assert len(result) == len("host-") + 12
    assert host_id.startswith(result[len("host-"):])


@pytest.mark.parametrize(
    ("meta", "expected"),
    [
        (Meta(cloud_provider="AWS"), "AWS/EC2"),
        (Meta(cloud_provider="aws", service_id="ecs"), "AWS/ECS"),
        (Meta(cloud_provider="GCP"), "GCP/Compute"),
        (Meta(cloud_provider="azure"), "Azure/VM"),
        (Meta(container_id="c", cluster_name="k"), "K8s/Pod"),
        (Meta(container_id="c"), "Podman"),
        (Meta(), "System"),
    ],
)
def test_namespace(meta, expected):
    assert get_namespace(meta) == expected


def test_namespace_requires_meta():
    with pytest.raises(TypeError):
        get_namespace(None)


def test_new_uuid_is_random_v4():
    first, second = new_uuid(), new_uuid()
    assert uuid.UUID(first).version == 4
    assert first != second