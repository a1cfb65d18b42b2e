"""Shared fixtures for xstorage tests."""

import copy

import pytest

from xstorage.models import RunFunctionRequest

XR_SPEC = {
    "workspace": "test-ws",
    "region": "de-txl",
    "tenant": "test-tenant",
    "image": "test-image",
    "sizeGB": 50,
    "name": "test-volume",
}


def make_xr(spec=None, kind="XSeCaStorage"):
    xr = {
        "apiVersion": "example.org/v1",
        "kind": kind,
        "metadata": {"name": "test-xr"},
    }
    if spec is not None:
        xr["spec"] = copy.deepcopy(spec)
    return xr


def make_request(spec=XR_SPEC, observed=None, desired=None, tag="success"):
    """Build a request as the runtime would send it."""
    return RunFunctionRequest.model_validate(
        {
            "meta": {"tag": tag},
            "observed": {
                "composite": {"resource": make_xr(spec)},
                "resources": observed or {},
            },
            "desired": {"resources": desired or {}},
        }
    )


def ready_resource(name, status="True"):
    return {
        "resource": {
            "apiVersion": "compute.ionoscloud.io/v1alpha1",
            "kind": "Datacenter",
            "metadata": {"name": name},
            "status": {"conditions": [{"type": "Ready", "status": status}]},
        }
    }


@pytest.fixture
def xr_spec():
    return copy.deepcopy(XR_SPEC)
