"""Tests for deriving the datacenter and volume."""

import pytest

from xstorage.composition import (
    LABEL_DATACENTER_NAME,
    LABEL_REGION,
    LABEL_TENANT,
    LABEL_WORKSPACE,
    build_datacenter,
    build_volume,
    extract_intent,
    is_ready,
    normalize_region,
    resource_key,
    volume_name,
)
from xstorage.config import CompositionSettings
from xstorage.errors import FunctionError, MissingFieldError, TypeMismatchError
from xstorage.models import StorageIntent
from xstorage.resource import ObservedComposed, Unstructured

from .conftest import XR_SPEC, make_xr


@pytest.fixture
def intent():
    return StorageIntent(**XR_SPEC)


class TestExtractIntent:
    def test_reads_all_fields(self):
        intent = extract_intent(Unstructured(make_xr(XR_SPEC)))
        assert intent.workspace == "test-ws"
        assert intent.region == "de-txl"
        assert intent.tenant == "test-tenant"
        assert intent.image == "test-image"
        assert intent.sizeGB == 50
        assert intent.name == "test-volume"

    def test_missing_spec(self):
        with pytest.raises(FunctionError) as exc:
            extract_intent(Unstructured(make_xr()))
        assert str(exc.value) == "cannot read spec.workspace field of XSeCaStorage: spec: no such field"
        assert isinstance(exc.value.__cause__, MissingFieldError)

    def test_fields_are_checked_in_order(self, xr_spec):
        # Both tenant and name are missing; tenant is read first.
        del xr_spec["tenant"]
        del xr_spec["name"]
        with pytest.raises(FunctionError, match="spec.tenant"):
            extract_intent(Unstructured(make_xr(xr_spec)))

    def test_mistyped_size(self, xr_spec):
        xr_spec["sizeGB"] = "fifty"
        with pytest.raises(FunctionError) as exc:
            extract_intent(Unstructured(make_xr(xr_spec, kind="XOtherStorage")))
        assert str(exc.value) == (
            "cannot read spec.sizeGB field of XOtherStorage: spec.sizeGB: not a (int64) number"
        )
        assert isinstance(exc.value.__cause__, TypeMismatchError)

    def test_mistyped_string(self, xr_spec):
        xr_spec["image"] = 42
        with pytest.raises(FunctionError, match="spec.image: not a string"):
            extract_intent(Unstructured(make_xr(xr_spec)))


class TestNaming:
    @pytest.mark.parametrize(
        "region,expected",
        [("de-txl", "de/txl"), ("us-las-2", "us/las-2"), ("de/fra", "de/fra"), ("gb", "gb")],
    )
    def test_normalize_region(self, region, expected):
        assert normalize_region(region) == expected

    def test_volume_name_separator(self):
        assert volume_name("ws") == "ws-volume"
        assert volume_name("ws", "_") == "ws_volume"

    def test_resource_key(self):
        assert resource_key("xservers", "test-ws-datacenter") == "xservers-test-ws-datacenter"


class TestBuildDatacenter:
    def test_datacenter(self, intent):
        dc = build_datacenter(intent, CompositionSettings())
        assert dc.apiVersion == "compute.ionoscloud.io/v1alpha1"
        assert dc.kind == "Datacenter"
        assert dc.metadata.name == "test-ws-datacenter"
        assert dc.metadata.labels == {
            LABEL_DATACENTER_NAME: "test-ws-datacenter",
            LABEL_WORKSPACE: "test-ws",
            LABEL_REGION: "de-txl",
            LABEL_TENANT: "test-tenant",
        }
        params = dc.spec.forProvider
        assert params.description == "Datacenter for test-ws"
        assert params.location == "de/txl"
        assert params.name == "test-ws-datacenter"

    def test_region_normalization_disabled(self, intent):
        dc = build_datacenter(intent, CompositionSettings(normalize_region=False))
        assert dc.spec.forProvider.location == "de-txl"
        assert dc.metadata.labels[LABEL_REGION] == "de-txl"

    def test_description_template(self, intent):
        settings = CompositionSettings(description_template="Grouping for {workspace}")
        dc = build_datacenter(intent, settings)
        assert dc.spec.forProvider.description == "Grouping for test-ws"


class TestBuildVolume:
    def test_volume(self, intent):
        vol = build_volume(intent, CompositionSettings())
        assert vol.kind == "Volume"
        assert vol.metadata.name == "test-ws-volume"
        params = vol.spec.forProvider
        assert params.diskType == "SSD"
        assert params.imageName == "test-image"
        assert params.imagePassword == "thisisnotapassword"
        assert params.name == "test-volume"
        assert params.size == 50.0
        assert isinstance(params.size, float)

    def test_volume_selects_datacenter_by_label_only(self, intent):
        vol = build_volume(intent, CompositionSettings())
        params = vol.spec.forProvider
        assert params.datacenterIdSelector.matchLabels == {LABEL_WORKSPACE: "test-ws"}
        assert params.datacenterId is None

    def test_underscore_separator(self, intent):
        vol = build_volume(intent, CompositionSettings(volume_separator="_"))
        assert vol.metadata.name == "test-ws_volume"


def _observed(status=None, with_conditions=True):
    body = {"kind": "Datacenter", "metadata": {"name": "dc"}}
    if with_conditions:
        body["status"] = {"conditions": [{"type": "Synced", "status": "True"}]}
        if status is not None:
            body["status"]["conditions"].append({"type": "Ready", "status": status})
    return {"xservers-dc": ObservedComposed(resource=Unstructured(body))}


class TestIsReady:
    def test_ready_true(self):
        assert is_ready(_observed("True"), "xservers-dc") is True

    @pytest.mark.parametrize("status", ["False", "Unknown"])
    def test_ready_not_true(self, status):
        assert is_ready(_observed(status), "xservers-dc") is False

    def test_no_ready_condition(self):
        assert is_ready(_observed(), "xservers-dc") is False
        assert is_ready(_observed(with_conditions=False), "xservers-dc") is False

    def test_not_observed(self):
        assert is_ready({}, "xservers-dc") is False
        assert is_ready({"xservers-dc": ObservedComposed(resource=None)}, "xservers-dc") is False
