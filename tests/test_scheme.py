"""Tests for the resource model scheme."""

import pytest

from xstorage.errors import ConversionError
from xstorage.models import Datacenter, ManagedResource, ObjectMeta, Volume
from xstorage.resource import Unstructured
from xstorage.scheme import Scheme, new_scheme


def test_new_scheme_registers_composed_kinds():
    scheme = new_scheme()
    assert scheme.recognizes("compute.ionoscloud.io/v1alpha1", "Datacenter")
    assert scheme.recognizes("compute.ionoscloud.io/v1alpha1", "Volume")
    assert not scheme.recognizes("compute.ionoscloud.io/v1alpha1", "Server")


def test_schemes_are_independent():
    empty = Scheme()
    new_scheme()
    assert not empty.recognizes("compute.ionoscloud.io/v1alpha1", "Datacenter")


def test_from_model_omits_unset_parameters():
    dc = Datacenter(metadata=ObjectMeta(name="dc"))
    u = new_scheme().from_model(dc)
    assert isinstance(u, Unstructured)
    assert u.get_kind() == "Datacenter"
    assert u.get_api_version() == "compute.ionoscloud.io/v1alpha1"
    assert u.get_name() == "dc"
    assert u.object["spec"] == {"forProvider": {}}


def test_from_model_unregistered_kind():
    with pytest.raises(ConversionError, match="cannot convert Volume to Unstructured"):
        Scheme().from_model(Volume(metadata=ObjectMeta(name="v")))


def test_register_requires_gvk():
    with pytest.raises(ValueError):
        Scheme().register(ManagedResource)


def test_to_model():
    scheme = new_scheme()
    u = Unstructured(
        {
            "apiVersion": "compute.ionoscloud.io/v1alpha1",
            "kind": "Volume",
            "metadata": {"name": "v"},
            "spec": {"forProvider": {"size": 10, "diskType": "HDD"}},
        }
    )
    vol = scheme.to_model(u)
    assert isinstance(vol, Volume)
    assert vol.spec.forProvider.size == 10.0
    assert vol.spec.forProvider.diskType == "HDD"


def test_to_model_errors():
    scheme = new_scheme()
    with pytest.raises(ConversionError, match="no kind 'Server'"):
        scheme.to_model(Unstructured({"apiVersion": "compute.ionoscloud.io/v1alpha1", "kind": "Server"}))
    with pytest.raises(ConversionError, match="cannot convert Unstructured to Datacenter"):
        scheme.to_model(Unstructured({"apiVersion": "compute.ionoscloud.io/v1alpha1", "kind": "Datacenter"}))
