"""Datacenter managed resource model."""

from typing import ClassVar, Literal

from pydantic import BaseModel, Field

from .base import ManagedResource

COMPUTE_API_VERSION = "compute.ionoscloud.io/v1alpha1"


class DatacenterParameters(BaseModel):
    """Provider parameters for a Datacenter."""

    description: str | None = Field(default=None, title="Description")
    location: str | None = Field(
        default=None, title="Location", description="Location in region/zone form, e.g. de/txl"
    )
    name: str | None = Field(default=None, title="Name")
    secAuthProtection: bool | None = Field(default=None, title="Sec Auth Protection")


class DatacenterSpec(BaseModel):
    """Spec for Datacenter resource."""

    forProvider: DatacenterParameters = Field(default_factory=DatacenterParameters)


class Datacenter(ManagedResource):
    """Virtual datacenter grouping the volumes of one workspace."""

    API_VERSION: ClassVar[str] = COMPUTE_API_VERSION
    KIND: ClassVar[str] = "Datacenter"

    apiVersion: Literal["compute.ionoscloud.io/v1alpha1"] = COMPUTE_API_VERSION
    kind: Literal["Datacenter"] = "Datacenter"
    spec: DatacenterSpec = Field(default_factory=DatacenterSpec)
