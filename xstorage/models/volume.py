"""Volume managed resource model."""

from typing import ClassVar, Literal

from pydantic import BaseModel, Field

from .base import ManagedResource, Selector
from .datacenter import COMPUTE_API_VERSION


class VolumeParameters(BaseModel):
    """Provider parameters for a Volume.

    The parent datacenter is resolved either by ``datacenterId`` or, as the
    composition does it, by ``datacenterIdSelector`` matching its labels.
    """

    availabilityZone: str | None = Field(default=None, title="Availability Zone")
    datacenterId: str | None = Field(default=None, title="Datacenter ID")
    datacenterIdSelector: Selector | None = Field(default=None, title="Datacenter Selector")
    diskType: str | None = Field(default=None, title="Disk Type", description="HDD or SSD")
    imageName: str | None = Field(default=None, title="Image Name")
    imagePassword: str | None = Field(default=None, title="Image Password")
    name: str | None = Field(default=None, title="Name")
    size: float | None = Field(default=None, title="Size", description="Size in GB")


class VolumeSpec(BaseModel):
    """Spec for Volume resource."""

    forProvider: VolumeParameters = Field(default_factory=VolumeParameters)


class Volume(ManagedResource):
    """Block storage volume attached to a datacenter."""

    API_VERSION: ClassVar[str] = COMPUTE_API_VERSION
    KIND: ClassVar[str] = "Volume"

    apiVersion: Literal["compute.ionoscloud.io/v1alpha1"] = COMPUTE_API_VERSION
    kind: Literal["Volume"] = "Volume"
    spec: VolumeSpec = Field(default_factory=VolumeSpec)
