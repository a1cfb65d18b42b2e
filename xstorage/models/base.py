"""Base models for composed resource manifests."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field

TYPE_READY = "Ready"


class ConditionStatus(str, Enum):
    """Status of a resource condition."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class Condition(BaseModel):
    """A status condition reported on an observed resource."""

    type: str = Field(..., description="Condition type, e.g. Ready or Synced")
    status: ConditionStatus = Field(default=ConditionStatus.UNKNOWN)
    reason: str | None = None
    message: str | None = None
    lastTransitionTime: str | None = None


class ObjectMeta(BaseModel):
    """Common metadata for all managed resources."""

    name: str = Field(..., title="Name", description="Unique resource name")
    namespace: str | None = Field(default=None, title="Namespace")
    labels: dict[str, str] = Field(default_factory=dict, title="Labels")
    annotations: dict[str, str] = Field(default_factory=dict, title="Annotations")


class Selector(BaseModel):
    """Selects a referenced resource by its labels instead of its identity."""

    matchLabels: dict[str, str] = Field(default_factory=dict)
    matchControllerRef: bool | None = None


class ManagedResource(BaseModel):
    """Base class for all provider-managed resources."""

    API_VERSION: ClassVar[str] = ""
    KIND: ClassVar[str] = ""

    apiVersion: str
    kind: str
    metadata: ObjectMeta

    @classmethod
    def gvk(cls) -> tuple[str, str]:
        """Get the (apiVersion, kind) pair the model is registered under."""
        return (cls.API_VERSION, cls.KIND)
