"""Pydantic models for composed resources and the function envelope."""

from .base import (
    TYPE_READY,
    Condition,
    ConditionStatus,
    ManagedResource,
    ObjectMeta,
    Selector,
)
from .composite import StorageIntent
from .datacenter import Datacenter, DatacenterParameters, DatacenterSpec
from .volume import Volume, VolumeParameters, VolumeSpec
from .wire import (
    Ready,
    RequestMeta,
    Resource,
    ResponseMeta,
    Result,
    RunFunctionRequest,
    RunFunctionResponse,
    Severity,
    State,
    Status,
    StatusCondition,
    Target,
)

__all__ = [
    "TYPE_READY",
    "Condition",
    "ConditionStatus",
    "ManagedResource",
    "ObjectMeta",
    "Selector",
    "StorageIntent",
    "Datacenter",
    "DatacenterParameters",
    "DatacenterSpec",
    "Volume",
    "VolumeParameters",
    "VolumeSpec",
    "Ready",
    "RequestMeta",
    "Resource",
    "ResponseMeta",
    "Result",
    "RunFunctionRequest",
    "RunFunctionResponse",
    "Severity",
    "State",
    "Status",
    "StatusCondition",
    "Target",
]
