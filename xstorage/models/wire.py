"""Request and response envelope of a composition function call.

Field names and enum values follow the JSON form of the function protocol,
so a request captured from the runtime validates as-is.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Ready(str, Enum):
    """Readiness of a desired composed resource."""

    UNSPECIFIED = "READY_UNSPECIFIED"
    TRUE = "READY_TRUE"
    FALSE = "READY_FALSE"


class Severity(str, Enum):
    """Severity of a function result."""

    UNSPECIFIED = "SEVERITY_UNSPECIFIED"
    FATAL = "SEVERITY_FATAL"
    WARNING = "SEVERITY_WARNING"
    NORMAL = "SEVERITY_NORMAL"


class Target(str, Enum):
    """Who a result or condition is reported to."""

    COMPOSITE = "TARGET_COMPOSITE"
    COMPOSITE_AND_CLAIM = "TARGET_COMPOSITE_AND_CLAIM"


class Status(str, Enum):
    """Status of a condition set by the function."""

    UNSPECIFIED = "STATUS_CONDITION_UNSPECIFIED"
    UNKNOWN = "STATUS_CONDITION_UNKNOWN"
    TRUE = "STATUS_CONDITION_TRUE"
    FALSE = "STATUS_CONDITION_FALSE"


class Resource(BaseModel):
    """A composite or composed resource as carried in a state."""

    resource: dict[str, Any] = Field(default_factory=dict)
    connectionDetails: dict[str, str] = Field(default_factory=dict)
    ready: Ready = Ready.UNSPECIFIED


class State(BaseModel):
    """Observed or desired state: the composite plus its composed resources."""

    composite: Resource | None = None
    resources: dict[str, Resource] = Field(default_factory=dict)


class RequestMeta(BaseModel):
    tag: str = ""


class ResponseMeta(BaseModel):
    tag: str = ""
    ttl: str = Field(default="60s", description="How long the response may be cached")


class RunFunctionRequest(BaseModel):
    """A single invocation of the function by the runtime."""

    meta: RequestMeta = Field(default_factory=RequestMeta)
    observed: State = Field(default_factory=State)
    desired: State = Field(default_factory=State)
    input: dict[str, Any] | None = None
    context: dict[str, Any] | None = None


class Result(BaseModel):
    """An event reported back to the runtime."""

    severity: Severity
    message: str
    reason: str | None = None
    target: Target | None = None


class StatusCondition(BaseModel):
    """A condition the runtime sets on the composite and, optionally, its claim."""

    type: str
    status: Status
    reason: str
    message: str | None = None
    target: Target | None = None


class RunFunctionResponse(BaseModel):
    """The function's answer to a RunFunctionRequest."""

    meta: ResponseMeta = Field(default_factory=ResponseMeta)
    desired: State = Field(default_factory=State)
    results: list[Result] = Field(default_factory=list)
    conditions: list[StatusCondition] = Field(default_factory=list)
    context: dict[str, Any] | None = None

    def is_fatal(self) -> bool:
        """Check if any result aborted the invocation."""
        return any(r.severity == Severity.FATAL for r in self.results)
