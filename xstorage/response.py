"""Build a RunFunctionResponse."""

from __future__ import annotations

import json
from datetime import timedelta

from .errors import ResponseAssemblyError
from .models.wire import (
    Ready,
    Resource,
    ResponseMeta,
    Result,
    RunFunctionRequest,
    RunFunctionResponse,
    Severity,
    Status,
    StatusCondition,
    Target,
)
from .resource import DesiredComposed

DEFAULT_TTL = timedelta(seconds=60)


def format_ttl(ttl: timedelta) -> str:
    """Format a TTL the way the protocol's JSON form encodes durations."""
    seconds = ttl.total_seconds()
    if seconds.is_integer():
        return f"{int(seconds)}s"
    return f"{seconds:.9f}".rstrip("0") + "s"


def to(req: RunFunctionRequest, ttl: timedelta = DEFAULT_TTL) -> RunFunctionResponse:
    """Start a response to the request.

    The response echoes the request tag and carries a copy of the desired
    state produced by earlier functions in the pipeline.
    """
    return RunFunctionResponse(
        meta=ResponseMeta(tag=req.meta.tag, ttl=format_ttl(ttl)),
        desired=req.desired.model_copy(deep=True),
        context=dict(req.context) if req.context is not None else None,
    )


def fatal(rsp: RunFunctionResponse, err: Exception) -> None:
    """Report an error that aborts the invocation."""
    rsp.results.append(
        Result(severity=Severity.FATAL, message=str(err), target=Target.COMPOSITE)
    )


def warning(rsp: RunFunctionResponse, err: Exception) -> None:
    rsp.results.append(
        Result(severity=Severity.WARNING, message=str(err), target=Target.COMPOSITE)
    )


def normal(rsp: RunFunctionResponse, message: str) -> None:
    rsp.results.append(Result(severity=Severity.NORMAL, message=message))


class ConditionBuilder:
    """Adjusts a condition after it was added to a response."""

    def __init__(self, condition: StatusCondition):
        self._condition = condition

    def with_message(self, message: str) -> ConditionBuilder:
        self._condition.message = message
        return self

    def target_composite(self) -> ConditionBuilder:
        self._condition.target = Target.COMPOSITE
        return self

    def target_composite_and_claim(self) -> ConditionBuilder:
        self._condition.target = Target.COMPOSITE_AND_CLAIM
        return self


def _add_condition(
    rsp: RunFunctionResponse, condition_type: str, status: Status, reason: str
) -> ConditionBuilder:
    condition = StatusCondition(
        type=condition_type, status=status, reason=reason, target=Target.COMPOSITE
    )
    rsp.conditions.append(condition)
    return ConditionBuilder(condition)


def condition_true(rsp: RunFunctionResponse, condition_type: str, reason: str) -> ConditionBuilder:
    return _add_condition(rsp, condition_type, Status.TRUE, reason)


def condition_false(rsp: RunFunctionResponse, condition_type: str, reason: str) -> ConditionBuilder:
    return _add_condition(rsp, condition_type, Status.FALSE, reason)


def set_desired_composed_resources(
    rsp: RunFunctionResponse, desired: dict[str, DesiredComposed]
) -> None:
    """Replace the response's desired composed resources.

    Raises:
        ResponseAssemblyError: If a resource body cannot be encoded.
    """
    resources: dict[str, Resource] = {}
    for name, dc in desired.items():
        try:
            body = json.loads(json.dumps(dc.resource.object, allow_nan=False))
        except (TypeError, ValueError) as e:
            raise ResponseAssemblyError(
                f"cannot set desired composed resources in {type(rsp).__name__}: "
                f"cannot encode resource {name!r}: {e}"
            ) from e
        resources[name] = Resource(
            resource=body,
            connectionDetails=dict(dc.connection_details),
            ready=Ready(dc.ready),
        )
    rsp.desired.resources = resources
