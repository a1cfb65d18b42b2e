"""Read composite and composed resources from a RunFunctionRequest.

Every getter returns copies, so callers may modify what they get back
without touching the request.
"""

from __future__ import annotations

import copy

from .models.wire import RunFunctionRequest
from .resource import DesiredComposed, ObservedComposed, ObservedComposite, Unstructured


def get_observed_composite_resource(req: RunFunctionRequest) -> ObservedComposite:
    """Get the observed composite resource.

    A request without an observed composite yields an empty resource, which
    fails any later field lookup with a "no such field" error.
    """
    composite = req.observed.composite
    if composite is None:
        return ObservedComposite(resource=Unstructured())
    return ObservedComposite(
        resource=Unstructured(copy.deepcopy(composite.resource)),
        connection_details=dict(composite.connectionDetails),
    )


def get_observed_composed_resources(req: RunFunctionRequest) -> dict[str, ObservedComposed]:
    observed: dict[str, ObservedComposed] = {}
    for name, r in req.observed.resources.items():
        body = Unstructured(copy.deepcopy(r.resource)) if r.resource else None
        observed[name] = ObservedComposed(
            resource=body, connection_details=dict(r.connectionDetails)
        )
    return observed


def get_desired_composed_resources(req: RunFunctionRequest) -> dict[str, DesiredComposed]:
    """Get resources desired by earlier functions in the pipeline."""
    desired: dict[str, DesiredComposed] = {}
    for name, r in req.desired.resources.items():
        desired[name] = DesiredComposed(
            resource=Unstructured(copy.deepcopy(r.resource)),
            ready=r.ready,
            connection_details=dict(r.connectionDetails),
        )
    return desired
