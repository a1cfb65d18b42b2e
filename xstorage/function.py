"""The composition function."""

from __future__ import annotations

import logging
from datetime import timedelta

from . import request, response
from .composition import (
    build_datacenter,
    build_volume,
    extract_intent,
    is_ready,
    resource_key,
)
from .config.models import CompositionSettings
from .errors import FunctionError
from .models import ManagedResource, Ready, RunFunctionRequest, RunFunctionResponse
from .resource import DesiredComposed, ObservedComposed
from .scheme import Scheme, new_scheme

logger = logging.getLogger(__name__)


class CompositionFunction:
    """Compose a datacenter and a volume for an XSeCaStorage composite.

    Every call is a pure function of the request: the previously desired
    resources of other functions are kept, the datacenter and volume are
    inserted or overwritten, and each is marked ready once the runtime
    observes it as Ready.
    """

    def __init__(
        self,
        settings: CompositionSettings | None = None,
        scheme: Scheme | None = None,
        ttl: timedelta = response.DEFAULT_TTL,
    ):
        self.settings = settings or CompositionSettings()
        self.scheme = scheme or new_scheme()
        self.ttl = ttl

    def run_function(self, req: RunFunctionRequest) -> RunFunctionResponse:
        """Run the function.

        Failures are reported as a fatal result on the returned response.
        """
        logger.info(f"Running function (tag={req.meta.tag!r})")
        rsp = response.to(req, self.ttl)

        observed = request.get_observed_composed_resources(req)
        desired = request.get_desired_composed_resources(req)
        xr = request.get_observed_composite_resource(req)

        try:
            intent = extract_intent(xr.resource)

            datacenter = build_datacenter(intent, self.settings)
            logger.info(f"Creating datacenter {datacenter.metadata.name}")
            self._compose(datacenter, observed, desired)

            volume = build_volume(intent, self.settings)
            logger.info(f"Creating volume {volume.metadata.name}")
            self._compose(volume, observed, desired)

            response.set_desired_composed_resources(rsp, desired)
        except FunctionError as e:
            logger.warning(f"Composition failed (tag={req.meta.tag!r}): {e}")
            response.fatal(rsp, e)
            return rsp

        response.condition_true(rsp, "FunctionSuccess", "Success").target_composite_and_claim()
        return rsp

    def _compose(
        self,
        obj: ManagedResource,
        observed: dict[str, ObservedComposed],
        desired: dict[str, DesiredComposed],
    ) -> None:
        """Convert obj and put it into desired, carrying over its readiness."""
        body = self.scheme.from_model(obj)
        key = resource_key(self.settings.resource_prefix, obj.metadata.name)

        dc = DesiredComposed(resource=body)
        if is_ready(observed, key):
            logger.info(f"{obj.kind} {obj.metadata.name} is ready")
            dc.ready = Ready.TRUE
        desired[key] = dc
