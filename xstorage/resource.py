"""Unstructured resources and the composed-resource containers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from .errors import FieldError
from .fieldpath import Paved
from .models.base import Condition, ConditionStatus
from .models.wire import Ready

logger = logging.getLogger(__name__)


class Unstructured(Paved):
    """A resource body of any kind."""

    def get_kind(self) -> str:
        kind = self.object.get("kind")
        return kind if isinstance(kind, str) else ""

    def get_api_version(self) -> str:
        api_version = self.object.get("apiVersion")
        return api_version if isinstance(api_version, str) else ""

    def get_name(self) -> str:
        try:
            return self.get_string("metadata.name")
        except FieldError:
            return ""

    def get_labels(self) -> dict[str, str]:
        try:
            return self.get_string_object("metadata.labels")
        except FieldError:
            return {}

    def get_condition(self, condition_type: str) -> Condition:
        """Get the condition of the given type.

        Returns a condition with status Unknown when the resource does not
        report one.
        """
        try:
            conditions = self.get_value("status.conditions")
        except FieldError:
            conditions = []

        if isinstance(conditions, list):
            for raw in conditions:
                if isinstance(raw, dict) and raw.get("type") == condition_type:
                    try:
                        return Condition.model_validate(raw)
                    except ValidationError as e:
                        logger.warning(
                            f"Ignoring malformed {condition_type} condition on "
                            f"{self.get_kind()} {self.get_name()}: {e}"
                        )
                        break

        return Condition(type=condition_type, status=ConditionStatus.UNKNOWN)


@dataclass
class ObservedComposite:
    """The observed composite resource."""

    resource: Unstructured
    connection_details: dict[str, str] = field(default_factory=dict)


@dataclass
class ObservedComposed:
    """A composed resource as currently provisioned by the runtime."""

    resource: Unstructured | None
    connection_details: dict[str, str] = field(default_factory=dict)


@dataclass
class DesiredComposed:
    """A composed resource the function wants to exist."""

    resource: Unstructured
    ready: Ready = Ready.UNSPECIFIED
    connection_details: dict[str, str] = field(default_factory=dict)
