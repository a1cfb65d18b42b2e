"""Registry of resource models used to encode and decode composed resources."""

from __future__ import annotations

import logging

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from .errors import ConversionError
from .models import Datacenter, ManagedResource, Volume
from .resource import Unstructured

logger = logging.getLogger(__name__)


class Scheme:
    """Maps (apiVersion, kind) pairs to the models that describe them.

    A scheme is built once at startup and handed to the function; nothing
    registers kinds on a shared global.
    """

    def __init__(self) -> None:
        self._models: dict[tuple[str, str], type[ManagedResource]] = {}

    def register(self, *models: type[ManagedResource]) -> Scheme:
        """Register model classes. Returns the scheme for chaining."""
        for model in models:
            gvk = model.gvk()
            if not all(gvk):
                raise ValueError(f"{model.__name__} does not declare an apiVersion and kind")
            self._models[gvk] = model
            logger.debug(f"Registered {gvk[1]} ({gvk[0]})")
        return self

    def recognizes(self, api_version: str, kind: str) -> bool:
        return (api_version, kind) in self._models

    def from_model(self, obj: ManagedResource) -> Unstructured:
        """Convert a typed resource into an unstructured body.

        Raises:
            ConversionError: If the kind is not registered or the model
                cannot be serialized.
        """
        target = f"cannot convert {type(obj).__name__} to {Unstructured.__name__}"
        if not self.recognizes(obj.apiVersion, obj.kind):
            raise ConversionError(
                f"{target}: no kind {obj.kind!r} is registered for version {obj.apiVersion!r}"
            )
        try:
            # mode="json" ensures Enums are serialized as strings
            data = obj.model_dump(exclude_none=True, by_alias=True, mode="json")
        except PydanticSerializationError as e:
            raise ConversionError(f"{target}: {e}") from e
        return Unstructured(data)

    def to_model(self, u: Unstructured) -> ManagedResource:
        """Decode an unstructured body into its registered model.

        Raises:
            ConversionError: If the kind is not registered or the body does
                not validate.
        """
        model = self._models.get((u.get_api_version(), u.get_kind()))
        if model is None:
            raise ConversionError(
                f"cannot convert {Unstructured.__name__} to a typed resource: "
                f"no kind {u.get_kind()!r} is registered for version {u.get_api_version()!r}"
            )
        try:
            return model.model_validate(u.object)
        except ValidationError as e:
            raise ConversionError(
                f"cannot convert {Unstructured.__name__} to {model.__name__}: {e}"
            ) from e


def new_scheme() -> Scheme:
    """Build the scheme holding every kind this function composes."""
    return Scheme().register(Datacenter, Volume)
