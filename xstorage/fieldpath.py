"""Typed access to fields of loosely-typed documents.

Paths use dotted notation with optional array indexes, for example
``spec.workspace`` or ``status.conditions[0].type``.
"""

from __future__ import annotations

import re
from typing import Any

from .errors import MissingFieldError, TypeMismatchError

Segment = str | int

_PART_PATTERN = re.compile(r"^([^.\[\]]+)((?:\[\d+\])*)$")
_INDEX_PATTERN = re.compile(r"\[(\d+)\]")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse(path: str) -> list[Segment]:
    """Split a field path into field names and array indexes.

    Raises:
        ValueError: If the path is empty or a segment is malformed.
    """
    if not path:
        raise ValueError("empty field path")

    segments: list[Segment] = []
    for part in path.split("."):
        match = _PART_PATTERN.match(part)
        if not match:
            raise ValueError(f"invalid segment {part!r} in field path {path!r}")
        segments.append(match.group(1))
        segments.extend(int(i) for i in _INDEX_PATTERN.findall(match.group(2)))
    return segments


def join(segments: list[Segment]) -> str:
    """Render segments back into a field path."""
    out = ""
    for seg in segments:
        if isinstance(seg, int):
            out += f"[{seg}]"
        elif out:
            out += f".{seg}"
        else:
            out = seg
    return out


class Paved:
    """A plain dict document with typed field accessors."""

    def __init__(self, obj: dict[str, Any] | None = None):
        self.object: dict[str, Any] = obj if obj is not None else {}

    def get_value(self, path: str) -> Any:
        """Return the raw value at path.

        Raises:
            MissingFieldError: A segment of the path does not exist.
            TypeMismatchError: An intermediate value is not an object or array.
        """
        segments = parse(path)
        current: Any = self.object
        for i, seg in enumerate(segments):
            walked = join(segments[: i + 1])
            if isinstance(seg, int):
                if not isinstance(current, list):
                    raise TypeMismatchError(
                        path, f"{join(segments[:i])}: not an array"
                    )
                if seg >= len(current):
                    raise MissingFieldError(path, f"{walked}: no such field")
                current = current[seg]
                continue

            if not isinstance(current, dict):
                raise TypeMismatchError(path, f"{join(segments[:i])}: not an object")
            if seg not in current:
                raise MissingFieldError(path, f"{walked}: no such field")
            current = current[seg]
        return current

    def get_string(self, path: str) -> str:
        value = self.get_value(path)
        if not isinstance(value, str):
            raise TypeMismatchError(path, f"{path}: not a string")
        return value

    def get_integer(self, path: str) -> int:
        """Return an integer field.

        Integral floats are accepted since JSON documents decoded through
        the protocol's struct type carry every number as a float.
        """
        value = self.get_value(path)
        if isinstance(value, bool):
            raise TypeMismatchError(path, f"{path}: not a (int64) number")
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, int) and INT64_MIN <= value <= INT64_MAX:
            return value
        raise TypeMismatchError(path, f"{path}: not a (int64) number")

    def get_bool(self, path: str) -> bool:
        value = self.get_value(path)
        if not isinstance(value, bool):
            raise TypeMismatchError(path, f"{path}: not a bool")
        return value

    def get_string_object(self, path: str) -> dict[str, str]:
        """Return a map of strings, such as metadata labels."""
        value = self.get_value(path)
        if not isinstance(value, dict):
            raise TypeMismatchError(path, f"{path}: not an object")
        for key, item in value.items():
            if not isinstance(item, str):
                raise TypeMismatchError(path, f"{path}.{key}: not a string")
        return dict(value)
