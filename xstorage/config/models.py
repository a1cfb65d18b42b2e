"""Configuration models for xstorage."""

from __future__ import annotations

import string
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class CompositionSettings(BaseModel):
    """How the datacenter and volume are derived from the composite."""

    resource_prefix: str = Field(
        default="xservers", description="Prefix of the composed resource keys"
    )
    volume_separator: Literal["-", "_"] = Field(
        default="-", description="Separator between workspace and 'volume' in the volume name"
    )
    normalize_region: bool = Field(
        default=True, description="Rewrite region codes like de-txl to locations like de/txl"
    )
    disk_type: str = Field(default="SSD", description="Disk type of the volume")
    image_password: str = Field(
        default="thisisnotapassword", description="Image password set on the volume"
    )
    description_template: str = Field(
        default="Datacenter for {workspace}",
        description="Datacenter description, formatted with the workspace name",
    )

    @field_validator("description_template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        """Only the {workspace} placeholder may be used."""
        try:
            for _, field_name, _, _ in string.Formatter().parse(value):
                if field_name is not None and field_name != "workspace":
                    raise KeyError(field_name)
            value.format(workspace="workspace")
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            raise ValueError(f"invalid description template {value!r}: {e!r}") from e
        return value


class FunctionSettings(BaseModel):
    """Global settings."""

    ttl_seconds: int = Field(
        default=60, ge=0, description="How long the runtime may cache a response"
    )
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING)")


class XStorageConfig(BaseModel):
    """Root configuration model."""

    version: int = Field(default=1)
    composition: CompositionSettings = Field(default_factory=CompositionSettings)
    settings: FunctionSettings = Field(default_factory=FunctionSettings)
