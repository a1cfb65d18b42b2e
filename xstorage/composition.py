"""Derive the datacenter and volume from an XSeCaStorage composite."""

from __future__ import annotations

from .config.models import CompositionSettings
from .errors import FieldError, FunctionError
from .models import (
    TYPE_READY,
    ConditionStatus,
    Datacenter,
    DatacenterParameters,
    DatacenterSpec,
    ObjectMeta,
    Selector,
    StorageIntent,
    Volume,
    VolumeParameters,
    VolumeSpec,
)
from .resource import ObservedComposed, Unstructured

LABEL_DATACENTER_NAME = "ionos-cloud-datacenter-name"
LABEL_WORKSPACE = "ionos-cloud-dc"
LABEL_REGION = "ionos-cloud-region"
LABEL_TENANT = "ionos-cloud-tenant"

# Read in this order; the first failure aborts the invocation.
INTENT_FIELDS: list[tuple[str, str]] = [
    ("workspace", "string"),
    ("region", "string"),
    ("tenant", "string"),
    ("image", "string"),
    ("sizeGB", "integer"),
    ("name", "string"),
]


def extract_intent(xr: Unstructured) -> StorageIntent:
    """Read the storage intent from the composite's spec.

    Raises:
        FunctionError: Naming the first missing or mistyped field and the
            composite's kind.
    """
    values: dict[str, str | int] = {}
    for field_name, field_type in INTENT_FIELDS:
        path = f"spec.{field_name}"
        try:
            if field_type == "integer":
                values[field_name] = xr.get_integer(path)
            else:
                values[field_name] = xr.get_string(path)
        except FieldError as e:
            raise FunctionError(f"cannot read {path} field of {xr.get_kind()}: {e}") from e
    return StorageIntent(**values)


def normalize_region(region: str) -> str:
    """Turn a region code into a location, e.g. ``de-txl`` into ``de/txl``.

    Only the first dash is replaced.
    """
    return region.replace("-", "/", 1)


def datacenter_name(workspace: str) -> str:
    return f"{workspace}-datacenter"


def volume_name(workspace: str, separator: str = "-") -> str:
    return f"{workspace}{separator}volume"


def resource_key(prefix: str, identity: str) -> str:
    """Key a composed resource is stored under in the desired and observed maps."""
    return f"{prefix}-{identity}"


def build_datacenter(intent: StorageIntent, settings: CompositionSettings) -> Datacenter:
    """Build the datacenter grouping all resources of the workspace.

    The labels make the datacenter discoverable by the volume's selector.
    """
    name = datacenter_name(intent.workspace)
    location = normalize_region(intent.region) if settings.normalize_region else intent.region
    return Datacenter(
        metadata=ObjectMeta(
            name=name,
            labels={
                LABEL_DATACENTER_NAME: name,
                LABEL_WORKSPACE: intent.workspace,
                LABEL_REGION: intent.region,
                LABEL_TENANT: intent.tenant,
            },
        ),
        spec=DatacenterSpec(
            forProvider=DatacenterParameters(
                description=settings.description_template.format(workspace=intent.workspace),
                location=location,
                name=name,
            )
        ),
    )


def build_volume(intent: StorageIntent, settings: CompositionSettings) -> Volume:
    """Build the volume.

    The volume finds its datacenter through a label selector on the
    workspace and never holds the datacenter's name or ID.
    """
    return Volume(
        metadata=ObjectMeta(name=volume_name(intent.workspace, settings.volume_separator)),
        spec=VolumeSpec(
            forProvider=VolumeParameters(
                datacenterIdSelector=Selector(matchLabels={LABEL_WORKSPACE: intent.workspace}),
                diskType=settings.disk_type,
                imageName=intent.image,
                imagePassword=settings.image_password,
                name=intent.name,
                size=float(intent.sizeGB),
            )
        ),
    )


def is_ready(observed: dict[str, ObservedComposed], key: str) -> bool:
    """Check if the observed resource under key reports Ready=True."""
    oc = observed.get(key)
    if oc is None or oc.resource is None:
        return False
    return oc.resource.get_condition(TYPE_READY).status == ConditionStatus.TRUE
