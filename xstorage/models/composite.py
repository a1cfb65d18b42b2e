"""Typed view of the XSeCaStorage composite resource spec."""

from pydantic import BaseModel, Field


class StorageIntent(BaseModel):
    """Fields read from the composite resource's spec."""

    workspace: str = Field(..., description="Workspace the storage belongs to")
    region: str = Field(..., description="Region code, e.g. de-txl")
    tenant: str = Field(..., description="Owning tenant")
    image: str = Field(..., description="Image the volume is created from")
    sizeGB: int = Field(..., description="Volume size in GB")
    name: str = Field(..., description="Volume name")

    class Config:
        frozen = True
