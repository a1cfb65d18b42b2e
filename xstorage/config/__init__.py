"""Configuration module for xstorage."""

from .loader import ConfigLoader, load_config
from .models import CompositionSettings, FunctionSettings, XStorageConfig

__all__ = [
    "CompositionSettings",
    "ConfigLoader",
    "FunctionSettings",
    "XStorageConfig",
    "load_config",
]
