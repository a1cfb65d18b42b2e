"""Configuration file loader."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import XStorageConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load xstorage configuration."""

    CONFIG_FILENAME = "xstorage.yaml"
    USER_CONFIG_DIR = Path.home() / ".xstorage"

    def __init__(self, project_path: Path | None = None):
        """Initialize config loader.

        Args:
            project_path: Project directory path. If None, uses current directory.
        """
        self._project_path = project_path or Path.cwd()

    def get_config_path(self) -> Path | None:
        """Find config file (project-level first, then user-level).

        Returns:
            Path to config file if found, None otherwise.
        """
        project_config = self._project_path / self.CONFIG_FILENAME
        if project_config.exists():
            return project_config

        user_config = self.USER_CONFIG_DIR / self.CONFIG_FILENAME
        if user_config.exists():
            return user_config

        return None

    def load(self) -> XStorageConfig:
        """Load configuration, returning defaults if no config exists.

        Returns:
            XStorageConfig with loaded or default values.
        """
        config_path = self.get_config_path()
        if config_path is None:
            logger.debug("No config file found, using defaults")
            return XStorageConfig()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

            config = XStorageConfig.model_validate(data)
            logger.info(f"Loaded config from: {config_path}")
            return config
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            return XStorageConfig()


def load_config(project_path: Path | str | None = None) -> XStorageConfig:
    """Load configuration from project or user directory.

    Convenience function that creates a ConfigLoader and loads config.

    Args:
        project_path: Project directory path. If None, uses current directory.

    Returns:
        XStorageConfig with loaded or default values.
    """
    path = Path(project_path) if project_path else None
    return ConfigLoader(path).load()
