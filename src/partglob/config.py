"""Configuration loading."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from partglob.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config"]

logger = logging.getLogger(__name__)

_MISSING = object()


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        An empty file yields an empty configuration.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML or not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        logger.debug("Loaded configuration from %s", yaml_path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dot-separated ``key`` such as ``"patterns.rules"``.

        Returns ``default`` when any step of the path is absent or passes
        through a value that is not a mapping.
        """
        node: Any = self._data
        for name in key.split("."):
            node = node.get(name, _MISSING) if isinstance(node, dict) else _MISSING
            if node is _MISSING:
                return default
        return node
