"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from swagspec.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config"]


class Config:
    """Engine settings read from a nested mapping.

    Recognized keys:
        schema.qualify_names: prefix object names with their defining module.
        schema.ref_prefix: prefix used when rendering ``$ref`` strings.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file. An empty file gives the defaults."""
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigNotFoundError(config_path=str(file_path))

        try:
            data = yaml.safe_load(file_path.read_text())
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in {file_path}: {e}", config_path=str(file_path), cause=e) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(
                message=f"Configuration file {file_path} must be a YAML mapping, got {type(data).__name__}",
                config_path=str(file_path),
            )
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up ``key`` as a dot path such as ``schema.ref_prefix``.

        Returns ``default`` as soon as a segment is missing or the path runs
        through a non-mapping value.
        """
        node: Any = self._data
        for segment in key.split("."):
            if not isinstance(node, dict) or segment not in node:
                return default
            node = node[segment]
        return node

    @property
    def qualify_names(self) -> bool:
        return bool(self.get("schema.qualify_names", False))
