"""SchemaBuilder: public entry point for body and response schemas."""

from __future__ import annotations

import logging
from typing import Any

from swagspec.config import Config
from swagspec.schema.custom_types import CustomTypeRegistry
from swagspec.schema.definer import ObjectDefiner
from swagspec.schema.inspector import PropertyInspector
from swagspec.schema.ref_resolver import RefResolver
from swagspec.schema.types import DEFAULT_REF_PREFIX, Object, Property, Schema

__all__ = ["SchemaBuilder", "make_schema", "merge_definitions"]

logger = logging.getLogger(__name__)


def merge_definitions(target: dict[str, Object], source: dict[str, Object]) -> dict[str, Object]:
    """Merge ``source`` into ``target`` in place. Existing names are replaced."""
    for name, obj in source.items():
        if name in target and target[name] != obj:
            logger.debug(f"Replacing definition '{name}'")
        target[name] = obj
    return target


class SchemaBuilder:
    """Builds Schemas and accumulates the definitions they reference.

    One builder is meant to serve a whole API document: every
    ``make_schema`` call merges its definitions into ``definitions``.
    """

    def __init__(self, config: Config | None = None, registry: CustomTypeRegistry | None = None) -> None:
        self._config = config or Config()
        inspector = PropertyInspector(
            registry=registry,
            qualify_names=self._config.qualify_names,
        )
        self._definer = ObjectDefiner(inspector=inspector, config=self._config)
        self._resolver = RefResolver(definer=self._definer)
        self.definitions: dict[str, Object] = {}

    @property
    def ref_prefix(self) -> str:
        return str(self._config.get("schema.ref_prefix", DEFAULT_REF_PREFIX))

    @property
    def resolver(self) -> RefResolver:
        return self._resolver

    def make_schema(self, prototype: Any) -> Schema:
        """Build the Schema for ``prototype`` and merge its definitions.

        Sequence prototypes produce ``{"type": "array", "items": {"$ref": ...}}``,
        everything else ``{"$ref": ...}``.
        """
        root = self._definer.define(prototype)
        merge_definitions(self.definitions, self._resolver.resolve(prototype))

        if root.is_array:
            return Schema(
                type="array",
                items=Property(ref=root.name, type_ref=root.type_ref),
                prototype=prototype,
            )
        return Schema(ref=root.name, prototype=prototype)


def make_schema(
    prototype: Any,
    config: Config | None = None,
    registry: CustomTypeRegistry | None = None,
) -> tuple[Schema, dict[str, Object]]:
    """Build a Schema for ``prototype`` together with its resolved definitions."""
    builder = SchemaBuilder(config=config, registry=registry)
    schema = builder.make_schema(prototype)
    return schema, builder.definitions
