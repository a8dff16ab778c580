"""DefinitionsExporter: renders definitions as a JSON or YAML document."""

from __future__ import annotations

import json
from typing import Any

import yaml

from swagspec.schema.types import DEFAULT_REF_PREFIX, Object, Schema

__all__ = ["DefinitionsExporter"]


class DefinitionsExporter:
    """Stateless transformer from the in-memory model to document dicts and text."""

    def __init__(self, ref_prefix: str = DEFAULT_REF_PREFIX) -> None:
        self._ref_prefix = ref_prefix

    def to_document(
        self,
        definitions: dict[str, Object],
        schemas: dict[str, Schema] | None = None,
    ) -> dict[str, Any]:
        """Build ``{"definitions": {...}}``, plus a ``schemas`` section when given."""
        document: dict[str, Any] = {
            "definitions": {name: obj.to_dict(self._ref_prefix) for name, obj in definitions.items()},
        }
        if schemas:
            document["schemas"] = {name: s.to_dict(self._ref_prefix) for name, s in schemas.items()}
        return document

    def export(
        self,
        definitions: dict[str, Object],
        format: str = "json",
        schemas: dict[str, Schema] | None = None,
    ) -> str:
        """Render the document as a JSON or YAML string."""
        document = self.to_document(definitions, schemas)
        if format == "json":
            return json.dumps(document, indent=2)
        if format == "yaml":
            return yaml.safe_dump(document, default_flow_style=False, sort_keys=False)
        raise ValueError(f"Unsupported export format: {format}")
