"""Schema document model: Property, Object and Schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from swagspec.schema.descriptor import TypeDescriptor

__all__ = [
    "DEFAULT_REF_PREFIX",
    "Property",
    "Object",
    "Schema",
    "make_ref",
]

DEFAULT_REF_PREFIX = "#/definitions/"


def make_ref(name: str, prefix: str = DEFAULT_REF_PREFIX) -> str:
    """Build the reference string for a named definition."""
    return f"{prefix}{name}"


@dataclass
class Property:
    """Schema fragment for a single field or array element.

    Exactly one of ``type`` and ``ref`` is set for a non-array property;
    ``items`` is set when ``type == "array"``. ``type_ref`` keeps the
    descriptor the property was derived from (the referenced record for
    ``ref`` properties) and is never serialized.
    """

    type: str = ""
    format: str = ""
    ref: str = ""
    items: Property | None = None
    default: Any = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    exclusive_minimum: bool = False
    exclusive_maximum: bool = False
    min_length: int | None = None
    max_length: int | None = None
    pattern: str = ""
    enum: list[Any] = field(default_factory=list)
    nullable: bool = False
    description: str = ""
    type_ref: TypeDescriptor | None = field(default=None, compare=False, repr=False)

    def to_dict(self, ref_prefix: str = DEFAULT_REF_PREFIX) -> dict[str, Any]:
        """Serialize, omitting every attribute left at its zero value."""
        result: dict[str, Any] = {}
        if self.ref:
            result["$ref"] = make_ref(self.ref, ref_prefix)
        if self.type:
            result["type"] = self.type
        if self.format:
            result["format"] = self.format
        if self.items is not None:
            result["items"] = self.items.to_dict(ref_prefix)
        if self.default is not None:
            result["default"] = self.default
        if self.minimum is not None:
            result["minimum"] = self.minimum
        if self.maximum is not None:
            result["maximum"] = self.maximum
        if self.exclusive_minimum:
            result["exclusiveMinimum"] = True
        if self.exclusive_maximum:
            result["exclusiveMaximum"] = True
        if self.min_length is not None:
            result["minLength"] = self.min_length
        if self.max_length is not None:
            result["maxLength"] = self.max_length
        if self.pattern:
            result["pattern"] = self.pattern
        if self.enum:
            result["enum"] = list(self.enum)
        if self.nullable:
            result["nullable"] = True
        if self.description:
            result["description"] = self.description
        return result


@dataclass
class Object:
    """Named schema definition for one record type.

    Non-record roots produce a degenerate Object named after the primitive
    kind, carrying ``type``/``format`` and no properties.
    """

    name: str
    type: str = "object"
    format: str = ""
    is_array: bool = False
    properties: dict[str, Property] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    type_ref: TypeDescriptor | None = field(default=None, compare=False, repr=False)

    def to_dict(self, ref_prefix: str = DEFAULT_REF_PREFIX) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.type}
        if self.format:
            result["format"] = self.format
        if self.required:
            result["required"] = list(self.required)
        if self.properties:
            result["properties"] = {name: p.to_dict(ref_prefix) for name, p in self.properties.items()}
        return result


@dataclass
class Schema:
    """Property attached to a request body or response.

    Either ``{"$ref": ...}`` or ``{"type": "array", "items": {"$ref": ...}}``.
    ``prototype`` retains the originating value or type so callers can
    resolve it again.
    """

    type: str = ""
    items: Property | None = None
    ref: str = ""
    prototype: Any = field(default=None, compare=False, repr=False)

    def to_dict(self, ref_prefix: str = DEFAULT_REF_PREFIX) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.type:
            result["type"] = self.type
        if self.items is not None:
            result["items"] = self.items.to_dict(ref_prefix)
        if self.ref:
            result["$ref"] = make_ref(self.ref, ref_prefix)
        return result
