"""PropertyInspector: derives the schema Property for a single type."""

from __future__ import annotations

from typing import Any, Callable

from swagspec.schema.custom_types import CustomTypeRegistry, default_registry
from swagspec.schema.descriptor import FLOAT_KINDS, INTEGER_KINDS, Kind, TypeDescriptor, describe
from swagspec.schema.naming import make_name
from swagspec.schema.tags import Tag
from swagspec.schema.types import Property

__all__ = ["PropertyInspector"]

_INT32_KINDS = frozenset({Kind.INT8, Kind.INT16, Kind.INT32, Kind.UINT8, Kind.UINT16, Kind.UINT32})

# Tags on a sequence field that describe its elements rather than the array.
_ELEMENT_TAG_KEYS = ("format", "enum", "min_length", "max_length", "pattern")


class PropertyInspector:
    """Produces exactly one Property per type.

    Records are never expanded inline; they become ``ref`` properties that
    the RefResolver later turns into definitions.
    """

    def __init__(self, registry: CustomTypeRegistry | None = None, qualify_names: bool = False) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._qualify_names = qualify_names

    @property
    def registry(self) -> CustomTypeRegistry:
        return self._registry

    @property
    def qualify_names(self) -> bool:
        return self._qualify_names

    def inspect(self, tp: Any, tag: Tag | None = None) -> Property:
        """Return the Property for ``tp`` with the constraints from ``tag`` applied.

        Raises TagParseError (or InvalidPatternError) for malformed tag values.
        """
        descriptor = describe(tp)
        tag = tag if tag is not None else Tag()

        prop = self._registry.lookup(descriptor)
        if prop is not None:
            return prop

        if tag.string_encoded():
            return Property(type="string", type_ref=descriptor)

        prop = self._inspect_kind(descriptor, tag)
        if descriptor.enum_values and not prop.enum:
            prop.enum = list(descriptor.enum_values)
        description = tag.get("description")
        if description:
            prop.description = description
        return prop

    def _inspect_kind(self, descriptor: TypeDescriptor, tag: Tag) -> Property:
        kind = descriptor.kind

        if kind in INTEGER_KINDS:
            prop = Property(type="integer", format="int32" if kind in _INT32_KINDS else "int64", type_ref=descriptor)
            self._apply_numeric(prop, tag, tag.get_int)
            return prop

        if kind in FLOAT_KINDS:
            prop = Property(type="number", format="float" if kind == Kind.FLOAT32 else "double", type_ref=descriptor)
            self._apply_numeric(prop, tag, tag.get_float)
            return prop

        if kind == Kind.BOOL:
            return Property(type="boolean", default=tag.get_bool("default"), type_ref=descriptor)

        if kind == Kind.STRING:
            prop = Property(type="string", type_ref=descriptor)
            self._apply_string(prop, tag)
            return prop

        if kind == Kind.RECORD:
            return Property(ref=make_name(descriptor, self._qualify_names), type_ref=descriptor)

        if kind == Kind.POINTER:
            assert descriptor.elem is not None
            prop = self.inspect(descriptor.elem, tag)
            prop.nullable = True
            return prop

        if kind == Kind.MAP:
            return Property(type="object", type_ref=descriptor)

        if kind == Kind.SEQUENCE:
            if descriptor.opaque:
                return Property(type="object", type_ref=descriptor)
            assert descriptor.elem is not None
            element_tag = Tag({k: tag[k] for k in _ELEMENT_TAG_KEYS if k in tag}, field=tag.field)
            return Property(type="array", items=self.inspect(descriptor.elem, element_tag), type_ref=descriptor)

        return Property(type_ref=descriptor)

    @staticmethod
    def _apply_numeric(prop: Property, tag: Tag, parse: Callable[[str], Any]) -> None:
        prop.default = parse("default")
        prop.minimum = parse("minimum")
        prop.maximum = parse("maximum")
        prop.exclusive_minimum = bool(tag.get_bool("exclusive_minimum"))
        prop.exclusive_maximum = bool(tag.get_bool("exclusive_maximum"))

    @staticmethod
    def _apply_string(prop: Property, tag: Tag) -> None:
        prop.default = tag.get("default") or None
        prop.format = tag.get_format()
        prop.enum = tag.get_enum()
        prop.min_length = tag.get_int("min_length")
        prop.max_length = tag.get_int("max_length")
        prop.pattern = tag.get_pattern()
