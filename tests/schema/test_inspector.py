"""Tests for PropertyInspector."""

from __future__ import annotations

import datetime
import enum
import uuid
from dataclasses import dataclass
from typing import Any, Literal, Optional

import pytest

from swagspec.errors import InvalidPatternError, TagParseError
from swagspec.schema.custom_types import CustomTypeRegistry
from swagspec.schema.descriptor import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    RawMessage,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    describe,
)
from swagspec.schema.inspector import PropertyInspector
from swagspec.schema.tags import Tag
from swagspec.schema.types import Property


@dataclass
class Person:
    first: str


class Size(str, enum.Enum):
    SMALL = "small"
    LARGE = "large"


# === Primitive kinds ===


class TestPrimitives:
    @pytest.mark.parametrize(
        "tp, expected",
        [
            (Int8, ("integer", "int32")),
            (Int16, ("integer", "int32")),
            (Int32, ("integer", "int32")),
            (UInt8, ("integer", "int32")),
            (UInt16, ("integer", "int32")),
            (UInt32, ("integer", "int32")),
            (Int64, ("integer", "int64")),
            (UInt64, ("integer", "int64")),
            (int, ("integer", "int64")),
            (Float64, ("number", "double")),
            (float, ("number", "double")),
            (Float32, ("number", "float")),
            (bool, ("boolean", "")),
            (str, ("string", "")),
        ],
    )
    def test_type_and_format(self, inspector: PropertyInspector, tp: Any, expected: tuple[str, str]) -> None:
        prop = inspector.inspect(tp)
        assert (prop.type, prop.format) == expected
        assert prop.ref == ""

    def test_map_is_opaque_object(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(dict[str, int])
        assert prop.type == "object"
        assert prop.items is None

    def test_any_is_empty(self, inspector: PropertyInspector) -> None:
        assert inspector.inspect(Any).to_dict() == {}


# === Numeric tags ===


class TestNumericTags:
    def test_integer_bounds(self, inspector: PropertyInspector) -> None:
        tag = Tag({"default": "5", "minimum": "1", "maximum": "10", "exclusive_maximum": "true"})
        prop = inspector.inspect(Int32, tag)
        assert prop.default == 5
        assert prop.minimum == 1
        assert prop.maximum == 10
        assert prop.exclusive_maximum
        assert not prop.exclusive_minimum

    def test_float_bounds(self, inspector: PropertyInspector) -> None:
        tag = Tag({"default": "0.5", "minimum": "0", "maximum": "1.5", "exclusive_minimum": "1"})
        prop = inspector.inspect(float, tag)
        assert prop.default == 0.5
        assert prop.minimum == 0.0
        assert prop.maximum == 1.5
        assert prop.exclusive_minimum

    def test_malformed_integer_default_raises(self, inspector: PropertyInspector) -> None:
        with pytest.raises(TagParseError) as exc_info:
            inspector.inspect(Int64, Tag({"default": "ten"}, field="Count"))
        assert exc_info.value.field == "Count"

    def test_float_literal_on_integer_raises(self, inspector: PropertyInspector) -> None:
        with pytest.raises(TagParseError):
            inspector.inspect(int, Tag({"maximum": "1.5"}))

    def test_malformed_exclusive_flag_raises(self, inspector: PropertyInspector) -> None:
        with pytest.raises(TagParseError):
            inspector.inspect(float, Tag({"exclusive_minimum": "maybe"}))

    def test_boolean_default(self, inspector: PropertyInspector) -> None:
        assert inspector.inspect(bool, Tag({"default": "true"})).default is True

    def test_malformed_boolean_default_raises(self, inspector: PropertyInspector) -> None:
        with pytest.raises(TagParseError):
            inspector.inspect(bool, Tag({"default": "yes"}))


# === String tags ===


class TestStringTags:
    def test_constraints(self, inspector: PropertyInspector) -> None:
        tag = Tag({"default": "x", "format": "email", "min_length": "1", "max_length": "64", "pattern": "^.+@.+$"})
        prop = inspector.inspect(str, tag)
        assert prop.default == "x"
        assert prop.format == "email"
        assert prop.min_length == 1
        assert prop.max_length == 64
        assert prop.pattern == "^.+@.+$"

    def test_whitespace_default_and_pattern_preserved(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(str, Tag({"default": " ", "pattern": "^ +$"}))
        assert prop.default == " "
        assert prop.pattern == "^ +$"

    def test_format_enum(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(str, Tag({"format": "enum,asc,desc"}))
        assert prop.enum == ["asc", "desc"]
        assert prop.format == ""

    def test_enum_tag(self, inspector: PropertyInspector) -> None:
        assert inspector.inspect(str, Tag({"enum": "a,b"})).enum == ["a", "b"]

    def test_invalid_pattern_raises(self, inspector: PropertyInspector) -> None:
        with pytest.raises(InvalidPatternError):
            inspector.inspect(str, Tag({"pattern": "(unclosed"}))

    def test_malformed_length_raises(self, inspector: PropertyInspector) -> None:
        with pytest.raises(TagParseError):
            inspector.inspect(str, Tag({"max_length": "long"}))

    def test_string_enum_class(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(Size)
        assert prop.type == "string"
        assert prop.enum == ["small", "large"]

    def test_literal(self, inspector: PropertyInspector) -> None:
        assert inspector.inspect(Literal["on", "off"]).enum == ["on", "off"]

    def test_tag_enum_overrides_class_enum(self, inspector: PropertyInspector) -> None:
        assert inspector.inspect(Size, Tag({"enum": "small"})).enum == ["small"]

    def test_description(self, inspector: PropertyInspector) -> None:
        assert inspector.inspect(str, Tag({"description": "Display name"})).description == "Display name"


# === String-encoded fields ===


class TestStringEncoded:
    def test_integer_encoded_as_string(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(Int64, Tag({"json": "id,string"}))
        assert prop.to_dict() == {"type": "string"}

    def test_string_option_skips_tag_parsing(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(Int64, Tag({"json": "id,string", "default": "not-a-number"}))
        assert prop.type == "string"


# === Records and pointers ===


class TestReferences:
    def test_record_is_ref(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(Person)
        assert prop.ref == "Person"
        assert prop.type == ""
        assert prop.type_ref == describe(Person)
        assert prop.to_dict() == {"$ref": "#/definitions/Person"}

    def test_pointer_to_record_is_nullable_ref(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(Optional[Person])
        assert prop.ref == "Person"
        assert prop.nullable

    def test_pointer_to_primitive(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(Optional[Int32])
        assert (prop.type, prop.format, prop.nullable) == ("integer", "int32", True)

    def test_qualified_ref(self, registry: CustomTypeRegistry) -> None:
        inspector = PropertyInspector(registry=registry, qualify_names=True)
        module = Person.__module__.rsplit(".", 1)[-1]
        assert inspector.inspect(Person).ref == f"{module}Person"


# === Sequences ===


class TestSequences:
    def test_array_of_primitives(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(list[Int32])
        assert prop.to_dict() == {"type": "array", "items": {"type": "integer", "format": "int32"}}

    def test_array_of_records(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(list[Person])
        assert prop.type == "array"
        assert prop.items is not None
        assert prop.items.ref == "Person"

    def test_array_of_pointers(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(list[Optional[Person]])
        assert prop.items is not None
        assert prop.items.ref == "Person"

    def test_element_tags_apply_to_items(self, inspector: PropertyInspector) -> None:
        tag = Tag({"enum": "a,b", "min_length": "1", "max_length": "3", "pattern": "^[ab]$", "format": "code"})
        prop = inspector.inspect(list[str], tag)
        assert prop.enum == []
        assert prop.min_length is None
        assert prop.pattern == ""
        assert prop.items == Property(
            type="string", format="code", enum=["a", "b"], min_length=1, max_length=3, pattern="^[ab]$"
        )

    def test_element_format_enum(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(list[str], Tag({"format": "enum,x,y"}))
        assert prop.items is not None
        assert prop.items.enum == ["x", "y"]

    def test_invalid_element_pattern_raises(self, inspector: PropertyInspector) -> None:
        with pytest.raises(InvalidPatternError):
            inspector.inspect(list[str], Tag({"pattern": "["}))

    def test_nested_arrays(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(list[list[str]])
        assert prop.to_dict() == {"type": "array", "items": {"type": "array", "items": {"type": "string"}}}

    def test_bytes_are_integer_items(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(bytes)
        assert prop.to_dict() == {"type": "array", "items": {"type": "integer", "format": "int32"}}

    def test_raw_message_is_object(self, inspector: PropertyInspector) -> None:
        assert inspector.inspect(RawMessage).to_dict() == {"type": "object"}


# === Registry overrides ===


class TestRegistryOverride:
    def test_record_shaped_datetime_is_string(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(datetime.datetime)
        assert prop.to_dict() == {"type": "string", "format": "date-time"}

    def test_optional_datetime_is_nullable(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(Optional[datetime.datetime])
        assert prop.to_dict() == {"type": "string", "format": "date-time", "nullable": True}

    def test_uuid(self, inspector: PropertyInspector) -> None:
        assert inspector.inspect(uuid.UUID).format == "uuid"

    def test_registry_short_circuits_tags(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(datetime.datetime, Tag({"json": "at,string", "pattern": "["}))
        assert prop.to_dict() == {"type": "string", "format": "date-time"}

    def test_custom_override_of_record(self, registry: CustomTypeRegistry) -> None:
        registry.register(Person, Property(type="string", description="Full name"))
        inspector = PropertyInspector(registry=registry)
        assert inspector.inspect(Person).to_dict() == {"type": "string", "description": "Full name"}

    def test_array_of_registered(self, inspector: PropertyInspector) -> None:
        prop = inspector.inspect(list[datetime.date])
        assert prop.items is not None
        assert prop.items.to_dict() == {"type": "string", "format": "date"}
