"""swagspec schema engine -- public API.

Re-exports all public classes, functions, and types from schema submodules.

Example usage::

    from swagspec.schema import SchemaBuilder, DefinitionsExporter

    builder = SchemaBuilder()
    body = builder.make_schema(Pet)
    print(DefinitionsExporter().export(builder.definitions, format="yaml"))
"""

from __future__ import annotations

from swagspec.schema.builder import SchemaBuilder, make_schema, merge_definitions
from swagspec.schema.custom_types import CustomTypeRegistry, default_registry, register_defaults
from swagspec.schema.definer import ObjectDefiner
from swagspec.schema.descriptor import (
    FieldDescriptor,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Kind,
    RawMessage,
    TypeDescriptor,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    describe,
    describe_prototype,
)
from swagspec.schema.exporter import DefinitionsExporter
from swagspec.schema.inspector import PropertyInspector
from swagspec.schema.naming import make_name
from swagspec.schema.ref_resolver import RefResolver
from swagspec.schema.tags import Tag
from swagspec.schema.types import DEFAULT_REF_PREFIX, Object, Property, Schema, make_ref

__all__ = [
    "DEFAULT_REF_PREFIX",
    "Property",
    "Object",
    "Schema",
    "make_ref",
    "make_name",
    "Kind",
    "TypeDescriptor",
    "FieldDescriptor",
    "describe",
    "describe_prototype",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Float32",
    "Float64",
    "RawMessage",
    "Tag",
    "CustomTypeRegistry",
    "default_registry",
    "register_defaults",
    "PropertyInspector",
    "ObjectDefiner",
    "RefResolver",
    "SchemaBuilder",
    "make_schema",
    "merge_definitions",
    "DefinitionsExporter",
]
