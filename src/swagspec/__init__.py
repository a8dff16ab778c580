"""swagspec - API schema definitions inferred from Python types."""

from __future__ import annotations

# Config
from swagspec.config import Config

# Errors
from swagspec.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidPatternError,
    SwagspecError,
    TagParseError,
    UnsupportedTypeError,
)

# Schema engine
from swagspec.schema import (
    CustomTypeRegistry,
    DefinitionsExporter,
    Object,
    ObjectDefiner,
    Property,
    PropertyInspector,
    RefResolver,
    Schema,
    SchemaBuilder,
    Tag,
    make_schema,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "SwagspecError",
    "ConfigError",
    "ConfigNotFoundError",
    "TagParseError",
    "InvalidPatternError",
    "UnsupportedTypeError",
    # Model
    "Property",
    "Object",
    "Schema",
    "Tag",
    # Engine
    "CustomTypeRegistry",
    "PropertyInspector",
    "ObjectDefiner",
    "RefResolver",
    "SchemaBuilder",
    "make_schema",
    "DefinitionsExporter",
]
