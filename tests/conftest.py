"""Shared test fixtures for the schema engine test suite."""

from __future__ import annotations

import pytest

from swagspec.config import Config
from swagspec.schema.builder import SchemaBuilder
from swagspec.schema.custom_types import CustomTypeRegistry, default_registry
from swagspec.schema.definer import ObjectDefiner
from swagspec.schema.inspector import PropertyInspector
from swagspec.schema.ref_resolver import RefResolver


@pytest.fixture
def registry() -> CustomTypeRegistry:
    """A registry seeded with the default date/time and UUID overrides."""
    return default_registry()


@pytest.fixture
def inspector(registry: CustomTypeRegistry) -> PropertyInspector:
    """Inspector without module-qualified names."""
    return PropertyInspector(registry=registry)


@pytest.fixture
def definer(inspector: PropertyInspector) -> ObjectDefiner:
    return ObjectDefiner(inspector=inspector)


@pytest.fixture
def resolver(definer: ObjectDefiner) -> RefResolver:
    return RefResolver(definer=definer)


@pytest.fixture
def builder(registry: CustomTypeRegistry) -> SchemaBuilder:
    """A SchemaBuilder with an empty definitions table."""
    return SchemaBuilder(config=Config(), registry=registry)


@pytest.fixture
def qualified_config() -> Config:
    """Config enabling module-qualified definition names."""
    return Config(data={"schema": {"qualify_names": True}})
