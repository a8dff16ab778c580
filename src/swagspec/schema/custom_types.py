"""Custom type registry: fixed Property overrides for specific types."""

from __future__ import annotations

import dataclasses
import datetime
import logging
import uuid
from typing import Any

from swagspec.schema.descriptor import Kind, describe
from swagspec.schema.types import Property

__all__ = ["CustomTypeRegistry", "register_defaults", "default_registry"]

logger = logging.getLogger(__name__)


class CustomTypeRegistry:
    """Maps a type identity to a pre-defined Property.

    Registered types bypass structural inspection entirely. This is how
    types with their own textual encoding (``datetime``, ``UUID``) render
    as strings instead of records.

    Registering ``datetime`` also applies to ``Optional[datetime]`` unless
    ``Optional[datetime]`` is registered itself; the fallback result is
    marked nullable.

    Registration is expected to finish before schemas are generated. The
    registry performs no locking.
    """

    def __init__(self) -> None:
        self._entries: dict[Any, Property] = {}

    def register(self, tp: Any, prop: Property) -> None:
        """Register ``prop`` for ``tp``. Registering the same type again replaces the entry."""
        descriptor = describe(tp)
        self._entries[descriptor.key] = dataclasses.replace(prop, type_ref=descriptor)
        logger.debug(f"Registered custom type {descriptor!r}")

    def lookup(self, tp: Any) -> Property | None:
        """Return a copy of the registered Property for ``tp``, or None.

        Exact match first; pointer types then fall back to their pointee.
        """
        descriptor = describe(tp)
        prop = self._entries.get(descriptor.key)
        if prop is not None:
            return dataclasses.replace(prop)

        if descriptor.kind == Kind.POINTER and descriptor.elem is not None:
            prop = self._entries.get(descriptor.elem.key)
            if prop is not None:
                return dataclasses.replace(prop, nullable=True)
        return None

    def __contains__(self, tp: Any) -> bool:
        descriptor = describe(tp)
        return descriptor.key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def register_defaults(registry: CustomTypeRegistry) -> CustomTypeRegistry:
    """Seed ``registry`` with the date/time and UUID overrides."""
    registry.register(datetime.datetime, Property(type="string", format="date-time"))
    registry.register(datetime.date, Property(type="string", format="date"))
    registry.register(datetime.time, Property(type="string", pattern=r"^\d\d:\d\d:\d\d$"))
    registry.register(uuid.UUID, Property(type="string", format="uuid"))
    return registry


def default_registry() -> CustomTypeRegistry:
    """Create a registry pre-seeded with the default overrides."""
    return register_defaults(CustomTypeRegistry())
