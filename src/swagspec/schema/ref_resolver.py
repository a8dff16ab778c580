"""Reference closure: collects every Object reachable from a root type."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any

from swagspec.config import Config
from swagspec.schema.definer import ObjectDefiner
from swagspec.schema.descriptor import Kind, TypeDescriptor
from swagspec.schema.types import Object, Property

__all__ = ["RefResolver"]

logger = logging.getLogger(__name__)


class RefResolver:
    """Resolves ``ref`` properties into a flat map of named Objects.

    Starting from the root definition, every referenced record that is not
    yet defined is defined once and queued for its own references. Names
    already present are skipped, which also terminates self-referencing
    and mutually-referencing records.
    """

    def __init__(self, definer: ObjectDefiner | None = None, config: Config | None = None) -> None:
        self._definer = definer if definer is not None else ObjectDefiner(config=config)

    @property
    def definer(self) -> ObjectDefiner:
        return self._definer

    def resolve(self, prototype: Any) -> dict[str, Object]:
        """Return ``{name: Object}`` for the root and everything it references."""
        root = self._definer.define(prototype)
        definitions: dict[str, Object] = {root.name: root}
        queue: deque[Object] = deque([root])

        while queue:
            obj = queue.popleft()
            for prop in obj.properties.values():
                target = self._ref_target(prop)
                if target is None:
                    continue
                name = self._definer.name_of(target)
                if name in definitions:
                    continue
                logger.debug(f"Resolving reference '{name}' from '{obj.name}'")
                child = self._definer.define(target)
                definitions[child.name] = child
                queue.append(child)

        logger.debug(f"Resolved {len(definitions)} definitions for '{root.name}'")
        return definitions

    def _ref_target(self, prop: Property) -> TypeDescriptor | None:
        """The record descriptor behind a ref or (nested) array-of-ref property."""
        while prop.items is not None:
            prop = prop.items
        target = prop.type_ref
        if not prop.ref or target is None or target.kind != Kind.RECORD:
            return None
        if target in self._definer.inspector.registry:
            return None
        return target
