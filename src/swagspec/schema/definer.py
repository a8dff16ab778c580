"""ObjectDefiner: builds one Object definition per record type."""

from __future__ import annotations

import logging
from typing import Any

from swagspec.config import Config
from swagspec.schema.descriptor import Kind, TypeDescriptor, describe_prototype
from swagspec.schema.inspector import PropertyInspector
from swagspec.schema.naming import make_name
from swagspec.schema.types import Object, Property

__all__ = ["ObjectDefiner"]

logger = logging.getLogger(__name__)


class ObjectDefiner:
    """Turns a record type (or value) into a named Object.

    Nested records are not expanded; they appear as ``ref`` properties.
    """

    def __init__(self, inspector: PropertyInspector | None = None, config: Config | None = None) -> None:
        self._config = config or Config()
        if inspector is None:
            inspector = PropertyInspector(qualify_names=self._config.qualify_names)
        self._inspector = inspector

    @property
    def inspector(self) -> PropertyInspector:
        return self._inspector

    def name_of(self, descriptor: TypeDescriptor) -> str:
        return make_name(descriptor, self._inspector.qualify_names)

    def define(self, prototype: Any) -> Object:
        """Define an Object for a type, a typing construct or a live value.

        Sequences mark the Object ``is_array`` and describe their element
        type; pointers are dereferenced. Non-record types produce a
        degenerate Object named after their kind.
        """
        descriptor = describe_prototype(prototype)

        is_array = descriptor.kind == Kind.SEQUENCE and not descriptor.opaque
        if is_array:
            assert descriptor.elem is not None
            descriptor = descriptor.elem
        if descriptor.kind == Kind.POINTER:
            assert descriptor.elem is not None
            descriptor = descriptor.elem

        if descriptor.kind != Kind.RECORD or descriptor in self._inspector.registry:
            prop = self._inspector.inspect(descriptor)
            name = self.name_of(descriptor) if descriptor.kind == Kind.RECORD else make_name(descriptor)
            return Object(
                name=name,
                type=prop.type,
                format=prop.format,
                is_array=is_array,
                type_ref=descriptor,
            )

        properties: dict[str, Property] = {}
        required: list[str] = []
        self._collect_fields(descriptor, properties, required, embedding={descriptor.key})

        obj = Object(
            name=self.name_of(descriptor),
            is_array=is_array,
            properties=properties,
            required=required,
            type_ref=descriptor,
        )
        logger.debug(f"Defined object '{obj.name}' with {len(properties)} properties")
        return obj

    def _collect_fields(
        self,
        descriptor: TypeDescriptor,
        properties: dict[str, Property],
        required: list[str],
        embedding: set[Any],
    ) -> None:
        """Add the fields of ``descriptor`` in declaration order.

        Anonymous record fields without a serialization name are flattened
        into the enclosing record, transitively.
        """
        for field in descriptor.fields:
            if not field.exported:
                continue
            tag = field.tag
            if tag.omitted():
                continue

            if field.anonymous and not tag.json_name():
                target = field.type.elem if field.type.kind == Kind.POINTER else field.type
                if target is not None and target.kind == Kind.RECORD and target not in self._inspector.registry:
                    if target.key not in embedding:
                        self._collect_fields(target, properties, required, embedding | {target.key})
                    continue

            name = tag.json_name() or field.name
            if tag.is_required() and name not in required:
                required.append(name)
            if name in properties:
                logger.warning(f"Field '{field.name}' of {descriptor.name} overrides property '{name}'")
            properties[name] = self._inspector.inspect(field.type, tag)
