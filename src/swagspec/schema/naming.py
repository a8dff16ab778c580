"""Definition naming rule."""

from __future__ import annotations

from swagspec.schema.descriptor import Kind, TypeDescriptor

__all__ = ["make_name"]


def make_name(descriptor: TypeDescriptor, qualify: bool = False) -> str:
    """Derive the definition name for a type.

    Records use their bare class name, optionally prefixed with the last
    segment of their defining module (``myapp.models.Pet`` -> ``modelsPet``).
    Other types use their kind (``int32``, ``string``). Hyphens become
    underscores.
    """
    if descriptor.kind != Kind.RECORD:
        name = descriptor.kind.value
    elif qualify and descriptor.module:
        name = descriptor.module.rsplit(".", 1)[-1] + descriptor.name
    else:
        name = descriptor.name
    return name.replace("-", "_")
