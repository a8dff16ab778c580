"""Structural type descriptors built from Python type annotations.

The engine never inspects Python annotations directly. It works on
``TypeDescriptor`` values, which expose the kind of a type, its declared
fields (for records) and its element type (for pointers and sequences).
``describe()`` is the adapter from annotations to descriptors; callers
with another source of type metadata can build descriptors by hand.
"""

from __future__ import annotations

import dataclasses
import enum
import types
import typing
from collections import abc
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, NewType, get_args, get_origin

from pydantic import BaseModel

from swagspec.errors import UnsupportedTypeError
from swagspec.schema.tags import Tag

__all__ = [
    "Kind",
    "INTEGER_KINDS",
    "FLOAT_KINDS",
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
]


class Kind(str, enum.Enum):
    """Structural kind of a described type."""

    ANY = "any"
    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    RECORD = "record"
    POINTER = "pointer"
    SEQUENCE = "sequence"
    MAP = "map"


INTEGER_KINDS = frozenset(
    {
        Kind.INT,
        Kind.INT8,
        Kind.INT16,
        Kind.INT32,
        Kind.INT64,
        Kind.UINT8,
        Kind.UINT16,
        Kind.UINT32,
        Kind.UINT64,
    }
)
FLOAT_KINDS = frozenset({Kind.FLOAT32, Kind.FLOAT64})

# Sized numeric markers. Plain ``int`` and ``float`` are also accepted.
Int8 = NewType("Int8", int)
Int16 = NewType("Int16", int)
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
UInt8 = NewType("UInt8", int)
UInt16 = NewType("UInt16", int)
UInt32 = NewType("UInt32", int)
UInt64 = NewType("UInt64", int)
Float32 = NewType("Float32", float)
Float64 = NewType("Float64", float)

# Pre-encoded payload; rendered as an opaque object instead of a byte array.
RawMessage = NewType("RawMessage", bytes)

_SCALARS: dict[Any, Kind] = {
    bool: Kind.BOOL,
    int: Kind.INT,
    float: Kind.FLOAT64,
    str: Kind.STRING,
    Int8: Kind.INT8,
    Int16: Kind.INT16,
    Int32: Kind.INT32,
    Int64: Kind.INT64,
    UInt8: Kind.UINT8,
    UInt16: Kind.UINT16,
    UInt32: Kind.UINT32,
    UInt64: Kind.UINT64,
    Float32: Kind.FLOAT32,
    Float64: Kind.FLOAT64,
}

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset, abc.Sequence, abc.MutableSequence, abc.Set, abc.MutableSet)
_MAP_ORIGINS = (dict, abc.Mapping, abc.MutableMapping)

# Builtins a user class may subclass to declare a named scalar type.
_SCALAR_BASES = (str, bytes, bytearray, int, float)


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared field of a record type."""

    name: str
    type: TypeDescriptor
    tag: Tag
    anonymous: bool = False

    @property
    def exported(self) -> bool:
        """Fields with a leading underscore are private and never serialized."""
        return not self.name.startswith("_")


class TypeDescriptor:
    """Immutable handle to one structural type.

    Record fields are loaded lazily on first access so self-referencing
    and mutually-referencing records can be described without recursing.
    """

    def __init__(
        self,
        kind: Kind,
        name: str = "",
        module: str = "",
        key: Any = None,
        elem: TypeDescriptor | None = None,
        fields: list[FieldDescriptor] | Callable[[], list[FieldDescriptor]] | None = None,
        enum_values: tuple[Any, ...] = (),
        opaque: bool = False,
    ) -> None:
        self.kind = kind
        self.name = name
        self.module = module
        self.key = key if key is not None else (module, name, kind)
        self.elem = elem
        self.enum_values = enum_values
        self.opaque = opaque
        self._fields = fields

    @property
    def fields(self) -> list[FieldDescriptor]:
        if callable(self._fields):
            self._fields = self._fields()
        return list(self._fields or [])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        label = f"{self.module}.{self.name}" if self.module else self.name
        return f"TypeDescriptor({self.kind.value}, {label!r})"


def _type_repr(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


def _is_record_class(tp: Any) -> bool:
    return isinstance(tp, type) and not issubclass(tp, (enum.Enum, bytes, bytearray, str, int, float))


def describe(tp: Any) -> TypeDescriptor:
    """Build a TypeDescriptor for a Python type annotation."""
    if isinstance(tp, TypeDescriptor):
        return tp

    origin = get_origin(tp)

    if origin is typing.Annotated:
        return describe(get_args(tp)[0])

    if tp is Any or tp is object:
        return TypeDescriptor(Kind.ANY, name="any", key=tp)

    if tp is RawMessage:
        return TypeDescriptor(
            Kind.SEQUENCE,
            name="RawMessage",
            key=tp,
            elem=describe(UInt8),
            opaque=True,
        )

    if tp in (bytes, bytearray):
        return TypeDescriptor(Kind.SEQUENCE, name=tp.__name__, key=tp, elem=describe(UInt8))

    try:
        kind = _SCALARS.get(tp)
    except TypeError:
        kind = None
    if kind is not None:
        return TypeDescriptor(kind, name=getattr(tp, "__name__", kind.value), key=tp)

    supertype = getattr(tp, "__supertype__", None)
    if supertype is not None:
        return _describe_named(tp, describe(supertype))

    if origin is typing.Union or origin is types.UnionType:
        return _describe_union(tp)

    if origin is typing.Literal:
        return _describe_literal(tp)

    if origin in _SEQUENCE_ORIGINS or tp in (list, tuple, set, frozenset):
        args = [a for a in get_args(tp) if a is not Ellipsis]
        if origin is tuple and len(set(args)) > 1:
            raise UnsupportedTypeError(_type_repr(tp), "heterogeneous tuples are not supported")
        elem = describe(args[0]) if args else describe(Any)
        return TypeDescriptor(Kind.SEQUENCE, name=getattr(origin or tp, "__name__", "list"), key=tp, elem=elem)

    if origin in _MAP_ORIGINS or tp is dict:
        return TypeDescriptor(Kind.MAP, name="map", key=tp)

    if isinstance(tp, type) and issubclass(tp, enum.Enum):
        return _describe_enum(tp)

    if isinstance(tp, type) and issubclass(tp, _SCALAR_BASES):
        base = next(b for b in _SCALAR_BASES if issubclass(tp, b))
        return _describe_named(tp, describe(base))

    if _is_record_class(tp):
        return TypeDescriptor(
            Kind.RECORD,
            name=tp.__name__,
            module=tp.__module__,
            key=tp,
            fields=lambda: _record_fields(tp),
        )

    raise UnsupportedTypeError(_type_repr(tp), "no structural mapping for this annotation")


def describe_prototype(prototype: Any) -> TypeDescriptor:
    """Describe either a type annotation or a live value.

    Values are described by their class. Non-empty lists, tuples and sets
    become sequences of their first element's class.
    """
    if isinstance(prototype, TypeDescriptor):
        return prototype
    if (
        isinstance(prototype, (type, NewType))
        or get_origin(prototype) is not None
        or prototype is Any
    ):
        return describe(prototype)
    if prototype is None:
        raise UnsupportedTypeError("None", "cannot describe a None prototype")
    if isinstance(prototype, (list, tuple, set, frozenset)):
        if not prototype:
            raise UnsupportedTypeError(
                type(prototype).__name__, "cannot infer the element type of an empty collection"
            )
        first = next(iter(prototype))
        return describe(list[type(first)])  # type: ignore[misc]
    return describe(type(prototype))


def _describe_union(tp: Any) -> TypeDescriptor:
    args = get_args(tp)
    non_null = [a for a in args if a is not type(None)]
    if len(non_null) != 1:
        raise UnsupportedTypeError(_type_repr(tp), "only Optional[X] unions are supported")
    elem = describe(non_null[0])
    return TypeDescriptor(Kind.POINTER, name=elem.name, module=elem.module, key=tp, elem=elem)


def _describe_named(tp: Any, base: TypeDescriptor) -> TypeDescriptor:
    """A NewType or scalar subclass: the structure of its base, its own identity."""
    return TypeDescriptor(
        base.kind,
        name=tp.__name__,
        module=getattr(tp, "__module__", None) or "",
        key=tp,
        elem=base.elem,
        fields=(lambda: base.fields) if base.kind == Kind.RECORD else None,
        enum_values=base.enum_values,
        opaque=base.opaque,
    )


def _describe_literal(tp: Any) -> TypeDescriptor:
    values = get_args(tp)
    if all(isinstance(v, str) for v in values):
        kind = Kind.STRING
    elif all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        kind = Kind.INT
    else:
        raise UnsupportedTypeError(_type_repr(tp), "Literal values must all be strings or all be integers")
    return TypeDescriptor(kind, name=kind.value, key=tp, enum_values=tuple(values))


def _describe_enum(tp: type[enum.Enum]) -> TypeDescriptor:
    values = tuple(member.value for member in tp)
    if all(isinstance(v, str) for v in values):
        kind = Kind.STRING
    elif all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        kind = Kind.INT
    else:
        raise UnsupportedTypeError(_type_repr(tp), "enum values must all be strings or all be integers")
    return TypeDescriptor(kind, name=tp.__name__, module=tp.__module__, key=tp, enum_values=values)


def _annotated_metadata(annotation: Any) -> dict[str, Any]:
    """Collect mapping extras from ``Annotated[X, {...}]``."""
    if get_origin(annotation) is not typing.Annotated:
        return {}
    metadata: dict[str, Any] = {}
    for extra in annotation.__metadata__:
        if isinstance(extra, Mapping):
            metadata.update(extra)
    return metadata


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except NameError as e:
        raise UnsupportedTypeError(_type_repr(cls), f"unresolvable annotation: {e}", cause=e) from e


def _make_field(name: str, annotation: Any, metadata: Mapping[str, Any]) -> FieldDescriptor:
    merged = _annotated_metadata(annotation)
    merged.update(metadata)
    tag = Tag.from_metadata(merged, field=name)
    return FieldDescriptor(name=name, type=describe(annotation), tag=tag, anonymous=tag.is_embedded())


def _record_fields(cls: type) -> list[FieldDescriptor]:
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return _pydantic_fields(cls)

    hints = _type_hints(cls)
    if dataclasses.is_dataclass(cls):
        return [_make_field(f.name, hints[f.name], f.metadata) for f in dataclasses.fields(cls)]

    return [
        _make_field(name, annotation, {})
        for name, annotation in hints.items()
        if get_origin(annotation) is not typing.ClassVar and annotation is not typing.ClassVar
    ]


def _pydantic_fields(model: type[BaseModel]) -> list[FieldDescriptor]:
    result: list[FieldDescriptor] = []
    for name, info in model.model_fields.items():
        metadata: dict[str, Any] = {}
        for extra in info.metadata:
            if isinstance(extra, Mapping):
                metadata.update(extra)
        if isinstance(info.json_schema_extra, dict):
            metadata.update(info.json_schema_extra)
        if info.alias and "json" not in metadata and "tag" not in metadata:
            metadata["json"] = info.alias
        if info.description and "description" not in metadata:
            metadata["description"] = info.description
        result.append(_make_field(name, info.annotation, metadata))
    return result
