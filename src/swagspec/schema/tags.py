"""Field tag vocabulary and fail-fast value parsing."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any

from swagspec.errors import InvalidPatternError, TagParseError

__all__ = ["Tag", "RAW_TAG_KEY"]

# Metadata key holding a raw ``key:"value"`` tag string.
RAW_TAG_KEY = "tag"

_RAW_PAIR = re.compile(r'\s*([^\s:"]+):"((?:[^"\\]|\\.)*)"')

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _to_tag_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


class Tag(Mapping[str, str]):
    """Read-only view of the tag metadata attached to one field.

    Keys follow the recognized vocabulary (``json``, ``required``,
    ``binding``, ``default``, ``format``, ``enum``, ``min_length``,
    ``max_length``, ``minimum``, ``maximum``, ``exclusive_minimum``,
    ``exclusive_maximum``, ``pattern``, ``description``, ``embed``).
    Unknown keys are kept but never consulted.
    """

    def __init__(self, values: Mapping[str, Any] | None = None, field: str = "") -> None:
        self._values: dict[str, str] = {k: _to_tag_value(v) for k, v in (values or {}).items()}
        self.field = field

    @classmethod
    def parse(cls, raw: str, field: str = "") -> Tag:
        """Parse a raw tag string such as ``json:"id,omitempty" required:"true"``."""
        values: dict[str, str] = {}
        pos = 0
        raw = raw.strip()
        while pos < len(raw):
            match = _RAW_PAIR.match(raw, pos)
            if match is None:
                raise TagParseError(field=field, tag=RAW_TAG_KEY, value=raw, reason="malformed tag syntax")
            key, value = match.group(1), match.group(2)
            values.setdefault(key, value.replace('\\"', '"').replace("\\\\", "\\"))
            pos = match.end()
            while pos < len(raw) and raw[pos].isspace():
                pos += 1
        return cls(values, field=field)

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any] | None, field: str = "") -> Tag:
        """Build a tag from field metadata, expanding a raw ``tag`` entry.

        Explicit metadata keys take precedence over keys from the raw string.
        """
        metadata = dict(metadata or {})
        raw = metadata.pop(RAW_TAG_KEY, None)
        values: dict[str, Any] = {}
        if isinstance(raw, str):
            values.update(cls.parse(raw, field=field))
        values.update(metadata)
        return cls(values, field=field)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Tag({self._values!r}, field={self.field!r})"

    def get(self, key: str, default: str = "") -> str:  # type: ignore[override]
        value = self._values.get(key)
        return default if value is None else value

    # --- serialization name ---

    def json_name(self) -> str:
        """Name portion of the ``json`` tag; empty when not set."""
        value = self.get("json").strip()
        if not value or value.startswith(","):
            return ""
        return value.split(",", 1)[0]

    def json_options(self) -> list[str]:
        value = self.get("json").strip()
        return value.split(",")[1:] if value else []

    def omitted(self) -> bool:
        """True when the field is excluded with ``json:"-"``."""
        return self.json_name() == "-"

    def string_encoded(self) -> bool:
        """True when ``json:",string"`` forces a string encoding."""
        return "string" in self.json_options()

    # --- presence flags ---

    def is_required(self) -> bool:
        if self.get("required").strip() == "true":
            return True
        binding = self.get("binding")
        return "required" in [part.strip() for part in binding.split(",")] if binding else False

    def is_embedded(self) -> bool:
        return self.get("embed").strip() == "true"

    # --- typed accessors (fail fast) ---

    def get_int(self, key: str) -> int | None:
        value = self.get(key).strip()
        if not value:
            return None
        try:
            return int(value)
        except ValueError as e:
            raise TagParseError(field=self.field, tag=key, value=value, reason="expected an integer", cause=e) from e

    def get_float(self, key: str) -> float | None:
        value = self.get(key).strip()
        if not value:
            return None
        try:
            return float(value)
        except ValueError as e:
            raise TagParseError(field=self.field, tag=key, value=value, reason="expected a number", cause=e) from e

    def get_bool(self, key: str) -> bool | None:
        value = self.get(key).strip()
        if not value:
            return None
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise TagParseError(field=self.field, tag=key, value=value, reason="expected a boolean")

    def get_pattern(self) -> str:
        """Return the ``pattern`` tag after checking that it compiles."""
        value = self.get("pattern")
        if not value:
            return ""
        try:
            re.compile(value)
        except re.error as e:
            raise InvalidPatternError(field=self.field, value=value, reason=str(e), cause=e) from e
        return value

    def get_enum(self) -> list[str]:
        """Enum values from ``enum`` or from a ``format`` of ``enum,<v1>,<v2>``."""
        fmt = self.get("format").strip()
        if fmt.startswith("enum,"):
            return [v.strip() for v in fmt.split(",")[1:] if v.strip()]
        value = self.get("enum")
        return [v.strip() for v in value.split(",") if v.strip()] if value else []

    def get_format(self) -> str:
        fmt = self.get("format").strip()
        return "" if fmt.startswith("enum,") or fmt == "enum" else fmt
