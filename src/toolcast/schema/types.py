"""Type tag table shared by the schema compiler and the argument decoder.

Every declared type tag resolves through ``TYPE_TAGS``. There is no
fallback: a tag missing from the table raises ``InvalidTypeTag``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from toolcast.errors import InvalidTypeTag


class PrimitiveType(str, Enum):
    """JSON schema primitive tags."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"


@dataclass(frozen=True)
class TypeTag:
    """A recognized base tag and the JSON values it admits."""

    name: str
    primitive: PrimitiveType
    integral: bool = False
    minimum: int | None = None
    maximum: int | None = None
    length: int | None = None

    def coerce(self, value: Any) -> Any:
        """Normalize a value whose JSON type already matches ``primitive``.

        Raises:
            ValueError: If the value breaks the tag's bounds, or is too large
                to represent as a float.
        """
        if self.primitive is PrimitiveType.NUMBER:
            if not self.integral:
                try:
                    return float(value)
                except OverflowError as e:
                    raise ValueError(f"{self.name} value out of range") from e
            if isinstance(value, float):
                if not value.is_integer():
                    raise ValueError(f"{value!r} is not an integer")
                value = int(value)
            if (self.minimum is not None and value < self.minimum) or (
                self.maximum is not None and value > self.maximum
            ):
                raise ValueError(f"{value} outside {self.name} range [{self.minimum}, {self.maximum}]")
            return value
        if self.length is not None and len(value) != self.length:
            raise ValueError(f"expected {self.length} character(s), got {len(value)}")
        return value


def _bounded(bits: int, signed: bool) -> TypeTag:
    if signed:
        return TypeTag(f"int{bits}", PrimitiveType.NUMBER, True, -(2 ** (bits - 1)), 2 ** (bits - 1) - 1)
    return TypeTag(f"uint{bits}", PrimitiveType.NUMBER, True, 0, 2**bits - 1)


TYPE_TAGS: Mapping[str, TypeTag] = MappingProxyType({
    tag.name: tag
    for tag in (
        TypeTag("str", PrimitiveType.STRING),
        TypeTag("string", PrimitiveType.STRING),
        TypeTag("char", PrimitiveType.STRING, length=1),
        TypeTag("bool", PrimitiveType.BOOLEAN),
        TypeTag("int", PrimitiveType.NUMBER, integral=True),
        TypeTag("float", PrimitiveType.NUMBER),
        TypeTag("float32", PrimitiveType.NUMBER),
        TypeTag("float64", PrimitiveType.NUMBER),
        *(_bounded(bits, signed) for bits in (8, 16, 32, 64) for signed in (False, True)),
    )
})


@dataclass(frozen=True)
class TypeShape:
    """A parsed type tag: base tag plus list and nullability flags."""

    base: TypeTag
    is_list: bool = False
    is_optional: bool = False

    @property
    def primitive(self) -> PrimitiveType:
        return PrimitiveType.ARRAY if self.is_list else self.base.primitive


_LIST = re.compile(r"^list\[(.+)\]$")
_OPTIONAL = re.compile(r"^optional\[(.+)\]$")


def parse_type_tag(tag: str, field: str | None = None) -> TypeShape:
    """Split a declared type tag into its canonical shape.

    Accepted forms are ``T``, ``list[T]``, ``T | None``, ``None | T`` and
    ``optional[T]``, where ``T`` (or the list item) is a key of ``TYPE_TAGS``.

    Args:
        tag: The declared type tag, e.g. ``"uint8"`` or ``"list[str] | None"``
        field: Field name, used only in the error message

    Returns:
        The parsed shape

    Raises:
        InvalidTypeTag: If any part of the tag is not recognized
    """
    text = tag.strip()
    optional = False

    parts = [part.strip() for part in text.split("|")]
    if len(parts) == 2 and "None" in parts:
        optional = True
        text = parts[0] if parts[1] == "None" else parts[1]
    elif match := _OPTIONAL.match(text):
        optional = True
        text = match.group(1).strip()

    is_list = False
    if match := _LIST.match(text):
        is_list = True
        text = match.group(1).strip()

    base = TYPE_TAGS.get(text)
    if base is None:
        raise InvalidTypeTag(tag, field)
    return TypeShape(base=base, is_list=is_list, is_optional=optional)


def json_type(value: Any) -> PrimitiveType:
    """Classify a decoded JSON value."""
    if value is None:
        return PrimitiveType.NULL
    # bool is an int subclass
    if isinstance(value, bool):
        return PrimitiveType.BOOLEAN
    if isinstance(value, (int, float)):
        return PrimitiveType.NUMBER
    if isinstance(value, str):
        return PrimitiveType.STRING
    if isinstance(value, (list, tuple)):
        return PrimitiveType.ARRAY
    return PrimitiveType.OBJECT
