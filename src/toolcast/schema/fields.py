"""Static field metadata for record types.

A ``RecordType`` is the one authoritative description of a record shape.
The schema compiler and the argument decoder both read it, so what is
advertised to the agent and what is accepted back cannot drift apart.
"""

from __future__ import annotations

import dataclasses
import inspect
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar, Union

from toolcast.errors import InvalidTypeTag
from toolcast.schema.types import PrimitiveType, TypeShape, parse_type_tag

T = TypeVar("T")

_TAG_NAMES: dict[Any, str] = {str: "str", int: "int", float: "float", bool: "bool"}


@dataclass(frozen=True)
class FieldSpec:
    """One declared field of a record type.

    ``choices`` restricts a string field to a fixed set of values. When
    ``enum`` is given the choices are its member values, and decoding
    yields the member instead of the bare string.
    """

    name: str
    type_tag: str
    description: str = ""
    required: bool = True
    choices: tuple[str, ...] = ()
    enum: type[Enum] | None = None

    def __post_init__(self) -> None:
        choices = tuple(self.choices)
        if self.enum is not None and not choices:
            choices = tuple(member.value for member in self.enum)
        for choice in choices:
            if not isinstance(choice, str):
                raise TypeError(f"Choices of field '{self.name}' must be strings, got {choice!r}")
        object.__setattr__(self, "choices", choices)

    def shape(self) -> TypeShape:
        """Parse this field's type tag.

        Raises:
            InvalidTypeTag: If the tag is unrecognized, or declares choices
                on a non-string type
        """
        shape = parse_type_tag(self.type_tag, field=self.name)
        if self.choices and shape.base.primitive is not PrimitiveType.STRING:
            raise InvalidTypeTag(self.type_tag, self.name)
        return shape


@dataclass(frozen=True)
class RecordType:
    """A named, ordered set of fields describing one record shape.

    ``model`` builds instances from the decoded keyword arguments. When it
    is None, decoding yields a plain dict.
    """

    name: str
    fields: tuple[FieldSpec, ...]
    description: str = ""
    model: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Record name must not be empty")
        object.__setattr__(self, "fields", tuple(self.fields))
        seen: set[str] = set()
        for spec in self.fields:
            if spec.name in seen:
                raise ValueError(f"Duplicate field '{spec.name}' in record '{self.name}'")
            seen.add(spec.name)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    @property
    def required_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields if spec.required)

    def get(self, name: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None


def _is_optional(annotation: Any) -> bool:
    return typing.get_origin(annotation) in (Union, types.UnionType) and type(None) in typing.get_args(annotation)


def _annotation_tag(annotation: Any) -> str:
    origin = typing.get_origin(annotation)
    if origin in (Union, types.UnionType):
        args = typing.get_args(annotation)
        rest = [arg for arg in args if arg is not type(None)]
        if len(args) == 2 and len(rest) == 1:
            return f"{_annotation_tag(rest[0])} | None"
    elif origin is list:
        args = typing.get_args(annotation)
        if len(args) == 1:
            return f"list[{_annotation_tag(args[0])}]"
    if _is_enum(annotation):
        return "str"
    if annotation in _TAG_NAMES:
        return _TAG_NAMES[annotation]
    # Unrecognized annotations keep their name so compilation can reject them.
    return getattr(annotation, "__name__", repr(annotation))


def _is_enum(annotation: Any) -> bool:
    return typing.get_origin(annotation) is None and isinstance(annotation, type) and issubclass(annotation, Enum)


def _enum_class(annotation: Any) -> type[Enum] | None:
    if _is_enum(annotation):
        return annotation
    for arg in typing.get_args(annotation):
        found = _enum_class(arg)
        if found is not None:
            return found
    return None


def _class_doc(cls: type) -> str:
    doc = cls.__doc__ or ""
    # dataclass fills in a signature when the class has no docstring
    if doc.startswith(f"{cls.__name__}("):
        return ""
    return inspect.cleandoc(doc)


def _derive(cls: type, name: str | None = None, description: str | None = None) -> RecordType:
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a dataclass; declare a RecordType explicitly")

    hints = typing.get_type_hints(cls)
    specs = []
    for item in dataclasses.fields(cls):
        if not item.init:
            continue
        annotation = hints.get(item.name, item.type)
        specs.append(
            FieldSpec(
                name=item.name,
                type_tag=item.metadata.get("type") or _annotation_tag(annotation),
                description=item.metadata.get("description", ""),
                required=item.metadata.get("required", not _is_optional(annotation)),
                enum=_enum_class(annotation),
            )
        )

    return RecordType(
        name=name or cls.__name__,
        fields=tuple(specs),
        description=_class_doc(cls) if description is None else description,
        model=cls,
    )


def record(
    cls: type[T] | None = None,
    *,
    name: str | None = None,
    description: str | None = None,
) -> Any:
    """Attach a ``RecordType`` to a dataclass at definition time.

    Field tags come from ``field(metadata={"type": ...})`` when given,
    otherwise from the annotation. ``T | None`` fields are optional.

    Example:
        >>> @record(description="A single user")
        ... @dataclass(frozen=True)
        ... class UserInfo:
        ...     name: str
        ...     age: int = field(metadata={"type": "uint8"})
    """
    def wrap(klass: type[T]) -> type[T]:
        klass.__record_type__ = _derive(klass, name, description)  # type: ignore[attr-defined]
        return klass

    if cls is None:
        return wrap
    return wrap(cls)


def record_type(source: RecordType | type) -> RecordType:
    """Resolve a record type from a ``RecordType`` or a record class."""
    if isinstance(source, RecordType):
        return source
    cached = getattr(source, "__dict__", {}).get("__record_type__")
    if cached is not None:
        return cached
    return _derive(source)
