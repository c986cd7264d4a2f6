"""Error types for schema compilation and argument decoding."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toolcast.schema.types import PrimitiveType


class ToolcastError(Exception):
    """Base class for all toolcast errors."""


class InvalidTypeTag(ToolcastError):
    """A field declares a type tag outside the recognized table.

    This is a defect in the record definition, raised while compiling or
    decoding against it. It is not meant to be caught and continued.
    """

    def __init__(self, tag: str, field: str | None = None) -> None:
        self.tag = tag
        self.field = field
        where = f" on field '{field}'" if field else ""
        super().__init__(f"Invalid type tag {tag!r}{where}")


class DecodeError(ToolcastError):
    """Error raised when an argument payload cannot become a record.

    This error preserves the raw payload so callers can re-prompt the
    agent or log what it actually sent.
    """

    def __init__(self, message: str, raw_value: object = None) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__str__()!r}, raw_value={self.raw_value!r})"


class MalformedPayload(DecodeError):
    """The payload is not a well-formed JSON object."""


class MissingField(DecodeError):
    """A required field is absent from the payload."""

    def __init__(self, name: str, raw_value: object = None) -> None:
        self.name = name
        super().__init__(f"Missing required field: {name}", raw_value)


class TypeMismatch(DecodeError):
    """A field is present but its value has the wrong JSON type."""

    def __init__(
        self,
        name: str,
        expected: PrimitiveType,
        actual: PrimitiveType,
        detail: str | None = None,
        raw_value: object = None,
    ) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        self.detail = detail
        message = f"Field '{name}' expected {expected.value}, got {actual.value}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, raw_value)


class UnknownTool(DecodeError):
    """The agent called a tool that nothing was registered under."""

    def __init__(self, name: str, raw_value: object = None) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}", raw_value)


class InvalidRecord(DecodeError):
    """The record's model rejected otherwise well-typed values."""

    def __init__(self, name: str, reason: str, raw_value: object = None) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid {name}: {reason}", raw_value)
