"""Tool descriptors advertised to the agent."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from toolcast.schema.compiler import SchemaDocument, compile_schema
from toolcast.schema.fields import RecordType, record_type

DEFAULT_DESCRIPTION = "Correctly extracted `{name}` with all the required parameters with correct types"


class FunctionSpec(BaseModel):
    """Callable function definition."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: SchemaDocument


class ToolDescriptor(BaseModel):
    """Tool definition in the OpenAI ``tools`` format."""
    model_config = ConfigDict(frozen=True)

    type: Literal["function"] = "function"
    function: FunctionSpec

    @property
    def name(self) -> str:
        return self.function.name

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def build_tool_descriptor(
    record: RecordType | type,
    name: str | None = None,
    description: str | None = None,
) -> ToolDescriptor:
    """Wrap a record's compiled schema into a function tool.

    Args:
        record: A ``RecordType`` or a class decorated with ``@record``
        name: Tool name, defaults to the record name
        description: Tool description, defaults to the record description

    Returns:
        The tool descriptor
    """
    record = record_type(record)
    name = name or record.name
    return ToolDescriptor(
        function=FunctionSpec(
            name=name,
            description=description or record.description or DEFAULT_DESCRIPTION.format(name=name),
            parameters=compile_schema(record),
        )
    )


def build_tool_descriptors(*records: RecordType | type) -> list[ToolDescriptor]:
    """Build descriptors for several record types sent in one request."""
    descriptors = [build_tool_descriptor(record) for record in records]
    names = [descriptor.name for descriptor in descriptors]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Duplicate tool names: {', '.join(duplicates)}")
    return descriptors
