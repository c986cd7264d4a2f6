"""Tool registry implementation."""

from __future__ import annotations

from typing import Any

from toolcast.errors import UnknownTool
from toolcast.ports import AgentResponse, ToolCall
from toolcast.schema.fields import RecordType, record_type
from toolcast.structured.decoder import decode_arguments
from toolcast.structured.outcome import Outcome, resolve_tool_call
from toolcast.tools.descriptor import ToolDescriptor, build_tool_descriptor


class ToolRegistry:
    """Registry mapping tool names to the record types they decode into."""

    def __init__(self) -> None:
        self._records: dict[str, RecordType] = {}
        self._descriptors: dict[str, ToolDescriptor] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def register(
        self,
        record: RecordType | type,
        name: str | None = None,
        description: str | None = None,
    ) -> ToolDescriptor:
        """Register a record type under a unique tool name."""
        record = record_type(record)
        descriptor = build_tool_descriptor(record, name, description)
        if descriptor.name in self._records:
            raise ValueError(f"Tool already registered: {descriptor.name}")
        self._records[descriptor.name] = record
        self._descriptors[descriptor.name] = descriptor
        return descriptor

    def get(self, name: str) -> RecordType | None:
        """Get the record type registered under a tool name."""
        return self._records.get(name)

    def descriptors(self) -> list[ToolDescriptor]:
        """All descriptors, in registration order."""
        return list(self._descriptors.values())

    def decode(self, call: ToolCall) -> Any:
        """Decode a tool call into the record registered under its name."""
        record = self._records.get(call.name)
        if record is None:
            raise UnknownTool(call.name, call.arguments)
        return decode_arguments(record, call.arguments)

    def resolve(self, response: AgentResponse) -> Outcome[Any]:
        """Resolve the first tool call in a response against the registry."""
        if not response.tool_calls:
            return Outcome.NoToolInvoked(response.text)
        call = response.tool_calls[0]
        record = self._records.get(call.name)
        if record is None:
            return Outcome.Failed(UnknownTool(call.name, call.arguments), call)
        return resolve_tool_call(record, response, name=call.name)
