"""Outcomes of asking an agent to fill a record type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from toolcast.errors import DecodeError, UnknownTool
from toolcast.ports import AgentResponse, ToolCall
from toolcast.schema.fields import RecordType, record_type
from toolcast.structured.decoder import decode_arguments

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    The three observable results of one agent exchange.

    Kinds:
    - no_tool_invoked: The agent answered without calling the tool; ``text`` holds its reply
    - decoded: The tool was called and its arguments decoded into ``value``
    - failed: The tool was called but decoding raised ``error``
    """

    kind: Literal["no_tool_invoked", "decoded", "failed"]
    value: T | None = None
    text: str | None = None
    error: DecodeError | None = None
    call: ToolCall | None = None

    @staticmethod
    def NoToolInvoked(text: str | None = None) -> Outcome[Any]:
        return Outcome(kind="no_tool_invoked", text=text)

    @staticmethod
    def Decoded(value: Any, call: ToolCall | None = None) -> Outcome[Any]:
        return Outcome(kind="decoded", value=value, call=call)

    @staticmethod
    def Failed(error: DecodeError, call: ToolCall | None = None) -> Outcome[Any]:
        return Outcome(kind="failed", error=error, call=call)

    @property
    def ok(self) -> bool:
        return self.kind == "decoded"

    def unwrap(self) -> T:
        """Return the decoded value, raising the decode error otherwise."""
        if self.kind == "decoded":
            return self.value  # type: ignore[return-value]
        if self.error is not None:
            raise self.error
        raise ValueError("No tool was invoked.")


def resolve_tool_call(record: RecordType | type, response: AgentResponse, name: str | None = None) -> Outcome[Any]:
    """Turn an agent response into an outcome for one record type.

    The decoder only runs when the response holds a call to the tool.

    Args:
        record: The record type the tool was built from
        response: The agent's response
        name: Tool name used in the descriptor, defaults to the record name

    Returns:
        ``NoToolInvoked`` when there are no tool calls, ``Decoded`` on
        success, ``Failed`` when the call cannot be decoded
    """
    record = record_type(record)
    tool_name = name or record.name

    if not response.tool_calls:
        return Outcome.NoToolInvoked(response.text)

    matching = [call for call in response.tool_calls if call.name == tool_name]
    if not matching:
        call = response.tool_calls[0]
        return Outcome.Failed(UnknownTool(call.name, call.arguments), call)
    if len(response.tool_calls) > 1:
        logger.warning("Agent returned %d tool calls; decoding the first call to %s", len(response.tool_calls), tool_name)

    call = matching[0]
    try:
        value = decode_arguments(record, call.arguments)
    except DecodeError as e:
        logger.debug("Decoding %s failed: %s", tool_name, e)
        return Outcome.Failed(e, call)
    return Outcome.Decoded(value, call)
