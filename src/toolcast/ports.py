"""Port protocols for the agent call boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from toolcast.providers.models import Message
    from toolcast.tools.descriptor import ToolDescriptor


class ToolCall(BaseModel):
    """Tool call requested by the agent."""
    id: str = ""
    name: str
    arguments: str | dict[str, Any] = ""


class AgentResponse(BaseModel):
    """What came back from one agent call."""
    text: str | None = None
    tool_calls: list[ToolCall] = Field(default_factory=list)
    finish_reason: str | None = None


class AgentPort(Protocol):
    """Chat completion endpoint that can call tools.

    Transport, credentials and retries belong to the implementation.
    """

    async def complete(self, messages: list[Message], tools: list[ToolDescriptor]) -> AgentResponse: ...
