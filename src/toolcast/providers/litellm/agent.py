"""Agent port backed by LiteLLM."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from toolcast.ports import AgentResponse
from toolcast.providers.litellm.formatter import LiteLLMFormatter
from toolcast.providers.models import Message
from toolcast.tools.descriptor import ToolDescriptor

if TYPE_CHECKING:
    from toolcast.config import AgentSettings

logger = logging.getLogger(__name__)


class LiteLLMAgent:
    """LiteLLM-based agent implementation.

    The credential is passed in explicitly; nothing here reads the
    environment.
    """

    def __init__(
        self,
        model: str,
        api_key: str | None = None,
        api_base: str | None = None,
        formatter: LiteLLMFormatter | None = None,
        **params: Any,
    ) -> None:
        self.model = model
        self.api_key = api_key
        self.api_base = api_base
        self.formatter = formatter or LiteLLMFormatter()
        self.params = params

    @classmethod
    def from_settings(cls, settings: AgentSettings) -> LiteLLMAgent:
        api_key = settings.api_key.get_secret_value() if settings.api_key else None
        return cls(model=settings.model, api_key=api_key, api_base=settings.api_base)

    async def complete(self, messages: list[Message], tools: list[ToolDescriptor]) -> AgentResponse:
        """Send one chat completion request with the given tools."""
        from litellm import acompletion

        request: dict[str, Any] = {
            "model": self.model,
            "messages": await self.formatter.format(messages),
            **self.params,
        }
        if tools:
            request["tools"] = self.formatter.format_tools(tools)
            request["tool_choice"] = "auto"
        if self.api_key is not None:
            request["api_key"] = self.api_key
        if self.api_base is not None:
            request["api_base"] = self.api_base

        logger.debug("Calling %s with %d messages and %d tools", self.model, len(request["messages"]), len(tools))
        response = await acompletion(**request)
        return self.formatter.parse_response(response)
