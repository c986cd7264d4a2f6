"""LiteLLM-specific formatter implementation."""

from typing import Any

from toolcast.ports import AgentResponse, ToolCall
from toolcast.providers.base import FormatterBase
from toolcast.providers.models import Message, TextBlock
from toolcast.tools.descriptor import ToolDescriptor


class LiteLLMFormatter(FormatterBase):
    """LiteLLM formatter for tool-calling requests.

    LiteLLM speaks the OpenAI chat format for every provider, so requests
    and responses are shaped the OpenAI way.
    """

    async def format(
        self,
        messages: list[Message],
    ) -> list[dict[str, Any]]:
        """Format messages into LiteLLM API format.

        Args:
            messages (List[Message]):
                The list of message objects to format.

        Returns:
            List[Dict[str, Any]]:
                The formatted messages as a list of dictionaries.
        """
        self.assert_list_of_messages(messages)

        formatted_messages: list[dict[str, Any]] = []
        for msg in messages:
            texts = [block.text for block in msg.get_content_blocks() if isinstance(block, TextBlock)]

            # Messages without any text are skipped
            if not texts:
                continue

            msg_litellm: dict[str, Any] = {
                "role": msg.role,
                "content": "\n".join(texts),
            }
            if msg.name:
                msg_litellm["name"] = msg.name
            formatted_messages.append(msg_litellm)

        return formatted_messages

    def format_tools(self, tools: list[ToolDescriptor]) -> list[dict[str, Any]]:
        return [tool.to_dict() for tool in tools]

    def parse_response(self, response: Any) -> AgentResponse:
        """Read the first choice of a LiteLLM ``ModelResponse``.

        Both ``tool_calls`` and the legacy single ``function_call`` field
        are understood.
        """
        choices = getattr(response, "choices", None) or []
        if not choices:
            return AgentResponse()

        choice = choices[0]
        message = choice.message
        tool_calls = [
            ToolCall(
                id=getattr(raw, "id", None) or "",
                name=raw.function.name,
                arguments=raw.function.arguments or "",
            )
            for raw in getattr(message, "tool_calls", None) or []
        ]

        function_call = getattr(message, "function_call", None)
        if not tool_calls and function_call is not None:
            tool_calls.append(ToolCall(name=function_call.name, arguments=function_call.arguments or ""))

        return AgentResponse(
            text=getattr(message, "content", None),
            tool_calls=tool_calls,
            finish_reason=getattr(choice, "finish_reason", None),
        )
