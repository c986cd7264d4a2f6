"""Base classes for provider formatters."""

from abc import ABC, abstractmethod
from typing import Any

from toolcast.ports import AgentResponse
from toolcast.providers.models import Message
from toolcast.tools.descriptor import ToolDescriptor


class FormatterBase(ABC):
    """Base class for all provider formatters."""

    @abstractmethod
    async def format(self, messages: list[Message]) -> list[dict[str, Any]]:
        """Format messages into provider-specific API format.

        Args:
            messages (List[Message]):
                The list of message objects to format.

        Returns:
            List[Dict[str, Any]]:
                The formatted messages as a list of dictionaries.
        """
        pass

    @abstractmethod
    def format_tools(self, tools: list[ToolDescriptor]) -> list[dict[str, Any]]:
        """Format tool descriptors into the provider's tools payload."""
        pass

    @abstractmethod
    def parse_response(self, response: Any) -> AgentResponse:
        """Extract text and tool calls from a provider response."""
        pass

    def assert_list_of_messages(self, messages: list[Message]) -> None:
        """Assert that the input is a list of Message objects.

        Args:
            messages (List[Message]):
                The list of message objects to check.

        Raises:
            TypeError:
                If the input is not a list of Message objects.
        """
        if not isinstance(messages, list):
            raise TypeError(f"Expected list of Message objects, got {type(messages)}")

        for msg in messages:
            if not isinstance(msg, Message):
                raise TypeError(f"Expected Message object, got {type(msg)}")
