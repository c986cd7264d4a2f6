"""Client that asks an agent to fill a record type through a tool call."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from toolcast.config import AgentSettings
from toolcast.ports import AgentPort
from toolcast.providers.litellm import LiteLLMAgent
from toolcast.providers.models import Message
from toolcast.schema.fields import RecordType, record_type
from toolcast.structured.outcome import Outcome, resolve_tool_call
from toolcast.tools.descriptor import build_tool_descriptor

logger = logging.getLogger(__name__)

RETRY_PROMPT = "Validation Error: {error}. Please fix the issue"


class StructuredClient:
    """Extracts typed records from an agent.

    Each attempt sends the conversation with a single tool built from the
    record type and resolves the response into an ``Outcome``. A failed
    decode is fed back to the agent as a user message while attempts
    remain; a reply without a tool call is returned as is.
    """

    def __init__(self, agent: AgentPort, max_attempts: int = 1) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.agent = agent
        self.max_attempts = max_attempts

    @classmethod
    def from_settings(cls, settings: AgentSettings) -> StructuredClient:
        return cls(LiteLLMAgent.from_settings(settings), max_attempts=settings.max_attempts)

    async def extract(
        self,
        record: RecordType | type,
        messages: Sequence[Message],
        *,
        name: str | None = None,
        description: str | None = None,
        max_attempts: int | None = None,
    ) -> Outcome[Any]:
        """Ask the agent to fill ``record``.

        Args:
            record: A ``RecordType`` or a class decorated with ``@record``
            messages: The conversation to send
            name: Tool name, defaults to the record name
            description: Tool description
            max_attempts: Overrides the client's attempt budget

        Returns:
            The outcome of the last attempt

        Raises:
            ValueError: If ``max_attempts`` is less than 1
        """
        attempts = self.max_attempts if max_attempts is None else max_attempts
        if attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        record = record_type(record)
        descriptor = build_tool_descriptor(record, name, description)
        conversation = list(messages)

        attempt = 1
        while True:
            response = await self.agent.complete(conversation, [descriptor])
            outcome = resolve_tool_call(record, response, name=descriptor.name)
            if outcome.kind != "failed":
                return outcome

            logger.warning("Attempt %d/%d for %s failed: %s", attempt, attempts, descriptor.name, outcome.error)
            if attempt == attempts:
                return outcome
            conversation.append(Message.user(RETRY_PROMPT.format(error=outcome.error)))
            attempt += 1
