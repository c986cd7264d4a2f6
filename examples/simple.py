#!/usr/bin/env python3
"""
Extract a typed record from free text with a live model.

Requirements:
- OPENAI_API_KEY environment variable (or any LiteLLM-supported provider
  selected through TOOLCAST_MODEL)
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

logging.getLogger("LiteLLM").setLevel(logging.ERROR)

from toolcast import AgentSettings, Message, StructuredClient, record


@record(description="This is a model which represents a single individual user")
@dataclass(frozen=True)
class UserInfo:
    name: str = field(metadata={"description": "This is the name of the user"})
    age: int = field(metadata={"type": "uint8", "description": "This is the age of the user"})
    city: str = field(metadata={"description": "This is the city of the user"})


async def main() -> None:
    settings = AgentSettings.from_env()
    if settings.api_key is None:
        print("Warning: OPENAI_API_KEY environment variable not set")

    client = StructuredClient.from_settings(settings)
    outcome = await client.extract(
        UserInfo,
        [Message.user("John Doe is 30 years old and lives in New York")],
        max_attempts=3,
    )

    if outcome.kind == "no_tool_invoked":
        print(f"No tool calls: {outcome.text}")
    elif outcome.kind == "failed":
        print(f"Could not decode arguments: {outcome.error}")
    else:
        user = outcome.value
        print(f"Name: {user.name}")
        print(f"Age: {user.age}")
        print(f"City: {user.city}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
