#!/usr/bin/env python3
"""
Schema compilation and argument decoding without a model.

Shows the tool descriptor sent to the agent, and what happens to good and
bad argument payloads coming back.
"""

from __future__ import annotations

import json

from toolcast import (
    DecodeError,
    FieldSpec,
    RecordType,
    ToolRegistry,
    build_tool_descriptor,
    decode_arguments,
)

# ==================== Record Types ====================

SEARCH = RecordType(
    name="Search",
    description="Segment a question into a search query",
    fields=(
        FieldSpec("topic", "str", "Topic of the search"),
        FieldSpec("query", "str", "Query to search for relevant content"),
        FieldSpec("max_results", "uint8 | None", required=False),
    ),
)

USER = RecordType(
    name="UserInfo",
    fields=(FieldSpec("name", "str"), FieldSpec("age", "uint8")),
)


def show_descriptor() -> None:
    print("\n=== Tool Descriptor ===")
    print(json.dumps(build_tool_descriptor(SEARCH).to_dict(), indent=2))


def show_decoding() -> None:
    print("\n=== Decoding ===")
    payloads = [
        '{"name": "John Doe", "age": 30}',
        '{"name": "John"}',
        '{"name": "John", "age": "thirty"}',
        '{"name": "John", "age": 300}',
        "John is thirty",
    ]
    for payload in payloads:
        try:
            print(f"{payload!r:40} -> {decode_arguments(USER, payload)}")
        except DecodeError as e:
            print(f"{payload!r:40} -> {type(e).__name__}: {e}")


def show_registry() -> None:
    print("\n=== Registry ===")
    registry = ToolRegistry()
    registry.register(USER)
    registry.register(SEARCH)
    print(f"Tools: {[d.name for d in registry.descriptors()]}")


if __name__ == "__main__":
    show_descriptor()
    show_decoding()
    show_registry()
