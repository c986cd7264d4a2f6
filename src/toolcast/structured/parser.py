"""JSON parsing for agent argument payloads."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from toolcast.errors import MalformedPayload
from toolcast.schema.types import json_type


def parse_payload(payload: str | bytes | Mapping[str, Any]) -> dict[str, Any]:
    """Parse an argument payload into a JSON object.

    Text is parsed as JSON; a mapping is taken as already parsed.

    Args:
        payload: The raw arguments returned by the agent

    Returns:
        The payload as a dict

    Raises:
        MalformedPayload: If the text is not JSON, or the document is not
            a JSON object
    """
    document: Any = payload
    if isinstance(payload, (bytes, bytearray)):
        try:
            document = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedPayload(f"Payload is not valid UTF-8: {e.reason}", payload) from e
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except json.JSONDecodeError as e:
            raise MalformedPayload(f"Invalid JSON: {e.msg} at position {e.pos}", payload) from e
        except (ValueError, RecursionError) as e:
            # e.g. integers past the interpreter's digit limit, or deep nesting
            raise MalformedPayload(f"Failed to parse JSON: {e}", payload) from e

    if not isinstance(document, Mapping):
        raise MalformedPayload(f"Expected a JSON object, got {json_type(document).value}", payload)
    return dict(document)
