"""Structured decoding of agent tool-call arguments.

This module turns the raw argument payload of a tool call back into a
typed record instance.
"""

from .decoder import decode_arguments, encode_arguments
from .outcome import Outcome, resolve_tool_call
from .parser import parse_payload

__all__ = [
    "decode_arguments",
    "encode_arguments",
    "Outcome",
    "resolve_tool_call",
    "parse_payload",
]
