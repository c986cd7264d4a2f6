"""Tool descriptors and registry."""

from .descriptor import (
    DEFAULT_DESCRIPTION,
    FunctionSpec,
    ToolDescriptor,
    build_tool_descriptor,
    build_tool_descriptors,
)
from .registry import ToolRegistry

__all__ = [
    "DEFAULT_DESCRIPTION",
    "FunctionSpec",
    "ToolDescriptor",
    "build_tool_descriptor",
    "build_tool_descriptors",
    "ToolRegistry",
]
