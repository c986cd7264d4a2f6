"""LiteLLM provider module."""

from .agent import LiteLLMAgent
from .formatter import LiteLLMFormatter

__all__ = [
    "LiteLLMAgent",
    "LiteLLMFormatter",
]
