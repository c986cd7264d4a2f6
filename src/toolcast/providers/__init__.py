"""Provider-specific implementations for toolcast."""

from .base import FormatterBase
from .litellm import LiteLLMAgent, LiteLLMFormatter
from .models import Message, TextBlock

__all__ = [
    "FormatterBase",
    "LiteLLMAgent",
    "LiteLLMFormatter",
    "Message",
    "TextBlock",
]
