"""Common message models for provider formatters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextBlock:
    """Text content block."""
    text: str
    type: str = "text"


@dataclass(frozen=True)
class Message:
    """Chat message sent to the agent."""
    role: str
    content: str | list[TextBlock]
    name: str | None = None

    def get_content_blocks(self) -> list[TextBlock]:
        """Get content blocks from the message.

        Returns:
            List[TextBlock]:
                List of content blocks.
        """
        if isinstance(self.content, str):
            return [TextBlock(text=self.content)]
        return self.content

    @classmethod
    def system(cls, text: str) -> "Message":
        return cls(role="system", content=text)

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role="user", content=text)
