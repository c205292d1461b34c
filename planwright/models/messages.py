# planwright/models/messages.py
"""
Conversation messages and the immutable request handed to orchestrators.
"""

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    """Conversation roles accepted from callers."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """One conversation turn."""

    role: Role
    content: str

    def to_dict(self) -> dict:
        """Chat-completions message dict."""
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class PlanRequest:
    """
    Ordered conversation so far, frozen once handed to an orchestrator.

    Use ``PlanRequest.from_dicts()`` to build one from raw role/content
    dicts (validates roles and content).
    """

    messages: tuple[Message, ...]

    @classmethod
    def from_dicts(cls, raw: list[dict]) -> "PlanRequest":
        from planwright.validation.sanitize import sanitize_messages

        return cls(messages=tuple(sanitize_messages(raw)))

    @classmethod
    def from_text(cls, text: str) -> "PlanRequest":
        """Single user-message request."""
        return cls.from_dicts([{"role": "user", "content": text}])

    @property
    def topic(self) -> str:
        """Content of the latest user message (what the plan is about)."""
        for message in reversed(self.messages):
            if message.role is Role.USER:
                return message.content
        return ""

    def to_dicts(self) -> list[dict]:
        return [m.to_dict() for m in self.messages]
