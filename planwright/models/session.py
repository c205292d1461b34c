# planwright/models/session.py
"""
Interactive session state for the CLI.

Mutated only by the CLI; orchestrators receive an immutable snapshot.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from planwright.models.messages import Message, PlanRequest, Role

logger = logging.getLogger(__name__)


class SessionMode(Enum):
    """What the next user message is routed to."""

    CHAT = "chat"
    PLAN = "plan"


@dataclass
class SessionState:
    """Conversation turns plus the current mode (in memory only)."""

    turns: list[Message] = field(default_factory=list)
    mode: SessionMode = SessionMode.CHAT

    def add_user(self, content: str) -> None:
        self.turns.append(Message(role=Role.USER, content=content))

    def add_assistant(self, content: str) -> None:
        self.turns.append(Message(role=Role.ASSISTANT, content=content))

    def discard_pending_user_turn(self) -> None:
        """Drop a trailing unanswered user turn (after cancel or failure)."""
        if self.turns and self.turns[-1].role is Role.USER:
            self.turns.pop()

    def clear(self) -> None:
        self.turns.clear()
        logger.info("Session history cleared")

    def set_mode(self, mode: SessionMode) -> None:
        if mode is not self.mode:
            logger.info(f"Session mode: {self.mode.value} -> {mode.value}")
        self.mode = mode

    def snapshot(self) -> PlanRequest:
        """Immutable copy of the conversation for one request."""
        return PlanRequest(messages=tuple(self.turns))
