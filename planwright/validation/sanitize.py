# planwright/validation/sanitize.py
"""
Input sanitization and validation utilities.

Validates conversation messages before they reach the orchestrators.
Raises ValueError; the HTTP, MCP and CLI layers translate it.
"""

import logging

from planwright.models.messages import Message, Role

logger = logging.getLogger(__name__)

MAX_CONTENT_LENGTH = 20000


def sanitize_content(text: str, max_length: int = MAX_CONTENT_LENGTH) -> str:
    """
    Sanitize and validate message text.

    Strips whitespace and validates non-empty.
    Truncates to max_length if needed.

    Args:
        text: User-provided message text
        max_length: Maximum allowed length

    Returns:
        Cleaned text

    Raises:
        ValueError: If text is empty after stripping
    """
    if not isinstance(text, str):
        raise ValueError(f"Message content must be a string, got {type(text).__name__}")

    cleaned = text.strip()

    if not cleaned:
        raise ValueError("Message content cannot be empty")

    if len(cleaned) > max_length:
        logger.warning(
            f"Message truncated from {len(cleaned)} to {max_length} characters"
        )
        cleaned = cleaned[:max_length]

    return cleaned


def sanitize_role(role: str) -> Role:
    """Map a raw role string to Role; only user and assistant are accepted."""
    try:
        return Role(str(role).strip().lower())
    except ValueError:
        raise ValueError(
            f"Invalid role '{role}': must be one of {[r.value for r in Role]}"
        ) from None


def sanitize_messages(raw: list[dict]) -> list[Message]:
    """
    Validate a raw conversation.

    Args:
        raw: List of {"role": ..., "content": ...} dicts

    Returns:
        List of validated Message objects (same order)

    Raises:
        ValueError: If the list is empty, a message is malformed, or
                    there is no user message
    """
    if not raw:
        raise ValueError("Conversation must contain at least one message")

    messages = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ValueError(f"Message {i} must be an object with role and content")
        try:
            role = sanitize_role(item.get("role", ""))
            content = sanitize_content(item.get("content", ""))
        except ValueError as e:
            raise ValueError(f"Message {i}: {e}") from None
        messages.append(Message(role=role, content=content))

    if not any(m.role is Role.USER for m in messages):
        raise ValueError("Conversation must contain at least one user message")

    return messages
