"""Input validation for conversations."""

from planwright.validation.sanitize import sanitize_content, sanitize_messages, sanitize_role

__all__ = ["sanitize_content", "sanitize_messages", "sanitize_role"]
