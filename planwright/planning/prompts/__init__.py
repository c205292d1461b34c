"""Prompt loading utilities for planning phases."""

from pathlib import Path

SYSTEM_PROMPT = (
    "You are a technical planning AI agent with web search capabilities. You help users "
    "create technical plans for their ideas, including the architecture. Research findings "
    "gathered from the web are provided to you as evidence; cite URLs when you rely on them. "
    "Be concrete, state assumptions explicitly, and prefer proven technology over novelty."
)


def load_prompt(name: str) -> str:
    """Load a prompt template by name.

    Args:
        name: Prompt filename without .txt extension
              (e.g., 'foundational_research', 'synthesis')

    Returns:
        Prompt content as string

    Raises:
        FileNotFoundError: If prompt file doesn't exist
    """
    prompt_path = Path(__file__).parent / f"{name}.txt"
    if not prompt_path.exists():
        raise FileNotFoundError(f"Prompt not found: {prompt_path}")

    return prompt_path.read_text(encoding="utf-8")


__all__ = ["SYSTEM_PROMPT", "load_prompt"]
