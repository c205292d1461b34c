# planwright/llm/factory.py
"""Factory for creating the configured LLM client and gateway."""

from planwright.config.schema import PlannerConfig

from .client import OllamaClient
from .deepseek import DeepSeekClient
from .gateway import CompletionGateway


def create_llm_client(config: PlannerConfig) -> OllamaClient | DeepSeekClient:
    """
    Create the client for config.provider.

    Args:
        config: Root PlannerConfig

    Returns:
        DeepSeekClient for provider="deepseek", OllamaClient for provider="ollama"

    Raises:
        ValueError: If the DeepSeek API key is missing
    """
    if config.provider == "ollama":
        return OllamaClient(
            base_url=config.ollama.base_url,
            model=config.ollama.model,
            timeout=config.ollama.timeout,
        )
    return DeepSeekClient(
        api_key=config.deepseek.api_key or "",
        base_url=config.deepseek.base_url,
        model=config.deepseek.model,
        timeout=config.deepseek.timeout,
    )


def create_completion_gateway(config: PlannerConfig) -> CompletionGateway:
    """Wrap the configured client with the per-call timeout."""
    return CompletionGateway(
        create_llm_client(config), timeout=config.planning.per_call_timeout
    )
