"""LLM integration: provider clients, retry policy, and the completion gateway."""

from .client import OllamaClient
from .deepseek import DeepSeekClient
from .factory import create_completion_gateway, create_llm_client
from .gateway import CompletionClient, CompletionGateway
from .retry import is_retryable, llm_retry

__all__ = [
    "OllamaClient",
    "DeepSeekClient",
    "CompletionClient",
    "CompletionGateway",
    "create_llm_client",
    "create_completion_gateway",
    "is_retryable",
    "llm_retry",
]
