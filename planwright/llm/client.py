# planwright/llm/client.py
"""Ollama client with health checks and streaming generation."""

import logging

import httpx
from ollama import AsyncClient

from .retry import llm_retry

logger = logging.getLogger(__name__)


class OllamaClient:
    """
    Async Ollama client with health checks and streaming.

    Handles:
    - Health checks (server + model availability)
    - Streaming generation with content accumulation
    - Retries on transient errors (llm_retry)
    """

    def __init__(self, base_url: str, model: str, timeout: int = 300):
        """
        Initialize Ollama client.

        Args:
            base_url: Ollama API base URL (e.g., "http://localhost:11434")
            model: Model name (e.g., "qwen2.5-coder:32b-instruct")
            timeout: Request timeout in seconds (generous for model loading)
        """
        self.base_url = base_url
        self.model = model
        self.client = AsyncClient(host=base_url, timeout=httpx.Timeout(timeout))

    async def health_check(self) -> bool:
        """
        Check Ollama server health and model availability.

        Returns:
            True if server is reachable (the model can be pulled on demand).
            False if server is down or unreachable.
        """
        try:
            models_response = await self.client.list()
            available_models = [
                m.get("model") or m.get("name") or "" for m in models_response.get("models", [])
            ]

            model_base = self.model.split(":")[0]
            model_available = any(
                model_base in m or self.model == m for m in available_models
            )

            if not model_available:
                logger.warning(
                    f"Model {self.model} not found in available models. "
                    f"It can be pulled on demand during generation."
                )

            return True

        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return False

    @llm_retry
    async def generate(self, messages: list[dict], model: str | None = None) -> str:
        """
        Generate a response from Ollama with streaming.

        Args:
            messages: Chat messages in format [{"role": "user", "content": "..."}]
            model: Model to use (defaults to self.model)

        Returns:
            Full accumulated response text.

        Raises:
            ResponseError: On API errors (retry decorator handles transient errors)
        """
        model = model or self.model
        logger.info(f"Generating with model={model}, messages={len(messages)}")

        accumulated = []
        async for chunk in await self.client.chat(
            model=model, messages=messages, stream=True
        ):
            if content := chunk.get("message", {}).get("content"):
                accumulated.append(content)

        result = "".join(accumulated)
        logger.info(f"Generated {len(result)} chars")
        return result
