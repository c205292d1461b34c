# planwright/llm/deepseek.py
"""DeepSeek client using the OpenAI-compatible chat completions API."""

import logging

import httpx
from openai import AsyncOpenAI

from .retry import llm_retry

logger = logging.getLogger(__name__)


class DeepSeekClient:
    """
    Async DeepSeek client using the OpenAI-compatible API.

    DeepSeek exposes chat completions at https://api.deepseek.com; any other
    OpenAI-compatible endpoint works the same way via base_url.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.deepseek.com",
        model: str = "deepseek-chat",
        timeout: int = 120,
    ):
        """
        Initialize DeepSeek client.

        Args:
            api_key:  API key (Bearer token)
            base_url: API base URL
            model:    Model name
            timeout:  Request timeout in seconds
        """
        if not api_key:
            raise ValueError(
                "DeepSeek API key not configured. Set DEEPSEEK_API_KEY or deepseek.api_key."
            )

        self.base_url = base_url.rstrip("/")
        self.model = model
        self._api_key = api_key
        self._client = AsyncOpenAI(base_url=self.base_url, api_key=api_key, timeout=timeout)

    async def health_check(self) -> bool:
        """
        Check API reachability by listing available models.

        Returns:
            True if the server answers, False otherwise.
        """
        try:
            async with httpx.AsyncClient(timeout=5.0) as http:
                response = await http.get(
                    f"{self.base_url}/models",
                    headers={"Authorization": f"Bearer {self._api_key}"},
                )
            return response.status_code == 200
        except Exception as e:
            logger.error(f"DeepSeek health check failed: {e}")
            return False

    @llm_retry
    async def generate(self, messages: list[dict], model: str | None = None) -> str:
        """
        Generate a streaming response.

        Args:
            messages: Chat messages in format [{"role": "user", "content": "..."}]
            model:    Model override (defaults to self.model)

        Returns:
            Full accumulated response text.
        """
        model = model or self.model
        logger.info(f"DeepSeek.generate: model={model}, messages={len(messages)}")

        accumulated = []
        stream = await self._client.chat.completions.create(
            model=model,
            messages=messages,
            stream=True,
        )
        async for chunk in stream:
            delta = chunk.choices[0].delta if chunk.choices else None
            if delta and delta.content:
                accumulated.append(delta.content)

        result = "".join(accumulated)
        logger.info(f"DeepSeek.generate: {len(result)} chars")
        return result
