# planwright/llm/gateway.py
"""
CompletionGateway: the only way orchestrators reach the LLM.

Wraps a client exposing ``async generate(messages) -> str`` and enforces
the per-call timeout. Every failure, timeouts included, surfaces as
ProviderError with the original exception chained.
"""

import asyncio
import logging
import time
from typing import Protocol

from planwright.errors import ProviderError

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Anything that can turn chat messages into completion text."""

    async def generate(self, messages: list[dict]) -> str: ...

    async def health_check(self) -> bool: ...


class CompletionGateway:
    """
    Timeout-bounded completion capability.

    Example:
        gateway = CompletionGateway(create_llm_client(config), timeout=120)
        text = await gateway.complete([{"role": "user", "content": "..."}])
    """

    def __init__(self, client: CompletionClient, timeout: float) -> None:
        self._client = client
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    async def health_check(self) -> bool:
        """True if the provider answers within the per-call timeout."""
        try:
            return await asyncio.wait_for(self._client.health_check(), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Provider health check timed out after {self._timeout:.0f}s")
            return False

    async def complete(self, messages: list[dict]) -> str:
        """
        Submit a prompt (as chat messages) and return the raw completion text.

        Raises:
            ProviderError: On client error, timeout, or empty completion
        """
        t0 = time.monotonic()
        try:
            text = await asyncio.wait_for(
                self._client.generate(messages=messages), timeout=self._timeout
            )
        except asyncio.TimeoutError as e:
            raise ProviderError(
                f"Completion timed out after {self._timeout:.0f}s"
            ) from e
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError(f"{type(e).__name__}: {e}") from e

        if not text or not text.strip():
            raise ProviderError("Provider returned an empty completion")

        logger.info(f"Completion took {time.monotonic() - t0:.1f}s ({len(text)} chars)")
        return text
