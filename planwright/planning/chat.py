# planwright/planning/chat.py
"""ChatOrchestrator: a single completion over the conversation, no searches."""

import logging

from planwright.errors import ChatProviderFailed, ProviderError
from planwright.llm.gateway import CompletionGateway
from planwright.models.messages import PlanRequest
from planwright.planning.cancellation import CancellationToken

logger = logging.getLogger(__name__)


class ChatOrchestrator:
    def __init__(self, completion_gateway: CompletionGateway) -> None:
        self._completion = completion_gateway

    async def provider_healthy(self) -> bool:
        return await self._completion.health_check()

    async def chat(
        self, request: PlanRequest, token: CancellationToken | None = None
    ) -> str:
        """
        Answer the latest turn using the full message history.

        Raises:
            Cancelled: If the token is set before the call
            ChatProviderFailed: If the completion call fails
        """
        if token:
            token.raise_if_cancelled()
        try:
            text = await self._completion.complete(request.to_dicts())
        except ProviderError as e:
            logger.error(f"Chat completion failed: {e}")
            raise ChatProviderFailed(e) from e
        return text.strip()
