# planwright/tools/chat.py
"""chat tool implementation."""

import logging

from fastmcp.exceptions import ToolError

from planwright.errors import Cancelled, ChatProviderFailed
from planwright.models.messages import PlanRequest
from planwright.models.responses import CancelledResponse, ChatResponse
from planwright.planning.cancellation import CancellationToken
from planwright.planning.chat import ChatOrchestrator

logger = logging.getLogger(__name__)


async def chat(
    messages: list[dict],
    orchestrator: ChatOrchestrator,
    token: CancellationToken | None = None,
) -> dict:
    """
    Reply to the latest user turn.

    Returns:
        ChatResponse as dict, or CancelledResponse as dict

    Raises:
        ToolError: If messages are invalid or the provider fails
    """
    try:
        request = PlanRequest.from_dicts(messages)
    except ValueError as e:
        raise ToolError(f"Invalid input: {e}")

    try:
        content = await orchestrator.chat(request, token or CancellationToken())
    except Cancelled as e:
        return CancelledResponse(message=str(e)).model_dump()
    except ChatProviderFailed as e:
        raise ToolError(f"Chat failed: {e.cause}")

    return ChatResponse(content=content).model_dump()
