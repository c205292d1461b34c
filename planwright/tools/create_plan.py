# planwright/tools/create_plan.py
"""
create_plan tool implementation.

Validates the conversation, runs the planning pipeline, and returns the
same JSON shape as POST /planner/create_plan.
"""

import logging

from fastmcp.exceptions import ToolError

from planwright.errors import Cancelled, PhaseFailed
from planwright.models.messages import PlanRequest
from planwright.models.responses import CancelledResponse, PhaseOut, PlanResponse
from planwright.planning.cancellation import CancellationToken
from planwright.planning.orchestrator import PlanningOrchestrator
from planwright.planning.output import PlanRenderer

logger = logging.getLogger(__name__)


def build_request(messages: list[dict] | None, description: str | None) -> PlanRequest:
    """
    Build a PlanRequest from either a message list or a one-line description.

    Raises:
        ToolError: If neither is given or the input fails validation
    """
    try:
        if messages:
            return PlanRequest.from_dicts(messages)
        if description:
            return PlanRequest.from_text(description)
    except ValueError as e:
        raise ToolError(f"Invalid input: {e}")
    raise ToolError("Provide either 'messages' or 'description'")


async def create_plan(
    messages: list[dict] | None,
    description: str | None,
    planner: PlanningOrchestrator,
    token: CancellationToken | None = None,
) -> dict:
    """
    Produce a technical plan for the conversation.

    Args:
        messages: Conversation as role/content dicts (preferred)
        description: Single user message, used when messages is empty
        planner: Shared PlanningOrchestrator
        token: Optional cancellation token

    Returns:
        PlanResponse as dict, or CancelledResponse as dict

    Raises:
        ToolError: If input is invalid or a phase fails
    """
    request = build_request(messages, description)

    try:
        doc = await planner.create_plan(request, token or CancellationToken())
    except Cancelled as e:
        return CancelledResponse(message=str(e)).model_dump()
    except PhaseFailed as e:
        raise ToolError(f"Planning failed in phase '{e.phase}': {e.cause}")

    logger.info(f"create_plan done: {doc.summary}")
    return PlanResponse(
        summary=doc.summary,
        phases=[PhaseOut(phase=p.phase.value, text=p.text) for p in doc.phases],
        searches_used=doc.searches_used,
        markdown=PlanRenderer().render(doc),
    ).model_dump()
