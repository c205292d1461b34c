# planwright/web/api.py
"""JSON endpoints for planning and chat under /planner."""

import asyncio
import json
import logging

from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse

from planwright.errors import Cancelled, ChatProviderFailed, PhaseFailed
from planwright.models.messages import PlanRequest
from planwright.models.responses import (
    CancelledResponse,
    ChatResponse,
    ConversationRequest,
    ErrorResponse,
    PhaseOut,
    PlanResponse,
)
from planwright.planning import CancellationToken, ChatOrchestrator, PlanningOrchestrator, PlanRenderer

logger = logging.getLogger(__name__)

# nginx "client closed request"
STATUS_CLIENT_CLOSED = 499
DISCONNECT_POLL_SECONDS = 0.5


def get_planner(request: Request) -> PlanningOrchestrator:
    return request.app.state.planner


def get_chat(request: Request) -> ChatOrchestrator:
    return request.app.state.chat


async def _read_conversation(request: Request) -> PlanRequest:
    """Parse and validate the request body. Raises ValueError on bad input."""
    try:
        body = await request.json()
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON body: {e}") from e
    try:
        parsed = ConversationRequest.model_validate(body)
    except ValidationError as e:
        raise ValueError(str(e)) from e
    return PlanRequest.from_dicts([m.model_dump() for m in parsed.messages])


async def _watch_disconnect(request: Request, token: CancellationToken) -> None:
    """Set the token when the client goes away."""
    while not token.cancelled:
        if await request.is_disconnected():
            token.cancel("client disconnected")
            return
        await asyncio.sleep(DISCONNECT_POLL_SECONDS)


def _invalid(e: ValueError) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=str(e)).model_dump(), status_code=422)


def _cancelled(e: Cancelled) -> JSONResponse:
    return JSONResponse(
        CancelledResponse(message=str(e)).model_dump(), status_code=STATUS_CLIENT_CLOSED
    )


async def create_plan(request: Request) -> JSONResponse:
    """Run the three planning phases over the posted conversation."""
    try:
        plan_request = await _read_conversation(request)
    except ValueError as e:
        return _invalid(e)

    token = CancellationToken()
    watcher = asyncio.create_task(_watch_disconnect(request, token))
    try:
        doc = await get_planner(request).create_plan(plan_request, token)
    except Cancelled as e:
        return _cancelled(e)
    except PhaseFailed as e:
        return JSONResponse(
            ErrorResponse(error=str(e.cause), phase=e.phase).model_dump(), status_code=502
        )
    finally:
        watcher.cancel()

    response = PlanResponse(
        summary=doc.summary,
        phases=[PhaseOut(phase=p.phase.value, text=p.text) for p in doc.phases],
        searches_used=doc.searches_used,
        markdown=PlanRenderer().render(doc),
    )
    return JSONResponse(response.model_dump())


async def chat(request: Request) -> JSONResponse:
    """Single completion over the posted conversation."""
    try:
        chat_request = await _read_conversation(request)
    except ValueError as e:
        return _invalid(e)

    token = CancellationToken()
    watcher = asyncio.create_task(_watch_disconnect(request, token))
    try:
        content = await get_chat(request).chat(chat_request, token)
    except Cancelled as e:
        return _cancelled(e)
    except ChatProviderFailed as e:
        return JSONResponse(ErrorResponse(error=str(e.cause)).model_dump(), status_code=502)
    finally:
        watcher.cancel()

    return JSONResponse(ChatResponse(content=content).model_dump())


async def health(request: Request) -> JSONResponse:
    """Active provider and model; 503 when the provider does not answer."""
    reachable = await get_chat(request).provider_healthy()
    return JSONResponse(
        {
            "status": "ok" if reachable else "degraded",
            "provider": request.app.state.provider,
            "model": request.app.state.model,
            "provider_reachable": reachable,
        },
        status_code=200 if reachable else 503,
    )
