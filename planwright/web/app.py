# planwright/web/app.py
"""Starlette app with route assembly."""

import logging

from starlette.applications import Starlette
from starlette.routing import Mount, Route

from planwright.config.schema import PlannerConfig
from planwright.planning import ChatOrchestrator, PlanningOrchestrator, create_orchestrators
from planwright.web.api import chat, create_plan, health

logger = logging.getLogger(__name__)


def build_app(
    config: PlannerConfig | None = None,
    planner: PlanningOrchestrator | None = None,
    chat_orchestrator: ChatOrchestrator | None = None,
) -> Starlette:
    """Build and return the Starlette ASGI app.

    Orchestrators are built from config unless passed in explicitly.
    """
    config = config or PlannerConfig()
    if planner is None or chat_orchestrator is None:
        built_planner, built_chat = create_orchestrators(config)
        planner = planner or built_planner
        chat_orchestrator = chat_orchestrator or built_chat

    routes = [
        Mount("/planner", routes=[
            Route("/create_plan", create_plan, methods=["POST"]),
            Route("/chat", chat, methods=["POST"]),
            Route("/health", health, methods=["GET"]),
        ]),
    ]

    app = Starlette(routes=routes)
    app.state.planner = planner
    app.state.chat = chat_orchestrator
    app.state.provider = config.provider
    app.state.model = config.active_model
    logger.info(f"API ready (provider={config.provider}, model={config.active_model})")
    return app
