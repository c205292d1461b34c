# planwright/web/__init__.py
"""HTTP API for planwright."""

import logging

from planwright.config.schema import PlannerConfig

logger = logging.getLogger(__name__)


def create_app(config: PlannerConfig | None = None) -> object:
    """Create the Starlette ASGI application."""
    from planwright.web.app import build_app

    return build_app(config=config)


def run_api(config: PlannerConfig, host: str | None = None, port: int | None = None) -> None:
    """Serve the HTTP API with uvicorn until interrupted."""
    import uvicorn

    host = host or config.server.host
    port = port or config.server.port
    app = create_app(config)

    logger.info(f"Serving API at http://{host}:{port}/planner")
    uvicorn.run(app, host=host, port=port, log_config=None)
