# planwright/search/factory.py
"""Factory for creating the configured search gateway."""

from planwright.config.schema import PlannerConfig

from .duckduckgo import DuckDuckGoClient
from .gateway import SearchGateway


def create_search_gateway(config: PlannerConfig) -> SearchGateway:
    """Build the DuckDuckGo client wrapped with the per-call timeout."""
    client = DuckDuckGoClient(
        endpoint=config.search.endpoint,
        user_agent=config.search.user_agent,
        timeout=config.search.timeout,
        fetch_page_content=config.search.fetch_page_content,
        page_content_chars=config.search.page_content_chars,
        max_pages=config.search.max_results,
    )
    return SearchGateway(
        client,
        timeout=config.planning.per_call_timeout,
        max_results=config.search.max_results,
    )
