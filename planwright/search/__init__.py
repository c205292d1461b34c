"""Web search: DuckDuckGo client and the search gateway."""

from .duckduckgo import DuckDuckGoClient, parse_results_page, resolve_result_url
from .factory import create_search_gateway
from .gateway import SearchClient, SearchGateway, normalize_results

__all__ = [
    "DuckDuckGoClient",
    "SearchClient",
    "SearchGateway",
    "create_search_gateway",
    "normalize_results",
    "parse_results_page",
    "resolve_result_url",
]
