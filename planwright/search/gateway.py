# planwright/search/gateway.py
"""
SearchGateway: the only way phases reach the web.

Enforces the per-call timeout and normalizes raw hits into ranked,
de-duplicated SearchResult tuples. Every failure surfaces as SearchError.
"""

import asyncio
import logging
from typing import Any, Protocol

from planwright.errors import SearchError
from planwright.models.plan import SearchResult

logger = logging.getLogger(__name__)


class SearchClient(Protocol):
    """Anything that returns ranked ``{title, snippet, url}`` hits for a query."""

    async def search(self, query: str) -> list[Any]: ...


def _field(hit: Any, name: str) -> str:
    value = hit.get(name) if isinstance(hit, dict) else getattr(hit, name, None)
    return " ".join(str(value).split()) if value else ""


def normalize_results(raw: list[Any], max_results: int) -> tuple[SearchResult, ...]:
    """
    Normalize raw hits, preserving rank order.

    Drops hits without a URL and repeated URLs, collapses whitespace,
    falls back to the URL when the title is empty, and keeps at most
    max_results entries.
    """
    seen: set[str] = set()
    results: list[SearchResult] = []
    for hit in raw or []:
        url = _field(hit, "url")
        if not url or url in seen:
            continue
        seen.add(url)
        results.append(
            SearchResult(
                title=_field(hit, "title") or url,
                snippet=_field(hit, "snippet"),
                url=url,
            )
        )
        if len(results) >= max_results:
            break
    return tuple(results)


class SearchGateway:
    """
    Timeout-bounded search capability.

    Example:
        gateway = SearchGateway(DuckDuckGoClient(), timeout=30, max_results=5)
        results = await gateway.search("postgres logical replication")
    """

    def __init__(self, client: SearchClient, timeout: float, max_results: int = 5) -> None:
        self._client = client
        self._timeout = timeout
        self._max_results = max_results

    async def search(self, query: str) -> tuple[SearchResult, ...]:
        """
        Run one query.

        Returns:
            Ranked results (possibly empty)

        Raises:
            SearchError: On client error or timeout
        """
        try:
            raw = await asyncio.wait_for(self._client.search(query), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise SearchError(
                f"Search for '{query}' timed out after {self._timeout:.0f}s"
            ) from e
        except SearchError:
            raise
        except Exception as e:
            raise SearchError(f"Search for '{query}' failed: {type(e).__name__}: {e}") from e

        results = normalize_results(raw, self._max_results)
        logger.info(f"Search '{query}': {len(results)} results")
        return results
