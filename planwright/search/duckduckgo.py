# planwright/search/duckduckgo.py
"""
DuckDuckGo HTML search client.

Scrapes the no-JavaScript results page (html.duckduckgo.com) and returns
raw ``{title, snippet, url}`` dicts in rank order. Optionally fetches each
result page and appends its visible text.
"""

import logging
from urllib.parse import parse_qs, urlparse

import httpx
from bs4 import BeautifulSoup

from planwright.errors import SearchError

logger = logging.getLogger(__name__)

# Elements that never carry readable page text
_STRIP_TAGS = ["script", "style", "noscript", "nav", "header", "footer", "svg"]

# Present on every real results page, including ones with zero hits
_RESULTS_CONTAINER = "#links, .results, .no-results"


def resolve_result_url(href: str) -> str:
    """
    Turn a DuckDuckGo result href into the target URL.

    Handles protocol-relative links ("//example.com") and the
    "/l/?uddg=<encoded target>" redirect wrapper.
    """
    href = href.strip()
    if href.startswith("//"):
        href = f"https:{href}"

    parsed = urlparse(href)
    if parsed.path.startswith("/l/") or parsed.netloc.endswith("duckduckgo.com"):
        target = parse_qs(parsed.query).get("uddg")
        if target:
            return target[0]
    return href


def parse_results_page(html: str) -> list[dict]:
    """
    Extract ranked results from a DuckDuckGo HTML results page.

    Ads (``.result--ad``) are skipped.

    Returns:
        List of {"title", "snippet", "url"} dicts, highest ranked first

    Raises:
        SearchError: If the page has neither a results list nor a
            no-results notice (rate-limit or challenge pages)
    """
    soup = BeautifulSoup(html, "html.parser")
    if soup.select_one(_RESULTS_CONTAINER) is None:
        raise SearchError("Unrecognised DuckDuckGo results page")

    results = []

    for block in soup.select(".result"):
        if "result--ad" in (block.get("class") or []):
            continue

        link = block.select_one("a.result__a")
        if link is None or not link.get("href"):
            continue

        snippet_el = block.select_one(".result__snippet")
        results.append(
            {
                "title": link.get_text(" ", strip=True),
                "snippet": snippet_el.get_text(" ", strip=True) if snippet_el else "",
                "url": resolve_result_url(link["href"]),
            }
        )

    return results


def extract_page_text(html: str, max_chars: int) -> str:
    """Visible body text of a page, whitespace-collapsed and capped."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_STRIP_TAGS):
        tag.decompose()
    body = soup.body if soup.body else soup
    text = " ".join(body.get_text(" ", strip=True).split())
    return text[:max_chars]


class DuckDuckGoClient:
    """
    Async web search over DuckDuckGo's HTML endpoint.

    Example:
        client = DuckDuckGoClient()
        hits = await client.search("event sourcing python")
    """

    def __init__(
        self,
        endpoint: str = "https://html.duckduckgo.com/html/",
        user_agent: str = "Mozilla/5.0",
        timeout: float = 10.0,
        fetch_page_content: bool = False,
        page_content_chars: int = 2000,
        max_pages: int = 5,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            endpoint: Results page URL
            user_agent: User-Agent header (DuckDuckGo rejects empty agents)
            timeout: HTTP timeout in seconds
            fetch_page_content: Append page text of each result to its snippet
            page_content_chars: Cap on appended page text per result
            max_pages: Number of top results whose pages are fetched
            http_client: Injected client (tests); created per call otherwise
        """
        self.endpoint = endpoint
        self.user_agent = user_agent
        self.timeout = timeout
        self.fetch_page_content = fetch_page_content
        self.page_content_chars = page_content_chars
        self.max_pages = max_pages
        self._http_client = http_client

    def _new_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
        )

    async def search(self, query: str) -> list[dict]:
        """
        Run one search.

        Raises:
            SearchError: On HTTP/transport failure, a non-200 response, or
                an unrecognised results page
        """
        if self._http_client is not None:
            return await self._search_with(self._http_client, query)
        async with self._new_http_client() as http:
            return await self._search_with(http, query)

    async def _search_with(self, http: httpx.AsyncClient, query: str) -> list[dict]:
        try:
            response = await http.get(self.endpoint, params={"q": query})
        except httpx.HTTPError as e:
            raise SearchError(f"Search request failed for '{query}': {e}") from e

        if response.status_code != 200:
            raise SearchError(
                f"Search for '{query}' returned HTTP {response.status_code}"
            )

        results = parse_results_page(response.text)
        logger.debug(f"DuckDuckGo: {len(results)} results for '{query}'")

        if self.fetch_page_content and self.page_content_chars > 0:
            for result in results[: self.max_pages]:
                page_text = await self._fetch_page_text(http, result["url"])
                if page_text:
                    result["snippet"] = f"{result['snippet']}\n{page_text}".strip()

        return results

    async def _fetch_page_text(self, http: httpx.AsyncClient, url: str) -> str:
        """Fetch one result page; failures are logged and yield ''."""
        try:
            response = await http.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            return ""
        if response.status_code != 200:
            logger.warning(f"Failed to fetch {url}: HTTP {response.status_code}")
            return ""
        return extract_page_text(response.text, self.page_content_chars)
