# tests/unit/test_duckduckgo.py
"""Tests for the DuckDuckGo HTML client (parsing and HTTP handling via httpx.MockTransport)."""

import httpx
import pytest

from planwright.errors import SearchError
from planwright.search.duckduckgo import (
    DuckDuckGoClient,
    extract_page_text,
    parse_results_page,
    resolve_result_url,
)

RESULTS_HTML = """
<html><body>
<div id="links" class="results">
<div class="result results_links result--ad">
  <a class="result__a" href="https://ads.example.com">Sponsored</a>
  <a class="result__snippet">Buy now</a>
</div>
<div class="result results_links">
  <h2><a class="result__a" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Ffastapi.tiangolo.com%2F&amp;rut=x">FastAPI docs</a></h2>
  <a class="result__snippet">FastAPI framework, high performance</a>
</div>
<div class="result results_links">
  <h2><a class="result__a" href="https://github.com/example/todo">Example todo</a></h2>
</div>
<div class="result results_links">
  <h2>No link here</h2>
</div>
</div>
</body></html>
"""

NO_RESULTS_HTML = """
<html><body>
<div id="links" class="results"><div class="no-results">No results.</div></div>
</body></html>
"""

CHALLENGE_HTML = """
<html><body>
<div class="anomaly-modal">Unfortunately, bots use DuckDuckGo too.</div>
</body></html>
"""


def test_resolve_result_url():
    assert resolve_result_url("//duckduckgo.com/l/?uddg=https%3A%2F%2Fa.com%2Fx") == "https://a.com/x"
    assert resolve_result_url("https://plain.example/") == "https://plain.example/"
    assert resolve_result_url("//cdn.example/page") == "https://cdn.example/page"


def test_parse_results_page_skips_ads_and_linkless_blocks():
    results = parse_results_page(RESULTS_HTML)
    assert results == [
        {
            "title": "FastAPI docs",
            "snippet": "FastAPI framework, high performance",
            "url": "https://fastapi.tiangolo.com/",
        },
        {"title": "Example todo", "snippet": "", "url": "https://github.com/example/todo"},
    ]


def test_parse_results_page_empty_results():
    assert parse_results_page(NO_RESULTS_HTML) == []


def test_parse_results_page_rejects_unrecognised_page():
    with pytest.raises(SearchError, match="Unrecognised"):
        parse_results_page(CHALLENGE_HTML)


def test_extract_page_text_drops_scripts():
    html = "<html><body><script>var x;</script><nav>menu</nav><p>Hello   world</p></body></html>"
    assert extract_page_text(html, 100) == "Hello world"
    assert extract_page_text(html, 5) == "Hello"


def _client(handler, **kwargs) -> DuckDuckGoClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return DuckDuckGoClient(endpoint="https://html.duckduckgo.com/html/", http_client=http, **kwargs)


@pytest.mark.asyncio
async def test_search_sends_query_and_parses():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=RESULTS_HTML)

    results = await _client(handler).search("fastapi todo")

    assert [r["url"] for r in results] == [
        "https://fastapi.tiangolo.com/",
        "https://github.com/example/todo",
    ]
    assert seen[0].url.params["q"] == "fastapi todo"


@pytest.mark.asyncio
async def test_non_200_raises_search_error():
    client = _client(lambda request: httpx.Response(503, text="busy"))
    with pytest.raises(SearchError, match="HTTP 503"):
        await client.search("q")


@pytest.mark.asyncio
async def test_challenge_page_raises_search_error():
    client = _client(lambda request: httpx.Response(200, text=CHALLENGE_HTML))
    with pytest.raises(SearchError, match="Unrecognised"):
        await client.search("q")


@pytest.mark.asyncio
async def test_transport_error_raises_search_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(SearchError, match="request failed"):
        await _client(handler).search("q")


@pytest.mark.asyncio
async def test_page_content_appended_and_failures_ignored():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "html.duckduckgo.com":
            return httpx.Response(200, text=RESULTS_HTML)
        if request.url.host == "fastapi.tiangolo.com":
            return httpx.Response(200, text="<body><p>Page body text</p></body>")
        return httpx.Response(404)

    client = _client(handler, fetch_page_content=True, page_content_chars=50)
    results = await client.search("q")

    assert results[0]["snippet"] == "FastAPI framework, high performance\nPage body text"
    assert results[1]["snippet"] == ""
