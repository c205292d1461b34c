# tests/unit/fakes.py
"""
Fake search and LLM clients for the planning core.

FakeSearchClient and FakeLLMClient sit behind the real SearchGateway and
CompletionGateway, so gateway error mapping is exercised too. Both record
every call they receive.
"""

from collections.abc import Callable

RESEARCH_REPLY = """Research brief.

COMPONENTS:
- API gateway - routes requests
- Task store - persists tasks
- Notification worker - sends reminders
"""


class FakeSearchClient:
    """Returns ``results_per_query`` hits per query; fails for queries in ``fail_on``."""

    def __init__(
        self,
        results_per_query: int = 2,
        fail_on: set[str] | None = None,
        on_search: Callable[[str], None] | None = None,
    ) -> None:
        self.results_per_query = results_per_query
        self.fail_on = fail_on or set()
        self.on_search = on_search
        self.queries: list[str] = []

    async def search(self, query: str) -> list[dict]:
        self.queries.append(query)
        if self.on_search:
            self.on_search(query)
        if query in self.fail_on:
            raise ConnectionError(f"search backend down for {query}")
        return [
            {
                "title": f"{query} result {i}",
                "snippet": f"snippet {i} about {query}",
                "url": f"https://example.com/{query.replace(' ', '-')}/{i}",
            }
            for i in range(1, self.results_per_query + 1)
        ]


class FakeLLMClient:
    """
    Replies from ``replies`` in order (last one repeats).

    ``fail_on_call`` holds 1-based call numbers that raise instead.
    """

    def __init__(
        self,
        replies: list[str] | None = None,
        fail_on_call: set[int] | None = None,
        on_generate: Callable[[int], None] | None = None,
        healthy: bool = True,
    ) -> None:
        self.replies = replies or [RESEARCH_REPLY, "Component analysis.", "Final plan."]
        self.fail_on_call = fail_on_call or set()
        self.on_generate = on_generate
        self.healthy = healthy
        self.calls: list[list[dict]] = []

    async def health_check(self) -> bool:
        return self.healthy

    async def generate(self, messages: list[dict]) -> str:
        self.calls.append(messages)
        call_no = len(self.calls)
        if self.on_generate:
            self.on_generate(call_no)
        if call_no in self.fail_on_call:
            raise RuntimeError(f"provider exploded on call {call_no}")
        return self.replies[min(call_no, len(self.replies)) - 1]
