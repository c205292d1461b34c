# tests/unit/conftest.py
"""Fixtures wiring the fake clients into real gateways and orchestrators."""

import pytest

from fakes import FakeLLMClient, FakeSearchClient
from planwright.llm.gateway import CompletionGateway
from planwright.planning.orchestrator import PlanningOrchestrator
from planwright.search.gateway import SearchGateway


@pytest.fixture
def search_client() -> FakeSearchClient:
    return FakeSearchClient()


@pytest.fixture
def llm_client() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def make_orchestrator():
    """Factory: PlanningOrchestrator over the given fake clients."""

    def _make(
        search_client: FakeSearchClient,
        llm_client: FakeLLMClient,
        max_searches: int = 20,
        max_queries_per_phase: int = 4,
        max_evidence_chars: int = 12000,
    ) -> PlanningOrchestrator:
        return PlanningOrchestrator(
            SearchGateway(search_client, timeout=5, max_results=5),
            CompletionGateway(llm_client, timeout=5),
            max_searches=max_searches,
            max_queries_per_phase=max_queries_per_phase,
            max_evidence_chars=max_evidence_chars,
        )

    return _make
