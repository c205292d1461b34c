# tests/unit/test_tools.py
"""Tests for the MCP tool implementations (create_plan, chat)."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastmcp.exceptions import ToolError

from fakes import FakeLLMClient, FakeSearchClient
from planwright.errors import Cancelled, ChatProviderFailed, PhaseFailed, ProviderError
from planwright.llm.gateway import CompletionGateway
from planwright.planning.chat import ChatOrchestrator
from planwright.tools import chat, create_plan
from planwright.tools.create_plan import build_request


class TestBuildRequest:
    def test_messages_preferred(self):
        request = build_request([{"role": "user", "content": "from messages"}], "from description")
        assert request.topic == "from messages"

    def test_description_fallback(self):
        assert build_request(None, "  todo app ").topic == "todo app"

    def test_neither(self):
        with pytest.raises(ToolError, match="Provide either"):
            build_request(None, None)

    def test_invalid(self):
        with pytest.raises(ToolError, match="Invalid input"):
            build_request([{"role": "robot", "content": "x"}], None)


class TestCreatePlanTool:
    @pytest.mark.asyncio
    async def test_success(self, make_orchestrator):
        planner = make_orchestrator(FakeSearchClient(), FakeLLMClient())

        result = await create_plan(None, "todo app", planner=planner)

        assert result["status"] == "ok"
        assert len(result["phases"]) == 3
        assert result["searches_used"] == 7
        assert result["markdown"].startswith("---")

    @pytest.mark.asyncio
    async def test_phase_failure_raises_tool_error(self):
        planner = MagicMock()
        planner.create_plan = AsyncMock(side_effect=PhaseFailed("synthesis", ProviderError("boom")))

        with pytest.raises(ToolError, match="phase 'synthesis'"):
            await create_plan(None, "todo app", planner=planner)

    @pytest.mark.asyncio
    async def test_cancelled(self):
        planner = MagicMock()
        planner.create_plan = AsyncMock(side_effect=Cancelled())

        result = await create_plan(None, "todo app", planner=planner)

        assert result == {"status": "cancelled", "message": "Request cancelled"}


class TestChatTool:
    @pytest.mark.asyncio
    async def test_success(self):
        orchestrator = ChatOrchestrator(CompletionGateway(FakeLLMClient(replies=["hello"]), timeout=5))
        result = await chat([{"role": "user", "content": "hi"}], orchestrator=orchestrator)
        assert result == {"status": "ok", "content": "hello"}

    @pytest.mark.asyncio
    async def test_provider_failure(self):
        orchestrator = MagicMock()
        orchestrator.chat = AsyncMock(side_effect=ChatProviderFailed(ProviderError("down")))
        with pytest.raises(ToolError, match="Chat failed: down"):
            await chat([{"role": "user", "content": "hi"}], orchestrator=orchestrator)

    @pytest.mark.asyncio
    async def test_invalid_messages(self):
        with pytest.raises(ToolError):
            await chat([], orchestrator=MagicMock())
