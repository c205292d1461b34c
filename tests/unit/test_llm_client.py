# tests/unit/test_llm_client.py
"""Tests for the Ollama and DeepSeek clients, retry classification, and the client factory."""

import httpx
import openai
import pytest
from ollama import ResponseError
from unittest.mock import AsyncMock, MagicMock, patch

from planwright.config.schema import PlannerConfig
from planwright.llm import DeepSeekClient, OllamaClient, create_llm_client, is_retryable


def _ollama() -> OllamaClient:
    return OllamaClient(base_url="http://localhost:11434", model="qwen2.5-coder:32b-instruct")


def _deepseek(model: str = "deepseek-chat") -> DeepSeekClient:
    return DeepSeekClient(api_key="sk-test", base_url="https://api.deepseek.com", model=model)


async def _async_iter(items):
    for item in items:
        yield item


class TestOllamaClientHealthCheck:
    """Test health check functionality."""

    @pytest.mark.asyncio
    async def test_health_check_success_model_available(self):
        """Health check returns True when server is up and model is available."""
        client = _ollama()

        with patch.object(client.client, "list", new_callable=AsyncMock) as mock_list:
            mock_list.return_value = {"models": [{"model": "qwen2.5-coder:32b-instruct"}]}

            result = await client.health_check()
            assert result is True
            mock_list.assert_called_once()

    @pytest.mark.asyncio
    async def test_health_check_model_missing_still_true(self):
        """Health check returns True even if model not in list (can be pulled on demand)."""
        client = _ollama()

        with patch.object(client.client, "list", new_callable=AsyncMock) as mock_list:
            mock_list.return_value = {"models": [{"name": "llama2:7b"}]}

            assert await client.health_check() is True

    @pytest.mark.asyncio
    async def test_health_check_server_down(self):
        """Health check returns False when server is unreachable."""
        client = _ollama()

        with patch.object(client.client, "list", new_callable=AsyncMock) as mock_list:
            mock_list.side_effect = ConnectionError("Connection refused")

            assert await client.health_check() is False


class TestOllamaClientGenerate:
    @pytest.mark.asyncio
    async def test_generate_streams_and_accumulates(self):
        """Generate streams response chunks and returns concatenated content."""
        client = _ollama()
        chunks = [
            {"message": {"content": "Hello "}},
            {"message": {"content": "world"}},
            {"message": {}},
            {"message": {"content": "!"}},
        ]

        with patch.object(client.client, "chat", new_callable=AsyncMock) as mock_chat:
            mock_chat.return_value = _async_iter(chunks)

            result = await client.generate([{"role": "user", "content": "Hi"}])

        assert result == "Hello world!"
        assert mock_chat.call_args.kwargs["model"] == "qwen2.5-coder:32b-instruct"
        assert mock_chat.call_args.kwargs["stream"] is True

    @pytest.mark.asyncio
    async def test_non_transient_error_is_not_retried(self):
        client = _ollama()

        with patch.object(client.client, "chat", new_callable=AsyncMock) as mock_chat:
            mock_chat.side_effect = ResponseError(error="model not found", status_code=404)

            with pytest.raises(ResponseError):
                await client.generate([{"role": "user", "content": "Hi"}])

        assert mock_chat.call_count == 1


class TestDeepSeekClient:
    def test_missing_api_key_rejected(self):
        with pytest.raises(ValueError, match="API key"):
            DeepSeekClient(api_key="")

    @pytest.mark.asyncio
    async def test_health_check_true_on_200(self):
        client = _deepseek()
        mock_response = MagicMock()
        mock_response.status_code = 200

        with patch("planwright.llm.deepseek.httpx.AsyncClient") as mock_http:
            mock_http.return_value.__aenter__ = AsyncMock(return_value=mock_http.return_value)
            mock_http.return_value.__aexit__ = AsyncMock(return_value=False)
            mock_http.return_value.get = AsyncMock(return_value=mock_response)
            result = await client.health_check()

        assert result is True
        url = mock_http.return_value.get.call_args.args[0]
        assert url == "https://api.deepseek.com/models"

    @pytest.mark.asyncio
    async def test_health_check_false_on_error(self):
        client = _deepseek()

        with patch("planwright.llm.deepseek.httpx.AsyncClient") as mock_http:
            mock_http.return_value.__aenter__ = AsyncMock(return_value=mock_http.return_value)
            mock_http.return_value.__aexit__ = AsyncMock(return_value=False)
            mock_http.return_value.get = AsyncMock(side_effect=Exception("connection refused"))
            result = await client.health_check()

        assert result is False

    @pytest.mark.asyncio
    async def test_generate_accumulates_streamed_content(self):
        client = _deepseek(model="deepseek-reasoner")

        chunks = []
        for text in ["Plan", None, " ready"]:
            chunk = MagicMock()
            chunk.choices = [MagicMock()]
            chunk.choices[0].delta.content = text
            chunks.append(chunk)
        empty = MagicMock()
        empty.choices = []
        chunks.append(empty)

        client._client.chat.completions.create = AsyncMock(return_value=_async_iter(chunks))

        result = await client.generate([{"role": "user", "content": "hi"}])

        assert result == "Plan ready"
        kwargs = client._client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "deepseek-reasoner"
        assert kwargs["stream"] is True


class TestIsRetryable:
    _request = httpx.Request("POST", "https://api.deepseek.com/chat/completions")

    @pytest.mark.parametrize("status", [408, 429, 500, 502, 503, 504])
    def test_transient_statuses(self, status):
        assert is_retryable(ResponseError(error="x", status_code=status))
        error = openai.APIStatusError(
            "x", response=httpx.Response(status, request=self._request), body=None
        )
        assert is_retryable(error)

    @pytest.mark.parametrize("status", [400, 401, 404])
    def test_permanent_statuses(self, status):
        assert not is_retryable(ResponseError(error="x", status_code=status))
        error = openai.APIStatusError(
            "x", response=httpx.Response(status, request=self._request), body=None
        )
        assert not is_retryable(error)

    def test_connection_errors(self):
        assert is_retryable(ConnectionError("refused"))
        assert is_retryable(httpx.ConnectError("refused"))
        assert is_retryable(openai.APIConnectionError(request=self._request))

    def test_other_errors(self):
        assert not is_retryable(ValueError("bad"))


class TestFactory:
    def test_ollama_provider(self):
        config = PlannerConfig(provider="ollama")
        client = create_llm_client(config)
        assert isinstance(client, OllamaClient)
        assert client.model == config.ollama.model

    def test_deepseek_provider(self):
        config = PlannerConfig(provider="deepseek", deepseek={"api_key": "sk-test"})
        client = create_llm_client(config)
        assert isinstance(client, DeepSeekClient)
        assert client.model == "deepseek-chat"

    def test_deepseek_without_key(self):
        with pytest.raises(ValueError):
            create_llm_client(PlannerConfig(provider="deepseek"))
