"""Tests for the Qwen API provider against a fake HTTP backend."""

import json

import pytest

from providers import NO_RESPONSE_TEXT, ConfigMissingError, QwenAPIError, QwenModelProvider, get_provider
from providers.shared import Message, build_chat_payload
from tests.transport_helpers import FakeQwenAPI, RecordingTransport


def _provider(api: FakeQwenAPI, **kwargs) -> QwenModelProvider:
    transport = RecordingTransport(api)
    api.transport = transport
    return QwenModelProvider(transport=transport, **kwargs)


class TestConfiguration:
    def test_missing_token_raises_on_first_use(self, monkeypatch):
        monkeypatch.delenv("QWEN_API_TOKEN", raising=False)
        provider = QwenModelProvider()

        with pytest.raises(ConfigMissingError, match="QWEN_API_TOKEN environment variable is required"):
            _ = provider.client

    def test_token_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("QWEN_API_TOKEN", "env-token")

        assert QwenModelProvider().api_key == "env-token"

    def test_base_url_trailing_slash_stripped(self):
        provider = QwenModelProvider(api_key="k", base_url="https://qwen.example/")

        assert provider.base_url == "https://qwen.example"
        assert str(provider.client.base_url).rstrip("/") == "https://qwen.example/v1"

    def test_shared_provider_is_reused(self):
        assert get_provider() is get_provider()


class TestListModels:
    @pytest.mark.asyncio
    async def test_returns_ids_in_order(self):
        api = FakeQwenAPI()
        api.models = ["b-model", "a-model"]
        provider = _provider(api)

        assert await provider.list_model_ids() == ["b-model", "a-model"]

        request = api.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/v1/models"
        assert request.headers["authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_error_status_raises_api_error(self):
        api = FakeQwenAPI()
        api.models_status = 503
        provider = _provider(api)

        with pytest.raises(QwenAPIError) as excinfo:
            await provider.list_model_ids()

        assert excinfo.value.status_code == 503
        assert str(excinfo.value) == "API Error (503): models unavailable"
        assert len(api.requests) == 1


class TestChatCompletion:
    @pytest.mark.asyncio
    async def test_payload_fields_reach_the_wire(self):
        api = FakeQwenAPI()
        provider = _provider(api, api_key="explicit-key")
        payload = build_chat_payload(
            "qwen-max-latest",
            [Message(role="user", content="hi")],
            web_search=True,
            enable_thinking=True,
            thinking_budget=500,
        )

        answer = await provider.create_chat_completion(payload)

        assert answer == "Hello from Qwen"
        request = api.requests[0]
        assert request.url.path == "/v1/chat/completions"
        assert request.headers["authorization"] == "Bearer explicit-key"

        body = json.loads(request.content)
        assert body["model"] == "qwen-max-latest"
        assert body["messages"] == [{"role": "user", "content": "hi"}]
        assert body["stream"] is False
        assert body["tools"] == [{"type": "web_search"}]
        assert body["enable_thinking"] is True
        assert body["thinking_budget"] == 500

    @pytest.mark.asyncio
    async def test_plain_payload_has_no_extras(self):
        api = FakeQwenAPI()
        provider = _provider(api)

        await provider.create_chat_completion(build_chat_payload("m", [Message(role="user", content="hi")]))

        body = api.chat_payloads[0]
        assert "tools" not in body
        assert "enable_thinking" not in body
        assert "thinking_budget" not in body

    @pytest.mark.asyncio
    async def test_missing_choices_yields_placeholder(self):
        api = FakeQwenAPI()
        api.chat_content = None
        provider = _provider(api)

        answer = await provider.create_chat_completion(build_chat_payload("m", [Message(role="user", content="hi")]))

        assert answer == NO_RESPONSE_TEXT

    @pytest.mark.asyncio
    async def test_error_status_keeps_raw_body(self):
        api = FakeQwenAPI()
        api.chat_status = 500
        provider = _provider(api)

        with pytest.raises(QwenAPIError) as excinfo:
            await provider.create_chat_completion(build_chat_payload("m", [Message(role="user", content="hi")]))

        assert excinfo.value.status_code == 500
        assert excinfo.value.body == api.chat_error_body
        assert str(excinfo.value) == f"API Error (500): {api.chat_error_body}"
        assert len(api.requests) == 1

    @pytest.mark.asyncio
    async def test_aclose_drops_client(self):
        provider = _provider(FakeQwenAPI())
        _ = provider.client

        await provider.aclose()

        assert provider._client is None
