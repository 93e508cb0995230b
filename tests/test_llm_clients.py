import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import httpx
import openai
import pytest

from career_quest.settings import Settings
from career_quest.agents.errors import ModelUnavailableError
from career_quest.agents.llm.client import get_llm_client, get_model_invoke
from career_quest.agents.llm.gemini import GeminiClient
from career_quest.agents.llm.groq import GroqOpenAIClient
from career_quest.agents.llm.ollama import OllamaOpenAIClient
from career_quest.agents.prompts import SYSTEM_CONTENT_WRITER


def gemini_client(handler):
    return GeminiClient(
        api_key="g-key",
        base_url="https://gemini.test/v1beta",
        model="gemini-2.5-flash",
        transport=httpx.MockTransport(handler),
    )


class TestGeminiClient:
    async def test_joins_text_parts(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["key"] = request.headers["x-goog-api-key"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={
                "candidates": [{"content": {"parts": [{"text": '{"title": '}, {"text": '"X"}'}]}}],
            })

        text = await gemini_client(handler).generate_text(system="sys", user="hello")

        assert text == '{"title": "X"}'
        assert seen["url"] == "https://gemini.test/v1beta/models/gemini-2.5-flash:generateContent"
        assert seen["key"] == "g-key"
        assert seen["body"]["contents"][0]["parts"][0]["text"] == "hello"

    async def test_http_error_becomes_model_unavailable(self):
        client = gemini_client(lambda request: httpx.Response(429, json={"error": "quota"}))

        with pytest.raises(ModelUnavailableError):
            await client.generate_text(system="sys", user="hello")

    async def test_missing_candidates_becomes_model_unavailable(self):
        client = gemini_client(lambda request: httpx.Response(200, json={"promptFeedback": {}}))

        with pytest.raises(ModelUnavailableError):
            await client.generate_text(system="sys", user="hello")


class TestOllamaClient:
    async def test_reads_first_choice(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/v1/chat/completions"
            return httpx.Response(200, json={"choices": [{"message": {"content": "{}"}}]})

        client = OllamaOpenAIClient(
            "http://ollama.test/v1/", "llama3.1", transport=httpx.MockTransport(handler)
        )

        assert await client.generate_text(system="sys", user="hi") == "{}"

    async def test_connection_error_becomes_model_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = OllamaOpenAIClient(
            "http://ollama.test/v1", "llama3.1", transport=httpx.MockTransport(handler)
        )

        with pytest.raises(ModelUnavailableError):
            await client.generate_text(system="sys", user="hi")


def groq_client():
    return GroqOpenAIClient(api_key="gk", base_url="https://groq.test/openai/v1", model="llama-3.3-70b")


def completion(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content)) for content in contents]
    )


class TestGroqClient:
    async def test_reads_first_choice(self):
        client = groq_client()
        create = AsyncMock(return_value=completion('  {"title": "X"}  '))

        with patch.object(client.client.chat.completions, "create", create):
            text = await client.generate_text(system="sys", user="hi", temperature=0.5)

        assert text == '{"title": "X"}'
        kwargs = create.await_args.kwargs
        assert kwargs["model"] == "llama-3.3-70b"
        assert kwargs["temperature"] == 0.5
        assert kwargs["messages"] == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "hi"},
        ]

    async def test_sdk_error_becomes_model_unavailable(self):
        client = groq_client()
        error = openai.APIConnectionError(request=httpx.Request("POST", "https://groq.test/openai/v1"))

        with patch.object(client.client.chat.completions, "create", AsyncMock(side_effect=error)):
            with pytest.raises(ModelUnavailableError):
                await client.generate_text(system="sys", user="hi")

    @pytest.mark.parametrize("response", [completion(), completion(None)])
    async def test_missing_content_becomes_model_unavailable(self, response):
        client = groq_client()

        with patch.object(client.client.chat.completions, "create", AsyncMock(return_value=response)):
            with pytest.raises(ModelUnavailableError):
                await client.generate_text(system="sys", user="hi")


class TestClientSelection:
    def test_gemini_is_default(self):
        client = get_llm_client(Settings(_env_file=None, GEMINI_API_KEY="g-key"))
        assert isinstance(client, GeminiClient)

    def test_gemini_without_key(self):
        with pytest.raises(ModelUnavailableError):
            get_llm_client(Settings(_env_file=None, GEMINI_API_KEY=None))

    def test_groq(self):
        client = get_llm_client(Settings(_env_file=None, LLM_PROVIDER="groq", GROQ_API_KEY="gk"))
        assert isinstance(client, GroqOpenAIClient)

    def test_groq_without_key(self):
        with pytest.raises(ModelUnavailableError):
            get_llm_client(Settings(_env_file=None, LLM_PROVIDER="groq", GROQ_API_KEY=None))

    def test_ollama(self):
        client = get_llm_client(Settings(_env_file=None, LLM_PROVIDER="ollama"))
        assert isinstance(client, OllamaOpenAIClient)


class TestModelInvoke:
    async def test_invoke_uses_content_writer_system_prompt(self):
        fake_client = AsyncMock()
        fake_client.generate_text.return_value = "{}"

        with patch("career_quest.agents.llm.client.get_llm_client", return_value=fake_client) as factory:
            invoke = get_model_invoke(Settings(_env_file=None))
            assert await invoke("prompt one") == "{}"
            await invoke("prompt two")

        factory.assert_called_once()
        fake_client.generate_text.assert_awaited_with(
            system=SYSTEM_CONTENT_WRITER, user="prompt two", temperature=0.2
        )

    async def test_missing_key_surfaces_on_invoke(self):
        invoke = get_model_invoke(Settings(_env_file=None, GEMINI_API_KEY=None))

        with pytest.raises(ModelUnavailableError):
            await invoke("prompt")
