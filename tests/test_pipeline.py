import asyncio
import json
import logging
from unittest.mock import AsyncMock

import httpx
import pytest

from career_quest.settings import Settings
from career_quest.agents.errors import (
    ExtractionError,
    ModelUnavailableError,
    SchemaValidationError,
)
from career_quest.agents.pipeline import (
    GenerationPipeline,
    GenerationRequest,
    PipelineConfig,
)
from career_quest.agents.schemas import ContentKind, to_payload


def quiz_request(**params):
    params.setdefault("quizTitle", "Variables Quiz")
    params.setdefault("courseTitle", "Python Basics")
    params.setdefault("careerField", "Software Engineering")
    return GenerationRequest(kind=ContentKind.QUIZ, params=params)


class TestSuccessPath:
    async def test_quiz_with_empty_questions(self, pipeline):
        model_invoke = AsyncMock(return_value='{"title":"X","questions":[]}')

        content = await pipeline.generate(quiz_request(), model_invoke)

        payload = to_payload(content)
        assert payload["title"] == "X"
        assert payload["questions"] == []

    async def test_prompt_carries_request_parameters(self, pipeline):
        model_invoke = AsyncMock(return_value='{"title":"X","questions":[]}')

        await pipeline.generate(quiz_request(quizTitle="Closures"), model_invoke)

        prompt = model_invoke.await_args.args[0]
        assert "Closures" in prompt
        assert "Python Basics" in prompt

    async def test_fenced_response_accepted(self, pipeline):
        raw = 'Here you go:\n```json\n{"title": "Loops", "content": "## Loops"}\n```'
        request = GenerationRequest(kind=ContentKind.CHEAT_SHEET, params={"cheatSheetTitle": "Loops"})

        result = await pipeline.generate_with_outcome(request, AsyncMock(return_value=raw))

        assert result.used_fallback is False
        assert result.error is None
        assert to_payload(result.content) == {"title": "Loops", "content": "## Loops"}


class TestFallbackPath:
    async def test_plain_text_response_falls_back(self, pipeline):
        request = GenerationRequest(kind=ContentKind.CHEAT_SHEET, params={"cheatSheetTitle": "Loops"})
        model_invoke = AsyncMock(return_value="Sorry, I cannot help with that.")

        result = await pipeline.generate_with_outcome(request, model_invoke)

        assert result.used_fallback is True
        assert isinstance(result.error, ExtractionError)
        assert to_payload(result.content)["title"] == "Loops"

    async def test_partial_syllabus_falls_back(self, pipeline):
        request = GenerationRequest(
            kind=ContentKind.COURSE_SYLLABUS,
            params={"courseTitle": "SQL Basics", "careerField": "Data"},
        )
        model_invoke = AsyncMock(return_value='{"courseTitle":"X"}')

        result = await pipeline.generate_with_outcome(request, model_invoke)

        assert result.used_fallback is True
        assert isinstance(result.error, SchemaValidationError)
        payload = to_payload(result.content)
        assert payload["courseTitle"] == "SQL Basics"
        assert len(payload["syllabus"]) == 4

    async def test_model_exception_never_escapes(self, pipeline):
        model_invoke = AsyncMock(side_effect=httpx.ConnectError("connection refused"))

        result = await pipeline.generate_with_outcome(quiz_request(), model_invoke)

        assert result.used_fallback is True
        assert isinstance(result.error, ModelUnavailableError)
        assert to_payload(result.content)["title"] == "Variables Quiz"

    async def test_empty_response_treated_as_unavailable(self, pipeline):
        result = await pipeline.generate_with_outcome(quiz_request(), AsyncMock(return_value="   "))

        assert isinstance(result.error, ModelUnavailableError)

    async def test_missing_credential_skips_model(self):
        pipeline = GenerationPipeline(PipelineConfig(provider="gemini", api_key=None))
        model_invoke = AsyncMock(return_value='{"title":"X","questions":[]}')

        result = await pipeline.generate_with_outcome(quiz_request(), model_invoke)

        model_invoke.assert_not_awaited()
        assert result.used_fallback is True
        assert isinstance(result.error, ModelUnavailableError)

    async def test_timeout_falls_back(self):
        pipeline = GenerationPipeline(PipelineConfig(api_key="k", timeout_seconds=0.01))

        async def slow_model(prompt):
            await asyncio.sleep(1)
            return '{"title":"X","questions":[]}'

        result = await pipeline.generate_with_outcome(quiz_request(), slow_model)

        assert result.used_fallback is True
        assert isinstance(result.error, ModelUnavailableError)

    async def test_no_retry_on_failure(self, pipeline):
        model_invoke = AsyncMock(return_value="no json here")

        await pipeline.generate(quiz_request(), model_invoke)

        assert model_invoke.await_count == 1

    async def test_failure_logged_with_category(self, pipeline, caplog):
        caplog.set_level(logging.WARNING, logger="tests.pipeline")

        await pipeline.generate(quiz_request(), AsyncMock(return_value="{broken"))

        assert "extraction" in caplog.text
        assert "Using fallback quiz content" in caplog.text


@pytest.mark.parametrize("kind", list(ContentKind))
@pytest.mark.parametrize(
    "model_invoke",
    [
        AsyncMock(side_effect=RuntimeError("quota exceeded")),
        AsyncMock(return_value="no braces"),
        AsyncMock(return_value="{not: json}"),
        AsyncMock(return_value=json.dumps({"unexpected": True})),
        AsyncMock(return_value="[1, 2, 3] {}"),
    ],
)
async def test_generate_always_returns_valid_content(pipeline, kind, model_invoke):
    content = await pipeline.generate(GenerationRequest(kind=kind), model_invoke)
    assert to_payload(content)


class TestGenerationRequest:
    def test_request_is_immutable(self):
        request = quiz_request()
        with pytest.raises(Exception):
            request.kind = ContentKind.TASK

    def test_context_is_a_copy(self):
        request = quiz_request()
        request.context["quizTitle"] = "changed"
        assert request.params["quizTitle"] == "Variables Quiz"


class TestPipelineConfig:
    def test_from_settings_gemini(self):
        settings = Settings(_env_file=None, GEMINI_API_KEY="g-key", model_timeout_seconds=5)
        config = PipelineConfig.from_settings(settings)
        assert (config.provider, config.api_key, config.model) == ("gemini", "g-key", "gemini-2.5-flash")
        assert config.timeout_seconds == 5
        assert config.has_credential

    def test_from_settings_groq_without_key(self):
        settings = Settings(_env_file=None, LLM_PROVIDER="groq", GROQ_API_KEY=None)
        assert PipelineConfig.from_settings(settings).has_credential is False

    def test_ollama_needs_no_key(self):
        settings = Settings(_env_file=None, LLM_PROVIDER="ollama")
        assert PipelineConfig.from_settings(settings).has_credential is True
