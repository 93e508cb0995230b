# career_quest/agents/pipeline.py
"""
Prompt -> model -> JSON extraction -> validation, with a static fallback.

``GenerationPipeline.generate`` never raises for a well-formed request. Any
failure after the request is built (no credential, provider error, timeout,
missing JSON, malformed JSON, schema mismatch) ends in the fallback payload
for the request's content kind. There are no retries.
"""
import asyncio
import logging
from typing import Awaitable, Callable, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from career_quest.settings import Settings
from career_quest.agents.errors import GenerationError, ModelUnavailableError
from career_quest.agents.extractor import DEFAULT_SNIPPET_LIMIT, extract_json
from career_quest.agents.fallbacks import get_fallback
from career_quest.agents.prompts import build_prompt
from career_quest.agents.schemas import ContentKind, ValidatedContent
from career_quest.agents.validator import validate_content

ModelInvoke = Callable[[str], Awaitable[str]]

PROVIDERS_WITHOUT_KEY = {"ollama"}


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ContentKind
    params: dict[str, str] = Field(default_factory=dict)

    @property
    def context(self) -> dict[str, str]:
        return dict(self.params)


class PipelineConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    provider: str = "gemini"
    api_key: str | None = None
    model: str = "gemini-2.5-flash"
    timeout_seconds: float | None = None
    snippet_limit: int = DEFAULT_SNIPPET_LIMIT
    balanced_fallback: bool = True

    @property
    def has_credential(self) -> bool:
        return self.provider.lower() in PROVIDERS_WITHOUT_KEY or bool(self.api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PipelineConfig":
        provider = settings.LLM_PROVIDER.lower()
        if provider == "groq":
            api_key, model = settings.GROQ_API_KEY, settings.GROQ_MODEL
        elif provider == "ollama":
            api_key, model = None, settings.ollama_model
        else:
            api_key, model = settings.GEMINI_API_KEY, settings.GEMINI_MODEL
        return cls(
            provider=provider,
            api_key=api_key,
            model=model,
            timeout_seconds=settings.model_timeout_seconds,
            snippet_limit=settings.extraction_snippet_limit,
            balanced_fallback=settings.extraction_balanced_fallback,
        )


class GenerationResult(NamedTuple):
    content: ValidatedContent
    used_fallback: bool
    error: GenerationError | None = None


class GenerationPipeline:
    def __init__(self, config: PipelineConfig, logger: logging.Logger | None = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

    async def _invoke(self, prompt: str, model_invoke: ModelInvoke) -> str:
        if not self.config.has_credential:
            raise ModelUnavailableError(f"No API key configured for provider {self.config.provider}")

        try:
            if self.config.timeout_seconds is not None:
                raw = await asyncio.wait_for(model_invoke(prompt), timeout=self.config.timeout_seconds)
            else:
                raw = await model_invoke(prompt)
        except GenerationError:
            raise
        except asyncio.TimeoutError as e:
            raise ModelUnavailableError(
                f"Model call timed out after {self.config.timeout_seconds}s"
            ) from e
        except Exception as e:
            raise ModelUnavailableError(f"Model call failed: {e}") from e

        if not isinstance(raw, str) or not raw.strip():
            raise ModelUnavailableError("Model returned an empty response")
        return raw

    async def generate_with_outcome(self, request: GenerationRequest,
                                    model_invoke: ModelInvoke) -> GenerationResult:
        kind = request.kind
        try:
            prompt = build_prompt(kind, request.params)
            self.logger.info("Generating %s content (prompt length %d)", kind.value, len(prompt))

            raw = await self._invoke(prompt, model_invoke)
            self.logger.debug("Model response for %s received (length %d)", kind.value, len(raw))

            value = extract_json(
                raw,
                snippet_limit=self.config.snippet_limit,
                balanced_fallback=self.config.balanced_fallback,
            )
            content = validate_content(kind, value)
        except GenerationError as e:
            snippet = getattr(e, "snippet", None)
            self.logger.warning(
                "Using fallback %s content (%s): %s%s",
                kind.value,
                e.category.value,
                e,
                f" | snippet: {snippet}" if snippet else "",
            )
            return GenerationResult(get_fallback(kind, request.context), True, e)
        except Exception:
            self.logger.exception("Unexpected error generating %s content, using fallback", kind.value)
            return GenerationResult(get_fallback(kind, request.context), True, None)

        self.logger.info("Generated %s content from model response", kind.value)
        return GenerationResult(content, False, None)

    async def generate(self, request: GenerationRequest, model_invoke: ModelInvoke) -> ValidatedContent:
        result = await self.generate_with_outcome(request, model_invoke)
        return result.content
