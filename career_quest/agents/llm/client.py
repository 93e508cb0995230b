from career_quest.settings import Settings
from career_quest.agents.errors import ModelUnavailableError
from career_quest.agents.llm.base import LLMClient
from career_quest.agents.llm.gemini import GeminiClient
from career_quest.agents.llm.groq import GroqOpenAIClient
from career_quest.agents.llm.ollama import OllamaOpenAIClient
from career_quest.agents.pipeline import ModelInvoke
from career_quest.agents.prompts import SYSTEM_CONTENT_WRITER

def get_llm_client(settings: Settings) -> LLMClient:
    provider = settings.LLM_PROVIDER.lower()

    if provider == "groq":
        if not settings.GROQ_API_KEY:
            raise ModelUnavailableError("GROQ_API_KEY is not configured")
        return GroqOpenAIClient(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            model=settings.GROQ_MODEL,
        )

    if provider == "ollama":
        return OllamaOpenAIClient(
            base_url = settings.ollama_base_url,
            model = settings.ollama_model,
        )

    if not settings.GEMINI_API_KEY:
        raise ModelUnavailableError("GEMINI_API_KEY is not configured")
    return GeminiClient(
        api_key=settings.GEMINI_API_KEY,
        base_url=settings.GEMINI_BASE_URL,
        model=settings.GEMINI_MODEL,
    )


def get_model_invoke(settings: Settings) -> ModelInvoke:
    """Adapt the configured client to the prompt -> raw text shape the pipeline awaits."""
    client: LLMClient | None = None

    async def invoke(prompt: str) -> str:
        nonlocal client
        if client is None:
            client = get_llm_client(settings)
        return await client.generate_text(system=SYSTEM_CONTENT_WRITER, user=prompt, temperature=0.2)

    return invoke
