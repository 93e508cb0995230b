import openai
from openai import AsyncOpenAI

from career_quest.agents.errors import ModelUnavailableError
from .base import LLMClient

class GroqOpenAIClient(LLMClient):
    def __init__(self, * , api_key: str, base_url: str, model: str):
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.model = model

    async def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except openai.OpenAIError as e:
            raise ModelUnavailableError(f"Groq request failed: {e}") from e

        if not resp.choices or resp.choices[0].message.content is None:
            raise ModelUnavailableError("Groq returned no content")
        return resp.choices[0].message.content.strip()
