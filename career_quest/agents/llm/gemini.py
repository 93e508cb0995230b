import httpx

from career_quest.agents.errors import ModelUnavailableError
from career_quest.agents.llm.base import LLMClient

class GeminiClient(LLMClient):
    """Google Gemini over the public REST generateContent endpoint."""

    def __init__(self, *, api_key: str, base_url: str, model: str, timeout: float = 120,
                 transport: httpx.AsyncBaseTransport | None = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.transport = transport

    async def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "systemInstruction": {"parts": [{"text": system}]},
            "contents": [{"role": "user", "parts": [{"text": user}]}],
            "generationConfig": {"temperature": temperature},
        }
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.post(url, json=payload, headers=headers)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPError as e:
            raise ModelUnavailableError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise ModelUnavailableError(f"Gemini returned a non-JSON body: {e}") from e

        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            raise ModelUnavailableError(f"Unexpected Gemini response: {e}") from e

        # Responses may be split across several text parts
        return "".join(part.get("text", "") for part in parts if isinstance(part, dict))
