## Base LLM Client Interface
from abc import ABC, abstractmethod

class LLMClient(ABC):
    @abstractmethod
    async def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        """
        Return the raw text the model produced.
        Concrete clients raise ModelUnavailableError for any transport or
        provider failure.
        """
        raise NotImplementedError
