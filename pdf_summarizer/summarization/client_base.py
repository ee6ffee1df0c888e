from abc import ABC, abstractmethod


class BaseSummarizationClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str | None:
        """Return the provider's reply text, or None when it produced none."""
