from typing import ClassVar

from pdf_summarizer.config.settings import Settings
from pdf_summarizer.summarization.base import BaseSummarizer
from pdf_summarizer.summarization.example_client_adapter import ExampleClientAdapter
from pdf_summarizer.summarization.openai_client_adapter import OpenAIClientAdapter
from pdf_summarizer.summarization.summarizer import Summarizer


class SummarizerFactory:
    """Creates the configured summarizer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "groq": "https://api.groq.com/openai/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseSummarizer:
        """Create a configured summarizer from application settings."""
        provider = settings.summarization_provider.strip().lower()
        if provider == "example":
            return Summarizer(client=ExampleClientAdapter(), model="example")
        client = OpenAIClientAdapter(
            api_key=settings.summarization_api_key,
            timeout_seconds=settings.summarization_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Summarizer(
            client=client,
            model=settings.summarization_model_name,
            temperature=settings.summarization_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = (settings.summarization_base_url or "").strip() or None
        if provider == "openai":
            return override
        if provider == "openai_compatible":
            if override is None:
                raise ValueError(
                    "summarization_base_url is required for "
                    "summarization_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown summarization provider '{provider}'. Choose from: {supported}"
        )
