"""AI-powered document summarizer."""

from pathlib import Path

from pdf_summarizer.logging.logger import Log
from pdf_summarizer.summarization.base import BaseSummarizer
from pdf_summarizer.summarization.client_base import BaseSummarizationClient
from pdf_summarizer.summarization.prompt_loader import load_prompt_template, load_system_prompt


class Summarizer(BaseSummarizer):
    """Summarizes extracted PDF text using a chat completion provider."""

    def __init__(
        self,
        *,
        client: BaseSummarizationClient,
        model: str,
        temperature: float = 0.3,
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._system_prompt = load_system_prompt(system_prompt_path)

    async def summarize(self, text: str) -> str | None:
        if not text.strip():
            Log.warning("Refusing to summarize empty text")
            return None

        prompt = self._prompt_template.format(document_text=text.strip())
        Log.debug(f"Summary prompt:\n{prompt}")

        raw_response = await self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
        summary = (raw_response or "").strip()
        if not summary:
            Log.warning(f"Model {self._model} returned no summary")
            return None

        Log.info(f"Summary complete: {len(summary)} chars from {len(text)} chars of text")
        return summary
