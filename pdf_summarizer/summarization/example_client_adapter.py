"""Offline summarization client.

Returns the first sentences of the document instead of calling a provider.
Selected with SUMMARIZATION_PROVIDER=example for local development and tests.
"""

import re
from typing import ClassVar

from pdf_summarizer.summarization.client_base import BaseSummarizationClient


class ExampleClientAdapter(BaseSummarizationClient):
    """Echoes the leading sentences of the document text found in the prompt."""

    MAX_SENTENCES: ClassVar[int] = 3
    DOCUMENT_MARKER: ClassVar[str] = "<document>"

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str | None:
        _ = model, temperature, system_prompt
        _, _, document = user_prompt.partition(self.DOCUMENT_MARKER)
        document = document.split("</document>", 1)[0]
        sentences = re.split(r"(?<=[.!?])\s+", " ".join(document.split()))
        summary = " ".join(s for s in sentences[: self.MAX_SENTENCES] if s)
        return summary or None
