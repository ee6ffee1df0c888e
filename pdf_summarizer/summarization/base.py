from abc import ABC, abstractmethod


class BaseSummarizer(ABC):
    """Contract for all summarization adapters."""

    @abstractmethod
    async def summarize(self, text: str) -> str | None:
        """Condense extracted document text into a natural-language summary.

        Args:
            text: Full text extracted from the document.

        Returns:
            The summary, or None if the provider declined or returned nothing.

        Raises:
            SummarizationNetworkError: if the provider cannot be reached.
        """
