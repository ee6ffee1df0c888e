from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction engines."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            All pages joined by newlines and stripped. Empty string when the
            document has no text layer.

        Raises:
            PdfExtractionError: if the bytes cannot be parsed as a PDF.
        """
