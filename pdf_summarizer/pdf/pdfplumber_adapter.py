import io

import pdfplumber

from pdf_summarizer.pdf.base import BasePdfExtractor
from pdf_summarizer.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not parse document: {exc}") from exc
        return "\n".join(page.strip() for page in pages if page.strip())
