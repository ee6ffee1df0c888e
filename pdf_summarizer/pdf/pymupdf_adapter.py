import pymupdf

from pdf_summarizer.pdf.base import BasePdfExtractor
from pdf_summarizer.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not parse document: {exc}") from exc
        return "\n".join(page.strip() for page in pages if page.strip())
