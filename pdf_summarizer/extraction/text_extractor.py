import asyncio

from pdf_summarizer.config.settings import Settings
from pdf_summarizer.extraction.exceptions import DownloadTooLargeError, SourceUnavailableError
from pdf_summarizer.extraction.file_loader import FileLoader
from pdf_summarizer.logging.logger import Log
from pdf_summarizer.pdf.base import BasePdfExtractor
from pdf_summarizer.pdf.exceptions import PdfExtractionError
from pdf_summarizer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from pdf_summarizer.pdf.pymupdf_adapter import PyMuPdfAdapter

PDF_ENGINES: dict[str, type[BasePdfExtractor]] = {
    "pdfplumber": PdfPlumberAdapter,
    "pymupdf": PyMuPdfAdapter,
}


class TextExtractor:
    """Turns a storage locator into the full text of the PDF behind it.

    Extraction is all-or-nothing. Missing, empty, textless or unparseable
    documents yield None; transport failures are raised.
    """

    def __init__(self, file_loader: FileLoader, pdf_extractor: BasePdfExtractor) -> None:
        self._file_loader = file_loader
        self._pdf_extractor = pdf_extractor

    async def extract_text(self, locator: str) -> str | None:
        try:
            pdf_bytes = await self._file_loader.load(locator)
        except (SourceUnavailableError, DownloadTooLargeError) as exc:
            Log.warning(f"No document to extract: {exc}")
            return None

        if not pdf_bytes:
            Log.warning(f"Document at {locator} is empty")
            return None

        try:
            # PDF parsing is CPU-bound
            text = await asyncio.to_thread(self._pdf_extractor.extract, pdf_bytes)
        except PdfExtractionError as exc:
            Log.warning(f"Document at {locator} is not a readable PDF: {exc}")
            return None

        if not text.strip():
            Log.warning(f"Document at {locator} has no extractable text")
            return None

        Log.info(f"Extracted {len(text)} chars from {locator}")
        return text


def build_text_extractor(settings: Settings) -> TextExtractor:
    """Wire a FileLoader and the PDF engine named by settings.pdf_engine."""
    engine = settings.pdf_engine.strip().lower()
    engine_cls = PDF_ENGINES.get(engine)
    if engine_cls is None:
        raise ValueError(f"Unknown PDF engine '{engine}'. Choose from: {sorted(PDF_ENGINES)}")

    file_loader = FileLoader(
        timeout_seconds=settings.download_timeout_seconds,
        max_bytes=settings.max_download_bytes,
    )
    return TextExtractor(
        file_loader=file_loader,
        pdf_extractor=engine_cls(),
    )
