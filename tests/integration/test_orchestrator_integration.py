from collections.abc import Callable

import httpx
import pytest

from pdf_summarizer.admission.gate import build_admission_gate
from pdf_summarizer.config.settings import Settings
from pdf_summarizer.database.repositories.summary_repository import SummaryRepository
from pdf_summarizer.extraction.file_loader import FileLoader
from pdf_summarizer.extraction.text_extractor import TextExtractor
from pdf_summarizer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from pdf_summarizer.pipeline.models import (
    CommitOutcome,
    PipelineOutcome,
    PipelineRequest,
    SourceFile,
    SummaryPayload,
)
from pdf_summarizer.pipeline.orchestrator import ADMISSION_DENIED_MESSAGE, PipelineOrchestrator
from pdf_summarizer.summarization.factory import SummarizerFactory

URL = "https://files.example.com/f/hello-world.pdf"


def _build_orchestrator(
    transport: httpx.MockTransport,
    max_runs: int = 5,
) -> PipelineOrchestrator:
    settings = Settings(summarization_provider="example", quota_max_runs=max_runs)
    return PipelineOrchestrator(
        admission_gate=build_admission_gate(settings),
        text_extractor=TextExtractor(
            FileLoader(timeout_seconds=5, max_bytes=1024 * 1024, transport=transport),
            PdfPlumberAdapter(),
        ),
        summarizer=SummarizerFactory.create(settings),
        summary_repo=SummaryRepository(),
    )


@pytest.mark.integration
class TestOrchestratorEndToEnd:
    def test_generates_and_commits_summary(
        self,
        owner_id: str,
        run_with_pool,
        sample_pdf_bytes: bytes,
        storage_transport: Callable[..., httpx.MockTransport],
    ) -> None:
        orchestrator = _build_orchestrator(storage_transport(sample_pdf_bytes))
        request = PipelineRequest(owner_id, SourceFile("hello-world.pdf", URL))

        async def scenario() -> tuple[PipelineOutcome, CommitOutcome]:
            outcome = await orchestrator.run_pipeline(request)
            commit = await orchestrator.commit_summary(
                owner_id,
                SummaryPayload(original_file_url=URL, summary_text=outcome.summary),
            )
            return outcome, commit

        outcome, commit = run_with_pool(scenario)

        assert outcome.success is True
        assert outcome.summary is not None
        assert "Hello PDF World" in outcome.summary
        assert commit.success is True
        assert commit.record is not None
        assert commit.record.owner_id == owner_id
        assert commit.record.title == "Hello World"

    def test_blank_pdf_reports_extraction_failure(
        self,
        owner_id: str,
        run_with_pool,
        empty_pdf_bytes: bytes,
        storage_transport: Callable[..., httpx.MockTransport],
    ) -> None:
        orchestrator = _build_orchestrator(storage_transport(empty_pdf_bytes))
        request = PipelineRequest(owner_id, SourceFile("blank.pdf", URL))

        outcome = run_with_pool(lambda: orchestrator.run_pipeline(request))

        assert outcome.success is False
        assert "extraction" in outcome.message.lower()

    def test_quota_denies_after_ceiling(
        self,
        owner_id: str,
        run_with_pool,
        sample_pdf_bytes: bytes,
        storage_transport: Callable[..., httpx.MockTransport],
    ) -> None:
        orchestrator = _build_orchestrator(storage_transport(sample_pdf_bytes), max_runs=1)
        request = PipelineRequest(owner_id, SourceFile("hello-world.pdf", URL))

        async def scenario() -> list[PipelineOutcome]:
            return [await orchestrator.run_pipeline(request) for _ in range(2)]

        first, second = run_with_pool(scenario)

        assert first.success is True
        assert second.success is False
        assert second.message == ADMISSION_DENIED_MESSAGE
