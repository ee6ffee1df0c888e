from collections.abc import Awaitable, Callable

from pdf_summarizer.admission.gate import AdmissionGate, build_admission_gate
from pdf_summarizer.config.settings import Settings
from pdf_summarizer.database.exceptions import RecordStoreError
from pdf_summarizer.database.models import SummaryRecord
from pdf_summarizer.database.repositories.summary_repository import SummaryRepository
from pdf_summarizer.extraction.text_extractor import TextExtractor, build_text_extractor
from pdf_summarizer.logging.logger import Log
from pdf_summarizer.pipeline.models import (
    CommitOutcome,
    PipelineOutcome,
    PipelineRequest,
    StageResult,
    StageStatus,
    SummaryPayload,
)
from pdf_summarizer.pipeline.titles import file_name_from_url, format_file_name_to_title
from pdf_summarizer.summarization.base import BaseSummarizer
from pdf_summarizer.summarization.factory import SummarizerFactory

ADMISSION_DENIED_MESSAGE = "Upload limit exceeded. Please try again later."
EXTRACTION_FAILED_MESSAGE = "PDF text extraction failed: no readable text was found"
SUMMARIZATION_FAILED_MESSAGE = "Summarization failed: the model returned no summary"
INTERNAL_ERROR_MESSAGE = "Internal error. Please try again later."
SUMMARY_GENERATED_MESSAGE = "Summary generated successfully"

NOT_AUTHENTICATED_MESSAGE = "User not authenticated"
INSUFFICIENT_PAYLOAD_MESSAGE = (
    "Insufficient information to save summary: summary_text and original_file_url are required"
)
SAVE_FAILED_MESSAGE = "Error saving pdf summary"
SUMMARY_SAVED_MESSAGE = "Summary saved successfully"


class PipelineOrchestrator:
    """Turns an uploaded PDF into a summary, then commits it for its owner.

    run_pipeline: admission -> extract -> summarize. Never persists.
    commit_summary: authenticate -> validate -> persist.

    Both return outcome objects and never raise. Holds no per-run state, so a
    single instance can serve concurrent runs.
    """

    def __init__(
        self,
        admission_gate: AdmissionGate,
        text_extractor: TextExtractor,
        summarizer: BaseSummarizer,
        summary_repo: SummaryRepository,
    ) -> None:
        self._admission_gate = admission_gate
        self._text_extractor = text_extractor
        self._summarizer = summarizer
        self._summary_repo = summary_repo

    async def run_pipeline(self, request: PipelineRequest) -> PipelineOutcome:
        owner = request.owner_identity
        source = request.source_file
        Log.info(f"Pipeline started for {owner}: {source.display_name}")

        try:
            admitted = await self._admission_gate.check_admission(owner)
        except Exception as exc:
            Log.exception(f"Admission check raised for {owner}: {exc}")
            return PipelineOutcome(success=False, message=INTERNAL_ERROR_MESSAGE)
        if not admitted:
            return PipelineOutcome(success=False, message=ADMISSION_DENIED_MESSAGE)

        extraction = await self._run_stage(
            "extraction", self._text_extractor.extract_text, source.storage_locator
        )
        if extraction.status is StageStatus.ERROR:
            Log.error(f"Pipeline stopped for {owner}: extraction failed with {extraction.error!r}")
            return PipelineOutcome(success=False, message=INTERNAL_ERROR_MESSAGE)
        if extraction.status is StageStatus.ABSENT or extraction.value is None:
            Log.warning(f"Pipeline stopped for {owner}: extraction produced no text")
            return PipelineOutcome(success=False, message=EXTRACTION_FAILED_MESSAGE)

        summarization = await self._run_stage(
            "summarization", self._summarizer.summarize, extraction.value
        )
        if summarization.status is StageStatus.ERROR:
            Log.error(
                f"Pipeline stopped for {owner}: summarization failed with {summarization.error!r}"
            )
            return PipelineOutcome(success=False, message=INTERNAL_ERROR_MESSAGE)
        if summarization.status is StageStatus.ABSENT or summarization.value is None:
            Log.warning(f"Pipeline stopped for {owner}: summarization produced no output")
            return PipelineOutcome(success=False, message=SUMMARIZATION_FAILED_MESSAGE)

        Log.info(f"Pipeline finished for {owner}: {source.display_name}")
        return PipelineOutcome(
            success=True,
            message=SUMMARY_GENERATED_MESSAGE,
            summary=summarization.value,
        )

    async def commit_summary(
        self,
        caller_identity: str | None,
        payload: SummaryPayload | None,
    ) -> CommitOutcome:
        """Persist a computed summary as a record owned by the authenticated caller.

        caller_identity comes from the identity-verification layer and is the
        only source of ownership. Each call creates a new record.
        """
        if not caller_identity:
            Log.warning("Commit rejected: caller is not authenticated")
            return CommitOutcome(success=False, message=NOT_AUTHENTICATED_MESSAGE)
        if (
            payload is None
            or not (payload.summary_text or "").strip()
            or not (payload.original_file_url or "").strip()
        ):
            Log.warning(f"Commit rejected for {caller_identity}: missing required fields")
            return CommitOutcome(success=False, message=INSUFFICIENT_PAYLOAD_MESSAGE)

        file_name = payload.file_name or file_name_from_url(payload.original_file_url)
        record = SummaryRecord(
            owner_id=caller_identity,
            title=payload.title or format_file_name_to_title(file_name),
            file_name=file_name,
            original_file_url=payload.original_file_url,
            summary_text=payload.summary_text,
            upload_key=payload.upload_key,
        )

        try:
            saved = await self._summary_repo.persist(record)
        except RecordStoreError as exc:
            Log.error(f"Summary store rejected record for {caller_identity}: {exc}")
            return CommitOutcome(success=False, message=str(exc) or SAVE_FAILED_MESSAGE)
        except Exception as exc:
            Log.exception(f"Saving summary for {caller_identity} failed: {exc}")
            return CommitOutcome(success=False, message=SAVE_FAILED_MESSAGE)

        Log.info(f"Summary {saved.id} saved for {caller_identity}")
        return CommitOutcome(success=True, message=SUMMARY_SAVED_MESSAGE, record=saved)

    @staticmethod
    async def _run_stage(
        name: str,
        stage: Callable[[str], Awaitable[str | None]],
        argument: str,
    ) -> StageResult:
        try:
            value = await stage(argument)
        except Exception as exc:
            Log.exception(f"Pipeline {name} stage raised: {exc}")
            return StageResult.failed(exc)
        if not value:
            return StageResult.absent()
        return StageResult.ok(value)


def build_orchestrator(settings: Settings) -> PipelineOrchestrator:
    """Build a PipelineOrchestrator with all required adapters."""
    return PipelineOrchestrator(
        admission_gate=build_admission_gate(settings),
        text_extractor=build_text_extractor(settings),
        summarizer=SummarizerFactory.create(settings),
        summary_repo=SummaryRepository(),
    )
