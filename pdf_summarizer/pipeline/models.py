from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pdf_summarizer.database.models import SummaryRecord


@dataclass(frozen=True)
class SourceFile:
    """An uploaded PDF as reported by the storage service."""

    display_name: str
    storage_locator: str


@dataclass(frozen=True)
class PipelineRequest:
    """One client-initiated pipeline run."""

    owner_identity: str
    source_file: SourceFile

    def __post_init__(self) -> None:
        if not self.owner_identity or not self.owner_identity.strip():
            raise ValueError("owner_identity must be a non-empty string")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PipelineRequest":
        """Build from {"owner_identity": ..., "file": {"name": ..., "url": ...}}."""
        file_data = data.get("file") or {}
        return cls(
            owner_identity=str(data.get("owner_identity") or ""),
            source_file=SourceFile(
                display_name=str(file_data.get("name") or ""),
                storage_locator=str(file_data.get("url") or ""),
            ),
        )


@dataclass(frozen=True)
class SummaryPayload:
    """Client-supplied fields for committing a summary. Carries no identity."""

    original_file_url: str | None = None
    summary_text: str | None = None
    title: str | None = None
    file_name: str | None = None
    upload_key: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SummaryPayload":
        """Pick the known fields; anything else (including identity claims) is dropped."""
        return cls(
            original_file_url=data.get("original_file_url"),
            summary_text=data.get("summary_text"),
            title=data.get("title"),
            file_name=data.get("file_name"),
            upload_key=data.get("upload_key"),
        )


@dataclass(frozen=True)
class PipelineOutcome:
    success: bool
    message: str
    summary: str | None = None


@dataclass(frozen=True)
class CommitOutcome:
    success: bool
    message: str
    record: SummaryRecord | None = None


class StageStatus(str, Enum):
    OK = "ok"
    ABSENT = "absent"
    ERROR = "error"


@dataclass(frozen=True)
class StageResult:
    """Tagged outcome of one external stage: a value, no usable output, or a fault."""

    status: StageStatus
    value: str | None = None
    error: Exception | None = None

    @classmethod
    def ok(cls, value: str) -> "StageResult":
        return cls(status=StageStatus.OK, value=value)

    @classmethod
    def absent(cls) -> "StageResult":
        return cls(status=StageStatus.ABSENT)

    @classmethod
    def failed(cls, error: Exception) -> "StageResult":
        return cls(status=StageStatus.ERROR, error=error)
