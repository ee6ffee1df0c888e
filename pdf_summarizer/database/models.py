from dataclasses import dataclass
from datetime import datetime

SUMMARY_STATUS_COMPLETED = "completed"


@dataclass
class SummaryRecord:
    """Represents a row from the pdf_summaries table."""

    owner_id: str
    title: str
    file_name: str
    original_file_url: str
    summary_text: str
    upload_key: str | None = None
    status: str = SUMMARY_STATUS_COMPLETED
    id: str | None = None
    created_at: datetime | None = None
