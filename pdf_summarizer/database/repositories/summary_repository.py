from dataclasses import replace
from typing import Any

import psycopg
from psycopg.rows import dict_row

from pdf_summarizer.database.connection import get_connection
from pdf_summarizer.database.exceptions import RecordStoreError
from pdf_summarizer.database.models import SummaryRecord


def _store_message(exc: psycopg.Error) -> str:
    text = str(exc).strip()
    return text.splitlines()[0] if text else type(exc).__name__


class SummaryRepository:
    """Database operations for the pdf_summaries table."""

    async def persist(self, record: SummaryRecord) -> SummaryRecord:
        """Insert a summary record and return it with store-assigned columns.

        Raises:
            RecordStoreError: on constraint violations or invalid column data.
            psycopg.Error: on connectivity failures (not safe to show callers).
        """
        try:
            async with get_connection() as conn:
                async with conn.cursor(row_factory=dict_row) as cur:
                    await cur.execute(
                        """
                        INSERT INTO pdf_summaries
                        (owner_id, title, file_name, original_file_url,
                         summary_text, upload_key, status)
                        VALUES (%s, %s, %s, %s, %s, %s, %s)
                        RETURNING id, status, created_at
                        """,
                        (
                            record.owner_id,
                            record.title,
                            record.file_name,
                            record.original_file_url,
                            record.summary_text,
                            record.upload_key,
                            record.status,
                        ),
                    )
                    row = await cur.fetchone()
                await conn.commit()
        except (psycopg.IntegrityError, psycopg.DataError) as exc:
            raise RecordStoreError(_store_message(exc)) from exc

        if row is None:
            raise RecordStoreError("Summary record was not returned by the store")

        return replace(
            record,
            id=str(row["id"]),
            status=row["status"],
            created_at=row["created_at"],
        )

    async def find_by_owner(self, owner_id: str) -> list[SummaryRecord]:
        """Return all summaries owned by a user, newest first."""
        async with get_connection() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(
                    """
                    SELECT id, owner_id, title, file_name, original_file_url,
                           summary_text, upload_key, status, created_at
                    FROM pdf_summaries
                    WHERE owner_id = %s
                    ORDER BY created_at DESC
                    """,
                    (owner_id,),
                )
                rows = await cur.fetchall()

        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(row: dict[str, Any]) -> SummaryRecord:
        return SummaryRecord(
            id=str(row["id"]),
            owner_id=row["owner_id"],
            title=row["title"],
            file_name=row["file_name"],
            original_file_url=row["original_file_url"],
            summary_text=row["summary_text"],
            upload_key=row["upload_key"],
            status=row["status"],
            created_at=row["created_at"],
        )
