from pdf_summarizer.database.connection import get_connection


class UsageQuotaRepository:
    """Database operations for the usage_quotas table."""

    async def try_consume(
        self,
        owner_id: str,
        max_runs: int,
        window_seconds: int,
    ) -> int | None:
        """Atomically count one run for the owner if the window has room.

        A single upsert both checks and increments, relying on the row lock
        taken by ON CONFLICT, so concurrent callers for the same owner cannot
        both pass the ceiling. An expired window restarts at 1.

        Returns:
            The run count after consumption, or None when the quota is exhausted.
            Denied calls leave the counter untouched.
        """
        async with get_connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    """
                    INSERT INTO usage_quotas (owner_id, run_count, window_start)
                    VALUES (%(owner_id)s, 1, NOW())
                    ON CONFLICT (owner_id) DO UPDATE
                    SET run_count = CASE
                            WHEN usage_quotas.window_start
                                 <= NOW() - make_interval(secs => %(window)s)
                            THEN 1
                            ELSE usage_quotas.run_count + 1
                        END,
                        window_start = CASE
                            WHEN usage_quotas.window_start
                                 <= NOW() - make_interval(secs => %(window)s)
                            THEN NOW()
                            ELSE usage_quotas.window_start
                        END
                    WHERE usage_quotas.run_count < %(max_runs)s
                       OR usage_quotas.window_start
                          <= NOW() - make_interval(secs => %(window)s)
                    RETURNING run_count
                    """,
                    {
                        "owner_id": owner_id,
                        "window": window_seconds,
                        "max_runs": max_runs,
                    },
                )
                row = await cur.fetchone()
            await conn.commit()

        if row is None:
            return None
        return int(row[0])
