import asyncio
import os
import uuid
from collections.abc import Awaitable, Callable, Generator
from pathlib import Path
from typing import Any, TypeVar

import psycopg
import pytest

from pdf_summarizer.config.settings import Settings
from pdf_summarizer.database.connection import build_conninfo, close_pool, init_pool

T = TypeVar("T")

MIGRATIONS_DIR = Path(__file__).resolve().parents[2] / "migrations"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "pdf_summaries_test")
    return Settings(summarization_provider="example")


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def migrated_db(test_settings: Settings) -> None:
    try:
        with psycopg.connect(build_conninfo(test_settings), connect_timeout=3) as conn:
            for migration in sorted(MIGRATIONS_DIR.glob("*.sql")):
                conn.execute(migration.read_text(encoding="utf-8"))
            conn.commit()
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to point at one")


@pytest.fixture
def db_conn(
    migrated_db: None,
    test_settings: Settings,
) -> Generator[psycopg.Connection[Any], None, None]:
    with psycopg.connect(build_conninfo(test_settings)) as conn:
        yield conn


@pytest.fixture
def owner_id(db_conn: psycopg.Connection[Any]) -> Generator[str, None, None]:
    """A unique owner identity whose rows are removed after the test."""
    owner = f"it_{uuid.uuid4().hex}"
    yield owner
    with db_conn.cursor() as cur:
        cur.execute("DELETE FROM pdf_summaries WHERE owner_id = %s", (owner,))
        cur.execute("DELETE FROM usage_quotas WHERE owner_id = %s", (owner,))
    db_conn.commit()


@pytest.fixture
def run_with_pool(
    migrated_db: None,
    test_settings: Settings,
) -> Callable[[Callable[[], Awaitable[T]]], T]:
    """Run a coroutine factory inside one event loop with the pool open."""

    def _run(scenario: Callable[[], Awaitable[T]]) -> T:
        async def _main() -> T:
            await init_pool(test_settings)
            try:
                return await scenario()
            finally:
                await close_pool()

        return asyncio.run(_main())

    return _run
