import argparse
import asyncio
import sys

from pdf_summarizer.config.settings import Settings
from pdf_summarizer.database.connection import close_pool, init_pool
from pdf_summarizer.logging.logger import Log
from pdf_summarizer.pipeline.models import PipelineRequest, SourceFile, SummaryPayload
from pdf_summarizer.pipeline.orchestrator import build_orchestrator


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pdf-summarizer",
        description="Summarize an uploaded PDF and save the summary for its owner.",
    )
    parser.add_argument("--owner", required=True, help="authenticated owner identity")
    parser.add_argument("--name", required=True, help="display name of the uploaded file")
    parser.add_argument("--url", required=True, help="storage URL of the uploaded PDF")
    parser.add_argument("--upload-key", default=None, help="storage key of the upload")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: Settings) -> bool:
    """Entry flow: open pool -> run pipeline -> commit summary."""
    await init_pool(settings)
    try:
        orchestrator = build_orchestrator(settings)
        outcome = await orchestrator.run_pipeline(
            PipelineRequest(
                owner_identity=args.owner,
                source_file=SourceFile(display_name=args.name, storage_locator=args.url),
            )
        )
        if not outcome.success:
            print(outcome.message, file=sys.stderr)
            return False

        commit = await orchestrator.commit_summary(
            args.owner,
            SummaryPayload(
                original_file_url=args.url,
                summary_text=outcome.summary,
                file_name=args.name,
                upload_key=args.upload_key,
            ),
        )
        if not commit.success or commit.record is None:
            print(commit.message, file=sys.stderr)
            return False

        print(f"{commit.record.title} ({commit.record.id})")
        print(commit.record.summary_text)
        return True
    finally:
        await close_pool()


def main(argv: list[str] | None = None) -> None:
    settings = Settings()
    Log.configure(settings.log_level)
    args = parse_args(argv)
    if not asyncio.run(run(args, settings)):
        sys.exit(1)


if __name__ == "__main__":
    main()
