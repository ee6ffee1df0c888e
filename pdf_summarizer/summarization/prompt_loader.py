from pathlib import Path

from pdf_summarizer.summarization.exceptions import PromptLoadError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def _read_prompt(path: Path, kind: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load {kind}: {exc}") from exc


def load_prompt_template(path: Path | None = None) -> str:
    """Load the summary prompt template.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled summary_prompt.txt.

    Returns:
        The raw template string with a {document_text} placeholder.

    Raises:
        PromptLoadError: if the file cannot be read or lacks the placeholder.
    """
    template = _read_prompt(path or _DEFAULT_PROMPT_DIR / "summary_prompt.txt", "prompt template")
    if "{document_text}" not in template:
        raise PromptLoadError("Prompt template must contain a {document_text} placeholder")
    return template


def load_system_prompt(path: Path | None = None) -> str:
    """Load the system prompt. Defaults to the bundled summary_system_prompt.txt."""
    return _read_prompt(
        path or _DEFAULT_PROMPT_DIR / "summary_system_prompt.txt",
        "system prompt",
    ).strip()
