class SummarizationError(Exception):
    """Raised when summarization fails unexpectedly."""


class PromptLoadError(SummarizationError):
    """Raised when a bundled or custom prompt file cannot be read."""


class SummarizationNetworkError(SummarizationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
