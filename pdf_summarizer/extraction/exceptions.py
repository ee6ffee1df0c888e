class ExtractionError(Exception):
    """Base exception for all extraction-related errors."""


class UnsupportedLocatorError(ExtractionError):
    """Raised when a storage locator is not an http(s) URL."""


class SourceUnavailableError(ExtractionError):
    """Raised when the storage service refuses the file (4xx status)."""


class DownloadTooLargeError(ExtractionError):
    """Raised when a file exceeds the configured download limit."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the storage service cannot be reached or fails (timeouts, 5xx)."""
