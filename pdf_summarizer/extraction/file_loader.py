import httpx

from pdf_summarizer.extraction.exceptions import (
    DownloadTooLargeError,
    ExtractionNetworkError,
    SourceUnavailableError,
    UnsupportedLocatorError,
)


class FileLoader:
    """Downloads an uploaded file from its storage locator."""

    SUPPORTED_SCHEMES = ("http", "https")

    def __init__(
        self,
        *,
        timeout_seconds: int,
        max_bytes: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._max_bytes = max_bytes
        self._transport = transport

    async def load(self, locator: str) -> bytes:
        """Read the file behind a locator into memory.

        Raises:
            UnsupportedLocatorError: if the locator is not a valid http(s) URL.
            SourceUnavailableError: if the storage service answers with a 4xx status.
            DownloadTooLargeError: if the body is larger than max_bytes.
            ExtractionNetworkError: on connection failures, timeouts or 5xx statuses.
        """
        url = self._parse_locator(locator)
        chunks: list[bytes] = []
        size = 0
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                async with client.stream("GET", url) as response:
                    if 400 <= response.status_code < 500:
                        raise SourceUnavailableError(
                            f"Storage returned HTTP {response.status_code} for {locator}"
                        )
                    response.raise_for_status()
                    async for chunk in response.aiter_bytes():
                        size += len(chunk)
                        if size > self._max_bytes:
                            raise DownloadTooLargeError(
                                f"File at {locator} exceeds {self._max_bytes} bytes"
                            )
                        chunks.append(chunk)
        except httpx.HTTPStatusError as exc:
            raise ExtractionNetworkError(
                f"Storage returned HTTP {exc.response.status_code} for {locator}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ExtractionNetworkError(f"Failed to download {locator}: {exc}") from exc
        return b"".join(chunks)

    def _parse_locator(self, locator: str) -> httpx.URL:
        try:
            url = httpx.URL(locator)
        except httpx.InvalidURL as exc:
            raise UnsupportedLocatorError(f"Invalid storage locator '{locator}'") from exc
        if url.scheme not in self.SUPPORTED_SCHEMES or not url.host:
            raise UnsupportedLocatorError(
                f"Storage locator '{locator}' must be an http(s) URL"
            )
        return url
