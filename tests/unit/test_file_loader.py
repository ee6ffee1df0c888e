import asyncio
from collections.abc import Callable

import httpx
import pytest

from pdf_summarizer.extraction.exceptions import (
    DownloadTooLargeError,
    ExtractionNetworkError,
    SourceUnavailableError,
    UnsupportedLocatorError,
)
from pdf_summarizer.extraction.file_loader import FileLoader

URL = "https://files.example.com/f/report.pdf"


def _make_loader(
    transport: httpx.AsyncBaseTransport,
    max_bytes: int = 1024,
) -> FileLoader:
    return FileLoader(timeout_seconds=5, max_bytes=max_bytes, transport=transport)


class TestLoadReturnsBytes:
    def test_returns_body(self, storage_transport: Callable[..., httpx.MockTransport]) -> None:
        loader = _make_loader(storage_transport(b"%PDF test content"))

        result = asyncio.run(loader.load(URL))

        assert result == b"%PDF test content"

    def test_requests_the_locator(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, content=b"%PDF")

        loader = _make_loader(httpx.MockTransport(handler))
        asyncio.run(loader.load(URL))

        assert seen == [URL]


class TestLoadRejectsLocator:
    @pytest.mark.parametrize("locator", ["ftp://files.example.com/a.pdf", "/tmp/a.pdf", ""])
    def test_raises_unsupported_locator(
        self,
        locator: str,
        storage_transport: Callable[..., httpx.MockTransport],
    ) -> None:
        loader = _make_loader(storage_transport(b"%PDF"))

        with pytest.raises(UnsupportedLocatorError):
            asyncio.run(loader.load(locator))


class TestLoadFailures:
    def test_raises_source_unavailable_for_404(
        self, storage_transport: Callable[..., httpx.MockTransport]
    ) -> None:
        loader = _make_loader(storage_transport(status_code=404))

        with pytest.raises(SourceUnavailableError, match="404"):
            asyncio.run(loader.load(URL))

    def test_raises_network_error_for_5xx(
        self, storage_transport: Callable[..., httpx.MockTransport]
    ) -> None:
        loader = _make_loader(storage_transport(status_code=503))

        with pytest.raises(ExtractionNetworkError, match="503"):
            asyncio.run(loader.load(URL))

    def test_raises_network_error_on_connection_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        loader = _make_loader(httpx.MockTransport(handler))

        with pytest.raises(ExtractionNetworkError, match="connection refused"):
            asyncio.run(loader.load(URL))

    def test_raises_when_body_exceeds_limit(
        self, storage_transport: Callable[..., httpx.MockTransport]
    ) -> None:
        loader = _make_loader(storage_transport(b"x" * 2048), max_bytes=1024)

        with pytest.raises(DownloadTooLargeError, match="1024"):
            asyncio.run(loader.load(URL))
