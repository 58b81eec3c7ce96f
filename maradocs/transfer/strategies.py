from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator

import httpx

from maradocs.models.data import DataUploadResponse

ProgressCallback = Callable[[float], None]


def build_form_request(
    target: DataUploadResponse,
    content: bytes,
    filename: str,
) -> httpx.Request:
    """Multipart POST carrying the presigned form fields followed by the file."""
    return httpx.Request(
        "POST",
        target.post_url,
        data=dict(target.post_header),
        files={"file": (filename, content)},
    )


class BaseUploadStrategy(ABC):
    """Contract for sending upload bytes to a presigned storage target."""

    @abstractmethod
    def send(
        self,
        client: httpx.Client,
        target: DataUploadResponse,
        content: bytes,
        filename: str,
        on_progress: ProgressCallback,
    ) -> httpx.Response:
        """POST ``content`` to ``target`` and return the storage response.

        Progress is reported as a non-decreasing percentage; the last call
        is exactly 100 once a response has been received.
        """


class StreamingUploadStrategy(BaseUploadStrategy):
    """Streams the encoded form in chunks and reports progress per chunk."""

    def __init__(self, chunk_size: int = 64 * 1024) -> None:
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self._chunk_size = chunk_size

    def send(
        self,
        client: httpx.Client,
        target: DataUploadResponse,
        content: bytes,
        filename: str,
        on_progress: ProgressCallback,
    ) -> httpx.Response:
        form = build_form_request(target, content, filename)
        body = form.read()
        # Storage backends reject chunked transfer encoding for form uploads.
        headers = {
            "Content-Type": form.headers["Content-Type"],
            "Content-Length": str(len(body)),
        }
        response = client.post(
            target.post_url,
            content=self._chunks(body, on_progress),
            headers=headers,
        )
        on_progress(100.0)
        return response

    def _chunks(self, body: bytes, on_progress: ProgressCallback) -> Iterator[bytes]:
        total = len(body)
        sent = 0
        for start in range(0, total, self._chunk_size):
            chunk = body[start : start + self._chunk_size]
            yield chunk
            sent += len(chunk)
            percent = sent / total * 100
            if percent < 100:
                on_progress(percent)


class SimpleUploadStrategy(BaseUploadStrategy):
    """Sends the form in one request; progress jumps from 0 to 100."""

    def send(
        self,
        client: httpx.Client,
        target: DataUploadResponse,
        content: bytes,
        filename: str,
        on_progress: ProgressCallback,
    ) -> httpx.Response:
        on_progress(0.0)
        response = client.send(build_form_request(target, content, filename))
        on_progress(100.0)
        return response


def supports_streamed_request_body() -> bool:
    """Whether the installed httpx accepts iterator-backed request bodies."""
    sync_stream = getattr(httpx, "SyncByteStream", None)
    if sync_stream is None:
        return False
    try:
        probe = httpx.Request("POST", "http://localhost", content=iter([b""]))
    except TypeError:
        return False
    return isinstance(probe.stream, sync_stream)


class UploadStrategyFactory:
    """Picks the richest upload strategy the environment supports."""

    @classmethod
    def create(cls, chunk_size: int = 64 * 1024) -> BaseUploadStrategy:
        if supports_streamed_request_body():
            return StreamingUploadStrategy(chunk_size=chunk_size)
        return SimpleUploadStrategy()
