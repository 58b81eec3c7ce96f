import httpx
from pydantic import BaseModel

from maradocs.logging.logger import Log
from maradocs.models.common import Handle
from maradocs.models.data import (
    DataDownloadJpegRequest,
    DataDownloadOdtRequest,
    DataDownloadPdfRequest,
    DataDownloadPngRequest,
    DataDownloadResponse,
    DataDownloadUnvalidatedRequest,
    DataUploadRequest,
    DataUploadResponse,
)
from maradocs.transfer.exceptions import DownloadError, UploadError
from maradocs.transfer.strategies import (
    BaseUploadStrategy,
    ProgressCallback,
    UploadStrategyFactory,
)
from maradocs.transport.exceptions import ApiError
from maradocs.transport.http_client import ApiHttpClient, error_from_response


def _ignore_progress(percent: float) -> None:
    pass


def _content_length(response: httpx.Response) -> int | None:
    raw = response.headers.get("Content-Length")
    if raw is None:
        return None
    try:
        length = int(raw)
    except ValueError:
        return None
    return length if length >= 0 else None


class TransferManager:
    """Moves raw bytes to and from the storage locations the service hands out."""

    def __init__(
        self,
        *,
        http: ApiHttpClient,
        storage_client: httpx.Client | None = None,
        sse_headers: dict[str, str] | None = None,
        upload_strategy: BaseUploadStrategy | None = None,
        upload_chunk_size: int = 64 * 1024,
        download_chunk_size: int = 64 * 1024,
    ) -> None:
        self._http = http
        self._storage = storage_client if storage_client is not None else http.raw
        self._sse_headers = dict(sse_headers or {})
        self._upload_strategy = (
            upload_strategy
            if upload_strategy is not None
            else UploadStrategyFactory.create(chunk_size=upload_chunk_size)
        )
        self._download_chunk_size = download_chunk_size

    @property
    def upload_strategy(self) -> BaseUploadStrategy:
        return self._upload_strategy

    def upload(
        self,
        content: bytes,
        on_progress: ProgressCallback | None = None,
        filename: str = "file",
    ) -> DataUploadResponse:
        """Upload ``content`` and return the descriptor holding its unvalidated handle.

        Raises:
            ValueError: if ``content`` is empty.
            ApiError: if the service or storage reports a structured error.
            UploadError: if the storage backend rejects the upload otherwise.
        """
        if not content:
            raise ValueError("Cannot upload empty content")
        progress = on_progress or _ignore_progress
        target = self._http.post(
            "/data/upload", DataUploadRequest(size=len(content)), DataUploadResponse
        )
        Log.info(f"Uploading {len(content)} bytes", filename=filename)
        try:
            response = self._upload_strategy.send(
                self._storage, target, content, filename, progress
            )
        except httpx.HTTPError as exc:
            raise UploadError(f"Upload failed: {exc}") from exc
        if not response.is_success:
            error = error_from_response(response)
            if isinstance(error, ApiError):
                raise error
            raise UploadError(
                f"Upload failed! status: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        Log.info(f"Uploaded {len(content)} bytes", filename=filename)
        return target

    def download(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> bytes:
        """GET ``url`` and return its bytes.

        Progress is reported per chunk when the response advertises its
        length; otherwise the body is read in one go and only 100 is reported.

        Raises:
            DownloadError: on a non-success status or a network failure.
        """
        progress = on_progress or _ignore_progress
        try:
            with self._storage.stream("GET", url, headers=headers) as response:
                if not response.is_success:
                    raise DownloadError(
                        f"Download failed! status: {response.status_code} "
                        f"{response.reason_phrase}",
                        status_code=response.status_code,
                    )
                total = _content_length(response)
                if not total:
                    data = response.read()
                else:
                    data = self._read_tracked(response, total, progress)
        except httpx.HTTPError as exc:
            raise DownloadError(f"Download failed: {exc}") from exc
        progress(100.0)
        Log.info(f"Downloaded {len(data)} bytes")
        return data

    def _read_tracked(
        self,
        response: httpx.Response,
        total: int,
        progress: ProgressCallback,
    ) -> bytes:
        buffer = bytearray()
        last = 0.0
        for chunk in response.iter_bytes(self._download_chunk_size):
            buffer.extend(chunk)
            percent = min(response.num_bytes_downloaded / total * 100, 100.0)
            if last < percent < 100:
                progress(percent)
                last = percent
        return bytes(buffer)

    def download_pdf(self, pdf_handle: Handle, on_progress: ProgressCallback | None = None) -> bytes:
        return self._download_resource(
            "/data/download/pdf", DataDownloadPdfRequest(pdf_handle=pdf_handle), on_progress
        )

    def download_jpeg(self, jpeg_handle: Handle, on_progress: ProgressCallback | None = None) -> bytes:
        return self._download_resource(
            "/data/download/jpeg", DataDownloadJpegRequest(jpeg_handle=jpeg_handle), on_progress
        )

    def download_png(self, png_handle: Handle, on_progress: ProgressCallback | None = None) -> bytes:
        return self._download_resource(
            "/data/download/png", DataDownloadPngRequest(png_handle=png_handle), on_progress
        )

    def download_odt(self, odt_handle: Handle, on_progress: ProgressCallback | None = None) -> bytes:
        return self._download_resource(
            "/data/download/odt", DataDownloadOdtRequest(odt_handle=odt_handle), on_progress
        )

    def download_unvalidated(
        self,
        unvalidated_file_handle: Handle,
        on_progress: ProgressCallback | None = None,
    ) -> bytes:
        return self._download_resource(
            "/data/download/unvalidated",
            DataDownloadUnvalidatedRequest(unvalidated_file_handle=unvalidated_file_handle),
            on_progress,
        )

    def _download_resource(
        self,
        endpoint: str,
        request: BaseModel,
        on_progress: ProgressCallback | None,
    ) -> bytes:
        link = self._http.post(endpoint, request, DataDownloadResponse)
        headers = {**link.headers, **self._sse_headers}
        Log.info("Downloading resource", endpoint=endpoint)
        return self.download(link.url, headers, on_progress)
