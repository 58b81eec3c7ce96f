import httpx

from maradocs.config.settings import Settings
from maradocs.endpoints.data import DataEndpoint
from maradocs.endpoints.email import EmailEndpoint
from maradocs.endpoints.html import HtmlEndpoint
from maradocs.endpoints.img import ImgEndpoint
from maradocs.endpoints.pdf import PdfEndpoint
from maradocs.jobs.job_client import DEFAULT_MAX_POLL_ATTEMPTS, JobClient
from maradocs.logging.logger import Log
from maradocs.pipeline.flow import Flow
from maradocs.transfer.sse import compute_sse_c_headers
from maradocs.transfer.strategies import BaseUploadStrategy
from maradocs.transfer.transfer_manager import TransferManager
from maradocs.transport.http_client import ApiHttpClient
from maradocs.workspace.info import decode_workspace_info

DEFAULT_API_URL = "https://api.maradocs.io/v1"


class MaraDocsClient:
    """Entry point wiring the API transport, job polling, transfers and flows."""

    def __init__(
        self,
        *,
        workspace_secret: str,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: int = 30,
        poll_max_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS,
        upload_chunk_size: int = 64 * 1024,
        download_chunk_size: int = 64 * 1024,
        http_client: httpx.Client | None = None,
        upload_strategy: BaseUploadStrategy | None = None,
    ) -> None:
        self.info = decode_workspace_info(workspace_secret)
        self.http = ApiHttpClient(
            base_url=api_url,
            workspace_secret=workspace_secret,
            timeout_seconds=timeout_seconds,
            http_client=http_client,
        )
        self.jobs = JobClient(self.http, max_attempts=poll_max_attempts)
        self.transfer = TransferManager(
            http=self.http,
            sse_headers=compute_sse_c_headers(self.info.encryption_key_bytes),
            upload_strategy=upload_strategy,
            upload_chunk_size=upload_chunk_size,
            download_chunk_size=download_chunk_size,
        )
        self.data = DataEndpoint(self.jobs)
        self.img = ImgEndpoint(self.jobs)
        self.pdf = PdfEndpoint(self.jobs)
        self.html = HtmlEndpoint(self.jobs)
        self.email = EmailEndpoint(self.jobs)
        self.flow = Flow(self.transfer, self.img, self.pdf)

    def ping(self) -> bool:
        return self.http.ping()

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "MaraDocsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def build_client(settings: Settings, http_client: httpx.Client | None = None) -> MaraDocsClient:
    """Build a MaraDocsClient from application settings."""
    Log.configure(settings.log_level)
    if not settings.maradocs_workspace_secret:
        raise ValueError("maradocs_workspace_secret is required")
    client = MaraDocsClient(
        workspace_secret=settings.maradocs_workspace_secret,
        api_url=settings.maradocs_api_url,
        timeout_seconds=settings.request_timeout_seconds,
        poll_max_attempts=settings.poll_max_attempts,
        upload_chunk_size=settings.upload_chunk_size_bytes,
        download_chunk_size=settings.download_chunk_size_bytes,
        http_client=http_client,
    )
    Log.info("MaraDocs client ready", workspace_id=client.info.workspace_id)
    return client
