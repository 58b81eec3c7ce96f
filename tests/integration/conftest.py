from collections.abc import Generator

import httpx
import pytest

from maradocs.client import MaraDocsClient
from tests.integration.fake_service import FakeMaraDocsService

API_URL = "https://api.test/v1"


@pytest.fixture
def fake_service() -> FakeMaraDocsService:
    return FakeMaraDocsService()


@pytest.fixture
def client(
    fake_service: FakeMaraDocsService,
    workspace_secret: str,
) -> Generator[MaraDocsClient, None, None]:
    http_client = httpx.Client(transport=httpx.MockTransport(fake_service.handle))
    with MaraDocsClient(
        workspace_secret=workspace_secret,
        api_url=API_URL,
        poll_max_attempts=3,
        upload_chunk_size=512,
        http_client=http_client,
    ) as maradocs:
        yield maradocs
