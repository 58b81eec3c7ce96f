from typing import TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from maradocs.logging.logger import Log
from maradocs.models.common import HttpErrorResponse
from maradocs.transport.exceptions import ApiError, TransportError

ModelT = TypeVar("ModelT", bound=BaseModel)

RequestBody = BaseModel | dict[str, object] | None


def serialize_body(body: RequestBody) -> dict[str, object] | None:
    """Turn a request payload into JSON-ready data, dropping unset optionals."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


def parse_body(response: httpx.Response, schema: type[ModelT]) -> ModelT:
    """Parse a successful response body against ``schema``.

    Raises:
        TransportError: if the body is not valid JSON for ``schema``.
    """
    try:
        return schema.model_validate_json(response.content)
    except PydanticValidationError as exc:
        raise TransportError(
            f"Unexpected response body for {schema.__name__}: {exc}",
            status_code=response.status_code,
        ) from exc


def error_from_response(response: httpx.Response) -> TransportError:
    """Build the error for a failed response.

    Returns an ApiError when the body is the service's error envelope,
    otherwise a plain TransportError carrying the raw status.
    """
    try:
        envelope = HttpErrorResponse.model_validate_json(response.content)
    except PydanticValidationError:
        return TransportError(
            f"HTTP error! status: {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
        )
    return ApiError(
        status_code=envelope.status_code,
        code=envelope.api_error.code,
        name=envelope.api_error.name,
        message=envelope.api_error.message,
    )


class ApiHttpClient:
    """Authenticated JSON access to the MaraDocs REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        workspace_secret: str,
        timeout_seconds: int = 30,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = (
            http_client if http_client is not None else httpx.Client(timeout=timeout_seconds)
        )
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {workspace_secret}",
        }

    @property
    def raw(self) -> httpx.Client:
        """Underlying httpx client, shared with direct storage transfers."""
        return self._client

    def url(self, path: str) -> str:
        return self._base_url + path

    def get(self, path: str, schema: type[ModelT]) -> ModelT:
        return self.request("GET", path, None, schema)

    def post(self, path: str, body: RequestBody, schema: type[ModelT]) -> ModelT:
        return self.request("POST", path, body, schema)

    def put(self, path: str, body: RequestBody, schema: type[ModelT]) -> ModelT:
        return self.request("PUT", path, body, schema)

    def patch(self, path: str, body: RequestBody, schema: type[ModelT]) -> ModelT:
        return self.request("PATCH", path, body, schema)

    def delete(self, path: str, body: RequestBody, schema: type[ModelT]) -> ModelT:
        return self.request("DELETE", path, body, schema)

    def request(
        self,
        method: str,
        path: str,
        body: RequestBody,
        schema: type[ModelT],
    ) -> ModelT:
        """Send a request and parse a 200/201 answer against ``schema``.

        Raises:
            ApiError: if the service reports a structured error.
            TransportError: for any other failure.
        """
        response = self.send(method, path, body)
        if response.status_code in (200, 201):
            return parse_body(response, schema)
        raise error_from_response(response)

    def send(self, method: str, path: str, body: RequestBody = None) -> httpx.Response:
        """Send a request and return the raw response, whatever its status."""
        try:
            return self._client.request(
                method,
                self.url(path),
                headers=self._headers,
                json=serialize_body(body),
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {path} failed: {exc}") from exc

    def ping(self) -> bool:
        """Return True if the service healthcheck answers with a 2xx status."""
        try:
            response = self._client.get(self.url("/healthcheck/ping"))
        except httpx.HTTPError as exc:
            Log.warning(f"Healthcheck failed: {exc}")
            return False
        return response.is_success

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiHttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
