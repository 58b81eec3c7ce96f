from maradocs.jobs.exceptions import PollTimeoutError
from maradocs.logging.logger import Log
from maradocs.models.common import TaskCreatedResponse
from maradocs.transport.http_client import (
    ApiHttpClient,
    ModelT,
    RequestBody,
    error_from_response,
    parse_body,
)

# The server holds each status request open for a bounded window (about
# ten seconds) before answering 202, so this caps the total wait at roughly
# an hour without any client-side sleeping.
DEFAULT_MAX_POLL_ATTEMPTS = 120


class JobClient:
    """Submits asynchronous jobs and polls them until they finish."""

    def __init__(
        self,
        http: ApiHttpClient,
        max_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._http = http
        self._max_attempts = max_attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def submit_job(self, endpoint: str, request: RequestBody) -> str:
        """Create a job at ``endpoint`` and return its id."""
        task = self._http.post(endpoint, request, TaskCreatedResponse)
        Log.debug("Job submitted", endpoint=endpoint, job_id=task.job_id)
        return task.job_id

    def poll_job(self, endpoint: str, job_id: str, schema: type[ModelT]) -> ModelT:
        """Poll ``endpoint/job_id`` until the job result is available.

        200 returns the parsed result, 202 means the job is still pending
        and the next poll is issued straight away.

        Raises:
            PollTimeoutError: if more than ``max_attempts`` polls answer 202.
            ApiError: if the service reports a structured error.
            TransportError: for any other failure.
        """
        path = f"{endpoint}/{job_id}"
        pending = 0
        while True:
            response = self._http.send("GET", path)
            if response.status_code == 200:
                Log.debug("Job finished", endpoint=endpoint, job_id=job_id, pending=pending)
                return parse_body(response, schema)
            if response.status_code != 202:
                raise error_from_response(response)
            pending += 1
            if pending > self._max_attempts:
                Log.error("Job poll limit reached", endpoint=endpoint, job_id=job_id)
                raise PollTimeoutError(endpoint, job_id, pending)
            Log.debug("Job pending", endpoint=endpoint, job_id=job_id, attempt=pending)

    def run(self, endpoint: str, request: RequestBody, schema: type[ModelT]) -> ModelT:
        """Submit a job and wait for its result."""
        job_id = self.submit_job(endpoint, request)
        return self.poll_job(endpoint, job_id, schema)
