from maradocs.exceptions import MaraDocsError


class PollTimeoutError(MaraDocsError):
    """Raised when a job is still pending after the allowed number of polls."""

    def __init__(self, endpoint: str, job_id: str, attempts: int) -> None:
        super().__init__(
            f"Job {job_id} at {endpoint} did not finish after {attempts} pending polls"
        )
        self.endpoint = endpoint
        self.job_id = job_id
        self.attempts = attempts
