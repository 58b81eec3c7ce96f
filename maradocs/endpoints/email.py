from maradocs.jobs.job_client import JobClient
from maradocs.models.email import EmailValidateRequest, EmailValidateResponse


class EmailEndpoint:
    def __init__(self, jobs: JobClient) -> None:
        self._jobs = jobs

    def validate(self, request: EmailValidateRequest) -> EmailValidateResponse:
        """Scan and parse an uploaded email, validating up to ``limit_attachments``."""
        return self._jobs.run("/email/validate", request, EmailValidateResponse)
