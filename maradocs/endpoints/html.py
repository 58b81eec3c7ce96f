from maradocs.jobs.job_client import JobClient
from maradocs.models.html import (
    HtmlToPdfRequest,
    HtmlToPdfResponse,
    HtmlValidateRequest,
    HtmlValidateResponse,
)


class HtmlEndpoint:
    def __init__(self, jobs: JobClient) -> None:
        self._jobs = jobs

    def validate(self, request: HtmlValidateRequest) -> HtmlValidateResponse:
        """Scan an uploaded HTML file; required before any other HTML operation."""
        return self._jobs.run("/html/validate", request, HtmlValidateResponse)

    def to_pdf(self, request: HtmlToPdfRequest) -> HtmlToPdfResponse:
        return self._jobs.run("/html/to/pdf", request, HtmlToPdfResponse)
