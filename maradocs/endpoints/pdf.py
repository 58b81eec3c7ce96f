from maradocs.jobs.job_client import JobClient
from maradocs.models.pdf import (
    PdfComposeRequest,
    PdfComposeResponse,
    PdfOcrToPdfRequest,
    PdfOcrToPdfResponse,
    PdfOptimizeRequest,
    PdfOptimizeResponse,
    PdfOrientationRequest,
    PdfOrientationResponse,
    PdfRotateRequest,
    PdfRotateResponse,
    PdfToImgRequest,
    PdfToImgResponse,
    PdfValidateRequest,
    PdfValidateResponse,
)


class PdfEndpoint:
    """PDF operations. Every call submits a job and waits for its result."""

    def __init__(self, jobs: JobClient) -> None:
        self._jobs = jobs

    def validate(self, request: PdfValidateRequest) -> PdfValidateResponse:
        """Scan (and decrypt, given a password) an uploaded PDF."""
        return self._jobs.run("/pdf/validate", request, PdfValidateResponse)

    def compose(self, request: PdfComposeRequest) -> PdfComposeResponse:
        """Build one PDF from pages of several, in request order."""
        return self._jobs.run("/pdf/compose", request, PdfComposeResponse)

    def optimize(self, request: PdfOptimizeRequest) -> PdfOptimizeResponse:
        return self._jobs.run("/pdf/optimize", request, PdfOptimizeResponse)

    def rotate(self, request: PdfRotateRequest) -> PdfRotateResponse:
        return self._jobs.run("/pdf/rotate", request, PdfRotateResponse)

    def to_img(self, request: PdfToImgRequest) -> PdfToImgResponse:
        return self._jobs.run("/pdf/to/img", request, PdfToImgResponse)

    def orientation(self, request: PdfOrientationRequest) -> PdfOrientationResponse:
        """Detect per-page orientation and return an auto-rotated copy."""
        return self._jobs.run("/pdf/orientation", request, PdfOrientationResponse)

    def ocr_to_pdf(self, request: PdfOcrToPdfRequest) -> PdfOcrToPdfResponse:
        """Add a searchable text layer."""
        return self._jobs.run("/pdf/ocr/pdf", request, PdfOcrToPdfResponse)
