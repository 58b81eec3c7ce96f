from maradocs.jobs.job_client import JobClient
from maradocs.models.img import (
    ImgExtractQuadrilateralRequest,
    ImgExtractQuadrilateralResponse,
    ImgFindDocumentsRequest,
    ImgFindDocumentsResponse,
    ImgOcrToOdtRequest,
    ImgOcrToOdtResponse,
    ImgOcrToPdfRequest,
    ImgOcrToPdfResponse,
    ImgOrientationRequest,
    ImgOrientationResponse,
    ImgRotateRequest,
    ImgRotateResponse,
    ImgThumbnailRequest,
    ImgThumbnailResponse,
    ImgToJpegRequest,
    ImgToJpegResponse,
    ImgToPdfRequest,
    ImgToPdfResponse,
    ImgToPngRequest,
    ImgToPngResponse,
    ImgValidateRequest,
    ImgValidateResponse,
)


class ImgEndpoint:
    """Image operations. Every call submits a job and waits for its result."""

    def __init__(self, jobs: JobClient) -> None:
        self._jobs = jobs

    def validate(self, request: ImgValidateRequest) -> ImgValidateResponse:
        """Scan an uploaded image; required before any other image operation."""
        return self._jobs.run("/img/validate", request, ImgValidateResponse)

    def thumbnail(self, request: ImgThumbnailRequest) -> ImgThumbnailResponse:
        return self._jobs.run("/img/thumbnail", request, ImgThumbnailResponse)

    def find_documents(self, request: ImgFindDocumentsRequest) -> ImgFindDocumentsResponse:
        """Detect zero or more documents, each with a quadrilateral and confidence."""
        return self._jobs.run("/img/find/documents", request, ImgFindDocumentsResponse)

    def orientation(self, request: ImgOrientationRequest) -> ImgOrientationResponse:
        return self._jobs.run("/img/orientation", request, ImgOrientationResponse)

    def extract_quadrilateral(
        self, request: ImgExtractQuadrilateralRequest
    ) -> ImgExtractQuadrilateralResponse:
        """Cut out a quadrilateral region and correct its perspective."""
        return self._jobs.run(
            "/img/extract/quadrilateral", request, ImgExtractQuadrilateralResponse
        )

    def rotate(self, request: ImgRotateRequest) -> ImgRotateResponse:
        """Rotate counter-clockwise by 0, 90, 180 or 270 degrees."""
        return self._jobs.run("/img/rotate", request, ImgRotateResponse)

    def to_jpeg(self, request: ImgToJpegRequest) -> ImgToJpegResponse:
        return self._jobs.run("/img/to/jpeg", request, ImgToJpegResponse)

    def to_png(self, request: ImgToPngRequest) -> ImgToPngResponse:
        return self._jobs.run("/img/to/png", request, ImgToPngResponse)

    def to_pdf(self, request: ImgToPdfRequest) -> ImgToPdfResponse:
        """Place the image on a PDF page without adding a text layer."""
        return self._jobs.run("/img/to/pdf", request, ImgToPdfResponse)

    def ocr_to_pdf(self, request: ImgOcrToPdfRequest) -> ImgOcrToPdfResponse:
        return self._jobs.run("/img/ocr/pdf", request, ImgOcrToPdfResponse)

    def ocr_to_odt(self, request: ImgOcrToOdtRequest) -> ImgOcrToOdtResponse:
        return self._jobs.run("/img/ocr/odt", request, ImgOcrToOdtResponse)
