"""PDF processing payloads."""

from typing import Annotated, Literal, Union

from pydantic import Field

from maradocs.models.common import (
    Confidence,
    DiscreteAngle,
    Dpi,
    Handle,
    PdfImgColor,
    PdfImgQuality,
    WireModel,
)
from maradocs.models.validation import (
    ValidateEnvelope,
    ValidateResponseError,
    ValidateResponseOk,
    ValidateResponseVirus,
)

PageNumber = Annotated[int, Field(ge=0)]


class PdfValidateRequest(WireModel):
    unvalidated_file_handle: Handle
    password: str | None = None


class PdfValidateResponseOk(ValidateResponseOk):
    class_name: Literal["PdfValidateResponseOk"] = "PdfValidateResponseOk"
    pdf_handle: Handle

    @property
    def handle(self) -> Handle:
        return self.pdf_handle


class PdfValidateResponseError(ValidateResponseError):
    class_name: Literal["PdfValidateResponseError"] = "PdfValidateResponseError"


class PdfValidateResponseVirus(ValidateResponseVirus):
    class_name: Literal["PdfValidateResponseVirus"] = "PdfValidateResponseVirus"


PdfValidateResult = Annotated[
    Union[PdfValidateResponseOk, PdfValidateResponseError, PdfValidateResponseVirus],
    Field(discriminator="class_name"),
]


class PdfValidateResponse(ValidateEnvelope):
    class_name: Literal["PdfValidateResponse"] = "PdfValidateResponse"
    response: PdfValidateResult


class PdfComposePdfPage(WireModel):
    page_number: PageNumber
    rotation: DiscreteAngle = 0


class PdfComposePdf(WireModel):
    """One source document; all of its pages are used when ``pages`` is None."""

    pdf_handle: Handle
    pages: list[PdfComposePdfPage] | None = None


class PdfComposeRequest(WireModel):
    pdfs: list[PdfComposePdf]


class PdfComposeResponse(WireModel):
    pdf_handle: Handle


class PdfRotateRequest(WireModel):
    pdf_handle: Handle
    rotate: list[tuple[PageNumber, DiscreteAngle]]


class PdfRotateResponse(WireModel):
    pdf_handle: Handle


class PdfOptimizeRequest(WireModel):
    pdf_handle: Handle
    image_dpi: Dpi = 150
    image_quality: PdfImgQuality = 70
    image_color: PdfImgColor = "original"


class PdfOptimizeResponse(WireModel):
    pdf_handle: Handle


class PdfOcrToPdfRequest(WireModel):
    pdf_handle: Handle


class PdfOcrToPdfResponse(WireModel):
    pdf_handle: Handle


class PdfOrientationRequest(WireModel):
    pdf_handle: Handle


class PdfOrientationResponse(WireModel):
    # One (angle, confidence) pair per page, in page order.
    orientations: list[tuple[DiscreteAngle, Confidence]]
    rotated_pdf_handle: Handle


class PdfToImgRequest(WireModel):
    pdf_handle: Handle
    pages: list[PageNumber] | None = None
    dpi: Annotated[int, Field(ge=72, le=600)] = 200


class PdfToImgResponse(WireModel):
    img_handles: list[Handle]
