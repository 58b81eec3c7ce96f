"""Image processing payloads."""

from collections.abc import Sequence
from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field, model_validator

from maradocs.models.common import (
    Confidence,
    DiscreteAngle,
    Dpi,
    Handle,
    PdfImgColor,
    PdfImgQuality,
    PdfPageSize,
    WireModel,
)
from maradocs.models.validation import (
    ValidateEnvelope,
    ValidateResponseError,
    ValidateResponseOk,
    ValidateResponseVirus,
)


class RelativePosition(WireModel):
    """Point in an image, both coordinates relative to its size."""

    model_config = ConfigDict(frozen=True)

    x: Annotated[float, Field(ge=0.0, le=1.0)]
    y: Annotated[float, Field(ge=0.0, le=1.0)]


class Quadrilateral(WireModel):
    """Four corners of a region, in top-left, top-right, bottom-right, bottom-left order."""

    model_config = ConfigDict(frozen=True)

    top_left: RelativePosition
    top_right: RelativePosition
    bottom_right: RelativePosition
    bottom_left: RelativePosition

    @model_validator(mode="after")
    def _check_corner_order(self) -> "Quadrilateral":
        if not (
            self.top_left.x <= self.top_right.x
            and self.bottom_left.x <= self.bottom_right.x
            and self.top_left.y <= self.bottom_left.y
            and self.top_right.y <= self.bottom_right.y
        ):
            raise ValueError("Quadrilateral points are not in correct positions")
        return self

    @classmethod
    def from_unsorted(cls, points: Sequence[RelativePosition]) -> "Quadrilateral":
        """Build a quadrilateral from four corners given in any order.

        The two points with the smallest y form the top edge, the other two
        the bottom edge; each edge is then ordered by x.

        Raises:
            ValueError: if ``points`` does not hold exactly four points.
        """
        if len(points) != 4:
            raise ValueError("Quadrilateral must have 4 points")
        by_y = sorted(points, key=lambda p: p.y)
        top_left, top_right = sorted(by_y[:2], key=lambda p: p.x)
        bottom_left, bottom_right = sorted(by_y[2:], key=lambda p: p.x)
        return cls(
            top_left=top_left,
            top_right=top_right,
            bottom_right=bottom_right,
            bottom_left=bottom_left,
        )


class ImgValidateRequest(WireModel):
    unvalidated_file_handle: Handle


class ImgValidateResponseOk(ValidateResponseOk):
    class_name: Literal["ImgValidateResponseOk"] = "ImgValidateResponseOk"
    img_handle: Handle

    @property
    def handle(self) -> Handle:
        return self.img_handle


class ImgValidateResponseError(ValidateResponseError):
    class_name: Literal["ImgValidateResponseError"] = "ImgValidateResponseError"


class ImgValidateResponseVirus(ValidateResponseVirus):
    class_name: Literal["ImgValidateResponseVirus"] = "ImgValidateResponseVirus"


ImgValidateResult = Annotated[
    Union[ImgValidateResponseOk, ImgValidateResponseError, ImgValidateResponseVirus],
    Field(discriminator="class_name"),
]


class ImgValidateResponse(ValidateEnvelope):
    class_name: Literal["ImgValidateResponse"] = "ImgValidateResponse"
    response: ImgValidateResult


class ImgOrientationRequest(WireModel):
    img_handle: Handle


class ImgOrientationResponse(WireModel):
    rotated_img_handle: Handle
    orientation: DiscreteAngle
    confidence: Confidence


class ImgRotateRequest(WireModel):
    img_handle: Handle
    rotate: DiscreteAngle


class ImgRotateResponse(WireModel):
    img_handle: Handle


class ImgThumbnailRequest(WireModel):
    img_handle: Handle
    max_width: Annotated[int, Field(gt=0)]
    max_height: Annotated[int, Field(gt=0)]


class ImgThumbnailResponse(WireModel):
    img_handle: Handle


class ImgToPngRequest(WireModel):
    img_handle: Handle


class ImgToPngResponse(WireModel):
    png_handle: Handle


class ImgToJpegRequest(WireModel):
    img_handle: Handle
    quality: Annotated[int, Field(ge=0, le=100)] = 75
    progressive: bool = False


class ImgToJpegResponse(WireModel):
    jpeg_handle: Handle


class EmbeddingOptions(WireModel):
    """Place the image on a blank page of ``size``."""

    size: PdfPageSize
    position: Literal["center"] = "center"


class ImgToPdfOptions(WireModel):
    """How an image is laid out when converted to a PDF page."""

    img_quality: PdfImgQuality = 70
    img_color: PdfImgColor = "original"
    max_size: PdfPageSize = Field(
        default_factory=lambda: PdfPageSize(width=210, height=297)
    )
    max_dpi: Dpi = 120
    min_dpi: Dpi = 100
    embed_in_blank_page: EmbeddingOptions | None = None

    @model_validator(mode="after")
    def _check_consistency(self) -> "ImgToPdfOptions":
        if self.max_dpi < self.min_dpi:
            raise ValueError("max_dpi must be greater than or equal to min_dpi")
        page = self.embed_in_blank_page
        if page is not None and (
            page.size.width < self.max_size.width
            or page.size.height < self.max_size.height
        ):
            raise ValueError("embedding size must be >= max_size")
        return self


class ImgToPdfRequest(WireModel):
    img_handle: Handle
    options: ImgToPdfOptions | None = None


class ImgToPdfResponse(WireModel):
    pdf_handle: Handle


class ImgFindDocumentsRequest(WireModel):
    img_handle: Handle


class ImgFindDocumentsQuadrilateral(WireModel):
    quadrilateral: Quadrilateral
    confidence: Confidence


class ImgFindDocumentsResponse(WireModel):
    documents: list[ImgFindDocumentsQuadrilateral]


class ImgExtractQuadrilateralRequest(WireModel):
    img_handle: Handle
    quadrilateral: Quadrilateral


class ImgExtractQuadrilateralResponse(WireModel):
    img_handle: Handle


class ImgOcrToPdfRequest(WireModel):
    img_handle: Handle
    options: ImgToPdfOptions | None = None


class ImgOcrToPdfResponse(WireModel):
    pdf_handle: Handle


class ImgOcrToOdtRequest(WireModel):
    img_handle: Handle
    options: dict[str, object] = Field(default_factory=dict)


class ImgOcrToOdtResponse(WireModel):
    odt_handle: Handle
