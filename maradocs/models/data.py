"""Upload, download and media-type payloads."""

from typing import Annotated

from pydantic import Field

from maradocs.models.common import Confidence, Handle, WireModel


class DataUploadRequest(WireModel):
    size: Annotated[int, Field(gt=0)]


class DataUploadResponse(WireModel):
    """One-time upload target plus the handle the upload will be known by."""

    post_url: str
    post_header: dict[str, str]
    unvalidated_file_handle: Handle


class DataDownloadPdfRequest(WireModel):
    pdf_handle: Handle


class DataDownloadJpegRequest(WireModel):
    jpeg_handle: Handle


class DataDownloadPngRequest(WireModel):
    png_handle: Handle


class DataDownloadOdtRequest(WireModel):
    odt_handle: Handle


class DataDownloadUnvalidatedRequest(WireModel):
    unvalidated_file_handle: Handle


class DataDownloadResponse(WireModel):
    """Presigned GET location; ``headers`` must accompany the GET."""

    url: str
    headers: dict[str, str] = Field(default_factory=dict)


class DataMediaTypeRequest(WireModel):
    unvalidated_file_handle: Handle


class DataMediaTypeResponse(WireModel):
    media_type: str
    confidence: Confidence
