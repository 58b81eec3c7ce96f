from dataclasses import dataclass

from maradocs.models.img import ImgToPdfOptions
from maradocs.transfer.strategies import ProgressCallback


@dataclass(frozen=True)
class OcrImgOptions:
    """Options for turning an image into a searchable PDF."""

    # Detect documents in the photo and extract each one, perspective-corrected.
    extract_document: bool = True
    pdf_options: ImgToPdfOptions | None = None
    on_progress: ProgressCallback | None = None


@dataclass(frozen=True)
class OcrPdfOptions:
    """Options for making an uploaded PDF searchable."""

    password: str | None = None
    on_progress: ProgressCallback | None = None
