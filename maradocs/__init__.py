from maradocs.client import MaraDocsClient, build_client
from maradocs.exceptions import MaraDocsError
from maradocs.jobs.exceptions import PollTimeoutError
from maradocs.pipeline.options import OcrImgOptions, OcrPdfOptions
from maradocs.transfer.exceptions import DownloadError, UploadError
from maradocs.transport.exceptions import ApiError, ApiErrorType, TransportError
from maradocs.validation.exceptions import ThreatDetectedError, ValidationError
from maradocs.validation.unwrapper import unwrap

__all__ = [
    "ApiError",
    "ApiErrorType",
    "DownloadError",
    "MaraDocsClient",
    "MaraDocsError",
    "OcrImgOptions",
    "OcrPdfOptions",
    "PollTimeoutError",
    "ThreatDetectedError",
    "TransportError",
    "UploadError",
    "ValidationError",
    "build_client",
    "unwrap",
]
