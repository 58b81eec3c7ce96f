from maradocs.exceptions import MaraDocsError


class TransferError(MaraDocsError):
    """Base exception for direct storage transfers."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UploadError(TransferError):
    """Raised when the storage backend rejects an upload."""


class DownloadError(TransferError):
    """Raised when the storage backend refuses a download."""
