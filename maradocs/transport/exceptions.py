from enum import IntEnum

from maradocs.exceptions import MaraDocsError


class ApiErrorType(IntEnum):
    """Error codes reported by the service inside an error envelope."""

    INTERNAL_ERROR = 0

    FAILED_VERIFICATION = 100
    FILE_HANDLE_EXPIRED = 101
    UPLOADED_DATA_IS_NOT_ENCRYPTED = 102

    INVALID_SECRET_KEY = 200
    TOO_MANY_SECRETS = 201
    SUBACCOUNT_CLOSED = 202
    WORKSPACE_CLOSED = 203

    PDF_PAGE_OUT_OF_RANGE = 300
    PDF_TOO_LARGE = 301


class TransportError(MaraDocsError):
    """Raised when a request fails without a structured error from the service."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiError(TransportError):
    """Raised when the service answers with a structured error envelope."""

    def __init__(self, status_code: int, code: int, name: str, message: str) -> None:
        super().__init__(f"[{code}] {name}: {message}", status_code=status_code)
        self.code = code
        self.name = name
        self.message = message

    @property
    def error_type(self) -> ApiErrorType | None:
        """Known error code, or None for codes newer than this client."""
        try:
            return ApiErrorType(self.code)
        except ValueError:
            return None
