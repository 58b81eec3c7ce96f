from maradocs.exceptions import MaraDocsError


class ValidationError(MaraDocsError):
    """Raised when the service rejects uploaded content as invalid."""


class ThreatDetectedError(MaraDocsError):
    """Raised when the virus scan flags uploaded content."""
