class MaraDocsError(Exception):
    """Base exception for all errors raised by the MaraDocs client."""
