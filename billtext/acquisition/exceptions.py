"""Custom exceptions for document acquisition."""

from typing import Optional


class AcquisitionError(Exception):
    """Base exception for all acquisition errors.

    Catching this exception catches any failure to turn a source into raw
    text. Comparisons handle it per document so that one broken PDF never
    aborts the other side.
    """

    pass


class FetchError(AcquisitionError):
    """The PDF could not be retrieved.

    Raised for HTTP 4xx/5xx responses, connection failures, oversized
    payloads and unreadable local files. ``status_code`` is None when no
    HTTP response was received.
    """

    def __init__(
        self,
        message: str,
        url: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        """Initialize fetch error.

        Args:
            message: Human-readable error message
            url: Source that failed
            status_code: HTTP status code, if a response was received
            reason: HTTP reason phrase, if a response was received
        """
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.reason = reason


class FetchTimeoutError(FetchError):
    """The PDF request timed out."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message, url=url)


class ExtractionError(AcquisitionError):
    """The payload was retrieved but no text could be extracted from it."""

    pass


class ParseError(ExtractionError):
    """The payload is empty, not a PDF, truncated or otherwise unreadable."""

    pass


class EncryptedDocumentError(ExtractionError):
    """The PDF is password protected."""

    pass
