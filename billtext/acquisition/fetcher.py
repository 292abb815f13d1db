"""HTTP retrieval of PDF payloads."""

import logging
from typing import Optional

import requests

from billtext.config.models import HttpConfig
from billtext.logging import get_logger

from .exceptions import FetchError, FetchTimeoutError

logger = get_logger(__name__, component="acquisition")

_CHUNK_SIZE = 64 * 1024
_BYTES_PER_MB = 1024 * 1024


class PdfFetcher:
    """Downloads PDF documents over HTTP(S).

    Every request is made once; failures are raised to the caller and never
    retried.

    Attributes:
        timeout: HTTP request timeout in seconds
        user_agent: User-Agent header for HTTP requests
        verify_ssl: Whether TLS certificates are verified
        max_bytes: Largest payload accepted
    """

    def __init__(
        self,
        timeout: int = 30,
        user_agent: str = "billtext/1.0",
        verify_ssl: bool = True,
        max_pdf_size_mb: int = 50,
        logger_instance: Optional[logging.Logger] = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.verify_ssl = verify_ssl
        self.max_bytes = max_pdf_size_mb * _BYTES_PER_MB
        self.logger = logger_instance or logger

        self._session = requests.Session()
        self._session.headers.update({"User-Agent": self.user_agent})

        if not verify_ssl:
            self.logger.warning(
                "TLS certificate verification is disabled for PDF downloads",
                extra={"event": "acquisition.fetch.insecure"},
            )

    @classmethod
    def from_config(cls, config: HttpConfig) -> "PdfFetcher":
        return cls(
            timeout=config.timeout,
            user_agent=config.user_agent,
            verify_ssl=config.verify_ssl,
            max_pdf_size_mb=config.max_pdf_size_mb,
        )

    def fetch(self, url: str) -> bytes:
        """Download a PDF.

        Args:
            url: HTTP(S) URL of the document

        Returns:
            Raw response body

        Raises:
            FetchError: On 4xx or 5xx HTTP status, connection failure or oversized payload
            FetchTimeoutError: On request timeout
        """
        self.logger.debug(
            f"HTTP GET request to {url}",
            extra={
                "event": "acquisition.fetch.request",
                "url": url,
                "timeout": self.timeout,
            },
        )

        try:
            response = self._session.get(
                url,
                timeout=self.timeout,
                verify=self.verify_ssl,
                stream=True,
            )
            try:
                if response.status_code >= 400:
                    self.logger.error(
                        f"HTTP {response.status_code} error from {url}",
                        extra={
                            "event": "acquisition.fetch.error",
                            "status_code": response.status_code,
                            "url": url,
                        },
                    )
                    raise FetchError(
                        f"HTTP {response.status_code}: {response.reason}",
                        url=url,
                        status_code=response.status_code,
                        reason=response.reason,
                    )

                payload = self._read_body(response, url)
            finally:
                response.close()

        except requests.exceptions.Timeout as e:
            self.logger.warning(
                f"Request to {url} timed out after {self.timeout} seconds",
                extra={
                    "event": "acquisition.fetch.timeout",
                    "url": url,
                    "timeout": self.timeout,
                },
            )
            raise FetchTimeoutError(
                f"Request to {url} timed out after {self.timeout} seconds",
                url=url,
            ) from e
        except requests.exceptions.RequestException as e:
            self.logger.error(
                f"Request to {url} failed: {e}",
                extra={
                    "event": "acquisition.fetch.error",
                    "error_type": type(e).__name__,
                    "url": url,
                },
            )
            raise FetchError(f"Request to {url} failed: {e}", url=url) from e

        self.logger.debug(
            "PDF download succeeded",
            extra={
                "event": "acquisition.fetch.succeeded",
                "url": url,
                "size": len(payload),
            },
        )
        return payload

    def _read_body(self, response: requests.Response, url: str) -> bytes:
        declared = response.headers.get("Content-Length")
        if declared and declared.isdigit() and int(declared) > self.max_bytes:
            raise self._too_large(url, int(declared))

        chunks = []
        received = 0
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
            if not chunk:
                continue
            received += len(chunk)
            if received > self.max_bytes:
                raise self._too_large(url, received)
            chunks.append(chunk)

        return b"".join(chunks)

    def _too_large(self, url: str, size: int) -> FetchError:
        self.logger.error(
            f"PDF from {url} exceeds the {self.max_bytes} byte limit",
            extra={
                "event": "acquisition.fetch.too_large",
                "url": url,
                "size": size,
                "max_bytes": self.max_bytes,
            },
        )
        return FetchError(
            f"PDF exceeds the maximum size of {self.max_bytes // _BYTES_PER_MB} MB",
            url=url,
        )

    def close(self) -> None:
        self._session.close()
