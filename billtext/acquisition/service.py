"""Document acquisition: fetch a PDF and extract its raw text."""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from billtext.config.models import HttpConfig
from billtext.logging import get_logger

from .exceptions import FetchError
from .extractor import PdfTextExtractor
from .fetcher import PdfFetcher
from .models import RawDocument

logger = get_logger(__name__, component="acquisition")

_REMOTE_SCHEMES = ("http", "https")


class DocumentAcquirer:
    """Turns a document source into a RawDocument.

    Sources may be HTTP(S) URLs, ``file://`` URLs or local paths. Errors from
    the fetcher or extractor are raised unchanged.
    """

    def __init__(
        self,
        fetcher: Optional[PdfFetcher] = None,
        extractor: Optional[PdfTextExtractor] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.fetcher = fetcher or PdfFetcher()
        self.extractor = extractor or PdfTextExtractor()
        self.logger = logger_instance or logger

    @classmethod
    def from_config(cls, config: HttpConfig) -> "DocumentAcquirer":
        return cls(fetcher=PdfFetcher.from_config(config))

    def acquire(self, source: str) -> RawDocument:
        """Fetch and extract one document.

        Args:
            source: URL or filesystem path of a PDF

        Returns:
            RawDocument for the source

        Raises:
            FetchError: If the document cannot be retrieved
            ExtractionError: If no text can be extracted
        """
        self.logger.info(
            f"Acquiring document {source}",
            extra={"event": "acquisition.started", "source": source},
        )

        payload = self._read(source)
        return self.extractor.extract(payload, source=source)

    def _read(self, source: str) -> bytes:
        parsed = urlparse(source)

        if parsed.scheme in _REMOTE_SCHEMES:
            return self.fetcher.fetch(source)

        if parsed.scheme == "file":
            path = Path(unquote(parsed.path))
        else:
            path = Path(source)

        try:
            return path.read_bytes()
        except OSError as e:
            self.logger.error(
                f"Unable to read {path}: {e}",
                extra={
                    "event": "acquisition.read.failed",
                    "source": source,
                    "error_type": type(e).__name__,
                },
            )
            raise FetchError(f"Unable to read {path}: {e.strerror or e}", url=source) from e

    def close(self) -> None:
        self.fetcher.close()
