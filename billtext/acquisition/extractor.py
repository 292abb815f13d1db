"""PDF text extraction with pypdf."""

import io
import logging
from typing import Dict, Optional

from pypdf import PasswordType, PdfReader
from pypdf.errors import FileNotDecryptedError, PyPdfError

from billtext.logging import get_logger

from .exceptions import EncryptedDocumentError, ExtractionError, ParseError
from .models import RawDocument

logger = get_logger(__name__, component="acquisition")

# The PDF header must appear within the first 1024 bytes
_HEADER_WINDOW = 1024


class PdfTextExtractor:
    """Extracts page text and document metadata from PDF bytes."""

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        self.logger = logger_instance or logger

    def extract(self, payload: bytes, source: Optional[str] = None) -> RawDocument:
        """Extract the text of every page.

        Args:
            payload: PDF file contents
            source: URL or path, recorded on the result and in logs

        Returns:
            RawDocument with page texts joined by newlines

        Raises:
            ParseError: If the payload is empty, not a PDF, or unreadable
            EncryptedDocumentError: If the PDF requires a password
        """
        if not payload:
            raise self._parse_error("PDF payload is empty", source)

        if b"%PDF" not in payload[:_HEADER_WINDOW]:
            raise self._parse_error("Payload is not a PDF document", source)

        try:
            reader = PdfReader(io.BytesIO(payload))

            if reader.is_encrypted and reader.decrypt("") == PasswordType.NOT_DECRYPTED:
                raise EncryptedDocumentError("PDF is password protected")

            page_texts = [page.extract_text() or "" for page in reader.pages]
            metadata = self._read_metadata(reader)

        except ExtractionError as e:
            self.logger.error(
                str(e),
                extra={"event": "acquisition.extract.failed", "source": source},
            )
            raise
        except FileNotDecryptedError as e:
            self.logger.error(
                "PDF is password protected",
                extra={"event": "acquisition.extract.failed", "source": source},
            )
            raise EncryptedDocumentError("PDF is password protected") from e
        except (PyPdfError, ValueError, KeyError, TypeError, OSError) as e:
            raise self._parse_error(f"Unable to read PDF: {e}", source) from e

        document = RawDocument(
            text="\n".join(page_texts),
            page_count=len(page_texts),
            metadata=metadata,
            source=source,
        )

        self.logger.info(
            f"Extracted text from {document.page_count} pages",
            extra={
                "event": "acquisition.extract.succeeded",
                "source": source,
                "page_count": document.page_count,
                "characters": len(document.text),
            },
        )
        return document

    @staticmethod
    def _read_metadata(reader: PdfReader) -> Dict[str, str]:
        info = reader.metadata
        if not info:
            return {}
        return {str(key).lstrip("/"): str(value) for key, value in info.items()}

    def _parse_error(self, message: str, source: Optional[str]) -> ParseError:
        self.logger.error(
            message,
            extra={"event": "acquisition.extract.failed", "source": source},
        )
        return ParseError(message)
