"""Raw text acquisition: PDF download and text extraction.

This module provides:
- DocumentAcquirer: source (URL or path) -> RawDocument
- PdfFetcher: HTTP download with size cap and timeout
- PdfTextExtractor: pypdf-based page text and metadata extraction
- The AcquisitionError hierarchy
"""

from .exceptions import (
    AcquisitionError,
    EncryptedDocumentError,
    ExtractionError,
    FetchError,
    FetchTimeoutError,
    ParseError,
)
from .extractor import PdfTextExtractor
from .fetcher import PdfFetcher
from .models import RawDocument
from .service import DocumentAcquirer

__all__ = [
    "DocumentAcquirer",
    "PdfFetcher",
    "PdfTextExtractor",
    "RawDocument",
    # Exceptions
    "AcquisitionError",
    "FetchError",
    "FetchTimeoutError",
    "ExtractionError",
    "ParseError",
    "EncryptedDocumentError",
]
