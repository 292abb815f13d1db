"""Document extraction and two-document comparison."""

from .models import ComparisonResult, ComparisonSide, ComparisonStatus, ExtractionResult
from .service import (
    BOTH_FAILED_MESSAGE,
    DocumentComparison,
    extract_document,
    failure_message,
)

__all__ = [
    "DocumentComparison",
    "extract_document",
    "failure_message",
    "BOTH_FAILED_MESSAGE",
    "ComparisonResult",
    "ComparisonSide",
    "ComparisonStatus",
    "ExtractionResult",
]
