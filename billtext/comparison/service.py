"""Comparison orchestration: acquire, reconstruct and diff two documents.

Each side is processed independently on its own worker thread. A side that
fails to download or parse never fails the comparison; it is reported with
a user-facing message and the other side is still returned.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional
from uuid import uuid4

from billtext.acquisition import AcquisitionError, DocumentAcquirer, FetchError
from billtext.config.models import AppConfig
from billtext.diffing import diff_lines
from billtext.filtering import ContentFilter
from billtext.logging import get_logger
from billtext.logging.context import log_context, submit_with_context
from billtext.reclassifier import ReclassifierPipeline

from .models import ComparisonResult, ComparisonSide, ComparisonStatus, ExtractionResult

logger = get_logger(__name__, component="comparison")

SIDE_FAILURE_MESSAGE = "Failed to extract text from {side} PDF. View the original PDF instead."
BOTH_FAILED_MESSAGE = "Failed to extract text from both PDFs. View the original documents instead."
NO_COMPARISON_MESSAGE = "No comparison available: {reason}"


def failure_message(side: str, error: Exception) -> str:
    """Build the user-facing message for a side whose extraction failed."""
    message = SIDE_FAILURE_MESSAGE.format(side=side)
    if isinstance(error, FetchError):
        status = error.status_code if error.status_code is not None else "unknown"
        message += f" (Status: {status}, Message: {error})"
    return message


class DocumentComparison:
    """Runs the acquire -> reclassify -> filter chain for one or two documents.

    Attributes:
        acquirer: Source -> RawDocument
        pipeline: Reclassifier applied to every raw text
        content_filter: Boilerplate filter, or None to skip filtering
    """

    def __init__(
        self,
        acquirer: Optional[DocumentAcquirer] = None,
        pipeline: Optional[ReclassifierPipeline] = None,
        content_filter: Optional[ContentFilter] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.acquirer = acquirer or DocumentAcquirer()
        self.pipeline = pipeline or ReclassifierPipeline()
        self.content_filter = content_filter
        self.logger = logger_instance or logger

    @classmethod
    def from_config(cls, config: AppConfig) -> "DocumentComparison":
        return cls(
            acquirer=DocumentAcquirer.from_config(config.http),
            pipeline=ReclassifierPipeline.from_config(config.reclassifier),
            content_filter=ContentFilter() if config.filtering.enabled else None,
        )

    def extract(self, source: str) -> ExtractionResult:
        """Acquire one document and reconstruct its text.

        Raises:
            FetchError: If the document cannot be retrieved
            ExtractionError: If no text can be extracted
        """
        document = self.acquirer.acquire(source)
        normalized = self.pipeline.run(document.text)

        if self.content_filter is not None:
            text = self.content_filter.apply(normalized)
        else:
            text = normalized

        return ExtractionResult(
            source=source,
            raw_text=document.text,
            text=text,
            normalized_text=normalized,
            filtered=self.content_filter is not None,
            page_count=document.page_count,
            metadata=document.metadata,
        )

    def compare(
        self,
        left_source: Optional[str],
        right_source: Optional[str],
        left_label: str = "Left",
        right_label: str = "Right",
    ) -> ComparisonResult:
        """Compare two documents line by line.

        Args:
            left_source: URL or path of the original document, or None
            right_source: URL or path of the revised document, or None
            left_label: Display name of the left document
            right_label: Display name of the right document

        Returns:
            ComparisonResult; acquisition failures are reported per side,
            never raised
        """
        comparison_id = uuid4().hex

        with log_context(comparison_id=comparison_id):
            self.logger.info(
                "Comparison started",
                extra={
                    "event": "comparison.started",
                    "left_source": left_source,
                    "right_source": right_source,
                },
            )

            with ThreadPoolExecutor(max_workers=2, thread_name_prefix="billtext-compare") as executor:
                left_future = submit_with_context(
                    executor, self._process_side, "left", left_label, left_source
                )
                right_future = submit_with_context(
                    executor, self._process_side, "right", right_label, right_source
                )
                left = left_future.result()
                right = right_future.result()

            result = self._build_result(comparison_id, left, right)

            self.logger.info(
                "Comparison completed",
                extra={
                    "event": "comparison.completed",
                    "status": result.status.value,
                    "left_failed": left.failed,
                    "right_failed": right.failed,
                    "has_changes": result.diff.has_changes if result.diff else None,
                },
            )

        return result

    def _process_side(self, side: str, label: str, source: Optional[str]) -> ComparisonSide:
        outcome = ComparisonSide(side=side, label=label, source=source)
        if not source:
            return outcome

        started = time.time()
        with log_context(side=side, source=source):
            try:
                extraction = self.extract(source)
                outcome.text = extraction.text
                outcome.page_count = extraction.page_count
            except AcquisitionError as e:
                outcome.error = failure_message(side, e)
                self.logger.error(
                    f"Error extracting text from {side} PDF: {e}",
                    extra={
                        "event": "comparison.side.failed",
                        "error_type": type(e).__name__,
                        "status_code": getattr(e, "status_code", None),
                    },
                    exc_info=True,
                )
            except Exception as e:
                outcome.error = SIDE_FAILURE_MESSAGE.format(side=side)
                self.logger.error(
                    f"Unexpected error processing {side} PDF: {e}",
                    extra={
                        "event": "comparison.side.unexpected_error",
                        "error_type": type(e).__name__,
                    },
                    exc_info=True,
                )

        outcome.duration_seconds = time.time() - started
        return outcome

    def _build_result(
        self, comparison_id: str, left: ComparisonSide, right: ComparisonSide
    ) -> ComparisonResult:
        if left.available and right.available:
            return ComparisonResult(
                comparison_id=comparison_id,
                left=left,
                right=right,
                status=ComparisonStatus.COMPARED,
                diff=diff_lines(left.text, right.text),
            )

        if left.failed and right.failed:
            message = BOTH_FAILED_MESSAGE
        elif left.available:
            message = NO_COMPARISON_MESSAGE.format(reason=f"{right.label} has no text")
        elif right.available:
            message = NO_COMPARISON_MESSAGE.format(reason=f"{left.label} has no text")
        else:
            message = NO_COMPARISON_MESSAGE.format(reason="neither document has text")

        if left.available:
            status = ComparisonStatus.LEFT_ONLY
        elif right.available:
            status = ComparisonStatus.RIGHT_ONLY
        else:
            status = ComparisonStatus.UNAVAILABLE

        self.logger.warning(
            message,
            extra={"event": "comparison.unavailable", "status": status.value},
        )

        return ComparisonResult(
            comparison_id=comparison_id,
            left=left,
            right=right,
            status=status,
            message=message,
        )


def extract_document(source: str, config: Optional[AppConfig] = None) -> ExtractionResult:
    """Acquire and reconstruct a single document using the given configuration.

    Args:
        source: URL or path of the PDF
        config: Application configuration (defaults used when None)

    Returns:
        ExtractionResult for the document

    Raises:
        FetchError: If the document cannot be retrieved
        ExtractionError: If no text can be extracted
    """
    comparison = DocumentComparison.from_config(config or AppConfig())
    try:
        return comparison.extract(source)
    finally:
        comparison.acquirer.close()
