"""Input validation and error handling around a Summarizer."""

import logging
from typing import Optional

from billtext.logging import get_logger

from .base import Summarizer
from .exceptions import SummarizationError, SummarizationInputError

logger = get_logger(__name__, component="summarization")


class SummarizationService:
    """Validates inputs and forwards them to a Summarizer.

    Requests with missing text are rejected before the collaborator is
    called. Any collaborator failure is re-raised as SummarizationError.
    Calls are made once, without retries.
    """

    def __init__(self, summarizer: Summarizer, logger_instance: Optional[logging.Logger] = None):
        self.summarizer = summarizer
        self.logger = logger_instance or logger

    def summarize_bill(self, bill_text: Optional[str]) -> str:
        text = self._require(bill_text, "Bill text is required")

        return self._call(
            "bill",
            lambda: self.summarizer.summarize_bill(text),
            input_chars=len(text),
        )

    def summarize_amendment(self, amendment_text: Optional[str], bill_text: Optional[str]) -> str:
        amendment = self._require(amendment_text, "Amendment text is required")
        bill = self._require(bill_text, "Bill text is required")

        return self._call(
            "amendment",
            lambda: self.summarizer.summarize_amendment(amendment, bill),
            input_chars=len(amendment) + len(bill),
        )

    def _require(self, text: Optional[str], message: str) -> str:
        if text is None or not text.strip():
            self.logger.warning(
                message,
                extra={"event": "summarization.input.rejected"},
            )
            raise SummarizationInputError(message)
        return text.strip()

    def _call(self, kind: str, func, input_chars: int) -> str:
        self.logger.info(
            f"Requesting {kind} summary",
            extra={
                "event": "summarization.requested",
                "kind": kind,
                "input_chars": input_chars,
            },
        )

        try:
            summary = func()
        except SummarizationError:
            raise
        except Exception as e:
            self.logger.error(
                f"Failed to generate {kind} summary: {e}",
                extra={
                    "event": "summarization.failed",
                    "kind": kind,
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )
            raise SummarizationError(f"Failed to generate {kind} summary: {e}") from e

        if not isinstance(summary, str) or not summary.strip():
            self.logger.error(
                f"Summarizer returned an empty {kind} summary",
                extra={"event": "summarization.failed", "kind": kind},
            )
            raise SummarizationError(f"Summarizer returned an empty {kind} summary")

        self.logger.info(
            f"Generated {kind} summary",
            extra={
                "event": "summarization.completed",
                "kind": kind,
                "summary_chars": len(summary),
            },
        )
        return summary
