"""Data models for single-document extraction and two-document comparison."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from billtext.diffing.models import LineDiffResult


class ComparisonStatus(str, Enum):
    """Which documents of a comparison produced usable text."""

    COMPARED = "compared"
    LEFT_ONLY = "left_only"
    RIGHT_ONLY = "right_only"
    UNAVAILABLE = "unavailable"


@dataclass
class ExtractionResult:
    """A single document taken from PDF to reconstructed text.

    Attributes:
        source: URL or path of the PDF
        raw_text: Text as extracted from the PDF
        text: Reconstructed text (filtered when filtering is enabled)
        normalized_text: Reconstructed text before filtering
        filtered: Whether the content filter was applied
        page_count: Number of pages in the PDF
        metadata: PDF document information
    """

    source: str
    raw_text: str
    text: str
    normalized_text: str
    filtered: bool = False
    page_count: int = 0
    metadata: Dict[str, str] = field(default_factory=dict)


@dataclass
class ComparisonSide:
    """Outcome for one document of a comparison.

    ``text`` is empty when the source was missing or extraction failed; in
    the latter case ``error`` carries the message shown to the user.
    """

    side: str
    label: str
    source: Optional[str] = None
    text: str = ""
    page_count: int = 0
    error: Optional[str] = None
    duration_seconds: float = 0.0

    @property
    def available(self) -> bool:
        return bool(self.text)

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class ComparisonResult:
    """Both sides of a comparison and, when both have text, their diff."""

    comparison_id: str
    left: ComparisonSide
    right: ComparisonSide
    status: ComparisonStatus
    diff: Optional[LineDiffResult] = None
    message: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return self.left.failed or self.right.failed

    @property
    def available_side(self) -> Optional[ComparisonSide]:
        """The only side with text when the other one is missing or failed."""
        if self.status == ComparisonStatus.LEFT_ONLY:
            return self.left
        if self.status == ComparisonStatus.RIGHT_ONLY:
            return self.right
        return None
