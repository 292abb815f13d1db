"""Data models for line diffs and their renderings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class SegmentTag(str, Enum):
    """Which side(s) of the comparison a diff segment belongs to."""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


@dataclass
class DiffSegment:
    """A run of consecutive lines sharing one tag.

    Lines keep their line terminators, so joining them reproduces the
    original text exactly. An unchanged run whose terminators differ between
    the documents (``"last"`` vs ``"last\\n"``) stores the right document's
    version in ``right_lines``.
    """

    tag: SegmentTag
    lines: List[str] = field(default_factory=list)
    right_lines: Optional[List[str]] = None

    @property
    def text(self) -> str:
        return "".join(self.lines)

    @property
    def right_text(self) -> str:
        return "".join(self.right_lines if self.right_lines is not None else self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def is_blank(self) -> bool:
        """Whether the segment contains nothing but whitespace."""
        return not self.text.strip()


@dataclass
class LineDiffResult:
    """Ordered segments describing how the left text becomes the right text.

    Invariants:
    - unchanged + removed segments, in order, reproduce the left text
    - unchanged + added segments, in order, reproduce the right text
    """

    segments: List[DiffSegment] = field(default_factory=list)

    def left_text(self) -> str:
        return "".join(
            segment.text for segment in self.segments if segment.tag != SegmentTag.ADDED
        )

    def right_text(self) -> str:
        return "".join(
            segment.right_text for segment in self.segments if segment.tag != SegmentTag.REMOVED
        )

    @property
    def has_changes(self) -> bool:
        return any(segment.tag != SegmentTag.UNCHANGED for segment in self.segments)

    @property
    def stats(self) -> Dict[str, int]:
        counts = {tag.value: 0 for tag in SegmentTag}
        for segment in self.segments:
            counts[segment.tag.value] += segment.line_count
        return counts

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)


@dataclass
class SideBySideRow:
    """One line in a side-by-side pane."""

    text: str
    changed: bool = False


@dataclass
class SideBySideView:
    """Left and right panes of a side-by-side comparison."""

    left: List[SideBySideRow] = field(default_factory=list)
    right: List[SideBySideRow] = field(default_factory=list)


@dataclass
class CombinedLine:
    """One line of the single-column combined view."""

    tag: SegmentTag
    prefix: str
    text: str

    def render(self) -> str:
        return f"{self.prefix}{self.text}"
