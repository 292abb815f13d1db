"""Plain-data renderings of a LineDiffResult.

Segments that contain only whitespace are left out of every rendering, but
they stay in the LineDiffResult so its reconstruction invariant still holds.
"""

from itertools import zip_longest
from typing import Iterator, List, Optional, Tuple

from .models import (
    CombinedLine,
    DiffSegment,
    LineDiffResult,
    SegmentTag,
    SideBySideRow,
    SideBySideView,
)

DEFAULT_PREFIXES = ("+ ", "- ", "  ")


def _visible_segments(result: LineDiffResult) -> Iterator[DiffSegment]:
    for segment in result.segments:
        if not segment.is_blank():
            yield segment


def _display_lines(segment: DiffSegment) -> List[str]:
    return [line.rstrip("\r\n") for line in segment.lines]


def render_side_by_side(result: LineDiffResult) -> SideBySideView:
    """Split a diff into a left pane (unchanged + removed) and a right pane (unchanged + added).

    Rows that only exist on one side are marked ``changed``.
    """
    view = SideBySideView()

    for segment in _visible_segments(result):
        changed = segment.tag != SegmentTag.UNCHANGED
        rows = [SideBySideRow(text=line, changed=changed) for line in _display_lines(segment)]

        if segment.tag != SegmentTag.ADDED:
            view.left.extend(rows)
        if segment.tag != SegmentTag.REMOVED:
            view.right.extend(rows)

    return view


def render_combined(
    result: LineDiffResult,
    prefixes: Tuple[str, str, str] = DEFAULT_PREFIXES,
) -> List[CombinedLine]:
    """Flatten a diff into one column of tagged lines.

    Args:
        result: Diff to render
        prefixes: Markers for (added, removed, unchanged) lines

    Returns:
        CombinedLine list in document order
    """
    added, removed, unchanged = prefixes
    prefix_for = {
        SegmentTag.ADDED: added,
        SegmentTag.REMOVED: removed,
        SegmentTag.UNCHANGED: unchanged,
    }

    lines: List[CombinedLine] = []
    for segment in _visible_segments(result):
        prefix = prefix_for[segment.tag]
        for text in _display_lines(segment):
            lines.append(CombinedLine(tag=segment.tag, prefix=prefix, text=text))

    return lines


def format_combined(
    result: LineDiffResult,
    prefixes: Tuple[str, str, str] = DEFAULT_PREFIXES,
) -> str:
    """Render the combined view as plain text, one line per diff line."""
    return "\n".join(line.render() for line in render_combined(result, prefixes))


def format_side_by_side(result: LineDiffResult, width: int = 60, gutter: str = " | ") -> str:
    """Render the side-by-side view as two fixed-width text columns.

    Changed rows are flagged with ``*`` after their text; long lines are
    truncated to the column width.
    """
    view = render_side_by_side(result)

    def cell(row: Optional[SideBySideRow]) -> str:
        if row is None:
            return " " * (width + 2)
        marker = " *" if row.changed else "  "
        return row.text[:width].ljust(width) + marker

    rows = zip_longest(view.left, view.right)
    return "\n".join(f"{cell(left)}{gutter}{cell(right)}".rstrip() for left, right in rows)
