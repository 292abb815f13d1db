"""Line diffing between two reconstructed documents, with text and HTML renderings."""

from .engine import diff_lines
from .exceptions import DiffRenderError
from .models import (
    CombinedLine,
    DiffSegment,
    LineDiffResult,
    SegmentTag,
    SideBySideRow,
    SideBySideView,
)
from .rendering import (
    format_combined,
    format_side_by_side,
    render_combined,
    render_side_by_side,
)
from .templates import DiffHtmlRenderer

__all__ = [
    "diff_lines",
    "DiffSegment",
    "LineDiffResult",
    "SegmentTag",
    "SideBySideRow",
    "SideBySideView",
    "CombinedLine",
    "render_side_by_side",
    "render_combined",
    "format_combined",
    "format_side_by_side",
    "DiffHtmlRenderer",
    "DiffRenderError",
]
