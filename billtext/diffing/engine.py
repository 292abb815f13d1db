"""Whitespace-sensitive line diff built on difflib."""

import logging
from difflib import SequenceMatcher
from typing import List, Optional

from billtext.logging import get_logger

from .models import DiffSegment, LineDiffResult, SegmentTag

logger = get_logger(__name__, component="diffing")


def _append(
    segments: List[DiffSegment],
    tag: SegmentTag,
    lines: List[str],
    right_lines: Optional[List[str]] = None,
) -> None:
    if not lines:
        return
    if right_lines == lines:
        right_lines = None

    if segments and segments[-1].tag == tag:
        last = segments[-1]
        if right_lines is not None or last.right_lines is not None:
            last.right_lines = (last.right_lines or list(last.lines)) + list(right_lines or lines)
        last.lines.extend(lines)
    else:
        segments.append(
            DiffSegment(
                tag=tag,
                lines=list(lines),
                right_lines=list(right_lines) if right_lines is not None else None,
            )
        )


def _match_keys(lines: List[str]) -> List[str]:
    return [line.rstrip("\r\n") for line in lines]


def diff_lines(
    left: str,
    right: str,
    logger_instance: Optional[logging.Logger] = None,
) -> LineDiffResult:
    """Compute a line-level diff between two documents.

    Lines are compared exactly, including whitespace. Line terminators are
    ignored when pairing lines but kept in the segments, so an unchanged run
    may carry a different right-hand version (see DiffSegment.right_lines).
    A replaced block is reported as the removed lines followed by the added
    lines, and adjacent segments with the same tag are merged.

    Args:
        left: Original document text
        right: Revised document text
        logger_instance: Logger instance (defaults to module logger)

    Returns:
        LineDiffResult whose segments reproduce both inputs exactly
    """
    log = logger_instance or logger

    left_lines = left.splitlines(keepends=True)
    right_lines = right.splitlines(keepends=True)

    # autojunk would treat frequent lines (blank separators) as noise
    matcher = SequenceMatcher(
        None, _match_keys(left_lines), _match_keys(right_lines), autojunk=False
    )

    segments: List[DiffSegment] = []
    for opcode, i1, i2, j1, j2 in matcher.get_opcodes():
        if opcode == "equal":
            _append(segments, SegmentTag.UNCHANGED, left_lines[i1:i2], right_lines[j1:j2])
        elif opcode == "delete":
            _append(segments, SegmentTag.REMOVED, left_lines[i1:i2])
        elif opcode == "insert":
            _append(segments, SegmentTag.ADDED, right_lines[j1:j2])
        else:
            _append(segments, SegmentTag.REMOVED, left_lines[i1:i2])
            _append(segments, SegmentTag.ADDED, right_lines[j1:j2])

    result = LineDiffResult(segments=segments)
    stats = result.stats

    log.info(
        "Diff computed",
        extra={
            "event": "diff.computed",
            "segments": len(segments),
            "added": stats[SegmentTag.ADDED.value],
            "removed": stats[SegmentTag.REMOVED.value],
            "unchanged": stats[SegmentTag.UNCHANGED.value],
        },
    )

    return result
