"""Boilerplate removal for reconstructed bill text.

The filter drops everything before the first numbered content line (cover
pages, titles, calendar headers) and then removes page footers, LCO headers,
legislator attributions and other running boilerplate from the rest of the
document. Kept lines keep their leading indentation; runs of whitespace
inside a line, including the padding after a line number, collapse to one
space.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from billtext.logging import get_logger
from billtext.reclassifier.passes import tidy_punctuation
from billtext.reclassifier.patterns import CONTENT_START, is_boilerplate

logger = get_logger(__name__, component="filtering")

_INTERNAL_WHITESPACE = re.compile(r"(?<=\S)\s+(?=\S)")
_LEADING_INDENT = re.compile(r"^[ \t]*")
_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")


@dataclass
class FilterStats:
    """Line counts for a single filter run."""

    input_lines: int = 0
    front_matter_dropped: int = 0
    boilerplate_dropped: int = 0
    kept: int = 0


class ContentFilter:
    """Removes front matter and running boilerplate from normalized text.

    Example:
        >>> ContentFilter().apply("AN ACT CONCERNING X.\\n1 First line.\\n3 of 10")
        '1 First line.'
    """

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        self.logger = logger_instance or logger
        self.last_stats = FilterStats()

    def apply(self, text: str) -> str:
        """Filter a document.

        Args:
            text: Normalized (or raw) document text

        Returns:
            Filtered text; empty when no content line was found
        """
        stats = FilterStats()
        kept: List[str] = []
        content_started = False

        lines = text.split("\n") if text else []
        stats.input_lines = len(lines)

        for line in lines:
            stripped = line.strip()

            if not content_started:
                if stripped and CONTENT_START.match(stripped) and not is_boilerplate(stripped):
                    content_started = True
                else:
                    stats.front_matter_dropped += 1
                    continue

            if not stripped:
                kept.append("")
                continue

            if is_boilerplate(stripped):
                stats.boilerplate_dropped += 1
                continue

            indent = _LEADING_INDENT.match(line).group(0)
            kept.append(indent + _INTERNAL_WHITESPACE.sub(" ", stripped))
            stats.kept += 1

        result = "\n".join(kept)
        result = _EXTRA_BLANK_LINES.sub("\n\n", result).strip("\n")
        result = tidy_punctuation(result)

        self.last_stats = stats
        self.logger.info(
            "Filtered document content",
            extra={
                "event": "filtering.completed",
                "input_lines": stats.input_lines,
                "front_matter_dropped": stats.front_matter_dropped,
                "boilerplate_dropped": stats.boilerplate_dropped,
                "kept_lines": stats.kept,
            },
        )

        return result


def filter_content(text: str) -> str:
    """Filter a document with a default ContentFilter."""
    return ContentFilter().apply(text)
