"""Text passes that rebuild logical lines from extracted PDF text.

Every pass takes the whole document and returns a new one. Several passes
need to look at neighbouring lines, so none of them work on a single line in
isolation. The passes are total: any string, including the empty string, is
valid input.

Canonical order (see ReclassifierPipeline):

1. trim_to_act
2. normalize_whitespace
3. remove_blank_lines
4. join_district_references
5. reposition_line_numbers
6. prune_sequence_gaps        (strict mode)
7. apply_structural_spacing   (structural mode)
8. final_cleanup
"""

import re
from typing import List

from billtext.logging import get_logger

from .patterns import (
    ACT_START,
    ACT_TITLE,
    ALL_CAPS,
    AMENDMENT_TITLE,
    ATTRIBUTION,
    DIST_LINE,
    DISTRICT_REFERENCE,
    LCO_NUMBER,
    LEADING_NUMBER,
    NUMBERED_ITEM,
    NUMBERED_PREFIX,
    ORDINAL_SUFFIX,
    PAGE_NUMBER,
    PARTIAL_DISTRICT_NUMBER,
    SECTION_HEADER,
    T_LINE,
    TRAILING_NUMBER,
    is_running_header,
)

logger = get_logger(__name__, component="reclassifier")

DEFAULT_LINE_NUMBER_WIDTH = 8
DEFAULT_MAX_JOIN_LENGTH = 120

_WHITESPACE_RUN = re.compile(r"\s+")

# Final cleanup rules
_EXTRA_BLANK_LINES = re.compile(r"\n(?:[ \t]*\n){2,}")
_SPACE_BEFORE_PUNCTUATION = re.compile(r"(?<=\S)[ \t]+([.,;:)])")
_SPACE_AFTER_OPENER = re.compile(r"([({])[ \t]+")
# Comma or period glued to the next word; "1,000" and "2.5" are left alone
_MISSING_SPACE_AFTER = re.compile(r"(?<!\d)([,.])(?=\w)|([,.])(?=[^\W\d])")
_EXTRA_SPACE_AFTER = re.compile(r"([,.])[ \t]{2,}(?=\S)")
_NUMBERED_PAREN = re.compile(r"(\d)\)[ \t]*(?=\w)")
_SPACED_HYPHEN = re.compile(r"(?<=\w)[ \t]*-[ \t]*(?=\w)")
_ACT_SENTENCE = re.compile(r"\bAN[ \t]+ACT\b[^.\n]*\.", re.IGNORECASE)
# Opening quotes only; a quote right after a word or punctuation closes a string
_QUOTED_BLOCK = re.compile(r"(?<![\w.,;:!?)\"])\"([^\"\n]*\n[^\"]*?)\"")
_CONTINUATION_INDENT = "  "


def _split(text: str) -> List[str]:
    return text.split("\n")


def trim_to_act(text: str) -> str:
    """Drop the cover block that precedes the first "AN ACT".

    Only slices; the matched words keep their original case and spacing.
    Text without "AN ACT" passes through unchanged.
    """
    match = ACT_START.search(text)
    if match is None:
        return text
    return text[match.start():]


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space per line and trim every line."""
    lines = [_WHITESPACE_RUN.sub(" ", line).strip() for line in text.splitlines()]
    return "\n".join(lines).strip()


def remove_blank_lines(text: str) -> str:
    """Drop lines that contain only whitespace."""
    return "\n".join(line for line in _split(text) if line.strip())


def join_district_references(text: str) -> str:
    """Rejoin attribution lines whose district reference wrapped over three lines.

    ``SEN. SMITH, 11`` / ``th`` / ``Dist.`` becomes ``SEN. SMITH, 11th Dist.``.
    The two consumed lines are removed from the output.
    """
    lines = _split(text)
    consumed = set()

    i = 0
    while i < len(lines) - 2:
        current = lines[i].strip()
        if (
            ATTRIBUTION.match(current)
            and PARTIAL_DISTRICT_NUMBER.search(current)
            and ORDINAL_SUFFIX.match(lines[i + 1].strip())
            and DIST_LINE.match(lines[i + 2].strip())
        ):
            lines[i] = f"{lines[i].rstrip()}{lines[i + 1].strip()} {lines[i + 2].strip()}"
            consumed.update((i + 1, i + 2))
            i += 3
        else:
            i += 1

    if consumed:
        logger.debug(
            "Joined split district references",
            extra={"event": "reclassifier.district.joined", "count": len(consumed) // 2},
        )

    return "\n".join(line for index, line in enumerate(lines) if index not in consumed)


def _number_column(number: str, width: int) -> str:
    # Always leave at least one space between the number and the text
    return number.ljust(width - 1) + " "


def reposition_line_numbers(text: str, width: int = DEFAULT_LINE_NUMBER_WIDTH) -> str:
    """Move trailing line numbers to a fixed-width column at the start of the line.

    Lines that already start with a number are left alone, as are attribution
    and district lines (their trailing digits are district numbers) and
    calendar, file-number and date headers. When a
    number is glued to a hyphenated word (``consti-12``) the hyphen stays with
    the text. ``T`` marker lines are indented by the column width instead.
    """
    result = []

    for line in _split(text):
        stripped = line.strip()

        if not stripped or LEADING_NUMBER.match(stripped):
            result.append(line)
            continue

        if T_LINE.match(stripped):
            result.append(" " * width + stripped)
            continue

        if (
            ATTRIBUTION.match(stripped)
            or DISTRICT_REFERENCE.search(stripped)
            or is_running_header(stripped)
        ):
            result.append(line)
            continue

        match = TRAILING_NUMBER.search(stripped)
        if match is None:
            result.append(line)
            continue

        number = match.group(1) or match.group(2)
        content = stripped[: match.start()].rstrip()
        result.append(_number_column(number, width) + content)

    return "\n".join(result)


def prune_sequence_gaps(text: str) -> str:
    """Keep numbered lines only while they follow 1, 2, 3, ... without a gap.

    A numbered line is kept when its number equals the expected counter,
    which then advances. Numbered lines that break the sequence are dropped,
    including every later line once a gap has occurred, until the expected
    number shows up. ``T`` marker lines, unnumbered lines, and page/LCO
    footers are kept and do not touch the counter.

    Documents whose numbering intentionally skips lose the content after
    the gap.
    """
    expected = 1
    result = []
    dropped = 0

    for line in _split(text):
        stripped = line.strip()

        if T_LINE.match(stripped) or PAGE_NUMBER.match(stripped) or LCO_NUMBER.match(stripped):
            result.append(line)
            continue

        match = LEADING_NUMBER.match(stripped)
        if match is None:
            result.append(line)
            continue

        if int(match.group(1)) == expected:
            result.append(line)
            expected += 1
        else:
            dropped += 1

    if dropped:
        logger.debug(
            f"Dropped {dropped} out-of-sequence lines",
            extra={
                "event": "reclassifier.sequence.pruned",
                "dropped": dropped,
                "next_expected": expected,
            },
        )

    return "\n".join(result)


def _separate(lines: List[str]) -> None:
    if lines and lines[-1] != "":
        lines.append("")


def _is_continuation(previous: str, line: str, max_join_length: int) -> bool:
    previous_stripped = previous.strip()
    return bool(
        NUMBERED_PREFIX.match(previous)
        and not LCO_NUMBER.match(previous_stripped)
        and not PAGE_NUMBER.match(previous_stripped)
        and not ALL_CAPS.match(line)
        and not NUMBERED_ITEM.match(line)
        and len(previous) + len(line) < max_join_length
    )


def apply_structural_spacing(text: str, max_join_length: int = DEFAULT_MAX_JOIN_LENGTH) -> str:
    """Space out headers and merge wrapped fragments into their numbered line.

    Checks run in a fixed order and the first match wins:

    1. attribution and district lines are kept as they are
    2. section headers get a blank line before them
    3. amendment titles get a blank line before and after
    4. LCO-number, page-number and running header lines are kept as they are
    5. numbered lines and ``T`` marker lines are kept as they are
    6. "AN ACT ..." title lines are upper-cased with blank lines around them
    7. anything else directly after a numbered content line (not an LCO or
       page-number line) is appended to it when
       the result stays under max_join_length and the fragment is neither
       all caps nor a numbered item
    8. otherwise the line is kept on its own
    """
    result: List[str] = []
    joined = 0

    for line in _split(text):
        stripped = line.strip()

        if not stripped:
            result.append("")
        elif ATTRIBUTION.match(stripped) or DISTRICT_REFERENCE.search(stripped):
            result.append(line)
        elif SECTION_HEADER.match(stripped):
            _separate(result)
            result.append(line)
        elif AMENDMENT_TITLE.match(stripped):
            _separate(result)
            result.append(line)
            result.append("")
        elif (
            LCO_NUMBER.match(stripped)
            or PAGE_NUMBER.match(stripped)
            or is_running_header(stripped)
        ):
            result.append(line)
        elif LEADING_NUMBER.match(stripped) or T_LINE.match(stripped):
            result.append(line)
        elif ACT_TITLE.search(stripped):
            _separate(result)
            result.append(line.upper())
            result.append("")
        elif result and _is_continuation(result[-1], stripped, max_join_length):
            result[-1] = f"{result[-1]} {stripped}"
            joined += 1
        else:
            result.append(line)

    if joined:
        logger.debug(
            f"Joined {joined} wrapped continuation lines",
            extra={"event": "reclassifier.continuation.joined", "count": joined},
        )

    return "\n".join(result)


def _space_after(match: re.Match) -> str:
    return (match.group(1) or match.group(2)) + " "


def _indent_quoted_block(match: re.Match) -> str:
    inner = match.group(1)
    if "\n\n" in inner:
        return match.group(0)

    first, *rest = inner.split("\n")
    lines = [first.rstrip()]
    for line in rest:
        stripped = line.strip()
        if LEADING_NUMBER.match(stripped) or T_LINE.match(stripped):
            lines.append(line.rstrip())
        else:
            lines.append(_CONTINUATION_INDENT + stripped)

    return '"' + "\n".join(lines) + '"'


def tidy_punctuation(text: str) -> str:
    """Normalize the spacing around punctuation without touching line indentation.

    Also joins spaced ranges (``10 - 12`` becomes ``10-12``) and puts one
    space after a numbered parenthesis (``1)text`` becomes ``1) text``).
    """
    result = _SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)
    result = _SPACE_AFTER_OPENER.sub(r"\1", result)
    result = _MISSING_SPACE_AFTER.sub(_space_after, result)
    result = _EXTRA_SPACE_AFTER.sub(r"\1 ", result)
    result = _NUMBERED_PAREN.sub(r"\1) ", result)
    return _SPACED_HYPHEN.sub("-", result)


def final_cleanup(text: str) -> str:
    """Fix punctuation spacing, title casing and blank-line runs.

    Leading indentation is preserved, so the line-number column and ``T``
    line indent survive. Running the pass on its own output changes nothing.
    """
    result = tidy_punctuation(text)
    result = _ACT_SENTENCE.sub(lambda m: m.group(0).upper(), result)
    result = _QUOTED_BLOCK.sub(_indent_quoted_block, result)
    result = _EXTRA_BLANK_LINES.sub("\n\n", result)
    return result.strip("\n")
