"""Regular expressions for recognizing structure in legislative PDF text.

Shared by the reclassifier passes and the content filter. All patterns are
meant to be applied to a single line with surrounding whitespace stripped,
unless noted otherwise.
"""

import re

# "AN ACT" with any whitespace between the words, anywhere in the document
ACT_START = re.compile(r"\bAN\s+ACT\b", re.IGNORECASE)

# Line numbers
LEADING_NUMBER = re.compile(r"^(\d+)(?:\s|$)")
NUMBERED_PREFIX = re.compile(r"^\d+\s+")
# Trailing line number, either hyphen-attached ("consti-12") or space separated
TRAILING_NUMBER = re.compile(r"(?:(?<=\w-)(\d+)|\s+(\d+))$")
T_LINE = re.compile(r"^T\d+\b")
BARE_NUMBER = re.compile(r"^\d+$")
NUMBERED_ITEM = re.compile(r"^\d+\.")

# Legislator attribution and district references
ATTRIBUTION = re.compile(r"^(REP\.|SEN\.)\s+[A-Z]+", re.IGNORECASE)
DISTRICT_REFERENCE = re.compile(r"\d+(st|nd|rd|th)\s+Dist\.$", re.IGNORECASE)
PARTIAL_DISTRICT_NUMBER = re.compile(r",\s*\d+$")
ORDINAL_SUFFIX = re.compile(r"^(st|nd|rd|th)$", re.IGNORECASE)
DIST_LINE = re.compile(r"^Dist\.$", re.IGNORECASE)

# Structural lines
SECTION_HEADER = re.compile(r"^(Section|Sec\.)\s+\d+\.", re.IGNORECASE)
AMENDMENT_TITLE = re.compile(r"^(SB|HB)\s+\d+\s+Amendment", re.IGNORECASE)
LCO_NUMBER = re.compile(r"^\d+\s+LCO\s+No\.", re.IGNORECASE)
LCO_HEADER = re.compile(r"^(\d+\s+)?LCO\s+No\.", re.IGNORECASE)
PAGE_NUMBER = re.compile(r"^\d+\s+of\s+\d+$")
ACT_TITLE = re.compile(r"(?:^|\")AN\s+ACT\s+[^\".]+\.", re.IGNORECASE)
ALL_CAPS = re.compile(r"^[A-Z\s]+$")

# Front matter and running headers
DATE_LINE = re.compile(r"^[A-Z][a-z]+ \d{1,2}, \d{4}$")
HEADER_FOOTER = re.compile(r"^(File No\.|Calendar No\.|Substitute\b)", re.IGNORECASE)
CONTENT_START = re.compile(r"^\d+\s*\S")


def is_running_header(line: str) -> bool:
    """Whether a stripped line is a calendar/file-number header or a bare date."""
    return bool(DATE_LINE.match(line) or HEADER_FOOTER.match(line))


def is_boilerplate(line: str) -> bool:
    """Whether a stripped line is a page footer, header or attribution line."""
    return bool(
        PAGE_NUMBER.match(line)
        or LCO_HEADER.match(line)
        or ATTRIBUTION.match(line)
        or DISTRICT_REFERENCE.search(line)
        or BARE_NUMBER.match(line)
        or is_running_header(line)
    )
