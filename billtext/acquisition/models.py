"""Data models for acquired documents."""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class RawDocument:
    """Text extracted from a PDF, before any reconstruction.

    Attributes:
        text: Page texts joined with newlines
        page_count: Number of pages in the PDF
        metadata: Document information dictionary, keys without the leading "/"
        source: URL or path the document was read from
    """

    text: str
    page_count: int
    metadata: Dict[str, str] = field(default_factory=dict)
    source: Optional[str] = None
