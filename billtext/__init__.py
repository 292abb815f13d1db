"""billtext: reconstruct and compare legislative bill text extracted from PDFs."""

__version__ = "1.0.0"
