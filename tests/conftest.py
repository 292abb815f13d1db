"""Shared pytest fixtures."""

import io
from pathlib import Path

import pytest
from pypdf import PdfWriter

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_blank_pdf(pages: int = 1, title: str = "SB 101") -> bytes:
    """Build a small, valid PDF with blank pages and a title."""
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=612, height=792)
    writer.add_metadata({"/Title": title})

    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def blank_pdf() -> bytes:
    return make_blank_pdf(pages=2)


@pytest.fixture
def raw_original() -> str:
    return (FIXTURES_DIR / "raw_bill_original.txt").read_text(encoding="utf-8")


@pytest.fixture
def raw_amended() -> str:
    return (FIXTURES_DIR / "raw_bill_amended.txt").read_text(encoding="utf-8")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove billtext environment overrides so tests see only their own settings."""
    for name in ("LOG_LEVEL", "BILLTEXT_VERIFY_SSL", "BILLTEXT_HTTP_TIMEOUT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
