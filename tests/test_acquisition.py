"""Unit tests for PDF download, text extraction and the document acquirer."""

from unittest.mock import MagicMock, Mock, patch

import pytest
import requests
from pypdf import PasswordType
from pypdf.errors import FileNotDecryptedError, PdfReadError

from billtext.acquisition import (
    AcquisitionError,
    DocumentAcquirer,
    EncryptedDocumentError,
    ExtractionError,
    FetchError,
    FetchTimeoutError,
    ParseError,
    PdfFetcher,
    PdfTextExtractor,
    RawDocument,
)
from billtext.config.models import HttpConfig


def make_response(status_code=200, chunks=(b"%PDF-1.7 body",), headers=None, reason="OK"):
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.headers = headers or {}
    response.iter_content.return_value = list(chunks)
    return response


def make_reader(page_texts, metadata=None, is_encrypted=False):
    reader = MagicMock()
    reader.is_encrypted = is_encrypted
    reader.pages = [Mock(extract_text=Mock(return_value=text)) for text in page_texts]
    reader.metadata = metadata
    return reader


class TestPdfFetcher:
    """Tests for PdfFetcher."""

    def test_session_user_agent(self):
        fetcher = PdfFetcher(user_agent="billtext-tests/2.0")
        assert fetcher._session.headers["User-Agent"] == "billtext-tests/2.0"

    def test_from_config(self):
        config = HttpConfig(timeout=45, verify_ssl=False, max_pdf_size_mb=2)
        fetcher = PdfFetcher.from_config(config)

        assert fetcher.timeout == 45
        assert fetcher.verify_ssl is False
        assert fetcher.max_bytes == 2 * 1024 * 1024

    def test_fetch_success(self):
        fetcher = PdfFetcher(timeout=15, verify_ssl=False)
        response = make_response(chunks=[b"%PDF-1.7 ", b"", b"rest"])

        with patch.object(fetcher._session, "get", return_value=response) as mock_get:
            payload = fetcher.fetch("https://cga.ct.gov/2025/TOB/S/PDF/2025SB-00101-R00-SB.PDF")

        assert payload == b"%PDF-1.7 rest"
        mock_get.assert_called_once_with(
            "https://cga.ct.gov/2025/TOB/S/PDF/2025SB-00101-R00-SB.PDF",
            timeout=15,
            verify=False,
            stream=True,
        )
        response.close.assert_called_once()

    def test_http_error(self):
        fetcher = PdfFetcher()
        response = make_response(status_code=404, reason="Not Found")

        with patch.object(fetcher._session, "get", return_value=response):
            with pytest.raises(FetchError) as exc_info:
                fetcher.fetch("https://example.com/missing.pdf")

        assert exc_info.value.status_code == 404
        assert exc_info.value.reason == "Not Found"
        assert exc_info.value.url == "https://example.com/missing.pdf"
        assert "HTTP 404" in str(exc_info.value)
        response.close.assert_called_once()

    def test_timeout(self):
        fetcher = PdfFetcher(timeout=5)

        with patch.object(fetcher._session, "get", side_effect=requests.exceptions.Timeout()):
            with pytest.raises(FetchTimeoutError) as exc_info:
                fetcher.fetch("https://example.com/slow.pdf")

        assert isinstance(exc_info.value, FetchError)
        assert exc_info.value.status_code is None
        assert "timed out after 5 seconds" in str(exc_info.value)

    def test_connection_error(self):
        fetcher = PdfFetcher()

        with patch.object(
            fetcher._session, "get", side_effect=requests.exceptions.ConnectionError("refused")
        ):
            with pytest.raises(FetchError) as exc_info:
                fetcher.fetch("https://example.com/doc.pdf")

        assert exc_info.value.status_code is None
        assert "refused" in str(exc_info.value)

    def test_declared_size_over_limit(self):
        fetcher = PdfFetcher(max_pdf_size_mb=1)
        response = make_response(headers={"Content-Length": str(2 * 1024 * 1024)})

        with patch.object(fetcher._session, "get", return_value=response):
            with pytest.raises(FetchError, match="maximum size of 1 MB"):
                fetcher.fetch("https://example.com/huge.pdf")

        response.iter_content.assert_not_called()

    def test_streamed_size_over_limit(self):
        fetcher = PdfFetcher(max_pdf_size_mb=1)
        chunk = b"x" * (600 * 1024)
        response = make_response(chunks=[chunk, chunk])

        with patch.object(fetcher._session, "get", return_value=response):
            with pytest.raises(FetchError, match="maximum size"):
                fetcher.fetch("https://example.com/huge.pdf")


class TestPdfTextExtractor:
    """Tests for PdfTextExtractor."""

    def test_real_pdf(self, blank_pdf):
        document = PdfTextExtractor().extract(blank_pdf, source="sb101.pdf")

        assert isinstance(document, RawDocument)
        assert document.page_count == 2
        assert document.metadata["Title"] == "SB 101"
        assert document.source == "sb101.pdf"
        assert document.text.strip() == ""

    def test_empty_payload(self):
        with pytest.raises(ParseError, match="empty"):
            PdfTextExtractor().extract(b"")

    def test_not_a_pdf(self):
        with pytest.raises(ParseError, match="not a PDF"):
            PdfTextExtractor().extract(b"<html>Not found</html>")

    def test_pages_joined_with_newlines(self):
        reader = make_reader(
            ["AN ACT CONCERNING X.", None, "first line 1"],
            metadata={"/Title": "SB 101", "/Author": "LCO"},
        )

        with patch("billtext.acquisition.extractor.PdfReader", return_value=reader):
            document = PdfTextExtractor().extract(b"%PDF-1.7 fake")

        assert document.text == "AN ACT CONCERNING X.\n\nfirst line 1"
        assert document.page_count == 3
        assert document.metadata == {"Title": "SB 101", "Author": "LCO"}

    def test_missing_metadata(self):
        reader = make_reader(["text"], metadata=None)

        with patch("billtext.acquisition.extractor.PdfReader", return_value=reader):
            document = PdfTextExtractor().extract(b"%PDF-1.7 fake")

        assert document.metadata == {}

    def test_unreadable_pdf(self):
        with patch(
            "billtext.acquisition.extractor.PdfReader",
            side_effect=PdfReadError("EOF marker not found"),
        ):
            with pytest.raises(ParseError, match="EOF marker not found"):
                PdfTextExtractor().extract(b"%PDF-1.7 truncated")

    def test_password_protected(self):
        reader = make_reader(["secret"], is_encrypted=True)
        reader.decrypt.return_value = PasswordType.NOT_DECRYPTED

        with patch("billtext.acquisition.extractor.PdfReader", return_value=reader):
            with pytest.raises(EncryptedDocumentError):
                PdfTextExtractor().extract(b"%PDF-1.7 fake")

        reader.decrypt.assert_called_once_with("")

    def test_encrypted_with_empty_user_password(self):
        reader = make_reader(["readable"], is_encrypted=True)
        reader.decrypt.return_value = PasswordType.USER_PASSWORD

        with patch("billtext.acquisition.extractor.PdfReader", return_value=reader):
            document = PdfTextExtractor().extract(b"%PDF-1.7 fake")

        assert document.text == "readable"

    def test_not_decrypted_during_extraction(self):
        reader = make_reader(["text"])
        reader.pages[0].extract_text.side_effect = FileNotDecryptedError("File has not been decrypted")

        with patch("billtext.acquisition.extractor.PdfReader", return_value=reader):
            with pytest.raises(EncryptedDocumentError):
                PdfTextExtractor().extract(b"%PDF-1.7 fake")

    def test_errors_share_base_class(self):
        assert issubclass(ParseError, ExtractionError)
        assert issubclass(EncryptedDocumentError, ExtractionError)
        assert issubclass(ExtractionError, AcquisitionError)
        assert issubclass(FetchTimeoutError, FetchError)


class TestDocumentAcquirer:
    """Tests for DocumentAcquirer."""

    def test_remote_source(self):
        fetcher = Mock(spec=PdfFetcher)
        fetcher.fetch.return_value = b"%PDF-1.7 body"
        extractor = Mock(spec=PdfTextExtractor)
        extractor.extract.return_value = RawDocument(text="text", page_count=1)

        acquirer = DocumentAcquirer(fetcher=fetcher, extractor=extractor)
        document = acquirer.acquire("https://example.com/sb101.pdf")

        assert document.text == "text"
        fetcher.fetch.assert_called_once_with("https://example.com/sb101.pdf")
        extractor.extract.assert_called_once_with(
            b"%PDF-1.7 body", source="https://example.com/sb101.pdf"
        )

    def test_local_path(self, tmp_path, blank_pdf):
        pdf_path = tmp_path / "sb101.pdf"
        pdf_path.write_bytes(blank_pdf)
        fetcher = Mock(spec=PdfFetcher)

        document = DocumentAcquirer(fetcher=fetcher).acquire(str(pdf_path))

        assert document.page_count == 2
        assert document.source == str(pdf_path)
        fetcher.fetch.assert_not_called()

    def test_file_url(self, tmp_path, blank_pdf):
        pdf_path = tmp_path / "amended copy.pdf"
        pdf_path.write_bytes(blank_pdf)

        document = DocumentAcquirer(fetcher=Mock(spec=PdfFetcher)).acquire(pdf_path.as_uri())

        assert document.page_count == 2

    def test_missing_local_file(self, tmp_path):
        missing = tmp_path / "missing.pdf"

        with pytest.raises(FetchError) as exc_info:
            DocumentAcquirer(fetcher=Mock(spec=PdfFetcher)).acquire(str(missing))

        assert exc_info.value.status_code is None
        assert exc_info.value.url == str(missing)

    def test_fetch_errors_propagate(self):
        fetcher = Mock(spec=PdfFetcher)
        fetcher.fetch.side_effect = FetchError("HTTP 500: Server Error", url="u", status_code=500)

        with pytest.raises(FetchError):
            DocumentAcquirer(fetcher=fetcher).acquire("https://example.com/x.pdf")
