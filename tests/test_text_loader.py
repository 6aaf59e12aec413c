"""Tests for text_loader.py - .txt and .pdf text extraction."""

import fitz
import pytest

from expense_parser.loaders import DocumentLoadError, load_document, load_pdf, load_text_file


def write_pdf(path, lines):
    doc = fitz.open()
    page = doc.new_page()
    for index, line in enumerate(lines):
        page.insert_text((72, 72 + index * 20), line)
    doc.save(str(path))
    doc.close()


class TestLoadTextFile:
    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "alerts.txt"
        path.write_text("₹349 paid to SWIGGY\n", encoding="utf-8")

        assert load_text_file(str(path)) == "₹349 paid to SWIGGY\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentLoadError, match="not found"):
            load_text_file(str(tmp_path / "missing.txt"))

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes(b"caf\xe9 \xff 12.00")

        with pytest.raises(DocumentLoadError, match="UTF-8"):
            load_text_file(str(path))


class TestLoadPdf:
    def test_extracts_text_from_pages(self, tmp_path):
        path = tmp_path / "statement.pdf"
        write_pdf(path, ["POS PURCHASE - WALMART $42.10 on 03/02/2025"])

        assert "WALMART $42.10" in load_pdf(str(path))

    def test_pdf_without_text(self, tmp_path):
        path = tmp_path / "scanned.pdf"
        write_pdf(path, [])

        with pytest.raises(DocumentLoadError, match="No text"):
            load_pdf(str(path))

    def test_corrupted_pdf(self, tmp_path):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"not a pdf at all")

        with pytest.raises(DocumentLoadError):
            load_pdf(str(path))

    def test_wrong_suffix(self, tmp_path):
        path = tmp_path / "statement.txt"
        path.write_text("hello", encoding="utf-8")

        with pytest.raises(DocumentLoadError, match="not a PDF"):
            load_pdf(str(path))


class TestLoadDocument:
    def test_dispatches_on_suffix(self, tmp_path):
        txt_path = tmp_path / "alerts.TXT"
        txt_path.write_text("Paid $12.00 at CHIPOTLE", encoding="utf-8")
        pdf_path = tmp_path / "alerts.pdf"
        write_pdf(pdf_path, ["Paid $12.00 at CHIPOTLE"])

        assert load_document(str(txt_path)) == "Paid $12.00 at CHIPOTLE"
        assert "CHIPOTLE" in load_document(str(pdf_path))

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "alerts.csv"
        path.write_text("a,b", encoding="utf-8")

        with pytest.raises(DocumentLoadError, match="Unsupported file type"):
            load_document(str(path))
