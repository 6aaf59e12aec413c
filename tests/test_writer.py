"""Tests for the CSV export and the import-preview PDF."""

import pytest

from expense_parser.loaders import load_pdf
from expense_parser.output import (
    CSV_HEADERS,
    DraftReportWriter,
    drafts_to_csv,
    export_drafts_to_csv,
    generate_pdf_report,
)


class TestCsvExport:
    def test_headers_only_for_no_drafts(self):
        assert drafts_to_csv([]) == "Date,Category,Description,Amount,Payment Method\n"
        assert CSV_HEADERS == ["Date", "Category", "Description", "Amount", "Payment Method"]

    def test_rows_in_order(self, draft_factory):
        drafts = [
            draft_factory(),
            draft_factory(amount="42.10", category="Shopping", payment_method="Debit Card",
                          description="WALMART", date="2025-03-02"),
        ]

        lines = drafts_to_csv(drafts).splitlines()

        assert lines[1] == "2025-04-01,Food & Dining,CHIPOTLE,12.00,Other"
        assert lines[2] == "2025-03-02,Shopping,WALMART,42.10,Debit Card"

    def test_commas_are_quoted(self, draft_factory):
        text = drafts_to_csv([draft_factory(description="Coffee, beans")])

        assert '"Coffee, beans"' in text

    def test_export_creates_parent_directory(self, tmp_path, draft_factory):
        output = tmp_path / "exports" / "expenses.csv"

        written = export_drafts_to_csv([draft_factory()], str(output))

        assert written == output
        assert output.read_text(encoding="utf-8").startswith("Date,Category")


class TestPdfReport:
    def test_generates_pdf(self, tmp_path, draft_factory):
        output = tmp_path / "preview.pdf"

        generate_pdf_report(str(output), [draft_factory()], source_name="alerts.txt")

        assert output.read_bytes().startswith(b"%PDF")
        text = load_pdf(str(output))
        assert "Expense Import Preview" in text
        assert "CHIPOTLE" in text

    def test_empty_report(self, tmp_path):
        output = tmp_path / "empty.pdf"

        generate_pdf_report(str(output), [])

        assert "No transactions were detected" in load_pdf(str(output))

    def test_none_drafts_raise(self, tmp_path):
        writer = DraftReportWriter(str(tmp_path / "none.pdf"))

        with pytest.raises(ValueError):
            writer.generate_report(None)

    def test_long_descriptions_are_truncated(self):
        assert DraftReportWriter._truncate_description("x" * 50, max_length=10) == "xxxxxxx..."
        assert DraftReportWriter._truncate_description("short") == "short"
