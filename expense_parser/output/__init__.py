"""
Output Module - CSV export and PDF import previews.
"""

from .writer import (
    CSV_HEADERS,
    DraftReportWriter,
    OutputWriteError,
    drafts_to_csv,
    export_drafts_to_csv,
    generate_pdf_report
)

__all__ = [
    'CSV_HEADERS',
    'DraftReportWriter',
    'OutputWriteError',
    'drafts_to_csv',
    'export_drafts_to_csv',
    'generate_pdf_report',
]
