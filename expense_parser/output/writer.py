"""
Draft Writer Module
Exports parsed expense drafts as CSV and renders an import-preview PDF.
"""

import csv
import io
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import letter
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib.enums import TA_CENTER
from expense_parser.extractors.drafts import ExpenseDraft

logger = logging.getLogger(__name__)

CSV_HEADERS = ['Date', 'Category', 'Description', 'Amount', 'Payment Method']


class OutputWriteError(Exception):
    """Custom exception for export errors."""
    pass


def drafts_to_csv(drafts: list[ExpenseDraft]) -> str:
    """
    Serialize drafts to CSV text.

    Amounts are written at face value, without currency formatting.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(CSV_HEADERS)
    for draft in drafts:
        writer.writerow([
            draft.date,
            draft.category,
            draft.description,
            draft.amount,
            draft.payment_method
        ])
    return buffer.getvalue()


def export_drafts_to_csv(drafts: list[ExpenseDraft], output_path: str) -> Path:
    """
    Write drafts to a CSV file.

    Args:
        drafts: Drafts to export
        output_path: Destination .csv path

    Returns:
        Path of the written file

    Raises:
        OutputWriteError: If the file cannot be written
    """
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(drafts_to_csv(drafts), encoding='utf-8')
    except OSError as e:
        logger.error(f"Failed to write CSV {output_path}: {e}", exc_info=True)
        raise OutputWriteError(f"Failed to write CSV file: {e}") from e

    logger.info(f"Exported {len(drafts)} drafts to {path}")
    return path


class DraftReportWriter:
    """Generates an import-preview PDF listing parsed drafts."""

    def __init__(self, output_path: str, page_size=letter):
        """
        Initialize PDF writer.

        Args:
            output_path: Path where PDF will be saved
            page_size: Page size (default: letter)
        """
        self.output_path = output_path
        self.page_size = page_size
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self):
        """Setup custom paragraph styles."""
        self.styles.add(ParagraphStyle(
            name='CustomTitle',
            parent=self.styles['Heading1'],
            fontSize=22,
            textColor=colors.HexColor('#1a1a1a'),
            spaceAfter=24,
            alignment=TA_CENTER,
            fontName='Helvetica-Bold'
        ))

        self.styles.add(ParagraphStyle(
            name='InfoText',
            parent=self.styles['Normal'],
            fontSize=11,
            textColor=colors.HexColor('#444444'),
            spaceAfter=6
        ))

    def generate_report(self, drafts: list[ExpenseDraft], source_name: Optional[str] = None):
        """
        Generate PDF listing drafts in input order.

        Args:
            drafts: Drafts to list
            source_name: Where the text came from (file name, "pasted text")

        Raises:
            ValueError: If drafts is None
            OutputWriteError: If the PDF cannot be written
        """
        if drafts is None:
            raise ValueError("drafts cannot be None")

        logger.info(f"Generating import preview PDF: {self.output_path} ({len(drafts)} drafts)")

        try:
            output_path = Path(self.output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)

            doc = SimpleDocTemplate(
                str(output_path),
                pagesize=self.page_size,
                rightMargin=0.75*inch,
                leftMargin=0.75*inch,
                topMargin=0.75*inch,
                bottomMargin=0.75*inch
            )

            story = self._create_header(source_name, len(drafts))
            if drafts:
                story.append(self._create_draft_table(drafts))
            else:
                logger.warning("No drafts to include in report")
                story.append(Paragraph("No transactions were detected in the text.", self.styles['InfoText']))

            doc.build(story)
            logger.info(f"PDF report generated successfully: {self.output_path}")

        except PermissionError as e:
            logger.error(f"Permission denied writing to {self.output_path}: {e}")
            raise OutputWriteError(
                f"Cannot write to {self.output_path}. File may be open or directory is read-only."
            ) from e

        except OSError as e:
            logger.error(f"OS error writing PDF: {e}", exc_info=True)
            raise OutputWriteError(f"Failed to write PDF file: {e}") from e

    def _create_header(self, source_name: Optional[str], draft_count: int) -> list:
        elements = [
            Paragraph("Expense Import Preview", self.styles['CustomTitle']),
            Spacer(1, 0.2 * inch)
        ]

        info_lines = [
            f"<b>Source:</b> {escape(source_name or 'pasted text')}",
            f"<b>Generated:</b> {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            f"<b>Detected Expenses:</b> {draft_count}"
        ]
        for line in info_lines:
            elements.append(Paragraph(line, self.styles['InfoText']))

        elements.append(Spacer(1, 0.3 * inch))
        return elements

    def _create_draft_table(self, drafts: list[ExpenseDraft]) -> Table:
        data = [['Date', 'Description', 'Category', 'Payment', 'Amount']]
        for draft in drafts:
            data.append([
                draft.date,
                self._truncate_description(draft.description, max_length=40),
                draft.category,
                draft.payment_method,
                draft.amount
            ])

        table = Table(data, colWidths=[0.9 * inch, 2.6 * inch, 1.3 * inch, 1.2 * inch, 0.9 * inch])
        table.setStyle(TableStyle([
            # Column header row - orange background, white text
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#ef8145')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.HexColor('#ffffff')),
            ('ALIGN', (0, 0), (-1, 0), 'CENTER'),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, 0), 11),
            ('TOPPADDING', (0, 0), (-1, 0), 8),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 8),

            # Data rows
            ('TEXTCOLOR', (0, 1), (-1, -1), colors.HexColor('#000000')),
            ('ALIGN', (0, 1), (0, -1), 'CENTER'),
            ('ALIGN', (1, 1), (3, -1), 'LEFT'),
            ('ALIGN', (4, 1), (4, -1), 'RIGHT'),
            ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
            ('FONTSIZE', (0, 1), (-1, -1), 9),
            ('TOPPADDING', (0, 1), (-1, -1), 5),
            ('BOTTOMPADDING', (0, 1), (-1, -1), 5),

            ('GRID', (0, 0), (-1, -1), 1, colors.HexColor('#808183')),

            # Alternating row colors - beige for even rows
            *[('BACKGROUND', (0, i), (-1, i), colors.HexColor('#e8e0dc'))
              for i in range(2, len(data), 2)]
        ]))
        return table

    @staticmethod
    def _truncate_description(description: str, max_length: int = 40) -> str:
        if len(description) <= max_length:
            return description
        return description[:max_length - 3] + "..."


def generate_pdf_report(
    output_path: str,
    drafts: list[ExpenseDraft],
    source_name: Optional[str] = None
):
    """
    Convenience function to generate the import-preview PDF.

    Args:
        output_path: Path where PDF will be saved
        drafts: Drafts to list
        source_name: Where the text came from
    """
    writer = DraftReportWriter(output_path)
    writer.generate_report(drafts, source_name)
