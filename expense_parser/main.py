"""
Expense Text Parser - Main Pipeline
Orchestrates loading, parsing, validation and export, and provides the
``expense-parser`` command line.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from expense_parser.config import config
from expense_parser.extractors import (
    ExpenseDraft,
    TransactionTextParser,
    complete_semantic_draft,
    parse_semantic_input
)
from expense_parser.loaders import DocumentLoadError, load_document
from expense_parser.logging_config import setup_logging
from expense_parser.output import OutputWriteError, export_drafts_to_csv, generate_pdf_report
from expense_parser.validators import DraftValidator, ValidationError

logger = logging.getLogger(__name__)


class ExpenseImportPipeline:
    """Main orchestrator for turning notification text into validated drafts."""

    def __init__(self, strict_mode: Optional[bool] = None):
        """Initialize pipeline."""
        self.strict_mode = config.STRICT_MODE if strict_mode is None else strict_mode
        self.stats = {
            "lines_processed": 0,
            "total_parsed": 0,
            "valid_drafts": 0
        }

    def _validate_outputs(self, csv_path: Optional[str], pdf_path: Optional[str]):
        """Validate output paths."""
        if csv_path is not None and not csv_path.endswith('.csv'):
            raise ValueError("csv_path must end with .csv")

        if pdf_path is not None and not pdf_path.endswith('.pdf'):
            raise ValueError("pdf_path must end with .pdf")

    def process_text(
        self,
        text: str,
        csv_path: Optional[str] = None,
        pdf_path: Optional[str] = None,
        source_name: Optional[str] = None
    ) -> list[ExpenseDraft]:
        """
        Parse pasted text, validate the drafts and optionally export them.

        Args:
            text: Multi-line notification text
            csv_path: Optional CSV output path
            pdf_path: Optional import-preview PDF path
            source_name: Label for the text source in the PDF header

        Returns:
            Valid drafts in input order

        Raises:
            ValueError: If output paths are invalid
            ValidationError: In strict mode, for the first invalid draft
            OutputWriteError: If an export cannot be written
        """
        self._validate_outputs(csv_path, pdf_path)

        logger.info("Step 1: Parsing transaction text")
        parser = TransactionTextParser()
        drafts = parser.parse_text(text)
        parser_stats = parser.get_stats()
        self.stats["lines_processed"] = parser_stats["lines_processed"]
        self.stats["total_parsed"] = len(drafts)

        if not drafts:
            logger.warning("No transactions found. Each line needs an amount to be imported.")

        logger.info("Step 2: Validating drafts")
        validator = DraftValidator(
            strict_mode=self.strict_mode,
            min_description_length=config.MIN_DESCRIPTION_LENGTH
        )
        valid_drafts = validator.validate_drafts(drafts)
        self.stats["valid_drafts"] = len(valid_drafts)

        if csv_path:
            logger.info(f"Step 3: Writing CSV - {csv_path}")
            export_drafts_to_csv(valid_drafts, csv_path)

        if pdf_path:
            logger.info(f"Step 4: Writing import preview PDF - {pdf_path}")
            generate_pdf_report(pdf_path, valid_drafts, source_name)

        self._log_summary()
        return valid_drafts

    def process_file(
        self,
        file_path: str,
        csv_path: Optional[str] = None,
        pdf_path: Optional[str] = None
    ) -> list[ExpenseDraft]:
        """
        Load a .txt/.pdf file and run it through process_text.

        Raises:
            DocumentLoadError: If the file cannot be read
        """
        text = load_document(file_path)
        if not text.strip():
            raise DocumentLoadError(f"File contains no text: {file_path}")
        return self.process_text(text, csv_path, pdf_path, source_name=Path(file_path).name)

    def _log_summary(self):
        """Log import summary."""
        logger.info("=" * 60)
        logger.info("IMPORT SUMMARY")
        logger.info(f"Lines processed:     {self.stats['lines_processed']}")
        logger.info(f"Drafts parsed:       {self.stats['total_parsed']}")
        logger.info(f"Valid drafts:        {self.stats['valid_drafts']}")
        logger.info("=" * 60)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="expense-parser",
        description="Turn expense notes and pasted bank notifications into expense records."
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    quick = subparsers.add_parser("quick", help="Parse a single quick-add phrase")
    quick.add_argument("text", help='Phrase such as "$15 lunch at subway with card"')
    quick.add_argument("--complete", action="store_true",
                       help="Fill in defaults and print a full record (exit 1 without a positive amount)")

    import_cmd = subparsers.add_parser("import", help="Parse pasted notification text")
    import_cmd.add_argument("source", help="Path to a .txt/.pdf file, or - for stdin")
    import_cmd.add_argument("--csv", dest="csv_path", default=None, help="Write drafts to this CSV file")
    import_cmd.add_argument("--pdf", dest="pdf_path", default=None, help="Write an import preview PDF")
    import_cmd.add_argument("--strict", action="store_true", help="Fail on the first invalid draft")

    return parser


def _print_json(payload):
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def main(argv: Optional[list[str]] = None) -> int:
    """Command line entry point."""
    args = build_arg_parser().parse_args(argv)
    setup_logging(log_level=args.log_level)

    if args.command == "quick":
        partial = parse_semantic_input(args.text)
        if not args.complete:
            _print_json(partial.to_dict())
            return 0
        draft = complete_semantic_draft(partial, args.text)
        if draft is None:
            logger.error(f"No positive amount found in: {args.text!r}")
            return 1
        _print_json(draft.to_dict())
        return 0

    pipeline = ExpenseImportPipeline(strict_mode=True if args.strict else None)
    try:
        if args.source == "-":
            drafts = pipeline.process_text(sys.stdin.read(), args.csv_path, args.pdf_path, source_name="stdin")
        else:
            drafts = pipeline.process_file(args.source, args.csv_path, args.pdf_path)
    except (ValueError, DocumentLoadError, OutputWriteError) as e:
        logger.error(f"Import failed: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid draft (strict mode): {e}")
        return 1

    _print_json([draft.to_dict() for draft in drafts])
    return 0


if __name__ == "__main__":
    sys.exit(main())
