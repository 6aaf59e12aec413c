"""
Transaction Text Parser
Parses pasted bank/SMS/payment notification text, one candidate transaction
per line, into fully populated expense drafts.
"""

import logging
from typing import Optional

from expense_parser.config import config
from .drafts import ExpenseDraft, amount_is_positive
from .expense_rules import (
    ENHANCED_CATEGORY_KEYWORDS,
    ENHANCED_PAYMENT_KEYWORDS,
    OTHER,
    classify_keywords,
)
from .regex_extractor import extract_amount, extract_date, extract_description, today_iso

logger = logging.getLogger(__name__)


class TransactionTextParser:
    """
    Line-by-line parser for pasted notification text.

    Lines are independent: a line without a detectable positive amount is
    dropped, every other field falls back to a default. One instance per
    parse call; only the statistics live on the instance.
    """

    def __init__(
        self,
        min_line_length: Optional[int] = None,
        whole_words: Optional[bool] = None,
        default_description: Optional[str] = None
    ):
        self.min_line_length = config.MIN_LINE_LENGTH if min_line_length is None else min_line_length
        self.whole_words = config.KEYWORD_WHOLE_WORDS if whole_words is None else whole_words
        self.default_description = default_description or config.DEFAULT_DESCRIPTION
        self.stats = {
            "lines_processed": 0,
            "lines_skipped": 0,
            "lines_without_amount": 0,
            "non_positive_amounts": 0,
            "transactions_found": 0
        }

    def parse_text(self, text: str) -> list[ExpenseDraft]:
        """
        Parse multi-line text into drafts.

        Args:
            text: Pasted notification text

        Returns:
            Drafts in input line order
        """
        if not text or not text.strip():
            logger.debug("Empty text provided for parsing")
            return []

        lines = text.split('\n')
        logger.info(f"Parsing {len(lines)} lines of transaction text")

        drafts = []
        for line in lines:
            self.stats["lines_processed"] += 1
            draft = self.parse_line(line)
            if draft is None:
                continue
            # parse_line already rejects these; kept as a final guard on output
            if not amount_is_positive(draft.amount):
                self.stats["non_positive_amounts"] += 1
                continue
            drafts.append(draft)
            self.stats["transactions_found"] += 1

        logger.info(
            f"Parsing complete: {self.stats['transactions_found']} transactions from "
            f"{self.stats['lines_processed']} lines "
            f"({self.stats['lines_skipped']} skipped, "
            f"{self.stats['lines_without_amount']} without amount, "
            f"{self.stats['non_positive_amounts']} non-positive)"
        )
        return drafts

    def parse_line(self, line: str) -> Optional[ExpenseDraft]:
        """
        Parse one line into a draft.

        Returns:
            ExpenseDraft, or None if the line is noise or has no positive amount
        """
        line = (line or "").strip()
        if not line or len(line) < self.min_line_length:
            self.stats["lines_skipped"] += 1
            return None

        amount = extract_amount(line)
        if amount is None:
            self.stats["lines_without_amount"] += 1
            logger.debug(f"No amount in line: {line[:50]}")
            return None

        if not amount_is_positive(amount):
            self.stats["non_positive_amounts"] += 1
            logger.debug(f"Non-positive amount '{amount}' in line: {line[:50]}")
            return None

        draft = ExpenseDraft(
            amount=amount,
            category=classify_keywords(line, ENHANCED_CATEGORY_KEYWORDS, self.whole_words) or OTHER,
            payment_method=classify_keywords(line, ENHANCED_PAYMENT_KEYWORDS, self.whole_words) or OTHER,
            description=extract_description(line, self.default_description),
            date=extract_date(line) or today_iso(),
        )
        logger.debug(f"Parsed line: {draft}")
        return draft

    def get_stats(self) -> dict:
        """Get parsing statistics."""
        return self.stats.copy()


def parse_transaction_line(line: str) -> Optional[ExpenseDraft]:
    """Parse a single notification line."""
    return TransactionTextParser().parse_line(line)


def parse_transaction_text(text: str) -> list[ExpenseDraft]:
    """
    Convenience function to parse pasted transaction text.

    Args:
        text: Multi-line notification text

    Returns:
        List of ExpenseDraft objects, in input order
    """
    parser = TransactionTextParser()
    return parser.parse_text(text)
