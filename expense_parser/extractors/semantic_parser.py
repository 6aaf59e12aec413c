"""
Semantic Input Parser
Turns a short quick-add phrase ("$15 lunch at subway with card") into a
partial expense draft. Called on every keystroke, so it stays pure and cheap.
"""

import logging
import re
from typing import Optional

from expense_parser.config import config
from .drafts import ExpenseDraft, PartialExpenseDraft, amount_is_positive
from .expense_rules import (
    OTHER,
    SEMANTIC_CATEGORY_KEYWORDS,
    SEMANTIC_PAYMENT_KEYWORDS,
    classify_keywords,
)
from .regex_extractor import SEMANTIC_AMOUNT_PATTERNS, extract_amount, normalize_whitespace, today_iso

logger = logging.getLogger(__name__)

# Only a single amount token at the very start of the phrase is removed.
LEADING_AMOUNT = re.compile(
    r"^\s*(?:\$|₹|(?:USD|INR|Rs\.?)\s*)?\d+(?:,\d{3})*(?:\.\d{2})?\s*",
    re.IGNORECASE
)


def parse_semantic_input(text: str, whole_words: Optional[bool] = None) -> PartialExpenseDraft:
    """
    Parse a quick-add phrase into a partial draft.

    Category is only ever one of the nine concrete categories; "Other" is
    never assigned here, absence is left as None.

    Args:
        text: Phrase typed by the user
        whole_words: Restrict keyword matches to word boundaries
            (defaults to the KEYWORD_WHOLE_WORDS setting)

    Returns:
        PartialExpenseDraft with whatever could be detected
    """
    if not text or not text.strip():
        return PartialExpenseDraft()

    if whole_words is None:
        whole_words = config.KEYWORD_WHOLE_WORDS

    description = normalize_whitespace(LEADING_AMOUNT.sub("", text, count=1))

    return PartialExpenseDraft(
        amount=extract_amount(text, SEMANTIC_AMOUNT_PATTERNS),
        category=classify_keywords(text, SEMANTIC_CATEGORY_KEYWORDS, whole_words),
        payment_method=classify_keywords(text, SEMANTIC_PAYMENT_KEYWORDS, whole_words),
        description=description or normalize_whitespace(text),
    )


def complete_semantic_draft(
    partial: PartialExpenseDraft,
    raw_text: str,
    date: Optional[str] = None
) -> Optional[ExpenseDraft]:
    """
    Fill in defaults for a quick-add draft before it is saved.

    Missing amount becomes "0", missing category and payment method become
    "Other", missing description becomes the raw phrase, and the date is
    today unless given.

    Returns:
        ExpenseDraft, or None when the amount is not strictly positive
    """
    amount = partial.amount or "0"
    if not amount_is_positive(amount):
        logger.debug(f"Quick-add rejected, no positive amount in: {raw_text!r}")
        return None

    return ExpenseDraft(
        amount=amount,
        category=partial.category or OTHER,
        payment_method=partial.payment_method or OTHER,
        description=partial.description or raw_text,
        date=date or today_iso(),
    )
