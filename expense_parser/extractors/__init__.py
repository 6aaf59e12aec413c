"""
Extractors Module - Expense text parsing and keyword classification.
"""

from .drafts import (
    ExpenseDraft,
    PartialExpenseDraft,
    amount_is_positive
)

from .expense_rules import (
    EXPENSE_CATEGORIES,
    PAYMENT_METHODS,
    OTHER,
    SEMANTIC_CATEGORY_KEYWORDS,
    SEMANTIC_PAYMENT_KEYWORDS,
    ENHANCED_CATEGORY_KEYWORDS,
    ENHANCED_PAYMENT_KEYWORDS,
    classify_keywords,
    is_known_category,
    is_known_payment_method
)

from .regex_extractor import (
    extract_amount,
    extract_date,
    extract_merchant,
    extract_description,
    clean_description,
    parse_date,
    today_iso
)

from .semantic_parser import (
    parse_semantic_input,
    complete_semantic_draft
)

from .transaction_parser import (
    TransactionTextParser,
    parse_transaction_line,
    parse_transaction_text
)

__all__ = [
    'ExpenseDraft',
    'PartialExpenseDraft',
    'amount_is_positive',
    'EXPENSE_CATEGORIES',
    'PAYMENT_METHODS',
    'OTHER',
    'SEMANTIC_CATEGORY_KEYWORDS',
    'SEMANTIC_PAYMENT_KEYWORDS',
    'ENHANCED_CATEGORY_KEYWORDS',
    'ENHANCED_PAYMENT_KEYWORDS',
    'classify_keywords',
    'is_known_category',
    'is_known_payment_method',
    'extract_amount',
    'extract_date',
    'extract_merchant',
    'extract_description',
    'clean_description',
    'parse_date',
    'today_iso',
    'parse_semantic_input',
    'complete_semantic_draft',
    'TransactionTextParser',
    'parse_transaction_line',
    'parse_transaction_text',
]
