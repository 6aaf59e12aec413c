"""
Expense Text Parser - turns free-form expense notes and pasted bank
notifications into structured expense drafts.
"""

from expense_parser.extractors import (
    ExpenseDraft,
    PartialExpenseDraft,
    parse_semantic_input,
    parse_transaction_text
)

__version__ = "1.0.0"

__all__ = [
    'ExpenseDraft',
    'PartialExpenseDraft',
    'parse_semantic_input',
    'parse_transaction_text',
]
