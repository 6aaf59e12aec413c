"""
Validators Module - Expense draft validation.
"""

from .draft_validator import (
    DraftValidator,
    validate_drafts,
    ValidationError
)

__all__ = [
    'DraftValidator',
    'validate_drafts',
    'ValidationError',
]
