"""
Draft Validator Module
Validates expense drafts before they are handed to the persistence layer.
"""

import logging
from datetime import datetime
from expense_parser.extractors.drafts import ExpenseDraft, amount_is_positive
from expense_parser.extractors.expense_rules import is_known_category, is_known_payment_method

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


class DraftValidator:
    """Validates expense drafts."""

    def __init__(
        self,
        strict_mode: bool = False,
        min_description_length: int = 1
    ):
        """
        Initialize validator with configurable settings.

        Args:
            strict_mode: If True, raise exceptions on invalid data.
                        If False, log warnings and skip invalid drafts.
            min_description_length: Minimum characters required in description.
        """
        self.strict_mode = strict_mode
        self.min_description_length = min_description_length
        self.reset_stats()

    def validate_draft(self, draft: ExpenseDraft) -> bool:
        """
        Validate a single draft.

        Args:
            draft: ExpenseDraft to validate

        Returns:
            True if valid, False if invalid

        Raises:
            ValidationError: If strict_mode is True and validation fails
        """
        self.validation_stats["total_validated"] += 1

        checks = (
            ("invalid_amount", amount_is_positive(draft.amount), f"Invalid amount: {draft.amount}"),
            ("invalid_date", self._validate_date(draft.date), f"Invalid date: {draft.date}"),
            ("invalid_description", self._validate_description(draft.description),
             "Invalid description: empty or too short"),
            ("invalid_category", is_known_category(draft.category),
             f"Unknown category: {draft.category}"),
            ("invalid_payment_method", is_known_payment_method(draft.payment_method),
             f"Unknown payment method: {draft.payment_method}"),
        )

        for stat_key, passed, msg in checks:
            if passed:
                continue
            self.validation_stats[stat_key] += 1
            self.validation_stats["invalid"] += 1
            if self.strict_mode:
                raise ValidationError(msg)
            logger.warning(f"{msg} in draft: {draft}")
            return False

        self.validation_stats["valid"] += 1
        return True

    def validate_drafts(self, drafts: list[ExpenseDraft]) -> list[ExpenseDraft]:
        """
        Validate a list of drafts.

        Args:
            drafts: List of ExpenseDraft objects

        Returns:
            List of valid drafts (invalid ones filtered out)
        """
        valid_drafts = [draft for draft in drafts if self.validate_draft(draft)]

        logger.info(
            f"Validation complete: {self.validation_stats['valid']} valid, "
            f"{self.validation_stats['invalid']} invalid out of "
            f"{self.validation_stats['total_validated']} total"
        )

        return valid_drafts

    def _validate_date(self, date_str: str) -> bool:
        """Date must be an ISO YYYY-MM-DD calendar date."""
        if not date_str or not isinstance(date_str, str):
            return False

        try:
            datetime.strptime(date_str, '%Y-%m-%d')
            return True
        except ValueError:
            return False

    def _validate_description(self, description: str) -> bool:
        if not isinstance(description, str):
            return False

        if len(description.strip()) < max(self.min_description_length, 1):
            logger.debug(f"Description too short: '{description}' (min: {self.min_description_length})")
            return False

        return True

    def get_stats(self) -> dict:
        """Get validation statistics."""
        return self.validation_stats.copy()

    def reset_stats(self):
        """Reset validation statistics."""
        self.validation_stats = {
            "total_validated": 0,
            "valid": 0,
            "invalid": 0,
            "invalid_amount": 0,
            "invalid_date": 0,
            "invalid_description": 0,
            "invalid_category": 0,
            "invalid_payment_method": 0
        }


def validate_drafts(drafts: list[ExpenseDraft], strict_mode: bool = False) -> list[ExpenseDraft]:
    """
    Convenience function to validate a list of drafts.

    Args:
        drafts: List of ExpenseDraft objects
        strict_mode: If True, raise exceptions on invalid data

    Returns:
        List of valid drafts
    """
    validator = DraftValidator(strict_mode=strict_mode)
    return validator.validate_drafts(drafts)
