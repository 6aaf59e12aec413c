"""
Draft record types produced by the parsers.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional


def amount_is_positive(amount: Optional[str]) -> bool:
    """Check that a decimal-string amount parses to a number strictly above zero."""
    if not amount:
        return False
    try:
        return Decimal(amount) > 0
    except InvalidOperation:
        return False


class PartialExpenseDraft:
    """
    Result of parsing a quick-add phrase.

    Any field may be None; the caller supplies its own defaults.
    """

    FIELDS = ("amount", "category", "payment_method", "description")

    def __init__(
        self,
        amount: Optional[str] = None,
        category: Optional[str] = None,
        payment_method: Optional[str] = None,
        description: Optional[str] = None
    ):
        self.amount = amount
        self.category = category
        self.payment_method = payment_method
        self.description = description

    def is_empty(self) -> bool:
        """True when nothing was detected."""
        return all(getattr(self, name) is None for name in self.FIELDS)

    def to_dict(self) -> dict:
        """Convert draft to dictionary, keeping absent fields as None."""
        return {name: getattr(self, name) for name in self.FIELDS}

    def __eq__(self, other) -> bool:
        if not isinstance(other, PartialExpenseDraft):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"PartialExpenseDraft(amount={self.amount}, category={self.category}, "
            f"payment_method={self.payment_method}, description={self.description!r})"
        )


class ExpenseDraft:
    """A fully populated, not-yet-persisted expense record."""

    FIELDS = ("amount", "category", "payment_method", "description", "date")

    def __init__(
        self,
        amount: str,
        category: str,
        payment_method: str,
        description: str,
        date: str
    ):
        self.amount = amount
        self.category = category
        self.payment_method = payment_method
        self.description = description.strip()
        self.date = date

    @property
    def amount_value(self) -> Decimal:
        """Amount as a Decimal."""
        return Decimal(self.amount)

    def to_dict(self) -> dict:
        """Convert draft to dictionary."""
        return {name: getattr(self, name) for name in self.FIELDS}

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExpenseDraft):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"ExpenseDraft(date={self.date}, desc={self.description[:30]}, "
            f"amount={self.amount}, category={self.category}, payment={self.payment_method})"
        )
