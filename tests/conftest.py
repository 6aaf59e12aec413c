"""Shared fixtures for the expense parser tests."""

import logging

import pytest

from expense_parser.extractors import ExpenseDraft


SAMPLE_NOTIFICATIONS = "\n".join([
    "DEBIT CARD PURCHASE - STARBUCKS $8.50 on 01/15/2025",
    "Your account was credited with a refund",
    "Paid $12.00 at CHIPOTLE on 04/01/2025",
    "",
    "$0 refund processed today",
    "POS PURCHASE - WALMART $42.10 on 03/02/2025",
])


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI calls setup_logging(), which changes the root level and handlers."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def sample_notifications() -> str:
    """Six lines: three transactions, one line without digits, one blank, one zero amount."""
    return SAMPLE_NOTIFICATIONS


def make_draft(
    amount: str = "12.00",
    category: str = "Food & Dining",
    payment_method: str = "Other",
    description: str = "CHIPOTLE",
    date: str = "2025-04-01",
) -> ExpenseDraft:
    """Create an ExpenseDraft with sensible defaults for testing."""
    return ExpenseDraft(
        amount=amount,
        category=category,
        payment_method=payment_method,
        description=description,
        date=date,
    )


@pytest.fixture
def draft_factory():
    return make_draft
