"""
Regex Extractor Module
Pulls amounts, dates and merchant descriptions out of a single line of
notification or note text using ordered regex pattern lists.
"""

import logging
import re
from datetime import date
from re import Pattern
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

# Currency markers are optional and never used to infer the currency.
# Letter markers need a word boundary so "hours 5" is not read as "Rs 5".
_CURRENCY = r"(?:\$|₹|\b(?:USD|INR|Rs\.?))\s*"

# Thousands separators are allowed, cents are two digits.
_NUMBER = r"(\d+(?:,\d{3})*(?:\.\d{2})?)"

# Bare numbers that are part of a date shape (01/15/2025, 15-3-2025) are skipped.
_BARE_NUMBER = r"(?<![\d/])(?<!\d-)" + _NUMBER + r"(?![\d/])(?!-\d)"

AMOUNT_PATTERNS: tuple[Pattern, ...] = (
    re.compile(r"\b(?:amount|amt)[:\s]*(?:" + _CURRENCY + r")?" + _NUMBER, re.IGNORECASE),
    re.compile(r"\b(?:charged|debited|spent|paid)[:\s]*(?:" + _CURRENCY + r")?" + _NUMBER,
               re.IGNORECASE),
    re.compile(_CURRENCY + _NUMBER, re.IGNORECASE),
    re.compile(_BARE_NUMBER),
)

SEMANTIC_AMOUNT_PATTERNS: tuple[Pattern, ...] = (
    re.compile(_CURRENCY + _NUMBER, re.IGNORECASE),
    re.compile(_BARE_NUMBER),
)

# Real month spellings only, so "Marketing 12 2025" is not a date.
_MONTH_NAME = (
    r"\b(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?"
    r"|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\b\.?"
)

# Priority order matters: the first shape that yields a real calendar date wins.
DATE_PATTERNS: tuple[Pattern, ...] = (
    re.compile(r"(\d{1,2}/\d{1,2}/\d{4})"),                              # M/D/YYYY
    re.compile(r"(\d{4}-\d{2}-\d{2})"),                                  # YYYY-MM-DD
    re.compile(r"(\d{1,2}-\d{1,2}-\d{4})"),                              # D-M-YYYY
    re.compile(r"(" + _MONTH_NAME + r"\s+\d{1,2},?\s+\d{4})", re.IGNORECASE),   # Jan 15, 2025
    re.compile(r"(\d{1,2}\s+" + _MONTH_NAME + r",?\s+\d{4})", re.IGNORECASE),   # 15 Jan 2025
    re.compile(r"on\s+(\d{1,2}/\d{1,2}/\d{4})", re.IGNORECASE),
    re.compile(r"date[:\s]*(\d{1,2}/\d{1,2}/\d{4})", re.IGNORECASE),
)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

# Merchant-like span: starts with a letter, stops before an amount, hash or
# date-ish keyword.
_SPAN = r"([A-Z][A-Z\s&.'-]+?)"
_AMOUNT_STOP = r"(?=\s+(?:\$|₹|\d|#))"

MERCHANT_PATTERNS: tuple[Pattern, ...] = (
    re.compile(r"\b(?:at|from|to)\s+" + _SPAN + r"(?=\s+(?:\$|₹|\d|#|on\b|dated\b|amount\b))",
               re.IGNORECASE),
    re.compile(r"\bpurchase\s*-?\s*" + _SPAN + _AMOUNT_STOP, re.IGNORECASE),
    re.compile(r"\bpayment\s*-?\s*" + _SPAN + _AMOUNT_STOP, re.IGNORECASE),
    re.compile(r"\btransaction\s*-?\s*" + _SPAN + _AMOUNT_STOP, re.IGNORECASE),
    # Upper-case run such as "SHELL OIL 5734" (case-sensitive on purpose)
    re.compile(r"([A-Z][A-Z\s&.'-]{3,}?)" + _AMOUNT_STOP),
)

_DATE_SHAPES = re.compile(
    r"\d{1,2}/\d{1,2}/\d{4}"
    r"|\d{4}-\d{2}-\d{2}"
    r"|\d{1,2}-\d{1,2}-\d{4}"
    r"|" + _MONTH_NAME + r"\s+\d{1,2},?\s+\d{4}"
    r"|\d{1,2}\s+" + _MONTH_NAME + r",?\s+\d{4}",
    re.IGNORECASE
)

_AMOUNT_SHAPES = re.compile(r"(?:" + _CURRENCY + r")?\d+(?:,\d{3})*(?:\.\d{2})?", re.IGNORECASE)

# Reference markers such as "#4411"; a bare "#" would act as a merchant stop.
_REFERENCE_SHAPES = re.compile(r"#\S*")

_WHITESPACE = re.compile(r"\s+")


def extract_amount(text: str, patterns: Sequence[Pattern] = AMOUNT_PATTERNS) -> Optional[str]:
    """
    Extract the first amount from text.

    Args:
        text: Raw text
        patterns: Ordered patterns; the first one that matches wins

    Returns:
        Decimal string with thousands separators removed, or None
    """
    if not text:
        return None

    for pattern in patterns:
        match = pattern.search(text)
        if match:
            amount = match.group(1).replace(",", "")
            logger.debug(f"Amount '{amount}' matched by {pattern.pattern[:40]}")
            return amount

    return None


def today_iso() -> str:
    """Today's local date as YYYY-MM-DD."""
    return date.today().isoformat()


def _parse_month_name_date(date_str: str) -> date:
    tokens = re.findall(r"[A-Za-z]+|\d+", date_str)
    month = None
    day = None
    year = None
    for token in tokens:
        if token.isalpha():
            month = _MONTHS.get(token[:3].lower())
        elif len(token) == 4:
            year = int(token)
        else:
            day = int(token)

    if month is None or day is None or year is None:
        raise ValueError(f"Incomplete month-name date: {date_str}")
    return date(year, month, day)


def parse_date(date_str: str) -> Optional[str]:
    """
    Normalize a literal date to YYYY-MM-DD.

    Slash triples are month/day/year. Dash triples are day/month/year unless
    they already look like YYYY-MM-DD. Anything else is read as a month-name
    date ("Jan 15, 2025", "15 Jan 2025").

    Returns:
        ISO date string, or None if the text is not a real calendar date
    """
    if not date_str:
        return None

    date_str = date_str.strip()
    try:
        if "/" in date_str:
            parts = date_str.split("/")
            if len(parts) != 3:
                return None
            month, day, year = (int(part) for part in parts)
            parsed = date(year, month, day)
        elif _ISO_DATE.match(date_str):
            year, month, day = (int(part) for part in date_str.split("-"))
            parsed = date(year, month, day)
        elif "-" in date_str:
            parts = date_str.split("-")
            if len(parts) != 3:
                return None
            day, month, year = (int(part) for part in parts)
            parsed = date(year, month, day)
        else:
            parsed = _parse_month_name_date(date_str)
    except ValueError as e:
        logger.debug(f"Unparseable date '{date_str}': {e}")
        return None

    return parsed.isoformat()


def extract_date(line: str) -> Optional[str]:
    """
    Find the first valid date in a line.

    Returns:
        ISO date string, or None when no pattern yields a valid date
    """
    if not line:
        return None

    for pattern in DATE_PATTERNS:
        match = pattern.search(line)
        if not match:
            continue
        parsed = parse_date(match.group(1))
        if parsed:
            return parsed

    return None


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def extract_merchant(line: str) -> Optional[str]:
    """Capture a merchant-like span using the contextual patterns, in order."""
    if not line:
        return None

    for pattern in MERCHANT_PATTERNS:
        match = pattern.search(line)
        if match and match.group(1):
            merchant = normalize_whitespace(match.group(1))
            if merchant:
                return merchant

    return None


def clean_description(line: str) -> str:
    """Strip date, reference and amount shapes from a line and collapse whitespace."""
    if not line:
        return ""

    cleaned = _DATE_SHAPES.sub(" ", line)
    cleaned = _REFERENCE_SHAPES.sub(" ", cleaned)
    cleaned = _AMOUNT_SHAPES.sub(" ", cleaned)
    return normalize_whitespace(cleaned)


def extract_description(line: str, default: str = "Transaction") -> str:
    """
    Merchant name if one is found, otherwise the cleaned-up line.

    The merchant patterns run again on the cleaned line: removing digits can
    expose a merchant ("at 5 Guys on Monday" -> "at Guys on Monday"), and the
    result has to come out the same when it is parsed a second time.

    Args:
        line: Single notification line
        default: Used when nothing is left after cleanup

    Returns:
        Non-empty description
    """
    description = extract_merchant(line)
    if not description:
        cleaned = clean_description(line)
        description = extract_merchant(cleaned) or cleaned
    return description or default
