"""
Expense Rules Module
Defines the category/payment-method vocabularies, their keyword tables, and
the first-match keyword classifier shared by both parsers.
"""

import logging
import re
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

KeywordTable = Mapping[str, Sequence[str]]

OTHER = "Other"

EXPENSE_CATEGORIES = (
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Entertainment",
    "Bills & Utilities",
    "Healthcare",
    "Travel",
    "Education",
    "Personal Care",
    OTHER,
)

PAYMENT_METHODS = (
    "Cash",
    "Credit Card",
    "Debit Card",
    "Digital Wallet",
    "Bank Transfer",
    OTHER,
)

# Quick-add phrases. Declaration order is the tie-break, so "card" resolves
# to Debit Card only when no Credit Card keyword is present.
SEMANTIC_CATEGORY_KEYWORDS: KeywordTable = MappingProxyType({
    "Food & Dining": ("food", "lunch", "dinner", "breakfast", "restaurant", "coffee",
                      "snack", "meal", "eat", "drink"),
    "Transportation": ("uber", "taxi", "bus", "train", "gas", "fuel", "parking", "metro",
                       "transport"),
    "Shopping": ("amazon", "store", "clothes", "shopping", "buy", "purchase", "mall", "online"),
    "Entertainment": ("movie", "cinema", "game", "concert", "show", "entertainment", "fun",
                      "netflix"),
    "Bills & Utilities": ("bill", "electric", "water", "internet", "phone", "utility", "rent",
                          "mortgage"),
    "Healthcare": ("doctor", "medicine", "pharmacy", "hospital", "health", "medical", "dentist"),
    "Travel": ("flight", "hotel", "vacation", "trip", "travel", "booking", "airbnb"),
    "Education": ("book", "course", "school", "education", "tuition", "class", "learning"),
    "Personal Care": ("haircut", "salon", "spa", "cosmetics", "personal", "beauty", "gym"),
})

SEMANTIC_PAYMENT_KEYWORDS: KeywordTable = MappingProxyType({
    "Cash": ("cash", "bills", "coins"),
    "Credit Card": ("credit", "visa", "mastercard", "amex", "discover"),
    "Debit Card": ("debit", "card"),
    "Digital Wallet": ("paypal", "venmo", "apple pay", "google pay", "samsung pay", "wallet",
                       "zelle", "paytm", "phonepe", "gpay"),
    "Bank Transfer": ("transfer", "wire", "ach", "bank", "upi", "neft", "rtgs", "imps"),
})

# Pasted notifications: merchant brands (US and Indian) and payment-network
# terms. Generic words such as "purchase" or "card" are left out because
# nearly every bank alert contains them.
ENHANCED_CATEGORY_KEYWORDS: KeywordTable = MappingProxyType({
    "Food & Dining": (
        "starbucks", "mcdonalds", "subway", "dominos", "pizza", "restaurant", "cafe", "coffee",
        "food", "dining", "lunch", "dinner", "breakfast", "meal", "eat", "drink", "bar",
        "kfc", "burger", "taco", "chipotle", "panera", "dunkin", "tim hortons",
        "swiggy", "zomato", "foodpanda", "haldirams", "ccd", "barista",
    ),
    "Transportation": (
        "uber", "lyft", "taxi", "cab", "bus", "train", "metro", "subway", "gas", "fuel",
        "parking", "toll", "transport", "airline", "flight", "car rental", "hertz", "avis",
        "ola", "rapido", "auto", "rickshaw", "petrol", "diesel", "irctc",
    ),
    "Shopping": (
        "amazon", "walmart", "target", "costco", "ebay", "store", "mall", "shopping",
        "clothes", "clothing", "fashion", "shoes", "electronics", "best buy", "apple store",
        "flipkart", "myntra", "ajio", "nykaa", "big bazaar", "reliance", "dmart",
    ),
    "Entertainment": (
        "netflix", "spotify", "movie", "cinema", "theater", "game", "gaming", "concert",
        "show", "entertainment", "fun", "amusement", "disney", "hulu", "youtube",
        "bookmyshow", "pvr", "inox", "hotstar", "prime video", "zee5",
    ),
    "Bills & Utilities": (
        "electric", "electricity", "water", "gas bill", "internet", "phone", "mobile",
        "utility", "rent", "mortgage", "insurance", "verizon", "att", "comcast",
        "bsnl", "airtel", "jio", "vi", "vodafone", "tata power", "adani", "bescom",
    ),
    "Healthcare": (
        "doctor", "hospital", "pharmacy", "medical", "health", "dentist", "clinic",
        "medicine", "prescription", "cvs", "walgreens", "urgent care",
        "apollo", "fortis", "max", "medplus", "pharmeasy", "netmeds",
    ),
    "Travel": (
        "hotel", "motel", "airbnb", "booking", "expedia", "vacation", "trip", "travel",
        "flight", "airline", "marriott", "hilton", "hyatt",
        "makemytrip", "goibibo", "cleartrip", "yatra", "oyo", "treebo",
    ),
    "Education": (
        "school", "university", "college", "tuition", "book", "course", "education",
        "learning", "training", "certification", "amazon books",
        "byju", "unacademy", "vedantu", "coursera", "udemy",
    ),
    "Personal Care": (
        "salon", "spa", "haircut", "beauty", "cosmetics", "gym", "fitness", "personal",
        "care", "massage", "nail", "sephora", "ulta",
        "lakme", "vlcc", "jawed habib", "cult fit", "gold gym",
    ),
})

ENHANCED_PAYMENT_KEYWORDS: KeywordTable = MappingProxyType({
    "Credit Card": (
        "credit card", "visa", "mastercard", "amex", "american express", "discover",
        "cc purchase", "credit", "card ending", "hdfc", "icici", "sbi card", "axis",
    ),
    "Debit Card": (
        "debit card", "debit", "card purchase", "pos", "point of sale", "atm card",
    ),
    "Digital Wallet": (
        "paypal", "venmo", "apple pay", "google pay", "samsung pay", "zelle",
        "cashapp", "wallet", "digital payment", "mobile payment", "upi",
        "paytm", "phonepe", "gpay", "bhim", "mobikwik", "freecharge", "amazon pay",
    ),
    "Bank Transfer": (
        "bank transfer", "wire transfer", "ach", "direct debit", "online transfer",
        "electronic transfer", "bank payment", "neft", "rtgs", "imps",
    ),
    "Cash": (
        "cash", "atm withdrawal", "cash withdrawal", "atm", "cash advance",
    ),
})


def _keyword_in_text(keyword: str, text: str, whole_words: bool) -> bool:
    if not whole_words:
        return keyword in text
    return re.search(r'\b' + re.escape(keyword) + r'\b', text) is not None


def classify_keywords(
    text: str,
    table: KeywordTable,
    whole_words: bool = False
) -> Optional[str]:
    """
    Return the first label in ``table`` with a keyword contained in ``text``.

    Matching is case-insensitive. Labels are tried in declaration order, so
    when keywords of several labels occur the earliest-declared label wins,
    regardless of where each keyword sits in the text.

    Args:
        text: Text to classify
        table: Ordered mapping of label to keyword substrings
        whole_words: If True, keywords only match on word boundaries

    Returns:
        Matching label, or None if no keyword matches
    """
    if not text:
        return None

    lower_text = text.lower()
    for label, keywords in table.items():
        for keyword in keywords:
            if _keyword_in_text(keyword.lower(), lower_text, whole_words):
                logger.debug(f"Keyword '{keyword}' matched label '{label}'")
                return label

    return None


def is_known_category(label: str) -> bool:
    """Check if a label belongs to the category vocabulary."""
    return label in EXPENSE_CATEGORIES


def is_known_payment_method(label: str) -> bool:
    """Check if a label belongs to the payment-method vocabulary."""
    return label in PAYMENT_METHODS
