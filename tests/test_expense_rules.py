"""Tests for expense_rules.py - vocabularies and first-match keyword classification."""

import pytest

from expense_parser.extractors.expense_rules import (
    ENHANCED_CATEGORY_KEYWORDS,
    ENHANCED_PAYMENT_KEYWORDS,
    EXPENSE_CATEGORIES,
    OTHER,
    PAYMENT_METHODS,
    SEMANTIC_CATEGORY_KEYWORDS,
    SEMANTIC_PAYMENT_KEYWORDS,
    classify_keywords,
    is_known_category,
    is_known_payment_method,
)

ALL_TABLES = [
    (SEMANTIC_CATEGORY_KEYWORDS, EXPENSE_CATEGORIES),
    (ENHANCED_CATEGORY_KEYWORDS, EXPENSE_CATEGORIES),
    (SEMANTIC_PAYMENT_KEYWORDS, PAYMENT_METHODS),
    (ENHANCED_PAYMENT_KEYWORDS, PAYMENT_METHODS),
]


class TestVocabularies:
    def test_vocabulary_sizes(self):
        assert len(EXPENSE_CATEGORIES) == 10
        assert len(PAYMENT_METHODS) == 6
        assert OTHER in EXPENSE_CATEGORIES
        assert OTHER in PAYMENT_METHODS

    @pytest.mark.parametrize("table,vocabulary", ALL_TABLES)
    def test_table_labels_are_concrete_vocabulary_entries(self, table, vocabulary):
        assert OTHER not in table
        assert set(table) <= set(vocabulary)

    @pytest.mark.parametrize("table,vocabulary", ALL_TABLES)
    def test_keywords_are_lowercase(self, table, vocabulary):
        for keywords in table.values():
            assert all(keyword == keyword.lower() for keyword in keywords)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            SEMANTIC_CATEGORY_KEYWORDS["Groceries"] = ("milk",)

    def test_known_labels(self):
        assert is_known_category("Healthcare")
        assert is_known_category(OTHER)
        assert not is_known_category("Groceries")
        assert is_known_payment_method("Digital Wallet")
        assert not is_known_payment_method("Crypto")


class TestClassifyKeywords:
    def test_matches_case_insensitively(self):
        assert classify_keywords("UBER ride home", SEMANTIC_CATEGORY_KEYWORDS) == "Transportation"

    def test_no_match_returns_none(self):
        assert classify_keywords("xyz 42", SEMANTIC_CATEGORY_KEYWORDS) is None

    def test_empty_text_returns_none(self):
        assert classify_keywords("", SEMANTIC_CATEGORY_KEYWORDS) is None

    def test_declaration_order_wins_over_position_in_text(self):
        # Food & Dining is declared before Transportation
        assert classify_keywords("uber then coffee", SEMANTIC_CATEGORY_KEYWORDS) == "Food & Dining"
        assert classify_keywords("coffee then uber", SEMANTIC_CATEGORY_KEYWORDS) == "Food & Dining"

    def test_credit_card_beats_generic_card(self):
        assert classify_keywords("paid with credit card", SEMANTIC_PAYMENT_KEYWORDS) == "Credit Card"
        assert classify_keywords("paid with card", SEMANTIC_PAYMENT_KEYWORDS) == "Debit Card"

    def test_substring_matching_inside_longer_words(self):
        assert classify_keywords("gasoline refill", SEMANTIC_CATEGORY_KEYWORDS) == "Transportation"
        # "theater" contains "eat"
        assert classify_keywords("theater show", SEMANTIC_CATEGORY_KEYWORDS) == "Food & Dining"

    def test_whole_words_skips_embedded_keywords(self):
        assert classify_keywords("theater show", SEMANTIC_CATEGORY_KEYWORDS, whole_words=True) == "Entertainment"
        assert classify_keywords("deposit reversal", ENHANCED_PAYMENT_KEYWORDS, whole_words=True) is None

    def test_whole_words_still_matches_multi_word_keywords(self):
        assert classify_keywords("Paid via Apple Pay", ENHANCED_PAYMENT_KEYWORDS, whole_words=True) == "Digital Wallet"

    def test_same_input_same_result(self):
        text = "Spent $40 at SHELL gas station with visa"
        results = {classify_keywords(text, ENHANCED_PAYMENT_KEYWORDS) for _ in range(5)}
        assert results == {"Credit Card"}
