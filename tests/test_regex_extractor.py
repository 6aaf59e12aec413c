"""Tests for regex_extractor.py - amount, date and description extraction."""

import pytest

from expense_parser.extractors.regex_extractor import (
    SEMANTIC_AMOUNT_PATTERNS,
    clean_description,
    extract_amount,
    extract_date,
    extract_description,
    extract_merchant,
    normalize_whitespace,
    parse_date,
)


# =============================================================================
# Amounts
# =============================================================================


class TestExtractAmount:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("$12.50", "12.50"),
            ("₹12", "12"),
            ("Rs. 12", "12"),
            ("Rs 12", "12"),
            ("INR 500", "500"),
            ("USD 20", "20"),
            ("12.50", "12.50"),
            ("1,200.50", "1200.50"),
            ("$1,234,567.89 wire", "1234567.89"),
        ],
    )
    def test_currency_forms(self, text, expected):
        assert extract_amount(text) == expected

    def test_no_amount(self):
        assert extract_amount("no numbers here") is None

    def test_empty_text(self):
        assert extract_amount("") is None

    def test_keyword_anchored_amount_wins(self):
        text = "Avl bal $1,000.00, debited Rs 250 for order"

        assert extract_amount(text) == "250"

    def test_amount_label(self):
        assert extract_amount("Txn ref 7781 Amount: INR 1,499.00") == "1499.00"

    def test_bare_number_skips_slash_date(self):
        assert extract_amount("Order on 01/15/2025 total 45.00") == "45.00"

    def test_bare_number_skips_dash_date(self):
        assert extract_amount("on 15-03-2025 total 30") == "30"

    def test_currency_letters_need_word_boundary(self):
        # "hours" ends in "rs" but is not a currency marker
        assert extract_amount("hours 5") == "5"

    def test_semantic_patterns_accept_bare_number(self):
        assert extract_amount("lunch 12", SEMANTIC_AMOUNT_PATTERNS) == "12"

    def test_semantic_patterns_prefer_currency_amount(self):
        assert extract_amount("2 coffees $7.50", SEMANTIC_AMOUNT_PATTERNS) == "7.50"


# =============================================================================
# Dates
# =============================================================================


class TestParseDate:
    @pytest.mark.parametrize("text", ["3/15/2025", "03/15/2025", "2025-03-15", "15-3-2025", "15-03-2025"])
    def test_numeric_shapes(self, text):
        assert parse_date(text) == "2025-03-15"

    @pytest.mark.parametrize("text", ["Mar 15, 2025", "March 15 2025", "15 Mar 2025", "15 March, 2025"])
    def test_month_name_shapes(self, text):
        assert parse_date(text) == "2025-03-15"

    @pytest.mark.parametrize("text", ["13/01/2025", "2/30/2025", "2025-13-01", "31-02-2025", "Foo 12, 2025", ""])
    def test_invalid_dates(self, text):
        assert parse_date(text) is None


class TestExtractDate:
    def test_slash_date_is_month_first(self):
        assert extract_date("Spent $20 on 01/02/2025") == "2025-01-02"

    def test_month_name_date(self):
        assert extract_date("Spent $20 at TARGET on Mar 5, 2025") == "2025-03-05"

    def test_invalid_month_gives_none(self):
        assert extract_date("Paid on 13/01/2025") is None

    def test_invalid_match_falls_through_to_next_shape(self):
        assert extract_date("Ref 99/99/2025 posted 2025-02-10") == "2025-02-10"

    def test_no_date(self):
        assert extract_date("coffee at the corner") is None

    @pytest.mark.parametrize(
        "line",
        [
            "Marketing 12 2025 invoice 40",
            "Mayor 3, 2024 fund 15",
            "DECATHLON 12 2025 $30.00",
            "Junction 4 2025 parking 6.00",
        ],
    )
    def test_words_starting_with_month_are_not_dates(self, line):
        assert extract_date(line) is None

    def test_full_and_dotted_month_spellings(self):
        assert extract_date("Paid $9 on Sept. 3, 2025") == "2025-09-03"
        assert extract_date("Paid $9 on 3 December 2025") == "2025-12-03"


# =============================================================================
# Descriptions
# =============================================================================


class TestExtractMerchant:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("Paid $12.00 at CHIPOTLE on 04/01/2025", "CHIPOTLE"),
            ("POS PURCHASE - WALMART $42.10 on 03/02/2025", "WALMART"),
            ("DEBIT CARD PURCHASE - STARBUCKS $8.50 on 01/15/2025", "STARBUCKS"),
            ("Payment to Netflix.com #4411", "Netflix.com"),
            ("SHELL OIL 5734 $40.00 04/02/2025", "SHELL OIL"),
        ],
    )
    def test_merchant_patterns(self, line, expected):
        assert extract_merchant(line) == expected

    def test_merchant_whitespace_is_collapsed(self):
        assert extract_merchant("Spent $5 at  BLUE   BOTTLE  on 01/02/2025") == "BLUE BOTTLE"

    def test_no_merchant(self):
        assert extract_merchant("12/25/2025 $40.00") is None


class TestCleanDescription:
    def test_strips_dates_and_amounts(self):
        assert clean_description("12/25/2025 Rs. 1,500.00 refund credited") == "refund credited"

    def test_idempotent(self):
        line = "Misc  charge 45.00   ref 2025-01-03"
        once = clean_description(line)

        assert once == "Misc charge ref"
        assert clean_description(once) == once

    def test_strips_reference_markers(self):
        assert clean_description("Paid at 5 Guys #12 today") == "Paid at Guys today"

    def test_keeps_words_that_start_with_month_names(self):
        assert clean_description("Marketing 12 2025 invoice") == "Marketing invoice"

    def test_normalize_whitespace(self):
        assert normalize_whitespace("  a \t b\n c  ") == "a b c"


class TestExtractDescription:
    def test_prefers_merchant(self):
        assert extract_description("Paid $12.00 at CHIPOTLE on 04/01/2025") == "CHIPOTLE"

    def test_falls_back_to_cleaned_line(self):
        assert extract_description("Misc charge 45.00 ref") == "Misc charge ref"

    def test_default_when_nothing_left(self):
        assert extract_description("12/25/2025 $40.00") == "Transaction"

    def test_custom_default(self):
        assert extract_description("12/25/2025 $40.00", default="Unknown") == "Unknown"

    def test_merchant_exposed_by_cleanup(self):
        assert extract_description("Lunch at 5 Guys on Monday 12.00") == "Guys"

    @pytest.mark.parametrize(
        "line",
        [
            "Paid at 5 Guys #12 today",
            "Spent 40 from 7 Eleven #881 store",
            "Lunch at 5 Guys on Monday 12.00",
            "Ref #4411 charged 20.00 via 3 BROTHERS $ deli",
            "Payment to Netflix.com #4411",
            "SHELL OIL 5734 $40.00 04/02/2025",
            "DEBIT CARD PURCHASE - STARBUCKS $8.50 on 01/15/2025",
            "Misc  charge 45.00   ref 2025-01-03",
            "Marketing 12 2025 invoice 40",
            "12/25/2025 $40.00",
        ],
    )
    def test_reparsing_description_is_stable(self, line):
        once = extract_description(line)

        assert extract_description(once) == once
