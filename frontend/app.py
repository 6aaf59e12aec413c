"""
Expense Text Parser - Streamlit Frontend
Quick-add expense phrases and bulk import of pasted bank notifications
"""

import logging
import streamlit as st
from datetime import datetime

from expense_parser.extractors import (
    EXPENSE_CATEGORIES,
    PAYMENT_METHODS,
    TransactionTextParser,
    complete_semantic_draft,
    parse_semantic_input
)
from expense_parser.logging_config import setup_logging
from expense_parser.output import drafts_to_csv

setup_logging()
logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title="Expense Text Parser",
    page_icon="💸",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #ef8145;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #808183;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)

QUICK_ADD_EXAMPLES = [
    "$15 lunch at subway with card",
    "25 uber to airport cash",
    "$8.50 coffee with apple pay",
    "120 grocery shopping debit",
    "$45 dinner with credit card",
]

IMPORT_PLACEHOLDER = """Paste your transaction notifications here...

Examples:
DEBIT CARD PURCHASE - STARBUCKS $8.50 on 01/15/2025
Transaction Alert: $25.00 at UBER
Rs. 349 paid to SWIGGY via UPI on 02/03/2025"""

# Initialize session state
if 'imported' not in st.session_state:
    st.session_state.imported = []
if 'parsed_transactions' not in st.session_state:
    st.session_state.parsed_transactions = []


def main():
    """Main application function."""
    st.markdown('<div class="main-header">💸 Expense Text Parser</div>', unsafe_allow_html=True)
    st.markdown(
        '<div class="sub-header">Type an expense in plain words or paste bank notifications</div>',
        unsafe_allow_html=True
    )

    with st.sidebar:
        st.header("📋 Vocabulary")
        st.subheader("Categories")
        for category in EXPENSE_CATEGORIES:
            st.write(f"- {category}")
        st.subheader("Payment Methods")
        for method in PAYMENT_METHODS:
            st.write(f"- {method}")

    quick_add_section()
    st.divider()
    import_section()
    st.divider()
    imported_section()


def quick_add_section():
    """Single phrase input with a live preview of what was detected."""
    st.subheader("⚡ Quick Add Expense")
    phrase = st.text_input(
        "Expense",
        placeholder="Try: $15 lunch with card, 25 uber cash, $8 coffee apple pay...",
        help="Examples: " + " | ".join(QUICK_ADD_EXAMPLES)
    )

    if not phrase.strip():
        return

    partial = parse_semantic_input(phrase)
    st.caption("Detected (edit before saving if needed):")
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Amount", partial.amount or "-")
    col2.metric("Category", partial.category or "-")
    col3.metric("Payment", partial.payment_method or "-")
    col4.metric("Description", partial.description or "-")

    if st.button("➕ Add Expense", disabled=not partial.amount):
        draft = complete_semantic_draft(partial, phrase.strip())
        if draft is None:
            st.warning("⚠️ Amount must be greater than zero")
            return
        st.session_state.imported.append(draft)
        logger.info(f"Quick-added expense: {draft}")
        st.success(f"✅ Added {draft.description} ({draft.amount})")


def import_section():
    """Paste area for notifications, preview table, and bulk import."""
    st.subheader("📥 Smart Transaction Import")
    text = st.text_area(
        "Paste transaction notifications, bank statements, or receipts:",
        placeholder=IMPORT_PLACEHOLDER,
        height=180
    )

    if st.button("🔍 Parse Transactions", type="primary", disabled=not text.strip()):
        parser = TransactionTextParser()
        st.session_state.parsed_transactions = parser.parse_text(text)
        stats = parser.get_stats()
        if st.session_state.parsed_transactions:
            st.info(
                f"📊 Found {stats['transactions_found']} transactions in "
                f"{stats['lines_processed']} lines"
            )
        else:
            st.warning("⚠️ No transactions found. Each line needs an amount to be detected.")

    parsed = st.session_state.parsed_transactions
    if not parsed:
        return

    st.dataframe([draft.to_dict() for draft in parsed], use_container_width=True)

    if st.button(f"✅ Import All ({len(parsed)})"):
        st.session_state.imported.extend(parsed)
        logger.info(f"Imported {len(parsed)} transactions")
        st.session_state.parsed_transactions = []
        st.rerun()


def imported_section():
    """Show imported drafts and offer a CSV download."""
    imported = st.session_state.imported
    st.subheader(f"🧾 Imported Expenses ({len(imported)})")
    if not imported:
        st.info("Nothing imported yet")
        return

    st.dataframe([draft.to_dict() for draft in imported], use_container_width=True)
    st.download_button(
        label="📄 Download CSV",
        data=drafts_to_csv(imported),
        file_name=f"expenses-{datetime.now().strftime('%Y-%m-%d')}.csv",
        mime="text/csv"
    )

    if st.button("🔄 Clear Imported Expenses"):
        st.session_state.imported = []
        st.rerun()


if __name__ == "__main__":
    main()
