"""
Streamlit Frontend for the Petty Cash Ledger

This is the page the cashier uses daily: three headline figures, an
entry form, and the transaction history with a running balance.

DESIGN PRINCIPLES:
1. Simple, clear interface
2. Clear error messages in simple language
3. Visual feedback for every add and delete
4. No hidden actions

The ledger lives in st.session_state, so each browser session gets its
own book and it is discarded when the session ends.
"""

from datetime import date

import streamlit as st

from petty_cash.audit import create_correlation_id
from petty_cash.config import categories_for, get_settings, validate_all_settings
from petty_cash.ledger import LedgerPresenter
from petty_cash.models.transaction import TransactionDraft, TransactionType
from petty_cash.orchestrator import TransactionEntryFlow, create_app_components


ENTRY_FORM_KEYS = ("entry_date", "entry_category", "entry_description", "entry_amount")


# Page configuration
st.set_page_config(
    page_title="Petty Cash Tracker",
    page_icon="💰",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# Custom CSS for better UX
st.markdown("""
<style>
    .stButton>button {
        width: 100%;
    }
    .card {
        padding: 16px 20px;
        border-radius: 10px;
        border: 1px solid #e6e6e6;
        margin: 6px 0;
    }
    .card-label {
        font-size: 0.9em;
        font-weight: 500;
        color: #6c757d;
    }
    .big-number {
        font-size: 1.8em;
        font-weight: bold;
        color: #2c3e50;
    }
    .tone-positive { color: #16a34a; }
    .tone-negative { color: #dc2626; }
    .type-badge {
        font-size: 0.8em;
        padding: 2px 8px;
        border-radius: 4px;
    }
    .type-income { background-color: #dcfce7; color: #15803d; }
    .type-expense { background-color: #fee2e2; color: #b91c1c; }
</style>
""", unsafe_allow_html=True)


def get_components():
    """Get or create this session's ledger components."""
    if "components" not in st.session_state:
        st.session_state.components = create_app_components()
    return st.session_state.components


def main():
    """Main application entry point."""
    entry_flow, presenter, audit_logger = get_components()
    display = presenter.settings

    st.markdown(
        f"<h1 style='text-align:center'>{display.title}</h1>"
        f"<p style='text-align:center; font-size:1.25em; color:#6c757d'>{display.subtitle}</p>",
        unsafe_allow_html=True,
    )

    flash = st.session_state.pop("flash", None)
    if flash:
        kind, message = flash
        if kind == "success":
            st.success(message)
        elif kind == "warning":
            st.warning(message)
        else:
            st.error(message)

    render_summary(presenter)
    render_entry_form(entry_flow)
    render_history(entry_flow, presenter)
    render_sidebar(audit_logger)


def render_summary(presenter: LedgerPresenter):
    """Render the three summary cards."""
    columns = st.columns(3)
    for column, card in zip(columns, presenter.summary_cards()):
        tone_class = f"tone-{card['tone']}" if card["tone"] != "neutral" else ""
        with column:
            st.markdown(f"""
            <div class="card">
                <div class="card-label">{card['label']}</div>
                <div class="big-number {tone_class}">{card['value']}</div>
            </div>
            """, unsafe_allow_html=True)


def render_entry_form(entry_flow: TransactionEntryFlow):
    """Render the Add Transaction form."""
    st.subheader("Add Transaction")

    # Inputs survive a rejected submit; they are cleared only after a
    # successful add, before the widgets are created on the next run.
    if st.session_state.pop("reset_entry_form", False):
        for key in ENTRY_FORM_KEYS:
            st.session_state.pop(key, None)

    # Outside the form so the category list follows the selected type
    transaction_type = st.radio(
        "Type",
        options=list(TransactionType),
        index=1,
        format_func=lambda t: t.label,
        horizontal=True,
    )

    with st.form("add-transaction", clear_on_submit=False):
        col1, col2, col3, col4 = st.columns([1, 1, 2, 1])

        with col1:
            entry_date = st.date_input("Date", value=date.today(), key="entry_date")
        with col2:
            category = st.selectbox(
                "Category",
                options=list(categories_for(transaction_type)),
                index=None,
                placeholder="Select category",
                key="entry_category",
            )
        with col3:
            description = st.text_input(
                "Description", placeholder="Enter description", key="entry_description"
            )
        with col4:
            amount = st.text_input(
                f"Amount ({get_settings().display.currency_symbol})",
                placeholder="0.00",
                key="entry_amount",
            )

        submitted = st.form_submit_button("➕ Add Transaction", type="primary")

    if submitted:
        draft = TransactionDraft(
            entry_date=entry_date,
            description=description,
            category=category,
            transaction_type=transaction_type,
            amount=amount,
        )
        transaction, result = entry_flow.submit(
            draft, correlation_id=create_correlation_id()
        )
        if transaction is None:
            st.error(entry_flow.summary_message(result))
            return

        if result.warnings:
            st.session_state.flash = ("warning", entry_flow.summary_message(result))
        else:
            st.session_state.flash = ("success", f"Added '{transaction.description}'.")
        st.session_state.reset_entry_form = True
        st.rerun()


def render_history(entry_flow: TransactionEntryFlow, presenter: LedgerPresenter):
    """Render the transaction history table with per-row delete buttons."""
    st.subheader("Transaction History")

    widths = [1.2, 2.5, 1.5, 1, 1.3, 1.3, 0.7]
    headers = ["Date", "Description", "Category", "Type", "Amount", "Balance", "Action"]
    for column, header in zip(st.columns(widths), headers):
        column.markdown(f"**{header}**")

    for row in presenter.table_rows():
        cols = st.columns(widths)
        cols[0].write(row["Date"])
        cols[1].write(row["Description"])
        cols[2].write(row["Category"])
        cols[3].markdown(
            f"<span class='type-badge type-{row['Type']}'>{row['Type']}</span>",
            unsafe_allow_html=True,
        )
        tone = "tone-positive" if row["Type"] == TransactionType.INCOME.value else "tone-negative"
        cols[4].markdown(f"<span class='{tone}'>{row['Amount']}</span>", unsafe_allow_html=True)
        cols[5].markdown(f"**{row['Balance']}**")

        if row["can_delete"]:
            if cols[6].button("🗑️", key=f"delete-{row['id']}", help="Delete"):
                removed, message = entry_flow.delete(
                    row["id"], correlation_id=create_correlation_id()
                )
                st.session_state.flash = ("success" if removed else "error", message)
                st.rerun()


def render_sidebar(audit_logger):
    """Configuration status and, in debug mode, the audit trail."""
    st.sidebar.title("⚙️ Settings")

    status = validate_all_settings()
    for name in ("ledger", "display", "app"):
        if status.get(name, False):
            st.sidebar.success(f"✅ {name.title()} settings loaded")
        else:
            st.sidebar.error(f"❌ {name.title()}: {status.get(f'{name}_error')}")

    st.sidebar.markdown(
        "Configure the opening balance and labels with `PETTY_CASH_*` "
        "environment variables or a `.env` file."
    )

    if get_settings().app.debug_mode:
        st.sidebar.markdown("---")
        st.sidebar.markdown("### Audit Trail")
        for event in reversed(audit_logger.events):
            st.sidebar.caption(
                f"{event.timestamp:%H:%M:%S} · {event.severity.value} · {event.description}"
            )


if __name__ == "__main__":
    main()
