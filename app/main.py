"""
Streamlit Frontend for BudgetBuddy

The presenter renders the current Model and turns widget events into
messages. It holds no business logic: every change goes through
Program.dispatch().

Layout:
1. Totals row (income, expenses, balance)
2. Entry form (description, amount, type, Add)
3. Transaction list, newest first, each with a Delete button
"""

import streamlit as st

from budget_buddy.config import get_settings
from budget_buddy.models import (
    AddTransaction,
    DeleteTransaction,
    SetAmount,
    SetDescription,
    SetType,
    TransactionType,
)
from budget_buddy.program import Program
from budget_buddy.queries import format_totals, format_transaction_line
from budget_buddy.services.storage import StorageError


st.set_page_config(
    page_title="BudgetBuddy",
    page_icon="💶",
    layout="centered",
)

DESCRIPTION_KEY = "description_input"
AMOUNT_KEY = "amount_input"
TYPE_KEY = "type_input"
ERROR_KEY = "storage_error"


def get_program() -> Program:
    """One program per browser session."""
    if "program" not in st.session_state:
        st.session_state.program = Program.init(get_settings())
    return st.session_state.program


def dispatch(msg) -> None:
    """Dispatch a message and mirror the model's inputs back into the widgets."""
    program = get_program()
    try:
        model = program.dispatch(msg)
    except StorageError as e:
        st.session_state[ERROR_KEY] = f"Could not save your changes: {e}"
        return
    st.session_state.pop(ERROR_KEY, None)
    st.session_state[DESCRIPTION_KEY] = model.description_input
    st.session_state[AMOUNT_KEY] = model.amount_input
    st.session_state[TYPE_KEY] = model.type_input.value


def on_description_change() -> None:
    dispatch(SetDescription(text=st.session_state[DESCRIPTION_KEY]))


def on_amount_change() -> None:
    dispatch(SetAmount(text=st.session_state[AMOUNT_KEY]))


def on_type_change() -> None:
    dispatch(SetType(type=TransactionType(st.session_state[TYPE_KEY])))


def render_totals(program: Program, symbol: str) -> None:
    columns = st.columns(3)
    for column, (label, value) in zip(columns, format_totals(program.summary, symbol).items()):
        column.metric(label, value)


def render_entry_form(program: Program, symbol: str) -> None:
    model = program.model
    st.session_state.setdefault(DESCRIPTION_KEY, model.description_input)
    st.session_state.setdefault(AMOUNT_KEY, model.amount_input)
    st.session_state.setdefault(TYPE_KEY, model.type_input.value)

    desc_col, amount_col, type_col, add_col = st.columns([4, 2, 2, 1])
    desc_col.text_input(
        "Description",
        key=DESCRIPTION_KEY,
        on_change=on_description_change,
    )
    amount_col.text_input(
        f"Amount (in {symbol})",
        key=AMOUNT_KEY,
        on_change=on_amount_change,
    )
    type_col.selectbox(
        "Type",
        options=[t.value for t in TransactionType],
        key=TYPE_KEY,
        on_change=on_type_change,
    )
    add_col.button(
        "Add",
        type="primary",
        on_click=dispatch,
        args=(AddTransaction(),),
    )

    for issue in program.last_issues:
        st.warning(issue.message)


def render_transactions(program: Program, symbol: str) -> None:
    transactions = program.model.transactions
    if not transactions:
        st.info("No transactions yet.")
        return

    for tx in transactions:
        line_col, delete_col = st.columns([6, 1])
        line_col.write(format_transaction_line(tx, symbol))
        delete_col.button(
            "Delete",
            key=f"delete-{tx.id}",
            on_click=dispatch,
            args=(DeleteTransaction(id=tx.id),),
        )


def main():
    """Main application entry point."""
    settings = get_settings()
    program = get_program()

    st.title("BudgetBuddy")

    for warning in program.warnings:
        st.warning(warning)
    if ERROR_KEY in st.session_state:
        st.error(st.session_state[ERROR_KEY])

    render_totals(program, settings.currency_symbol)
    st.markdown("---")
    render_entry_form(program, settings.currency_symbol)
    st.markdown("---")
    render_transactions(program, settings.currency_symbol)


if __name__ == "__main__":
    main()
