import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import streamlit as st
import pandas as pd
import plotly.express as px

from tracker.controller import TrackerController, TrackerView
from tracker.filters import AmountFilter, CategoryFilter
from tracker.errors import InvalidArgumentError
from tracker.logging_setup import configure_logging
from tracker.reports import category_totals, matched_transactions, total_amount
from tracker.store import TransactionStore


class StreamlitView(TrackerView):
    """Keeps a DataFrame of the store in session state for the next render."""

    def __init__(self):
        self.table = pd.DataFrame(columns=["Amount", "Category", "Date"])
        self.matched = []
        self.advisories = []

    def on_store_changed(self, store):
        rows = [
            {"Amount": t.amount, "Category": t.category, "Date": t.timestamp}
            for t in store.get_transactions()
        ]
        self.table = pd.DataFrame(rows, columns=["Amount", "Category", "Date"])
        self.matched = store.get_matched_filter_indices()

    def show_advisory(self, message):
        self.advisories.append(message)


def highlight_matched(df, matched):
    def _style(row):
        color = "background-color: #f7d774; color: black" if row.name in matched else ""
        return [color] * len(row)
    return df.style.apply(_style, axis=1).format({"Amount": "{:,.2f}"})


configure_logging()
st.set_page_config(page_title="Expense Tracker", layout="wide")

if "tracker_controller" not in st.session_state:
    view = StreamlitView()
    st.session_state.tracker_view = view
    st.session_state.tracker_controller = TrackerController(TransactionStore(), view)

view = st.session_state.tracker_view
controller = st.session_state.tracker_controller
store = controller.store
categories = controller.validator.categories

st.title("💸 Expense Tracker")

k1, k2, k3, k4 = st.columns(4)
with k1:
    st.metric("Transactions", len(store))
with k2:
    st.metric("Total", f"{total_amount(store.get_transactions()):,.2f}")
with k3:
    st.metric("Matched", len(store.get_matched_filter_indices()))
with k4:
    matched = matched_transactions(store.get_transactions(), store.get_matched_filter_indices())
    st.metric("Matched Total", f"{total_amount(matched):,.2f}")

st.divider()

add_col, filter_col = st.columns(2)

with add_col:
    st.subheader("➕ Add Transaction")
    with st.form("input_form", clear_on_submit=True):
        amount = st.number_input("Amount", step=1.0, format="%.2f")
        category = st.selectbox("Category", categories)
        submitted = st.form_submit_button("Add Transaction")

        if submitted:
            if controller.add_transaction(amount, category):
                st.rerun()
            else:
                st.error(
                    f"❌ Invalid input: amount must be above 0 and at most "
                    f"{controller.validator.max_amount:,.2f}, category one of {', '.join(categories)}"
                )

with filter_col:
    st.subheader("🔎 Filter")
    with st.form("filter_form"):
        mode = st.radio("Filter by", ["Category", "Amount range"], horizontal=True)
        filter_category = st.selectbox("Category", categories, key="filter_category")
        lo, hi = st.columns(2)
        with lo:
            min_amount = st.number_input("Min amount", value=0.0, format="%.2f")
        with hi:
            max_amount = st.number_input(
                "Max amount", value=float(controller.validator.max_amount), format="%.2f"
            )
        apply_col, reapply_col, clear_col = st.columns(3)
        with apply_col:
            apply_clicked = st.form_submit_button("Apply Filter")
        with reapply_col:
            reapply_clicked = st.form_submit_button("Apply Current Filter")
        with clear_col:
            clear_clicked = st.form_submit_button("Clear Filter")

        if apply_clicked:
            try:
                if mode == "Category":
                    controller.set_filter(CategoryFilter(filter_category))
                else:
                    controller.set_filter(AmountFilter(min_amount, max_amount))
            except InvalidArgumentError as e:
                st.error(f"❌ {e}")
            else:
                controller.apply_filter()
                st.rerun()
        if reapply_clicked:
            controller.apply_filter()
            st.rerun()
        if clear_clicked:
            controller.set_filter(None)
            store.set_matched_filter_indices([])
            st.rerun()

for message in view.advisories:
    st.info(message)
view.advisories.clear()

st.divider()

st.subheader("📋 Transactions")
if view.table.empty:
    st.info("No transactions to display.")
else:
    st.dataframe(highlight_matched(view.table, set(view.matched)), use_container_width=True)

    with st.form("undo_form"):
        row = st.number_input("Row to undo", min_value=0, step=1, value=0)
        if st.form_submit_button("Undo"):
            if controller.undo_transaction(int(row)):
                st.rerun()
            else:
                st.error(f"❌ No row {int(row)}")

    totals = category_totals(store.get_transactions())
    df_cat = pd.DataFrame({"Category": list(totals), "Total": list(totals.values())})
    fig_cat = px.pie(df_cat, values="Total", names="Category", title="Category Distribution")
    fig_cat.update_layout(height=300)
    st.plotly_chart(fig_cat, use_container_width=True)
