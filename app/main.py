import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pandas as pd
import streamlit as st

from tracker.charts import budget_bar_chart, category_pie_chart, monthly_bar_chart
from tracker.config import configure_logging, load_settings
from tracker.events import EventBus, register_default_handlers
from tracker.forms import BUDGET_FIELDS, TRANSACTION_FIELDS, parse_budget_form, parse_transaction_form
from tracker.services import default_summary_service
from tracker.store import FinanceStore

settings = load_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("tracker.app")

st.set_page_config(page_title=settings.page_title, layout="wide")

# Empty values for every form widget; number and date inputs use None.
FORM_DEFAULTS = {
    "tx_description": "",
    "tx_amount": None,
    "tx_date": None,
    "tx_category": "",
    "budget_category": "",
    "budget_amount": None,
}

if "store" not in st.session_state:
    st.session_state.store = FinanceStore(bus=register_default_handlers(EventBus()))
for key, value in FORM_DEFAULTS.items():
    if key not in st.session_state:
        st.session_state[key] = value

store: FinanceStore = st.session_state.store


def money(amount: float) -> str:
    return f"{settings.currency}{amount:,.2f}"


def submit_transaction():
    fields = {name: st.session_state[f"tx_{name}"] for name in TRANSACTION_FIELDS}
    result = parse_transaction_form(fields, st.session_state.store.transactions)
    if result.is_left():
        logger.debug("transaction form discarded: %s", result.get_error()["message"])
        return
    st.session_state.store.add_transaction(result.get_or_else(None))
    for name in TRANSACTION_FIELDS:
        key = f"tx_{name}"
        st.session_state[key] = FORM_DEFAULTS[key]


def submit_budget():
    fields = {name: st.session_state[f"budget_{name}"] for name in BUDGET_FIELDS}
    result = parse_budget_form(fields)
    if result.is_left():
        logger.debug("budget form discarded: %s", result.get_error()["message"])
        return
    category, amount = result.get_or_else(None)
    st.session_state.store.set_budget(category, amount)
    for name in BUDGET_FIELDS:
        key = f"budget_{name}"
        st.session_state[key] = FORM_DEFAULTS[key]


def delete_transaction(tx_id: int):
    st.session_state.store.delete_transaction(tx_id)


summary = default_summary_service(settings.recent_count).summary(store.transactions, store.budgets)["result"]

st.title(settings.page_title)

st.subheader("➕ Add Transaction")
with st.form("transaction_form"):
    col1, col2 = st.columns(2)
    with col1:
        st.text_input("Description", key="tx_description", placeholder="Description")
        st.number_input("Amount", key="tx_amount", value=None, step=1.0, format="%.2f", placeholder="Amount")
    with col2:
        st.date_input("Date", key="tx_date", value=None)
        st.text_input("Category", key="tx_category", placeholder="Category")
    st.form_submit_button("Add Transaction", on_click=submit_transaction)

chart_monthly, chart_category = st.columns(2)
with chart_monthly:
    st.markdown("**Monthly Expenses**")
    st.plotly_chart(monthly_bar_chart(summary["monthly"], settings.chart_height), use_container_width=True)
with chart_category:
    st.markdown("**Spending by Category**")
    st.plotly_chart(category_pie_chart(summary["categories"], settings.chart_height), use_container_width=True)

st.metric("Total Expenses", money(summary["total_expenses"]))
st.write(f"Recent Transactions: {', '.join(summary['recent'])}")

st.divider()

st.subheader("🎯 Budgets")
with st.form("budget_form"):
    col1, col2 = st.columns(2)
    with col1:
        st.text_input("Category", key="budget_category", placeholder="Category")
    with col2:
        st.number_input("Monthly Budget", key="budget_amount", value=None, step=1.0, format="%.2f", placeholder="Monthly Budget")
    st.form_submit_button("Set Budget", on_click=submit_budget)

st.plotly_chart(budget_bar_chart(summary["budget_rows"], settings.chart_height), use_container_width=True)
if summary["over_budget"]:
    st.caption("Over budget: " + ", ".join(
        f"{row.category} ({money(row.spent)} / {money(row.budgeted)})" for row in summary["over_budget"]
    ))

if store.alerts:
    for alert in reversed(store.alerts[-10:]):
        st.warning(f"🔴 {alert['message']}: {money(alert['spent'])} / {money(alert['limit'])}")
    st.button("Clear Alerts", key="btn_clear_alerts", on_click=store.clear_alerts)

st.divider()

st.subheader("📋 Transactions")
if store.transactions:
    for tx in store.transactions:
        line, action = st.columns([6, 1])
        with line:
            st.write(f"{tx.date:%Y-%m-%d} - {tx.description} - {money(tx.amount)} ({tx.category})")
        with action:
            st.button("Delete", key=f"delete_{tx.id}", on_click=delete_transaction, args=(tx.id,))
else:
    st.info("No transactions yet.")

with st.expander("📜 Event History"):
    if store.history:
        st.dataframe(pd.DataFrame(list(store.history)), use_container_width=True)
    else:
        st.info("No events yet.")
