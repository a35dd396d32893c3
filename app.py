"""Streamlit front-end for the marina ledger."""
from __future__ import annotations

from pathlib import Path

import pandas as pd
import streamlit as st

from marina import (
    AcceptPaymentUseCase,
    AddBoatUseCase,
    BillingEngine,
    BoatRegistry,
    ChargeMonthUseCase,
    FlatFileBoatRepository,
    LoadLedgerUseCase,
    MarinaContext,
    RemoveBoatUseCase,
    SaveLedgerUseCase,
)
from marina.application.dto import CommandResult
from marina.config import SETTINGS
from marina.presentation.inventory_report import boats_to_dataframe, render_csv, render_html, render_xlsx


st.set_page_config(page_title="Marina Ledger", layout="wide")
st.title("Boat Management System")


def open_ledger(path: Path) -> tuple[MarinaContext, CommandResult]:
    context = MarinaContext(
        registry=BoatRegistry(SETTINGS.capacity),
        repository=FlatFileBoatRepository(path, capacity=SETTINGS.capacity),
        billing=BillingEngine(SETTINGS.monthly_rates),
    )
    return context, LoadLedgerUseCase(context).execute()


def report(result: CommandResult) -> None:
    if result.ok:
        st.success(result.message)
    else:
        st.warning(result.message)


with st.sidebar:
    ledger_path = st.text_input("Ledger file", value=str(SETTINGS.default_ledger_path))
    if st.button("Open ledger", key="open_ledger_btn"):
        context, loaded = open_ledger(Path(ledger_path))
        st.session_state["context"] = context
        st.session_state["last_result"] = loaded
        st.rerun()

context: MarinaContext | None = st.session_state.get("context")
if context is None:
    st.info("Open a ledger file to start.")
    st.stop()

last_result = st.session_state.pop("last_result", None)
if last_result is not None:
    report(last_result)

registry = context.registry
st.caption(f"{len(registry)} of {registry.capacity} berths in use")

frame = boats_to_dataframe(registry.iter_sorted())
st.dataframe(frame, hide_index=True, use_container_width=True)

col_csv, col_html, col_xlsx = st.columns(3)
with col_csv:
    st.download_button(
        "Download inventory CSV",
        data=render_csv(registry.iter_sorted()),
        file_name="inventory.csv",
        mime="text/csv",
    )
with col_html:
    st.download_button(
        "Download inventory HTML",
        data=render_html(registry.iter_sorted()).encode("utf-8"),
        file_name="inventory.html",
        mime="text/html",
    )
with col_xlsx:
    st.download_button(
        "Download inventory Excel",
        data=render_xlsx(registry.iter_sorted()),
        file_name="inventory.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

tabs = st.tabs(["Add", "Remove", "Payment", "Month", "Save"])
with tabs[0]:
    with st.form("add_boat_form", clear_on_submit=True):
        line = st.text_input("Boat data (name,length,type,value,owed)", placeholder="Eleanor,28,slip,23,1200.50")
        if st.form_submit_button("Add boat", disabled=registry.is_full):
            st.session_state["last_result"] = AddBoatUseCase(context).execute(line)
            st.rerun()

names = pd.Series([boat.name for boat in registry.iter_sorted()], dtype=str)
with tabs[1]:
    name = st.selectbox("Boat", names, key="remove_name")
    if st.button("Remove boat", key="remove_btn", disabled=names.empty):
        st.session_state["last_result"] = RemoveBoatUseCase(context).execute(name)
        st.rerun()

with tabs[2]:
    pay_name = st.selectbox("Boat", names, key="pay_name")
    amount = st.text_input("Amount", key="pay_amount")
    if st.button("Accept payment", key="pay_btn", disabled=names.empty):
        st.session_state["last_result"] = AcceptPaymentUseCase(context).execute(pay_name, amount)
        st.rerun()

with tabs[3]:
    st.write("Bill one month of berth charges to every boat.")
    if st.button("Apply monthly charges", key="month_btn"):
        st.session_state["last_result"] = ChargeMonthUseCase(context).execute()
        st.rerun()

with tabs[4]:
    if st.button("Save ledger", key="save_btn"):
        st.session_state["last_result"] = SaveLedgerUseCase(context).execute()
        st.rerun()
