"""Saved-projects dashboard."""

from datetime import datetime

import streamlit as st

from utils.formatting import format_currency, format_number
from utils.storage import filter_projects, portfolio_totals
from utils.visualizations import create_portfolio_chart


def render_portfolio_tab(projects, settings, on_open, on_delete):
    fmt = lambda v: format_currency(v, settings.currency_symbol)

    st.header("Portfolio")
    totals = portfolio_totals(projects)
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Properties", totals["count"])
    with col2:
        st.metric("Total Rooms", format_number(totals["total_rooms"], 0))
    with col3:
        st.metric("Portfolio Valuation", fmt(totals["total_valuation"]))
    with col4:
        st.metric("Monthly Net", fmt(totals["total_monthly_net"]))

    if not projects:
        st.info("No saved projects yet. Fill in the calculator and press **Save Project**.")
        return

    st.plotly_chart(create_portfolio_chart(projects), use_container_width=True)

    search_col, sort_col = st.columns([3, 1])
    search = search_col.text_input("Search by hotel name", key="portfolio_search")
    sort_by = sort_col.selectbox("Sort by", ["date", "valuation", "net"], key="portfolio_sort",
                                 format_func={"date": "Last modified", "valuation": "Valuation",
                                              "net": "Monthly net"}.get)

    for p in filter_projects(projects, search, sort_by):
        with st.container(border=True):
            c1, c2, c3, c4, c5 = st.columns([3, 2, 2, 1, 1])
            modified = datetime.fromtimestamp(p.last_modified / 1000).strftime("%d %b %Y, %H:%M")
            c1.markdown(f"**{p.inputs.hotel_name or 'Untitled'}**  \n"
                        f"{p.inputs.category} · {int(p.inputs.total_rooms)} rooms · {modified}")
            c2.metric("Monthly Net", fmt(p.summary.monthly_net))
            if p.inputs.include_financials:
                c3.metric("ROI", f"{format_number(p.summary.roi)}%")
            else:
                c3.metric("Monthly Revenue", fmt(p.summary.monthly_revenue))
            if c4.button("Open", key=f"open_{p.id}"):
                on_open(p)
            if c5.button("🗑️", key=f"delete_{p.id}"):
                on_delete(p.id)
