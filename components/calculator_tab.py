"""Revenue calculator tab: summary cards, deduction table, financing, charts and exports."""

import pandas as pd
import streamlit as st

from engine.finance import amortization_schedule
from engine.sensitivity import occupancy_sweep
from utils.exports import metrics_frame, report_filename, to_csv_bytes, to_excel_bytes, XLSX_MIME
from utils.formatting import format_currency, format_number, format_payback
from utils.visualizations import (
    create_expense_breakdown_chart,
    create_revenue_vs_net_chart,
    create_sensitivity_chart,
    create_amortization_chart,
)


def render_summary_cards(metrics, fmt):
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Sold Rooms / Night", format_number(metrics.srn, 1))
    with col2:
        st.metric("Monthly Revenue", fmt(metrics.monthly_revenue))
    with col3:
        st.metric("Monthly Net (NOI)", fmt(metrics.monthly_net))
    with col4:
        st.metric("Net Margin", f"{format_number(metrics.net_margin_percent, 0)}%")


def render_revenue_table(inputs, metrics, fmt):
    df = metrics_frame(inputs, metrics)
    display_df = df.copy()
    for col in ['Daily', 'Monthly', 'Yearly']:
        display_df[col] = display_df[col].apply(lambda x: fmt(x) if pd.notna(x) else "—")
    st.dataframe(display_df, use_container_width=True, hide_index=True)


def render_financial_overview(inputs, metrics, fmt):
    st.subheader("Investment Overview")
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("ROI (cash-on-cash)", f"{format_number(metrics.roi, 1)}%")
    with col2:
        st.metric("DSCR", f"{format_number(metrics.dscr, 2)}x")
        if metrics.monthly_emi > 0:
            if metrics.dscr < 1:
                st.caption("Critical: income covers <100% of debt")
            else:
                st.caption("Healthy: income covers debt")
    with col3:
        st.metric("Valuation (10% cap)", fmt(metrics.valuation))
    with col4:
        st.metric("Payback", format_payback(metrics.payback_period) if metrics.pays_back else "Never")

    if metrics.monthly_emi > 0:
        st.caption(f"Monthly EMI: {fmt(metrics.monthly_emi)} · Monthly cash flow: {fmt(metrics.monthly_cash_flow)}")

    if metrics.cash_flow_negative:
        st.error(
            f"**Warning: Negative Cash Flow.** Net operating income ({fmt(metrics.monthly_net)}) "
            f"does not cover the monthly EMI ({fmt(metrics.monthly_emi)}). "
            f"You will need to inject {fmt(abs(metrics.monthly_cash_flow))} every month."
        )

    if metrics.monthly_emi > 0:
        with st.expander("View Amortization Schedule"):
            schedule = amortization_schedule(inputs.loan_amount, inputs.interest_rate, inputs.loan_term_years)
            st.plotly_chart(create_amortization_chart(schedule), use_container_width=True)
            sched_df = pd.DataFrame(schedule)
            for col in ['payment', 'interest', 'principal', 'balance']:
                sched_df[col] = sched_df[col].apply(fmt)
            st.dataframe(sched_df, use_container_width=True, hide_index=True)


def render_exports(inputs, metrics):
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "📄 Download Report (CSV)",
            data=to_csv_bytes(inputs, metrics),
            file_name=report_filename(inputs.hotel_name, "csv"),
            mime="text/csv"
        )
    with col2:
        st.download_button(
            "📊 Download Report (Excel)",
            data=to_excel_bytes(inputs, metrics),
            file_name=report_filename(inputs.hotel_name, "xlsx"),
            mime=XLSX_MIME
        )


def render_calculator_tab(inputs, metrics, settings, on_save):
    """Render the calculator view for the current inputs."""
    fmt = lambda v: format_currency(v, settings.currency_symbol)

    header_col, save_col = st.columns([4, 1])
    with header_col:
        st.header(inputs.hotel_name or "Untitled Property")
        st.caption(f"{inputs.category} · {int(inputs.total_rooms)} rooms")
    with save_col:
        if st.button("💾 Save Project", use_container_width=True):
            on_save()

    render_summary_cards(metrics, fmt)

    st.subheader("Revenue & Deductions")
    render_revenue_table(inputs, metrics, fmt)
    st.caption(
        "Projections use a fixed 30-day month and 365-day year with linear extrapolation; "
        "no seasonality or compounding is applied."
    )

    if inputs.include_financials:
        render_financial_overview(inputs, metrics, fmt)
    else:
        st.metric("Valuation (10% cap)", fmt(metrics.valuation))

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(create_expense_breakdown_chart(metrics), use_container_width=True)
    with col2:
        st.plotly_chart(create_revenue_vs_net_chart(metrics), use_container_width=True)

    sweep = occupancy_sweep(inputs)
    st.plotly_chart(create_sensitivity_chart(sweep, inputs.occupancy_percent), use_container_width=True)

    st.subheader("Export")
    render_exports(inputs, metrics)
