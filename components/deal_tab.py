"""Deal sheet tab: GST/OTA/opex/MG waterfall, insights and structuring suggestions."""

import math

import streamlit as st

from engine.constants import BREAK_EVEN_UNREACHABLE, GST_RATE
from engine.sensitivity import rate_sweep
from utils.formatting import format_currency, format_number

RECOMMENDATIONS = {
    'lessee': (
        "Recommended: Fixed Lease (Lessee Model)",
        "Occupancy and margins are strong. Locking in a fixed MG keeps the upside as revenue grows.",
    ),
    'owner': (
        "Recommended: Revenue Share (Owner Model)",
        "Current metrics suggest volatility. A revenue share lowers the fixed monthly obligation "
        "and shares the risk with the brand.",
    ),
    'hybrid': (
        "Recommended: Hybrid / Flexi Deal",
        "The asset is stable but sensitive to rate changes. Consider a lower MG with a profit share "
        "above a threshold.",
    ),
}


def render_deal_summary(inputs, metrics, fmt):
    rows = [
        ("Business Advance", fmt(inputs.business_advance)),
        ("Security Deposit", fmt(inputs.security_deposit)),
        ("Gross Revenue", fmt(metrics.monthly_revenue)),
        (f"GST @ {GST_RATE:.0%}", fmt(metrics.deal_monthly_gst)),
        ("Rev minus GST", fmt(metrics.deal_revenue_net_gst)),
        (f"OTA @ {inputs.ota_percent:g}%", fmt(metrics.deal_ota_abs)),
        ("Opex", fmt(metrics.deal_opex_abs)),
        ("MG", fmt(metrics.monthly_mg)),
        ("Absolute CM", fmt(metrics.deal_absolute_cm)),
        ("CM %", f"{format_number(metrics.deal_cm_percent, 1)}%"),
        ("PBP", f"{metrics.deal_pbp_percent:.0f}%" if metrics.deal_absolute_cm > 0 else "n/a (CM ≤ 0)"),
    ]
    st.table({"Line": [r[0] for r in rows], "Monthly": [r[1] for r in rows]})


def render_insights(metrics, fmt):
    col1, col2, col3 = st.columns(3)
    with col1:
        if metrics.break_even_occupancy_deal >= BREAK_EVEN_UNREACHABLE:
            text = "never (each sold room loses money)"
        else:
            text = f"above {math.ceil(metrics.break_even_occupancy_deal)}% occupancy"
        st.info(f"**Profitability threshold**\n\nDeal becomes profitable {text}")
    with col2:
        if metrics.mg_consumption_percent is None:
            share = ">100"
        else:
            share = f"{metrics.mg_consumption_percent:.0f}"
        st.info(f"**MG consumption**\n\nMG consumes {share}% of gross margin")
    with col3:
        st.info(f"**ARR sensitivity**\n\n+100 on ARR improves CM by {fmt(metrics.arr_sensitivity)} / month")


def render_suggestions(inputs, metrics, fmt):
    title, reason = RECOMMENDATIONS[metrics.recommended_deal_type]
    st.success(f"**{title}**\n\n{reason}")

    score = max(0.0, min(100.0, metrics.deal_strength_score))
    st.progress(score / 100, text=f"Deal Strength Score: {metrics.deal_strength_score:.0f}/100")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Max Safe MG", fmt(metrics.max_safe_mg), help="Keeps a 25% buffer on NOI before MG")
    with col2:
        st.metric("Target MG (24% return)", fmt(metrics.target_mg_for_target_return))
    with col3:
        st.metric(
            "Hybrid Payout",
            fmt(metrics.hybrid_projected_payout),
            help=f"{fmt(metrics.hybrid_fixed_mg)} fixed + {metrics.hybrid_rev_share_percent:g}% of net revenue",
        )

    current = "Revenue Share" if inputs.deal_type == 'owner' else "Fixed Lease"
    within = metrics.monthly_mg <= metrics.max_safe_mg
    msg = (f"Current structure: {current}. Your MG of {fmt(inputs.monthly_mg)} is "
           f"{'within' if within else 'above'} the safe limit of {fmt(metrics.max_safe_mg)}.")
    if within:
        st.caption(msg)
    else:
        st.warning(msg)


def render_deal_tab(inputs, metrics, settings):
    fmt = lambda v: format_currency(v, settings.currency_symbol)

    st.header("Deal Sheet")
    col1, col2 = st.columns([1, 1])
    with col1:
        render_deal_summary(inputs, metrics, fmt)
    with col2:
        st.subheader("Deal Architect")
        render_suggestions(inputs, metrics, fmt)

    st.subheader("Deal Insights")
    render_insights(metrics, fmt)

    with st.expander("Room Rate Sensitivity"):
        df = rate_sweep(inputs)
        display_df = df.copy()
        for col in ['room_price', 'monthly_revenue', 'monthly_net', 'deal_absolute_cm']:
            display_df[col] = display_df[col].apply(fmt)
        display_df['deal_cm_percent'] = display_df['deal_cm_percent'].apply(lambda x: f"{x:.1f}%")
        st.dataframe(display_df, use_container_width=True, hide_index=True)
