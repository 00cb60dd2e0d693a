"""App settings: user name, currency symbol, default interest rate."""

import streamlit as st

from engine.models import AppSettings


def render_settings_tab(settings, on_save):
    st.header("Settings")
    with st.form("settings_form"):
        user_name = st.text_input("Your name", value=settings.user_name)
        currency_symbol = st.text_input("Currency symbol", value=settings.currency_symbol, max_chars=3)
        default_rate = st.number_input(
            "Default loan interest rate (% p.a.)",
            min_value=0.0, max_value=50.0, step=0.25,
            value=float(settings.default_interest_rate),
            help="Pre-filled when financing is switched on for a new project",
        )
        if st.form_submit_button("Save Settings"):
            on_save(AppSettings(
                user_name=user_name.strip(),
                currency_symbol=currency_symbol.strip() or "₹",
                default_interest_rate=default_rate,
            ))
            st.success("Settings saved")
