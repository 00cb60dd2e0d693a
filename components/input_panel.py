"""Sidebar form that produces the engine's InputState."""

import streamlit as st

from config.default_params import (
    DEFAULT_INPUTS, FINANCING_DEFAULTS, OCCUPANCY_PRESETS, ROOM_PRESETS, PRICE_PRESETS
)
from engine.models import ExtraDeduction
from utils.validation import inputs_from_form

KEY_PREFIX = "in_"


def widget_key(name):
    return f"{KEY_PREFIX}{name}"


def load_into_session(inputs_dict):
    """Push a stored/default input dict into the widget keys (before widgets render)."""
    for name, value in inputs_dict.items():
        if name == 'extra_deductions':
            st.session_state['extra_deductions'] = [
                dict(d) if isinstance(d, dict) else dict(d.__dict__) for d in value
            ]
        elif name in DEFAULT_INPUTS:
            # number widgets reject values whose type differs from their step
            kind = type(DEFAULT_INPUTS[name])
            st.session_state[widget_key(name)] = kind(value) if kind in (int, float) else value


def form_from_state(state):
    """Collect every widget value (plus the deduction rows) into a raw form dict."""
    form = {
        name: state.get(widget_key(name))
        for name in DEFAULT_INPUTS if name != 'extra_deductions'
    }
    form['extra_deductions'] = state.get('extra_deductions', [])
    return form


def init_session(settings):
    if 'extra_deductions' not in st.session_state:
        load_into_session(DEFAULT_INPUTS)
        st.session_state['project_id'] = None
        st.session_state['default_interest_rate'] = settings.default_interest_rate


def _set_value(name, value):
    st.session_state[widget_key(name)] = value


def _preset_row(label, presets, name, suffix=""):
    # callbacks run before the next script pass, so the widget picks the value up
    cols = st.columns(len(presets))
    for col, value in zip(cols, presets):
        col.button(f"{value}{suffix}", key=f"preset_{name}_{value}", help=f"Set {label} to {value}",
                   on_click=_set_value, args=(name, value))


def _extra_deductions_editor():
    st.subheader("Extra Monthly Deductions")
    rows = st.session_state['extra_deductions']
    keep = []
    for row in rows:
        c1, c2, c3 = st.columns([3, 3, 1])
        row['name'] = c1.text_input("Name", value=row.get('name', ''), key=f"ded_name_{row['id']}",
                                    label_visibility="collapsed", placeholder="e.g. Salaries")
        row['amount'] = c2.number_input("Amount", min_value=0.0, value=float(row.get('amount') or 0),
                                        step=1000.0, key=f"ded_amt_{row['id']}",
                                        label_visibility="collapsed")
        if not c3.button("✕", key=f"ded_del_{row['id']}"):
            keep.append(row)
    if len(keep) != len(rows):
        st.session_state['extra_deductions'] = keep
        st.rerun()
    if st.button("➕ Add deduction"):
        st.session_state['extra_deductions'].append(ExtraDeduction(name="", amount=0).__dict__)
        st.rerun()


def render_input_panel(settings):
    """Render the form in the sidebar and return the current InputState."""
    init_session(settings)
    sb = st.sidebar
    with sb:
        st.header("🏨 Property")
        st.text_input("Hotel name", key=widget_key('hotel_name'))

        st.number_input("Total rooms", min_value=0, step=1, key=widget_key('total_rooms'))
        _preset_row("rooms", ROOM_PRESETS, 'total_rooms')

        st.slider("Occupancy (%)", 0, 100, key=widget_key('occupancy_percent'))
        _preset_row("occupancy", OCCUPANCY_PRESETS, 'occupancy_percent', "%")

        st.number_input("Average room rate (ARR)", min_value=0, step=50, key=widget_key('room_price'))
        _preset_row("room rate", PRICE_PRESETS, 'room_price')

        st.checkbox("Round sold rooms to whole rooms", key=widget_key('round_srn'))
        st.number_input("Opex per sold room / night", min_value=0, step=10,
                        key=widget_key('maintenance_cost_per_room'))

        st.subheader("Amenities")
        st.checkbox("Kitchen", key=widget_key('has_kitchen'))
        st.checkbox("Restaurant", key=widget_key('has_restaurant'))
        st.checkbox("Gym", key=widget_key('has_gym'))

        st.header("🤝 Deal Terms")
        st.radio("Deal type", ['owner', 'lessee'], horizontal=True, key=widget_key('deal_type'),
                 format_func=lambda v: "Revenue Share (Owner)" if v == 'owner' else "Fixed Lease (Lessee)")
        st.number_input("OTA commission (%)", min_value=0.0, max_value=100.0, step=0.5,
                        key=widget_key('ota_percent'))
        st.number_input("Monthly MG", min_value=0, step=5000, key=widget_key('monthly_mg'))
        st.number_input("Security deposit", min_value=0, step=10000, key=widget_key('security_deposit'))
        st.number_input("Business advance", min_value=0, step=10000, key=widget_key('business_advance'))

        _extra_deductions_editor()

        st.header("🏦 Financing")
        include = st.checkbox("Include property financing", key=widget_key('include_financials'))
        if include:
            # First activation: seed sensible financing defaults
            if not st.session_state.get(widget_key('property_value')):
                st.session_state[widget_key('property_value')] = FINANCING_DEFAULTS['property_value']
                st.session_state[widget_key('loan_term_years')] = FINANCING_DEFAULTS['loan_term_years']
                st.session_state[widget_key('interest_rate')] = float(st.session_state['default_interest_rate'])
            st.number_input("Property value", min_value=0, step=100000, key=widget_key('property_value'))
            st.number_input("Loan amount", min_value=0, step=100000, key=widget_key('loan_amount'))
            st.number_input("Interest rate (% p.a.)", min_value=0.0, step=0.25, key=widget_key('interest_rate'))
            st.number_input("Loan term (years)", min_value=0, step=1, key=widget_key('loan_term_years'))

    return inputs_from_form(form_from_state(st.session_state))
