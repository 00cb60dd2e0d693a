"""Sidebar widget state to InputState"""
from dataclasses import fields
from config.default_params import DEFAULT_INPUTS
from engine.models import InputState
from components.input_panel import form_from_state, widget_key
from utils.validation import inputs_from_form

def session_state(**overrides):
    """Widget keys as the sidebar leaves them after a run"""
    state = {widget_key(name): value for name, value in DEFAULT_INPUTS.items() if name != 'extra_deductions'}
    state['extra_deductions'] = []
    for name, value in overrides.items():
        state[widget_key(name)] = value
    return state

def test_defaults_cover_every_input_field():
    assert set(DEFAULT_INPUTS) == {f.name for f in fields(InputState)}

def test_default_form_is_flagship():
    inputs = inputs_from_form(form_from_state(session_state()))
    assert inputs.category == "Flagship"
    assert inputs.total_rooms == 32

def test_all_amenities_reach_inputs():
    state = session_state(has_kitchen=True, has_restaurant=True, has_gym=True)
    inputs = inputs_from_form(form_from_state(state))
    assert (inputs.has_kitchen, inputs.has_restaurant, inputs.has_gym) == (True, True, True)
    assert inputs.category == "Palette"

def test_kitchen_and_restaurant_is_townhouse():
    state = session_state(has_kitchen=True, has_restaurant=True)
    assert inputs_from_form(form_from_state(state)).category == "Townhouse"

def test_deduction_rows_carried_through():
    state = session_state()
    state['extra_deductions'] = [{'id': 'abc123', 'name': 'Salaries', 'amount': 40_000}]
    inputs = inputs_from_form(form_from_state(state))
    assert inputs.extra_deductions[0].id == 'abc123'
    assert inputs.extra_deductions[0].amount == 40_000
