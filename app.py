"""
Hotel Revenue Forecaster - Streamlit UI
A thin interface over the metrics engine, which is the single source of truth
"""

import hashlib
import json
from dataclasses import asdict

import streamlit as st
from loguru import logger

from config.default_params import DATA_DIR, DEFAULT_INPUTS, LOG_LEVEL
from engine.compute import compute
from utils.log_config import setup_logging
from utils.storage import ProjectNotFoundError, ProjectStore
from utils.validation import validate_inputs
from components.input_panel import load_into_session, render_input_panel
from components.calculator_tab import render_calculator_tab
from components.deal_tab import render_deal_tab
from components.portfolio_tab import render_portfolio_tab
from components.settings_tab import render_settings_tab


st.set_page_config(
    page_title="Hotel Revenue Forecaster",
    page_icon="🏨",
    layout="wide"
)

setup_logging(LOG_LEVEL)


@st.cache_resource
def get_store():
    return ProjectStore(DATA_DIR)


def hash_inputs(inputs):
    """Create hash of inputs for caching"""
    inputs_str = json.dumps(asdict(inputs), sort_keys=True, default=str)
    return hashlib.md5(inputs_str.encode()).hexdigest()


def apply_pending_load():
    """Load a project (or blank form) queued by a button on the previous run"""
    pending = st.session_state.pop('pending_load', None)
    if pending is None:
        return
    load_into_session(pending['inputs'])
    st.session_state['project_id'] = pending.get('project_id')


def main():
    store = get_store()
    settings = store.load_settings()

    apply_pending_load()
    inputs = render_input_panel(settings)

    issues = validate_inputs(inputs)
    for issue in issues:
        st.sidebar.warning(issue)

    # Recompute only when the input snapshot changes
    inputs_hash = hash_inputs(inputs)
    if 'engine' not in st.session_state or st.session_state['engine'].get('hash') != inputs_hash:
        st.session_state['engine'] = {
            'metrics': compute(inputs),
            'hash': inputs_hash,
        }
    metrics = st.session_state['engine']['metrics']

    def save_project():
        if issues:
            st.error("Fix the highlighted inputs before saving.")
            return
        project = store.save(inputs, metrics, project_id=st.session_state.get('project_id'))
        st.session_state['project_id'] = project.id
        st.toast(f"Saved {inputs.hotel_name or 'project'}")

    def open_project(project):
        st.session_state['pending_load'] = {'inputs': project.inputs.to_dict(), 'project_id': project.id}
        st.rerun()

    def delete_project(project_id):
        try:
            store.delete(project_id)
        except ProjectNotFoundError:
            logger.warning(f"Delete requested for unknown project {project_id}")
            st.error("That project no longer exists.")
            return
        if st.session_state.get('project_id') == project_id:
            st.session_state['project_id'] = None
        st.rerun()

    def save_settings(new_settings):
        store.save_settings(new_settings)
        st.session_state['default_interest_rate'] = new_settings.default_interest_rate

    st.title("🏨 Hotel Revenue Forecaster")
    st.caption(f"Welcome{', ' + settings.user_name if settings.user_name else ''} · "
               "Revenue, deal sheet and financing projections")

    if st.sidebar.button("🆕 New Project"):
        st.session_state['pending_load'] = {'inputs': dict(DEFAULT_INPUTS), 'project_id': None}
        st.rerun()

    tab1, tab2, tab3, tab4 = st.tabs(["📊 Calculator", "🤝 Deal Sheet", "🗂️ Portfolio", "⚙️ Settings"])

    with tab1:
        render_calculator_tab(inputs, metrics, settings, on_save=save_project)
    with tab2:
        render_deal_tab(inputs, metrics, settings)
    with tab3:
        render_portfolio_tab(store.list_projects(), settings, on_open=open_project, on_delete=delete_project)
    with tab4:
        render_settings_tab(settings, on_save=save_settings)


if __name__ == "__main__":
    main()
