"""
pathtracker - Learning Progress Dashboard

Streamlit application for following a learner through the curriculum.
Shows weighted progress, stage breakdown, achievements and next steps.

Usage:
    streamlit run app.py
"""

import os
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

from pathtracker.cli import PROGRESS_FILE_ENV_VAR
from pathtracker.schemas import LearningStage, LearningUnitStatus, StatusTransitionError
from pathtracker.tracking import (
    ProgressFileError,
    ProgressStore,
    check_achievements,
    create_tracker,
)
from pathtracker.utils import configure_logging, load_dashboard_config
from pathtracker.viewer import (
    STATUS_ICONS,
    collect_dashboard_data,
    get_dashboard_css,
    render_html_sections,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

load_dotenv()
configure_logging()

DEFAULT_PROGRESS_PATH = Path(os.getenv(PROGRESS_FILE_ENV_VAR, "progress.json"))

st.set_page_config(
    page_title="pathtracker",
    page_icon="🎯",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "store" not in st.session_state:
        st.session_state.store = ProgressStore(DEFAULT_PROGRESS_PATH)

    if "tracker" not in st.session_state:
        store = st.session_state.store
        st.session_state.load_error = None
        if store.exists():
            try:
                st.session_state.tracker = store.load()
            except ProgressFileError as e:
                st.session_state.tracker = None
                st.session_state.load_error = str(e)
        else:
            st.session_state.tracker = None

    if "config" not in st.session_state:
        st.session_state.config = load_dashboard_config()

    if "unlocked_notice" not in st.session_state:
        st.session_state.unlocked_notice = []


# -----------------------------------------------------------------------------
# Sidebar: Curriculum Tree
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with progress summary and curriculum tree."""
    st.sidebar.title("🎯 pathtracker")

    tracker = st.session_state.tracker
    if not tracker:
        render_create_form()
        return

    data = collect_dashboard_data(tracker)
    stats = data.stats

    st.sidebar.markdown(f"""
    **{tracker.learner_name}**

    **Progress:** {stats.completed_units}/{stats.total_units} units ({stats.overall_progress:.1f}%)
    """)
    st.sidebar.progress(min(stats.overall_progress / 100, 1.0))
    st.sidebar.caption(f"Current stage: {stats.current_stage.display_name}")

    render_curriculum_tree()


def render_create_form():
    """Offer to create a progress file when none exists yet."""
    if st.session_state.load_error:
        st.sidebar.error(st.session_state.load_error)
        return

    st.sidebar.info(f"No progress file at {st.session_state.store.path}")
    name = st.sidebar.text_input("Learner name")
    curriculum = st.sidebar.selectbox("Curriculum", ["starter", "full"])
    if st.sidebar.button("Create tracker", type="primary", disabled=not name):
        tracker = create_tracker(name, curriculum=curriculum)
        st.session_state.store.save(tracker)
        st.session_state.tracker = tracker
        st.rerun()


def render_curriculum_tree():
    """Render every stage with its units and action buttons."""
    tracker = st.session_state.tracker
    current_stage = collect_dashboard_data(tracker).stats.current_stage

    st.sidebar.divider()
    st.sidebar.subheader("Curriculum")

    for stage in LearningStage.all_stages():
        units = tracker.units_in_stage(stage)
        done = sum(1 for u in units if u.is_completed)
        with st.sidebar.expander(f"**{stage.display_name}** ({done}/{len(units)})", expanded=stage == current_stage):
            if not units:
                st.caption("No units yet")
            for unit in units:
                st.markdown(f"{STATUS_ICONS[unit.status]} {unit.name}")
                render_unit_actions(unit)


def render_unit_actions(unit):
    """Start/complete/skip buttons for a unit, disabled where the transition is illegal."""
    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("Start", key=f"start_{unit.id}", disabled=unit.status != LearningUnitStatus.NOT_STARTED):
            apply_action(unit.id, "start")
    with col2:
        if st.button("Done", key=f"complete_{unit.id}", disabled=unit.status.is_terminal):
            apply_action(unit.id, "complete")
    with col3:
        if st.button("Skip", key=f"skip_{unit.id}", disabled=unit.status.is_terminal):
            apply_action(unit.id, "skip")


def apply_action(unit_id: str, action: str):
    """Apply a transition, evaluate achievements and save."""
    tracker = st.session_state.tracker
    try:
        if action == "start":
            tracker.start_unit(unit_id)
        elif action == "complete":
            tracker.complete_unit(unit_id)
        else:
            tracker.skip_unit(unit_id)
    except StatusTransitionError as e:
        st.sidebar.error(str(e))
        return

    newly_unlocked = check_achievements(tracker)
    st.session_state.unlocked_notice = [tracker.get_achievement(a).name for a in newly_unlocked]
    st.session_state.store.save(tracker)
    st.rerun()


# -----------------------------------------------------------------------------
# Main Content: Dashboard View
# -----------------------------------------------------------------------------

def render_dashboard_view():
    """Render the dashboard sections in the main area."""
    tracker = st.session_state.tracker
    if not tracker:
        st.info("Create a tracker from the sidebar, or run:")
        st.code("pathtracker init \"Your Name\" --output progress.json")
        return

    for name in st.session_state.unlocked_notice:
        st.success(f"🏆 Achievement unlocked: {name}")
    st.session_state.unlocked_notice = []

    config = st.session_state.config
    st.markdown(get_dashboard_css(config.theme), unsafe_allow_html=True)
    for _, chunk in render_html_sections(collect_dashboard_data(tracker), config):
        st.markdown(chunk, unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()
    render_dashboard_view()


if __name__ == "__main__":
    main()
