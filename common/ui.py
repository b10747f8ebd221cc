# common/ui.py
from __future__ import annotations
import streamlit as st

from common.constants import APP_ROOT, COMPETITION_YEARS


def _link_if_exists(rel_path: str, label: str, icon: str = "📄"):
    """Safely add a page link if the target file exists."""
    target = (APP_ROOT / rel_path)
    if target.exists():
        # Streamlit expects an app-relative path with forward slashes
        st.sidebar.page_link(rel_path.replace("\\", "/"), label=label, icon=icon)

def sidebar_header(show_custom_nav: bool = False):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown(f"**Season:** {COMPETITION_YEARS}")
        if show_custom_nav:
            st.divider()
            st.markdown("#### Pages")
            _link_if_exists("main.py", label="Map", icon="🗾")
            _link_if_exists("pages/2_Statistics.py", label="Statistics", icon="📊")

def team_key(team: str) -> str:
    """Widget key of a team checkbox."""
    return f"team::{team}"

def sync_team_checkboxes(teams, selected) -> None:
    """Set every team checkbox to match `selected` (call from widget callbacks only)."""
    for team in teams:
        st.session_state[team_key(team)] = team in selected
