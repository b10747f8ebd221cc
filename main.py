"""
Main application entry for the J.League match map Streamlit app.

This module defines the top-level Streamlit page that users see when they
open the app. It handles:
    - application configuration (`st.set_page_config`),
    - environment variable loading via `python-dotenv` (in `common.constants`),
    - the sidebar team filter (one checkbox per team, grouped by league, plus
        select-all / clear / select-league buttons),
    - drawing the venue map and the match table from the session's
        `ViewController` (via `controllers.data_controller`).

Every filter widget changes the selection through a callback on the
controller, which re-runs the query before the page reruns; the page body only
draws `ctrl.view` and `ctrl.markers`. Clicking a table row opens that venue's
popup under the map.
"""

# Import libraries
import streamlit as st

from controllers.data_controller import get_view_controller
from common.constants import COMPETITION_YEARS
from common.maps import build_deck
from common.ui import sidebar_header, sync_team_checkboxes, team_key
from common.view import POPUP_FIELDS

# Configure Streamlit page (`.env` is loaded by common.constants).
st.set_page_config(page_title="J Match Map", layout="wide")

TABLE_COLUMNS = [
    "year", "tournaments", "section", "date", "kickoff", "home", "score", "away",
    "venue", "venueLongName", "attendance", "broadcast",
]

# ---------- widget callbacks ----------
def _on_team_toggle(team: str):
    get_view_controller().toggle_team(team, bool(st.session_state[team_key(team)]))

def _on_select_all():
    ctrl = get_view_controller()
    ctrl.select_all()
    sync_team_checkboxes(ctrl.all_teams, ctrl.teams)

def _on_clear():
    ctrl = get_view_controller()
    ctrl.clear()
    sync_team_checkboxes(ctrl.all_teams, ctrl.teams)

def _on_select_league(league: str):
    ctrl = get_view_controller()
    ctrl.select_league(league)
    sync_team_checkboxes(ctrl.all_teams, ctrl.teams)


def team_filter(ctrl):
    with st.sidebar:
        st.markdown("#### Teams")
        c1, c2 = st.columns(2)
        c1.button("Select all", on_click=_on_select_all, use_container_width=True)
        c2.button("Clear", on_click=_on_clear, use_container_width=True)

        cols = st.columns(max(1, len(ctrl.leagues)))
        for col, league in zip(cols, ctrl.leagues):
            col.button(league, key=f"league::{league}", on_click=_on_select_league,
                       args=(league,), use_container_width=True)

        for league, teams in ctrl.leagues.items():
            with st.expander(league, expanded=False):
                for team in teams:
                    key = team_key(team)
                    if key not in st.session_state:
                        st.session_state[key] = ctrl.is_selected(team)
                    st.checkbox(team, key=key, on_change=_on_team_toggle, args=(team,))


def main():
    sidebar_header(show_custom_nav=True)

    try:
        ctrl = get_view_controller()
    except FileNotFoundError as e:
        st.error(f"Data file not found: {e.filename}. Run the fetch jobs first (see README).")
        st.stop()

    team_filter(ctrl)

    st.title(f"⚽ J.League {COMPETITION_YEARS} — Matches & Venues")
    view = ctrl.view
    st.caption(f"**Teams:** {len(ctrl.teams)}  |  **Matches:** {len(view.rows)}  |  **Venues:** {len(view.features)}")

    missing = ctrl.db.unmatched_venue_codes()
    if missing:
        st.warning("Matches at venues without coordinates are not shown: " + ", ".join(missing))

    # Map first on the page, drawn after the table so the row selection is known.
    map_box = st.container()

    if view.rows.empty:
        st.info("No matches for the current selection.")
    else:
        # A new key per filter generation drops the previous table's selection.
        event = st.dataframe(
            view.rows[TABLE_COLUMNS],
            use_container_width=True,
            hide_index=True,
            on_select="rerun",
            selection_mode="single-row",
            key=f"match_table_{ctrl.generation}",
        )
        selected_rows = event.selection.rows
        ctrl.select_row(selected_rows[0] if selected_rows else None)

    with map_box:
        st.pydeck_chart(build_deck(ctrl.markers, ctrl.selected_venue))
        feature = ctrl.selected_feature
        if feature is not None:
            props = feature["properties"]
            st.subheader(f'📍 {props["longName"] or props["shortName"]}')
            st.dataframe(props["matches"], column_order=POPUP_FIELDS, use_container_width=True, hide_index=True)

if __name__ == "__main__":
    main()
