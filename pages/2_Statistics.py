import streamlit as st
import matplotlib.pyplot as plt

from controllers.data_controller import CONTROLLER_KEY
from controllers.stats_controller import compute_venue_stats, compute_team_stats
from common.ui import sidebar_header
from common.plots import plot_venue_bars, plot_team_home_away

# ------------------------------------------------------------
# Page setup & consistent sidebar
# ------------------------------------------------------------
SMALL_FIGSIZE = (5.2, 2.0)  # <- compact size for all charts
TOP_N_VENUES  = 20

st.set_page_config(page_title="Statistics", layout="wide")

def _ensure_controller():
    if st.session_state.get(CONTROLLER_KEY) is None:
        st.info("Go to **Map** to load the matches first.")
        st.stop()
    return st.session_state[CONTROLLER_KEY]


def main():
    sidebar_header(show_custom_nav=True)
    ctrl = _ensure_controller()

    rows = ctrl.view.rows
    st.header("Statistics — Current Selection")
    st.caption(f"**Teams:** {len(ctrl.teams)}  |  **Matches:** {len(rows)}")
    if rows.empty:
        st.info("No matches for the current selection.")
        st.stop()

    stats = compute_venue_stats(rows)
    team_stats = compute_team_stats(rows, ctrl.teams)

    c1, c2 = st.columns(2)
    with c1:
        st.subheader("Matches per venue")
        fig, ax = plt.subplots(figsize=SMALL_FIGSIZE, constrained_layout=True)
        plot_venue_bars(stats, "Matches", ax=ax, top_n=TOP_N_VENUES)
        st.pyplot(fig, use_container_width=True)
        plt.close(fig)
    with c2:
        st.subheader("Attendance per venue")
        fig, ax = plt.subplots(figsize=SMALL_FIGSIZE, constrained_layout=True)
        plot_venue_bars(stats, "Attendance", ax=ax, top_n=TOP_N_VENUES)
        st.pyplot(fig, use_container_width=True)
        plt.close(fig)

    st.subheader("Home / away matches per team")
    fig, ax = plt.subplots(figsize=(10.4, 2.4), constrained_layout=True)
    plot_team_home_away(team_stats, ax=ax)
    st.pyplot(fig, use_container_width=True)
    plt.close(fig)

    st.subheader("Venues")
    st.dataframe(stats, use_container_width=True, hide_index=True)

if __name__ == "__main__":
    main()
