"""
View controller keeping the match table and the venue map in sync.

The controller owns the three pieces of state the pages share:
    - the current team filter (a frozenset of team names),
    - the current `MatchView` (table rows + venue features) and the marker
        frame drawn by the map, always rebuilt together, and
    - the venue whose popup is open, set by clicking a table row.

Every filter action (a checkbox, select all, clear, select a league, the
initial load) funnels into `set_filter`, which re-runs the query and replaces
both views in full. Each run takes a generation token; a result delivered
with an outdated token is dropped so a slow query can never overwrite the
view of a newer filter.

An instance lives in `st.session_state["view_controller"]`; nothing in this
module imports Streamlit.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from common.maps import markers_frame
from common.query import RESULT_COLUMNS, MatchDatabase
from common.view import MatchView, build_view, teams_by_league


class ViewController:
    def __init__(self, db: MatchDatabase):
        self.db = db
        self.all_teams: List[str] = db.teams()
        self.leagues: Dict[str, List[str]] = teams_by_league(db)
        self.teams: frozenset = frozenset()
        self.generation = 0
        self.view = MatchView(rows=pd.DataFrame(columns=RESULT_COLUMNS))
        self.markers = markers_frame([])
        self.selected_venue: Optional[str] = None

    # ---------- stale-result guard ----------
    def begin_request(self) -> int:
        self.generation += 1
        return self.generation

    def apply_result(self, token: int, view: MatchView) -> bool:
        """Install `view` unless a newer request superseded `token`."""
        if token != self.generation:
            return False
        self.view = view
        self.markers = markers_frame(view.features)  # replaced in full, never diffed
        self.selected_venue = None
        return True

    # ---------- filter transitions ----------
    def set_filter(self, teams: Iterable[str]) -> MatchView:
        self.teams = frozenset(teams)
        token = self.begin_request()
        self.apply_result(token, build_view(self.db, self.teams))
        return self.view

    def load(self) -> MatchView:
        """Initial load: everything selected."""
        return self.set_filter(self.all_teams)

    def select_all(self) -> MatchView:
        return self.set_filter(self.all_teams)

    def clear(self) -> MatchView:
        return self.set_filter(())

    def select_league(self, league: str) -> MatchView:
        """Replace the selection with the teams of one league."""
        return self.set_filter(self.leagues.get(league, []))

    def toggle_team(self, team: str, checked: bool) -> MatchView:
        teams = set(self.teams)
        if checked:
            teams.add(team)
        else:
            teams.discard(team)
        return self.set_filter(teams)

    # ---------- table -> map ----------
    def select_row(self, index: Optional[int]) -> Optional[Dict[str, Any]]:
        """Open the popup of the venue hosting table row `index`, closing any other."""
        feature = None if index is None else self.view.feature_for_row(index)
        self.selected_venue = feature["properties"]["shortName"] if feature else None
        return feature

    @property
    def selected_feature(self) -> Optional[Dict[str, Any]]:
        if self.selected_venue is None:
            return None
        return next(
            (f for f in self.view.features if f["properties"]["shortName"] == self.selected_venue),
            None,
        )

    def is_selected(self, team: str) -> bool:
        return team in self.teams
