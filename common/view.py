"""
Pure derivations from (filter state, match/venue data) to what the pages draw.

    - `build_view(db, teams)` runs the filtered query and returns a `MatchView`
        with the table rows and the map features.
    - `build_features(rows)` groups result rows by venue into GeoJSON Point
        features, each carrying the venue's matches for its popup.
    - `teams_by_league(db)` groups team names under J1/J2/J3 for the
        select-by-league actions.

No Streamlit here; the functions are exercised directly by the tests.
"""

from __future__ import annotations
import html, re
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from common.constants import LEAGUE_PATTERN, LEAGUES, OTHER_LEAGUE
from common.query import MatchDatabase, query_matches
from common.utils import nfkc

_LEAGUE_RE = re.compile(LEAGUE_PATTERN)

POPUP_FIELDS = ["date", "kickoff", "tournaments", "section", "home", "score", "away"]


@dataclass
class MatchView:
    rows: pd.DataFrame
    features: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def venue_codes(self) -> List[str]:
        return [f["properties"]["shortName"] for f in self.features]

    def feature_for_row(self, index: int) -> Optional[Dict[str, Any]]:
        """Feature of the venue hosting table row `index` (None if out of range)."""
        if index < 0 or index >= len(self.rows):
            return None
        code = self.rows.iloc[index]["venue"]
        return next((f for f in self.features if f["properties"]["shortName"] == code), None)


def build_features(rows: pd.DataFrame) -> List[Dict[str, Any]]:
    """One feature per venue with at least one row, in first-appearance order."""
    features = []
    if rows.empty:
        return features
    for code, group in rows.groupby("venue", sort=False):
        first = group.iloc[0]
        features.append({
            "type": "Feature",
            "geometry": {
                "type": "Point",
                "coordinates": [float(first["longitude"]), float(first["latitude"])],
            },
            "properties": {
                "shortName": code,
                "longName": first["venueLongName"],
                "matches": group[POPUP_FIELDS].to_dict(orient="records"),
            },
        })
    return features


def build_view(db: MatchDatabase, teams: Iterable[str]) -> MatchView:
    rows = query_matches(db, teams).reset_index(drop=True)
    return MatchView(rows=rows, features=build_features(rows))


def league_of(tournament: str) -> Optional[str]:
    m = _LEAGUE_RE.search(nfkc(tournament))
    if not m:
        return None
    league = f"J{m.group(1)}"
    return league if league in LEAGUES else None


def teams_by_league(db: MatchDatabase) -> Dict[str, List[str]]:
    """
    League -> sorted team names. A team belongs to the league it plays most
    of its league matches in; teams with no league match go to OTHER_LEAGUE.
    """
    counts: Dict[str, Counter] = defaultdict(Counter)
    pairs = db.team_tournaments()
    for team, tournament in zip(pairs["team"], pairs["tournaments"]):
        if not team:
            continue
        league = league_of(tournament)
        tally = counts[team]
        if league is not None:
            tally[league] += 1

    order = [*LEAGUES, OTHER_LEAGUE]
    grouped: Dict[str, List[str]] = {league: [] for league in order}
    for team in sorted(counts):
        played = {lg: n for lg, n in counts[team].items() if n > 0}
        # ties go to the higher division
        league = max(played, key=lambda lg: (played[lg], -order.index(lg))) if played else OTHER_LEAGUE
        grouped[league].append(team)
    return {league: teams for league, teams in grouped.items() if teams}


def popup_html(feature: Dict[str, Any]) -> str:
    """Short HTML listing of a venue's matches, used for map tooltips."""
    props = feature["properties"]
    lines = [f"<b>{html.escape(props['longName'] or props['shortName'])}</b>"]
    for m in props["matches"]:
        cells = (m["date"], m["kickoff"], m["home"], m["score"], m["away"])
        lines.append(html.escape(" ".join(str(c) for c in cells)))
    return "<br/>".join(lines)
