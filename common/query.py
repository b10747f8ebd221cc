"""
In-memory SQL store for the match and venue snapshots.

`MatchDatabase` registers the two JSON tables into a private SQLite
connection (through pandas) and answers filtered SELECTs as DataFrames.
`build_filtered_query` is kept separate so the SQL it produces can be checked
without a database.

Result ordering is match day (undated matches last), kickoff, tournament,
section. Rows with equal keys come back in source-file order (`src_order`),
so the table does not reshuffle between reruns.
"""

from __future__ import annotations
import logging
import sqlite3
import threading
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from common.constants import MATCH_FIELDS
from common.utils import sort_date

logger = logging.getLogger(__name__)

RESULT_COLUMNS = MATCH_FIELDS[:9] + ["venueLongName", "latitude", "longitude"] + MATCH_FIELDS[9:]

_SELECT = """
SELECT
  matches.year,
  matches.tournaments,
  matches.section,
  matches.date,
  matches.kickoff,
  matches.home,
  matches.score,
  matches.away,
  matches.venue,
  venues.longName AS venueLongName,
  venues.lat AS latitude,
  venues.lon AS longitude,
  matches.attendance,
  matches.broadcast
FROM matches
JOIN venues ON matches.venue = venues.shortName
"""

_ORDER_BY = """
ORDER BY
  matches.sort_date = '',
  matches.sort_date,
  matches.kickoff,
  matches.tournaments,
  matches.section,
  matches.src_order
"""


def build_filtered_query(teams: Iterable[str]) -> Tuple[str, List[str]]:
    """
    SQL + bound parameters selecting matches where home or away is in `teams`.
    Raises ValueError on an empty selection (callers short-circuit instead).
    """
    teams = sorted(set(teams))
    if not teams:
        raise ValueError("empty team selection has no query")
    marks = ", ".join("?" for _ in teams)
    sql = f"{_SELECT}WHERE matches.home IN ({marks}) OR matches.away IN ({marks})\n{_ORDER_BY}"
    return sql, teams + teams


def matches_frame(matches: Sequence[Dict[str, Any]]) -> pd.DataFrame:
    """Match records -> table frame with the derived `sort_date` and `src_order`."""
    df = pd.DataFrame(list(matches), columns=MATCH_FIELDS).fillna("").astype(str)
    df["sort_date"] = [sort_date(d, y) for d, y in zip(df["date"], df["year"])]
    df["src_order"] = range(len(df))
    return df


def venues_frame(venues: Sequence[Dict[str, Any]]) -> pd.DataFrame:
    df = pd.DataFrame(list(venues), columns=["shortName", "longName", "lat", "lon"])
    df["shortName"] = df["shortName"].astype(str)
    df["longName"] = df["longName"].fillna("").astype(str)
    return df


class MatchDatabase:
    """Owns one SQLite connection holding the `matches` and `venues` tables."""

    def __init__(self, matches: Sequence[Dict[str, Any]], venues: Sequence[Dict[str, Any]]):
        # One instance per process (st.cache_resource) is shared by every
        # session thread; reads are serialized on `_lock`.
        self.con = sqlite3.connect(":memory:", check_same_thread=False)
        self._lock = threading.Lock()
        matches_frame(matches).to_sql("matches", self.con, index=False)
        venues_frame(venues).to_sql("venues", self.con, index=False)
        logger.debug(f"loaded {len(matches)} matches and {len(venues)} venues")

    def close(self) -> None:
        self.con.close()

    def read(self, sql: str, params: Optional[Sequence[Any]] = None) -> pd.DataFrame:
        with self._lock:
            return pd.read_sql_query(sql, self.con, params=params)

    def all_matches(self) -> pd.DataFrame:
        return self.read(_SELECT + _ORDER_BY)

    def teams(self) -> List[str]:
        df = self.read("SELECT home AS team FROM matches UNION SELECT away FROM matches ORDER BY team")
        return [t for t in df["team"].tolist() if t]

    def team_tournaments(self) -> pd.DataFrame:
        """(team, tournaments) pairs, one row per match side."""
        return self.read(
            "SELECT home AS team, tournaments FROM matches "
            "UNION ALL SELECT away AS team, tournaments FROM matches"
        )

    def unmatched_venue_codes(self) -> List[str]:
        """Venue codes used by matches but missing from the venue table."""
        df = self.read(
            "SELECT DISTINCT matches.venue FROM matches "
            "LEFT JOIN venues ON matches.venue = venues.shortName "
            "WHERE venues.shortName IS NULL ORDER BY matches.venue"
        )
        return df["venue"].tolist()


def query_matches(db: MatchDatabase, teams: Iterable[str]) -> pd.DataFrame:
    teams = set(teams)
    if not teams:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    sql, params = build_filtered_query(teams)
    return db.read(sql, params)
