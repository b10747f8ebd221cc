import pandas as pd
from common.utils import parse_attendance

STATS_COLUMNS = ["venue", "venueLongName", "Matches", "Attendance", "AverageAttendance"]

def compute_venue_stats(rows: pd.DataFrame) -> pd.DataFrame:
    """Matches and attendance per venue for the currently shown rows."""
    if rows.empty:
        return pd.DataFrame(columns=STATS_COLUMNS)

    df = rows[["venue", "venueLongName", "attendance"]].copy()
    df["Attendance"] = df["attendance"].map(parse_attendance)

    # 1) Count of matches and attendance by venue
    stats = (
        df.groupby(["venue", "venueLongName"], dropna=False, sort=False)
        .agg(Matches=("Attendance", "size"), Attendance=("Attendance", "sum"))
        .reset_index()
    )

    # 2) Average over matches that reported a crowd (unplayed ones show blank)
    played = df[df["Attendance"] > 0].groupby("venue")["Attendance"].mean()
    stats["AverageAttendance"] = stats["venue"].map(played).fillna(0).round().astype(int)

    return stats.sort_values(["Matches", "Attendance"], ascending=False, kind="mergesort").reset_index(drop=True)


def compute_team_stats(rows: pd.DataFrame, teams) -> pd.DataFrame:
    """Home/away match counts for each selected team."""
    teams = sorted(teams)
    home = rows["home"].value_counts() if not rows.empty else pd.Series(dtype=int)
    away = rows["away"].value_counts() if not rows.empty else pd.Series(dtype=int)
    out = pd.DataFrame({"Team": teams})
    out["Home"] = out["Team"].map(home).fillna(0).astype(int)
    out["Away"] = out["Team"].map(away).fillna(0).astype(int)
    return out
