"""
Venue name reconciliation and venue record assembly.

The stadium search returns official names that Wikipedia does not always
know under the same spelling (full-width letters, extra spaces, a city in
brackets...). `VENUE_NAME_OVERRIDES` lists the hand-checked article titles
for those codes; `apply_venue_overrides` applies them and drops the entries
that cannot be geocoded at all.

`assemble_venues` then joins the cleaned names with the coordinates returned
by the geocoding job into the `venues.json` records the app loads.
"""

from __future__ import annotations
import logging
from dataclasses import asdict
from typing import Any, Dict, List, Mapping

from models.match_model import Venue

logger = logging.getLogger(__name__)

# Venue code used by the schedule for matches without a decided venue
UNDECIDED_VENUE = "●未定●"

# Each title checked by hand against ja.wikipedia.org
VENUE_NAME_OVERRIDES: Dict[str, str] = {
    "パナスタ": "パナソニックスタジアム吹田",                             # spaces removed
    "ＪＦＥス": "JFE晴れの国スタジアム",                                  # half-width letters
    "Ｕ等々力": "Uvanceとどろきスタジアム by Fujitsu",                    # half-width letters and spaces
    "ＮＡＣＫ": "NACK5スタジアム大宮",                                    # half-width letters
    "ＪＩＴス": "JIT リサイクルインク スタジアム",                        # half-width letters and spaces
    "ヤマハ": "ヤマハスタジアム",                                         # "（磐田）" removed
    "Ｇスタ": "町田GIONスタジアム",                                       # half-width letters
    "アイスタ": "IAIスタジアム日本平",                                    # half-width letters
    "サンガＳ": "サンガスタジアム by KYOCERA",                            # half-width letters
    "カシマ": "茨城県立カシマサッカースタジアム",                         # prefecture prefix added
    "鳴門大塚": "鳴門・大塚スポーツパークポカリスエットスタジアム",       # space removed
    "ピカスタ": "Pikaraスタジアム",                                       # half-width letters
    "長野Ｕ": "長野Uスタジアム",                                          # half-width letters
    "埼玉": "埼玉スタジアム2002",                                         # half-width digits
    "Ａｘｉｓ": "Axisバードスタジアム",                                   # half-width letters
    "ＮＤスタ": "NDソフトスタジアム山形",                                 # half-width letters
    "あいづ": "あいづ陸上競技場",                                         # park name prefix removed
}


def apply_venue_overrides(venue_names: Mapping[str, Any]) -> Dict[str, str]:
    """
    Return a cleaned code -> long name mapping.

    Overrides replace the scraped name of codes present in `venue_names`.
    Entries left without a usable name are dropped: the undecided-venue code,
    empty names, and candidate lists nobody has resolved by hand yet.
    """
    cleaned: Dict[str, str] = {}
    for code, name in venue_names.items():
        if code == UNDECIDED_VENUE:
            continue
        name = VENUE_NAME_OVERRIDES.get(code, name)
        if not isinstance(name, str) or not name.strip():
            logger.warning(f"no resolvable name, dropped: {code} -> {name!r}")
            continue
        cleaned[code] = name
    return cleaned


def assemble_venues(venue_names: Mapping[str, Any],
                    venue_coordinates: Mapping[str, Mapping[str, float]]) -> List[Dict[str, Any]]:
    """
    Join names and coordinates into venue records (one per geocoded code).

    Codes whose coordinate entry is empty are skipped; a code without a name
    keeps an empty `longName` so the marker still shows.
    """
    venues = []
    for short_name, coords in venue_coordinates.items():
        if not coords or "lat" not in coords or "lon" not in coords:
            continue
        long_name = venue_names.get(short_name, "")
        if not isinstance(long_name, str):
            long_name = ""
        venues.append(asdict(Venue(
            shortName=short_name,
            longName=long_name,
            lat=float(coords["lat"]),
            lon=float(coords["lon"]),
        )))
    return venues
