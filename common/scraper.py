"""
Scrapers for the J.League data site.

    - `fetch_matches(years)` downloads the results search page for a season
        and turns every row of the results table into a match dict.
    - `fetch_venue_names(codes)` asks the stadium search endpoint for the
        official name behind each abbreviated venue code, one request per
        code with a fixed delay between requests.

Both return plain dicts/lists ready to be written as JSON snapshots.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, Iterable, List, Optional, Union

from bs4 import BeautifulSoup

from common.constants import MATCH_FIELDS, MATCH_SEARCH_PATH, REQUEST_DELAY, VENUE_SEARCH_PATH
from common.utils import jleague_get, jleague_post

logger = logging.getLogger(__name__)

VenueName = Union[str, List[str]]


def parse_match_rows(html: str) -> List[Dict[str, str]]:
    """Extract the results table rows; cells are stripped text keyed by MATCH_FIELDS."""
    soup = BeautifulSoup(html, "html.parser")
    rows = soup.select(".search-table tbody tr")
    logger.debug(f"rows.length is: {len(rows)}")

    matches = []
    for row in rows:
        cells = [td.get_text().strip() for td in row.find_all("td")]
        # Short rows (e.g. a "no results" row) are padded so every key exists.
        cells += [""] * (len(MATCH_FIELDS) - len(cells))
        matches.append(dict(zip(MATCH_FIELDS, cells)))
    return matches


def fetch_matches(years: str) -> List[Dict[str, str]]:
    html = jleague_get(MATCH_SEARCH_PATH, params={"competition_years": years})
    return parse_match_rows(html)


def venue_codes(matches: Iterable[Dict[str, str]]) -> List[str]:
    """Unique venue codes in first-seen order."""
    seen: Dict[str, None] = {}
    for m in matches:
        seen.setdefault(m.get("venue", ""), None)
    return list(seen)


def lookup_venue_name(code: str) -> VenueName:
    """
    Official stadium name(s) for one venue code.

    One candidate -> its name; several -> the list of names (to be fixed by
    hand); a non-array answer -> '' after logging the failure.
    """
    result = jleague_post(VENUE_SEARCH_PATH, {"stadium_name": code})
    if not isinstance(result, list):
        logger.error(f"failed to retrieve. venue: {code}, result: {result}")
        return ""
    names = [r.get("name", "") for r in result]
    if len(names) == 1:
        return names[0]
    return names


def fetch_venue_names(codes: Iterable[str], delay: Optional[float] = None) -> Dict[str, VenueName]:
    delay = REQUEST_DELAY if delay is None else delay
    codes = list(codes)
    logger.info(f"venues size is: {len(codes)}")

    names: Dict[str, VenueName] = {}
    for code in codes:
        names[code] = lookup_venue_name(code)
        time.sleep(delay)  # rate limit of the stadium search
    return names
