"""
Batch geocoding of venue names through the Wikipedia API.

Wikipedia answers a `prop=coordinates` query with the page titles it ended up
on, which may differ from the titles we asked for in two ways:

    1. normalization ('サンプロ　アルウィン' -> 'サンプロ アルウィン'), and
    2. redirects ('サンプロ アルウィン' -> '長野県松本平広域公園総合球技場').

`fetch_coordinates_from_names` walks both lists backwards so the result is
keyed by the queried name. `fetch_venue_coordinates` chunks the full name
list to the API limit and re-keys the results by venue code.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from common.constants import GEOCODE_BATCH_SIZE, REQUEST_TIMEOUT, WIKIPEDIA_API_URL
from common.utils import SESSION

logger = logging.getLogger(__name__)

Coordinate = Dict[str, float]


class TooManyNamesError(ValueError):
    """More titles than the API accepts in one query."""


class VenueLookupError(LookupError):
    """A geocoded name does not trace back to any venue code."""


def chunked(items: Sequence[str], size: int = GEOCODE_BATCH_SIZE) -> Iterator[List[str]]:
    for i in range(0, len(items), size):
        yield list(items[i:i + size])


def _queried_name(title: str, normalized: List[dict], redirects: List[dict]) -> str:
    redirected = next((r["from"] for r in redirects if r.get("to") == title), title)
    return next((n["from"] for n in normalized if n.get("to") == redirected), redirected)


def parse_coordinates(payload: dict) -> Dict[str, Coordinate]:
    """Map queried name -> {'lat','lon'} from an `action=query` JSON answer."""
    query = payload.get("query", {}) or {}
    normalized = query.get("normalized", []) or []
    redirects = query.get("redirects", []) or []
    pages = query.get("pages", {}) or {}

    result: Dict[str, Coordinate] = {}
    for page in pages.values():
        title = page.get("title", "")
        coordinates = page.get("coordinates") or []
        if not coordinates:
            continue
        if len(coordinates) > 1:
            logger.warning(f"coordinates.length is greater than 1: {len(coordinates)}, on {title}")
        first = coordinates[0]
        result[_queried_name(title, normalized, redirects)] = {"lat": first["lat"], "lon": first["lon"]}
    return result


def fetch_coordinates_from_names(names: Sequence[str]) -> Dict[str, Coordinate]:
    if len(names) > GEOCODE_BATCH_SIZE:
        raise TooManyNamesError(f"too many names. max is {GEOCODE_BATCH_SIZE}.")

    params = {
        "format": "json",
        "action": "query",
        "titles": "|".join(names),
        "redirects": "1",   # follow redirects so spelling variants resolve
        "prop": "coordinates",
        "colimit": str(GEOCODE_BATCH_SIZE),  # at most one coordinate per title
    }
    logger.debug(f"get from: {WIKIPEDIA_API_URL} titles={params['titles']}")
    resp = SESSION.get(WIKIPEDIA_API_URL, params=params, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return parse_coordinates(resp.json())


def codes_by_long_name(venue_names: Mapping[str, str]) -> Dict[str, List[str]]:
    """long name -> every venue code carrying it, in input order."""
    index: Dict[str, List[str]] = {}
    for code, name in venue_names.items():
        index.setdefault(name, []).append(code)
    return index


def fetch_venue_coordinates(venue_names: Mapping[str, str]) -> Tuple[Dict[str, Coordinate], Dict[str, str]]:
    """
    Geocode every cleaned venue name.

    Returns (coordinates by code, incomplete code -> long name). Every code
    of `venue_names` lands in exactly one of the two; codes sharing a long
    name share its coordinates.
    """
    index = codes_by_long_name(venue_names)
    coordinates: Dict[str, Coordinate] = {}
    for batch in chunked(list(index)):
        fetched = fetch_coordinates_from_names(batch)
        for long_name, coords in fetched.items():
            codes = index.get(long_name)
            if not codes:
                raise VenueLookupError(f"no venue code for geocoded name: {long_name}")
            for code in codes:
                coordinates[code] = dict(coords)

    incomplete = {code: name for code, name in venue_names.items() if code not in coordinates}
    if incomplete:
        logger.warning(f"{len(incomplete)} venue(s) without coordinates: {', '.join(incomplete)}")
    return coordinates, incomplete
