"""
One-shot batch jobs that refresh the JSON snapshots in the data directory.

Run them in order, each with `python -m jobs.<name>`:
    1. `fetch_matches`            -> matches-<year>.json
    2. `fetch_venue_names`        -> venue-names.json (fix multi-candidate entries by hand)
    3. `fetch_venue_coordinates`  -> venue-coordinates.json, venue-incomplete-coordinates.json
    4. `build_venues`             -> venues.json
"""

import logging

from common.constants import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
