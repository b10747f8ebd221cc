"""
Look up the official name of every venue code used in matches-<year>.json.

Codes with several candidates are written as a list and must be fixed by
hand in venue-names.json before geocoding.

Run with: python -m jobs.fetch_venue_names --years 2025
"""

import argparse
import logging
import sys

import requests

from common.constants import COMPETITION_YEARS, DATA_DIR, REQUEST_DELAY, VENUE_NAMES_FILE, matches_file_name
from common.scraper import fetch_venue_names, venue_codes
from common.utils import read_json, write_json
from jobs import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Fetch official stadium names for venue codes')
    parser.add_argument('--years', default=COMPETITION_YEARS, help='Season whose matches list the venues')
    parser.add_argument('--data-dir', default=str(DATA_DIR), help='Data directory')
    parser.add_argument('--delay', type=float, default=REQUEST_DELAY, help='Seconds between requests')
    args = parser.parse_args(argv)
    setup_logging()

    matches = read_json(matches_file_name(args.years), args.data_dir)
    try:
        names = fetch_venue_names(venue_codes(matches), delay=args.delay)
    except requests.RequestException as e:
        logger.error(f"Stadium search failed: {e}")
        return 1

    ambiguous = [code for code, name in names.items() if isinstance(name, list)]
    if ambiguous:
        logger.warning(f"Several candidates, edit {VENUE_NAMES_FILE} by hand: {', '.join(ambiguous)}")
    write_json(VENUE_NAMES_FILE, names, args.data_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
