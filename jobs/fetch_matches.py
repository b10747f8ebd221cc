"""
Scrape the season schedule/results table into matches-<year>.json.

Run with: python -m jobs.fetch_matches --years 2025
"""

import argparse
import logging
import sys

import requests

from common.constants import COMPETITION_YEARS, DATA_DIR, matches_file_name
from common.scraper import fetch_matches
from common.utils import write_json
from jobs import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Fetch J.League matches for a season')
    parser.add_argument('--years', default=COMPETITION_YEARS, help='Competition year(s), e.g. 2025')
    parser.add_argument('--data-dir', default=str(DATA_DIR), help='Output directory')
    args = parser.parse_args(argv)
    setup_logging()

    try:
        matches = fetch_matches(args.years)
    except requests.RequestException as e:
        logger.error(f"Match search failed: {e}")
        return 1

    logger.info(f"Fetched {len(matches)} matches for {args.years}")
    write_json(matches_file_name(args.years), matches, args.data_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
