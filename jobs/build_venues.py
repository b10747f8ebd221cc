"""
Join venue-names.json and venue-coordinates.json into venues.json.

Run with: python -m jobs.build_venues
"""

import argparse
import logging
import sys

from common.constants import DATA_DIR, VENUE_COORDINATES_FILE, VENUE_NAMES_FILE, VENUES_FILE
from common.utils import read_json, write_json
from common.venues import apply_venue_overrides, assemble_venues
from jobs import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Assemble venues.json')
    parser.add_argument('--data-dir', default=str(DATA_DIR), help='Data directory')
    args = parser.parse_args(argv)
    setup_logging()

    venue_names = apply_venue_overrides(read_json(VENUE_NAMES_FILE, args.data_dir))
    venue_coordinates = read_json(VENUE_COORDINATES_FILE, args.data_dir)
    venues = assemble_venues(venue_names, venue_coordinates)
    logger.info(f"Assembled {len(venues)} venues")
    write_json(VENUES_FILE, venues, args.data_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
