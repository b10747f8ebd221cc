"""
Geocode the reconciled venue names through Wikipedia.

Writes venue-coordinates.json (code -> {lat, lon}) and
venue-incomplete-coordinates.json (code -> name Wikipedia had no
coordinates for). A new entry in the incomplete file usually needs a new
override in `common.venues.VENUE_NAME_OVERRIDES`.

Run with: python -m jobs.fetch_venue_coordinates
"""

import argparse
import logging
import sys

import requests

from common.constants import DATA_DIR, VENUE_COORDINATES_FILE, VENUE_INCOMPLETE_FILE, VENUE_NAMES_FILE
from common.geocoding import TooManyNamesError, VenueLookupError, fetch_venue_coordinates
from common.utils import read_json, write_json
from common.venues import apply_venue_overrides
from jobs import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Fetch venue coordinates from Wikipedia')
    parser.add_argument('--data-dir', default=str(DATA_DIR), help='Data directory')
    args = parser.parse_args(argv)
    setup_logging()

    venue_names = apply_venue_overrides(read_json(VENUE_NAMES_FILE, args.data_dir))
    try:
        coordinates, incomplete = fetch_venue_coordinates(venue_names)
    except (TooManyNamesError, VenueLookupError) as e:
        logger.error(f"Geocoding aborted: {e}")
        return 2
    except requests.RequestException as e:
        logger.error(f"Wikipedia request failed: {e}")
        return 1

    write_json(VENUE_COORDINATES_FILE, coordinates, args.data_dir)
    write_json(VENUE_INCOMPLETE_FILE, incomplete, args.data_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
