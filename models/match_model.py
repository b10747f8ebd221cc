"""
Small data models for the records exchanged through the JSON snapshots.

These frozen dataclasses document the expected fields of a scraped match row
and an assembled venue record. Field names mirror the JSON keys exactly so a
record converts with `asdict()` and back with `Match(**row)`:
    - `Match` holds the eleven text cells of a results-table row, untouched.
    - `Venue` joins a venue code (`shortName`) with its official name and
        coordinates. `shortName` is the key matched against `Match.venue`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Match:
        year: str
        tournaments: str
        section: str
        date: str
        kickoff: str
        home: str
        score: str
        away: str
        venue: str
        attendance: str
        broadcast: str


@dataclass(frozen=True)
class Venue:
        shortName: str
        longName: str
        lat: float
        lon: float
