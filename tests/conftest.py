"""Shared fixtures: a small season of matches and the venues they use."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from common.query import MatchDatabase  # noqa: E402


def _match(tournaments, section, date, kickoff, home, away, venue, attendance="", score="vs"):
    return {
        "year": "2025",
        "tournaments": tournaments,
        "section": section,
        "date": date,
        "kickoff": kickoff,
        "home": home,
        "score": score,
        "away": away,
        "venue": venue,
        "attendance": attendance,
        "broadcast": "DAZN",
    }


@pytest.fixture
def sample_matches() -> list[dict]:
    return [
        _match("Ｊ１リーグ", "第２節", "25/02/22(土)", "14:00", "浦和", "鹿島", "埼玉", "45,123", "1-0"),
        _match("Ｊ１リーグ", "第１節", "25/02/14(金)", "19:03", "Ｇ大阪", "浦和", "パナスタ", "30,002", "2-2"),
        _match("Ｊ１リーグ", "第１節", "25/02/15(土)", "14:00", "鹿島", "湘南", "カシマ", "25,000", "0-1"),
        _match("Ｊ２リーグ", "第１節", "25/02/15(土)", "14:00", "長野", "松本", "長野Ｕ", "9,000", "1-1"),
        _match("Ｊ１リーグ", "第３節", "25/03/01(土)", "14:00", "鹿島", "Ｇ大阪", "カシマ", "", "vs"),
        _match("Ｊ２リーグ", "第２節", "25/02/22(土)", "13:00", "松本", "長野", "●未定●"),
        _match("ＪリーグＹＢＣルヴァンカップ", "１回戦", "25/03/20(木)", "19:00", "湘南", "松本", "Ｌｅｍｏｎ"),
    ]


@pytest.fixture
def sample_venues() -> list[dict]:
    return [
        {"shortName": "埼玉", "longName": "埼玉スタジアム2002", "lat": 35.903, "lon": 139.717},
        {"shortName": "パナスタ", "longName": "パナソニックスタジアム吹田", "lat": 34.802, "lon": 135.538},
        {"shortName": "カシマ", "longName": "茨城県立カシマサッカースタジアム", "lat": 35.992, "lon": 140.641},
        {"shortName": "長野Ｕ", "longName": "長野Uスタジアム", "lat": 36.575, "lon": 138.165},
        {"shortName": "Ｌｅｍｏｎ", "longName": "レモンガススタジアム平塚", "lat": 35.344, "lon": 139.342},
    ]


@pytest.fixture
def db(sample_matches, sample_venues):
    database = MatchDatabase(sample_matches, sample_venues)
    yield database
    database.close()
