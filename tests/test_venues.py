"""Tests for venue name reconciliation and venue assembly."""

from __future__ import annotations

from common.venues import UNDECIDED_VENUE, VENUE_NAME_OVERRIDES, apply_venue_overrides, assemble_venues


def test_overrides_replace_scraped_names() -> None:
    scraped = {
        "カシマ": "県立カシマサッカースタジアム",
        "埼玉": "埼玉スタジアム２００２",
        "長野Ｕ": "長野Ｕスタジアム",
        "日産ス": "日産スタジアム",
    }
    cleaned = apply_venue_overrides(scraped)

    assert cleaned == {
        "カシマ": "茨城県立カシマサッカースタジアム",
        "埼玉": "埼玉スタジアム2002",
        "長野Ｕ": "長野Uスタジアム",
        "日産ス": "日産スタジアム",
    }
    # input is left alone
    assert scraped["埼玉"] == "埼玉スタジアム２００２"


def test_unresolvable_entries_are_dropped() -> None:
    scraped = {
        UNDECIDED_VENUE: "",
        "空欄": "",
        "西京極": ["たけびしスタジアム京都", "西京極総合運動公園"],
        "ヤマハ": ["ヤマハスタジアム（磐田）", "ヤマハ発動機"],
        "味スタ": "味の素スタジアム",
    }
    cleaned = apply_venue_overrides(scraped)

    # an override also settles a multi-candidate entry
    assert cleaned == {"ヤマハ": "ヤマハスタジアム", "味スタ": "味の素スタジアム"}


def test_overrides_only_touch_codes_present() -> None:
    assert apply_venue_overrides({"味スタ": "味の素スタジアム"}) == {"味スタ": "味の素スタジアム"}


def test_override_table_is_complete() -> None:
    assert len(VENUE_NAME_OVERRIDES) == 17
    assert all(isinstance(v, str) and v for v in VENUE_NAME_OVERRIDES.values())


def test_assemble_venues_joins_names_and_coordinates() -> None:
    names = {"カシマ": "茨城県立カシマサッカースタジアム", "味スタ": "味の素スタジアム", "空": "どこか"}
    coordinates = {
        "カシマ": {"lat": 35.992, "lon": 140.641},
        "味スタ": {"lat": 35.664, "lon": 139.527},
        "謎": {"lat": 1, "lon": 2},
        "空": {},
    }
    venues = assemble_venues(names, coordinates)

    assert venues == [
        {"shortName": "カシマ", "longName": "茨城県立カシマサッカースタジアム", "lat": 35.992, "lon": 140.641},
        {"shortName": "味スタ", "longName": "味の素スタジアム", "lat": 35.664, "lon": 139.527},
        {"shortName": "謎", "longName": "", "lat": 1.0, "lon": 2.0},
    ]
    short_names = [v["shortName"] for v in venues]
    assert len(short_names) == len(set(short_names))
