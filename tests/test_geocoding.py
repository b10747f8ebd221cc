"""Tests for :mod:`common.geocoding`; Wikipedia is never contacted."""

from __future__ import annotations

import logging

import pytest

from common import geocoding
from common.geocoding import TooManyNamesError, VenueLookupError
from common.venues import apply_venue_overrides

ALWIN_PAYLOAD = {
    "query": {
        "normalized": [{"from": "サンプロ　アルウィン", "to": "サンプロ アルウィン"}],
        "redirects": [{"from": "サンプロ アルウィン", "to": "長野県松本平広域公園総合球技場"}],
        "pages": {
            "1": {
                "title": "長野県松本平広域公園総合球技場",
                "coordinates": [{"lat": 36.2, "lon": 137.9}],
            },
            "2": {"title": "味の素スタジアム", "coordinates": [{"lat": 35.6, "lon": 139.5}]},
            "-1": {"title": "存在しない競技場", "missing": ""},
        },
    }
}


def test_parse_coordinates_traces_redirect_then_normalization() -> None:
    result = geocoding.parse_coordinates(ALWIN_PAYLOAD)
    assert result == {
        "サンプロ　アルウィン": {"lat": 36.2, "lon": 137.9},
        "味の素スタジアム": {"lat": 35.6, "lon": 139.5},
    }


def test_parse_coordinates_takes_first_of_several(caplog) -> None:
    payload = {"query": {"pages": {"9": {
        "title": "豊田スタジアム",
        "coordinates": [{"lat": 35.08, "lon": 137.17}, {"lat": 0.0, "lon": 0.0}],
    }}}}
    with caplog.at_level(logging.WARNING, logger="common.geocoding"):
        result = geocoding.parse_coordinates(payload)
    assert result == {"豊田スタジアム": {"lat": 35.08, "lon": 137.17}}
    assert "greater than 1" in caplog.text


def test_parse_coordinates_empty_answer() -> None:
    assert geocoding.parse_coordinates({}) == {}


def test_more_than_fifty_names_is_fatal(monkeypatch) -> None:
    monkeypatch.setattr(geocoding.SESSION, "get", lambda *a, **k: pytest.fail("no request expected"))
    with pytest.raises(TooManyNamesError):
        geocoding.fetch_coordinates_from_names([f"stadium {i}" for i in range(51)])


def test_fetch_coordinates_builds_query(monkeypatch) -> None:
    seen = {}

    class FakeResponse:
        def raise_for_status(self):
            return None

        def json(self):
            return ALWIN_PAYLOAD

    def fake_get(url, params=None, timeout=None):
        seen.update(url=url, params=params)
        return FakeResponse()

    monkeypatch.setattr(geocoding.SESSION, "get", fake_get)
    result = geocoding.fetch_coordinates_from_names(["サンプロ　アルウィン", "味の素スタジアム"])

    assert seen["url"] == "https://ja.wikipedia.org/w/api.php"
    assert seen["params"]["titles"] == "サンプロ　アルウィン|味の素スタジアム"
    assert seen["params"]["redirects"] == "1"
    assert seen["params"]["prop"] == "coordinates"
    assert "サンプロ　アルウィン" in result


@pytest.mark.parametrize(("count", "batches"), [(0, []), (50, [50]), (51, [50, 1]), (120, [50, 50, 20])])
def test_chunked(count, batches) -> None:
    assert [len(b) for b in geocoding.chunked([str(i) for i in range(count)])] == batches


def test_fetch_venue_coordinates_batches_and_rekeys(monkeypatch) -> None:
    venue_names = {f"V{i}": f"Stadium {i}" for i in range(120)}
    batches = []

    def fake_fetch(names):
        batches.append(list(names))
        # every third stadium has no article coordinates
        return {n: {"lat": 1.0, "lon": 2.0} for n in names if int(n.split()[1]) % 3}

    monkeypatch.setattr(geocoding, "fetch_coordinates_from_names", fake_fetch)
    coordinates, incomplete = geocoding.fetch_venue_coordinates(venue_names)

    assert [len(b) for b in batches] == [50, 50, 20]
    assert coordinates["V1"] == {"lat": 1.0, "lon": 2.0}
    assert "V0" in incomplete and incomplete["V0"] == "Stadium 0"
    # every code lands in exactly one of the two outputs
    assert set(coordinates) | set(incomplete) == set(venue_names)
    assert not set(coordinates) & set(incomplete)


def test_untraceable_name_is_fatal(monkeypatch) -> None:
    monkeypatch.setattr(
        geocoding, "fetch_coordinates_from_names",
        lambda names: {"誰も問い合わせていない名前": {"lat": 0.0, "lon": 0.0}},
    )
    with pytest.raises(VenueLookupError):
        geocoding.fetch_venue_coordinates({"カシマ": "茨城県立カシマサッカースタジアム"})


def test_reconciled_codes_either_resolve_or_are_incomplete(monkeypatch) -> None:
    known_articles = {"茨城県立カシマサッカースタジアム", "埼玉スタジアム2002"}
    monkeypatch.setattr(
        geocoding, "fetch_coordinates_from_names",
        lambda names: {n: {"lat": 35.0, "lon": 139.0} for n in names if n in known_articles},
    )
    cleaned = apply_venue_overrides({
        "カシマ": "県立カシマサッカースタジアム",
        "埼玉": "埼玉スタジアム２００２",
        "新顔": "どこかの新しい競技場",
        "●未定●": "",
    })
    coordinates, incomplete = geocoding.fetch_venue_coordinates(cleaned)

    assert set(coordinates) == {"カシマ", "埼玉"}
    assert incomplete == {"新顔": "どこかの新しい競技場"}


def test_codes_sharing_a_name_share_its_coordinates(monkeypatch) -> None:
    batches = []

    def fake_fetch(names):
        batches.append(list(names))
        return {n: {"lat": 35.664, "lon": 139.527} for n in names}

    monkeypatch.setattr(geocoding, "fetch_coordinates_from_names", fake_fetch)
    coordinates, incomplete = geocoding.fetch_venue_coordinates(
        {"味スタ": "味の素スタジアム", "味の素": "味の素スタジアム", "カシマ": "茨城県立カシマサッカースタジアム"}
    )

    assert batches == [["味の素スタジアム", "茨城県立カシマサッカースタジアム"]]
    assert coordinates["味スタ"] == coordinates["味の素"] == {"lat": 35.664, "lon": 139.527}
    assert set(coordinates) == {"味スタ", "味の素", "カシマ"}
    assert incomplete == {}


def test_codes_by_long_name() -> None:
    index = geocoding.codes_by_long_name({"味スタ": "味の素スタジアム", "カシマ": "カシマ", "味の素": "味の素スタジアム"})
    assert index == {"味の素スタジアム": ["味スタ", "味の素"], "カシマ": ["カシマ"]}
