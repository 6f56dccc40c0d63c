import json
from datetime import date

import pytest

from casaluna.models.pricing import DayType
from casaluna.services.calendar import classify_date
from casaluna.services.seasons import (
    DEFAULT_PERIODS,
    SeasonConfigError,
    get_high_season_periods,
    load_high_season_periods,
    parse_periods,
)


def _write(tmp_path, payload):
    path = tmp_path / "high_season.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_periods_keeps_order_and_year(tmp_path):
    path = _write(
        tmp_path,
        [
            {"name": "Christmas", "start_month": 12, "start_day": 24, "end_month": 1, "end_day": 6},
            {"name": "Easter 2027", "start_month": 3, "start_day": 26, "end_month": 3, "end_day": 29, "year": 2027},
        ],
    )
    periods = load_high_season_periods(path)

    assert [p.name for p in periods] == ["Christmas", "Easter 2027"]
    assert periods[0].wraps_year
    assert periods[1].year == 2027


@pytest.mark.parametrize(
    "entry",
    [
        {"name": "Bad month", "start_month": 13, "start_day": 1, "end_month": 1, "end_day": 2},
        {"name": "Bad day", "start_month": 1, "start_day": 0, "end_month": 1, "end_day": 2},
        {"name": "", "start_month": 1, "start_day": 1, "end_month": 1, "end_day": 2},
        {"name": "Missing end", "start_month": 1, "start_day": 1},
    ],
)
def test_invalid_period_rejected(entry):
    with pytest.raises(SeasonConfigError):
        parse_periods([entry])


def test_missing_file(tmp_path):
    with pytest.raises(SeasonConfigError):
        load_high_season_periods(tmp_path / "nope.json")


def test_file_must_hold_a_list(tmp_path):
    path = _write(tmp_path, {"name": "July"})
    with pytest.raises(SeasonConfigError):
        load_high_season_periods(path)


def test_broken_json(tmp_path):
    path = tmp_path / "high_season.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(SeasonConfigError):
        load_high_season_periods(path)


def test_defaults_without_configured_file(monkeypatch):
    monkeypatch.delenv("HIGH_SEASON_PATH", raising=False)
    assert get_high_season_periods() == DEFAULT_PERIODS


def test_configured_file_replaces_defaults(tmp_path, monkeypatch):
    path = _write(
        tmp_path,
        [{"name": "October", "start_month": 10, "start_day": 1, "end_month": 10, "end_day": 31}],
    )
    monkeypatch.setenv("HIGH_SEASON_PATH", str(path))

    periods = get_high_season_periods()

    assert [p.name for p in periods] == ["October"]
    assert classify_date(date(2025, 10, 6)) == DayType.HIGH_SEASON
    # July is no longer high season; Jul 4 2025 is a Friday
    assert classify_date(date(2025, 7, 4)) == DayType.WEEKEND
