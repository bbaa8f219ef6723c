from __future__ import annotations

from datetime import date

import pytest

from src.domain.models import DatePattern
from src.helpers.dates import get_last_months, split_date


def test_split_date_defaults_to_datetime_pattern() -> None:
    assert split_date("20170224093015") == "2017-02-24 09:30:15"


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        (DatePattern.SLASHED_DATE, "2017/02/24"),
        ("YYYY/MM/DD", "2017/02/24"),
        (DatePattern.DASHED_DATE, "2017-02-24"),
        ("YYYY-MM-DD", "2017-02-24"),
    ],
)
def test_split_date_patterns(pattern: object, expected: str) -> None:
    assert split_date("20170224", pattern) == expected  # type: ignore[arg-type]


def test_split_date_keeps_trailing_characters() -> None:
    assert split_date("20170224-rest", DatePattern.DASHED_DATE) == "2017-02-24-rest"


def test_split_date_returns_value_unchanged_when_digits_are_missing() -> None:
    assert split_date("2017") == "2017"
    assert split_date("20170224") == "20170224"


def test_split_date_unknown_pattern_yields_none() -> None:
    assert split_date("20170224", "DD.MM.YYYY") is None


def test_get_last_months_excludes_current_month() -> None:
    assert get_last_months(3, today=date(2017, 5, 20)) == ["201704", "201703", "201702"]


def test_get_last_months_wraps_year() -> None:
    assert get_last_months(3, today=date(2017, 2, 1)) == ["201701", "201612", "201611"]


def test_get_last_months_spans_more_than_a_year() -> None:
    months = get_last_months(13, today=date(2017, 1, 15))

    assert months[0] == "201612"
    assert months[-1] == "201512"
    assert len(months) == 13


@pytest.mark.parametrize("count", [None, 0])
def test_get_last_months_defaults_to_one(count: object) -> None:
    assert get_last_months(count, today=date(2020, 10, 1)) == ["202009"]  # type: ignore[arg-type]


def test_get_last_months_uses_today_by_default() -> None:
    today = date.today()
    expected_month = today.month - 1 or 12
    expected_year = today.year if today.month > 1 else today.year - 1

    assert get_last_months() == [f"{expected_year:04d}{expected_month:02d}"]
