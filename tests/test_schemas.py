"""Tests for month selectors and sale-date month extraction."""

import datetime as dt

import pytest

from salesboard.data.schemas import MonthFilter, month_of, parse_month


@pytest.mark.parametrize(
    "value, expected",
    [
        ("March", 3),
        ("march", 3),
        ("MARCH", 3),
        (" March ", 3),
        ("mar", 3),
        ("Sept", 9),
        ("sep", 9),
        ("12", 12),
        ("01", 1),
        (7, 7),
    ],
)
def test_parse_month_accepts_names_abbreviations_and_numbers(value, expected) -> None:
    assert parse_month(value) == expected


@pytest.mark.parametrize("value", [None, "", "Smarch", "13", "0", 0, 13, True])
def test_parse_month_rejects_unknown_values(value) -> None:
    assert parse_month(value) is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2021-11-27T20:29:54+05:30", 11),
        ("2021-03-31T23:30:00-05:00", 3),
        ("2022-01-01T00:00:00Z", 1),
        ("2024-03-05", 3),
        ("2024-06-05T10:00:00.000Z", 6),
        (dt.date(2020, 2, 29), 2),
        (dt.datetime(2020, 8, 1, 12, 0), 8),
    ],
)
def test_month_of_reads_wall_clock_month(value, expected) -> None:
    assert month_of(value) == expected


@pytest.mark.parametrize("value", [None, "", "yesterday", "2024-13-01", True, float("nan"), 1e300])
def test_month_of_unparseable_is_none(value) -> None:
    assert month_of(value) is None


def test_month_filter_labels() -> None:
    assert MonthFilter.from_param("mar").label == "March"
    assert MonthFilter.from_param("mar").is_valid is True
    assert MonthFilter.from_param("Smarch").label == "Unknown month (Smarch)"
    assert MonthFilter.from_param(None).label == "No month"


@pytest.mark.parametrize(
    "value, expected",
    [
        (1638000000000, 11),
        (1638000000000.0, 11),
        (0, 1),
        (1709251199999, 2),  # 2024-02-29T23:59:59.999Z
    ],
)
def test_month_of_epoch_milliseconds_in_utc(value, expected) -> None:
    assert month_of(value) == expected
