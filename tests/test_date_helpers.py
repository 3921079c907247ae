from datetime import date

import pytest

from date_helpers import (
    calculate_duration,
    format_date,
    format_date_range,
    is_valid_date_format,
    normalize_date_string,
    sort_by_start_date,
)

TODAY = date(2024, 6, 15)


@pytest.mark.parametrize("value,expected", [
    ("2021-03", True),
    ("present", True),
    ("2021-13", False),
    ("2021-3", False),
    ("1899-12", False),
    ("2035-01", False),
    ("March 2021", False),
])
def test_is_valid_date_format(value, expected):
    assert is_valid_date_format(value, today=TODAY) is expected


@pytest.mark.parametrize("value,expected", [
    ("2021-3", "2021-03"),
    (" 2021-11 ", "2021-11"),
    ("Current", "present"),
    ("ongoing", "present"),
    ("spring 2020", "spring 2020"),
])
def test_normalize_date_string(value, expected):
    assert normalize_date_string(value) == expected


def test_format_date():
    assert format_date("2021-03") == "Mar 2021"
    assert format_date("present") == "Present"
    assert format_date("sometime") == "sometime"


@pytest.mark.parametrize("start,end,expected", [
    ("2020-01", "2020-01", "Less than 1 month"),
    ("2020-01", "2020-02", "1 month"),
    ("2020-01", "2020-11", "10 months"),
    ("2019-01", "2020-01", "1 year"),
    ("2018-01", "2020-04", "2 years, 3 months"),
    ("2023-06", "present", "1 year"),
    ("2023-06", None, "1 year"),
    ("bad", "2020-01", "Duration unknown"),
])
def test_calculate_duration(start, end, expected):
    assert calculate_duration(start, end, today=TODAY) == expected


def test_format_date_range_defaults_end_to_present():
    assert format_date_range("2024-01", today=TODAY) == {
        "start": "Jan 2024",
        "end": "Present",
        "duration": "5 months",
    }


def test_sort_by_start_date_most_recent_first():
    entries = [
        {"company": "old", "startDate": "2015-02"},
        {"company": "unknown", "startDate": "someday"},
        {"company": "new", "startDate": "2022-09"},
        {"company": "mid", "startDate": "2019-12"},
    ]
    assert [e["company"] for e in sort_by_start_date(entries)] == ["new", "mid", "old", "unknown"]
