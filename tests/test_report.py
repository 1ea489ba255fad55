from datetime import date, datetime

import pytest

from powietrze.models import Measurement
from powietrze.report import (
    filter_measurements,
    format_measurements,
    index_summary,
    parse_measurement_date,
)


def test_parse_measurement_date():
    assert parse_measurement_date("2024-05-01 13:00:00") == datetime(2024, 5, 1, 13, 0, 0)


@pytest.mark.parametrize("text", ["", "2024-13-01 00:00:00", "2024-05-01", "jutro"])
def test_parse_measurement_date_rejects_malformed(text):
    assert parse_measurement_date(text) is None


def test_filter_keeps_range_including_next_midnight():
    inside = Measurement("2024-05-01 00:00:00", 1.0)
    last = Measurement("2024-05-03 00:00:00", 2.0)
    before = Measurement("2024-04-30 23:00:00", 3.0)
    after = Measurement("2024-05-03 01:00:00", 4.0)
    result = filter_measurements([after, last, inside, before], date(2024, 5, 1), date(2024, 5, 2))
    assert result == [last, inside]


def test_filter_drops_malformed_dates():
    good = Measurement("2024-05-01 10:00:00", None)
    bad = Measurement("zepsute", 5.0)
    assert filter_measurements([good, bad], date(2024, 5, 1), date(2024, 5, 1)) == [good]


def test_filter_rejects_reversed_range():
    with pytest.raises(ValueError, match="Data początkowa"):
        filter_measurements([], date(2024, 5, 10), date(2024, 5, 1))


def test_filter_result_is_subset_in_order():
    items = [Measurement(f"2024-05-{day:02d} 12:00:00", float(day)) for day in range(1, 10)]
    result = filter_measurements(items, date(2024, 5, 3), date(2024, 5, 5))
    assert all(m in items for m in result)
    assert [m.value for m in result] == [3.0, 4.0, 5.0]


def test_format_measurements():
    text = format_measurements(
        [
            Measurement("2024-05-01 13:00:00", 12.5),
            Measurement("2024-05-01 12:00:00", None),
            Measurement("nie-data", 7.0),
        ]
    )
    assert text == "2024-05-01 13:00:00 - 12.500000\n2024-05-01 12:00:00 - brak pomiaru\n"


def test_format_empty_is_empty():
    assert format_measurements([]) == ""


def test_index_summary_with_overall_level():
    assert index_summary({"Ogólny": "Dobry", "PM10": "Dobry"}) == (
        "Ogólny indeks jakości powietrza: Dobry"
    )


def test_index_summary_without_overall_level():
    assert index_summary({"PM10": "Dobry"}) == "Brak ogólnego indeksu jakości powietrza."