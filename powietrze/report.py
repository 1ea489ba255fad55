"""Date filtering and text presentation of measurements."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterable, Mapping, Optional

from .models import Measurement

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MISSING_TEXT = "brak pomiaru"


def parse_measurement_date(text: str) -> Optional[datetime]:
    """Parse a reading's timestamp, returning None if it is malformed."""
    try:
        return datetime.strptime(text, DATE_FORMAT)
    except (TypeError, ValueError):
        return None


def _bounds(date_from: date, date_to: date) -> tuple[datetime, datetime]:
    start = datetime.combine(date_from, time())
    end = datetime.combine(date_to, time()) + timedelta(days=1)
    if start > end:
        raise ValueError("Data początkowa nie może być późniejsza od końcowej.")
    return start, end


def filter_measurements(
    measurements: Iterable[Measurement], date_from: date, date_to: date
) -> list[Measurement]:
    """Keep readings from the start of ``date_from`` up to the day after ``date_to``.

    Both ends are inclusive; readings with malformed dates are dropped.
    """
    start, end = _bounds(date_from, date_to)
    kept = []
    for measurement in measurements:
        moment = parse_measurement_date(measurement.date)
        if moment is not None and start <= moment <= end:
            kept.append(measurement)
    return kept


def format_measurements(measurements: Iterable[Measurement]) -> str:
    """Render one line per reading with a well-formed date."""
    lines = []
    for measurement in measurements:
        moment = parse_measurement_date(measurement.date)
        if moment is None:
            continue
        value = f"{measurement.value:.6f}" if measurement.is_valid() else MISSING_TEXT
        lines.append(f"{moment.strftime(DATE_FORMAT)} - {value}\n")
    return "".join(lines)


def index_summary(index: Mapping[str, str]) -> str:
    """Describe the overall air quality index, if there is one."""
    if "Ogólny" in index:
        return f"Ogólny indeks jakości powietrza: {index['Ogólny']}"
    return "Brak ogólnego indeksu jakości powietrza."