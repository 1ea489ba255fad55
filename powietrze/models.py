"""Value objects for stations, sensors and measurements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Station:
    """A measuring station."""

    id: int
    name: str


@dataclass(frozen=True)
class Sensor:
    """A sensor installed at a station, measuring one parameter."""

    id: int
    param_name: str
    param_formula: str


@dataclass(frozen=True)
class Measurement:
    """A single reading; ``value`` is ``None`` when nothing was measured."""

    date: str
    value: Optional[float]

    def is_valid(self) -> bool:
        """Return True if the reading carries a value."""
        return self.value is not None