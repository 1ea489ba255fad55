"""Client for the GIOŚ air quality REST service."""

from __future__ import annotations

import json
import socket
import urllib.error
import urllib.request
from typing import Any, Optional

from .models import Measurement, Sensor, Station

DEFAULT_BASE_URL = "https://api.gios.gov.pl/pjp-api/rest"

_INDEX_FIELDS = (
    ("Ogólny", "stIndexLevel"),
    ("PM10", "pm10IndexLevel"),
    ("PM2.5", "pm25IndexLevel"),
    ("O3", "o3IndexLevel"),
    ("NO2", "no2IndexLevel"),
    ("SO2", "so2IndexLevel"),
    ("CO", "coIndexLevel"),
)


class ApiError(RuntimeError):
    """Raised when data cannot be fetched or understood."""


class NoConnectionError(ApiError):
    """Raised when the service cannot be reached at all."""


class _InvalidJson(ApiError):
    pass


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def parse_stations(payload: Any) -> list[Station]:
    """Build stations from the decoded ``station/findAll`` response."""
    return [
        Station(_as_int(item.get("id")), _as_str(item.get("stationName")))
        for item in map(_as_dict, _as_list(payload))
    ]


def parse_sensors(payload: Any) -> list[Sensor]:
    """Build sensors from the decoded ``station/sensors`` response."""
    sensors = []
    for item in map(_as_dict, _as_list(payload)):
        param = _as_dict(item.get("param"))
        sensors.append(
            Sensor(
                _as_int(item.get("id")),
                _as_str(param.get("paramName")),
                _as_str(param.get("paramFormula")),
            )
        )
    return sensors


def parse_sensor_data(payload: Any) -> list[Measurement]:
    """Build measurements from the decoded ``data/getData`` response."""
    measurements = []
    for item in map(_as_dict, _as_list(_as_dict(payload).get("values"))):
        value = item.get("value")
        measurements.append(
            Measurement(
                _as_str(item.get("date")),
                None if value is None else float(value),
            )
        )
    return measurements


def parse_air_quality_index(payload: Any) -> dict[str, str]:
    """Map parameter names to index level names present in the response."""
    root = _as_dict(payload)
    return {
        label: _as_str(_as_dict(root[key]).get("indexLevelName"))
        for label, key in _INDEX_FIELDS
        if root.get(key) is not None
    }


def _is_connection_problem(reason: Any) -> bool:
    return isinstance(
        reason, (socket.gaierror, ConnectionError, TimeoutError, socket.timeout)
    )


class GiosClient:
    """Fetches stations, sensors, readings and air quality indices."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: Optional[float] = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch_json(self, path: str) -> Any:
        """GET ``path`` below the base URL and decode the JSON body."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            body = exc.read()
        except urllib.error.URLError as exc:
            if _is_connection_problem(exc.reason):
                raise NoConnectionError(
                    f"Brak połączenia z internetem: {exc.reason}"
                ) from exc
            raise ApiError(f"Błąd podczas pobierania danych: {exc.reason}") from exc
        except (TimeoutError, socket.timeout, ConnectionError) as exc:
            raise NoConnectionError(f"Brak połączenia z internetem: {exc}") from exc
        except OSError as exc:
            raise ApiError(f"Błąd podczas pobierania danych: {exc}") from exc
        try:
            return json.loads(body)
        except (ValueError, UnicodeDecodeError) as exc:
            raise _InvalidJson("Nie udało się sparsować odpowiedzi JSON.") from exc

    def _fetch(self, path: str, error_message: str) -> Any:
        try:
            return self.fetch_json(path)
        except _InvalidJson as exc:
            raise ApiError(error_message) from exc

    def stations(self) -> list[Station]:
        """Return every measuring station; an unreadable reply gives none."""
        try:
            payload = self.fetch_json("station/findAll")
        except _InvalidJson:
            return []
        return parse_stations(payload)

    def sensors(self, station_id: int) -> list[Sensor]:
        """Return the sensors of one station."""
        payload = self._fetch(
            f"station/sensors/{station_id}",
            "Nie udało się sparsować odpowiedzi JSON dla czujników.",
        )
        return parse_sensors(payload)

    def sensor_data(self, sensor_id: int) -> list[Measurement]:
        """Return the readings of one sensor."""
        payload = self._fetch(
            f"data/getData/{sensor_id}",
            "Nie udało się sparsować odpowiedzi JSON dla danych pomiarowych.",
        )
        return parse_sensor_data(payload)

    def air_quality_index(self, station_id: int) -> dict[str, str]:
        """Return the air quality index levels of one station."""
        payload = self._fetch(
            f"aqindex/getIndex/{station_id}",
            "Nie udało się sparsować odpowiedzi JSON dla indeksu jakości powietrza.",
        )
        return parse_air_quality_index(payload)