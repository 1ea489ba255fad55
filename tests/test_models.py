import dataclasses

import pytest

from powietrze.models import Measurement, Sensor, Station


def test_measurement_with_value_is_valid():
    assert Measurement("2024-05-01 13:00:00", 12.5).is_valid() is True


def test_measurement_without_value_is_invalid():
    assert Measurement("2024-05-01 13:00:00", None).is_valid() is False


def test_zero_value_is_still_valid():
    assert Measurement("2024-05-01 13:00:00", 0.0).is_valid() is True


def test_station_equality_and_fields():
    station = Station(114, "Wrocław - Bartnicza")
    assert station == Station(114, "Wrocław - Bartnicza")
    assert station.name == "Wrocław - Bartnicza"
    assert station.id == 114


def test_sensor_fields():
    sensor = Sensor(92, "pył zawieszony PM10", "PM10")
    assert (sensor.id, sensor.param_name, sensor.param_formula) == (
        92,
        "pył zawieszony PM10",
        "PM10",
    )


def test_models_are_immutable():
    station = Station(1, "A")
    with pytest.raises(dataclasses.FrozenInstanceError):
        station.name = "B"
    assert station.name == "A"
    assert station == Station(1, "A")


def test_measurement_is_immutable():
    measurement = Measurement("2024-05-01 13:00:00", 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        measurement.value = 4.0
    assert measurement.value == 3.0
    assert measurement.is_valid() is True