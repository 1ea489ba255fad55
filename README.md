# powietrze

A library for reading data from the GIOŚ air quality service. It fetches
measuring stations, their sensors, sensor readings and the air quality
index. It also filters readings by date and renders them as text.

## Installation

```
pip install .
```

The package uses only the standard library.

## Fetching data

```python
from powietrze.api import GiosClient, NoConnectionError, ApiError

client = GiosClient()
try:
    stations = client.stations()
    station = stations[0]
    sensors = client.sensors(station.id)
    readings = client.sensor_data(sensors[0].id)
    index = client.air_quality_index(station.id)
except NoConnectionError:
    print("No internet connection")
except ApiError as exc:
    print(f"Request failed: {exc}")
```

`GiosClient(base_url, timeout)` points at the service's REST root by
default, with a 30 second timeout. `fetch_json(path)` performs a GET below
the base URL and decodes the JSON body.

### Results

Each method returns objects from `powietrze.models`:

- `stations()` returns `Station` objects, each with `id` and `name`. A reply
  that is not valid JSON gives an empty list.
- `sensors(station_id)` returns `Sensor` objects, each with `id`,
  `param_name` and `param_formula`.
- `sensor_data(sensor_id)` returns `Measurement` objects, each with `date`
  (a string) and `value`. When the service reports no value, `value` is
  `None` and `Measurement.is_valid()` returns `False`.
- `air_quality_index(station_id)` returns a dictionary that maps a parameter
  name to the name of its index level. The parameter names are `"Ogólny"`,
  `"PM10"`, `"PM2.5"`, `"O3"`, `"NO2"`, `"SO2"` and `"CO"`. The dictionary
  holds only the levels that the service reported.

### Errors

`NoConnectionError` is raised when the host cannot be resolved or reached,
or when the request times out. Other transport failures raise `ApiError`,
which is the base class of `NoConnectionError`.

`sensors`, `sensor_data` and `air_quality_index` also raise `ApiError` when
the reply is not valid JSON.

### Responses you already have

Responses that have already been downloaded and decoded can be turned into
the same objects without a network connection. Use `parse_stations`,
`parse_sensors`, `parse_sensor_data` or `parse_air_quality_index` for this.

## Reports

```python
from datetime import date
from powietrze.report import filter_measurements, format_measurements, index_summary

selected = filter_measurements(readings, date(2024, 5, 1), date(2024, 5, 3))
print(format_measurements(selected))
print(index_summary(index))
```

### Reading timestamps

`parse_measurement_date` reads timestamps in the service's
`YYYY-MM-DD HH:MM:SS` format. It returns `None` for malformed text.

### Filtering by date

`filter_measurements` keeps the readings whose timestamps fall within a
range. The range runs from midnight of the first date to midnight of the day
after the last date, and both ends are inclusive. Readings whose date cannot
be parsed are dropped. A start that lies after that end raises `ValueError`.

### Formatting

`format_measurements` writes one line per reading, in the form
`YYYY-MM-DD HH:MM:SS - value`. The value is shown with six decimal places,
and a missing value is written as `brak pomiaru`.

### Index summary

`index_summary` describes the overall (`"Ogólny"`) index level. When the
index has no overall level, it says that there is none.

## What the package does not do

The package has no graphical window and no command-line program.

It also has no local storage. Readings and indices cannot be saved to disk
or loaded back for offline use, and it does not compute statistics such as
minimum, maximum, average or trend.

## Running the tests

```
pip install .[test]
pytest
```