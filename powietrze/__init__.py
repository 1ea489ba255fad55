"""Fetching GIOŚ air quality stations, sensors, readings and indexes, and reporting on readings."""

__version__ = "0.1.0"
__all__ = ["models", "api", "report"]