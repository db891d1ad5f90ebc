"""Weather lookup against a fixed city table."""

from __future__ import annotations

from dataclasses import dataclass

WEATHER_DATA: dict[str, str] = {
    "Rajkot": "25°C, Sunny",
    "Ahmamdabad": "18°C, Cloudy",
    "Mumbai": "30°C, Clear",
    "Surat": "22°C, Rainy",
    "Goa": "28°C, Partly Cloudy",
}

MSG_NOT_FOUND = "City not found in our database."


@dataclass(frozen=True)
class WeatherReport:
    city: str
    report: str | None
    found: bool
    message: str


def lookup_weather(city: str | None) -> WeatherReport:
    """Exact, case-sensitive match on the trimmed city name."""
    name = (city or "").strip()
    report = WEATHER_DATA.get(name)
    if report is None:
        return WeatherReport(city=name, report=None, found=False, message=MSG_NOT_FOUND)
    return WeatherReport(
        city=name, report=report, found=True, message=f"Weather in {name}: {report}"
    )
