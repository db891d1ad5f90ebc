"""Weather lookup component."""

from practicals.components.weather.component import (
    MSG_NOT_FOUND,
    WEATHER_DATA,
    WeatherReport,
    lookup_weather,
)

__all__ = ["lookup_weather", "WeatherReport", "WEATHER_DATA", "MSG_NOT_FOUND"]
