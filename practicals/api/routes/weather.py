from fastapi import APIRouter

from practicals.api.schemas import WeatherResponse
from practicals.components.weather import lookup_weather

router = APIRouter()


@router.get("", response_model=WeatherResponse)
def get_weather(city: str = "") -> WeatherResponse:
    report = lookup_weather(city)
    return WeatherResponse(
        city=report.city, report=report.report, found=report.found, message=report.message
    )
