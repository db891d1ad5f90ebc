from fastapi import APIRouter, Depends

from practicals.adapters.clock import SystemClock
from practicals.api.deps import get_clock
from practicals.api.schemas import ClockResponse
from practicals.components.clock import read_clock

router = APIRouter()


@router.get("", response_model=ClockResponse)
def get_clock_reading(clock: SystemClock = Depends(get_clock)) -> ClockResponse:
    reading = read_clock(clock)
    return ClockResponse(greeting=reading.greeting, date=reading.date, time=reading.time)
