from fastapi import APIRouter, Depends

from practicals.adapters.clock import SystemClock
from practicals.api.deps import get_clock
from practicals.api.schemas import SiteStatusResponse
from practicals.components.site import get_status

router = APIRouter()


@router.get("/status", response_model=SiteStatusResponse)
def site_status(clock: SystemClock = Depends(get_clock)) -> SiteStatusResponse:
    s = get_status(clock)
    return SiteStatusResponse(status=s.status, timestamp=s.timestamp, version=s.version)
