"""Contact form mailer."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from practicals.api.deps import (
    ContactRulesAdapter,
    client_ip,
    get_contact_addresses,
    get_contact_rules,
    get_email_adapter,
    get_rate_limiter,
)
from practicals.api.schemas import ContactRequest
from practicals.app_shell.rate_limit import RateLimiter
from practicals.components.contact import ContactAddresses, ContactInput, run_send
from practicals.core.ports.email import EmailPort

logger = logging.getLogger(__name__)

router = APIRouter()

MSG_RATE_LIMITED = "Too many messages. Please try again later."


@router.post("", response_model=None)
def send_contact_message(
    data: ContactRequest,
    request: Request,
    mailer: EmailPort = Depends(get_email_adapter),
    rules: ContactRulesAdapter = Depends(get_contact_rules),
    addresses: ContactAddresses = Depends(get_contact_addresses),
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> JSONResponse:
    ip = client_ip(request)
    if not limiter.check_contact(ip):
        logger.warning("Contact rate limit exceeded for %s", ip)
        return JSONResponse(
            status_code=429, content={"success": False, "message": MSG_RATE_LIMITED}
        )

    result = run_send(
        ContactInput(name=data.name, email=data.email, message=data.message),
        mailer,
        rules,
        addresses,
    )
    if result.errors:
        return JSONResponse(status_code=400, content={"success": False, "errors": result.errors})
    if not result.success:
        return JSONResponse(status_code=500, content={"success": False, "message": result.message})

    content: dict[str, object] = {"success": True, "message": result.message}
    if result.preview_id:
        content["previewId"] = result.preview_id
    return JSONResponse(content=content)
