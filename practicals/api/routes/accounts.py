"""Authentication portal: register, log in, and manage the caller's profile."""

import logging
import sqlite3
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from practicals.adapters.auth.crypto import JWTAuthAdapter
from practicals.adapters.clock import SystemClock
from practicals.adapters.sqlite.repos import SQLiteAccountRepo
from practicals.api.deps import (
    AccountRulesAdapter,
    client_ip,
    get_account_repo,
    get_account_rules,
    get_auth_adapter,
    get_clock,
    get_current_account,
    get_rate_limiter,
    require_database,
)
from practicals.api.schemas import AccountUserResponse, AuthData, AuthResponse, ProfileResponse
from practicals.app_shell.rate_limit import RateLimiter
from practicals.components.accounts import (
    MSG_DUPLICATE,
    AccountOutput,
    LoginInput,
    RegisterInput,
    UpdateProfileInput,
    run_login,
    run_register,
    run_update_profile,
)
from practicals.domain.entities import Account

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_database)])

_STATUS_BY_CODE = {
    "validation": status.HTTP_400_BAD_REQUEST,
    "duplicate": status.HTTP_400_BAD_REQUEST,
    "invalid_credentials": status.HTTP_401_UNAUTHORIZED,
    "deactivated": status.HTTP_403_FORBIDDEN,
    "not_found": status.HTTP_404_NOT_FOUND,
}


def to_user_response(account: Account) -> AccountUserResponse:
    return AccountUserResponse(
        id=account.id,
        first_name=account.first_name,
        last_name=account.last_name,
        full_name=account.full_name,
        email=account.email,
        phone=account.phone,
        date_of_birth=account.date_of_birth,
        is_active=account.is_active,
        last_login=account.last_login,
        created_at=account.created_at,
    )


def _error_response(result: AccountOutput) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "message": result.message}
    if result.errors:
        content["errors"] = [{"field": e.field, "message": e.message} for e in result.errors]
    return JSONResponse(
        status_code=_STATUS_BY_CODE.get(result.error_code or "", 400), content=content
    )


def _auth_response(result: AccountOutput) -> AuthResponse:
    assert result.account is not None
    return AuthResponse(
        message=result.message,
        data=AuthData(token=result.token, user=to_user_response(result.account)),
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(
    data: dict[str, Any] = Body(...),
    repo: SQLiteAccountRepo = Depends(get_account_repo),
    auth: JWTAuthAdapter = Depends(get_auth_adapter),
    rules: AccountRulesAdapter = Depends(get_account_rules),
    clock: SystemClock = Depends(get_clock),
) -> AuthResponse | JSONResponse:
    try:
        result = run_register(RegisterInput(data=data), repo, auth, rules, clock)
    except sqlite3.IntegrityError:
        return JSONResponse(status_code=400, content={"success": False, "message": MSG_DUPLICATE})
    if not result.success:
        return _error_response(result)
    logger.info("Account registered: %s", result.account.email if result.account else "")
    return _auth_response(result)


@router.post("/login", response_model=AuthResponse)
def login(
    request: Request,
    data: dict[str, Any] = Body(...),
    repo: SQLiteAccountRepo = Depends(get_account_repo),
    auth: JWTAuthAdapter = Depends(get_auth_adapter),
    rules: AccountRulesAdapter = Depends(get_account_rules),
    clock: SystemClock = Depends(get_clock),
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> AuthResponse | JSONResponse:
    if not limiter.check_login(client_ip(request)):
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content={"success": False, "message": "Too many login attempts. Try again later."},
        )

    result = run_login(
        LoginInput(email=data.get("email"), password=data.get("password")),
        repo,
        auth,
        rules,
        clock,
    )
    if not result.success:
        return _error_response(result)
    return _auth_response(result)


@router.get("/profile", response_model=ProfileResponse)
def get_profile(account: Account = Depends(get_current_account)) -> ProfileResponse:
    return ProfileResponse(data=to_user_response(account))


@router.put("/profile", response_model=AuthResponse)
def update_profile(
    data: dict[str, Any] = Body(...),
    account: Account = Depends(get_current_account),
    repo: SQLiteAccountRepo = Depends(get_account_repo),
    rules: AccountRulesAdapter = Depends(get_account_rules),
    clock: SystemClock = Depends(get_clock),
) -> AuthResponse | JSONResponse:
    result = run_update_profile(UpdateProfileInput(account=account, data=data), repo, rules, clock)
    if not result.success:
        return _error_response(result)
    return _auth_response(result)
