"""
Health endpoints.

- /health: overall status, uptime and one entry per registered check
- /health/ready: readiness probe; every check (database included) must pass
- /health/live: liveness probe; 200 while the process answers
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "practicals"


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


@dataclass
class CheckResult:
    name: str
    status: HealthStatus
    message: str = ""
    latency_ms: float = 0.0
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
            "latencyMs": round(self.latency_ms, 3),
        }


class HealthCheck(Protocol):
    name: str

    def check(self) -> CheckResult: ...


class StartupTracker:
    """Process start time, for uptime reporting."""

    _start_time: float | None = None

    @classmethod
    def mark_started(cls) -> None:
        cls._start_time = time.time()

    @classmethod
    def get_uptime_seconds(cls) -> float:
        if cls._start_time is None:
            return 0.0
        return time.time() - cls._start_time

    @classmethod
    def is_started(cls) -> bool:
        return cls._start_time is not None

    @classmethod
    def reset(cls) -> None:
        cls._start_time = None


class HealthCheckRegistry:
    def __init__(self) -> None:
        self._checks: dict[str, HealthCheck] = {}

    def register(self, check: HealthCheck) -> None:
        """Add a check; a check with the same name is replaced."""
        self._checks[check.name] = check

    def run_all(self) -> list[CheckResult]:
        return [check.check() for check in self._checks.values()]

    def clear(self) -> None:
        self._checks = {}


_registry = HealthCheckRegistry()


def get_health_registry() -> HealthCheckRegistry:
    return _registry


def overall_status(results: list[CheckResult]) -> HealthStatus:
    if all(r.status == HealthStatus.HEALTHY for r in results):
        return HealthStatus.HEALTHY
    if any(r.status == HealthStatus.UNHEALTHY for r in results):
        return HealthStatus.UNHEALTHY
    return HealthStatus.DEGRADED


# --- Checks ---


class StartupCheck:
    name = "startup"

    def check(self) -> CheckResult:
        if StartupTracker.is_started():
            return CheckResult(
                name=self.name, status=HealthStatus.HEALTHY, message="Startup complete"
            )
        return CheckResult(
            name=self.name, status=HealthStatus.UNHEALTHY, message="Startup not complete"
        )


class DatabaseCheck:
    """Runs `ping` against the SQLite database; any exception marks it unhealthy."""

    name = "database"

    def __init__(self, ping: Callable[[], None]) -> None:
        self._ping = ping

    def check(self) -> CheckResult:
        start = time.perf_counter()
        try:
            self._ping()
        except Exception as e:
            logger.warning("Database health check failed: %s", e)
            return CheckResult(
                name=self.name,
                status=HealthStatus.UNHEALTHY,
                message=f"Database error: {e!s}",
                latency_ms=(time.perf_counter() - start) * 1000,
            )
        return CheckResult(
            name=self.name,
            status=HealthStatus.HEALTHY,
            message="Database connected",
            latency_ms=(time.perf_counter() - start) * 1000,
        )


# --- Router ---


def create_health_router(
    version: str = "0.0.0",
    registry: HealthCheckRegistry | None = None,
) -> APIRouter:
    router = APIRouter(tags=["health"])
    reg = registry or get_health_registry()

    @router.get("/health", response_model=None)
    def health_check() -> JSONResponse:
        results = reg.run_all()
        overall = overall_status(results)
        code = (
            status.HTTP_200_OK
            if overall == HealthStatus.HEALTHY
            else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return JSONResponse(
            content={
                "status": overall.value,
                "service": SERVICE_NAME,
                "version": version,
                "uptimeSeconds": StartupTracker.get_uptime_seconds(),
                "checks": [r.to_dict() for r in results],
            },
            status_code=code,
        )

    @router.get("/health/ready", response_model=None)
    def readiness_check() -> JSONResponse:
        results = reg.run_all()
        is_ready = all(r.status == HealthStatus.HEALTHY for r in results)
        return JSONResponse(
            content={"ready": is_ready, "checks": [r.to_dict() for r in results]},
            status_code=status.HTTP_200_OK if is_ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    @router.get("/health/live", response_model=None)
    def liveness_check() -> JSONResponse:
        return JSONResponse(
            content={"alive": True, "uptimeSeconds": StartupTracker.get_uptime_seconds()}
        )

    return router
