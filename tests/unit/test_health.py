"""Health router, registry and built-in checks."""

from __future__ import annotations

import sqlite3

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from practicals.shell.http.health import (
    CheckResult,
    DatabaseCheck,
    HealthCheckRegistry,
    HealthStatus,
    StartupCheck,
    StartupTracker,
    create_health_router,
    overall_status,
)


@pytest.fixture
def registry() -> HealthCheckRegistry:
    return HealthCheckRegistry()


@pytest.fixture
def client(registry: HealthCheckRegistry) -> TestClient:
    app = FastAPI()
    app.include_router(create_health_router(version="1.0.0-test", registry=registry))
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_startup_tracker() -> None:
    StartupTracker.reset()


class _StaticCheck:
    def __init__(self, name: str, status: HealthStatus) -> None:
        self.name = name
        self._status = status

    def check(self) -> CheckResult:
        return CheckResult(name=self.name, status=self._status)


class TestOverallStatus:
    def test_all_healthy(self) -> None:
        results = [CheckResult("a", HealthStatus.HEALTHY), CheckResult("b", HealthStatus.HEALTHY)]
        assert overall_status(results) == HealthStatus.HEALTHY

    def test_any_unhealthy(self) -> None:
        results = [
            CheckResult("a", HealthStatus.DEGRADED),
            CheckResult("b", HealthStatus.UNHEALTHY),
        ]
        assert overall_status(results) == HealthStatus.UNHEALTHY

    def test_degraded(self) -> None:
        results = [CheckResult("a", HealthStatus.HEALTHY), CheckResult("b", HealthStatus.DEGRADED)]
        assert overall_status(results) == HealthStatus.DEGRADED

    def test_no_checks_is_healthy(self) -> None:
        assert overall_status([]) == HealthStatus.HEALTHY


class TestChecks:
    def test_startup_check_before_and_after(self) -> None:
        assert StartupCheck().check().status == HealthStatus.UNHEALTHY
        StartupTracker.mark_started()
        assert StartupCheck().check().status == HealthStatus.HEALTHY
        assert StartupTracker.get_uptime_seconds() >= 0

    def test_database_check_healthy(self) -> None:
        result = DatabaseCheck(lambda: None).check()
        assert result.status == HealthStatus.HEALTHY
        assert result.message == "Database connected"

    def test_database_check_error(self) -> None:
        def broken() -> None:
            raise sqlite3.OperationalError("unable to open database file")

        result = DatabaseCheck(broken).check()
        assert result.status == HealthStatus.UNHEALTHY
        assert "unable to open database file" in result.message

    def test_registry_replaces_same_name(self, registry: HealthCheckRegistry) -> None:
        registry.register(_StaticCheck("db", HealthStatus.UNHEALTHY))
        registry.register(_StaticCheck("db", HealthStatus.HEALTHY))
        results = registry.run_all()
        assert len(results) == 1
        assert results[0].status == HealthStatus.HEALTHY


class TestRouter:
    def test_health_ok(self, client: TestClient, registry: HealthCheckRegistry) -> None:
        registry.register(_StaticCheck("db", HealthStatus.HEALTHY))
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "1.0.0-test"
        assert body["checks"][0]["name"] == "db"

    def test_health_unhealthy_is_503(
        self, client: TestClient, registry: HealthCheckRegistry
    ) -> None:
        registry.register(_StaticCheck("db", HealthStatus.UNHEALTHY))
        assert client.get("/health").status_code == 503

    def test_ready(self, client: TestClient, registry: HealthCheckRegistry) -> None:
        registry.register(_StaticCheck("db", HealthStatus.HEALTHY))
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_not_ready(self, client: TestClient, registry: HealthCheckRegistry) -> None:
        registry.register(_StaticCheck("db", HealthStatus.DEGRADED))
        response = client.get("/health/ready")
        assert response.status_code == 503
        assert response.json()["ready"] is False

    def test_live(self, client: TestClient, registry: HealthCheckRegistry) -> None:
        registry.register(_StaticCheck("db", HealthStatus.UNHEALTHY))
        response = client.get("/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True
