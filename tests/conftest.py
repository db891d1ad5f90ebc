from datetime import UTC, datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from practicals.adapters.clock import FixedClock
from practicals.adapters.sqlite.migrator import SQLiteMigrator
from practicals.api.deps import Settings, get_clock, get_settings, reset_state
from practicals.api.main import app
from practicals.rules.loader import load_rules
from practicals.shell.http.health import get_health_registry

PROJECT_ROOT = Path(__file__).resolve().parents[1]
RULES_PATH = PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules():
    return load_rules(RULES_PATH)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings rooted in a temporary data dir, SMTP off."""
    s = Settings()
    s.data_dir = tmp_path / "data"
    s.db_path = str(s.data_dir / "practicals.db")
    s.logs_dir = s.data_dir / "logs"
    s.uploads_dir = s.data_dir / "uploads"
    s.rules_path = RULES_PATH
    s.smtp_host = None
    s.smtp_user = None
    s.smtp_pass = None
    s.from_email = "site@example.com"
    s.to_email = "owner@example.com"
    return s


@pytest.fixture
def db_path(tmp_path) -> str:
    """A migrated, empty database."""
    path = str(tmp_path / "repo.db")
    SQLiteMigrator(path).run_migrations()
    return path


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2025, 3, 5, 21, 7, 3, tzinfo=UTC))


@pytest.fixture
def client(test_settings):
    """TestClient with startup run (rules, migrations, directories)."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    reset_state()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_state()
    get_health_registry().clear()


@pytest.fixture
def clocked_client(client, fixed_clock):
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    return client
