import sqlite3
from pathlib import Path

import pytest

from practicals.app_shell import cli

RULES_PATH = Path(__file__).resolve().parents[2] / "rules.yaml"


@pytest.fixture
def env(tmp_path, monkeypatch):
    monkeypatch.setenv("PRACTICALS_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("PRACTICALS_RULES_PATH", str(RULES_PATH))
    return tmp_path / "data"


def test_migrate_creates_schema(env, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["migrate"])
    assert exc.value.code == 0
    assert "Applied 1 migration(s)" in capsys.readouterr().out

    conn = sqlite3.connect(env / "practicals.db")
    tables = {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    conn.close()
    assert {"students", "accounts", "chat_users", "chat_messages", "chats"} <= tables


def test_migrate_twice_is_noop(env, capsys):
    with pytest.raises(SystemExit):
        cli.main(["migrate"])
    with pytest.raises(SystemExit):
        cli.main(["migrate"])
    assert "Database is up to date." in capsys.readouterr().out


def test_check_rules_ok(env, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["check-rules"])
    assert exc.value.code == 0
    assert "Rules OK" in capsys.readouterr().out


def test_check_rules_missing_file(env, tmp_path, monkeypatch):
    monkeypatch.setenv("PRACTICALS_RULES_PATH", str(tmp_path / "missing.yaml"))
    with pytest.raises(SystemExit) as exc:
        cli.main(["check-rules"])
    assert exc.value.code == 1


def test_requires_command():
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 2
