import os

import pytest


@pytest.fixture
def logs_dir(client, test_settings):
    d = test_settings.logs_dir
    (d / "old.log").write_text("boot\nERROR disk full\nready")
    (d / "new.txt").write_text("a\nb\nc\nd\ne")
    (d / "notes.md").write_text("not a log")
    os.utime(d / "old.log", (1_700_000_000, 1_700_000_000))
    os.utime(d / "new.txt", (1_700_000_100, 1_700_000_100))
    return d


def test_list_logs_newest_first(client, logs_dir):
    resp = client.get("/api/logs")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert [f["name"] for f in body["files"]] == ["new.txt", "old.log"]
    assert body["files"][0]["sizeFormatted"] == "9 B"


def test_list_logs_empty_directory(client):
    resp = client.get("/api/logs")
    assert resp.status_code == 200
    assert resp.json()["files"] == []


def test_read_log_pages(client, logs_dir):
    resp = client.get("/api/logs/new.txt", params={"page": "2", "limit": "2"})
    assert resp.status_code == 200
    page = resp.json()["file"]
    assert page["lines"] == ["c", "d"]
    assert page["totalLines"] == 5
    assert page["totalPages"] == 3
    assert page["currentPage"] == 2
    assert page["linesPerPage"] == 2
    assert page["hasSearch"] is False


def test_read_log_search_is_case_insensitive(client, logs_dir):
    resp = client.get("/api/logs/old.log", params={"search": "error"})
    page = resp.json()["file"]
    assert page["lines"] == ["ERROR disk full"]
    assert page["totalLines"] == 1
    assert page["hasSearch"] is True
    assert page["searchTerm"] == "error"


def test_read_log_bad_paging_params_fall_back(client, logs_dir):
    resp = client.get("/api/logs/new.txt", params={"page": "zero", "limit": "-3"})
    page = resp.json()["file"]
    assert page["currentPage"] == 1
    assert page["linesPerPage"] == 100
    assert len(page["lines"]) == 5


def test_search_without_matches_is_empty_page(client, logs_dir):
    page = client.get("/api/logs/old.log", params={"search": "nothing"}).json()["file"]
    assert page["lines"] == []
    assert page["totalPages"] == 0


def test_read_missing_log(client, logs_dir):
    resp = client.get("/api/logs/missing.log")
    assert resp.status_code == 404
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "File not found"
    assert "missing.log" in body["message"]


def test_download_log(client, logs_dir):
    resp = client.get("/api/download/old.log")
    assert resp.status_code == 200
    assert resp.text == "boot\nERROR disk full\nready"
    assert "old.log" in resp.headers["content-disposition"]


def test_download_missing_log(client, logs_dir):
    resp = client.get("/api/download/missing.log")
    assert resp.status_code == 404
    assert resp.json()["success"] is False
