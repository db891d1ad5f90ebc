"""
Log viewer component models.

Data models for listing log files and reading them one page at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class LogFileInfo:
    """A log file as shown in the file list."""

    name: str
    size: int
    size_formatted: str
    modified: datetime


@dataclass(frozen=True)
class LogPage:
    """A window of lines from one log file."""

    name: str
    size: int
    size_formatted: str
    modified: datetime
    lines: list[str]
    total_lines: int
    current_page: int
    total_pages: int
    lines_per_page: int
    has_search: bool
    search_term: str


@dataclass(frozen=True)
class LogError:
    """Error detail. `code` is one of access_denied, not_found, read_failed."""

    code: str
    error: str
    message: str


# --- Input Models ---


@dataclass(frozen=True)
class ReadLogInput:
    filename: str
    page: str | int | None = None
    limit: str | int | None = None
    search: str = ""


@dataclass(frozen=True)
class ResolveLogInput:
    filename: str


# --- Output Models ---


@dataclass(frozen=True)
class ListLogsOutput:
    success: bool
    files: list[LogFileInfo] = field(default_factory=list)
    error: LogError | None = None


@dataclass(frozen=True)
class ReadLogOutput:
    success: bool
    page: LogPage | None = None
    error: LogError | None = None


@dataclass(frozen=True)
class ResolveLogOutput:
    success: bool
    path: str | None = None
    error: LogError | None = None
