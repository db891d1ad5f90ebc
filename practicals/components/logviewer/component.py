"""
Log viewer component.

Lists the log files in the logs directory and serves one page of a file at
a time, optionally filtered by a case-insensitive substring.

Key behaviors:
- Only files with an allowed extension (.txt, .log) are listed
- Listing is newest-modified first
- Names resolving outside the logs directory are refused (access_denied)
- A search with no matches is an empty page, not an error
"""

from __future__ import annotations

import logging
import math

from practicals.domain.formatting import format_file_size, parse_page_param

from .models import (
    ListLogsOutput,
    LogError,
    LogFileInfo,
    LogPage,
    ReadLogInput,
    ReadLogOutput,
    ResolveLogInput,
    ResolveLogOutput,
)
from .ports import LogStorePort, LogViewerRulesPort

logger = logging.getLogger(__name__)

DEFAULT_LINES_PER_PAGE = 100
DEFAULT_EXTENSIONS = (".txt", ".log")


# --- Pure Functions ---


def is_log_file(name: str, extensions: tuple[str, ...] | list[str] = DEFAULT_EXTENSIONS) -> bool:
    return name.endswith(tuple(extensions))


def filter_lines(lines: list[str], search: str) -> list[str]:
    """Keep lines containing `search`, ignoring case. Empty search keeps all."""
    if not search:
        return lines
    needle = search.lower()
    return [line for line in lines if needle in line.lower()]


def paginate_lines(
    content: str,
    page: int,
    lines_per_page: int,
    search: str = "",
) -> tuple[list[str], int, int]:
    """
    Split content on newlines, filter, and slice one page.

    Returns:
        (page_lines, total_lines, total_pages)
    """
    lines = filter_lines(content.split("\n"), search)
    total_lines = len(lines)
    total_pages = math.ceil(total_lines / lines_per_page)
    start = (page - 1) * lines_per_page
    return lines[start : start + lines_per_page], total_lines, total_pages


def _access_denied() -> LogError:
    return LogError(code="access_denied", error="Access denied", message="Invalid file path")


def _not_found(filename: str) -> LogError:
    return LogError(
        code="not_found",
        error="File not found",
        message=f"The log file '{filename}' does not exist",
    )


# --- Shell Functions ---


def run_list(store: LogStorePort, rules: LogViewerRulesPort) -> ListLogsOutput:
    """List log files, newest first."""
    extensions = rules.get_allowed_extensions()
    try:
        entries = [f for f in store.list_files() if is_log_file(f.name, extensions)]
    except OSError as e:
        logger.exception("Error listing log files")
        return ListLogsOutput(
            success=False,
            error=LogError(code="read_failed", error="Failed to list log files", message=str(e)),
        )

    files = [
        LogFileInfo(
            name=f.name,
            size=f.size,
            size_formatted=format_file_size(f.size),
            modified=f.modified,
        )
        for f in sorted(entries, key=lambda f: f.modified, reverse=True)
    ]
    return ListLogsOutput(success=True, files=files)


def run_read(
    inp: ReadLogInput,
    store: LogStorePort,
    rules: LogViewerRulesPort,
) -> ReadLogOutput:
    """Read one page of a log file."""
    try:
        stat = store.stat(inp.filename)
    except ValueError:
        return ReadLogOutput(success=False, error=_access_denied())
    except FileNotFoundError:
        return ReadLogOutput(success=False, error=_not_found(inp.filename))

    page = parse_page_param(inp.page, 1)
    lines_per_page = parse_page_param(inp.limit, rules.get_default_page_size())
    search = inp.search or ""

    try:
        content = store.read_text(inp.filename)
    except OSError as e:
        logger.exception("Error reading log file %s", inp.filename)
        return ReadLogOutput(
            success=False,
            error=LogError(code="read_failed", error="Failed to read log file", message=str(e)),
        )

    lines, total_lines, total_pages = paginate_lines(content, page, lines_per_page, search)

    return ReadLogOutput(
        success=True,
        page=LogPage(
            name=inp.filename,
            size=stat.size,
            size_formatted=format_file_size(stat.size),
            modified=stat.modified,
            lines=lines,
            total_lines=total_lines,
            current_page=page,
            total_pages=total_pages,
            lines_per_page=lines_per_page,
            has_search=bool(search),
            search_term=search,
        ),
    )


def run_resolve_download(inp: ResolveLogInput, store: LogStorePort) -> ResolveLogOutput:
    """Resolve a log file name to a path for download."""
    try:
        path = store.path_for(inp.filename)
    except ValueError:
        return ResolveLogOutput(success=False, error=_access_denied())

    if not path.is_file():
        return ResolveLogOutput(success=False, error=_not_found(inp.filename))
    return ResolveLogOutput(success=True, path=str(path))
