"""
Log viewer component.

Paginated, searchable view over plain-text log files.
"""

from practicals.components.logviewer.component import (
    DEFAULT_EXTENSIONS,
    DEFAULT_LINES_PER_PAGE,
    filter_lines,
    is_log_file,
    paginate_lines,
    run_list,
    run_read,
    run_resolve_download,
)
from practicals.components.logviewer.models import (
    ListLogsOutput,
    LogError,
    LogFileInfo,
    LogPage,
    ReadLogInput,
    ReadLogOutput,
    ResolveLogInput,
    ResolveLogOutput,
)
from practicals.components.logviewer.ports import LogStorePort, LogViewerRulesPort

__all__ = [
    # Component
    "run_list",
    "run_read",
    "run_resolve_download",
    # Pure functions
    "filter_lines",
    "is_log_file",
    "paginate_lines",
    # Constants
    "DEFAULT_EXTENSIONS",
    "DEFAULT_LINES_PER_PAGE",
    # Models
    "LogFileInfo",
    "LogPage",
    "LogError",
    "ReadLogInput",
    "ReadLogOutput",
    "ResolveLogInput",
    "ResolveLogOutput",
    "ListLogsOutput",
    # Ports
    "LogStorePort",
    "LogViewerRulesPort",
]
