"""Log viewer: list, page through and download files from the logs directory."""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse

from practicals.adapters.fs.filestore import FileSystemStore
from practicals.api.deps import LogViewerRulesAdapter, get_log_rules, get_log_store
from practicals.api.schemas import (
    LogFileResponse,
    LogListResponse,
    LogPageResponse,
    LogReadResponse,
)
from practicals.components.logviewer import (
    LogError,
    ReadLogInput,
    ResolveLogInput,
    run_list,
    run_read,
    run_resolve_download,
)

router = APIRouter()

_STATUS_BY_CODE = {"access_denied": 403, "not_found": 404, "read_failed": 500}


def _error_response(error: LogError) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_BY_CODE.get(error.code, 500),
        content={"success": False, "error": error.error, "message": error.message},
    )


@router.get("/api/logs", response_model=LogListResponse)
def list_logs(
    store: FileSystemStore = Depends(get_log_store),
    rules: LogViewerRulesAdapter = Depends(get_log_rules),
) -> LogListResponse | JSONResponse:
    result = run_list(store, rules)
    if result.error:
        return _error_response(result.error)
    return LogListResponse(
        files=[
            LogFileResponse(
                name=f.name, size=f.size, size_formatted=f.size_formatted, modified=f.modified
            )
            for f in result.files
        ]
    )


@router.get("/api/logs/{filename}", response_model=LogReadResponse)
def read_log(
    filename: str,
    page: str | None = None,
    limit: str | None = None,
    search: str = "",
    store: FileSystemStore = Depends(get_log_store),
    rules: LogViewerRulesAdapter = Depends(get_log_rules),
) -> LogReadResponse | JSONResponse:
    result = run_read(
        ReadLogInput(filename=filename, page=page, limit=limit, search=search), store, rules
    )
    if result.error:
        return _error_response(result.error)

    p = result.page
    assert p is not None  # Success guarantees a page
    return LogReadResponse(
        file=LogPageResponse(
            name=p.name,
            size=p.size,
            size_formatted=p.size_formatted,
            modified=p.modified,
            lines=p.lines,
            total_lines=p.total_lines,
            current_page=p.current_page,
            total_pages=p.total_pages,
            lines_per_page=p.lines_per_page,
            has_search=p.has_search,
            search_term=p.search_term,
        )
    )


@router.get("/api/download/{filename}", response_model=None)
def download_log(
    filename: str,
    store: FileSystemStore = Depends(get_log_store),
) -> FileResponse | JSONResponse:
    result = run_resolve_download(ResolveLogInput(filename=filename), store)
    if result.error:
        return _error_response(result.error)
    assert result.path is not None
    return FileResponse(result.path, filename=filename, media_type="text/plain")
