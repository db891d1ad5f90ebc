"""Résumé portal: PDF uploads stored under the uploads directory."""

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse, JSONResponse

from practicals.adapters.clock import SystemClock
from practicals.adapters.fs.filestore import FileSystemStore
from practicals.api.deps import UploadRulesAdapter, get_clock, get_upload_rules, get_upload_store
from practicals.api.schemas import (
    ResumeClearResponse,
    ResumeListResponse,
    ResumeResponse,
    ResumeUploadResponse,
)
from practicals.components.resumes import (
    UploadResumeInput,
    resolve_download,
    run_clear_all,
    run_delete,
    run_list,
    run_upload,
)

router = APIRouter()

_STATUS_BY_CODE = {"missing_file": 400, "invalid_type": 400, "too_large": 413}


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"success": False, "message": "File not found"})


@router.get("/", response_model=ResumeListResponse)
def list_resumes(
    store: FileSystemStore = Depends(get_upload_store),
    rules: UploadRulesAdapter = Depends(get_upload_rules),
) -> ResumeListResponse:
    result = run_list(store, rules)
    return ResumeListResponse(
        uploaded_files=[
            ResumeResponse(
                name=r.name,
                original_name=r.original_name,
                size=r.size,
                upload_date=r.upload_date,
            )
            for r in result.uploaded_files
        ],
        total_uploads=result.total_uploads,
    )


@router.post("/upload", response_model=ResumeUploadResponse)
def upload_resume(
    resume: UploadFile | None = File(None),
    store: FileSystemStore = Depends(get_upload_store),
    rules: UploadRulesAdapter = Depends(get_upload_rules),
    clock: SystemClock = Depends(get_clock),
) -> ResumeUploadResponse | JSONResponse:
    inp = UploadResumeInput(original_name=None, content_type=None, data=None)
    if resume is not None:
        # One byte past the limit is enough to reject
        data = resume.file.read(rules.get_max_bytes() + 1)
        inp = UploadResumeInput(
            original_name=resume.filename, content_type=resume.content_type, data=data
        )

    result = run_upload(inp, store, rules, clock)
    if result.error:
        return JSONResponse(
            status_code=_STATUS_BY_CODE.get(result.error.code, 400),
            content={"success": False, "message": result.error.message},
        )
    assert result.stored_name is not None
    return ResumeUploadResponse(message=result.message, filename=result.stored_name)


@router.get("/download/{filename}", response_model=None)
def download_resume(
    filename: str,
    store: FileSystemStore = Depends(get_upload_store),
) -> FileResponse | JSONResponse:
    path = resolve_download(filename, store)
    if path is None:
        return _not_found()
    return FileResponse(path, filename=f"resume_{filename}", media_type="application/pdf")


@router.post("/delete/{filename}", response_model=None)
def delete_resume(
    filename: str,
    store: FileSystemStore = Depends(get_upload_store),
) -> dict[str, object] | JSONResponse:
    if not run_delete(filename, store):
        return _not_found()
    return {"success": True, "message": f"Deleted {filename}"}


@router.post("/clear-all", response_model=ResumeClearResponse)
def clear_all_resumes(
    store: FileSystemStore = Depends(get_upload_store),
    rules: UploadRulesAdapter = Depends(get_upload_rules),
) -> ResumeClearResponse:
    count = run_clear_all(store, rules)
    return ResumeClearResponse(message=f"Cleared {count} resume(s)", count=count)
