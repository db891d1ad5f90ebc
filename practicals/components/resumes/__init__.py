"""Resume portal component."""

from practicals.components.resumes.component import (
    MSG_INVALID_TYPE,
    MSG_MISSING_FILE,
    MSG_TOO_LARGE,
    build_stored_name,
    format_upload_date,
    is_safe_name,
    original_name_of,
    resolve_download,
    run_clear_all,
    run_delete,
    run_list,
    run_upload,
    validate_upload,
)
from practicals.components.resumes.models import (
    ListResumesOutput,
    UploadedResume,
    UploadError,
    UploadResumeInput,
    UploadResumeOutput,
)
from practicals.components.resumes.ports import ResumeStorePort, UploadRulesPort

__all__ = [
    # Component
    "run_upload",
    "run_list",
    "run_delete",
    "run_clear_all",
    "resolve_download",
    # Pure functions
    "build_stored_name",
    "format_upload_date",
    "is_safe_name",
    "original_name_of",
    "validate_upload",
    # Messages
    "MSG_INVALID_TYPE",
    "MSG_MISSING_FILE",
    "MSG_TOO_LARGE",
    # Models
    "ListResumesOutput",
    "UploadedResume",
    "UploadError",
    "UploadResumeInput",
    "UploadResumeOutput",
    # Ports
    "ResumeStorePort",
    "UploadRulesPort",
]
