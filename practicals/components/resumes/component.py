"""
Resume portal component.

Accepts single PDF uploads, lists what has been stored, and removes
stored files. Stored names are `<prefix>_<epoch-ms>_<random><ext>`; the
original name is recovered by stripping that prefix.
"""

from __future__ import annotations

import logging
import os
import random
import re
from datetime import datetime

from practicals.core.ports.time import TimePort
from practicals.domain.formatting import SIZE_UNITS_LONG, format_file_size

from .models import (
    ListResumesOutput,
    UploadedResume,
    UploadError,
    UploadResumeInput,
    UploadResumeOutput,
)
from .ports import ResumeStorePort, UploadRulesPort

logger = logging.getLogger(__name__)

MSG_MISSING_FILE = "Please select a PDF file to upload! 📁"
MSG_INVALID_TYPE = "Only PDF files are allowed for resume uploads! 📄"
MSG_TOO_LARGE = "File size too large! Please upload a PDF file smaller than 2MB. 📦"

_STORED_PREFIX = re.compile(r"^[A-Za-z]+_\d+_\d+")


def build_stored_name(
    original_name: str,
    now: datetime,
    prefix: str = "resume",
    rng: random.Random | None = None,
) -> str:
    epoch_ms = int(now.timestamp() * 1000)
    suffix = (rng or random).randint(0, 10**9)
    ext = os.path.splitext(original_name)[1]
    return f"{prefix}_{epoch_ms}_{suffix}{ext}"


def original_name_of(stored_name: str) -> str:
    return _STORED_PREFIX.sub("", stored_name, count=1)


def format_upload_date(dt: datetime) -> str:
    """e.g. "March 5, 2025, 09:07 AM"."""
    return f"{dt:%B} {dt.day}, {dt.year}, {dt:%I:%M %p}"


def is_safe_name(filename: str) -> bool:
    return ".." not in filename and "/" not in filename and "\\" not in filename


def validate_upload(inp: UploadResumeInput, rules: UploadRulesPort) -> UploadError | None:
    if not inp.original_name or inp.data is None:
        return UploadError(code="missing_file", message=MSG_MISSING_FILE)
    if inp.content_type not in rules.get_allowed_mime_types():
        return UploadError(code="invalid_type", message=MSG_INVALID_TYPE)
    if len(inp.data) > rules.get_max_bytes():
        return UploadError(code="too_large", message=MSG_TOO_LARGE)
    return None


def run_upload(
    inp: UploadResumeInput,
    store: ResumeStorePort,
    rules: UploadRulesPort,
    time: TimePort,
    rng: random.Random | None = None,
) -> UploadResumeOutput:
    error = validate_upload(inp, rules)
    if error:
        return UploadResumeOutput(success=False, error=error, message=error.message)

    original_name = inp.original_name or ""
    data = inp.data or b""
    stored_name = build_stored_name(original_name, time.now_utc(), rules.get_filename_prefix(), rng)
    store.save(stored_name, data)

    size = format_file_size(len(data), SIZE_UNITS_LONG)
    logger.info("File uploaded: %s (%s) -> %s", inp.original_name, size, stored_name)
    return UploadResumeOutput(
        success=True,
        stored_name=stored_name,
        message=(
            f'✅ Resume uploaded successfully! "{inp.original_name}" ({size}) '
            "is now available for employers to view."
        ),
    )


def run_list(store: ResumeStorePort, rules: UploadRulesPort) -> ListResumesOutput:
    """Stored resumes, newest upload first."""
    extensions = tuple(rules.get_allowed_extensions())
    entries = [f for f in store.list_files() if f.name.endswith(extensions)]
    entries.sort(key=lambda f: f.created, reverse=True)
    return ListResumesOutput(
        uploaded_files=[
            UploadedResume(
                name=f.name,
                original_name=original_name_of(f.name),
                size=format_file_size(f.size, SIZE_UNITS_LONG),
                upload_date=format_upload_date(f.created.astimezone()),
            )
            for f in entries
        ]
    )


def run_delete(filename: str, store: ResumeStorePort) -> bool:
    """Remove one stored resume. Unsafe or missing names are ignored."""
    if not is_safe_name(filename):
        return False
    deleted = store.delete(filename)
    if deleted:
        logger.info("File deleted: %s", filename)
    return deleted


def run_clear_all(store: ResumeStorePort, rules: UploadRulesPort) -> int:
    extensions = tuple(rules.get_allowed_extensions())
    count = 0
    for f in store.list_files():
        if f.name.endswith(extensions) and store.delete(f.name):
            count += 1
    logger.info("Cleared %d resume files", count)
    return count


def resolve_download(filename: str, store: ResumeStorePort) -> str | None:
    """Absolute path for a stored resume, or None when missing or unsafe."""
    if not is_safe_name(filename):
        return None
    try:
        path = store.path_for(filename)
    except ValueError:
        return None
    return str(path) if path.is_file() else None
