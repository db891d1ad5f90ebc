"""
Resume portal models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadError:
    """`code` is one of missing_file, invalid_type, too_large."""

    code: str
    message: str


@dataclass(frozen=True)
class UploadedResume:
    name: str
    original_name: str
    size: str
    upload_date: str


@dataclass(frozen=True)
class UploadResumeInput:
    original_name: str | None
    content_type: str | None
    data: bytes | None


@dataclass(frozen=True)
class UploadResumeOutput:
    success: bool
    stored_name: str | None = None
    message: str = ""
    error: UploadError | None = None


@dataclass(frozen=True)
class ListResumesOutput:
    uploaded_files: list[UploadedResume] = field(default_factory=list)

    @property
    def total_uploads(self) -> int:
        return len(self.uploaded_files)
