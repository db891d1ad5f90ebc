"""
Student admin models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from practicals.domain.entities import Student


@dataclass(frozen=True)
class StudentValidationError:
    """Validation error detail."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateStudentInput:
    data: dict[str, Any]


@dataclass(frozen=True)
class UpdateStudentInput:
    student_id: str
    data: dict[str, Any]


@dataclass(frozen=True)
class ListStudentsInput:
    q: str = ""
    page: str | int | None = None
    limit: str | int | None = None


# --- Output Models ---


@dataclass
class StudentOperationOutput:
    student: Student | None
    errors: list[StudentValidationError]
    success: bool

    @property
    def not_found(self) -> bool:
        return any(e.code == "student_not_found" for e in self.errors)

    @property
    def duplicate(self) -> bool:
        return any(e.code == "email_duplicate" for e in self.errors)


@dataclass
class StudentPage:
    items: list[Student] = field(default_factory=list)
    total: int = 0
    page: int = 1
    pages: int = 0
