"""
Students component - admin CRUD for student records.

Shell Layer - adapts inputs to StudentService calls.
"""

from __future__ import annotations

from ._impl import StudentService
from .models import (
    CreateStudentInput,
    ListStudentsInput,
    StudentOperationOutput,
    StudentPage,
    StudentValidationError,
    UpdateStudentInput,
)


def run_create(inp: CreateStudentInput, service: StudentService) -> StudentOperationOutput:
    student, errors = service.create(inp.data)
    return StudentOperationOutput(student=student, errors=errors, success=student is not None)


def run_update(inp: UpdateStudentInput, service: StudentService) -> StudentOperationOutput:
    student, errors = service.update(inp.student_id, inp.data)
    return StudentOperationOutput(student=student, errors=errors, success=student is not None)


def run_get(student_id: str, service: StudentService) -> StudentOperationOutput:
    student = service.get(student_id)
    if student is None:
        return StudentOperationOutput(
            student=None,
            errors=[StudentValidationError("student_not_found", "Student not found")],
            success=False,
        )
    return StudentOperationOutput(student=student, errors=[], success=True)


def run_delete(student_id: str, service: StudentService) -> StudentOperationOutput:
    if not service.delete(student_id):
        return StudentOperationOutput(
            student=None,
            errors=[StudentValidationError("student_not_found", "Student not found")],
            success=False,
        )
    return StudentOperationOutput(student=None, errors=[], success=True)


def run_list(inp: ListStudentsInput, service: StudentService) -> StudentPage:
    return service.list_page(inp.q, inp.page, inp.limit)
