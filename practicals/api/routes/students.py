"""Student records admin API."""

import sqlite3
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from practicals.api.deps import get_student_service
from practicals.api.schemas import MessageResponse, StudentPageResponse, StudentResponse
from practicals.components.students import (
    CreateStudentInput,
    ListStudentsInput,
    StudentOperationOutput,
    StudentService,
    UpdateStudentInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from practicals.domain.entities import Student

router = APIRouter()

MSG_DUPLICATE = "A student with this email already exists"


def _to_response(student: Student) -> StudentResponse:
    return StudentResponse.model_validate(student.model_dump())


def _duplicate() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT, content={"message": MSG_DUPLICATE, "field": "email"}
    )


def _error_response(result: StudentOperationOutput) -> JSONResponse:
    if result.not_found:
        return JSONResponse(status_code=404, content={"message": "Student not found"})
    if result.duplicate:
        return _duplicate()
    return JSONResponse(
        status_code=400,
        content={
            "message": "Validation failed",
            "errors": [{"field": e.field, "message": e.message} for e in result.errors],
        },
    )


@router.post("", response_model=StudentResponse, status_code=201)
def create_student(
    data: dict[str, Any] = Body(...),
    service: StudentService = Depends(get_student_service),
) -> StudentResponse | JSONResponse:
    try:
        result = run_create(CreateStudentInput(data=data), service)
    except sqlite3.IntegrityError:
        # Lost a race with another insert of the same email
        return _duplicate()
    if not result.success:
        return _error_response(result)
    assert result.student is not None
    return _to_response(result.student)


@router.get("", response_model=StudentPageResponse)
def list_students(
    q: str = "",
    page: str | None = None,
    limit: str | None = None,
    service: StudentService = Depends(get_student_service),
) -> StudentPageResponse:
    result = run_list(ListStudentsInput(q=q, page=page, limit=limit), service)
    return StudentPageResponse(
        items=[_to_response(s) for s in result.items],
        total=result.total,
        page=result.page,
        pages=result.pages,
    )


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(
    student_id: str,
    service: StudentService = Depends(get_student_service),
) -> StudentResponse | JSONResponse:
    result = run_get(student_id, service)
    if not result.success:
        return _error_response(result)
    assert result.student is not None
    return _to_response(result.student)


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: str,
    data: dict[str, Any] = Body(...),
    service: StudentService = Depends(get_student_service),
) -> StudentResponse | JSONResponse:
    try:
        result = run_update(UpdateStudentInput(student_id=student_id, data=data), service)
    except sqlite3.IntegrityError:
        return _duplicate()
    if not result.success:
        return _error_response(result)
    assert result.student is not None
    return _to_response(result.student)


@router.delete("/{student_id}", response_model=MessageResponse)
def delete_student(
    student_id: str,
    service: StudentService = Depends(get_student_service),
) -> MessageResponse | JSONResponse:
    result = run_delete(student_id, service)
    if not result.success:
        return _error_response(result)
    return MessageResponse(message="Deleted")
