"""
Students component unit tests.

Tests for validation, CRUD, duplicate detection, and paged search.
"""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID

import pytest

from practicals.adapters.clock import FixedClock
from practicals.components.students import (
    CreateStudentInput,
    ListStudentsInput,
    StudentService,
    UpdateStudentInput,
    normalize_student_data,
    resolve_limit,
    resolve_page,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
    validate_student_data,
)
from practicals.domain.entities import Student

# --- Mock Implementations ---


class MockStudentRules:
    def __init__(self, name_length: tuple[int, int] = (2, 100)) -> None:
        self._name_length = name_length

    def get_default_page_size(self) -> int:
        return 50

    def get_max_page_size(self) -> int:
        return 100

    def get_name_length(self) -> tuple[int, int]:
        return self._name_length


class MockStudentRepo:
    """In-memory student repository for testing."""

    def __init__(self) -> None:
        self._students: dict[UUID, Student] = {}

    def save(self, student: Student) -> Student:
        self._students[student.id] = student
        return student

    def get_by_id(self, student_id: UUID) -> Student | None:
        return self._students.get(student_id)

    def get_by_email(self, email: str) -> Student | None:
        return next((s for s in self._students.values() if s.email == email), None)

    def delete(self, student_id: UUID) -> bool:
        return self._students.pop(student_id, None) is not None

    def _matching(self, query: str) -> list[Student]:
        q = query.lower()
        found = [
            s
            for s in self._students.values()
            if not q or q in s.name.lower() or q in s.email.lower() or q in s.course.lower()
        ]
        return sorted(found, key=lambda s: s.created_at, reverse=True)

    def search(self, query: str, offset: int, limit: int) -> list[Student]:
        return self._matching(query)[offset : offset + limit]

    def count(self, query: str) -> int:
        return len(self._matching(query))


# --- Fixtures ---


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def service(clock: FixedClock) -> StudentService:
    return StudentService(MockStudentRepo(), clock)


def _payload(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "name": "Asha Patel",
        "email": "asha@example.com",
        "phone": "+91 98765-43210",
        "course": "Computer Science",
    }
    data.update(overrides)
    return data


# --- Validation ---


class TestValidation:
    def test_normalizes(self) -> None:
        clean = normalize_student_data(
            {"name": "  Ravi  ", "email": " RAVI@Example.COM ", "feePaid": True, "phone": ""}
        )
        assert clean["name"] == "Ravi"
        assert clean["email"] == "ravi@example.com"
        assert clean["fee_paid"] is True
        assert clean["phone"] is None

    def test_valid_record(self) -> None:
        assert validate_student_data(normalize_student_data(_payload())) == []

    def test_required_fields(self) -> None:
        errors = validate_student_data({})
        assert {e.field for e in errors} == {"name", "email", "course"}

    def test_name_length(self) -> None:
        errors = validate_student_data(normalize_student_data(_payload(name="A")))
        assert [e.code for e in errors] == ["name_length"]
        errors = validate_student_data(normalize_student_data(_payload(name="x" * 101)))
        assert [e.code for e in errors] == ["name_length"]

    def test_bad_email_and_phone(self) -> None:
        errors = validate_student_data(
            normalize_student_data(_payload(email="nope", phone="12ab"))
        )
        assert sorted(e.code for e in errors) == ["email_invalid", "phone_invalid"]


class TestPaging:
    @pytest.mark.parametrize(
        ("raw", "expected"), [(None, 1), ("3", 3), ("0", 1), ("-2", 1), ("x", 1)]
    )
    def test_resolve_page(self, raw: str | None, expected: int) -> None:
        assert resolve_page(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(None, 50), ("10", 10), ("0", 50), ("abc", 50), ("-3", 1), ("500", 100)],
    )
    def test_resolve_limit(self, raw: str | None, expected: int) -> None:
        assert resolve_limit(raw) == expected


# --- CRUD ---


class TestCreate:
    def test_create(self, service: StudentService, clock: FixedClock) -> None:
        out = run_create(CreateStudentInput(_payload(email="ASHA@example.com")), service)
        assert out.success
        assert out.student is not None
        assert out.student.email == "asha@example.com"
        assert out.student.fee_paid is False
        assert out.student.joined_at == clock.now_utc()

    def test_duplicate_email(self, service: StudentService) -> None:
        run_create(CreateStudentInput(_payload()), service)
        out = run_create(CreateStudentInput(_payload(name="Other")), service)
        assert not out.success
        assert out.duplicate

    def test_validation_failure(self, service: StudentService) -> None:
        out = run_create(CreateStudentInput({"name": "X"}), service)
        assert not out.success
        assert not out.duplicate
        assert out.errors

    def test_name_length_from_rules(self, clock: FixedClock) -> None:
        service = StudentService(MockStudentRepo(), clock, MockStudentRules((3, 5)))
        out = run_create(CreateStudentInput(_payload(name="Asha Patel")), service)
        assert [e.code for e in out.errors] == ["name_length"]
        assert out.errors[0].message == "Name must be between 3 and 5 characters"
        assert run_create(CreateStudentInput(_payload(name="Asha")), service).success


class TestReadUpdateDelete:
    def test_get_unknown_and_malformed_ids(self, service: StudentService) -> None:
        assert run_get("not-a-uuid", service).not_found
        assert run_get("00000000-0000-0000-0000-000000000000", service).not_found

    def test_update_merges(self, service: StudentService, clock: FixedClock) -> None:
        created = run_create(CreateStudentInput(_payload()), service).student
        assert created is not None
        clock.advance(minutes=5)

        out = run_update(UpdateStudentInput(str(created.id), {"feePaid": True}), service)
        assert out.success
        assert out.student is not None
        assert out.student.fee_paid is True
        assert out.student.name == "Asha Patel"
        assert out.student.updated_at == clock.now_utc()
        assert out.student.created_at == created.created_at

    def test_update_validates_merged_record(self, service: StudentService) -> None:
        created = run_create(CreateStudentInput(_payload()), service).student
        assert created is not None
        out = run_update(UpdateStudentInput(str(created.id), {"course": "  "}), service)
        assert not out.success
        assert [e.field for e in out.errors] == ["course"]

    def test_update_to_taken_email(self, service: StudentService) -> None:
        run_create(CreateStudentInput(_payload(email="one@example.com")), service)
        two = run_create(CreateStudentInput(_payload(email="two@example.com")), service).student
        assert two is not None
        out = run_update(UpdateStudentInput(str(two.id), {"email": "one@example.com"}), service)
        assert out.duplicate

    def test_update_missing(self, service: StudentService) -> None:
        out = run_update(UpdateStudentInput("00000000-0000-0000-0000-000000000000", {}), service)
        assert out.not_found

    def test_delete(self, service: StudentService) -> None:
        created = run_create(CreateStudentInput(_payload()), service).student
        assert created is not None
        assert run_delete(str(created.id), service).success
        assert run_delete(str(created.id), service).not_found


class TestList:
    def test_search_and_pages(self, service: StudentService, clock: FixedClock) -> None:
        for i in range(5):
            run_create(
                CreateStudentInput(
                    _payload(name=f"Student {i}", email=f"s{i}@example.com", course="Physics")
                ),
                service,
            )
            clock.advance(seconds=1)
        run_create(
            CreateStudentInput(_payload(name="Maya", email="maya@example.com", course="Biology")),
            service,
        )

        page = run_list(ListStudentsInput(q="physics", page="2", limit="2"), service)
        assert page.total == 5
        assert page.pages == 3
        assert page.page == 2
        assert [s.name for s in page.items] == ["Student 2", "Student 1"]

    def test_empty(self, service: StudentService) -> None:
        page = run_list(ListStudentsInput(), service)
        assert page.items == []
        assert page.total == 0
        assert page.pages == 0
