"""
Student admin ports.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from practicals.domain.entities import Student


class StudentRepoPort(Protocol):
    def save(self, student: Student) -> Student: ...

    def get_by_id(self, student_id: UUID) -> Student | None: ...

    def get_by_email(self, email: str) -> Student | None: ...

    def delete(self, student_id: UUID) -> bool: ...

    def search(self, query: str, offset: int, limit: int) -> list[Student]:
        """Newest first; matches name, email or course case-insensitively."""
        ...

    def count(self, query: str) -> int: ...


class StudentRulesPort(Protocol):
    def get_default_page_size(self) -> int: ...

    def get_max_page_size(self) -> int: ...

    def get_name_length(self) -> tuple[int, int]: ...
