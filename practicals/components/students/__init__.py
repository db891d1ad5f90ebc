"""
Students component.

Student records for the admin panel: create, read, update, delete, and a
paged case-insensitive search.
"""

from practicals.components.students._impl import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    StudentService,
    normalize_student_data,
    resolve_limit,
    resolve_page,
    validate_student_data,
)
from practicals.components.students.component import (
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from practicals.components.students.models import (
    CreateStudentInput,
    ListStudentsInput,
    StudentOperationOutput,
    StudentPage,
    StudentValidationError,
    UpdateStudentInput,
)
from practicals.components.students.ports import StudentRepoPort, StudentRulesPort

__all__ = [
    # Component
    "run_create",
    "run_update",
    "run_get",
    "run_delete",
    "run_list",
    # Service
    "StudentService",
    "normalize_student_data",
    "validate_student_data",
    "resolve_page",
    "resolve_limit",
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    # Models
    "CreateStudentInput",
    "UpdateStudentInput",
    "ListStudentsInput",
    "StudentOperationOutput",
    "StudentPage",
    "StudentValidationError",
    # Ports
    "StudentRepoPort",
    "StudentRulesPort",
]
