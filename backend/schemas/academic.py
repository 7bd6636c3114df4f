from __future__ import annotations

from datetime import date
from decimal import Decimal

from schemas.common import SoftDeletedOut


class FacultyOut(SoftDeletedOut):
    name: str
    slug: str
    code: str
    description: str | None = None
    dean_name: str | None = None
    dean_email: str | None = None
    dean_phone: str | None = None
    status: str
    sort_order: int


class ProgramOut(SoftDeletedOut):
    faculty_id: int
    name: str
    slug: str
    code: str
    description: str | None = None
    duration_years: int
    total_credits: int
    fee_amount: Decimal | None = None
    degree_type: str
    admission_requirements: str | None = None
    is_registration_open: bool
    status: str
    sort_order: int


class BatchOut(SoftDeletedOut):
    program_id: int
    name: str
    code: str
    academic_year: int
    start_date: date
    end_date: date
    max_students: int | None = None
    description: str | None = None
    status: str
    sort_order: int


class SectionOut(SoftDeletedOut):
    batch_id: int
    name: str
    seat: int | None = None
    description: str | None = None
    status: str
    sort_order: int


class SemesterOut(SoftDeletedOut):
    name: str
    academic_year: int
    start_date: date
    end_date: date
    is_current: bool
    description: str | None = None
    status: str
    sort_order: int


class SubjectOut(SoftDeletedOut):
    name: str
    code: str
    credit_hours: int
    subject_type: str
    class_type: str
    total_marks: Decimal | None = None
    passing_marks: Decimal | None = None
    description: str | None = None
    learning_outcomes: str | None = None
    prerequisites: str | None = None
    status: str


class AcademicSessionOut(SoftDeletedOut):
    name: str
    code: str
    start_date: date
    end_date: date
    is_current: bool
    description: str | None = None
    status: str
    sort_order: int


class ClassRoomOut(SoftDeletedOut):
    name: str
    floor: str | None = None
    capacity: int
    room_type: str
    description: str | None = None
    facilities: list[str] | None = None
    is_available: bool
    status: str


class EnrollSubjectOut(SoftDeletedOut):
    program_id: int
    semester_id: int
    section_id: int
    status: str
