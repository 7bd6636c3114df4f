from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, Table, UniqueConstraint

from models.base import ID_TYPE, Base


def _ref(target: str, name: str) -> Column:
    return Column(name, ID_TYPE, ForeignKey(target, ondelete="CASCADE"), nullable=False)


# Owner-side many-to-many links. Rows go away with either end.

batch_program = Table(
    "batch_program",
    Base.metadata,
    _ref("batches.id", "batch_id"),
    _ref("programs.id", "program_id"),
    UniqueConstraint("batch_id", "program_id", name="uq_batch_program"),
)

program_subject = Table(
    "program_subject",
    Base.metadata,
    _ref("programs.id", "program_id"),
    _ref("subjects.id", "subject_id"),
    UniqueConstraint("program_id", "subject_id", name="uq_program_subject"),
)

program_semester = Table(
    "program_semester",
    Base.metadata,
    _ref("programs.id", "program_id"),
    _ref("semesters.id", "semester_id"),
    UniqueConstraint("program_id", "semester_id", name="uq_program_semester"),
)

program_session = Table(
    "program_session",
    Base.metadata,
    _ref("programs.id", "program_id"),
    _ref("academic_sessions.id", "session_id"),
    UniqueConstraint("program_id", "session_id", name="uq_program_session"),
)

program_class_room = Table(
    "program_class_room",
    Base.metadata,
    _ref("programs.id", "program_id"),
    _ref("class_rooms.id", "class_room_id"),
    UniqueConstraint("program_id", "class_room_id", name="uq_program_class_room"),
)

program_semester_sections = Table(
    "program_semester_sections",
    Base.metadata,
    _ref("programs.id", "program_id"),
    _ref("semesters.id", "semester_id"),
    _ref("sections.id", "section_id"),
    UniqueConstraint("program_id", "semester_id", "section_id", name="uq_program_semester_sections"),
)

enroll_subject_subject = Table(
    "enroll_subject_subject",
    Base.metadata,
    _ref("enroll_subjects.id", "enroll_subject_id"),
    _ref("subjects.id", "subject_id"),
    UniqueConstraint("enroll_subject_id", "subject_id", name="uq_enroll_subject_subject"),
)

student_enroll_subject = Table(
    "student_enroll_subject",
    Base.metadata,
    _ref("student_enrolls.id", "student_enroll_id"),
    _ref("subjects.id", "subject_id"),
    UniqueConstraint("student_enroll_id", "subject_id", name="uq_student_enroll_subject"),
    Index("ix_student_enroll_subject_subject", "subject_id"),
)


# Attribute name on the owning entity -> (pivot table, owner column, related column).
PIVOTS: dict[str, dict[str, tuple[Table, str, str]]] = {
    "batches": {"programs": (batch_program, "batch_id", "program_id")},
    "semesters": {"programs": (program_semester, "semester_id", "program_id")},
    "subjects": {"programs": (program_subject, "subject_id", "program_id")},
    "academic_sessions": {"programs": (program_session, "session_id", "program_id")},
    "class_rooms": {"programs": (program_class_room, "class_room_id", "program_id")},
    "enroll_subjects": {"subjects": (enroll_subject_subject, "enroll_subject_id", "subject_id")},
}
