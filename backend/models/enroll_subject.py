from __future__ import annotations

from sqlalchemy import Column, Index, String

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, fk_column, id_column
from models.enums import Status


class EnrollSubject(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    """A subject list offered to one (program, semester, section) combination.

    The combination is unique among live rows only, so it is checked by the
    validator rather than a table constraint.
    """

    __tablename__ = "enroll_subjects"

    id = id_column()
    program_id = fk_column("programs.id", ondelete="CASCADE")
    semester_id = fk_column("semesters.id", ondelete="CASCADE")
    section_id = fk_column("sections.id", ondelete="CASCADE")
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)

    __table_args__ = (
        Index("ix_enroll_subjects_combination", "program_id", "semester_id", "section_id"),
        Index("ix_enroll_subjects_status", "status"),
    )
