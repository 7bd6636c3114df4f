from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Index, Integer, Numeric, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, id_column, live_unique
from models.enums import ClassType, Status, SubjectType


class Subject(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "subjects"

    id = id_column()
    name = Column(String(255), nullable=False)
    code = Column(String(50), nullable=False)
    credit_hours = Column(Integer, nullable=False)
    subject_type = Column(String(20), nullable=False, default=SubjectType.COMPULSORY.value)
    class_type = Column(String(20), nullable=False, default=ClassType.THEORY.value)
    total_marks = Column(Numeric(6, 2), nullable=True)
    passing_marks = Column(Numeric(6, 2), nullable=True)
    description = Column(Text, nullable=True)
    learning_outcomes = Column(Text, nullable=True)
    prerequisites = Column(String(500), nullable=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)

    __table_args__ = (
        live_unique("subjects", "name"),
        live_unique("subjects", "code"),
        CheckConstraint("credit_hours >= 1", name="ck_subjects_credit_hours"),
        Index("ix_subjects_status_type", "status", "subject_type"),
        Index("ix_subjects_type_class", "subject_type", "class_type"),
    )
