from __future__ import annotations

from sqlalchemy import Boolean, CheckConstraint, Column, Index, Integer, Numeric, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, fk_column, id_column, live_unique
from models.enums import DegreeType, Status


class Program(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "programs"

    id = id_column()
    faculty_id = fk_column("faculties.id", ondelete="CASCADE")
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    code = Column(String(50), nullable=False)
    description = Column(Text, nullable=True)
    duration_years = Column(Integer, nullable=False)
    total_credits = Column(Integer, nullable=False)
    fee_amount = Column(Numeric(10, 2), nullable=True)
    degree_type = Column(String(20), nullable=False, default=DegreeType.BACHELOR.value)
    admission_requirements = Column(Text, nullable=True)
    is_registration_open = Column(Boolean, nullable=False, default=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)
    sort_order = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        live_unique("programs", "slug"),
        live_unique("programs", "code"),
        CheckConstraint("duration_years >= 1", name="ck_programs_duration_years"),
        Index("ix_programs_faculty_status", "faculty_id", "status"),
        Index("ix_programs_status_registration", "status", "is_registration_open"),
        Index("ix_programs_degree_type", "degree_type"),
    )
