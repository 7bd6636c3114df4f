from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, Index, Integer, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, id_column, live_unique
from models.enums import Status


class Semester(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "semesters"

    id = id_column()
    name = Column(String(255), nullable=False)
    academic_year = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    is_current = Column(Boolean, nullable=False, default=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)
    sort_order = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        live_unique("semesters", "name"),
        Index("ix_semesters_status_current", "status", "is_current"),
        Index("ix_semesters_dates", "start_date", "end_date"),
    )
