from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Date, Index, Integer, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, fk_column, id_column, live_unique
from models.enums import Status


class Batch(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "batches"

    id = id_column()
    program_id = fk_column("programs.id", ondelete="CASCADE", index=True)
    name = Column(String(255), nullable=False)
    code = Column(String(50), nullable=False)
    academic_year = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    max_students = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)
    sort_order = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        live_unique("batches", "name"),
        live_unique("batches", "code"),
        CheckConstraint("end_date > start_date", name="ck_batches_date_order"),
        Index("ix_batches_status", "status"),
        Index("ix_batches_academic_year", "academic_year"),
        Index("ix_batches_dates", "start_date", "end_date"),
    )
