from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Index, Integer, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, fk_column, id_column, live_unique
from models.enums import Status


class Section(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "sections"

    id = id_column()
    batch_id = fk_column("batches.id", ondelete="CASCADE", index=True)
    name = Column(String(255), nullable=False)
    seat = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)
    sort_order = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        # Section names repeat across batches ("Section A"), never within one.
        live_unique("sections", "batch_id", "name", name="uq_sections_batch_name"),
        CheckConstraint("seat is null or seat >= 1", name="ck_sections_seat"),
        Index("ix_sections_status", "status"),
    )
