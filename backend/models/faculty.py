from __future__ import annotations

from sqlalchemy import Column, Index, Integer, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, id_column, live_unique
from models.enums import Status


class Faculty(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "faculties"

    id = id_column()
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    code = Column(String(50), nullable=False)
    description = Column(Text, nullable=True)
    dean_name = Column(String(255), nullable=True)
    dean_email = Column(String(255), nullable=True)
    dean_phone = Column(String(20), nullable=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)
    sort_order = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        live_unique("faculties", "slug"),
        live_unique("faculties", "code"),
        Index("ix_faculties_status_sort_order", "status", "sort_order"),
    )
