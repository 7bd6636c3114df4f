from __future__ import annotations

from sqlalchemy import Column, Date, Index, String

from models.base import ID_TYPE, AuditMixin, Base, TimestampMixin, id_column
from models.enums import Status


class LibraryMember(AuditMixin, TimestampMixin, Base):
    """Library card holder; ``memberable_type`` names the owner kind (student or staff)."""

    __tablename__ = "library_members"

    id = id_column()
    memberable_type = Column(String(50), nullable=False)
    memberable_id = Column(ID_TYPE, nullable=False)
    library_id = Column(String(255), nullable=False, unique=True)
    date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)

    __table_args__ = (
        Index("ix_library_members_memberable", "memberable_type", "memberable_id"),
        Index("ix_library_members_status", "status"),
    )
