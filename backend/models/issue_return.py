from __future__ import annotations

from sqlalchemy import Column, Date, Index, Numeric, String

from models.base import Base, TimestampMixin, fk_column, id_column
from models.enums import IssueStatus


class IssueReturn(TimestampMixin, Base):
    __tablename__ = "issue_returns"

    id = id_column()
    member_id = fk_column("library_members.id", ondelete="CASCADE")
    book_id = fk_column("books.id", ondelete="CASCADE")
    issue_date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True)
    return_date = Column(Date, nullable=True)
    penalty = Column(Numeric(10, 2), nullable=True)
    status = Column(String(20), nullable=False, default=IssueStatus.ISSUED.value)
    issued_by = fk_column("users.id", ondelete="SET NULL", nullable=True)
    received_by = fk_column("users.id", ondelete="SET NULL", nullable=True)

    __table_args__ = (
        Index("ix_issue_returns_member_book", "member_id", "book_id"),
        Index("ix_issue_returns_status", "status"),
        Index("ix_issue_returns_due_date", "due_date"),
    )
