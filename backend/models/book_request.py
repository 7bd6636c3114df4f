from __future__ import annotations

from sqlalchemy import Column, Index, Integer, Numeric, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, fk_column, id_column
from models.enums import BookRequestStatus


class BookRequest(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "book_requests"

    id = id_column()
    book_category_id = fk_column("book_categories.id", ondelete="CASCADE")
    title = Column(String(255), nullable=False)
    isbn = Column(String(30), nullable=True)
    accession_number = Column(String(50), nullable=True)
    author = Column(String(255), nullable=True)
    publisher = Column(String(255), nullable=True)
    edition = Column(String(50), nullable=True)
    publication_year = Column(Integer, nullable=True)
    language = Column(String(50), nullable=True)
    price = Column(Numeric(10, 2), nullable=True)
    quantity = Column(Integer, nullable=False, default=1)
    requester_name = Column(String(255), nullable=False)
    requester_phone = Column(String(20), nullable=True)
    requester_email = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    note = Column(Text, nullable=True)
    cover_image_path = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default=BookRequestStatus.PENDING.value)

    __table_args__ = (
        Index("ix_book_requests_category_status", "book_category_id", "status"),
        Index("ix_book_requests_status", "status"),
    )
