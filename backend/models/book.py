from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Index, Integer, Numeric, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, fk_column, id_column, live_unique
from models.enums import BookStatus


class Book(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "books"

    id = id_column()
    book_category_id = fk_column("book_categories.id", ondelete="CASCADE")
    title = Column(String(255), nullable=False, index=True)
    isbn = Column(String(30), nullable=True)
    accession_number = Column(String(50), nullable=True)
    author = Column(String(255), nullable=False, index=True)
    publisher = Column(String(255), nullable=True)
    edition = Column(String(50), nullable=True)
    publication_year = Column(Integer, nullable=True)
    language = Column(String(50), nullable=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=0)
    shelf_location = Column(String(50), nullable=True)
    shelf_column = Column(String(50), nullable=True)
    shelf_row = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    note = Column(Text, nullable=True)
    cover_image_path = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default=BookStatus.ACTIVE.value)

    __table_args__ = (
        live_unique("books", "isbn"),
        live_unique("books", "accession_number"),
        CheckConstraint("quantity >= 0", name="ck_books_quantity"),
        Index("ix_books_category_status_deleted", "book_category_id", "status", "deleted_at"),
    )
