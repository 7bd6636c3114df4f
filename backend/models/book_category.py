from __future__ import annotations

from sqlalchemy import Column, Index, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, id_column, live_unique
from models.enums import BookCategoryStatus


class BookCategory(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "book_categories"

    id = id_column()
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    code = Column(String(20), nullable=True)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=BookCategoryStatus.ACTIVE.value)

    __table_args__ = (
        live_unique("book_categories", "title"),
        live_unique("book_categories", "slug"),
        live_unique("book_categories", "code"),
        Index("ix_book_categories_status_deleted", "status", "deleted_at"),
    )
