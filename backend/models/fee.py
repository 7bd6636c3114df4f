from __future__ import annotations

from sqlalchemy import Column, Date, Index, Numeric, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, fk_column, id_column
from models.enums import FeeStatus, Status


class FeesCategory(TimestampMixin, Base):
    __tablename__ = "fees_categories"

    id = id_column()
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value, index=True)


class Fee(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "fees"

    id = id_column()
    student_enroll_id = fk_column("student_enrolls.id", ondelete="CASCADE")
    category_id = fk_column("fees_categories.id", ondelete="CASCADE", index=True)
    fee_amount = Column(Numeric(10, 2), nullable=False)
    fine_amount = Column(Numeric(10, 2), nullable=False, default=0)
    discount_amount = Column(Numeric(10, 2), nullable=False, default=0)
    paid_amount = Column(Numeric(10, 2), nullable=False, default=0)
    assign_date = Column(Date, nullable=False)
    due_date = Column(Date, nullable=False, index=True)
    pay_date = Column(Date, nullable=True)
    payment_method = Column(String(255), nullable=True)
    note = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=FeeStatus.UNPAID.value)

    __table_args__ = (
        Index("ix_fees_enroll_status", "student_enroll_id", "status"),
        Index("ix_fees_status", "status"),
    )
