from __future__ import annotations

from datetime import date
from decimal import Decimal

from schemas.common import SoftDeletedOut


class FeeOut(SoftDeletedOut):
    student_enroll_id: int
    category_id: int
    fee_amount: Decimal
    fine_amount: Decimal
    discount_amount: Decimal
    paid_amount: Decimal
    assign_date: date
    due_date: date
    pay_date: date | None = None
    payment_method: str | None = None
    note: str | None = None
    status: str
