from __future__ import annotations

from fastapi import APIRouter

from api.crud import Resource, build_router
from models.enums import FeeStatus
from models.fee import Fee
from schemas.fees import FeeOut
from validation.definitions import fees


router = APIRouter()

FEES = Resource(
    model=Fee,
    definition=fees.FEE,
    out=FeeOut,
    noun="Fee",
    search_columns=("payment_method", "note"),
    filters=("status", "student_enroll_id", "category_id"),
    order_by=("due_date",),
    status_enum=FeeStatus,
)

router.include_router(build_router(FEES))
