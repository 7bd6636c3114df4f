from __future__ import annotations

from models.enums import FeeStatus
from validation.mode import OperationMode
from validation.rules import (
    After,
    Date,
    Exists,
    FieldRules,
    In,
    Integer,
    Max,
    Min,
    Nullable,
    Numeric,
    Sometimes,
    String,
    presence,
    rules_for,
)
from validation.validator import RequestDefinition


def _fee_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("student_enroll_id", *presence(mode), Integer(), Exists("student_enrolls")),
        rules_for("category_id", *presence(mode), Integer(), Exists("fees_categories")),
        rules_for("fee_amount", *presence(mode), Numeric(), Min(0)),
        rules_for("fine_amount", Nullable(), Numeric(), Min(0)),
        rules_for("discount_amount", Nullable(), Numeric(), Min(0)),
        rules_for("paid_amount", Nullable(), Numeric(), Min(0)),
        rules_for("assign_date", *presence(mode), Date()),
        rules_for("due_date", *presence(mode), Date(), After("assign_date")),
        rules_for("pay_date", Nullable(), Date()),
        rules_for("payment_method", Nullable(), String(), Max(255)),
        rules_for("note", Nullable(), String()),
        rules_for("status", Sometimes(), String(), In(tuple(FeeStatus.values()))),
    ]


FEE = RequestDefinition(
    name="fee",
    table="fees",
    rules=_fee_rules,
    messages={
        "student_enroll_id.required": "Student enrollment is required",
        "student_enroll_id.exists": "Selected student enrollment does not exist",
        "category_id.required": "Fee category is required",
        "category_id.exists": "Selected fee category does not exist",
        "fee_amount.required": "Fee amount is required",
        "fee_amount.numeric": "Fee amount must be a number",
        "fee_amount.min": "Fee amount cannot be negative",
        "assign_date.required": "Assign date is required",
        "due_date.required": "Due date is required",
        "due_date.after": "Due date must be after assign date",
        "status.in": "Status must be one of: unpaid, paid, partial",
    },
    attributes={
        "student_enroll_id": "student enrollment",
        "category_id": "fee category",
        "fee_amount": "fee amount",
        "assign_date": "assign date",
        "due_date": "due date",
    },
    defaults={
        "status": FeeStatus.UNPAID.value,
        "fine_amount": 0,
        "discount_amount": 0,
        "paid_amount": 0,
    },
    audited=True,
)


DEFINITIONS = (FEE,)
