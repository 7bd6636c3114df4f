from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from services.crud_service import create_record, update_record
from validation import Create, OperationMode, Update


def current_row(db: Session, model):
    return db.execute(select(model).order_by(model.id)).scalars().first()


def upsert_mode(row) -> OperationMode:
    """Validate as a create until the singleton row exists."""

    return Create() if row is None else Update(record_id=row.id)


def save(db: Session, model, row, data: dict[str, Any]):
    if row is None:
        return create_record(db, model, data)
    return update_record(db, row, data)
