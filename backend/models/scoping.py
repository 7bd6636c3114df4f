from __future__ import annotations

from sqlalchemy import Table, select
from sqlalchemy.orm import Session


def where_visible(stmt, target):
    """Hide soft-deleted rows; ``target`` is a mapped class or a ``Table``."""

    table: Table = getattr(target, "__table__", target)
    if "deleted_at" in table.c:
        return stmt.where(table.c.deleted_at.is_(None))
    return stmt


def get_by_id(db: Session, model, obj_id: int):
    q = select(model).where(model.id == obj_id)
    q = where_visible(q, model)
    return db.execute(q).scalars().first()
