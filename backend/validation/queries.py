from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import Table, func, select
from sqlalchemy.orm import Session

import models  # noqa: F401  (registers every table on Base.metadata)
from models.base import Base
from models.scoping import where_visible


def get_table(name: str) -> Table:
    try:
        return Base.metadata.tables[name]
    except KeyError:
        raise LookupError(f"Unknown table: {name}") from None


def exists_matching(
    db: Session,
    table: str,
    criteria: Mapping[str, Any],
    exclude_id: int | None = None,
) -> bool:
    """True when a visible row matches every column in ``criteria`` (None matches NULL)."""

    t = get_table(table)
    q = select(func.count()).select_from(t)
    for column, value in criteria.items():
        q = q.where(t.c[column].is_(None) if value is None else t.c[column] == value)
    if exclude_id is not None:
        q = q.where(t.c.id != exclude_id)
    q = where_visible(q, t)
    return int(db.execute(q).scalar_one()) > 0


def exists_conflicting(
    db: Session,
    table: str,
    column: str,
    value: Any,
    exclude_id: int | None = None,
    scope_column: str | None = None,
    scope_value: Any = None,
) -> bool:
    """True when another visible row already holds ``value`` in ``column``.

    ``exclude_id`` skips the record being updated; ``scope_column`` narrows the
    check to rows sharing ``scope_value``.
    """

    criteria = {column: value}
    if scope_column is not None:
        criteria[scope_column] = scope_value
    return exists_matching(db, table, criteria, exclude_id=exclude_id)


def record_exists(db: Session, table: str, column: str, value: Any) -> bool:
    return exists_matching(db, table, {column: value})


def fetch_row(db: Session, table: str, record_id: int) -> dict[str, Any] | None:
    t = get_table(table)
    q = where_visible(select(t).where(t.c.id == record_id), t)
    row = db.execute(q).mappings().first()
    return dict(row) if row is not None else None
