from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Iterable

from sqlalchemy import String, delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.scoping import where_visible


logger = logging.getLogger(__name__)

# Runs inside the write transaction, after the row is flushed and has an id.
AfterWrite = Callable[[Session, Any, dict[str, Any]], None]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def column_values(model, data: dict[str, Any]) -> dict[str, Any]:
    """Keep only keys that are real columns (drops pivot arrays and upload fields)."""

    columns = model.__table__.c
    return {k: v for k, v in data.items() if k in columns and k != "id"}


def commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Integrity error on commit", exc_info=True)
        raise


def flush(db: Session) -> None:
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        logger.warning("Integrity error on flush", exc_info=True)
        raise


def _filter_value(column, raw: Any) -> Any:
    """Query-string filter value converted to the column's Python type, or None to skip."""

    if raw is None or raw == "":
        return None
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return raw
    if python_type is bool:
        return str(raw).strip().lower() in ("1", "true", "yes", "on")
    if python_type is int:
        try:
            return int(raw)
        except ValueError:
            logger.debug("Ignoring non-integer filter %s=%r", column.key, raw)
            return None
    return raw


def list_records(
    db: Session,
    model,
    *,
    page: int,
    per_page: int,
    search: str | None = None,
    search_columns: Iterable[str] = (),
    filters: dict[str, Any] | None = None,
    order_by: Iterable[str] = ("id",),
) -> tuple[list, int]:
    q = where_visible(select(model), model)

    term = (search or "").strip()
    cols = [getattr(model, c) for c in search_columns]
    if term and cols:
        pattern = f"%{term.lower()}%"
        q = q.where(or_(*(func.lower(c.cast(String)).like(pattern) for c in cols)))

    for name, raw in (filters or {}).items():
        column = getattr(model, name)
        value = _filter_value(column, raw)
        if value is None:
            continue
        q = q.where(column == value)

    total = int(db.execute(select(func.count()).select_from(q.subquery())).scalar_one())
    q = q.order_by(*(getattr(model, c) for c in order_by), model.id)
    items = db.execute(q.offset((page - 1) * per_page).limit(per_page)).scalars().all()
    return list(items), total


def create_record(db: Session, model, data: dict[str, Any], *, after_write: AfterWrite | None = None):
    obj = model(**column_values(model, data))
    db.add(obj)
    flush(db)
    if after_write is not None:
        after_write(db, obj, data)
    commit(db)
    db.refresh(obj)
    logger.info("Created %s id=%s", model.__tablename__, obj.id)
    return obj


def update_record(db: Session, obj, data: dict[str, Any], *, after_write: AfterWrite | None = None):
    for key, value in column_values(type(obj), data).items():
        setattr(obj, key, value)
    flush(db)
    if after_write is not None:
        after_write(db, obj, data)
    commit(db)
    db.refresh(obj)
    logger.info("Updated %s id=%s", obj.__tablename__, obj.id)
    return obj


def soft_delete(db: Session, obj, *, actor_id: int | None = None) -> None:
    if not hasattr(obj, "deleted_at"):
        force_delete(db, obj)
        return
    obj.deleted_at = _now()
    if hasattr(obj, "updated_by"):
        obj.updated_by = actor_id
    commit(db)
    logger.info("Soft-deleted %s id=%s", obj.__tablename__, obj.id)


def force_delete(db: Session, obj) -> None:
    db.delete(obj)
    commit(db)
    logger.info("Deleted %s id=%s", obj.__tablename__, obj.id)


def bulk_update_status(db: Session, model, ids: list[int], status: Any, *, actor_id: int | None = None) -> int:
    values: dict[str, Any] = {"status": status}
    if hasattr(model, "updated_by"):
        values["updated_by"] = actor_id
    stmt = where_visible(update(model).where(model.id.in_(ids)), model).values(**values)
    affected = db.execute(stmt.execution_options(synchronize_session=False)).rowcount
    commit(db)
    logger.info("Bulk status on %s: %s rows -> %s", model.__tablename__, affected, status)
    return int(affected or 0)


def bulk_soft_delete(db: Session, model, ids: list[int], *, actor_id: int | None = None) -> int:
    if not hasattr(model, "deleted_at"):
        return bulk_force_delete(db, model, ids)
    values: dict[str, Any] = {"deleted_at": _now()}
    if hasattr(model, "updated_by"):
        values["updated_by"] = actor_id
    stmt = where_visible(update(model).where(model.id.in_(ids)), model).values(**values)
    affected = db.execute(stmt.execution_options(synchronize_session=False)).rowcount
    commit(db)
    logger.info("Bulk soft-delete on %s: %s rows", model.__tablename__, affected)
    return int(affected or 0)


def bulk_force_delete(db: Session, model, ids: list[int]) -> int:
    stmt = delete(model).where(model.id.in_(ids))
    affected = db.execute(stmt.execution_options(synchronize_session=False)).rowcount
    commit(db)
    logger.info("Bulk delete on %s: %s rows", model.__tablename__, affected)
    return int(affected or 0)
