from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, insert, update
from sqlalchemy.orm import Session

from models.scoping import where_visible
from models.associations import PIVOTS, program_semester_sections
from services.crud_service import commit


logger = logging.getLogger(__name__)


def sync_pivots(db: Session, obj, data: dict[str, Any]) -> None:
    """Replace the owner's pivot rows for every id-list field present in ``data``."""

    for attr, (table, owner_col, related_col) in PIVOTS.get(obj.__tablename__, {}).items():
        if attr not in data:
            continue
        ids = list(dict.fromkeys(data[attr] or []))
        db.execute(delete(table).where(table.c[owner_col] == obj.id))
        if ids:
            db.execute(insert(table), [{owner_col: obj.id, related_col: i} for i in ids])
        logger.debug("Synced %s for %s id=%s: %s", table.name, obj.__tablename__, obj.id, ids)


def sync_section_links(db: Session, section, data: dict[str, Any]) -> None:
    # programs[i] is offered in semesters[i] for this section.
    if "programs" not in data and "semesters" not in data:
        return
    t = program_semester_sections
    pairs = list(dict.fromkeys(zip(data.get("programs") or [], data.get("semesters") or [])))
    db.execute(delete(t).where(t.c.section_id == section.id))
    if pairs:
        db.execute(
            insert(t),
            [{"program_id": p, "semester_id": s, "section_id": section.id} for p, s in pairs],
        )


def clear_other_current(db: Session, obj, data: dict[str, Any]) -> None:
    """Only one semester / academic session may be current at a time."""

    if not data.get("is_current"):
        return
    model = type(obj)
    stmt = where_visible(update(model).where(model.id != obj.id), model).values(is_current=False)
    db.execute(stmt.execution_options(synchronize_session=False))


def write_hooks(*hooks):
    def after_write(db: Session, obj, data: dict[str, Any]) -> None:
        for hook in hooks:
            hook(db, obj, data)

    return after_write


def set_current(db: Session, obj) -> Any:
    obj.is_current = True
    clear_other_current(db, obj, {"is_current": True})
    commit(db)
    db.refresh(obj)
    logger.info("Marked %s id=%s as current", obj.__tablename__, obj.id)
    return obj
