from __future__ import annotations

import platform
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.config import settings
from core.database import get_db
from core.responses import success
from models.base import Base
from models.enums import BookCategoryStatus, BookRequestStatus, BookStatus, IssueStatus, MemberType, Status


router = APIRouter()

_ENUMS = {
    "status": Status,
    "book-status": BookStatus,
    "book-category-status": BookCategoryStatus,
    "book-request-status": BookRequestStatus,
    "member-type": MemberType,
    "issue-status": IssueStatus,
}

# Row counts reported by /database-stats.
_COUNTED_TABLES = (
    "faculties",
    "programs",
    "batches",
    "sections",
    "semesters",
    "subjects",
    "academic_sessions",
    "class_rooms",
    "students",
    "books",
    "book_categories",
    "book_requests",
    "library_members",
    "issue_returns",
    "fees",
)


def _enum_endpoint(enum_cls):
    def options() -> dict:
        return success(enum_cls.options(), f"{enum_cls.__name__} options retrieved successfully")

    return options


for _slug, _enum in _ENUMS.items():
    router.add_api_route(f"/{_slug}-enum", _enum_endpoint(_enum), methods=["GET"], name=f"{_slug}_enum")


@router.get("/database-stats")
def database_stats(db: Session = Depends(get_db)) -> dict:
    counts: dict[str, int] = {}
    for name in _COUNTED_TABLES:
        table = Base.metadata.tables[name]
        q = select(func.count()).select_from(table)
        if "deleted_at" in table.c:
            q = q.where(table.c.deleted_at.is_(None))
        counts[name] = int(db.execute(q).scalar_one())
    return success(counts, "Database statistics retrieved successfully")


@router.get("/system-info")
def system_info(db: Session = Depends(get_db)) -> dict:
    return success(
        {
            "environment": settings.environment,
            "python_version": platform.python_version(),
            "database_dialect": db.get_bind().dialect.name,
            "server_time": datetime.now(timezone.utc).isoformat(),
        },
        "System information retrieved successfully",
    )
