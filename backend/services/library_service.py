from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from models.scoping import get_by_id
from core.config import settings
from models.book import Book
from models.enums import IssueStatus
from models.issue_return import IssueReturn
from models.settings import LibrarySetting
from services.crud_service import commit


logger = logging.getLogger(__name__)


class LibraryError(Exception):
    """A library rule refused the operation; ``code`` is the API error code."""

    def __init__(self, code: str, status_code: int = 409):
        super().__init__(code)
        self.code = code
        self.status_code = status_code


@dataclass(frozen=True)
class ReturnOutcome:
    issue: IssueReturn
    book: Book
    overdue_days: int
    penalty: Decimal


def _open_issue(db: Session, *, book_id: int, member_id: int) -> IssueReturn | None:
    q = (
        select(IssueReturn)
        .where(IssueReturn.book_id == book_id)
        .where(IssueReturn.member_id == member_id)
        .where(IssueReturn.status == IssueStatus.ISSUED.value)
    )
    return db.execute(q).scalars().first()


def fine_per_day(db: Session) -> Decimal:
    row = db.execute(select(LibrarySetting).order_by(LibrarySetting.id)).scalars().first()
    if row is not None and row.fine_per_day is not None:
        return Decimal(row.fine_per_day)
    return Decimal(str(settings.library_fine_per_day))


def issue_book(db: Session, data: dict, *, actor_id: int | None = None) -> tuple[IssueReturn, Book]:
    book = get_by_id(db, Book, data["book_id"])
    if book is None:
        raise LibraryError("BOOK_NOT_FOUND", 404)
    if book.quantity <= 0:
        raise LibraryError("BOOK_NOT_AVAILABLE")
    if _open_issue(db, book_id=book.id, member_id=data["member_id"]) is not None:
        raise LibraryError("BOOK_ALREADY_ISSUED")

    issue = IssueReturn(
        book_id=book.id,
        member_id=data["member_id"],
        issue_date=data.get("issue_date") or date.today(),
        due_date=data["due_date"],
        status=IssueStatus.ISSUED.value,
        issued_by=actor_id,
    )
    db.add(issue)
    book.quantity = book.quantity - 1
    commit(db)
    db.refresh(issue)
    db.refresh(book)
    logger.info("Issued book id=%s to member id=%s (issue id=%s)", book.id, issue.member_id, issue.id)
    return issue, book


def return_book(db: Session, data: dict, *, actor_id: int | None = None) -> ReturnOutcome:
    issue = _open_issue(db, book_id=data["book_id"], member_id=data["member_id"])
    if issue is None:
        raise LibraryError("ISSUE_NOT_FOUND", 404)
    book = get_by_id(db, Book, data["book_id"])
    if book is None:
        raise LibraryError("BOOK_NOT_FOUND", 404)

    returned_on = data.get("return_date") or date.today()
    overdue_days = max(0, (returned_on - issue.due_date).days) if issue.due_date else 0
    penalty = (fine_per_day(db) * overdue_days).quantize(Decimal("0.01"))

    issue.return_date = returned_on
    issue.penalty = penalty
    issue.status = IssueStatus.RETURNED.value
    issue.received_by = actor_id
    book.quantity = book.quantity + 1
    commit(db)
    db.refresh(issue)
    db.refresh(book)
    logger.info("Returned book id=%s from member id=%s, penalty=%s", book.id, issue.member_id, penalty)
    return ReturnOutcome(issue=issue, book=book, overdue_days=overdue_days, penalty=penalty)
