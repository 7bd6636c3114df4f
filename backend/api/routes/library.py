from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from api.crud import Resource, build_router, page_params
from api.deps import get_actor_id, read_payload
from core.database import get_db
from core.responses import paginated, success
from models.book import Book
from models.book_category import BookCategory
from models.book_request import BookRequest
from models.enums import BookCategoryStatus, BookRequestStatus, BookStatus
from models.issue_return import IssueReturn
from schemas.library import BookCategoryOut, BookOut, BookRequestOut, IssueReturnOut
from services import library_service
from services.library_service import LibraryError
from validation import Create, validate_or_raise
from validation.definitions import library


router = APIRouter()

_BULK = {
    "bulk_status": ("POST", "/bulk/status"),
    "bulk_delete": ("POST", "/bulk/delete"),
}

BOOKS = Resource(
    model=Book,
    definition=library.BOOK,
    out=BookOut,
    noun="Book",
    search_columns=("title", "author", "isbn", "accession_number"),
    filters=("status", "book_category_id", "language"),
    order_by=("title",),
    status_enum=BookStatus,
    bulk_force_delete=("POST", "/bulk/force-delete"),
    force_delete=True,
    **_BULK,
)
BOOK_REQUESTS = Resource(
    model=BookRequest,
    definition=library.BOOK_REQUEST,
    out=BookRequestOut,
    noun="Book request",
    search_columns=("title", "author", "requester_name"),
    filters=("status", "book_category_id"),
    status_enum=BookRequestStatus,
    bulk_force_delete=("POST", "/bulk/force-delete"),
    force_delete=True,
    **_BULK,
)
BOOK_CATEGORIES = Resource(
    model=BookCategory,
    definition=library.BOOK_CATEGORY,
    out=BookCategoryOut,
    noun="Book category",
    search_columns=("title", "code"),
    order_by=("title",),
    status_enum=BookCategoryStatus,
    **_BULK,
)


def _library_error(exc: LibraryError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.code)


@router.post("/issues/issue", status_code=201)
def issue_book(
    payload: dict = Depends(read_payload),
    db: Session = Depends(get_db),
    actor_id: int | None = Depends(get_actor_id),
) -> dict:
    data = validate_or_raise(db, library.ISSUE_BOOK, payload, Create())
    try:
        issue, book = library_service.issue_book(db, data, actor_id=actor_id)
    except LibraryError as exc:
        raise _library_error(exc)
    return success(
        {
            "issue": IssueReturnOut.model_validate(issue).model_dump(mode="json"),
            "book": BookOut.model_validate(book).model_dump(mode="json"),
        },
        "Book issued successfully",
    )


@router.post("/issues/return")
def return_book(
    payload: dict = Depends(read_payload),
    db: Session = Depends(get_db),
    actor_id: int | None = Depends(get_actor_id),
) -> dict:
    data = validate_or_raise(db, library.RETURN_BOOK, payload, Create())
    try:
        outcome = library_service.return_book(db, data, actor_id=actor_id)
    except LibraryError as exc:
        raise _library_error(exc)
    return success(
        {
            "issue": IssueReturnOut.model_validate(outcome.issue).model_dump(mode="json"),
            "book": BookOut.model_validate(outcome.book).model_dump(mode="json"),
            "overdue_days": outcome.overdue_days,
            "penalty": str(outcome.penalty),
        },
        "Book returned successfully",
    )


@router.get("/issues/")
def list_issues(
    status: str | None = None,
    member_id: int | None = None,
    book_id: int | None = None,
    paging: tuple[int, int] = Depends(page_params),
    db: Session = Depends(get_db),
) -> dict:
    page, per_page = paging
    q = select(IssueReturn)
    if status:
        q = q.where(IssueReturn.status == status)
    if member_id is not None:
        q = q.where(IssueReturn.member_id == member_id)
    if book_id is not None:
        q = q.where(IssueReturn.book_id == book_id)
    total = int(db.execute(select(func.count()).select_from(q.subquery())).scalar_one())
    rows = db.execute(q.order_by(IssueReturn.id.desc()).offset((page - 1) * per_page).limit(per_page)).scalars().all()
    return paginated(
        [IssueReturnOut.model_validate(r).model_dump(mode="json") for r in rows],
        total=total,
        page=page,
        per_page=per_page,
        message="Issue records retrieved successfully",
    )


router.include_router(build_router(BOOKS), prefix="/books")
router.include_router(build_router(BOOK_REQUESTS), prefix="/requests")
router.include_router(build_router(BOOK_CATEGORIES), prefix="/categories")
