from __future__ import annotations

from datetime import date
from decimal import Decimal

from schemas.common import RecordOut, SoftDeletedOut


class BookCategoryOut(SoftDeletedOut):
    title: str
    slug: str
    code: str | None = None
    description: str | None = None
    status: str


class BookOut(SoftDeletedOut):
    book_category_id: int
    title: str
    isbn: str | None = None
    accession_number: str | None = None
    author: str
    publisher: str | None = None
    edition: str | None = None
    publication_year: int | None = None
    language: str | None = None
    price: Decimal
    quantity: int
    shelf_location: str | None = None
    shelf_column: str | None = None
    shelf_row: str | None = None
    description: str | None = None
    note: str | None = None
    status: str


class BookRequestOut(SoftDeletedOut):
    book_category_id: int
    title: str
    isbn: str | None = None
    accession_number: str | None = None
    author: str | None = None
    publisher: str | None = None
    edition: str | None = None
    publication_year: int | None = None
    language: str | None = None
    price: Decimal | None = None
    quantity: int
    requester_name: str
    requester_phone: str | None = None
    requester_email: str | None = None
    description: str | None = None
    note: str | None = None
    status: str


class IssueReturnOut(RecordOut):
    member_id: int
    book_id: int
    issue_date: date | None = None
    due_date: date | None = None
    return_date: date | None = None
    penalty: Decimal | None = None
    status: str
    issued_by: int | None = None
    received_by: int | None = None
