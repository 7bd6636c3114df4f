from __future__ import annotations

from datetime import date

from models.enums import BookCategoryStatus, BookRequestStatus, BookStatus, MemberType
from validation.definitions.common import slug_from, unique_slug
from validation.mode import OperationMode
from validation.rules import (
    TODAY,
    After,
    Date,
    Email,
    Exists,
    FieldRules,
    File,
    Integer,
    Max,
    Mimes,
    Min,
    Nullable,
    Numeric,
    OneOf,
    Required,
    Sometimes,
    String,
    Unique,
    presence,
    rules_for,
)
from validation.validator import RequestDefinition


_COVER_TYPES = ("jpg", "jpeg", "png", "webp")


def _book_category_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("title", *presence(mode), String(), Max(255), Unique("book_categories")),
        rules_for("code", Nullable(), String(), Max(20), Unique("book_categories")),
        rules_for("description", Nullable(), String()),
        rules_for("status", Sometimes(), String(), OneOf(BookCategoryStatus)),
    ]


BOOK_CATEGORY = RequestDefinition(
    name="book_category",
    table="book_categories",
    rules=_book_category_rules,
    messages={
        "title.required": "The category title is required.",
        "title.unique": "A book category with this title already exists.",
        "code.unique": "A book category with this code already exists.",
        "code.max": "The category code cannot exceed 20 characters.",
    },
    attributes={"title": "category title", "code": "category code"},
    defaults={"status": BookCategoryStatus.ACTIVE.value},
    audited=True,
    derive=slug_from("title"),
    hooks=(unique_slug("book_categories", "title"),),
)


def _book_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("book_category_id", *presence(mode), Integer(), Exists("book_categories")),
        rules_for("title", *presence(mode), String(), Max(255)),
        rules_for("isbn", Nullable(), String(), Max(30), Unique("books")),
        rules_for("accession_number", Nullable(), String(), Max(50), Unique("books")),
        rules_for("author", *presence(mode), String(), Max(255)),
        rules_for("publisher", Nullable(), String(), Max(255)),
        rules_for("edition", Nullable(), String(), Max(50)),
        rules_for("publication_year", Nullable(), Integer(), Min(1000), Max(date.today().year)),
        rules_for("language", Nullable(), String(), Max(50)),
        rules_for("price", Nullable(), Numeric(), Min(0)),
        rules_for("quantity", Nullable(), Integer(), Min(0)),
        rules_for("shelf_location", Nullable(), String(), Max(50)),
        rules_for("shelf_column", Nullable(), String(), Max(50)),
        rules_for("shelf_row", Nullable(), String(), Max(50)),
        rules_for("description", Nullable(), String()),
        rules_for("note", Nullable(), String()),
        rules_for("cover_image", Nullable(), File(), Mimes(_COVER_TYPES), Max(2048)),
        rules_for("status", Nullable(), String(), OneOf(BookStatus)),
    ]


BOOK = RequestDefinition(
    name="book",
    table="books",
    rules=_book_rules,
    messages={
        "book_category_id.required": "Please select a book category.",
        "book_category_id.exists": "The selected book category does not exist.",
        "title.required": "The book title is required.",
        "author.required": "The author name is required.",
        "isbn.unique": "A book with this ISBN already exists.",
        "accession_number.unique": "A book with this accession number already exists.",
        "publication_year.max": "The publication year cannot be in the future.",
        "cover_image.mimes": "The cover image must be a JPG, JPEG, PNG or WEBP file.",
        "cover_image.max": "The cover image may not be larger than 2MB.",
    },
    attributes={
        "book_category_id": "book category",
        "isbn": "ISBN",
        "accession_number": "accession number",
        "publication_year": "publication year",
        "cover_image": "cover image",
    },
    defaults={"status": BookStatus.ACTIVE.value, "price": 0, "quantity": 0},
    audited=True,
)


def _book_request_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("book_category_id", *presence(mode), Integer(), Exists("book_categories")),
        rules_for("title", *presence(mode), String(), Max(255)),
        rules_for("isbn", Nullable(), String(), Max(30)),
        rules_for("accession_number", Nullable(), String(), Max(50)),
        rules_for("author", Nullable(), String(), Max(255)),
        rules_for("publisher", Nullable(), String(), Max(255)),
        rules_for("edition", Nullable(), String(), Max(50)),
        rules_for("publication_year", Nullable(), Integer(), Min(1900), Max(date.today().year)),
        rules_for("language", Nullable(), String(), Max(50)),
        rules_for("price", Nullable(), Numeric(), Min(0), Max(999999.99)),
        rules_for("quantity", Nullable(), Integer(), Min(1)),
        rules_for("requester_name", *presence(mode), String(), Max(255)),
        rules_for("requester_phone", Nullable(), String(), Max(20)),
        rules_for("requester_email", Nullable(), String(), Email(), Max(255)),
        rules_for("description", Nullable(), String()),
        rules_for("note", Nullable(), String()),
        rules_for("cover_image", Nullable(), File(), Mimes(_COVER_TYPES), Max(10240)),
        rules_for("status", Nullable(), String(), OneOf(BookRequestStatus)),
    ]


BOOK_REQUEST = RequestDefinition(
    name="book_request",
    table="book_requests",
    rules=_book_request_rules,
    messages={
        "book_category_id.required": "Please select a book category.",
        "book_category_id.exists": "The selected book category does not exist.",
        "title.required": "The book title is required.",
        "requester_name.required": "The requester name is required.",
        "requester_email.email": "Please provide a valid requester email address.",
        "quantity.min": "At least one copy must be requested.",
        "status.enum": "Please select a valid request status.",
    },
    attributes={
        "book_category_id": "book category",
        "requester_name": "requester name",
        "requester_phone": "requester phone",
        "requester_email": "requester email",
        "publication_year": "publication year",
        "cover_image": "cover image",
    },
    defaults={"status": BookRequestStatus.PENDING.value, "quantity": 1},
    audited=True,
)


def _issue_book_rules(_mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("book_id", Required(), Integer(), Exists("books")),
        rules_for("member_id", Required(), Integer(), Exists("library_members")),
        rules_for("member_type", Required(), String(), OneOf(MemberType)),
        rules_for("issue_date", Nullable(), Date()),
        rules_for("due_date", Required(), Date(), After(TODAY)),
    ]


ISSUE_BOOK = RequestDefinition(
    name="issue_book",
    table=None,
    rules=_issue_book_rules,
    messages={
        "book_id.required": "Please select a book.",
        "book_id.exists": "The selected book does not exist.",
        "member_id.required": "Please select a library member.",
        "member_id.exists": "The selected library member does not exist.",
        "member_type.enum": "The member type must be student or staff.",
        "due_date.after": "The due date must be after today.",
    },
    attributes={"book_id": "book", "member_id": "member", "member_type": "member type", "due_date": "due date"},
)


def _return_book_rules(_mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("book_id", Required(), Integer(), Exists("books")),
        rules_for("member_id", Required(), Integer(), Exists("library_members")),
        rules_for("member_type", Required(), String(), OneOf(MemberType)),
        rules_for("return_date", Nullable(), Date()),
    ]


RETURN_BOOK = RequestDefinition(
    name="return_book",
    table=None,
    rules=_return_book_rules,
    messages={
        "book_id.exists": "The selected book does not exist.",
        "member_id.exists": "The selected library member does not exist.",
        "member_type.enum": "The member type must be student or staff.",
    },
    attributes={"book_id": "book", "member_id": "member", "member_type": "member type"},
)


DEFINITIONS = (BOOK_CATEGORY, BOOK, BOOK_REQUEST, ISSUE_BOOK, RETURN_BOOK)
