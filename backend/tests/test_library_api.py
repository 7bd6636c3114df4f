from __future__ import annotations

from datetime import date, timedelta

from models import Book

API = "/api/v1/library"


def _issue_payload(book, member, **overrides):
    payload = {
        "book_id": book.id,
        "member_id": member.id,
        "member_type": "student",
        "due_date": (date.today() + timedelta(days=7)).isoformat(),
    }
    payload.update(overrides)
    return payload


def test_book_crud_and_isbn_uniqueness(client, seed):
    category = seed.book_category()
    payload = {"book_category_id": category.id, "title": "Refactoring", "author": "Martin Fowler", "isbn": "978-0134757599"}

    created = client.post(f"{API}/books/", json=payload)
    assert created.status_code == 201
    data = created.json()["data"]
    assert data["quantity"] == 0
    assert data["status"] == "active"

    dup = client.post(f"{API}/books/", json=dict(payload, title="Refactoring 2e"))
    assert dup.status_code == 422
    assert dup.json()["errors"] == {"isbn": ["A book with this ISBN already exists."]}

    own = client.put(f"{API}/books/{data['id']}", json={"isbn": "978-0134757599", "quantity": 3})
    assert own.status_code == 200
    assert own.json()["data"]["quantity"] == 3


def test_book_requires_category_title_and_author(client, schema):
    resp = client.post(f"{API}/books/", json={"book_category_id": 77})
    assert resp.json()["errors"] == {
        "book_category_id": ["The selected book category does not exist."],
        "title": ["The book title is required."],
        "author": ["The author name is required."],
    }


def test_cover_image_must_be_an_image(client, seed):
    category = seed.book_category()
    form = {"book_category_id": str(category.id), "title": "SICP", "author": "Abelson"}

    bad = client.post(f"{API}/books/", data=form, files={"cover_image": ("cover.txt", b"plain text", "text/plain")})
    assert bad.status_code == 422
    assert bad.json()["errors"] == {"cover_image": ["The cover image must be a JPG, JPEG, PNG or WEBP file."]}

    good = client.post(f"{API}/books/", data=form, files={"cover_image": ("cover.png", b"\x89PNG....", "image/png")})
    assert good.status_code == 201


def test_force_delete_and_bulk_force_delete(client, seed):
    category = seed.book_category()
    first = seed.book(category)
    second = seed.book(category, title="The Pragmatic Programmer", author="Hunt")
    third = seed.book(category, title="Code Complete", author="McConnell")

    assert client.delete(f"{API}/books/{first.id}/force").status_code == 200
    assert client.get(f"{API}/books/{first.id}").json() == {"detail": "BOOK_NOT_FOUND"}

    resp = client.post(f"{API}/books/bulk/force-delete", json={"ids": [second.id, third.id]})
    assert resp.json()["data"] == {"affected": 2}
    assert client.get(f"{API}/books/").json()["meta"]["total"] == 0


def test_book_bulk_status_rejects_unknown_status(client, seed):
    book = seed.book()
    resp = client.post(f"{API}/books/bulk/status", json={"ids": [book.id], "status": "lost"})
    assert resp.status_code == 422
    ok = client.post(f"{API}/books/bulk/status", json={"ids": [book.id], "status": "inactive"})
    assert ok.json()["data"] == {"affected": 1}


def test_category_slug_and_bulk_delete(client, schema):
    created = client.post(f"{API}/categories/", json={"title": "Science Fiction", "code": "SF"})
    assert created.status_code == 201
    category = created.json()["data"]
    assert category["slug"] == "science-fiction"

    resp = client.post(f"{API}/categories/bulk/delete", json={"ids": [category["id"]]})
    assert resp.json()["data"] == {"affected": 1}
    assert client.get(f"{API}/categories/{category['id']}").status_code == 404


def test_book_request_defaults(client, seed):
    category = seed.book_category()
    resp = client.post(
        f"{API}/requests/",
        json={"book_category_id": category.id, "title": "Dune", "requester_name": "Ada", "requester_email": "nope"},
    )
    assert resp.json()["errors"] == {"requester_email": ["Please provide a valid requester email address."]}

    resp = client.post(f"{API}/requests/", json={"book_category_id": category.id, "title": "Dune", "requester_name": "Ada"})
    assert resp.status_code == 201
    assert resp.json()["data"]["status"] == "pending"
    assert resp.json()["data"]["quantity"] == 1


def test_issue_decrements_stock_and_blocks_second_issue(client, db, seed):
    book = seed.book(quantity=2)
    member = seed.member()

    resp = client.post(f"{API}/issues/issue", json=_issue_payload(book, member))
    assert resp.status_code == 201
    body = resp.json()["data"]
    assert body["book"]["quantity"] == 1
    assert body["issue"]["status"] == "issued"
    assert body["issue"]["issue_date"] == date.today().isoformat()

    again = client.post(f"{API}/issues/issue", json=_issue_payload(book, member))
    assert again.status_code == 409
    assert again.json() == {"detail": "BOOK_ALREADY_ISSUED"}

    db.expire_all()
    assert db.get(Book, book.id).quantity == 1


def test_issue_unavailable_book(client, seed):
    book = seed.book(quantity=0)
    member = seed.member()
    resp = client.post(f"{API}/issues/issue", json=_issue_payload(book, member))
    assert resp.status_code == 409
    assert resp.json() == {"detail": "BOOK_NOT_AVAILABLE"}


def test_issue_validation(client, seed):
    book = seed.book()
    resp = client.post(
        f"{API}/issues/issue",
        json={"book_id": book.id, "member_id": 999, "member_type": "teacher", "due_date": "2000-01-01"},
    )
    assert resp.status_code == 422
    assert resp.json()["errors"] == {
        "member_id": ["The selected library member does not exist."],
        "member_type": ["The member type must be student or staff."],
        "due_date": ["The due date must be after today."],
    }


def test_return_computes_penalty_and_restocks(client, seed):
    book = seed.book(quantity=1)
    member = seed.member()
    due = date.today() + timedelta(days=5)
    client.post(f"{API}/issues/issue", json=_issue_payload(book, member, due_date=due.isoformat()))

    resp = client.post(
        f"{API}/issues/return",
        json={
            "book_id": book.id,
            "member_id": member.id,
            "member_type": "student",
            "return_date": (due + timedelta(days=3)).isoformat(),
        },
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["overdue_days"] == 3
    assert data["penalty"] == "30.00"
    assert data["issue"]["status"] == "returned"
    assert data["book"]["quantity"] == 1

    listing = client.get(f"{API}/issues/", params={"status": "returned"}).json()
    assert listing["meta"]["total"] == 1


def test_return_on_time_has_no_penalty(client, seed):
    book = seed.book()
    member = seed.member()
    client.post(f"{API}/issues/issue", json=_issue_payload(book, member))
    resp = client.post(
        f"{API}/issues/return",
        json={"book_id": book.id, "member_id": member.id, "member_type": "student"},
    )
    assert resp.json()["data"]["overdue_days"] == 0
    assert resp.json()["data"]["penalty"] == "0.00"


def test_library_setting_fine_overrides_default(client, seed):
    book = seed.book()
    member = seed.member()
    saved = client.put("/api/v1/settings/library", json={"slug": "library", "fine_per_day": 2.5})
    assert saved.status_code == 200

    due = date.today() + timedelta(days=1)
    client.post(f"{API}/issues/issue", json=_issue_payload(book, member, due_date=due.isoformat()))
    resp = client.post(
        f"{API}/issues/return",
        json={
            "book_id": book.id,
            "member_id": member.id,
            "member_type": "staff",
            "return_date": (due + timedelta(days=4)).isoformat(),
        },
    )
    assert resp.json()["data"]["penalty"] == "10.00"


def test_return_without_open_issue(client, seed):
    book = seed.book()
    member = seed.member()
    resp = client.post(
        f"{API}/issues/return",
        json={"book_id": book.id, "member_id": member.id, "member_type": "student"},
    )
    assert resp.status_code == 404
    assert resp.json() == {"detail": "ISSUE_NOT_FOUND"}
