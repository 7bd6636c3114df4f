from __future__ import annotations

API = "/api/v1/fees"


def _fee(enroll, category, **overrides):
    payload = {
        "student_enroll_id": enroll.id,
        "category_id": category.id,
        "fee_amount": "1500.00",
        "assign_date": "2024-09-01",
        "due_date": "2024-09-30",
    }
    payload.update(overrides)
    return payload


def test_create_fee_with_defaults(client, seed):
    enroll = seed.enrollment()
    category = seed.fees_category()
    resp = client.post(f"{API}/", json=_fee(enroll, category))
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["status"] == "unpaid"
    assert data["paid_amount"] == "0.00"
    assert data["fee_amount"] == "1500.00"


def test_fee_rules(client, seed):
    enroll = seed.enrollment()
    category = seed.fees_category()
    resp = client.post(
        f"{API}/",
        json=_fee(enroll, category, fee_amount=-5, due_date="2024-08-01", status="overdue", category_id=99),
    )
    assert resp.status_code == 422
    assert resp.json()["errors"] == {
        "category_id": ["Selected fee category does not exist"],
        "fee_amount": ["Fee amount cannot be negative"],
        "due_date": ["Due date must be after assign date"],
        "status": ["Status must be one of: unpaid, paid, partial"],
    }


def test_fee_update_compares_due_date_with_stored_assign_date(client, seed):
    enroll = seed.enrollment()
    category = seed.fees_category()
    fee_id = client.post(f"{API}/", json=_fee(enroll, category)).json()["data"]["id"]

    bad = client.patch(f"{API}/{fee_id}", json={"due_date": "2024-08-15"})
    assert bad.json()["errors"] == {"due_date": ["Due date must be after assign date"]}

    paid = client.patch(f"{API}/{fee_id}", json={"status": "paid", "paid_amount": 1500, "pay_date": "2024-09-10"})
    assert paid.status_code == 200
    assert paid.json()["data"]["status"] == "paid"


def test_fee_bulk_status_and_listing_filters(client, seed):
    enroll = seed.enrollment()
    category = seed.fees_category()
    first = client.post(f"{API}/", json=_fee(enroll, category)).json()["data"]["id"]
    client.post(f"{API}/", json=_fee(enroll, category, due_date="2024-10-30"))

    resp = client.post(f"{API}/bulk-status", json={"ids": [first], "status": "paid"})
    assert resp.json()["data"] == {"affected": 1}

    listing = client.get(f"{API}/", params={"status": "paid"}).json()
    assert [f["id"] for f in listing["data"]] == [first]
    assert client.get(f"{API}/", params={"category_id": "abc"}).json()["meta"]["total"] == 2
