from __future__ import annotations

API = "/api/v1/settings"

MAIL = {
    "driver": "smtp",
    "host": "smtp.example.com",
    "port": "587",
    "username": "mailer",
    "password": "s3cret",
    "encryption": "tls",
    "sender_email": "noreply@example.com",
}


def test_missing_setting_reads_as_null(client, schema):
    resp = client.get(f"{API}/mail")
    assert resp.status_code == 200
    assert resp.json()["data"] is None


def test_first_save_validates_as_create(client, schema):
    resp = client.put(f"{API}/mail", json={"host": "smtp.example.com"})
    assert resp.status_code == 422
    assert set(resp.json()["errors"]) == {"driver", "port", "username", "password", "encryption"}


def test_later_saves_update_the_single_row(client, schema):
    created = client.post(f"{API}/mail", json=MAIL).json()["data"]
    assert created["status"] == "active"
    assert "password" not in created

    updated = client.put(f"{API}/mail", json={"host": "smtp2.example.com"})
    assert updated.status_code == 200
    assert updated.json()["data"]["id"] == created["id"]
    assert updated.json()["data"]["host"] == "smtp2.example.com"
    assert updated.json()["data"]["driver"] == "smtp"

    bad = client.put(f"{API}/mail", json={"driver": "pigeon"})
    assert bad.json()["errors"] == {
        "driver": ["The mail driver must be one of: smtp, mailgun, ses, postmark, sendmail, log."]
    }


def test_topbar_colors_must_be_hex(client, schema):
    resp = client.put(f"{API}/topbar", json={"title": "Campus", "background_color": "blue", "text_color": "#FFFFFF"})
    assert resp.json()["errors"] == {
        "background_color": ["The background color must be a valid hex color code (e.g. #ffffff)."]
    }


def test_social_urls(client, schema):
    resp = client.put(f"{API}/social", json={"facebook_url": "not a url"})
    assert resp.json()["errors"] == {"facebook_url": ["The Facebook URL must be a valid URL."]}

    ok = client.put(f"{API}/social", json={"facebook_url": "https://facebook.com/college", "status": False})
    assert ok.status_code == 200
    assert ok.json()["data"]["status"] is False


def test_id_card_gets_default_slug(client, schema):
    resp = client.post(f"{API}/id-card", json={"title": "Student ID", "status": "active", "barcode": "1"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["slug"] == "id-card"
    assert data["barcode"] is True
    assert data["signature"] is False

    missing_status = client.put(f"{API}/id-card", json={"title": "Staff ID"})
    assert missing_status.json()["errors"] == {"status": ["The status is required."]}


def test_schedule_slug_and_time_format(client, schema):
    resp = client.put(f"{API}/schedule", json={"slug": "Fee Reminder", "day": "Funday", "time": "25:00"})
    assert resp.json()["errors"] == {
        "slug": ["The slug may only contain lowercase letters, numbers, dashes and underscores."],
        "day": ["The day must be a day of the week."],
        "time": ["The time must be in HH:MM format."],
    }
    ok = client.put(f"{API}/schedule", json={"slug": "fee-reminder", "day": "Monday", "time": "09:30"})
    assert ok.status_code == 200
    assert ok.json()["data"]["email"] is False


def test_library_setting_limits(client, schema):
    resp = client.put(f"{API}/library", json={"slug": "library", "max_borrow_days": 400, "max_books_per_student": 0})
    assert resp.json()["errors"] == {
        "max_books_per_student": ["Max books per student must be at least 1."],
        "max_borrow_days": ["Max borrow days cannot exceed 365."],
    }
