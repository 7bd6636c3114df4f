from __future__ import annotations

import pytest

from core.config import settings
from core.security import create_access_token

API = "/api/v1/utility"


def test_health(client, schema):
    assert client.get("/health").json() == {"app": "ok", "database": "ok"}


@pytest.mark.parametrize(
    "slug, values",
    [
        ("status", ["active", "inactive"]),
        ("book-status", ["active", "inactive"]),
        ("book-category-status", ["active", "inactive"]),
        ("book-request-status", ["pending", "in_progress", "approved", "rejected"]),
        ("member-type", ["student", "staff"]),
        ("issue-status", ["issued", "returned", "lost"]),
    ],
)
def test_enum_endpoints(client, schema, slug, values):
    resp = client.get(f"{API}/{slug}-enum")
    assert resp.status_code == 200
    assert [o["value"] for o in resp.json()["data"]] == values


def test_enum_labels(client, schema):
    data = client.get(f"{API}/book-request-status-enum").json()["data"]
    assert data[1] == {"value": "in_progress", "label": "In Progress"}


def test_database_stats_skip_soft_deleted(client, seed):
    seed.faculty(name="Arts", code="ART")
    gone = seed.faculty(name="Science", code="SCI")
    client.delete(f"/api/v1/academic/faculties/{gone.id}")

    stats = client.get(f"{API}/database-stats").json()["data"]
    assert stats["faculties"] == 1
    assert stats["books"] == 0


def test_system_info(client, schema):
    data = client.get(f"{API}/system-info").json()["data"]
    assert data["database_dialect"] == "sqlite"
    assert data["environment"] == settings.environment


def test_audit_columns_follow_bearer_token(client, seed, monkeypatch):
    user = seed.user()
    monkeypatch.setattr(settings, "jwt_secret_key", "test-secret")
    token = create_access_token(user_id=user.id)

    resp = client.post(
        "/api/v1/academic/faculties/",
        json={"name": "Arts", "code": "ART"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert resp.status_code == 201
    assert resp.json()["data"]["created_by"] == user.id
    assert resp.json()["data"]["updated_by"] == user.id

    bad = client.post(
        "/api/v1/academic/faculties/",
        json={"name": "Law", "code": "LAW"},
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert bad.status_code == 401
    assert bad.json() == {"detail": "INVALID_TOKEN"}


def test_without_token_the_default_actor_is_used(client, seed, monkeypatch):
    user = seed.user()
    monkeypatch.setattr(settings, "default_actor_id", user.id)
    resp = client.post("/api/v1/academic/faculties/", json={"name": "Arts", "code": "ART"})
    assert resp.json()["data"]["created_by"] == user.id
