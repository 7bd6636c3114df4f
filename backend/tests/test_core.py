from __future__ import annotations

import logging

from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError, OperationalError

from core.database import DatabaseUnavailableError, is_transient_db_connectivity_error, normalize_database_url
from core.logging import level_for
from core.responses import error, paginated, success, validation_error
from main import create_app


def test_envelopes():
    assert success({"id": 1}, "Done") == {"success": True, "message": "Done", "data": {"id": 1}}
    assert validation_error({"name": ["bad"]}) == {
        "success": False,
        "message": "Validation failed",
        "errors": {"name": ["bad"]},
    }
    assert error("CONFLICT", "Taken") == {"success": False, "message": "Taken", "code": "CONFLICT"}


def test_paginated_meta_for_last_page():
    body = paginated(["a"], total=16, page=2, per_page=15, message="ok")
    assert body["meta"] == {"current_page": 2, "last_page": 2, "per_page": 15, "total": 16, "from": 16, "to": 16}


def test_paginated_meta_when_empty():
    meta = paginated([], total=0, page=1, per_page=15, message="ok")["meta"]
    assert meta["last_page"] == 1
    assert meta["from"] is None and meta["to"] is None


def test_postgres_urls_use_psycopg2():
    assert normalize_database_url("postgres://u:p@h/db") == "postgresql+psycopg2://u:p@h/db"
    assert normalize_database_url(" sqlite:// ") == "sqlite://"


def test_transient_errors_are_detected_by_message():
    refused = OperationalError("SELECT 1", {}, Exception("connection refused"))
    syntax = OperationalError("SELEC 1", {}, Exception("syntax error"))
    assert is_transient_db_connectivity_error(refused)
    assert not is_transient_db_connectivity_error(syntax)


def test_log_level_resolution():
    assert level_for("production") == logging.INFO
    assert level_for("development") == logging.DEBUG
    assert level_for("production", "warning") == logging.WARNING
    assert level_for("production", "bogus") == logging.INFO


def _failing_app():
    app = create_app()

    @app.get("/conflict")
    def conflict():
        raise IntegrityError("INSERT INTO faculties", {}, Exception("UNIQUE constraint failed: faculties.code"))

    @app.get("/unavailable")
    def unavailable():
        raise DatabaseUnavailableError("Database temporarily unavailable")

    @app.get("/broken")
    def broken():
        raise OperationalError("SELEC 1", {}, Exception("syntax error"))

    return TestClient(app)


def test_database_errors_use_the_error_envelope():
    client = _failing_app()

    resp = client.get("/conflict")
    assert resp.status_code == 409
    assert resp.json() == {
        "success": False,
        "message": "The record conflicts with existing data.",
        "code": "CONFLICT",
    }

    resp = client.get("/unavailable")
    assert resp.status_code == 503
    assert resp.json()["code"] == "DATABASE_UNAVAILABLE"
    assert resp.json()["success"] is False

    resp = client.get("/broken")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Database operation failed.", "code": "DATABASE_ERROR"}
