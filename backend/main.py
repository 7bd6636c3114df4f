from __future__ import annotations

import logging

import psycopg2
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.exc import OperationalError as SAOperationalError

from api.router import api_router
from core.config import settings
from core.database import DatabaseUnavailableError, ENGINE, is_transient_db_connectivity_error
from core.logging import setup_logging
from core.responses import error, validation_error
from validation import ValidationFailed


logger = logging.getLogger(__name__)

_UNAVAILABLE = error("DATABASE_UNAVAILABLE", "Database temporarily unavailable. Please retry.")
_DB_ERROR = error("DATABASE_ERROR", "Database operation failed.")
_CONFLICT = error("CONFLICT", "The record conflicts with existing data.")


def _operational_error_response(exc: Exception) -> JSONResponse:
    if is_transient_db_connectivity_error(exc):
        logger.warning("Database transient connectivity error (503)", exc_info=exc)
        return JSONResponse(status_code=503, content=_UNAVAILABLE)
    logger.error("Database operation failed", exc_info=exc)
    return JSONResponse(status_code=500, content=_DB_ERROR)


def _cors_options(is_production: bool) -> dict:
    origins = [settings.frontend_origin]
    origin_regex = None
    if not is_production:
        # Any localhost port may call the API during development.
        origins += ["http://localhost:5173", "http://127.0.0.1:5173"]
        origin_regex = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"
    return {
        "allow_origins": origins,
        "allow_origin_regex": origin_regex,
        "allow_credentials": True,
        "allow_methods": ["*"],
        "allow_headers": ["*"],
    }


def create_app() -> FastAPI:
    setup_logging(environment=settings.environment, level=settings.log_level)
    is_production = settings.environment.lower() == "production"
    app = FastAPI(
        title="College Management API",
        version="0.1.0",
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )

    @app.exception_handler(ValidationFailed)
    def _validation_failed(_request, exc: ValidationFailed):
        return JSONResponse(status_code=422, content=validation_error(exc.errors))

    @app.exception_handler(IntegrityError)
    def _integrity_error(_request, exc: IntegrityError):
        logger.warning("Integrity constraint violated (409)", exc_info=exc)
        return JSONResponse(status_code=409, content=_CONFLICT)

    @app.exception_handler(DatabaseUnavailableError)
    def _db_unavailable(_request, _exc: DatabaseUnavailableError):
        logger.warning("Database unavailable (503)", exc_info=_exc)
        return JSONResponse(status_code=503, content=_UNAVAILABLE)

    @app.exception_handler(SAOperationalError)
    def _sqlalchemy_operational_error(_request, exc: SAOperationalError):
        return _operational_error_response(exc)

    @app.exception_handler(psycopg2.OperationalError)
    def _psycopg2_operational_error(_request, exc: psycopg2.OperationalError):
        return _operational_error_response(exc)

    app.add_middleware(CORSMiddleware, **_cors_options(is_production))

    @app.get("/health")
    def health() -> dict:
        # Always respond; reflect DB availability without crashing.
        db_status = "ok"
        try:
            with ENGINE.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SAOperationalError:
            db_status = "down"

        return {"app": "ok", "database": db_status}

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
