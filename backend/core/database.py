from __future__ import annotations

import time
from typing import Iterable, Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import settings


class DatabaseUnavailableError(RuntimeError):
    """The database could not be reached after the configured retries."""


# Pause before each retry of the session ping.
RETRY_DELAYS_SECONDS: tuple[float, ...] = (0.2, 0.5, 1.0)

# Lower-cased fragments of driver messages that mean "try again later":
# DNS failures, refused/reset connections and timeouts.
_TRANSIENT_MARKERS = (
    "getaddrinfo failed",
    "could not translate host name",
    "name or service not known",
    "connection refused",
    "actively refused",
    "connection reset",
    "server closed the connection unexpectedly",
    "timeout",
    "timed out",
)

_SCHEME_ALIASES = {
    "postgres://": "postgresql+psycopg2://",
    "postgresql://": "postgresql+psycopg2://",
    "postgresql+psycopg://": "postgresql+psycopg2://",
}


def _exception_chain(exc: BaseException) -> Iterable[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def is_transient_db_connectivity_error(exc: BaseException) -> bool:
    """True for connectivity failures worth retrying.

    Constraint and SQL errors never qualify.
    """

    text_ = "\n".join(str(e).lower() for e in _exception_chain(exc))
    return any(marker in text_ for marker in _TRANSIENT_MARKERS)


def normalize_database_url(url: str) -> str:
    url = url.strip()
    for alias, scheme in _SCHEME_ALIASES.items():
        if url.startswith(alias):
            return scheme + url[len(alias):]
    return url


def _sqlite_engine(url: str, database: str | None) -> Engine:
    kwargs: dict[str, object] = {"connect_args": {"check_same_thread": False}}
    if database in (None, "", ":memory:"):
        # One shared connection, otherwise every pooled connection sees its own empty database.
        kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:
        # SQLite ignores ON DELETE CASCADE / SET NULL unless this is on.
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def get_engine(database_url: str | None = None) -> Engine:
    url = normalize_database_url(database_url or settings.database_url)
    parsed = make_url(url)

    if parsed.get_backend_name() == "sqlite":
        return _sqlite_engine(url, parsed.database)

    connect_args: dict[str, object] = {"connect_timeout": 3}
    host = (parsed.host or "").lower()
    if host.endswith("supabase.com") and "sslmode" not in (parsed.query or {}):
        connect_args["sslmode"] = "require"

    # pool_pre_ping drops stale pooled connections; connect_timeout bounds outages.
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


ENGINE = get_engine()
SessionLocal = sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)


def _ping() -> Session:
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
    except OperationalError:
        db.close()
        raise
    return db


def _open_session() -> Session:
    """A session whose connection answered ``SELECT 1``, retrying transient failures."""

    for delay in RETRY_DELAYS_SECONDS:
        try:
            return _ping()
        except OperationalError as exc:
            if not is_transient_db_connectivity_error(exc):
                raise DatabaseUnavailableError("Database temporarily unavailable") from exc
            time.sleep(delay)
    try:
        return _ping()
    except OperationalError as exc:
        raise DatabaseUnavailableError("Database temporarily unavailable") from exc


def get_db() -> Iterator[Session]:
    db = _open_session()
    # Errors raised by the endpoint itself (404/409/422) pass through untouched.
    try:
        yield db
    finally:
        db.close()
