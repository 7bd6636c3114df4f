from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Index, Integer, text
from sqlalchemy.orm import declarative_base, declared_attr
from sqlalchemy.sql import func


Base = declarative_base()

# BIGINT identity on Postgres; SQLite only autoincrements INTEGER PRIMARY KEY.
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


def id_column() -> Column:
    return Column(ID_TYPE, primary_key=True, autoincrement=True)


def fk_column(target: str, *, ondelete: str, nullable: bool = False, index: bool = False) -> Column:
    """Integer foreign key with an explicit deletion policy (CASCADE or SET NULL)."""

    if ondelete == "SET NULL" and not nullable:
        raise ValueError(f"SET NULL foreign key to {target} must be nullable")
    return Column(ID_TYPE, ForeignKey(target, ondelete=ondelete), nullable=nullable, index=index)


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class SoftDeleteMixin:
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)


def live_unique(table: str, *columns: str, name: str | None = None) -> Index:
    """Unique among rows that are not soft-deleted."""

    live = text("deleted_at IS NULL")
    return Index(
        name or f"uq_{table}_{'_'.join(columns)}",
        *columns,
        unique=True,
        postgresql_where=live,
        sqlite_where=live,
    )


class AuditMixin:
    @declared_attr
    def created_by(cls):
        return Column(ID_TYPE, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    @declared_attr
    def updated_by(cls):
        return Column(ID_TYPE, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
