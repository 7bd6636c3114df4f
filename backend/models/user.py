from __future__ import annotations

from sqlalchemy import Column, String, Text, UniqueConstraint

from models.base import Base, TimestampMixin, id_column
from models.enums import Status


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id = id_column()
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    password_hash = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)

    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )
