from __future__ import annotations

from sqlalchemy import JSON, Boolean, CheckConstraint, Column, Index, Integer, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, id_column, live_unique
from models.enums import RoomType, Status


class ClassRoom(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "class_rooms"

    id = id_column()
    name = Column(String(255), nullable=False)
    floor = Column(String(50), nullable=True)
    capacity = Column(Integer, nullable=False)
    room_type = Column(String(20), nullable=False, default=RoomType.CLASSROOM.value)
    description = Column(Text, nullable=True)
    facilities = Column(JSON, nullable=True)
    is_available = Column(Boolean, nullable=False, default=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)

    __table_args__ = (
        live_unique("class_rooms", "name"),
        CheckConstraint("capacity >= 1", name="ck_class_rooms_capacity"),
        Index("ix_class_rooms_status_available", "status", "is_available"),
        Index("ix_class_rooms_room_type", "room_type"),
    )
