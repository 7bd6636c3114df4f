from __future__ import annotations

from sqlalchemy import Column, Date, ForeignKey, Index, PrimaryKeyConstraint, String, Table, Text

from models.base import ID_TYPE, AuditMixin, Base, TimestampMixin, fk_column, id_column
from models.enums import Status


class Notice(AuditMixin, TimestampMixin, Base):
    __tablename__ = "notices"

    id = id_column()
    faculty_id = fk_column("faculties.id", ondelete="SET NULL", nullable=True)
    program_id = fk_column("programs.id", ondelete="SET NULL", nullable=True)
    session_id = fk_column("academic_sessions.id", ondelete="SET NULL", nullable=True)
    semester_id = fk_column("semesters.id", ondelete="SET NULL", nullable=True)
    section_id = fk_column("sections.id", ondelete="SET NULL", nullable=True)
    notice_no = Column(String(255), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False)
    attach = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)

    __table_args__ = (
        Index("ix_notices_status_date", "status", "date"),
        Index("ix_notices_program_session", "program_id", "session_id"),
    )


class Content(AuditMixin, TimestampMixin, Base):
    __tablename__ = "contents"

    id = id_column()
    faculty_id = fk_column("faculties.id", ondelete="SET NULL", nullable=True)
    program_id = fk_column("programs.id", ondelete="SET NULL", nullable=True)
    session_id = fk_column("academic_sessions.id", ondelete="SET NULL", nullable=True)
    semester_id = fk_column("semesters.id", ondelete="SET NULL", nullable=True)
    section_id = fk_column("sections.id", ondelete="SET NULL", nullable=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False, index=True)
    url = Column(Text, nullable=True)
    attach = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value, index=True)

    __table_args__ = (
        Index("ix_contents_faculty_program_session", "faculty_id", "program_id", "session_id"),
    )


class Document(AuditMixin, TimestampMixin, Base):
    __tablename__ = "documents"

    id = id_column()
    title = Column(String(255), nullable=False)
    attach = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value, index=True)


def _morph_table(name: str, owner: str, owner_table: str, morph: str) -> Table:
    # (type, id) pairs point at any table, so only the owning side carries a real FK.
    return Table(
        name,
        Base.metadata,
        Column(f"{owner}_id", ID_TYPE, ForeignKey(f"{owner_table}.id", ondelete="CASCADE"), nullable=False),
        Column(f"{morph}_type", String(255), nullable=False),
        Column(f"{morph}_id", ID_TYPE, nullable=False),
        PrimaryKeyConstraint(f"{owner}_id", f"{morph}_type", f"{morph}_id", name=f"pk_{name}"),
        Index(f"ix_{name}_{morph}", f"{morph}_type", f"{morph}_id"),
    )


noticeables = _morph_table("noticeables", "notice", "notices", "noticeable")
contentables = _morph_table("contentables", "content", "contents", "contentable")
docables = _morph_table("docables", "document", "documents", "docable")
