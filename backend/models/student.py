from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, Index, Numeric, String, Text

from models.base import AuditMixin, Base, SoftDeleteMixin, TimestampMixin, fk_column, id_column, live_unique
from models.enums import ApplicationStatus, FeeStatus, Status


class Student(AuditMixin, SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "students"

    id = id_column()
    student_id = Column(String(255), nullable=False)
    registration_no = Column(String(255), nullable=True, index=True)
    batch_id = fk_column("batches.id", ondelete="SET NULL", nullable=True)
    program_id = fk_column("programs.id", ondelete="SET NULL", nullable=True)
    admission_date = Column(Date, nullable=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    father_name = Column(String(255), nullable=True)
    mother_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=True)
    emergency_phone = Column(String(20), nullable=True)
    gender = Column(String(20), nullable=False)
    dob = Column(Date, nullable=False)
    religion = Column(String(20), nullable=True)
    marital_status = Column(String(20), nullable=True)
    blood_group = Column(String(20), nullable=True)
    nationality = Column(String(255), nullable=True)
    national_id = Column(String(255), nullable=True)
    present_address = Column(Text, nullable=True)
    permanent_address = Column(Text, nullable=True)
    photo = Column(Text, nullable=True)
    login = Column(Boolean, nullable=False, default=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)

    __table_args__ = (
        live_unique("students", "student_id"),
        live_unique("students", "email"),
        Index("ix_students_batch_program", "batch_id", "program_id"),
        Index("ix_students_status", "status"),
    )


class Application(AuditMixin, TimestampMixin, Base):
    __tablename__ = "applications"

    id = id_column()
    registration_no = Column(String(255), nullable=True, index=True)
    batch_id = fk_column("batches.id", ondelete="SET NULL", nullable=True)
    program_id = fk_column("programs.id", ondelete="SET NULL", nullable=True)
    apply_date = Column(Date, nullable=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    phone = Column(String(20), nullable=True)
    gender = Column(String(20), nullable=False)
    dob = Column(Date, nullable=False)
    present_address = Column(Text, nullable=True)
    fee_amount = Column(Numeric(10, 2), nullable=True)
    pay_status = Column(String(20), nullable=False, default=FeeStatus.UNPAID.value)
    status = Column(String(20), nullable=False, default=ApplicationStatus.PENDING.value)

    __table_args__ = (
        Index("ix_applications_program_status", "program_id", "status"),
        Index("ix_applications_status", "status"),
    )


class StudentEnroll(AuditMixin, TimestampMixin, Base):
    __tablename__ = "student_enrolls"

    id = id_column()
    student_id = fk_column("students.id", ondelete="CASCADE")
    program_id = fk_column("programs.id", ondelete="CASCADE")
    session_id = fk_column("academic_sessions.id", ondelete="CASCADE")
    semester_id = fk_column("semesters.id", ondelete="CASCADE")
    section_id = fk_column("sections.id", ondelete="CASCADE")
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)

    __table_args__ = (
        Index("ix_student_enrolls_student_status", "student_id", "status"),
        Index("ix_student_enrolls_program_session", "program_id", "session_id"),
    )
