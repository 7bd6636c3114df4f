from __future__ import annotations

import importlib
import os
import sys
from datetime import date
from pathlib import Path

# Must be set before anything imports core.config / core.database.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.pop("JWT_SECRET_KEY", None)
os.environ.pop("DEFAULT_ACTOR_ID", None)

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import pytest
from fastapi.testclient import TestClient

from core.database import ENGINE, SessionLocal
from models import (
    AcademicSession,
    Batch,
    Book,
    BookCategory,
    Faculty,
    FeesCategory,
    LibraryMember,
    Program,
    Section,
    Semester,
    Student,
    StudentEnroll,
    Subject,
    User,
)

core_schema = importlib.import_module("migrations.001_create_core_schema")


@pytest.fixture()
def schema():
    core_schema.upgrade(ENGINE)
    yield ENGINE
    core_schema.downgrade(ENGINE)


@pytest.fixture()
def db(schema):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(schema):
    from main import app

    with TestClient(app) as c:
        yield c


class Seed:
    """Inserts rows straight through the ORM so tests can start from a known state."""

    def __init__(self, db):
        self.db = db

    def _add(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def user(self, **kw):
        kw.setdefault("name", "Admin")
        kw.setdefault("email", "admin@example.com")
        return self._add(User(**kw))

    def faculty(self, **kw):
        kw.setdefault("name", "Faculty of Science")
        kw.setdefault("slug", kw["name"].lower().replace(" ", "-"))
        kw.setdefault("code", "FOS")
        return self._add(Faculty(**kw))

    def program(self, faculty=None, **kw):
        faculty = faculty or self.faculty()
        kw.setdefault("name", "Computer Science")
        kw.setdefault("slug", kw["name"].lower().replace(" ", "-"))
        kw.setdefault("code", "CS")
        kw.setdefault("duration_years", 4)
        kw.setdefault("total_credits", 120)
        return self._add(Program(faculty_id=faculty.id, **kw))

    def batch(self, program=None, **kw):
        program = program or self.program()
        kw.setdefault("name", "Batch 2023")
        kw.setdefault("code", "B2023")
        kw.setdefault("academic_year", 2023)
        kw.setdefault("start_date", date(2023, 1, 1))
        kw.setdefault("end_date", date(2023, 12, 31))
        return self._add(Batch(program_id=program.id, **kw))

    def section(self, batch, **kw):
        kw.setdefault("name", "Section A")
        return self._add(Section(batch_id=batch.id, **kw))

    def semester(self, **kw):
        kw.setdefault("name", "Semester 1")
        kw.setdefault("academic_year", 2024)
        kw.setdefault("start_date", date(2024, 1, 1))
        kw.setdefault("end_date", date(2024, 6, 30))
        return self._add(Semester(**kw))

    def session(self, **kw):
        kw.setdefault("name", "2024/2025")
        kw.setdefault("code", "S2024")
        kw.setdefault("start_date", date(2024, 9, 1))
        kw.setdefault("end_date", date(2025, 6, 30))
        return self._add(AcademicSession(**kw))

    def subject(self, **kw):
        kw.setdefault("name", "Algorithms")
        kw.setdefault("code", "CS201")
        kw.setdefault("credit_hours", 3)
        return self._add(Subject(**kw))

    def book_category(self, **kw):
        kw.setdefault("title", "Computing")
        kw.setdefault("slug", kw["title"].lower())
        return self._add(BookCategory(**kw))

    def book(self, category=None, **kw):
        category = category or self.book_category()
        kw.setdefault("title", "Clean Code")
        kw.setdefault("author", "Robert C. Martin")
        kw.setdefault("quantity", 2)
        return self._add(Book(book_category_id=category.id, **kw))

    def enrollment(self):
        batch = self.batch()
        student = self._add(
            Student(
                student_id="STU-001",
                first_name="Ada",
                last_name="Lovelace",
                email="ada@example.com",
                gender="female",
                dob=date(2004, 12, 10),
                batch_id=batch.id,
                program_id=batch.program_id,
            )
        )
        section = self.section(batch)
        return self._add(
            StudentEnroll(
                student_id=student.id,
                program_id=batch.program_id,
                session_id=self.session().id,
                semester_id=self.semester().id,
                section_id=section.id,
            )
        )

    def fees_category(self, **kw):
        kw.setdefault("title", "Tuition")
        kw.setdefault("slug", kw["title"].lower())
        return self._add(FeesCategory(**kw))

    def member(self, **kw):
        kw.setdefault("memberable_type", "student")
        kw.setdefault("memberable_id", 1)
        kw.setdefault("library_id", "LIB-0001")
        kw.setdefault("date", date(2024, 1, 1))
        return self._add(LibraryMember(**kw))


@pytest.fixture()
def seed(db):
    return Seed(db)
