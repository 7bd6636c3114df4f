from __future__ import annotations

import importlib
from datetime import date

from sqlalchemy import inspect, select

from models import Batch, IssueReturn, Program, Section
from models.base import Base
from models.associations import batch_program

core_schema = importlib.import_module("migrations.001_create_core_schema")
indexes = importlib.import_module("migrations.002_add_validation_indexes")


def test_upgrade_creates_every_table(schema):
    tables = set(inspect(schema).get_table_names())
    for name in ("faculties", "programs", "batches", "sections", "batch_program", "books", "issue_returns", "fees"):
        assert name in tables


def test_downgrade_then_upgrade_is_repeatable(schema):
    core_schema.downgrade(schema)
    assert inspect(schema).get_table_names() == []
    core_schema.upgrade(schema)
    core_schema.upgrade(schema)
    assert "batches" in inspect(schema).get_table_names()


def test_validation_indexes_round_trip(schema):
    indexes.upgrade(schema)
    indexes.upgrade(schema)
    names = {ix["name"] for ix in inspect(schema).get_indexes("sections")}
    assert "idx_sections_batch_name_deleted" in names

    indexes.downgrade(schema)
    names = {ix["name"] for ix in inspect(schema).get_indexes("sections")}
    assert "idx_sections_batch_name_deleted" not in names
    assert "uq_sections_batch_name" in names


def test_live_unique_indexes_match_the_models():
    declared = {
        (ix.name, table.name, tuple(c.name for c in ix.columns))
        for table in Base.metadata.sorted_tables
        for ix in table.indexes
        if ix.unique and ix.dialect_options["sqlite"]["where"] is not None
    }
    assert declared == set(indexes.LIVE_UNIQUE_INDEXES)


def test_deleting_program_cascades_to_batches_sections_and_pivots(db, seed):
    batch = seed.batch()
    seed.section(batch)
    db.execute(batch_program.insert().values(batch_id=batch.id, program_id=batch.program_id))
    db.commit()

    db.delete(db.get(Program, batch.program_id))
    db.commit()
    db.expire_all()

    assert db.execute(select(Batch)).scalars().all() == []
    assert db.execute(select(Section)).scalars().all() == []
    assert db.execute(select(batch_program)).all() == []


def test_deleting_user_nulls_audit_columns(db, seed):
    user = seed.user()
    faculty = seed.faculty(created_by=user.id, updated_by=user.id)
    member = seed.member()
    book = seed.book()
    issue = IssueReturn(
        book_id=book.id,
        member_id=member.id,
        issue_date=date(2024, 1, 1),
        due_date=date(2024, 1, 10),
        issued_by=user.id,
    )
    db.add(issue)
    db.commit()

    db.delete(user)
    db.commit()
    db.expire_all()

    assert faculty.created_by is None
    assert faculty.updated_by is None
    assert db.get(IssueReturn, issue.id).issued_by is None
