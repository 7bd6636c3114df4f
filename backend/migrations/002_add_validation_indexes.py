from __future__ import annotations

"""Add DB indexes that speed up uniqueness/existence validation reads.

Every lookup the validators run filters on the checked column(s) plus
`deleted_at IS NULL`, so the indexes lead with the checked columns and end
with `deleted_at`.

Safe to run multiple times (uses IF NOT EXISTS / IF EXISTS).

Run:
  python -m migrations.002_add_validation_indexes --yes

Roll back:
  python backend/migrations/002_add_validation_indexes.py --yes --down
"""

import argparse
import sys
from pathlib import Path

# Allow running this script from any working directory.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine


# (index name, table, columns)
INDEXES = [
    # Unique-value lookups
    ("idx_faculties_slug_deleted", "faculties", ("slug", "deleted_at")),
    ("idx_faculties_code_deleted", "faculties", ("code", "deleted_at")),
    ("idx_programs_code_deleted", "programs", ("code", "deleted_at")),
    ("idx_batches_code_deleted", "batches", ("code", "deleted_at")),
    ("idx_subjects_code_deleted", "subjects", ("code", "deleted_at")),
    ("idx_academic_sessions_code_deleted", "academic_sessions", ("code", "deleted_at")),
    ("idx_books_isbn_deleted", "books", ("isbn", "deleted_at")),

    # Scoped uniqueness and combination checks
    ("idx_sections_batch_name_deleted", "sections", ("batch_id", "name", "deleted_at")),
    (
        "idx_enroll_subjects_combination_deleted",
        "enroll_subjects",
        ("program_id", "semester_id", "section_id", "deleted_at"),
    ),

    # Existence checks on foreign keys
    ("idx_programs_faculty_deleted", "programs", ("faculty_id", "deleted_at")),
    ("idx_batches_program_deleted", "batches", ("program_id", "deleted_at")),

    # Open-issue lookup for issue/return
    ("idx_issue_returns_member_book_status", "issue_returns", ("member_id", "book_id", "status")),
]

# Live-row uniqueness declared on the models. Databases created before these
# existed get them here; they belong to the core schema, so --down keeps them.
# (index name, table, columns)
LIVE_UNIQUE_INDEXES = [
    ("uq_faculties_slug", "faculties", ("slug",)),
    ("uq_faculties_code", "faculties", ("code",)),
    ("uq_programs_slug", "programs", ("slug",)),
    ("uq_programs_code", "programs", ("code",)),
    ("uq_batches_name", "batches", ("name",)),
    ("uq_batches_code", "batches", ("code",)),
    ("uq_sections_batch_name", "sections", ("batch_id", "name")),
    ("uq_semesters_name", "semesters", ("name",)),
    ("uq_subjects_name", "subjects", ("name",)),
    ("uq_subjects_code", "subjects", ("code",)),
    ("uq_academic_sessions_name", "academic_sessions", ("name",)),
    ("uq_academic_sessions_code", "academic_sessions", ("code",)),
    ("uq_class_rooms_name", "class_rooms", ("name",)),
    ("uq_students_student_id", "students", ("student_id",)),
    ("uq_students_email", "students", ("email",)),
    ("uq_book_categories_title", "book_categories", ("title",)),
    ("uq_book_categories_slug", "book_categories", ("slug",)),
    ("uq_book_categories_code", "book_categories", ("code",)),
    ("uq_books_isbn", "books", ("isbn",)),
    ("uq_books_accession_number", "books", ("accession_number",)),
]


def create_statements() -> list[str]:
    lookups = [
        f"CREATE INDEX IF NOT EXISTS {name} ON {table} ({', '.join(columns)});"
        for name, table, columns in INDEXES
    ]
    uniques = [
        f"CREATE UNIQUE INDEX IF NOT EXISTS {name} ON {table} ({', '.join(columns)}) WHERE deleted_at IS NULL;"
        for name, table, columns in LIVE_UNIQUE_INDEXES
    ]
    return lookups + uniques


def drop_statements() -> list[str]:
    return [f"DROP INDEX IF EXISTS {name};" for name, _table, _columns in reversed(INDEXES)]


def _run(bind: Engine | Connection, statements: list[str]) -> None:
    if isinstance(bind, Engine):
        with bind.begin() as conn:
            for s in statements:
                conn.execute(text(s))
        return
    for s in statements:
        bind.execute(text(s))


def upgrade(bind: Engine | Connection) -> None:
    _run(bind, create_statements())


def downgrade(bind: Engine | Connection) -> None:
    _run(bind, drop_statements())


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--yes", action="store_true", help="Actually apply changes")
    parser.add_argument("--down", action="store_true", help="Drop the indexes instead of creating them")
    args = parser.parse_args()

    statements = drop_statements() if args.down else create_statements()

    if not args.yes:
        print("Dry run. Re-run with --yes to apply.")
        for s in statements:
            print("---")
            print(s.strip())
        return

    from core.database import ENGINE

    if args.down:
        downgrade(ENGINE)
    else:
        upgrade(ENGINE)

    print(f"OK: {'dropped' if args.down else 'created/verified'} {len(statements)} indexes.")


if __name__ == "__main__":
    main()
