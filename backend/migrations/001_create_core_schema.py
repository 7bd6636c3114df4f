from __future__ import annotations

"""Create (or drop) every table declared under `models/`.

Tables are created parents first and dropped children first, following the
foreign keys. Safe to run multiple times.

Run:
  python -m migrations.001_create_core_schema --yes

Roll back:
  python backend/migrations/001_create_core_schema.py --yes --down
"""

import argparse
import logging
import sys
from pathlib import Path

# Allow running this script from any working directory.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from sqlalchemy.engine import Connection, Engine

import models  # noqa: F401  (registers every table on Base.metadata)
from models.base import Base


logger = logging.getLogger(__name__)


def upgrade(bind: Engine | Connection) -> None:
    Base.metadata.create_all(bind=bind)
    logger.info("Created/verified %d tables", len(Base.metadata.tables))


def downgrade(bind: Engine | Connection) -> None:
    Base.metadata.drop_all(bind=bind)
    logger.info("Dropped %d tables", len(Base.metadata.tables))


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--yes", action="store_true", help="Actually apply changes")
    parser.add_argument("--down", action="store_true", help="Drop the schema instead of creating it")
    args = parser.parse_args()

    tables = [t.name for t in Base.metadata.sorted_tables]
    if args.down:
        tables.reverse()

    if not args.yes:
        print("Dry run. Re-run with --yes to apply.")
        for name in tables:
            print(("DROP " if args.down else "CREATE ") + name)
        return

    from core.config import settings
    from core.database import ENGINE
    from core.logging import setup_logging

    setup_logging(environment=settings.environment, level=settings.log_level)
    if args.down:
        downgrade(ENGINE)
    else:
        upgrade(ENGINE)
    print(f"OK: {'dropped' if args.down else 'created/verified'} {len(tables)} tables.")


if __name__ == "__main__":
    main()
