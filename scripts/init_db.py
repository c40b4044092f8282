"""
Create the schema (without Alembic) and optionally seed demo companies.

Usage:
  python scripts/init_db.py            # create tables only
  python scripts/init_db.py --demo     # create tables + demo companies (idempotent by name)
"""
import argparse
import os
import sys
from pathlib import Path

from sqlalchemy import Engine, create_engine

# Ensure repo root is on sys.path when running as a script (Windows-friendly).
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.saas.db import engine_options, make_sessionmaker, scoped_session  # noqa: E402
from app.saas.models import Base, Company  # noqa: E402

DEMO_COMPANIES = (
    ("Acme", "Widgets"),
    ("Globex", None),
    ("Initech", "Software and TPS reports"),
)


def _database_url(database_url: str | None = None) -> str:
    return (database_url or os.environ.get("DATABASE_URL") or "sqlite:///saas.db").strip()


def _engine(database_url: str) -> Engine:
    return create_engine(database_url, **engine_options(database_url))


def create_tables(*, database_url: str | None = None) -> None:
    engine = _engine(_database_url(database_url))
    Base.metadata.create_all(bind=engine)


def seed_only(*, database_url: str | None = None, demo: bool = False) -> int:
    """
    Seed demo companies in an idempotent way (matched by name).
    Returns the number of rows inserted.
    """
    if not demo:
        return 0
    inserted = 0
    with scoped_session(make_sessionmaker(_engine(_database_url(database_url)))) as s:
        for name, description in DEMO_COMPANIES:
            exists = s.query(Company).filter(Company.name == name).one_or_none()
            if exists:
                continue
            s.add(Company(name=name, description=description))
            inserted += 1
    return inserted


def main() -> None:
    parser = argparse.ArgumentParser(description="Create tables and optionally seed demo companies.")
    parser.add_argument("--database-url", default=None)
    parser.add_argument("--demo", action="store_true", help="Insert demo companies")
    args = parser.parse_args()

    create_tables(database_url=args.database_url)
    inserted = seed_only(database_url=args.database_url, demo=args.demo)
    print(f"Tables ready. Demo companies inserted: {inserted}")


if __name__ == "__main__":
    main()
