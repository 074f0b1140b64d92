# Loads the JSON fixtures into the configured database for RECORD_PROVIDER=sql.
# Usage: python -m campus_portal.utils.seed_database
from typing import Dict

from sqlalchemy.orm import sessionmaker

from campus_portal.core.config import settings
from campus_portal.db.database import Base, SessionLocal, engine
from campus_portal.providers.memory import load_fixture
from campus_portal.providers.registry import RESOURCES
from campus_portal.providers.sql import MODELS, SqlRecordProvider


def seed(session_factory: sessionmaker = SessionLocal, bind=engine, fixture_dir: str = None) -> Dict[str, int]:
    """Create the tables and insert every fixture record into empty tables."""
    Base.metadata.create_all(bind=bind)
    inserted = {}
    for resource in RESOURCES:
        provider = SqlRecordProvider(resource, MODELS[resource], session_factory)
        if provider.list():
            print(f"-- {resource}: table not empty, skipped")
            inserted[resource] = 0
            continue
        records = load_fixture(resource, fixture_dir or settings.FIXTURE_DIR or None)
        inserted[resource] = provider.load(records)
        print(f"-- {resource}: {len(records)} rows")
    return inserted


if __name__ == "__main__":
    print(f"Seeding {settings.DATABASE_URL}")
    seed()
