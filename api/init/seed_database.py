"""
Script to create the reference data tables and seed an empty database.

Usage:
    python init/seed_database.py

Does nothing if the languages table already has rows.
"""
import sys
import logging
from pathlib import Path

# Add the api directory to the path so we can import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.config import settings
from app.core.database import connect, init_db
from app.core.exceptions import StoreConnectionError, StoreError
from app.services.seed_service import seed_database

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main() -> int:
    try:
        engine = connect(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
    except StoreConnectionError as e:
        logger.error("Could not connect to database: %s", e)
        return 1

    try:
        if settings.create_tables:
            init_db(engine)
        report = seed_database(engine)
    except StoreError as e:
        logger.error("Seeding failed: %s", e, exc_info=True)
        return 1
    finally:
        engine.dispose()

    if report.skipped:
        logger.info("Nothing to do: %d languages already present", report.existing_languages)
    else:
        logger.info(
            "Seeded %d languages, %d vocabulary words, %d learning tips",
            report.languages_inserted,
            report.vocabulary_inserted,
            report.learning_tips_inserted,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
