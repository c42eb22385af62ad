"""
Seeding service: populates an empty database with the built-in reference data.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, NamedTuple
from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from app.core.database import execute, fetch_scalar
from app.models import Language, VocabularyWord, LearningTip
from app.services import seed_catalog

logger = logging.getLogger(__name__)


@dataclass
class SeedReport:
    """Outcome of a seeding run."""
    skipped: bool
    existing_languages: int = 0
    languages_inserted: int = 0
    vocabulary_inserted: int = 0
    learning_tips_inserted: int = 0


def count_languages(engine: Engine) -> int:
    """Return the number of rows in the languages table."""
    with engine.connect() as connection:
        count = fetch_scalar(
            connection,
            select(func.count()).select_from(Language),
            operation="count languages",
        )
    return int(count or 0)


def _language_values(row: seed_catalog.LanguageSeed) -> dict:
    return row._asdict()


def _vocabulary_values(row: seed_catalog.VocabularySeed) -> dict:
    return row._asdict()


def _learning_tip_values(row: seed_catalog.LearningTipSeed) -> dict:
    values = row._asdict()
    # tip_type is stored as a plain string column
    values["tip_type"] = row.tip_type.value
    return values


def _insert_rows(
    engine: Engine,
    model: type[SQLModel],
    rows: Iterable[NamedTuple],
    to_values,
    label: str,
) -> int:
    """
    Insert rows one statement at a time, in order, each committed on its own.

    Every row is stamped one millisecond after the previous one, so created_at
    follows declaration order even on stores whose now() is fixed per transaction
    or has coarse resolution. id comes from the column default.

    Raises:
        StoreError: On the first failing insert; rows committed before it stay
    """
    inserted = 0
    seeded_at = datetime.now(timezone.utc)
    for position, row in enumerate(rows):
        stamp = seeded_at + timedelta(milliseconds=position)
        values = {**to_values(row), "created_at": stamp, "updated_at": stamp}
        with engine.begin() as connection:
            execute(
                connection,
                insert(model).values(**values),
                operation=f"insert {label}",
            )
        inserted += 1
    logger.info(f"Inserted {inserted} {label}")
    return inserted


def seed_database(engine: Engine) -> SeedReport:
    """
    Insert the seed catalog if the database holds no languages yet.

    Only the languages table is checked. A database that has languages but is
    missing vocabulary or tips is left untouched.

    Kinds are inserted in order: languages, vocabulary, learning tips. Each row
    commits on its own, so a failure leaves every earlier row in place and skips
    the rest.

    Returns:
        SeedReport describing what was inserted

    Raises:
        StoreError: If the count query or any insert fails
    """
    logger.info("Initializing database with essential data")

    existing = count_languages(engine)
    if existing > 0:
        logger.info(f"Database already contains {existing} languages, skipping initialization")
        return SeedReport(skipped=True, existing_languages=existing)

    report = SeedReport(skipped=False)
    report.languages_inserted = _insert_rows(
        engine, Language, seed_catalog.LANGUAGES, _language_values, "languages"
    )
    report.vocabulary_inserted = _insert_rows(
        engine, VocabularyWord, seed_catalog.VOCABULARY, _vocabulary_values, "vocabulary words"
    )
    report.learning_tips_inserted = _insert_rows(
        engine, LearningTip, seed_catalog.LEARNING_TIPS, _learning_tip_values, "learning tips"
    )

    logger.info("Database initialization completed successfully")
    return report
