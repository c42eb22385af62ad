"""Shared fixtures: an in-memory SQLite store and an app serving from it."""
from datetime import datetime
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.core.database import init_db
from app.main import create_app
from app.models import DifficultyLevel, Language, VocabularyWord, LearningTip
from app.services.seed_service import seed_database


@pytest.fixture()
def engine():
    """Empty store with the reference tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def seeded_engine(engine):
    seed_database(engine)
    return engine


@pytest.fixture()
def session(seeded_engine):
    with Session(seeded_engine) as session:
        yield session


@pytest.fixture()
def app(engine):
    # Seeding happens in the lifespan, when the client starts
    return create_app(engine=engine, create_tables=False)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


def add_language(session: Session, code: str, name: str, is_popular: bool = False, is_active: bool = True) -> Language:
    language = Language(
        code=code,
        name=name,
        native_name=name,
        flag_emoji=code,
        category="Test",
        difficulty_level=DifficultyLevel.INTERMEDIATE,
        is_popular=is_popular,
        is_active=is_active,
    )
    session.add(language)
    session.commit()
    return language


def add_word(session: Session, english_word: str, frequency_rank: int) -> VocabularyWord:
    word = VocabularyWord(
        english_word=english_word,
        category="Test",
        difficulty_level=DifficultyLevel.ADVANCED,
        part_of_speech="noun",
        frequency_rank=frequency_rank,
        is_common=False,
    )
    session.add(word)
    session.commit()
    return word


def add_tip(
    session: Session,
    title: str,
    is_featured: bool,
    tip_type: str = "grammar",
    created_at: Optional[datetime] = None,
) -> LearningTip:
    tip = LearningTip(
        language_code="EN",
        title=title,
        content=f"{title} content",
        tip_type=tip_type,
        difficulty_level=DifficultyLevel.BEGINNER,
        is_featured=is_featured,
        created_at=created_at,
        updated_at=created_at,
    )
    session.add(tip)
    session.commit()
    return tip
