"""
Vocabulary service for listing, sampling and searching vocabulary words.
"""
from typing import Optional, Sequence
from sqlmodel import Session, select, col, func

from app.core.database import fetch_all
from app.core.exceptions import ValidationError
from app.models import VocabularyWord

VOCABULARY_LIMIT = 20
RANDOM_SAMPLE_SIZE = 10
SEARCH_LIMIT = 20
# Placeholder score attached to every search hit; not derived from match quality
SEARCH_RELEVANCE_SCORE = 0.95


def list_vocabulary(session: Session) -> Sequence[VocabularyWord]:
    """Return the most frequent words, ordered by frequency rank."""
    query = (
        select(VocabularyWord)
        .order_by(col(VocabularyWord.frequency_rank).asc())
        .limit(VOCABULARY_LIMIT)
    )
    return fetch_all(session, query, operation="fetch vocabulary")


def sample_vocabulary(session: Session) -> Sequence[VocabularyWord]:
    """
    Return up to RANDOM_SAMPLE_SIZE words drawn at random.

    A fresh sample is drawn on every call; results are neither stable nor ordered.
    """
    query = select(VocabularyWord).order_by(func.random()).limit(RANDOM_SAMPLE_SIZE)
    return fetch_all(session, query, operation="fetch random vocabulary")


def search_vocabulary(session: Session, term: Optional[str]) -> Sequence[VocabularyWord]:
    """
    Case-insensitive substring search over the English headword.

    Args:
        session: Database session
        term: Search term, matched literally (LIKE wildcards are escaped)

    Returns:
        Up to SEARCH_LIMIT matching words ordered by frequency rank

    Raises:
        ValidationError: If term is missing or empty. No query is issued.
    """
    if not term:
        raise ValidationError("Search query parameter 'q' is required")

    query = (
        select(VocabularyWord)
        .where(col(VocabularyWord.english_word).icontains(term, autoescape=True))
        .order_by(col(VocabularyWord.frequency_rank).asc())
        .limit(SEARCH_LIMIT)
    )
    return fetch_all(session, query, operation="search vocabulary")
