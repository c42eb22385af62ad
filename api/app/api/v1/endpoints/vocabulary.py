"""
Vocabulary endpoints: frequency listing, random sample and search.
"""
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session
from typing import List, Optional
from app.core.database import get_session
from app.schemas.health import ErrorResponse
from app.schemas.vocabulary import (
    VocabularyWordResponse,
    VocabularySearchResult,
    RandomVocabularyResponse,
    VocabularySearchResponse,
)
from app.services.vocabulary_service import (
    SEARCH_RELEVANCE_SCORE,
    list_vocabulary,
    sample_vocabulary,
    search_vocabulary,
)
from app.api.v1.endpoints.utils import start_timer, format_duration, set_response_headers
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vocabulary", tags=["vocabulary"])

VOCABULARY_MAX_AGE = 180


@router.get("", response_model=List[VocabularyWordResponse])
def get_vocabulary(
    response: Response,
    session: Session = Depends(get_session)
):
    """Get the most frequent vocabulary words (at most 20), ordered by frequency rank."""
    start = start_timer()
    words = list_vocabulary(session)
    result = [VocabularyWordResponse.model_validate(word) for word in words]

    duration = format_duration(start)
    logger.debug(f"Vocabulary query completed in {duration}")
    set_response_headers(response, VOCABULARY_MAX_AGE, duration)
    return result


@router.get("/random", response_model=RandomVocabularyResponse)
def get_random_vocabulary(
    session: Session = Depends(get_session)
):
    """Get a random sample of up to 10 vocabulary words. Every call draws a new sample."""
    words = sample_vocabulary(session)
    vocabulary = [VocabularyWordResponse.model_validate(word) for word in words]
    return RandomVocabularyResponse(vocabulary=vocabulary, count=len(vocabulary))


@router.get(
    "/search",
    response_model=VocabularySearchResponse,
    responses={400: {"model": ErrorResponse}},
)
def search(
    q: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """
    Search vocabulary by English headword.

    Args:
        q: Case-insensitive substring to look for. Required and non-empty, otherwise 400.
    """
    words = search_vocabulary(session, q)
    results = [
        VocabularySearchResult(
            **VocabularyWordResponse.model_validate(word).model_dump(),
            relevance_score=SEARCH_RELEVANCE_SCORE,
        )
        for word in words
    ]
    return VocabularySearchResponse(results=results, total=len(results), query=q)
