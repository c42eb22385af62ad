"""
Vocabulary schemas.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from uuid import UUID
from app.models.enums import DifficultyLevel


class VocabularyWordResponse(BaseModel):
    """Vocabulary word response schema."""
    id: UUID
    english_word: str
    category: str
    difficulty_level: DifficultyLevel
    part_of_speech: str
    frequency_rank: int
    is_common: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class VocabularySearchResult(VocabularyWordResponse):
    """A search hit. relevance_score is a fixed placeholder."""
    relevance_score: float


class RandomVocabularyResponse(BaseModel):
    """Random vocabulary sample."""
    vocabulary: List[VocabularyWordResponse]
    count: int


class VocabularySearchResponse(BaseModel):
    """Vocabulary search results."""
    results: List[VocabularySearchResult]
    total: int
    query: str
