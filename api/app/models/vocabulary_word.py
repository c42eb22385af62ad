"""
Vocabulary word model.
"""
import uuid
from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field
from app.models.enums import DifficultyLevel
from app.models.mixins import id_field, timestamp_field, difficulty_field


class VocabularyWord(SQLModel, table=True):
    """Vocabulary table - English headwords ranked by frequency."""
    __tablename__ = "vocabulary_words"

    id: uuid.UUID = id_field()
    english_word: str  # Not unique
    category: str
    difficulty_level: DifficultyLevel = difficulty_field()
    part_of_speech: str
    frequency_rank: int = Field(index=True)  # Lower = more frequent
    is_common: bool = Field(default=False)
    created_at: Optional[datetime] = timestamp_field()
    updated_at: Optional[datetime] = timestamp_field()
