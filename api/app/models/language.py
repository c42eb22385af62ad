"""
Language model.
"""
import uuid
from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field
from app.models.enums import DifficultyLevel
from app.models.mixins import id_field, timestamp_field, difficulty_field


class Language(SQLModel, table=True):
    """Language table - stores the languages offered for learning."""
    __tablename__ = "languages"

    id: uuid.UUID = id_field()
    code: str = Field(unique=True, max_length=8)  # e.g., 'EN', 'ES', 'JA'
    name: str  # English, Spanish, Japanese, etc.
    native_name: str  # Name in the language's own script
    flag_emoji: str  # Flag/region marker, e.g. 'US'
    category: str  # e.g. 'Romance', 'Asian'
    difficulty_level: DifficultyLevel = difficulty_field()
    is_popular: bool = Field(default=False)
    is_active: bool = Field(default=True)  # Inactive languages are never returned
    created_at: Optional[datetime] = timestamp_field()
    updated_at: Optional[datetime] = timestamp_field()
