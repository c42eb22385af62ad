"""
Learning tip model.
"""
import uuid
from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field
from app.models.enums import DifficultyLevel
from app.models.mixins import id_field, timestamp_field, difficulty_field


class LearningTip(SQLModel, table=True):
    """Learning tips table - short advice attached to a language code."""
    __tablename__ = "learning_tips"

    id: uuid.UUID = id_field()
    language_code: str = Field(max_length=8)  # Refers to languages.code, not enforced as a foreign key
    title: str
    content: str
    tip_type: str = Field(max_length=32)  # TipType label; other tags are allowed
    difficulty_level: DifficultyLevel = difficulty_field()
    is_featured: bool = Field(default=False)
    created_at: Optional[datetime] = timestamp_field()
    updated_at: Optional[datetime] = timestamp_field()
