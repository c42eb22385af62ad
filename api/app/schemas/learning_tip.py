"""
Learning tip schemas.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from uuid import UUID
from app.models.enums import DifficultyLevel


class LearningTipResponse(BaseModel):
    """Learning tip response schema."""
    id: UUID
    language_code: str
    title: str
    content: str
    tip_type: str
    difficulty_level: DifficultyLevel
    is_featured: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class LearningTipsResponse(BaseModel):
    """List of learning tips."""
    tips: List[LearningTipResponse]
    total: int
