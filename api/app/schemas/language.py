from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from uuid import UUID
from app.models.enums import DifficultyLevel


class LanguageResponse(BaseModel):
    """Language response schema."""
    id: UUID
    code: str
    name: str
    native_name: str
    flag_emoji: str
    category: str
    difficulty_level: DifficultyLevel
    is_popular: bool
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
