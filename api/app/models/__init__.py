"""
Models package - imports all models so they register with SQLModel.
"""
from app.models.enums import DifficultyLevel, TipType
from app.models.language import Language
from app.models.vocabulary_word import VocabularyWord
from app.models.learning_tip import LearningTip

__all__ = [
    'DifficultyLevel',
    'TipType',
    'Language',
    'VocabularyWord',
    'LearningTip',
]
