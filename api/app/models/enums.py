"""
Model enums.
"""
from enum import Enum


class DifficultyLevel(str, Enum):
    """Difficulty level shared by languages, vocabulary words and learning tips."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TipType(str, Enum):
    """Known learning tip types. The column itself is a plain string, so other tags are accepted."""
    PRONUNCIATION = "pronunciation"
    GRAMMAR = "grammar"
    WRITING = "writing"
    CULTURAL = "cultural"
    TONES = "tones"
    SCRIPT = "script"


def enum_values(enum_cls) -> list[str]:
    """Persist enum labels rather than member names."""
    return [member.value for member in enum_cls]
