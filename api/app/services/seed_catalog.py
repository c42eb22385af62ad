"""
Built-in reference data inserted into an empty database on first startup.

Rows are inserted in declaration order within each tuple.
"""
from typing import NamedTuple
from app.models.enums import DifficultyLevel, TipType

BEGINNER = DifficultyLevel.BEGINNER
INTERMEDIATE = DifficultyLevel.INTERMEDIATE
ADVANCED = DifficultyLevel.ADVANCED


class LanguageSeed(NamedTuple):
    code: str
    name: str
    native_name: str
    flag_emoji: str
    category: str
    difficulty_level: DifficultyLevel
    is_popular: bool
    is_active: bool


class VocabularySeed(NamedTuple):
    english_word: str
    category: str
    difficulty_level: DifficultyLevel
    part_of_speech: str
    frequency_rank: int
    is_common: bool


class LearningTipSeed(NamedTuple):
    language_code: str
    title: str
    content: str
    tip_type: TipType
    difficulty_level: DifficultyLevel
    is_featured: bool


LANGUAGES: tuple[LanguageSeed, ...] = (
    LanguageSeed("EN", "English", "English", "US", "Popular", BEGINNER, True, True),
    LanguageSeed("ES", "Spanish", "Español", "ES", "Romance", BEGINNER, True, True),
    LanguageSeed("FR", "French", "Français", "FR", "Romance", INTERMEDIATE, True, True),
    LanguageSeed("DE", "German", "Deutsch", "DE", "Germanic", INTERMEDIATE, True, True),
    LanguageSeed("IT", "Italian", "Italiano", "IT", "Romance", BEGINNER, True, True),
    LanguageSeed("PT", "Portuguese", "Português", "PT", "Romance", BEGINNER, True, True),
    LanguageSeed("RU", "Russian", "Русский", "RU", "Slavic", ADVANCED, True, True),
    LanguageSeed("JA", "Japanese", "日本語", "JP", "Asian", ADVANCED, True, True),
    LanguageSeed("KO", "Korean", "한국어", "KR", "Asian", ADVANCED, True, True),
    LanguageSeed("ZH", "Chinese", "中文", "CN", "Asian", ADVANCED, True, True),
    LanguageSeed("AR", "Arabic", "العربية", "SA", "Middle Eastern", ADVANCED, True, True),
    LanguageSeed("HI", "Hindi", "हिन्दी", "IN", "Asian", INTERMEDIATE, True, True),
    LanguageSeed("NL", "Dutch", "Nederlands", "NL", "Germanic", INTERMEDIATE, True, True),
    LanguageSeed("SV", "Swedish", "Svenska", "SE", "Nordic", INTERMEDIATE, True, True),
    LanguageSeed("NO", "Norwegian", "Norsk", "NO", "Nordic", INTERMEDIATE, True, True),
)

VOCABULARY: tuple[VocabularySeed, ...] = (
    VocabularySeed("Hello", "Greetings", BEGINNER, "interjection", 1, True),
    VocabularySeed("Thank you", "Politeness", BEGINNER, "phrase", 2, True),
    VocabularySeed("Goodbye", "Greetings", BEGINNER, "interjection", 3, True),
    VocabularySeed("Please", "Politeness", BEGINNER, "adverb", 4, True),
    VocabularySeed("Yes", "Basic", BEGINNER, "adverb", 5, True),
    VocabularySeed("No", "Basic", BEGINNER, "adverb", 6, True),
    VocabularySeed("Water", "Basic", BEGINNER, "noun", 7, True),
    VocabularySeed("Food", "Basic", BEGINNER, "noun", 8, True),
    VocabularySeed("House", "Basic", BEGINNER, "noun", 9, True),
    VocabularySeed("Family", "Basic", BEGINNER, "noun", 10, True),
)

LEARNING_TIPS: tuple[LearningTipSeed, ...] = (
    LearningTipSeed(
        "ES", "Pronunciation",
        "Practice rolling your R's daily - it's essential for Spanish pronunciation",
        TipType.PRONUNCIATION, BEGINNER, True,
    ),
    LearningTipSeed(
        "FR", "Pronunciation",
        "French nasal sounds are key - practice 'bonjour' and 'merci'",
        TipType.PRONUNCIATION, BEGINNER, True,
    ),
    LearningTipSeed(
        "DE", "Grammar",
        "Understand German case system (nominative, accusative, dative, genitive)",
        TipType.GRAMMAR, ADVANCED, True,
    ),
    LearningTipSeed(
        "JA", "Writing",
        "Learn Hiragana and Katakana before tackling Kanji characters",
        TipType.CULTURAL, INTERMEDIATE, True,
    ),
    LearningTipSeed(
        "ZH", "Tones",
        "Master the four tones in Mandarin Chinese - they change word meanings",
        TipType.PRONUNCIATION, ADVANCED, True,
    ),
    LearningTipSeed(
        "AR", "Script",
        "Arabic is written from right to left - practice the alphabet daily",
        TipType.CULTURAL, INTERMEDIATE, True,
    ),
    LearningTipSeed(
        "RU", "Cyrillic",
        "Learn the Cyrillic alphabet - it's different from Latin script",
        TipType.CULTURAL, INTERMEDIATE, True,
    ),
    LearningTipSeed(
        "KO", "Hangul",
        "Korean Hangul is phonetic - learn the basic characters first",
        TipType.CULTURAL, BEGINNER, True,
    ),
)
