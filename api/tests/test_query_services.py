"""Tests for the language, vocabulary and learning tip services."""
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from sqlmodel import SQLModel, Session

from app.core.exceptions import StoreError, ValidationError
from app.services.language_service import list_languages
from app.services.learning_tip_service import LEARNING_TIPS_LIMIT, list_learning_tips
from app.services.vocabulary_service import (
    RANDOM_SAMPLE_SIZE,
    SEARCH_LIMIT,
    VOCABULARY_LIMIT,
    list_vocabulary,
    sample_vocabulary,
    search_vocabulary,
)

from conftest import add_language, add_tip, add_word


class TestListLanguages:
    """Filtering and ordering of the language catalog."""

    def test_returns_seeded_languages(self, session):
        languages = list_languages(session)
        assert len(languages) == 15
        assert "EN" in {lang.code for lang in languages}

    def test_excludes_inactive(self, session):
        add_language(session, "XX", "Aaa Hidden", is_popular=True, is_active=False)

        languages = list_languages(session)

        assert "XX" not in {lang.code for lang in languages}
        assert all(lang.is_active for lang in languages)

    def test_popular_first_then_name(self, session):
        add_language(session, "ZU", "Zulu", is_popular=False)
        add_language(session, "AF", "Afrikaans", is_popular=False)

        languages = list_languages(session)
        flags = [lang.is_popular for lang in languages]
        popular = [lang.name for lang in languages if lang.is_popular]
        others = [lang.name for lang in languages if not lang.is_popular]

        # No popular language after a non-popular one
        assert flags == sorted(flags, reverse=True)
        assert popular == sorted(popular)
        assert others == ["Afrikaans", "Zulu"]


class TestListVocabulary:
    """Frequency ordering and the row cap."""

    def test_ordered_by_frequency_rank(self, session):
        ranks = [word.frequency_rank for word in list_vocabulary(session)]
        assert ranks == list(range(1, 11))

    def test_caps_rows(self, session):
        for rank in range(11, 41):
            add_word(session, f"Word {rank}", rank)

        words = list_vocabulary(session)

        assert len(words) == VOCABULARY_LIMIT
        ranks = [word.frequency_rank for word in words]
        assert all(a <= b for a, b in zip(ranks, ranks[1:]))
        assert ranks[-1] == 20


class TestSampleVocabulary:
    """Random sampling."""

    def test_sample_size_and_membership(self, session):
        for rank in range(11, 31):
            add_word(session, f"Word {rank}", rank)
        all_ids = {word.id for word in list_vocabulary(session)} | {
            word.id for word in search_vocabulary(session, "Word")
        }

        sample = sample_vocabulary(session)

        assert len(sample) == RANDOM_SAMPLE_SIZE
        assert len({word.id for word in sample}) == RANDOM_SAMPLE_SIZE
        assert {word.id for word in sample} <= all_ids

    def test_small_table_returns_everything(self, session):
        sample = sample_vocabulary(session)
        assert sorted(word.frequency_rank for word in sample) == list(range(1, 11))

    def test_empty_table(self, engine):
        with Session(engine) as session:
            assert list(sample_vocabulary(session)) == []


class TestSearchVocabulary:
    """Substring matching, validation and caps."""

    def test_case_insensitive_substring(self, session):
        results = search_vocabulary(session, "hello")
        assert [word.english_word for word in results] == ["Hello"]

        results = search_vocabulary(session, "WATER")
        assert [(word.english_word, word.frequency_rank) for word in results] == [("Water", 7)]

    def test_matches_inside_word_ordered_by_rank(self, session):
        results = search_vocabulary(session, "o")
        words = [word.english_word for word in results]
        assert words == ["Hello", "Thank you", "Goodbye", "No", "Food", "House"]
        assert all("o" in word.lower() for word in words)

    def test_no_match(self, session):
        assert list(search_vocabulary(session, "zebra")) == []

    def test_wildcards_are_literal(self, session):
        assert list(search_vocabulary(session, "%")) == []
        assert list(search_vocabulary(session, "_")) == []

        add_word(session, "100% sure", 50)
        assert [word.english_word for word in search_vocabulary(session, "%")] == ["100% sure"]

    def test_caps_rows(self, session):
        for rank in range(11, 41):
            add_word(session, f"Hello {rank}", rank)

        results = search_vocabulary(session, "hello")

        assert len(results) == SEARCH_LIMIT
        assert results[0].english_word == "Hello"

    @pytest.mark.parametrize("term", ["", None])
    def test_empty_term_is_rejected_without_query(self, term):
        session = MagicMock(spec=Session)

        with pytest.raises(ValidationError, match="'q' is required"):
            search_vocabulary(session, term)

        session.exec.assert_not_called()


class TestListLearningTips:
    """Featured ordering and the row cap."""

    def test_returns_seeded_tips(self, session):
        tips = list_learning_tips(session)
        assert len(tips) == 8
        assert all(tip.is_featured for tip in tips)

    def test_featured_first(self, session):
        add_tip(session, "Not featured", is_featured=False)

        tips = list_learning_tips(session)

        assert tips[-1].title == "Not featured"
        flags = [tip.is_featured for tip in tips]
        assert flags == sorted(flags, reverse=True)

    def test_caps_rows(self, session):
        for i in range(30):
            add_tip(session, f"Tip {i}", is_featured=False, tip_type="vocabulary")

        tips = list_learning_tips(session)

        assert len(tips) == LEARNING_TIPS_LIMIT
        assert sum(tip.is_featured for tip in tips) == 8

    def test_open_tip_type(self, session):
        add_tip(session, "Open tag", is_featured=True, tip_type="mnemonics")
        assert "mnemonics" in {tip.tip_type for tip in list_learning_tips(session)}

    def test_newest_first_within_featured_group(self, session):
        add_tip(session, "Older", is_featured=False, created_at=datetime(2020, 1, 1, tzinfo=timezone.utc))
        add_tip(session, "Newer", is_featured=False, created_at=datetime(2021, 6, 1, tzinfo=timezone.utc))

        tips = list_learning_tips(session)

        assert [tip.title for tip in tips[-2:]] == ["Newer", "Older"]

    def test_seeded_tips_newest_first(self, session):
        codes = [tip.language_code for tip in list_learning_tips(session)]
        assert codes == ["KO", "RU", "AR", "ZH", "JA", "DE", "FR", "ES"]


class TestStoreFailures:
    """Backend errors surface as StoreError naming the operation."""

    def test_missing_table(self, seeded_engine):
        SQLModel.metadata.tables["vocabulary_words"].drop(seeded_engine)

        with Session(seeded_engine) as session:
            with pytest.raises(StoreError) as exc_info:
                list_vocabulary(session)

        assert str(exc_info.value) == "Failed to fetch vocabulary"
        assert exc_info.value.operation == "fetch vocabulary"
        assert exc_info.value.__cause__ is not None
