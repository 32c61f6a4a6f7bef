"""Tests for strongly-typed entity ids."""

import pytest

from flashcards.domain.common.value_objects import FlashcardId, StackId, StudySessionId


class TestEntityIds:
    def test_ids_of_different_entities_never_compare_equal(self) -> None:
        assert StackId(42) != FlashcardId(42)
        assert FlashcardId(42) != StudySessionId(42)

    def test_same_id_is_equal_and_hashable(self) -> None:
        assert StackId(3) == StackId(3)
        assert {StackId(3): "a"}[StackId(3)] == "a"

    def test_negative_id_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="StackId must be non-negative"):
            StackId(-1)

    def test_generate_returns_placeholder(self) -> None:
        assert FlashcardId.generate().value == 0

    def test_conversions(self) -> None:
        study_session_id = StudySessionId(7)

        assert int(study_session_id) == 7
        assert str(study_session_id) == "7"
        assert study_session_id.to_primitive() == 7
