"""Unit tests for quiz title normalization."""

import pytest

from kidquiz.modules.analytics.normalizer import (
    infer_difficulty,
    infer_subject,
    infer_topic,
    normalize_title,
)


class TestInferDifficulty:
    """Tests for difficulty inference."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("Beginner Math: Counting", "beginner"),
            ("INTERMEDIATE science quiz", "intermediate"),
            ("Advanced History: Rome", "advanced"),
            ("Math: Shapes", "beginner"),
        ],
    )
    def test_infer_difficulty(self, title, expected):
        """Test difficulty keywords and the beginner default."""
        assert infer_difficulty(title) == expected

    def test_priority_order(self):
        """Test that beginner wins over later keywords."""
        assert infer_difficulty("Advanced beginner math") == "beginner"
        assert infer_difficulty("Advanced intermediate math") == "intermediate"


class TestInferSubject:
    """Tests for subject inference."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("Beginner Math: Counting", "math"),
            ("Science: Plants", "science"),
            ("english spelling", "english"),
            ("Ancient HISTORY", "history"),
            ("Geography: Rivers", "geography"),
            ("Fun Puzzles", "general"),
        ],
    )
    def test_infer_subject(self, title, expected):
        """Test subject keywords and the general default."""
        assert infer_subject(title) == expected

    def test_priority_order(self):
        """Test that math wins when several subjects are mentioned."""
        assert infer_subject("History of Math") == "math"

    def test_substring_match(self):
        """Test that subjects match inside longer words."""
        assert infer_subject("Mathematics Challenge") == "math"


class TestInferTopic:
    """Tests for topic extraction."""

    def test_topic_after_colon(self):
        """Test that the text after the first colon is the topic."""
        assert infer_topic("Beginner Math:  Plus and Minus ") == "Plus and Minus"

    def test_only_first_colon_splits(self):
        """Test that later colons stay in the topic."""
        assert infer_topic("Math: Time: Hours") == "Time: Hours"

    def test_strip_keywords_without_colon(self):
        """Test that keywords are removed when there is no colon."""
        assert infer_topic("Intermediate Science Volcanoes Quiz") == "Volcanoes"

    def test_keywords_removed_case_insensitively(self):
        """Test removal ignores case."""
        assert infer_topic("ADVANCED geography QUIZ Rivers") == "Rivers"

    def test_keywords_removed_in_order(self):
        """Test that removing one keyword can expose another that is then removed."""
        assert infer_topic("hisBeginnertory") == "General"
        assert infer_topic("MaQuizth Shapes") == "Math Shapes"

    def test_empty_remainder_defaults_to_general(self):
        """Test that a title made only of keywords yields General."""
        assert infer_topic("Beginner Math Quiz") == "General"
        assert infer_topic("") == "General"


class TestNormalizeTitle:
    """Tests for full title normalization."""

    def test_structured_title(self):
        """Test the canonical title format."""
        metadata = normalize_title("Beginner Math: Plus and Minus")

        assert metadata.difficulty == "beginner"
        assert metadata.subject == "math"
        assert metadata.topic == "Plus and Minus"

    def test_unstructured_title(self):
        """Test a title with no recognizable keywords."""
        metadata = normalize_title("Animal Sounds")

        assert metadata == ("general", "beginner", "Animal Sounds")
