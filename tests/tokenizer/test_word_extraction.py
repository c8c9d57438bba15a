"""
Tests for word extraction.

Tests cover:
1. Lowercasing and splitting on non-word runs
2. Short-word and stop-word filtering
3. Uniqueness and ordering
4. Per-note token lists
"""

from notelens.core.tokenizer import STOP_WORDS, extract_significant_words, note_tokens


class TestExtractSignificantWords:
    """Tests for extract_significant_words."""

    def test_basic_extraction(self):
        """Test lowercasing, splitting and filtering."""
        text = "This is a test of the Tokenizer, with some-hyphenated words!"

        words = extract_significant_words(text)

        assert words == ["test", "tokenizer", "some", "hyphenated", "words"]

    def test_empty_text(self):
        """Test empty and missing text."""
        assert extract_significant_words("") == []
        assert extract_significant_words(None) == []

    def test_short_words_dropped(self):
        """Test words of three characters or fewer are dropped."""
        assert extract_significant_words("a an the run 5k plan") == ["plan"]

    def test_stop_words_dropped(self):
        """Test the stop-word set is filtered out."""
        assert extract_significant_words("there their about they have from") == []
        assert "they" in STOP_WORDS

    def test_unique_in_first_seen_order(self):
        """Test duplicates collapse to the first occurrence."""
        assert extract_significant_words("Notes notes NOTES about ideas, notes") == [
            "notes",
            "ideas",
        ]

    def test_underscores_and_digits_are_word_characters(self):
        """Test snake_case and numbers stay intact."""
        assert extract_significant_words("snake_case_word 2024 roadmap") == [
            "snake_case_word",
            "2024",
            "roadmap",
        ]

    def test_non_ascii_letters_split_words(self):
        """Test accented letters act as separators."""
        assert extract_significant_words("café culture") == ["culture"]


class TestNoteTokens:
    """Tests for note_tokens."""

    def test_field_order(self, make_note):
        """Test title, content, summary, keywords, categories order."""
        note = make_note(
            "n1",
            title="Morning routine",
            content="Stretching daily",
            summary="Habits summary",
            keywords=["Health Habits"],
            categories=["Wellbeing"],
        )

        assert note_tokens(note) == [
            "morning",
            "routine",
            "stretching",
            "daily",
            "habits",
            "summary",
            "Health Habits",
            "Wellbeing",
        ]

    def test_duplicates_across_fields_kept(self, make_note):
        """Test a word repeated in title and content appears twice."""
        note = make_note("n1", title="Garden", content="garden beds")

        assert note_tokens(note) == ["garden", "garden", "beds"]

    def test_labels_not_retokenized(self, make_note):
        """Test keywords and categories are appended verbatim."""
        note = make_note("n1", title="", keywords=["AI", "Machine Learning"], categories=["Work"])

        assert note_tokens(note) == ["AI", "Machine Learning", "Work"]
