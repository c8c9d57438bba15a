"""
Word extraction for lexical note comparison.

Splits free text into significant lowercase words and builds the token
list a note contributes to similarity scoring.
"""

import re

from notelens.models import Note

STOP_WORDS = frozenset({"this", "that", "with", "from", "have", "there", "they", "their", "about"})
MIN_WORD_LENGTH = 4

# ASCII word characters, matching the legacy client tokenizer
_SPLIT_PATTERN = re.compile(r"[^a-z0-9_]+")


def extract_significant_words(text: str | None) -> list[str]:
    """
    Extract unique significant words from text.

    Lowercases the text, splits on non-word runs and drops short words
    (three characters or fewer) and stop words.

    Args:
        text: Free text

    Returns:
        Unique words in first-seen order
    """
    if not text:
        return []

    words = []
    seen = set()
    for word in _SPLIT_PATTERN.split(text.lower()):
        if len(word) < MIN_WORD_LENGTH or word in STOP_WORDS or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def note_tokens(note: Note) -> list[str]:
    """
    Build the token list a note contributes to similarity scoring.

    Title, content and summary are extracted separately, so a word can
    appear once per field. Keywords and categories are appended as-is.

    Args:
        note: Note to tokenize

    Returns:
        Token list, possibly with duplicates
    """
    return [
        *extract_significant_words(note.title),
        *extract_significant_words(note.content),
        *extract_significant_words(note.summary),
        *note.keywords,
        *note.categories,
    ]
