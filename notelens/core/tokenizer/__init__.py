"""
Tokenizer module for lexical note comparison.

Extracts significant words from note text and builds per-note token
lists used by the similarity engine.
"""

from notelens.core.tokenizer.tokenizer import (
    STOP_WORDS,
    extract_significant_words,
    note_tokens,
)

__all__ = ["STOP_WORDS", "extract_significant_words", "note_tokens"]
