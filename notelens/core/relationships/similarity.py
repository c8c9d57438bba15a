"""Lexical similarity between notes."""

from notelens.core.tokenizer import note_tokens
from notelens.models import Note


class SimilarityEngine:
    """
    Jaccard-style similarity over note tokens.

    Tokens are the significant words of title, content and summary plus
    the raw keywords and categories of each note.

    By default the numerator is the true set intersection, so the score
    is symmetric. With exact_parity enabled the numerator counts every
    token of the first note (duplicates included) found in the second
    note, matching the legacy client below 1.0; that score depends on
    argument order.
    """

    def __init__(self, exact_parity: bool = False):
        """
        Initialize similarity engine.

        Args:
            exact_parity: Reproduce legacy duplicate-sensitive counting
        """
        self.exact_parity = exact_parity

    def score_tokens(self, tokens_a: list[str], tokens_b: list[str]) -> float:
        """
        Score two token lists.

        Args:
            tokens_a: Tokens of the first note
            tokens_b: Tokens of the second note

        Returns:
            Similarity in [0, 1]; 0.0 when both lists are empty
        """
        set_b = set(tokens_b)
        union = set(tokens_a) | set_b
        if not union:
            return 0.0

        if self.exact_parity:
            common = sum(1 for token in tokens_a if token in set_b)
        else:
            common = len(set(tokens_a) & set_b)

        return min(common / len(union), 1.0)

    def score(self, note_a: Note, note_b: Note) -> float:
        """
        Score two notes.

        Args:
            note_a: First note
            note_b: Second note

        Returns:
            Similarity in [0, 1]
        """
        return self.score_tokens(note_tokens(note_a), note_tokens(note_b))
