"""Thematic connection detection between pairs of notes."""

from datetime import datetime

from notelens.core.relationships.similarity import SimilarityEngine
from notelens.core.tokenizer import note_tokens
from notelens.models import Insight, InsightType, Note, RelatedNote
from notelens.utils import generate_insight_id, get_logger

logger = get_logger(__name__)


def pair_key(id_a: str, id_b: str) -> str:
    """Display key for an unordered pair of note IDs. Not unique for IDs containing "-"."""
    return "-".join(sorted([id_a, id_b]))


def shared_labels(labels_a: list[str], labels_b: list[str]) -> list[str]:
    """Labels of the first list also present in the second, in first-list order."""
    present = set(labels_b)
    return [label for label in labels_a if label in present]


class ThematicConnectionEngine:
    """
    Engine for linking notes that talk about the same things.

    Every unordered pair of notes whose similarity exceeds the threshold
    becomes one connection insight.
    """

    def __init__(self, similarity: SimilarityEngine | None = None, threshold: float = 0.2):
        """
        Initialize thematic connection engine.

        Args:
            similarity: Similarity scorer (set-intersection scorer by default)
            threshold: Similarity a pair must exceed to be connected
        """
        self.similarity = similarity or SimilarityEngine()
        self.threshold = threshold

    def find(self, notes: list[Note], now: datetime) -> list[Insight]:
        """
        Find thematic connections.

        Args:
            notes: Notes to compare
            now: Timestamp stamped on the generated insights

        Returns:
            Connection insights in pair iteration order
        """
        if len(notes) < 2:
            return []

        tokens = [note_tokens(note) for note in notes]
        insights: list[Insight] = []
        processed_pairs: set[tuple[str, str]] = set()

        for i, note_a in enumerate(notes):
            for j in range(i + 1, len(notes)):
                note_b = notes[j]
                score = self.similarity.score_tokens(tokens[i], tokens[j])
                if score <= self.threshold:
                    continue

                key = tuple(sorted((note_a.id, note_b.id)))
                if key in processed_pairs:
                    continue
                processed_pairs.add(key)

                insights.append(self._build_insight(note_a, note_b, score, now))
                logger.debug(f"Connected {pair_key(note_a.id, note_b.id)} at {score:.2f}")

        logger.debug(f"Thematic connections: {len(insights)} from {len(notes)} notes")
        return insights

    def _build_insight(self, note_a: Note, note_b: Note, score: float, now: datetime) -> Insight:
        common_keywords = shared_labels(note_a.keywords, note_b.keywords)
        common_categories = shared_labels(note_a.categories, note_b.categories)

        if common_categories:
            title = f"Related {common_categories[0]} Notes"
        elif common_keywords:
            title = f"Notes about {' & '.join(common_keywords[:2])}"
        else:
            title = "Thematic Connection"

        if common_keywords:
            description = f"These notes share similar themes around {', '.join(common_keywords[:3])}."
        else:
            description = "These notes share similar themes."

        return Insight(
            id=generate_insight_id("connection"),
            title=title,
            description=description,
            related_notes=[
                RelatedNote(note_id=note_a.id, note_title=note_a.title, relevance=score),
                RelatedNote(note_id=note_b.id, note_title=note_b.title, relevance=score),
            ],
            type=InsightType.CONNECTION,
            created_at=now,
        )
