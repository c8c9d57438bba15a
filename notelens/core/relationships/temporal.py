"""Temporal trend detection over note categories."""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from notelens.models import Insight, InsightType, Note, RelatedNote
from notelens.utils import generate_insight_id, get_logger

logger = get_logger(__name__)


class CategoryActivity(BaseModel):
    """Occurrence counts of one category."""

    count: int = 0
    recent_count: int = 0
    notes: list[Note] = Field(default_factory=list)


class TemporalTrendEngine:
    """
    Engine for detecting categories the user keeps coming back to.

    A category is trending when it occurs often overall and several of
    those occurrences fall inside the recency window.
    """

    def __init__(
        self,
        min_notes: int = 3,
        min_count: int = 3,
        min_recent: int = 2,
        recent_window_days: int = 30,
        max_related: int = 5,
        relevance: float = 0.8,
    ):
        """
        Initialize temporal trend engine.

        Args:
            min_notes: Notes required before trends are considered
            min_count: Total category occurrences required
            min_recent: Occurrences inside the recency window required
            recent_window_days: Size of the recency window
            max_related: Notes listed per trend
            relevance: Relevance assigned to every listed note
        """
        self.min_notes = min_notes
        self.min_count = min_count
        self.min_recent = min_recent
        self.recent_window = timedelta(days=recent_window_days)
        self.max_related = max_related
        self.relevance = relevance

    def is_recent(self, note: Note, now: datetime) -> bool:
        """Check whether a note falls inside the recency window."""
        return now - note.created_at < self.recent_window

    def category_activity(self, notes: list[Note], now: datetime) -> dict[str, CategoryActivity]:
        """
        Count category occurrences, visiting notes chronologically.

        Args:
            notes: Notes to scan
            now: Analysis time

        Returns:
            Category -> activity, in first-seen order
        """
        activity: dict[str, CategoryActivity] = {}
        for note in sorted(notes, key=lambda n: n.created_at):
            recent = self.is_recent(note, now)
            for category in note.categories:
                entry = activity.setdefault(category, CategoryActivity())
                entry.count += 1
                if recent:
                    entry.recent_count += 1
                if all(existing.id != note.id for existing in entry.notes):
                    entry.notes.append(note)
        return activity

    def find(self, notes: list[Note], now: datetime) -> list[Insight]:
        """
        Find trending categories.

        Args:
            notes: Notes to scan
            now: Analysis time, also stamped on the insights

        Returns:
            One trend insight per trending category
        """
        if len(notes) < self.min_notes:
            return []

        insights = []
        for category, entry in self.category_activity(notes, now).items():
            if entry.count < self.min_count or entry.recent_count < self.min_recent:
                continue
            insights.append(
                Insight(
                    id=generate_insight_id("trend"),
                    title=f"Trending Topic: {category}",
                    description=f"You've been writing more about {category} recently.",
                    related_notes=[
                        RelatedNote(note_id=note.id, note_title=note.title, relevance=self.relevance)
                        for note in entry.notes[: self.max_related]
                    ],
                    type=InsightType.TREND,
                    created_at=now,
                )
            )

        logger.debug(f"Temporal trends: {len(insights)}")
        return insights
