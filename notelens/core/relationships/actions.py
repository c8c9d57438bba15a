"""Recurring action item detection."""

from datetime import datetime

from notelens.models import Insight, InsightType, Note, RelatedNote, strip_completion_marker
from notelens.utils import generate_insight_id, get_logger

logger = get_logger(__name__)


def normalize_action(item: str) -> str:
    """Normalize an action item for grouping: marker stripped, trimmed, lowercased."""
    return strip_completion_marker(item).strip().lower()


class RecurringActionEngine:
    """Engine for spotting the same action item across several notes."""

    def __init__(self, min_notes: int = 2):
        """
        Initialize recurring action engine.

        Args:
            min_notes: Distinct notes an action must appear in
        """
        self.min_notes = min_notes

    def group_actions(self, notes: list[Note]) -> dict[str, list[Note]]:
        """
        Group notes by normalized action item.

        Args:
            notes: Notes to scan

        Returns:
            Normalized action -> contributing notes, both in first-seen order
        """
        action_map: dict[str, list[Note]] = {}
        for note in notes:
            for item in note.action_items:
                action = normalize_action(item)
                if not action:
                    continue
                contributors = action_map.setdefault(action, [])
                if all(existing.id != note.id for existing in contributors):
                    contributors.append(note)
        return action_map

    def find(self, notes: list[Note], now: datetime) -> list[Insight]:
        """
        Find action items shared by multiple notes.

        Args:
            notes: Notes to scan
            now: Timestamp stamped on the generated insights

        Returns:
            One actionRequired insight per recurring action
        """
        if len(notes) < 2:
            return []

        insights = []
        for action, contributors in self.group_actions(notes).items():
            if len(contributors) < self.min_notes:
                continue
            insights.append(
                Insight(
                    id=generate_insight_id("action"),
                    title="Recurring Action Item",
                    description=f'"{action}" appears in multiple notes.',
                    related_notes=[
                        RelatedNote(note_id=note.id, note_title=note.title, relevance=1.0)
                        for note in contributors
                    ],
                    type=InsightType.ACTION_REQUIRED,
                    created_at=now,
                )
            )

        logger.debug(f"Recurring actions: {len(insights)}")
        return insights
