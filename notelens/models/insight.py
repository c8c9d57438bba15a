"""Insight models produced by the insight engine."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class InsightType(str, Enum):
    """Kinds of insight derived from a note collection."""

    THEME = "theme"
    CONNECTION = "connection"
    TREND = "trend"
    ACTION_REQUIRED = "actionRequired"


class RelatedNote(BaseModel):
    """A note referenced by an insight."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    note_id: str = Field(..., alias="noteId")
    note_title: str = Field(default="", alias="noteTitle")
    relevance: float = Field(..., ge=0.0, le=1.0)


class Insight(BaseModel):
    """
    A derived observation linking two or more notes.

    Insights are regenerated on every analysis run and never persisted.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_encoders={datetime: lambda v: v.isoformat()},
    )

    id: str
    title: str
    description: str
    related_notes: list[RelatedNote] = Field(default_factory=list, alias="relatedNotes")
    type: InsightType
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), alias="createdAt")

    @property
    def average_relevance(self) -> float:
        """Mean relevance of the related notes (0.0 when there are none)."""
        if not self.related_notes:
            return 0.0
        return sum(n.relevance for n in self.related_notes) / len(self.related_notes)

    @property
    def note_ids(self) -> list[str]:
        """IDs of the related notes, in order."""
        return [n.note_id for n in self.related_notes]
