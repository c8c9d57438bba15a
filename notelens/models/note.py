"""
Note model for structured voice notes.

Notes are produced upstream (transcription + AI summarization) and
persisted by the hosted note store. NoteLens only reads them: every
analysis run receives a list of notes and never modifies it.
"""

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from notelens.utils.exceptions import ValidationError

COMPLETION_MARKER = "✓ "


def is_completed_action(item: str) -> bool:
    """Check whether an action item carries the completion marker."""
    return item.startswith(COMPLETION_MARKER)


def strip_completion_marker(item: str) -> str:
    """Remove the completion marker from an action item, if present."""
    if item.startswith(COMPLETION_MARKER):
        return item[len(COMPLETION_MARKER) :]
    return item


class Note(BaseModel):
    """
    A transcribed and summarized voice note.

    Field aliases follow the camelCase names used by the UI; the
    snake_case names used by the note store are accepted as well.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_encoders={datetime: lambda v: v.isoformat()},
    )

    # Core identity
    id: str = Field(..., min_length=1, description="Unique note ID")
    user_id: str | None = Field(default=None, description="Owner user ID")

    # Content
    title: str = Field(default="", description="Short AI-generated title")
    content: str = Field(default="", description="Full transcription text")
    summary: str = Field(default="", description="AI-generated summary")

    # Labels
    categories: list[str] = Field(default_factory=list, description="Category labels")
    keywords: list[str] = Field(default_factory=list, description="Keyword labels")
    action_items: list[str] = Field(
        default_factory=list,
        alias="actionItems",
        description="Action items; completed ones start with the completion marker",
    )

    # Timestamps
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")
    updated_at: datetime | None = Field(
        default=None, alias="updatedAt", description="Last update timestamp"
    )

    @field_validator("title", "content", "summary", mode="before")
    @classmethod
    def _none_to_empty_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("categories", "keywords", "action_items", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("created_at", "updated_at")
    @classmethod
    def _ensure_aware(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Note":
        """
        Build a note from a raw note-store row.

        Accepts both store columns (action_items, created_at) and UI
        field names (actionItems, createdAt). Timestamps may be ISO-8601
        strings.

        Args:
            record: Row or JSON object describing a note

        Returns:
            Note instance

        Raises:
            ValidationError: If required fields are missing or malformed
        """
        try:
            return cls.model_validate(dict(record))
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid note record: {e.error_count()} error(s)",
                context={"id": record.get("id"), "errors": e.errors(include_url=False)},
            ) from e

    @property
    def open_action_items(self) -> list[str]:
        """Action items that are not yet completed."""
        return [item for item in self.action_items if not is_completed_action(item)]

    @property
    def completed_action_items(self) -> list[str]:
        """Completed action items, marker stripped."""
        return [
            strip_completion_marker(item) for item in self.action_items if is_completed_action(item)
        ]


def coerce_notes(notes: Any) -> list[Note]:
    """
    Validate analysis input and return it as a list of notes.

    Accepts a list or tuple whose entries are Note instances or mappings
    accepted by Note.from_record.

    Args:
        notes: Candidate note collection

    Returns:
        List of notes in input order

    Raises:
        ValidationError: If the collection or any entry is malformed,
            or if two notes share an ID
    """
    if notes is None or isinstance(notes, (str, bytes, Mapping)) or not isinstance(notes, Sequence):
        raise ValidationError(
            "Notes must be a list of notes",
            context={"received": type(notes).__name__},
        )

    result: list[Note] = []
    seen: set[str] = set()
    for index, entry in enumerate(notes):
        if isinstance(entry, Note):
            note = entry
        elif isinstance(entry, Mapping):
            note = Note.from_record(entry)
        else:
            raise ValidationError(
                f"Entry {index} is not a note",
                context={"index": index, "received": type(entry).__name__},
            )

        if note.id in seen:
            raise ValidationError(f"Duplicate note ID: {note.id}", context={"id": note.id})
        seen.add(note.id)
        result.append(note)

    return result
