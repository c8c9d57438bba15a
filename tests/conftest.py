"""Shared fixtures for NoteLens tests.

Notes are built with a fixed analysis time so recency checks are
deterministic.
"""

from datetime import UTC, datetime, timedelta

import pytest

from notelens.models import Note

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)


def build_note(note_id: str, days_ago: float = 1, **fields) -> Note:
    """Create a note created `days_ago` days before NOW."""
    fields.setdefault("title", f"Note {note_id}")
    return Note(id=note_id, created_at=NOW - timedelta(days=days_ago), **fields)


@pytest.fixture
def now() -> datetime:
    """Fixed analysis time."""
    return NOW


@pytest.fixture
def make_note():
    """Factory for notes relative to the fixed analysis time."""
    return build_note


@pytest.fixture
def goal_notes() -> list[Note]:
    """Two fitness notes sharing a category, a keyword and an action item."""
    return [
        build_note(
            "1",
            title="Fitness goals",
            content="I want to run a 5k this spring",
            categories=["Goals"],
            keywords=["fitness"],
            action_items=["Run 5k"],
        ),
        build_note(
            "2",
            title="Diet and fitness",
            content="Meals to support my goals",
            categories=["Goals"],
            keywords=["fitness", "diet"],
            action_items=["Run 5k"],
        ),
    ]
