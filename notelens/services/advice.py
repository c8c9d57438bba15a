"""
Daily advice - a short, personalised nudge derived from the user's notes.

Advice is shown at most once per interval. The throttle decision is a
pure function of the current time and the last time advice was shown;
AdviceThrottle wires it to an injected clock and key-value store.
"""

import math
import random
from collections import Counter
from datetime import UTC, datetime, timedelta

from pydantic import BaseModel

from notelens.config import AdviceConfig
from notelens.core.kv_store import InMemoryKeyValueStore, JSONFileKeyValueStore, KeyValueStore
from notelens.models import Note, coerce_notes, is_completed_action
from notelens.utils import Clock, get_logger, utc_now

logger = get_logger(__name__)

LAST_ADVICE_KEY = "last_advice_time"

NO_NOTES_ADVICE = (
    "Start creating notes to get personalized advice on your thinking patterns and productivity."
)
FALLBACK_ADVICE = "Keep adding more details to your notes to receive more personalized advice."


class ActionItemStats(BaseModel):
    """Completion statistics over all action items."""

    total: int = 0
    completed: int = 0
    percentage: int = 0

    @property
    def open(self) -> int:
        """Action items not yet completed."""
        return self.total - self.completed


def get_top_categories(notes: list[Note], limit: int = 3) -> list[str]:
    """
    Most frequent categories across notes.

    Args:
        notes: Notes to scan
        limit: Number of categories to return

    Returns:
        Categories by descending frequency, ties in first-seen order
    """
    counts = Counter(category for note in notes for category in note.categories)
    return [category for category, _ in counts.most_common(limit)]


def get_action_item_stats(notes: list[Note]) -> ActionItemStats:
    """
    Count total and completed action items.

    Args:
        notes: Notes to scan

    Returns:
        Stats with the completion percentage rounded half up
    """
    total = 0
    completed = 0
    for note in notes:
        for item in note.action_items:
            total += 1
            if is_completed_action(item):
                completed += 1

    percentage = math.floor(completed / total * 100 + 0.5) if total else 0
    return ActionItemStats(total=total, completed=completed, percentage=percentage)


def advice_candidates(notes: list[Note], top_categories: int = 3) -> list[str]:
    """
    All pieces of advice that apply to a note collection.

    Args:
        notes: Notes to inspect
        top_categories: Categories named in the focus advice

    Returns:
        Applicable advice, in a fixed order
    """
    stats = get_action_item_stats(notes)
    categories = get_top_categories(notes, top_categories)
    candidates = []

    if stats.total and stats.percentage < 30:
        candidates.append(
            f"You have {stats.open} open action items. "
            "Consider focusing on completing existing tasks before adding new ones."
        )
    if stats.total and stats.percentage > 70:
        candidates.append(
            f"Great job completing {stats.completed} out of {stats.total} action items! "
            "You're making excellent progress."
        )
    if len(notes) < 5:
        candidates.append(
            "You're just getting started! "
            "Try to add more notes to build connections between your ideas."
        )
    if len(notes) > 20:
        candidates.append(
            "You have a substantial collection of notes. "
            "Consider organizing them into projects or themes."
        )
    if categories:
        candidates.append(
            f"You're focusing most on {', '.join(categories)}. "
            "Consider how these areas connect to your larger goals."
        )
    if len(notes) > 5 and any(note.keywords for note in notes):
        candidates.append(
            "Try connecting related ideas across different notes to discover new insights."
        )

    return candidates


def generate_advice(
    notes: list[Note], rng: random.Random | None = None, top_categories: int = 3
) -> str:
    """
    Pick one piece of personalised advice.

    Args:
        notes: Notes to base the advice on
        rng: Random source used to choose among applicable advice
        top_categories: Categories named in the focus advice

    Returns:
        Advice text

    Raises:
        ValidationError: If notes is not a well-formed note collection
    """
    notes = coerce_notes(notes)
    if not notes:
        return NO_NOTES_ADVICE

    candidates = advice_candidates(notes, top_categories)
    if not candidates:
        return FALLBACK_ADVICE

    return (rng or random.Random()).choice(candidates)


def should_show_advice(
    now: datetime, last_shown_at: datetime | None, interval: timedelta = timedelta(hours=24)
) -> bool:
    """
    Decide whether advice is due.

    Args:
        now: Current time
        last_shown_at: When advice was last shown, None if never
        interval: Minimum time between two pieces of advice

    Returns:
        True if advice was never shown or the interval has elapsed
    """
    if last_shown_at is None:
        return True
    return now - last_shown_at >= interval


class AdviceThrottle:
    """Once-per-interval gate backed by a key-value store."""

    def __init__(
        self,
        store: KeyValueStore,
        clock: Clock | None = None,
        interval_hours: float = 24.0,
        key: str = LAST_ADVICE_KEY,
    ):
        """
        Initialize advice throttle.

        Args:
            store: Where the last-shown timestamp is kept
            clock: Source of the current time (UTC now by default)
            interval_hours: Minimum hours between two pieces of advice
            key: Store key holding the timestamp
        """
        self.store = store
        self.key = key
        self.clock = clock or utc_now
        self.interval = timedelta(hours=interval_hours)

    def last_shown_at(self) -> datetime | None:
        """Timestamp of the last advice, None if never shown or unreadable."""
        raw = self.store.get(self.key)
        if raw is None:
            return None
        try:
            value = datetime.fromisoformat(raw)
        except ValueError:
            logger.warning(f"Ignoring malformed {self.key}: {raw!r}")
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value

    def check(self) -> bool:
        """
        Decide whether advice is due, recording the time when it is.

        Returns:
            True if advice should be shown now
        """
        now = self.clock()
        if not should_show_advice(now, self.last_shown_at(), self.interval):
            return False
        self.store.set(self.key, now.isoformat())
        return True

    def reset(self) -> None:
        """Forget when advice was last shown."""
        self.store.delete(self.key)


class AdviceService:
    """
    Produces at most one piece of advice per interval and user.

    Each user's last-shown time lives under its own store key, so one
    user receiving advice never withholds it from another.
    """

    def __init__(
        self,
        config: AdviceConfig | None = None,
        store: KeyValueStore | None = None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize advice service.

        Args:
            config: Advice configuration (defaults if not provided)
            store: Throttle state store; derived from config.state_path if not provided
            clock: Source of the current time
            rng: Random source for choosing advice
        """
        self.config = config or AdviceConfig()
        if store is None:
            if self.config.state_path:
                store = JSONFileKeyValueStore(self.config.state_path)
            else:
                store = InMemoryKeyValueStore()
        self.store = store
        self.clock = clock
        self.throttle = self.throttle_for()
        self.rng = rng or random.Random()

    def throttle_for(self, user_id: str | None = None) -> AdviceThrottle:
        """
        Throttle for one user.

        Args:
            user_id: Owner of the notes; None selects the shared throttle

        Returns:
            Throttle keyed as "last_advice_time:{user_id}", or
            "last_advice_time" without a user
        """
        key = f"{LAST_ADVICE_KEY}:{user_id}" if user_id else LAST_ADVICE_KEY
        return AdviceThrottle(
            self.store, clock=self.clock, interval_hours=self.config.interval_hours, key=key
        )

    def daily_advice(self, notes: list[Note], user_id: str | None = None) -> str | None:
        """
        Advice for today, if any is due.

        Args:
            notes: The user's notes
            user_id: Whose throttle to consult; when omitted, the owner
                shared by all notes is used, if there is exactly one

        Returns:
            Advice text, or None when there are no notes or advice was
            already shown to this user within the interval
        """
        notes = coerce_notes(notes)
        if not notes:
            return None

        if user_id is None:
            owners = {note.user_id for note in notes if note.user_id}
            if len(owners) == 1:
                user_id = owners.pop()

        if not self.throttle_for(user_id).check():
            return None
        advice = generate_advice(notes, rng=self.rng, top_categories=self.config.top_categories)
        logger.debug(f"Advice issued for {user_id or 'anonymous user'}")
        return advice
