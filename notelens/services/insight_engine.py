"""
Insight engine - derives insights from a note collection.

For every analysis run this engine:
1. Links notes with similar themes (connection insights)
2. Spots action items repeated across notes (actionRequired insights)
3. Detects categories trending in the recent past (trend insights)

and orders the combined result by average relevance.
"""

from collections.abc import Iterable
from datetime import UTC, datetime

from notelens.config import Config
from notelens.core.relationships import (
    RecurringActionEngine,
    SimilarityEngine,
    TemporalTrendEngine,
    ThematicConnectionEngine,
)
from notelens.models import Insight, InsightType, Note, coerce_notes
from notelens.utils import Clock, ValidationError, get_logger, utc_now

logger = get_logger(__name__)


def rank_insights(insights: Iterable[Insight]) -> list[Insight]:
    """
    Order insights by descending average relevance.

    The sort is stable: insights with equal relevance keep their
    incoming order.
    """
    return sorted(insights, key=lambda insight: insight.average_relevance, reverse=True)


def filter_insights(
    insights: Iterable[Insight], insight_type: InsightType | str | None
) -> list[Insight]:
    """
    Keep the insights of one type, preserving order.

    Args:
        insights: Ranked insights
        insight_type: Type to keep; None keeps everything

    Returns:
        Filtered insights

    Raises:
        ValidationError: If insight_type is not a known type
    """
    if insight_type is None:
        return list(insights)
    try:
        wanted = InsightType(insight_type)
    except ValueError as e:
        raise ValidationError(
            f"Unknown insight type: {insight_type}", context={"type": str(insight_type)}
        ) from e
    return [insight for insight in insights if insight.type == wanted]


class InsightEngine:
    """
    Unified interface for note analysis.

    Pure with respect to its input: notes are never modified and every
    call builds fresh insights.
    """

    def __init__(self, config: Config | None = None, clock: Clock | None = None):
        """
        Initialize insight engine.

        Args:
            config: System configuration (defaults if not provided)
            clock: Source of the analysis time (UTC now by default)
        """
        self.config = config or Config()
        self.clock = clock or utc_now

        insight_config = self.config.insights
        self.similarity_engine = SimilarityEngine(
            exact_parity=self.config.similarity.exact_parity,
        )
        self.thematic_engine = ThematicConnectionEngine(
            similarity=self.similarity_engine,
            threshold=insight_config.connection_threshold,
        )
        self.action_engine = RecurringActionEngine(
            min_notes=insight_config.min_action_notes,
        )
        self.temporal_engine = TemporalTrendEngine(
            min_notes=insight_config.trend_min_notes,
            min_count=insight_config.trend_min_count,
            min_recent=insight_config.trend_min_recent,
            recent_window_days=insight_config.recent_window_days,
            max_related=insight_config.trend_max_related,
            relevance=insight_config.trend_relevance,
        )

    def analyze(self, notes: list[Note], now: datetime | None = None) -> list[Insight]:
        """
        Derive insights from a note collection.

        Args:
            notes: Notes to analyze
            now: Analysis time (defaults to the engine clock)

        Returns:
            Insights ordered by descending average relevance; empty when
            fewer than two notes are given

        Raises:
            ValidationError: If notes is not a well-formed note collection
        """
        notes = coerce_notes(notes)
        if len(notes) < 2:
            return []

        if now is None:
            now = self.clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)

        thematic = self.thematic_engine.find(notes, now)
        actions = self.action_engine.find(notes, now)
        trends = self.temporal_engine.find(notes, now)

        insights = rank_insights([*thematic, *actions, *trends])

        logger.info(
            f"Analyzed {len(notes)} notes: {len(thematic)} connections, "
            f"{len(actions)} recurring actions, {len(trends)} trends"
        )
        return insights

    def similarity(self, note_a: Note, note_b: Note) -> float:
        """Similarity score between two notes."""
        return self.similarity_engine.score(note_a, note_b)


def analyze_notes(
    notes: list[Note], now: datetime | None = None, config: Config | None = None
) -> list[Insight]:
    """
    Derive insights with a one-off engine.

    Args:
        notes: Notes to analyze
        now: Analysis time (defaults to UTC now)
        config: Optional configuration

    Returns:
        Ranked insights
    """
    return InsightEngine(config).analyze(notes, now=now)
