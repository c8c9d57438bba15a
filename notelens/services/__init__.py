"""
Services for NoteLens.

High-level entry points:
- InsightEngine: thematic, action and trend insights over a note collection
- AdviceService: throttled daily advice
"""

from notelens.services.advice import (
    FALLBACK_ADVICE,
    NO_NOTES_ADVICE,
    ActionItemStats,
    AdviceService,
    AdviceThrottle,
    advice_candidates,
    generate_advice,
    get_action_item_stats,
    get_top_categories,
    should_show_advice,
)
from notelens.services.insight_engine import (
    InsightEngine,
    analyze_notes,
    filter_insights,
    rank_insights,
)

__all__ = [
    "InsightEngine",
    "analyze_notes",
    "filter_insights",
    "rank_insights",
    "AdviceService",
    "AdviceThrottle",
    "ActionItemStats",
    "FALLBACK_ADVICE",
    "NO_NOTES_ADVICE",
    "advice_candidates",
    "generate_advice",
    "get_action_item_stats",
    "get_top_categories",
    "should_show_advice",
]
