"""Note relationship inference engines."""

from .actions import RecurringActionEngine, normalize_action
from .similarity import SimilarityEngine
from .temporal import TemporalTrendEngine
from .thematic import ThematicConnectionEngine, pair_key

__all__ = [
    "SimilarityEngine",
    "ThematicConnectionEngine",
    "RecurringActionEngine",
    "TemporalTrendEngine",
    "normalize_action",
    "pair_key",
]
