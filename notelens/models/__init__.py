"""
Data models for NoteLens.

- Note: structured voice note (input, read-only)
- Insight, RelatedNote, InsightType: insight engine output
- MindMapNode, MindMapEdge, MindMapGraph: mind map layout output
"""

from notelens.models.insight import Insight, InsightType, RelatedNote
from notelens.models.mindmap import (
    EdgeRelationship,
    MindMapEdge,
    MindMapGraph,
    MindMapNode,
    MindMapNodeType,
    Position,
)
from notelens.models.note import (
    COMPLETION_MARKER,
    Note,
    coerce_notes,
    is_completed_action,
    strip_completion_marker,
)

__all__ = [
    # Note models
    "Note",
    "COMPLETION_MARKER",
    "coerce_notes",
    "is_completed_action",
    "strip_completion_marker",
    # Insight models
    "Insight",
    "InsightType",
    "RelatedNote",
    # Mind map models
    "MindMapNode",
    "MindMapNodeType",
    "MindMapEdge",
    "MindMapGraph",
    "EdgeRelationship",
    "Position",
]
