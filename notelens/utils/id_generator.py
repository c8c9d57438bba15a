"""
ID generation utilities for NoteLens.

- Insights: {kind}_xxx (unique within and across analysis runs)
- Edges: edge-{source}-{target}
"""

from uuid import uuid4


def generate_insight_id(kind: str) -> str:
    """
    Generate unique Insight ID.

    Args:
        kind: Insight family prefix, e.g. "connection" or "trend"

    Returns:
        ID in format "{kind}_xxx" where xxx is 12 hex characters
    """
    return f"{kind}_{uuid4().hex[:12]}"


def generate_edge_id(source_id: str, target_id: str) -> str:
    """
    Generate deterministic mind-map edge ID.

    Args:
        source_id: Source node ID
        target_id: Target node ID

    Returns:
        ID in format "edge-{source}-{target}"
    """
    return f"edge-{source_id}-{target_id}"
