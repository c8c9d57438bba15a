"""
Radial mind map layout.

Turns a note collection into a node/edge graph: a center node, rings of
the most frequent categories, keywords and open action items, the notes
of each category clustered beyond it, and cross-links between notes
that share keywords. Coordinates are pure geometry; no simulation.
"""

import math
import re
from collections import Counter

from notelens.config import MindMapConfig
from notelens.core.relationships.thematic import shared_labels
from notelens.models import (
    EdgeRelationship,
    MindMapEdge,
    MindMapGraph,
    MindMapNode,
    MindMapNodeType,
    Note,
    Position,
    coerce_notes,
    is_completed_action,
    strip_completion_marker,
)
from notelens.utils import generate_edge_id, get_logger

logger = get_logger(__name__)

CENTER_ID = "center"

CATEGORY_STYLE = {"stroke": "#8b5cf6"}
KEYWORD_STYLE = {"stroke": "#6366f1"}
ACTION_STYLE = {"stroke": "#ec4899"}
NOTE_STYLE = {"stroke": "#f59e0b"}
SHARED_KEYWORD_STYLE = {"stroke": "#94a3b8", "strokeDasharray": "5,5"}


def slugify(label: str) -> str:
    """Node ID fragment for a label: trimmed, whitespace runs as '-', lowercased."""
    return re.sub(r"\s+", "-", label.strip()).lower()


def truncate_label(label: str, max_length: int = 30) -> str:
    """Shorten long labels to max_length - 3 characters plus an ellipsis."""
    if len(label) > max_length:
        return label[: max_length - 3] + "..."
    return label


def top_labels(labels: list[str], limit: int) -> list[tuple[str, str]]:
    """
    Most frequent labels, grouped by slug.

    Ties keep first-occurrence order; the first spelling seen is used
    for display.

    Args:
        labels: Label occurrences in encounter order
        limit: Number of labels to keep

    Returns:
        (slug, display label) pairs, most frequent first
    """
    counts: Counter[str] = Counter()
    display: dict[str, str] = {}
    for label in labels:
        if not label or not label.strip():
            continue
        slug = slugify(label)
        counts[slug] += 1
        display.setdefault(slug, label.strip())
    return [(slug, display[slug]) for slug, _ in counts.most_common(limit)]


def ring_position(radius: float, angle: float) -> Position:
    """Point on a circle around the origin."""
    return Position(x=radius * math.cos(angle), y=radius * math.sin(angle))


class MindMapLayoutEngine:
    """
    Engine for building the mind map graph of a note collection.

    Layout is deterministic: the same notes always produce the same
    nodes, positions and edges.
    """

    def __init__(self, config: MindMapConfig | None = None):
        """
        Initialize mind map layout engine.

        Args:
            config: Ring sizes, radii and phases (defaults if not provided)
        """
        self.config = config or MindMapConfig()

    def layout(self, notes: list[Note]) -> MindMapGraph:
        """
        Build the mind map for a note collection.

        Args:
            notes: Notes to visualize

        Returns:
            Graph with the center node first; empty graph for no notes

        Raises:
            ValidationError: If notes is not a well-formed note collection
        """
        notes = coerce_notes(notes)
        if not notes:
            return MindMapGraph.empty()

        nodes: list[MindMapNode] = [
            MindMapNode(
                id=CENTER_ID,
                label=self.config.center_label,
                type=MindMapNodeType.CENTER,
                position=Position(x=0.0, y=0.0),
            )
        ]
        edges: list[MindMapEdge] = []

        self._add_categories(notes, nodes, edges)
        self._add_keywords(notes, nodes, edges)
        self._add_action_items(notes, nodes, edges)
        self._add_shared_keyword_links(notes, nodes, edges)

        logger.debug(f"Mind map: {len(nodes)} nodes, {len(edges)} edges from {len(notes)} notes")
        return MindMapGraph(nodes=nodes, edges=edges)

    def _add_categories(
        self, notes: list[Note], nodes: list[MindMapNode], edges: list[MindMapEdge]
    ) -> None:
        categories = top_labels(
            [category for note in notes for category in note.categories],
            self.config.max_categories,
        )
        if not categories:
            return

        step = 2 * math.pi / len(categories)
        placed_notes: set[str] = set()

        for index, (slug, label) in enumerate(categories):
            angle = index * step
            category_id = f"category-{slug}"
            nodes.append(
                MindMapNode(
                    id=category_id,
                    label=label,
                    type=MindMapNodeType.CATEGORY,
                    position=ring_position(self.config.category_radius, angle),
                )
            )
            edges.append(self._hub_edge(category_id, CATEGORY_STYLE))

            members = [
                note for note in notes if any(slugify(c) == slug for c in note.categories)
            ][: self.config.max_notes_per_category]

            for member_index, note in enumerate(members):
                note_node_id = f"note-{note.id}"
                if note_node_id not in placed_notes:
                    placed_notes.add(note_node_id)
                    note_angle = angle + self._arc_offset(member_index, len(members))
                    nodes.append(
                        MindMapNode(
                            id=note_node_id,
                            label=note.title,
                            type=MindMapNodeType.NOTE,
                            note_id=note.id,
                            position=ring_position(self.config.note_radius, note_angle),
                        )
                    )
                edges.append(
                    MindMapEdge(
                        id=generate_edge_id(category_id, note_node_id),
                        source=category_id,
                        target=note_node_id,
                        relationship=EdgeRelationship.BELONGS_TO,
                        style=dict(NOTE_STYLE),
                    )
                )

    def _arc_offset(self, index: int, count: int) -> float:
        # One note sits on the category angle; more spread evenly across the arc
        if count <= 1:
            return 0.0
        arc = self.config.note_arc
        return -arc + 2 * arc * index / (count - 1)

    def _add_keywords(
        self, notes: list[Note], nodes: list[MindMapNode], edges: list[MindMapEdge]
    ) -> None:
        keywords = top_labels(
            [keyword for note in notes for keyword in note.keywords],
            self.config.max_keywords,
        )
        if not keywords:
            return

        step = 2 * math.pi / len(keywords)
        for index, (slug, label) in enumerate(keywords):
            keyword_id = f"keyword-{slug}"
            nodes.append(
                MindMapNode(
                    id=keyword_id,
                    label=label,
                    type=MindMapNodeType.KEYWORD,
                    position=ring_position(
                        self.config.keyword_radius, self.config.keyword_phase + index * step
                    ),
                )
            )
            edges.append(self._hub_edge(keyword_id, KEYWORD_STYLE))

    def _add_action_items(
        self, notes: list[Note], nodes: list[MindMapNode], edges: list[MindMapEdge]
    ) -> None:
        open_items = [
            strip_completion_marker(item.strip()).strip()
            for note in notes
            for item in note.action_items
            if not is_completed_action(item)
        ]
        counts: Counter[str] = Counter(item for item in open_items if item)
        actions = [item for item, _ in counts.most_common(self.config.max_action_items)]
        if not actions:
            return

        step = 2 * math.pi / len(actions)
        for index, action in enumerate(actions):
            action_id = f"action-{index}"
            nodes.append(
                MindMapNode(
                    id=action_id,
                    label=truncate_label(action, self.config.action_label_max),
                    type=MindMapNodeType.ACTION_ITEM,
                    position=ring_position(
                        self.config.action_radius, self.config.action_phase + index * step
                    ),
                )
            )
            edges.append(self._hub_edge(action_id, ACTION_STYLE))

    def _add_shared_keyword_links(
        self, notes: list[Note], nodes: list[MindMapNode], edges: list[MindMapEdge]
    ) -> None:
        node_ids = {node.id for node in nodes}

        for i, note_a in enumerate(notes):
            for note_b in notes[i + 1 :]:
                common = shared_labels(
                    [k for k in note_a.keywords if k.strip()],
                    [k for k in note_b.keywords if k.strip()],
                )
                if not common:
                    continue

                source = f"note-{note_a.id}"
                target = f"note-{note_b.id}"
                if source not in node_ids or target not in node_ids:
                    continue
                if any(edge.connects(source, target) for edge in edges):
                    continue

                edges.append(
                    MindMapEdge(
                        id=generate_edge_id(source, target),
                        source=source,
                        target=target,
                        relationship=EdgeRelationship.SHARED_KEYWORDS,
                        animated=True,
                        label="shared keywords",
                        style=dict(SHARED_KEYWORD_STYLE),
                        metadata={"shared_keywords": list(dict.fromkeys(common))},
                    )
                )

    def _hub_edge(self, node_id: str, style: dict[str, str]) -> MindMapEdge:
        return MindMapEdge(
            id=generate_edge_id(CENTER_ID, node_id),
            source=CENTER_ID,
            target=node_id,
            relationship=EdgeRelationship.HUB,
            style=dict(style),
        )


def generate_mind_map(notes: list[Note], config: MindMapConfig | None = None) -> MindMapGraph:
    """
    Build the mind map for a note collection with a one-off engine.

    Args:
        notes: Notes to visualize
        config: Optional layout configuration

    Returns:
        Mind map graph
    """
    return MindMapLayoutEngine(config).layout(notes)
