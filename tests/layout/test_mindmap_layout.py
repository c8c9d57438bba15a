"""
Tests for the mind map layout engine.

Tests cover:
1. Empty input and the center node
2. Top-K selection of categories, keywords and action items
3. Radial placement of notes around their category
4. Hub, membership and shared-keyword edges
5. Determinism
"""

import math

import pytest

from notelens.config import MindMapConfig
from notelens.core.layout import MindMapLayoutEngine, generate_mind_map, slugify, truncate_label
from notelens.models import EdgeRelationship, MindMapNodeType
from notelens.utils import ValidationError


def angle_of(node) -> float:
    return math.atan2(node.position.y, node.position.x)


def angular_distance(a: float, b: float) -> float:
    return abs(math.atan2(math.sin(a - b), math.cos(a - b)))


def node_by_id(graph, node_id):
    return next(node for node in graph.nodes if node.id == node_id)


class TestHelpers:
    """Tests for label helpers."""

    def test_slugify(self):
        """Test whitespace runs become dashes."""
        assert slugify("  Personal   Growth ") == "personal-growth"

    def test_truncate_long_label(self):
        """Test labels over 30 characters are shortened."""
        label = "Call the insurance company about the claim"

        assert truncate_label(label) == label[:27] + "..."
        assert len(truncate_label(label)) == 30

    def test_keep_label_at_limit(self):
        """Test a 30-character label is left alone."""
        label = "x" * 30

        assert truncate_label(label) == label


class TestMindMapLayout:
    """Tests for MindMapLayoutEngine.layout."""

    @pytest.fixture
    def engine(self):
        return MindMapLayoutEngine()

    def test_empty_input(self, engine):
        """Test no notes yields an empty graph."""
        graph = engine.layout([])

        assert graph.nodes == []
        assert graph.edges == []

    def test_rejects_invalid_input(self, engine):
        """Test malformed input fails fast."""
        with pytest.raises(ValidationError):
            engine.layout(None)

    def test_single_center_node_first(self, engine, goal_notes):
        """Test exactly one center node, at the origin, first."""
        graph = engine.layout(goal_notes)

        centers = graph.nodes_of_type(MindMapNodeType.CENTER)
        assert len(centers) == 1
        assert graph.nodes[0].id == "center"
        assert graph.nodes[0].label == "My Thoughts"
        assert (graph.nodes[0].position.x, graph.nodes[0].position.y) == (0.0, 0.0)

    def test_center_only_for_unlabelled_notes(self, engine, make_note):
        """Test notes without labels leave just the center."""
        graph = engine.layout([make_note("a")])

        assert [node.id for node in graph.nodes] == ["center"]
        assert graph.edges == []

    def test_top_categories_by_frequency(self, engine, make_note):
        """Test five categories are kept, ties in first-seen order."""
        notes = [
            make_note("a", categories=["A", "B", "C"]),
            make_note("b", categories=["D", "E", "F", "G"]),
            make_note("c", categories=["G", "F"]),
        ]

        graph = engine.layout(notes)

        labels = [n.label for n in graph.nodes_of_type(MindMapNodeType.CATEGORY)]
        assert labels == ["F", "G", "A", "B", "C"]

    def test_keyword_limit(self, engine, make_note):
        """Test at most eight keyword nodes."""
        notes = [make_note("a", keywords=[f"kw{i}" for i in range(12)])]

        graph = engine.layout(notes)

        keywords = graph.nodes_of_type(MindMapNodeType.KEYWORD)
        assert [n.id for n in keywords] == [f"keyword-kw{i}" for i in range(8)]

    def test_label_variants_share_a_node(self, engine, make_note):
        """Test labels differing only in case or spacing map to one node."""
        notes = [
            make_note("a", categories=["Personal Growth"]),
            make_note("b", categories=["personal  growth"]),
        ]

        graph = engine.layout(notes)

        categories = graph.nodes_of_type(MindMapNodeType.CATEGORY)
        assert [(n.id, n.label) for n in categories] == [
            ("category-personal-growth", "Personal Growth")
        ]
        assert len(graph.nodes_of_type(MindMapNodeType.NOTE)) == 2

    def test_action_items(self, engine, make_note):
        """Test open action items are ranked, completed ones skipped."""
        long_action = "Call the insurance company about the claim"
        notes = [
            make_note("a", action_items=["Pay rent", "✓ Book flights", long_action]),
            make_note("b", action_items=[long_action, "✓ Book flights", "  "]),
        ]

        graph = engine.layout(notes)

        actions = graph.nodes_of_type(MindMapNodeType.ACTION_ITEM)
        assert [(n.id, n.label) for n in actions] == [
            ("action-0", long_action[:27] + "..."),
            ("action-1", "Pay rent"),
        ]
        # The note's own action items are untouched
        assert notes[1].action_items[0] == long_action

    def test_action_item_limit(self, engine, make_note):
        """Test at most five action item nodes."""
        notes = [make_note("a", action_items=[f"Task {i}" for i in range(9)])]

        graph = engine.layout(notes)

        assert len(graph.nodes_of_type(MindMapNodeType.ACTION_ITEM)) == 5

    def test_rings_do_not_overlap(self, engine, goal_notes):
        """Test each node type sits on its own circle."""
        config = MindMapConfig()
        graph = engine.layout(goal_notes)
        expected = {
            MindMapNodeType.CATEGORY: config.category_radius,
            MindMapNodeType.NOTE: config.note_radius,
            MindMapNodeType.KEYWORD: config.keyword_radius,
            MindMapNodeType.ACTION_ITEM: config.action_radius,
        }

        for node in graph.nodes[1:]:
            radius = math.hypot(node.position.x, node.position.y)
            assert radius == pytest.approx(expected[node.type])

    def test_notes_clustered_near_category(self, engine, make_note):
        """Test up to three notes sit within 0.3 rad of their category."""
        notes = [make_note(str(i), categories=["Work"]) for i in range(5)]
        notes.append(make_note("home", categories=["Home"]))

        graph = engine.layout(notes)

        work = node_by_id(graph, "category-work")
        work_notes = [e.target for e in graph.edges if e.source == "category-work"]
        assert work_notes == ["note-0", "note-1", "note-2"]
        offsets = [
            angle_of(node_by_id(graph, node_id)) - angle_of(work) for node_id in work_notes
        ]
        assert offsets == pytest.approx([-0.3, 0.0, 0.3])
        assert all(
            angular_distance(angle_of(node_by_id(graph, node_id)), angle_of(work)) <= 0.3 + 1e-9
            for node_id in work_notes
        )

    def test_single_note_on_category_angle(self, engine, make_note):
        """Test a lone note sits on its category's angle."""
        graph = engine.layout([make_note("a", categories=["Work"])])

        note = node_by_id(graph, "note-a")
        assert angle_of(note) == pytest.approx(angle_of(node_by_id(graph, "category-work")))
        assert note.note_id == "a"
        assert note.label == "Note a"

    def test_note_in_two_categories(self, engine, make_note):
        """Test a note gets one node and an edge from each category."""
        graph = engine.layout([make_note("a", categories=["Work", "Health"])])

        assert len(graph.nodes_of_type(MindMapNodeType.NOTE)) == 1
        owners = sorted(e.source for e in graph.edges if e.target == "note-a")
        assert owners == ["category-health", "category-work"]

    def test_hub_edges(self, engine, goal_notes):
        """Test every category, keyword and action connects to the center."""
        graph = engine.layout(goal_notes)

        hub_targets = {e.target for e in graph.edges if e.relationship == EdgeRelationship.HUB}
        ringed = {
            n.id
            for n in graph.nodes
            if n.type
            in (MindMapNodeType.CATEGORY, MindMapNodeType.KEYWORD, MindMapNodeType.ACTION_ITEM)
        }
        assert hub_targets == ringed
        assert all(
            e.source == "center" for e in graph.edges if e.relationship == EdgeRelationship.HUB
        )

    def test_shared_keyword_edge(self, engine, goal_notes):
        """Test notes sharing a keyword are linked exactly once."""
        graph = engine.layout(goal_notes)

        shared = [e for e in graph.edges if e.relationship == EdgeRelationship.SHARED_KEYWORDS]
        assert len(shared) == 1
        edge = shared[0]
        assert {edge.source, edge.target} == {"note-1", "note-2"}
        assert edge.metadata == {"shared_keywords": ["fitness"]}
        assert edge.animated is True
        assert graph.has_edge("note-2", "note-1")

    def test_shared_keyword_edge_needs_both_nodes(self, engine, make_note):
        """Test no link when a note has no node."""
        notes = [
            make_note("a", categories=["Work"], keywords=["python"]),
            make_note("b", keywords=["python"]),
        ]

        graph = engine.layout(notes)

        assert not any(e.relationship == EdgeRelationship.SHARED_KEYWORDS for e in graph.edges)

    def test_blank_keywords_do_not_link(self, engine, make_note):
        """Test empty keywords never count as shared."""
        notes = [
            make_note("1", categories=["Work"], keywords=[""]),
            make_note("2", categories=["Work"], keywords=["  "]),
            make_note("3", categories=["Work"], keywords=[""]),
        ]

        graph = engine.layout(notes)

        assert not any(e.relationship == EdgeRelationship.SHARED_KEYWORDS for e in graph.edges)
        assert not graph.nodes_of_type(MindMapNodeType.KEYWORD)

    def test_no_duplicate_edges(self, engine, make_note):
        """Test every unordered node pair has at most one edge."""
        notes = [
            make_note(str(i), categories=["Work", "Ideas"], keywords=["python", "rust"])
            for i in range(4)
        ]

        graph = engine.layout(notes)

        pairs = [frozenset((e.source, e.target)) for e in graph.edges]
        assert len(pairs) == len(set(pairs))
        assert len({n.id for n in graph.nodes}) == len(graph.nodes)

    def test_deterministic(self, engine, goal_notes):
        """Test re-running yields the same graph."""
        first = engine.layout(goal_notes)
        second = generate_mind_map(goal_notes)

        assert first == second

    def test_custom_configuration(self, make_note):
        """Test limits and labels come from configuration."""
        engine = MindMapLayoutEngine(MindMapConfig(center_label="Ideas", max_categories=1))
        notes = [make_note("a", categories=["Work", "Health"])]

        graph = engine.layout(notes)

        assert graph.nodes[0].label == "Ideas"
        assert [n.label for n in graph.nodes_of_type(MindMapNodeType.CATEGORY)] == ["Work"]
