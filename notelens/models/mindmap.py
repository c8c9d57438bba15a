"""Mind map graph models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MindMapNodeType(str, Enum):
    """Types of nodes in the mind map."""

    CENTER = "center"
    CATEGORY = "category"
    KEYWORD = "keyword"
    NOTE = "note"
    ACTION_ITEM = "actionItem"


class EdgeRelationship(str, Enum):
    """What a mind map edge represents."""

    HUB = "hub"  # center -> category/keyword/action item
    BELONGS_TO = "belongs_to"  # category -> note
    SHARED_KEYWORDS = "shared_keywords"  # note <-> note


class Position(BaseModel):
    """Layout coordinates. Carry no meaning beyond visual separation."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0


class MindMapNode(BaseModel):
    """Mind map node."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    label: str
    type: MindMapNodeType
    note_id: str | None = Field(default=None, alias="noteId")
    position: Position = Field(default_factory=Position)


class MindMapEdge(BaseModel):
    """Mind map edge."""

    model_config = ConfigDict(frozen=True)

    id: str
    source: str
    target: str
    relationship: EdgeRelationship = EdgeRelationship.HUB
    animated: bool = False
    label: str | None = None
    style: dict[str, str] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)

    def connects(self, a: str, b: str) -> bool:
        """Check whether this edge joins a and b, in either direction."""
        return (self.source == a and self.target == b) or (self.source == b and self.target == a)


class MindMapGraph(BaseModel):
    """Nodes and edges of a mind map."""

    model_config = ConfigDict(frozen=True)

    nodes: list[MindMapNode] = Field(default_factory=list)
    edges: list[MindMapEdge] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "MindMapGraph":
        """Graph with no nodes and no edges."""
        return cls(nodes=[], edges=[])

    @property
    def node_ids(self) -> set[str]:
        """IDs of all nodes."""
        return {node.id for node in self.nodes}

    def has_edge(self, a: str, b: str) -> bool:
        """Check whether any edge joins a and b, in either direction."""
        return any(edge.connects(a, b) for edge in self.edges)

    def nodes_of_type(self, node_type: MindMapNodeType) -> list[MindMapNode]:
        """Nodes of one type, in layout order."""
        return [node for node in self.nodes if node.type == node_type]
