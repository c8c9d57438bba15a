"""Mind map layout."""

from .mindmap import MindMapLayoutEngine, generate_mind_map, slugify, truncate_label

__all__ = ["MindMapLayoutEngine", "generate_mind_map", "slugify", "truncate_label"]
