"""Content tree model: nodes, marks and schemas."""

from proseleaf.core.config import DEFAULT_CONFIG, AnalyzerConfig
from proseleaf.core.errors import MalformedTreeError
from proseleaf.core.model import Mark, Node
from proseleaf.core.schema import MarkSpec, MarkType, NodeSpec, NodeType, Schema
from proseleaf.core.default_schema import default_schema

__all__ = [
    "AnalyzerConfig",
    "DEFAULT_CONFIG",
    "MalformedTreeError",
    "Mark",
    "MarkSpec",
    "MarkType",
    "Node",
    "NodeSpec",
    "NodeType",
    "Schema",
    "default_schema",
]
