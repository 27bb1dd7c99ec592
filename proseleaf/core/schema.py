"""
Schema for the content tree.

A schema names the node and mark types a document may contain and holds
the per-type settings the analyses consume: whether a node is inline or a
leaf, its attribute defaults, and an optional plain-text serializer.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from proseleaf.core.errors import MalformedTreeError
from proseleaf.core.model import Mark, Node

TextSerializer = Callable[[Node], str]


@dataclass
class NodeSpec:
    """
    Declaration of a node type.

    Attributes:
        inline: Inline nodes live inside textblocks; all others are blocks.
        leaf: Leaf nodes (atoms) never have content.
        attrs: Attribute defaults, merged under the attrs of each node.
        leaf_text: Text a leaf contributes to ``Node.text_content``.
        to_plain_text: Custom serializer used by plain-text extraction in
            place of descending into the node.
    """

    inline: bool = False
    leaf: bool = False
    attrs: dict[str, Any] = field(default_factory=dict)
    leaf_text: TextSerializer | None = None
    to_plain_text: TextSerializer | None = None


@dataclass
class MarkSpec:
    """Declaration of a mark type."""

    attrs: dict[str, Any] = field(default_factory=dict)


class NodeType:
    """A node type bound to its schema."""

    def __init__(self, name: str, schema: Schema, spec: NodeSpec) -> None:
        self.name = name
        self.schema = schema
        self.spec = spec

    @property
    def is_text(self) -> bool:
        return self.name == "text"

    @property
    def is_inline(self) -> bool:
        return self.is_text or self.spec.inline

    @property
    def is_block(self) -> bool:
        return not self.is_inline

    @property
    def is_leaf(self) -> bool:
        return self.is_text or self.spec.leaf

    def compute_attrs(self, attrs: Mapping[str, Any] | None) -> dict[str, Any]:
        """Merge supplied attributes over the declared defaults."""
        return {**self.spec.attrs, **(attrs or {})}

    def create(
        self,
        attrs: Mapping[str, Any] | None = None,
        content: list[Node] | tuple[Node, ...] | None = None,
        marks: list[Mark] | tuple[Mark, ...] | None = None,
    ) -> Node:
        """Create a non-text node of this type."""
        if self.is_text:
            raise MalformedTreeError(
                "Text nodes must be created with Schema.text()",
                node_type=self.name,
            )
        return Node(
            type=self,
            attrs=self.compute_attrs(attrs),
            content=tuple(content or ()),
            marks=tuple(marks or ()),
        )

    def __repr__(self) -> str:
        return f"<NodeType {self.name}>"


class MarkType:
    """A mark type bound to its schema."""

    def __init__(self, name: str, schema: Schema, spec: MarkSpec) -> None:
        self.name = name
        self.schema = schema
        self.spec = spec

    def create(self, attrs: Mapping[str, Any] | None = None) -> Mark:
        return Mark(type=self, attrs={**self.spec.attrs, **(attrs or {})})

    def __repr__(self) -> str:
        return f"<MarkType {self.name}>"


class Schema:
    """
    The set of node and mark types available to a document.

    Type names are unique per schema; lookups are by name only.
    """

    def __init__(
        self,
        nodes: Mapping[str, NodeSpec],
        marks: Mapping[str, MarkSpec] | None = None,
        top_node: str = "doc",
    ) -> None:
        if top_node not in nodes:
            raise MalformedTreeError(
                f"Schema is missing its top node type '{top_node}'",
                node_type=top_node,
            )

        self.nodes: dict[str, NodeType] = {
            name: NodeType(name, self, spec) for name, spec in nodes.items()
        }
        self.marks: dict[str, MarkType] = {
            name: MarkType(name, self, spec) for name, spec in (marks or {}).items()
        }
        self.top_node_type = self.nodes[top_node]

    @property
    def plain_text_serializers(self) -> dict[str, TextSerializer]:
        """Map of type name to serializer for types that declare one."""
        return {
            name: node_type.spec.to_plain_text
            for name, node_type in self.nodes.items()
            if node_type.spec.to_plain_text
        }

    def node_type(self, name: str) -> NodeType:
        try:
            return self.nodes[name]
        except KeyError:
            raise MalformedTreeError(
                f"Unknown node type: {name}", node_type=name
            ) from None

    def mark_type(self, name: str) -> MarkType:
        try:
            return self.marks[name]
        except KeyError:
            raise MalformedTreeError(
                f"Unknown mark type: {name}", node_type=name
            ) from None

    def node(
        self,
        type_name: str,
        attrs: Mapping[str, Any] | None = None,
        content: list[Node] | tuple[Node, ...] | None = None,
        marks: list[Mark] | tuple[Mark, ...] | None = None,
    ) -> Node:
        """Create a node of the named type."""
        return self.node_type(type_name).create(attrs, content, marks)

    def text(
        self, text: str, marks: list[Mark] | tuple[Mark, ...] | None = None
    ) -> Node:
        """Create a text node. Empty text is not allowed."""
        return Node(
            type=self.node_type("text"),
            attrs={},
            marks=tuple(marks or ()),
            text=text,
        )

    def mark(self, name: str, attrs: Mapping[str, Any] | None = None) -> Mark:
        return self.mark_type(name).create(attrs)

    def node_from_json(self, data: Mapping[str, Any]) -> Node:
        """
        Build a node tree from its JSON form.

        Args:
            data: Mapping with ``type`` and optional ``attrs``, ``content``,
                ``marks`` and ``text`` keys.

        Raises:
            MalformedTreeError: If the data does not describe a valid node.
        """
        if not isinstance(data, Mapping):
            raise MalformedTreeError(
                "Node data must be a mapping",
                details=type(data).__name__,
            )

        type_name = data.get("type")
        if not isinstance(type_name, str) or not type_name:
            raise MalformedTreeError("Node is missing its type name", details=repr(data))

        marks = [self._mark_from_json(m) for m in data.get("marks") or []]

        if type_name == "text":
            text = data.get("text")
            if not isinstance(text, str):
                raise MalformedTreeError(
                    "Text node is missing its text", node_type=type_name
                )
            return self.text(text, marks)

        content = data.get("content") or []
        if not isinstance(content, list):
            raise MalformedTreeError(
                "Node content must be a list",
                node_type=type_name,
                details=type(content).__name__,
            )

        if data.get("text") is not None:
            raise MalformedTreeError(
                "Only text nodes may carry text", node_type=type_name
            )

        return self.node(
            type_name,
            attrs=self._attrs_from_json(data, type_name),
            content=[self.node_from_json(child) for child in content],
            marks=marks,
        )

    def _attrs_from_json(
        self, data: Mapping[str, Any], type_name: str
    ) -> Mapping[str, Any] | None:
        attrs = data.get("attrs")
        if attrs is not None and not isinstance(attrs, Mapping):
            raise MalformedTreeError(
                "Attributes must be a mapping",
                node_type=type_name,
                details=type(attrs).__name__,
            )
        return attrs

    def _mark_from_json(self, data: Mapping[str, Any]) -> Mark:
        if not isinstance(data, Mapping) or not data.get("type"):
            raise MalformedTreeError("Mark is missing its type name", details=repr(data))
        return self.mark(data["type"], self._attrs_from_json(data, data["type"]))
