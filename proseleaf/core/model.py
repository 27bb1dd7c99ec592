"""
Content tree data structures.

A document is an immutable tree of ``Node`` values. Every node occupies a
number of position units (its ``node_size``): a text node one unit per
character, a leaf node one unit, and any other node its content plus an
opening and a closing token. Positions index into a node's content and are
used to address ranges for traversal and slicing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from proseleaf.core.errors import MalformedTreeError

if TYPE_CHECKING:
    from proseleaf.core.schema import MarkType, NodeType

# Callback for tree walks: (node, absolute position, parent). Returning
# False stops descent into that node's children.
NodeVisitor = Callable[["Node", int, "Node"], "bool | None"]


@dataclass(frozen=True)
class Mark:
    """An annotation attached to an inline node, e.g. a comment."""

    type: MarkType
    attrs: dict[str, Any] = field(default_factory=dict)

    __hash__ = None

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.type.name}
        if self.attrs:
            result["attrs"] = dict(self.attrs)
        return result


@dataclass(frozen=True)
class Node:
    """
    A node in the content tree.

    Nodes own their children and marks. Nothing here mutates a node after
    construction; ``cut`` and ``copy`` build new nodes and share untouched
    subtrees with the original.
    """

    type: NodeType
    attrs: dict[str, Any] = field(default_factory=dict)
    content: tuple[Node, ...] = ()
    marks: tuple[Mark, ...] = ()
    text: str | None = None

    # attrs is a plain dict, so nodes compare by value but are not hashable
    __hash__ = None

    def __post_init__(self) -> None:
        name = getattr(self.type, "name", None)
        if not name:
            raise MalformedTreeError("Node is missing its type name")

        object.__setattr__(self, "content", tuple(self.content))
        object.__setattr__(self, "marks", tuple(self.marks))

        if self.type.is_text:
            if not isinstance(self.text, str) or not self.text:
                raise MalformedTreeError(
                    "Text nodes must have non-empty text", node_type=name
                )
        elif self.text is not None:
            raise MalformedTreeError(
                "Only text nodes may carry text", node_type=name
            )

        if self.type.is_leaf and self.content:
            raise MalformedTreeError(
                "Leaf nodes cannot have content",
                node_type=name,
                details=f"{len(self.content)} children",
            )

        for child in self.content:
            if not isinstance(child, Node):
                raise MalformedTreeError(
                    "Node children must be nodes",
                    node_type=name,
                    details=type(child).__name__,
                )

        for mark in self.marks:
            if not isinstance(mark, Mark):
                raise MalformedTreeError(
                    "Node marks must be marks",
                    node_type=name,
                    details=type(mark).__name__,
                )

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def type_name(self) -> str:
        return self.type.name

    @property
    def is_text(self) -> bool:
        return self.type.is_text

    @property
    def is_leaf(self) -> bool:
        return self.type.is_leaf

    @property
    def is_block(self) -> bool:
        return self.type.is_block

    @property
    def is_inline(self) -> bool:
        return self.type.is_inline

    @property
    def child_count(self) -> int:
        return len(self.content)

    @property
    def content_size(self) -> int:
        """Total size of the children."""
        return sum(child.node_size for child in self.content)

    @property
    def node_size(self) -> int:
        """Number of position units this node occupies in its parent."""
        if self.is_text:
            return len(self.text)
        if self.is_leaf:
            return 1
        return self.content_size + 2

    def child(self, index: int) -> Node:
        return self.content[index]

    def maybe_child(self, index: int) -> Node | None:
        """Child at ``index``, or None when out of range."""
        if 0 <= index < len(self.content):
            return self.content[index]
        return None

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def nodes_between(
        self, from_: int, to: int, visit: NodeVisitor, node_start: int = 0
    ) -> None:
        """
        Call ``visit`` for every descendant overlapping ``[from_, to)``.

        Depth-first, left to right. When ``visit`` returns False the
        children of that node are skipped.

        Args:
            from_: Start position, relative to this node's content.
            to: End position, relative to this node's content.
            visit: Callback receiving (node, position, parent).
            node_start: Absolute position of this node's content start.
        """
        pos = 0
        for child in self.content:
            if pos >= to:
                break
            end = pos + child.node_size
            if end > from_ and visit(child, node_start + pos, self) is not False:
                if child.content:
                    start = pos + 1
                    child.nodes_between(
                        max(0, from_ - start),
                        min(child.content_size, to - start),
                        visit,
                        node_start + start,
                    )
            pos = end

    def descendants(self, visit: NodeVisitor) -> None:
        """Call ``visit`` for every descendant node."""
        self.nodes_between(0, self.content_size, visit)

    @property
    def text_content(self) -> str:
        """Concatenated text of all descendants, without separators."""
        if self.is_text:
            return self.text
        if self.is_leaf:
            leaf_text = self.type.spec.leaf_text
            return leaf_text(self) if leaf_text else ""
        return "".join(child.text_content for child in self.content)

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def copy(self, content: tuple[Node, ...] | list[Node]) -> Node:
        """Same type, attrs and marks with different content."""
        return Node(
            type=self.type,
            attrs=dict(self.attrs),
            content=tuple(content),
            marks=self.marks,
        )

    def cut(self, from_: int = 0, to: int | None = None) -> Node:
        """
        Slice this node to the content between two positions.

        Children fully inside the range are shared; partially covered
        children are cut in turn.

        Raises:
            ValueError: If the range falls outside the node.
        """
        if self.is_text:
            size = len(self.text)
            to = size if to is None else to
            if from_ < 0 or to > size:
                raise ValueError(f"Position {from_}..{to} outside text of length {size}")
            if from_ == 0 and to == size:
                return self
            return Node(type=self.type, marks=self.marks, text=self.text[from_:to])

        size = self.content_size
        to = size if to is None else to
        if from_ < 0 or to > size:
            raise ValueError(f"Position {from_}..{to} outside content of size {size}")
        if from_ == 0 and to == size:
            return self
        return self.copy(self._cut_content(from_, to))

    def _cut_content(self, from_: int, to: int) -> list[Node]:
        result: list[Node] = []
        if to <= from_:
            return result

        pos = 0
        for child in self.content:
            if pos >= to:
                break
            end = pos + child.node_size
            if end > from_:
                if pos < from_ or end > to:
                    if child.is_text:
                        child = child.cut(
                            max(0, from_ - pos), min(len(child.text), to - pos)
                        )
                    elif not child.is_leaf:
                        child = child.cut(
                            max(0, from_ - pos - 1),
                            min(child.content_size, to - pos - 1),
                        )
                result.append(child)
            pos = end

        return result

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        """Convert to the JSON document shape."""
        result: dict[str, Any] = {"type": self.type.name}
        if self.attrs:
            result["attrs"] = dict(self.attrs)
        if self.is_text:
            result["text"] = self.text
        elif not self.is_leaf:
            result["content"] = [child.to_json() for child in self.content]
        if self.marks:
            result["marks"] = [mark.to_json() for mark in self.marks]
        return result

    def __repr__(self) -> str:
        if self.is_text:
            return f"<Node text {self.text[:40]!r}>"
        return f"<Node {self.type.name} children={len(self.content)} size={self.node_size}>"
