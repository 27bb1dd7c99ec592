"""
Plain-text extraction from content trees.

Flattens a subtree to its visible text in document order. Node types with
a plain-text serializer in the schema contribute the serializer's output
instead of their children; text nodes contribute their literal text and
leaves their declared leaf text; text runs from different blocks are
joined with a single separator.
"""

from __future__ import annotations

from collections.abc import Mapping

from proseleaf.core.config import DEFAULT_CONFIG
from proseleaf.core.model import Node
from proseleaf.core.schema import Schema, TextSerializer


def text_between(
    root: Node,
    from_: int,
    to: int,
    serializers: Mapping[str, TextSerializer],
    block_separator: str = DEFAULT_CONFIG.block_separator,
) -> str:
    """
    Get the text of ``root``'s content between two positions.

    Args:
        root: Node whose content is walked (the node itself is not visited).
        from_: Start position relative to the content of ``root``.
        to: End position relative to the content of ``root``.
        serializers: Type name to plain-text serializer.
        block_separator: Emitted between text runs of different blocks,
            never before the first run or after the last.

    Returns:
        The extracted text.
    """
    parts: list[str] = []
    pending_separator = False

    def emit(text: str) -> None:
        nonlocal pending_separator
        if not text:
            return
        if pending_separator and parts:
            parts.append(block_separator)
        pending_separator = False
        parts.append(text)

    def visit(node: Node, pos: int, parent: Node) -> bool:
        nonlocal pending_separator

        if node.is_block:
            pending_separator = True

        serializer = serializers.get(node.type_name)
        if serializer:
            emit(serializer(node))
            return False

        if node.is_text:
            emit(node.text[max(from_, pos) - pos : to - pos])
        elif node.is_leaf and node.type.spec.leaf_text:
            emit(node.type.spec.leaf_text(node))

        return True

    root.nodes_between(from_, to, visit)
    return "".join(parts)


def to_plain_text(
    root: Node,
    schema: Schema | None = None,
    block_separator: str = DEFAULT_CONFIG.block_separator,
) -> str:
    """
    Returns the node as plain text.

    Args:
        root: The node to convert.
        schema: Schema supplying the serializers. Defaults to the schema
            the node was built with.
        block_separator: Separator between block text runs.

    Returns:
        The content as plain text without formatting.
    """
    schema = schema or root.type.schema
    return text_between(
        root, 0, root.content_size, schema.plain_text_serializers, block_separator
    )
