"""
The standard document schema.

Covers the node and mark types found in everyday collaborative documents:
paragraphs, headings, lists and checklists, code, mentions and comment
marks. Mentions and hard breaks declare plain-text serializers.
"""

from __future__ import annotations

from functools import lru_cache

from proseleaf.core.model import Node
from proseleaf.core.schema import MarkSpec, NodeSpec, Schema


def _mention_text(node: Node) -> str:
    return f"@{node.attrs.get('label') or ''}"


def _hard_break_text(node: Node) -> str:
    return "\n"


NODE_SPECS: dict[str, NodeSpec] = {
    "doc": NodeSpec(),
    "paragraph": NodeSpec(),
    "heading": NodeSpec(attrs={"level": 1}),
    "blockquote": NodeSpec(),
    "code_block": NodeSpec(attrs={"language": None}),
    "horizontal_rule": NodeSpec(leaf=True),
    "bullet_list": NodeSpec(),
    "ordered_list": NodeSpec(attrs={"order": 1}),
    "list_item": NodeSpec(),
    "checkbox_list": NodeSpec(),
    "checkbox_item": NodeSpec(attrs={"checked": False}),
    "text": NodeSpec(inline=True),
    "hard_break": NodeSpec(
        inline=True,
        leaf=True,
        leaf_text=_hard_break_text,
        to_plain_text=_hard_break_text,
    ),
    "mention": NodeSpec(
        inline=True,
        leaf=True,
        attrs={"id": None, "type": "user", "modelId": None, "label": None},
        leaf_text=_mention_text,
        to_plain_text=_mention_text,
    ),
    "image": NodeSpec(
        inline=True,
        leaf=True,
        attrs={"src": None, "alt": None},
    ),
}

MARK_SPECS: dict[str, MarkSpec] = {
    "strong": MarkSpec(),
    "em": MarkSpec(),
    "code_inline": MarkSpec(),
    "strikethrough": MarkSpec(),
    "link": MarkSpec(attrs={"href": None}),
    "comment": MarkSpec(attrs={"id": None, "userId": None, "resolved": False}),
}


@lru_cache(maxsize=1)
def default_schema() -> Schema:
    """The shared standard schema. Built once on first use."""
    return Schema(nodes=NODE_SPECS, marks=MARK_SPECS)
