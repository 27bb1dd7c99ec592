"""Analyzer configuration.

Names of the node and mark types the document analyses look for. The
defaults match the standard schema in ``proseleaf.core.default_schema``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyzerConfig:
    """Type names and text settings used by the document analyses.

    Attributes:
        doc_type: Name of the top-level document node.
        paragraph_type: Name of the paragraph node.
        heading_type: Name of the heading node.
        checklist_type: Name of the checklist container node.
        checklist_item_type: Name of the checklist item node.
        comment_mark: Name of the comment mark.
        block_separator: Inserted between text runs of adjacent blocks.
        empty_slug: Slug used when a heading has no sluggable text.
    """

    doc_type: str = "doc"
    paragraph_type: str = "paragraph"
    heading_type: str = "heading"
    checklist_type: str = "checkbox_list"
    checklist_item_type: str = "checkbox_item"
    comment_mark: str = "comment"
    block_separator: str = "\n"
    empty_slug: str = "heading"


DEFAULT_CONFIG = AnalyzerConfig()
