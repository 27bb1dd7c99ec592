"""
Proseleaf - structured facts from rich-text content trees.

Plain text, trimming, emptiness, comments, checklist tasks and heading
anchors for ProseMirror-style documents.
"""

from proseleaf.analysis import (
    CommentMark,
    DocumentAnalyzer,
    Heading,
    Task,
    TasksSummary,
    get_comments,
    get_empty_document,
    get_headings,
    get_tasks,
    get_tasks_summary,
    is_empty,
    to_plain_text,
    trim,
)
from proseleaf.core import (
    AnalyzerConfig,
    MalformedTreeError,
    Mark,
    Node,
    Schema,
    default_schema,
)
from proseleaf.text import (
    ATTACHMENT_PUBLIC_RE,
    ATTACHMENT_REDIRECT_RE,
    parse_attachment_ids,
)

__version__ = "0.1.0"

__all__ = [
    "ATTACHMENT_PUBLIC_RE",
    "ATTACHMENT_REDIRECT_RE",
    "AnalyzerConfig",
    "CommentMark",
    "DocumentAnalyzer",
    "Heading",
    "MalformedTreeError",
    "Mark",
    "Node",
    "Schema",
    "Task",
    "TasksSummary",
    "default_schema",
    "get_comments",
    "get_empty_document",
    "get_headings",
    "get_tasks",
    "get_tasks_summary",
    "is_empty",
    "parse_attachment_ids",
    "to_plain_text",
    "trim",
]
