"""Document analyses: text, trim, emptiness, comments, tasks, headings."""

from proseleaf.analysis.helper import (
    DocumentAnalyzer,
    get_comments,
    get_empty_document,
    get_headings,
    get_tasks,
    get_tasks_summary,
    is_empty,
    to_plain_text,
    trim,
)
from proseleaf.analysis.results import CommentMark, Heading, Task, TasksSummary

__all__ = [
    "CommentMark",
    "DocumentAnalyzer",
    "Heading",
    "Task",
    "TasksSummary",
    "get_comments",
    "get_empty_document",
    "get_headings",
    "get_tasks",
    "get_tasks_summary",
    "is_empty",
    "to_plain_text",
    "trim",
]
