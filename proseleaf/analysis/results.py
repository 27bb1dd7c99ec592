"""Values derived from document analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Heading:
    """
    A top-level heading.

    Attributes:
        title: The heading in plain text.
        level: The level of the heading.
        id: Unique anchor id of the heading within its document.
    """

    title: str
    level: int
    id: str

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "level": self.level, "id": self.id}


@dataclass(frozen=True)
class CommentMark:
    """
    A comment annotation on a span of text.

    Attributes:
        id: The unique id of the comment.
        user_id: The id of the user who created the comment.
        text: The text the comment is attached to.
    """

    id: str
    user_id: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "userId": self.user_id, "text": self.text}


@dataclass(frozen=True)
class Task:
    """A checklist item and whether it is ticked."""

    text: str
    completed: bool

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "completed": self.completed}


@dataclass(frozen=True)
class TasksSummary:
    completed: int
    total: int

    def to_dict(self) -> dict[str, Any]:
        return {"completed": self.completed, "total": self.total}
