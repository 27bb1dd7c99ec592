"""
Document analyzer.

Read-only analyses over a content tree (plain text, emptiness, comments,
tasks, headings) and the trim transform. Every call recomputes from the
tree it is given and never mutates it.
"""

from __future__ import annotations

import logging
from typing import Any

from proseleaf.analysis.results import CommentMark, Heading, Task, TasksSummary
from proseleaf.core.config import DEFAULT_CONFIG, AnalyzerConfig
from proseleaf.core.default_schema import default_schema
from proseleaf.core.model import Node
from proseleaf.core.schema import Schema
from proseleaf.text.plain_text import to_plain_text as _to_plain_text
from proseleaf.text.slug import heading_to_slug

logger = logging.getLogger(__name__)


class DocumentAnalyzer:
    """
    Derives structured facts from documents.

    Type names and the block separator come from the ``AnalyzerConfig``,
    so one analyzer serves any schema that follows its naming.
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def get_empty_document_data(self) -> dict[str, Any]:
        """
        Get a new empty document.

        Returns:
            A new empty document in JSON form.
        """
        return {
            "type": self.config.doc_type,
            "content": [{"type": self.config.paragraph_type, "content": []}],
        }

    def get_empty_document(self, schema: Schema | None = None) -> Node:
        """The canonical blank document: one empty paragraph."""
        schema = schema or default_schema()
        return schema.node_from_json(self.get_empty_document_data())

    def to_plain_text(self, node: Node, schema: Schema | None = None) -> str:
        """
        Returns the node as plain text.

        Args:
            node: The node to convert.
            schema: The schema to use. Defaults to the node's own.

        Returns:
            The content as plain text without formatting.
        """
        return _to_plain_text(node, schema, self.config.block_separator)

    def trim(self, doc: Node) -> Node:
        """
        Remove empty blocks from the beginning and end of the document.

        Documents with one child or fewer are returned unchanged. When every
        child is empty the result is a new blank document from the same
        schema, so trimming never produces a document without children.
        """
        if doc.child_count <= 1:
            return doc

        schema = doc.type.schema
        start = 0
        end = doc.node_size - 2

        index = 0
        while True:
            node = doc.maybe_child(index)
            index += 1
            if node is None or not self._is_blank(node, schema):
                break
            start += node.node_size

        index = doc.child_count - 1
        while True:
            node = doc.maybe_child(index)
            index -= 1
            if node is None or not self._is_blank(node, schema):
                break
            end -= node.node_size

        if start >= end:
            logger.warning(
                "All %d blocks of the document are empty; returning a blank document",
                doc.child_count,
            )
            return self.get_empty_document(schema)

        logger.debug("Trimming document to positions %d..%d", start, end)
        return doc.cut(start, end)

    def is_empty(self, doc: Node | None) -> bool:
        """
        Returns True if the trimmed content of the passed document is an
        empty string.
        """
        return doc is None or doc.text_content.strip() == ""

    def get_comments(self, doc: Node) -> list[CommentMark]:
        """
        Find all comments that exist as marks, in document order.

        A node carrying several comment marks yields one entry per mark.
        """
        comments: list[CommentMark] = []

        def visit(node: Node, pos: int, parent: Node) -> bool:
            for mark in node.marks:
                if mark.type.name == self.config.comment_mark:
                    comments.append(
                        CommentMark(
                            id=mark.attrs.get("id"),
                            user_id=mark.attrs.get("userId"),
                            text=node.text_content,
                        )
                    )
            return True

        doc.descendants(visit)
        logger.debug("Found %d comment marks", len(comments))
        return comments

    def get_tasks(self, doc: Node) -> list[Task]:
        """
        Find all checklist items and their completion state.

        Only the text of an item's direct paragraphs forms the task text;
        nested checklists are reported as tasks of their own.
        """
        tasks: list[Task] = []

        def visit(node: Node, pos: int, parent: Node) -> bool:
            if not node.is_block:
                return False

            if node.type.name == self.config.checklist_type:
                for list_item in node.content:
                    text = "".join(
                        child.text_content
                        for child in list_item.content
                        if child.type.name == self.config.paragraph_type
                    )
                    tasks.append(
                        Task(text=text, completed=bool(list_item.attrs.get("checked")))
                    )

            return True

        doc.descendants(visit)
        logger.debug("Found %d tasks", len(tasks))
        return tasks

    def get_tasks_summary(self, doc: Node) -> TasksSummary:
        """Count of completed tasks and of all tasks in the document."""
        tasks = self.get_tasks(doc)
        return TasksSummary(
            completed=sum(1 for task in tasks if task.completed),
            total=len(tasks),
        )

    def get_headings(self, doc: Node) -> list[Heading]:
        """
        Find the top-level headings with their level and a unique id.

        Headings with identical text get ids suffixed in the order they
        appear: "intro", "intro-1", "intro-2".
        """
        headings: list[Heading] = []
        previously_seen: dict[str, int] = {}
        used: set[str] = set()
        fallback = self.config.empty_slug

        for node in doc.content:
            if node.type.name != self.config.heading_type:
                continue

            slug = heading_to_slug(node, fallback=fallback)
            name = slug

            # reuse count of the base slug picks the suffix
            seen = previously_seen.get(slug, 0)
            if seen > 0:
                name = heading_to_slug(node, seen, fallback=fallback)

            # a suffixed id can equal the slug of a heading like "Intro 1"
            while name in used:
                seen += 1
                name = heading_to_slug(node, seen, fallback=fallback)

            previously_seen[slug] = seen + 1
            used.add(name)

            headings.append(
                Heading(
                    title=node.text_content,
                    level=node.attrs.get("level"),
                    id=name,
                )
            )

        logger.debug("Found %d headings", len(headings))
        return headings

    def _is_blank(self, node: Node, schema: Schema) -> bool:
        return self.to_plain_text(node, schema).strip() == ""


_default_analyzer = DocumentAnalyzer()


def get_empty_document(schema: Schema | None = None) -> Node:
    return _default_analyzer.get_empty_document(schema)


def to_plain_text(node: Node, schema: Schema | None = None) -> str:
    return _default_analyzer.to_plain_text(node, schema)


def trim(doc: Node) -> Node:
    return _default_analyzer.trim(doc)


def is_empty(doc: Node | None) -> bool:
    return _default_analyzer.is_empty(doc)


def get_comments(doc: Node) -> list[CommentMark]:
    return _default_analyzer.get_comments(doc)


def get_tasks(doc: Node) -> list[Task]:
    return _default_analyzer.get_tasks(doc)


def get_tasks_summary(doc: Node) -> TasksSummary:
    return _default_analyzer.get_tasks_summary(doc)


def get_headings(doc: Node) -> list[Heading]:
    return _default_analyzer.get_headings(doc)
