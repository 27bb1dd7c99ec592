"""
Pytest configuration and fixtures for proseleaf tests.
"""

from typing import Any

import pytest

from proseleaf.core import Node, Schema, default_schema


@pytest.fixture
def schema() -> Schema:
    """The standard document schema."""
    return default_schema()


@pytest.fixture
def sample_document_data() -> dict[str, Any]:
    """A document with headings, a comment, a checklist and a mention."""
    return {
        "type": "doc",
        "content": [
            {"type": "paragraph"},
            {
                "type": "heading",
                "attrs": {"level": 1},
                "content": [{"type": "text", "text": "Introduction"}],
            },
            {
                "type": "paragraph",
                "content": [
                    {"type": "text", "text": "Welcome "},
                    {
                        "type": "text",
                        "text": "everyone",
                        "marks": [
                            {
                                "type": "comment",
                                "attrs": {"id": "comment-1", "userId": "user-1"},
                            }
                        ],
                    },
                    {"type": "text", "text": ", ask "},
                    {
                        "type": "mention",
                        "attrs": {"id": "m1", "modelId": "user-2", "label": "jane"},
                    },
                ],
            },
            {
                "type": "heading",
                "attrs": {"level": 2},
                "content": [{"type": "text", "text": "Checklist"}],
            },
            {
                "type": "checkbox_list",
                "content": [
                    {
                        "type": "checkbox_item",
                        "attrs": {"checked": True},
                        "content": [
                            {
                                "type": "paragraph",
                                "content": [{"type": "text", "text": "Write draft"}],
                            }
                        ],
                    },
                    {
                        "type": "checkbox_item",
                        "attrs": {"checked": False},
                        "content": [
                            {
                                "type": "paragraph",
                                "content": [{"type": "text", "text": "Review"}],
                            }
                        ],
                    },
                ],
            },
            {"type": "paragraph"},
        ],
    }


@pytest.fixture
def sample_document(schema: Schema, sample_document_data: dict[str, Any]) -> Node:
    """The sample document as a content tree."""
    return schema.node_from_json(sample_document_data)
