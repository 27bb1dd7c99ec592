"""Exceptions raised by the content tree model."""

from __future__ import annotations

from typing import Any


class MalformedTreeError(ValueError):
    """A node violates the structural rules of the content tree.

    Attributes:
        node_type: Type name of the offending node, when known.
        details: Extra context about the violation.
    """

    def __init__(
        self,
        message: str,
        node_type: str | None = None,
        details: str | None = None,
    ) -> None:
        self.node_type = node_type
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "node_type": self.node_type,
            "details": self.details,
        }
