"""Anchor slugs for headings."""

from __future__ import annotations

import re
import unicodedata

from proseleaf.core.config import DEFAULT_CONFIG
from proseleaf.core.model import Node

# Anything that is not a word character, whitespace or hyphen
_PUNCTUATION_RE = re.compile(r"[^\w\s-]")

# Runs of whitespace, underscores and hyphens become one hyphen
_SEPARATOR_RE = re.compile(r"[\s_-]+")


def slugify(text: str, fallback: str = DEFAULT_CONFIG.empty_slug) -> str:
    """
    Normalize text into an ASCII, lowercase, hyphen-separated slug.

    Accents are folded ("Café" -> "cafe"), punctuation is removed and
    whitespace runs become single hyphens. Text with nothing left after
    normalization yields ``fallback``.
    """
    normalized = unicodedata.normalize("NFKD", text)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")
    cleaned = _PUNCTUATION_RE.sub("", ascii_text.lower())
    slug = _SEPARATOR_RE.sub("-", cleaned).strip("-")
    return slug or fallback


def heading_to_slug(
    node: Node, index: int = 0, fallback: str = DEFAULT_CONFIG.empty_slug
) -> str:
    """
    Anchor id for a heading node.

    Args:
        node: The heading node.
        index: Disambiguation counter; 0 for the first occurrence.
        fallback: Slug for headings without usable text.

    Returns:
        The slug, suffixed with ``-{index}`` when index is non-zero.
    """
    slug = slugify(node.text_content, fallback)
    if index == 0:
        return slug
    return f"{slug}-{index}"
