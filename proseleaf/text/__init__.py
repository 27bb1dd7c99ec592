"""Text extraction, slugs and attachment patterns."""

from proseleaf.text.patterns import (
    ATTACHMENT_PUBLIC_RE,
    ATTACHMENT_REDIRECT_RE,
    parse_attachment_ids,
)
from proseleaf.text.plain_text import text_between, to_plain_text
from proseleaf.text.slug import heading_to_slug, slugify

__all__ = [
    "ATTACHMENT_PUBLIC_RE",
    "ATTACHMENT_REDIRECT_RE",
    "heading_to_slug",
    "parse_attachment_ids",
    "slugify",
    "text_between",
    "to_plain_text",
]
