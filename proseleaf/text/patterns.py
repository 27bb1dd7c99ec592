"""
Attachment reference patterns.

Documents link to uploaded files either through the redirect endpoint
(``/api/attachments.redirect?id=<uuid>``) or through a public storage
path (``public/<uuid>/<uuid>``, where the second segment is the
attachment id). Both patterns expose the attachment id as group ``id``.
"""

from __future__ import annotations

import re

_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"

ATTACHMENT_REDIRECT_RE = re.compile(
    rf"/api/attachments\.redirect\?id=(?P<id>{_UUID})",
    re.IGNORECASE,
)

ATTACHMENT_PUBLIC_RE = re.compile(
    rf"public/({_UUID})/(?P<id>{_UUID})",
    re.IGNORECASE,
)

ATTACHMENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    ATTACHMENT_REDIRECT_RE,
    ATTACHMENT_PUBLIC_RE,
)


def parse_attachment_ids(text: str) -> list[str]:
    """
    Find attachment ids referenced in text or raw markup.

    Returns:
        Lowercased ids from both patterns, without duplicates, in order of
        first appearance.
    """
    found: list[tuple[int, str]] = []
    for pattern in ATTACHMENT_PATTERNS:
        for match in pattern.finditer(text):
            found.append((match.start(), match.group("id").lower()))

    ids: list[str] = []
    for _, attachment_id in sorted(found):
        if attachment_id not in ids:
            ids.append(attachment_id)
    return ids
