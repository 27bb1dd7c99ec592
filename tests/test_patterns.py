"""Tests for attachment reference patterns."""

from __future__ import annotations

from proseleaf.text.patterns import (
    ATTACHMENT_PUBLIC_RE,
    ATTACHMENT_REDIRECT_RE,
    parse_attachment_ids,
)

UUID_A = "123e4567-e89b-12d3-a456-426614174000"
UUID_B = "9b2c4f1e-0d3a-4c5b-8e7f-112233445566"
UUID_C = "aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee"


class TestRedirectPattern:
    """Tests for /api/attachments.redirect references."""

    def test_captures_id(self):
        match = ATTACHMENT_REDIRECT_RE.search(f"/api/attachments.redirect?id={UUID_A}")
        assert match is not None
        assert match.group("id") == UUID_A

    def test_case_insensitive(self):
        match = ATTACHMENT_REDIRECT_RE.search(
            f"/API/Attachments.Redirect?id={UUID_A.upper()}"
        )
        assert match.group("id") == UUID_A.upper()

    def test_embedded_in_markdown(self):
        text = f"![diagram](/api/attachments.redirect?id={UUID_A} \"Diagram\")"
        assert ATTACHMENT_REDIRECT_RE.search(text).group("id") == UUID_A

    def test_rejects_non_uuid(self):
        assert ATTACHMENT_REDIRECT_RE.search("/api/attachments.redirect?id=123") is None


class TestPublicPattern:
    """Tests for public storage path references."""

    def test_captures_second_segment(self):
        match = ATTACHMENT_PUBLIC_RE.search(
            f"https://bucket.s3.amazonaws.com/public/{UUID_B}/{UUID_C}/file.png"
        )
        assert match.group(1) == UUID_B
        assert match.group("id") == UUID_C

    def test_requires_two_segments(self):
        assert ATTACHMENT_PUBLIC_RE.search(f"public/{UUID_B}/file.png") is None


class TestParseAttachmentIds:
    """Tests for collecting ids from text."""

    def test_both_patterns_in_order(self):
        text = (
            f"[file](https://cdn/public/{UUID_B}/{UUID_C}/a.pdf) then "
            f"![img](/api/attachments.redirect?id={UUID_A})"
        )
        assert parse_attachment_ids(text) == [UUID_C, UUID_A]

    def test_duplicates_removed_and_lowercased(self):
        text = (
            f"/api/attachments.redirect?id={UUID_A} "
            f"/api/attachments.redirect?id={UUID_A.upper()}"
        )
        assert parse_attachment_ids(text) == [UUID_A]

    def test_no_references(self):
        assert parse_attachment_ids("plain text with no links") == []
