"""Tests for plain-text extraction."""

from __future__ import annotations

from proseleaf.core import AnalyzerConfig, Node, NodeSpec, Schema
from proseleaf.analysis import DocumentAnalyzer
from proseleaf.text import text_between, to_plain_text


def _para(schema: Schema, *children: Node | str) -> Node:
    content = [schema.text(c) if isinstance(c, str) else c for c in children]
    return schema.node("paragraph", content=content)


def _doc(schema: Schema, *children: Node) -> Node:
    return schema.node("doc", content=list(children))


class TestToPlainText:
    """Tests for serializer-aware text flattening."""

    def test_blocks_separated_by_newline(self, schema):
        doc = _doc(schema, _para(schema, "Hello"), _para(schema, "World"))
        assert to_plain_text(doc) == "Hello\nWorld"

    def test_inline_runs_joined(self, schema):
        doc = _doc(schema, _para(schema, "Hello ", "World"))
        assert to_plain_text(doc) == "Hello World"

    def test_empty_blocks_do_not_double_separate(self, schema):
        doc = _doc(
            schema,
            schema.node("heading", content=[schema.text("Title")]),
            _para(schema, "a"),
            schema.node("paragraph"),
            _para(schema, "b"),
        )
        assert to_plain_text(doc) == "Title\na\nb"

    def test_no_leading_separator(self, schema):
        doc = _doc(schema, schema.node("paragraph"), _para(schema, "a"))
        assert to_plain_text(doc) == "a"

    def test_no_trailing_separator(self, schema):
        doc = _doc(schema, _para(schema, "a"), schema.node("paragraph"))
        assert to_plain_text(doc) == "a"

    def test_mention_serializer(self, schema):
        mention = schema.node("mention", attrs={"label": "bob"})
        doc = _doc(schema, _para(schema, "Hi ", mention))
        assert to_plain_text(doc) == "Hi @bob"

    def test_hard_break(self, schema):
        doc = _doc(schema, _para(schema, "a", schema.node("hard_break"), "b"))
        assert to_plain_text(doc) == "a\nb"

    def test_image_contributes_nothing(self, schema):
        doc = _doc(schema, _para(schema, schema.node("image", attrs={"src": "x.png"})))
        assert to_plain_text(doc) == ""

    def test_nested_checklist_items(self, schema):
        checklist = schema.node(
            "checkbox_list",
            content=[
                schema.node("checkbox_item", content=[_para(schema, "one")]),
                schema.node("checkbox_item", content=[_para(schema, "two")]),
            ],
        )
        assert to_plain_text(_doc(schema, checklist)) == "one\ntwo"

    def test_subtree(self, schema):
        assert to_plain_text(_para(schema, "Just this")) == "Just this"

    def test_empty_document(self, schema):
        assert to_plain_text(_doc(schema, schema.node("paragraph"))) == ""


class TestCustomSerializers:
    """Tests for schemas that declare their own serializers."""

    def _schema(self) -> Schema:
        return Schema(
            nodes={
                "doc": NodeSpec(),
                "paragraph": NodeSpec(),
                "code_block": NodeSpec(to_plain_text=lambda node: "<code>"),
                "text": NodeSpec(inline=True),
            }
        )

    def test_serializer_replaces_children(self):
        schema = self._schema()
        doc = _doc(
            schema,
            _para(schema, "a"),
            schema.node("code_block", content=[schema.text("x = 1")]),
        )
        assert to_plain_text(doc) == "a\n<code>"

    def test_schema_argument_overrides_node_schema(self, schema):
        custom = Schema(
            nodes={
                "doc": NodeSpec(),
                "mention": NodeSpec(
                    inline=True, leaf=True, to_plain_text=lambda node: "[mention]"
                ),
            }
        )
        doc = _doc(schema, _para(schema, "Hi ", schema.node("mention")))
        assert to_plain_text(doc, custom) == "Hi [mention]"

    def test_plain_text_serializers_lists_declared_types(self):
        assert list(self._schema().plain_text_serializers) == ["code_block"]

    def test_leaf_text_without_serializer(self):
        schema = Schema(
            nodes={
                "doc": NodeSpec(),
                "paragraph": NodeSpec(),
                "emoji": NodeSpec(inline=True, leaf=True, leaf_text=lambda node: "X"),
                "text": NodeSpec(inline=True),
            }
        )
        doc = _doc(schema, _para(schema, "a ", schema.node("emoji")))
        assert to_plain_text(doc) == "a X"


class TestTextBetween:
    """Tests for range-limited extraction."""

    def test_partial_text(self, schema):
        doc = _doc(schema, _para(schema, "Hello"))
        assert text_between(doc, 2, 5, {}) == "ell"

    def test_range_across_blocks(self, schema):
        doc = _doc(schema, _para(schema, "ab"), _para(schema, "cd"))
        assert text_between(doc, 2, 6, {}) == "b\nc"

    def test_custom_separator(self, schema):
        doc = _doc(schema, _para(schema, "a"), _para(schema, "b"))
        assert text_between(doc, 0, doc.content_size, {}, " | ") == "a | b"

    def test_analyzer_separator_config(self, schema):
        analyzer = DocumentAnalyzer(AnalyzerConfig(block_separator=" "))
        doc = _doc(schema, _para(schema, "a"), _para(schema, "b"))
        assert analyzer.to_plain_text(doc) == "a b"
