#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for code extraction and reinsertion."""

import logging

import pytest

from md2html.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from md2html.placeholders import (
    CodeBlock,
    PlaceholderRegistry,
    extract,
    extract_fenced_code,
    extract_inline_code,
    make_marker,
    reinsert,
    render_code_block,
    resolve_backslash_escapes,
    starts_with_code_block_marker,
    strip_comments,
)


@pytest.mark.unit
class TestPlaceholderRegistry:
    """Test the per-call placeholder registry."""

    def test_markers_encode_positions(self):
        """Test that each entry gets a marker with its index."""
        registry = PlaceholderRegistry()
        assert registry.add_code_block("py", "x") == make_marker("B", 0)
        assert registry.add_code_block("", "y") == make_marker("B", 1)
        assert registry.add_inline_code("z") == make_marker("I", 0)

    def test_out_of_range_lookups(self):
        """Test that lookups outside the registry return None."""
        registry = PlaceholderRegistry()
        registry.add_inline_code("a")
        assert registry.get_inline_code(0) == "a"
        assert registry.get_inline_code(1) is None
        assert registry.get_code_block(0) is None
        assert registry.get_code_block(-1) is None

    def test_marker_uses_private_use_sentinels(self):
        """Test that markers are delimited by the sentinel characters."""
        marker = make_marker("I", 3)
        assert marker == f"{PLACEHOLDER_OPEN}I3{PLACEHOLDER_CLOSE}"
        assert starts_with_code_block_marker(make_marker("B", 7))
        assert not starts_with_code_block_marker(marker)


@pytest.mark.unit
class TestExtraction:
    """Test the extraction steps."""

    def test_fenced_code_with_language(self):
        """Test that a fenced block is stored with its language."""
        registry = PlaceholderRegistry()
        result = extract_fenced_code("```js\nalert(1)\n```", registry)
        assert registry.code_blocks == [CodeBlock(language="js", code="alert(1)")]
        assert result.strip("\n") == make_marker("B", 0)

    def test_four_backtick_fence(self):
        """Test that a four-backtick fence may contain three-backtick lines."""
        registry = PlaceholderRegistry()
        extract_fenced_code("````\n```\ninner\n```\n````", registry)
        assert registry.code_blocks[0].code == "```\ninner\n```"

    def test_fenced_code_isolated_from_surrounding_text(self):
        """Test that the marker ends up in a block of its own."""
        registry = PlaceholderRegistry()
        result = extract_fenced_code("before\n```\ncode\n```\nafter", registry)
        assert f"\n\n{make_marker('B', 0)}\n\n" in result
        assert result.startswith("before")
        assert result.endswith("after")

    def test_multiple_fenced_blocks_in_order(self):
        """Test that blocks are registered in document order."""
        registry = PlaceholderRegistry()
        extract_fenced_code("```a\none\n```\n```b\ntwo\n```", registry)
        assert [b.language for b in registry.code_blocks] == ["a", "b"]
        assert [b.code for b in registry.code_blocks] == ["one", "two"]

    def test_unterminated_fence_left_alone(self):
        """Test that an unterminated fence is not extracted."""
        registry = PlaceholderRegistry()
        assert extract_fenced_code("```js\nnever closed", registry) == "```js\nnever closed"
        assert registry.code_blocks == []

    def test_inline_code_escaped(self):
        """Test that inline code content is HTML-escaped when stored."""
        registry = PlaceholderRegistry()
        result = extract_inline_code("use `a < b` here", registry)
        assert registry.inline_code == ["a &#60; b"]
        assert result == f"use {make_marker('I', 0)} here"

    def test_inline_code_at_start_of_text(self):
        """Test that a code span at the very start is extracted."""
        registry = PlaceholderRegistry()
        assert extract_inline_code("`x` first", registry) == f"{make_marker('I', 0)} first"

    def test_escaped_backtick_not_code(self):
        """Test that a backslash-escaped backtick does not open a span."""
        registry = PlaceholderRegistry()
        assert extract_inline_code(r"\`not code`", registry) == r"\`not code`"
        assert registry.inline_code == []

    def test_backslash_escapes(self):
        """Test that escaped metacharacters become numeric references."""
        assert resolve_backslash_escapes(r"\*a\_b\#c\\") == "&#42;a&#95;b&#35;c&#92;"

    def test_backslash_before_ordinary_character_kept(self):
        """Test that a backslash before a non-metacharacter stays."""
        assert resolve_backslash_escapes(r"C:\path") == r"C:\path"

    def test_comments_stripped(self):
        """Test that %% comments are removed."""
        assert strip_comments("keep %% secret note %% this") == "keep  this"
        assert strip_comments("a\n%%\nhidden\n%%\nb") == "a\n\nb"

    def test_extract_removes_forged_sentinels(self):
        """Test that sentinel characters in the input are discarded."""
        registry = PlaceholderRegistry()
        result = extract(f"{PLACEHOLDER_OPEN}B0{PLACEHOLDER_CLOSE}", registry)
        assert result == "B0"


@pytest.mark.unit
class TestReinsertion:
    """Test reinsertion of extracted code."""

    def test_inline_code_reinserted(self):
        """Test that inline markers become code elements."""
        registry = PlaceholderRegistry()
        marker = registry.add_inline_code("x &#60; y")
        assert reinsert(f"a {marker} b", registry) == "a <code>x &#60; y</code> b"

    def test_unknown_markers_become_empty(self):
        """Test that markers without an entry are removed."""
        registry = PlaceholderRegistry()
        text = f"[{make_marker('B', 5)}][{make_marker('I', 2)}]"
        assert reinsert(text, registry) == "[][]"

    def test_code_block_without_language(self):
        """Test plain code block markup."""
        assert render_code_block(CodeBlock("", "x = 1")) == "<pre><code>x = 1</code></pre>"

    def test_code_block_with_language(self):
        """Test that language hints are emitted on pre and code."""
        result = render_code_block(CodeBlock("js", "alert(1)"))
        assert result == '<pre lang="js"><code class="hljs js lang-js">alert(1)</code></pre>'

    def test_highlighter_used_for_language(self, recording_highlighter):
        """Test that highlight() receives code and language."""
        result = render_code_block(CodeBlock("py", "x"), recording_highlighter)
        assert recording_highlighter.calls == [("highlight", "x", "py")]
        assert "HL[py]:x" in result

    def test_highlighter_auto_without_language(self, recording_highlighter):
        """Test that highlight_auto() is used when no language was given."""
        result = render_code_block(CodeBlock("", "x"), recording_highlighter)
        assert recording_highlighter.calls == [("highlight_auto", "x")]
        assert result == "<pre><code>AUTO:x</code></pre>"

    def test_highlighter_failure_falls_back(self, failing_highlighter, caplog):
        """Test that highlighter exceptions are logged and the raw code used."""
        with caplog.at_level(logging.WARNING, logger="md2html.placeholders"):
            result = render_code_block(CodeBlock("py", "x = 1"), failing_highlighter)
        assert result == '<pre lang="py"><code class="hljs py lang-py">x = 1</code></pre>'
        assert "Syntax highlighting failed" in caplog.text
