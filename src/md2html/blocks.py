#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/blocks.py
"""Block-level Markdown transformation.

Blocks are recognized by an ordered series of whole-text rewrites. Each rule
sees the output of the rules before it, so the order is part of the
semantics:

1. headings
2. task list items
3. unordered list grouping (includes the task items from rule 2)
4. ordered list grouping
5. horizontal rules
6. blockquotes
7. tables
8. paragraph wrapping

There is no block nesting: a list inside a quote, or a table inside a list,
is not composed.
"""

from __future__ import annotations

import re

from md2html.constants import DEFAULT_JOIN_CHARACTER, MAX_HEADING_LEVEL
from md2html.placeholders import starts_with_code_block_marker
from md2html.tables import parse_table

_HEADING_RE = re.compile(rf"^[ \t]*(#{{1,{MAX_HEADING_LEVEL}}}) ([^\n]+)$", re.MULTILINE)

_TASK_ITEM_RE = re.compile(r"^[ \t]*[-*+][ \t]+\[([ xX]?)\][ \t]([^\n]+)$", re.MULTILINE)

_BULLET_ITEM_RE = re.compile(r"^[ \t]*[-*+] ([^\n]+)$")
_UNORDERED_LIST_RE = re.compile(
    r"^(?:[ \t]*(?:[-*+] [^\n]+|<li>[^\n]*</li>)(?:\n|\Z))+",
    re.MULTILINE,
)

_NUMBERED_ITEM_RE = re.compile(r"^[ \t]*\d+\. ([^\n]+)$")
_ORDERED_LIST_RE = re.compile(r"^(?:[ \t]*\d+\. [^\n]+(?:\n|\Z))+", re.MULTILINE)

_HORIZONTAL_RULE_RE = re.compile(r"^ {0,3}([*_-])(?: *\1){2,}[ \t]*$", re.MULTILINE)

_BLOCKQUOTE_RE = re.compile(r"^[ \t]*((?:>[ \t]*)+)([^\n]*)$", re.MULTILINE)

_TABLE_RE = re.compile(
    r"^(?P<header>[^\n|]*\|[^\n]*)\n"
    r"(?P<separator>[-: ]*\|[-:| ]*)(?:\n|\Z)"
    r"(?P<rows>(?:[^\n|]*\|[^\n]*(?:\n|\Z))*)",
    re.MULTILINE,
)

_PARAGRAPH_SPLIT_RE = re.compile(r"\n{2,}|\\\n")
_HTML_START_RE = re.compile(r"^<\w")


def _trailing_newline(block: str) -> str:
    return "\n" if block.endswith("\n") else ""


def render_headings(text: str) -> str:
    """Convert ``# Title`` lines to ``<h1>``..``<h6>`` elements."""

    def _replace(match: re.Match[str]) -> str:
        level = len(match.group(1))
        return f"<h{level}>{match.group(2)}</h{level}>"

    return _HEADING_RE.sub(_replace, text)


def render_task_items(text: str) -> str:
    """Convert ``- [ ] item`` / ``- [x] item`` lines to checkbox list items."""

    def _replace(match: re.Match[str]) -> str:
        checked = "checked " if match.group(1).strip().lower() == "x" else ""
        return f'<li><input type="checkbox" {checked}disabled> {match.group(2)}</li>'

    return _TASK_ITEM_RE.sub(_replace, text)


def group_unordered_lists(text: str) -> str:
    """Wrap each run of consecutive bullet lines in a single ``<ul>``."""

    def _replace(match: re.Match[str]) -> str:
        block = match.group(0)
        items = []
        for line in block.strip().split("\n"):
            item = _BULLET_ITEM_RE.match(line)
            items.append(f"<li>{item.group(1)}</li>" if item else line.strip())
        return f"<ul>{''.join(items)}</ul>{_trailing_newline(block)}"

    return _UNORDERED_LIST_RE.sub(_replace, text)


def group_ordered_lists(text: str) -> str:
    """Wrap each run of consecutive ``1. item`` lines in a single ``<ol>``.

    Source numbers are discarded; numbering comes from the browser.
    """

    def _replace(match: re.Match[str]) -> str:
        block = match.group(0)
        items = [_NUMBERED_ITEM_RE.sub(r"<li>\1</li>", line) for line in block.strip().split("\n")]
        return f"<ol>{''.join(items)}</ol>{_trailing_newline(block)}"

    return _ORDERED_LIST_RE.sub(_replace, text)


def render_horizontal_rules(text: str) -> str:
    """Convert ``---``, ``***``, ``_ _ _`` and similar lines to ``<hr/>``."""
    return _HORIZONTAL_RULE_RE.sub("<hr/>", text)


def render_blockquotes(text: str) -> str:
    """Convert ``>`` lines to blockquotes nested once per ``>`` marker.

    Quote lines without content are removed.
    """

    def _replace(match: re.Match[str]) -> str:
        content = match.group(2)
        if not content.strip():
            return ""
        depth = match.group(1).count(">")
        return "<blockquote>" * depth + content + "</blockquote>" * depth

    return _BLOCKQUOTE_RE.sub(_replace, text)


def render_tables(text: str) -> str:
    """Convert pipe tables (header, separator, rows) to ``<table>`` markup."""

    def _replace(match: re.Match[str]) -> str:
        table = parse_table(match.group("header"), match.group("separator"), match.group("rows"))
        return table + _trailing_newline(match.group(0))

    return _TABLE_RE.sub(_replace, text)


def wrap_paragraphs(text: str, join_character: str = DEFAULT_JOIN_CHARACTER) -> str:
    """Split text into blocks and wrap plain-text blocks in ``<p>``.

    Blocks are separated by blank lines or by a backslash at the end of a
    line. A block that already starts with an HTML element, or that holds an
    extracted code block, is left as is. Blank blocks are dropped.

    Parameters
    ----------
    text : str
        Text after the structural rules have run
    join_character : str, default ""
        String placed between consecutive blocks

    Returns
    -------
    str
        Joined blocks

    """
    blocks = []
    for segment in _PARAGRAPH_SPLIT_RE.split(text):
        segment = segment.strip("\n")
        if not segment.strip():
            continue
        if _HTML_START_RE.match(segment) or starts_with_code_block_marker(segment):
            blocks.append(segment)
        else:
            blocks.append(f"<p>{segment}</p>")
    return join_character.join(blocks)


def transform_blocks(text: str, join_character: str = DEFAULT_JOIN_CHARACTER) -> str:
    """Apply every block rule in order.

    Parameters
    ----------
    text : str
        Markdown with code already extracted
    join_character : str, default ""
        String placed between paragraphs and other top-level blocks

    Returns
    -------
    str
        HTML block structure with inline Markdown still unprocessed

    """
    text = render_headings(text)
    text = render_task_items(text)
    text = group_unordered_lists(text)
    text = group_ordered_lists(text)
    text = render_horizontal_rules(text)
    text = render_blockquotes(text)
    text = render_tables(text)
    return wrap_paragraphs(text, join_character)
