#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/placeholders.py
"""Literal and code span extraction and reinsertion.

Before any Markdown interpretation, fenced code blocks and inline code spans
are moved into a :class:`PlaceholderRegistry` and replaced by marker tokens.
The markers are delimited by Unicode private-use characters that are removed
from the input first, so a document cannot contain (or forge) a marker. After
the block and inline transforms, :func:`reinsert` swaps every marker for its
final markup, optionally running code blocks through a syntax highlighter.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from md2html.constants import (
    HIGHLIGHT_CSS_CLASS,
    LANGUAGE_CSS_PREFIX,
    MARKDOWN_ESCAPABLE_CHARS,
    MARKER_CODE_BLOCK,
    MARKER_CODE_INLINE,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
    MarkerKind,
)
from md2html.highlight import Highlighter
from md2html.utils.escape import escape_html, numeric_entity

logger = logging.getLogger(__name__)

_FENCED_CODE_RE = re.compile(
    r"(?:^|\n)(?P<lead>[^\\\n`])?(?P<fence>`{3,4})[ ]*(?P<lang>\w*)\n(?P<code>.*?)\n(?P=fence)",
    re.DOTALL,
)
_INLINE_CODE_RE = re.compile(r"(?<!\\)`([^`]+)`")
_BACKSLASH_ESCAPE_RE = re.compile(f"\\\\([{re.escape(MARKDOWN_ESCAPABLE_CHARS)}])")
_COMMENT_RE = re.compile(r"%%[\n ][^%]+[\n ]%%")

_SENTINELS_RE = re.compile(f"[{PLACEHOLDER_OPEN}{PLACEHOLDER_CLOSE}]")


def _marker_pattern(kind: MarkerKind) -> re.Pattern[str]:
    return re.compile(f"{PLACEHOLDER_OPEN}{kind}(\\d+){PLACEHOLDER_CLOSE}")


_CODE_BLOCK_MARKER_RE = _marker_pattern(MARKER_CODE_BLOCK)
_CODE_INLINE_MARKER_RE = _marker_pattern(MARKER_CODE_INLINE)


def make_marker(kind: MarkerKind, index: int) -> str:
    """Build the marker token for registry entry ``index`` of ``kind``."""
    return f"{PLACEHOLDER_OPEN}{kind}{index}{PLACEHOLDER_CLOSE}"


def starts_with_code_block_marker(text: str) -> bool:
    """Return True if ``text`` begins with a code block marker."""
    return _CODE_BLOCK_MARKER_RE.match(text) is not None


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block captured during extraction.

    Parameters
    ----------
    language : str
        Language tag from the opening fence, possibly empty
    code : str
        Verbatim block content, untransformed

    """

    language: str
    code: str


@dataclass
class PlaceholderRegistry:
    """Ordered, append-only storage for extracted code.

    A registry lives for a single conversion call. Entry positions are
    encoded in the markers inserted into the document.
    """

    code_blocks: list[CodeBlock] = field(default_factory=list)
    inline_code: list[str] = field(default_factory=list)

    def add_code_block(self, language: str, code: str) -> str:
        """Store a code block and return its marker."""
        self.code_blocks.append(CodeBlock(language=language, code=code))
        return make_marker(MARKER_CODE_BLOCK, len(self.code_blocks) - 1)

    def add_inline_code(self, escaped_code: str) -> str:
        """Store already-escaped inline code and return its marker."""
        self.inline_code.append(escaped_code)
        return make_marker(MARKER_CODE_INLINE, len(self.inline_code) - 1)

    def get_code_block(self, index: int) -> CodeBlock | None:
        """Return the code block at ``index`` or None when out of range."""
        if 0 <= index < len(self.code_blocks):
            return self.code_blocks[index]
        return None

    def get_inline_code(self, index: int) -> str | None:
        """Return the inline code at ``index`` or None when out of range."""
        if 0 <= index < len(self.inline_code):
            return self.inline_code[index]
        return None


def extract_fenced_code(text: str, registry: PlaceholderRegistry) -> str:
    """Replace fenced code blocks with markers.

    Each marker is placed in a block of its own (surrounded by blank lines)
    so paragraph wrapping leaves it alone.
    """

    def _replace(match: re.Match[str]) -> str:
        marker = registry.add_code_block(match.group("lang").strip(), match.group("code").strip())
        prefix = "\n" if match.group(0).startswith("\n") else ""
        lead = (match.group("lead") or "").strip()
        return f"{prefix}{lead}\n\n{marker}\n\n"

    return _FENCED_CODE_RE.sub(_replace, text)


def extract_inline_code(text: str, registry: PlaceholderRegistry) -> str:
    """Replace backtick code spans with markers, storing their escaped content."""
    return _INLINE_CODE_RE.sub(lambda m: registry.add_inline_code(escape_html(m.group(1))), text)


def resolve_backslash_escapes(text: str) -> str:
    r"""Turn ``\*`` style escapes into numeric character references.

    Examples
    --------
        >>> resolve_backslash_escapes(r"\*literal\*")
        '&#42;literal&#42;'

    """
    return _BACKSLASH_ESCAPE_RE.sub(lambda m: numeric_entity(m.group(1)), text)


def strip_comments(text: str) -> str:
    """Delete ``%% ... %%`` author comments."""
    return _COMMENT_RE.sub("", text)


def extract(text: str, registry: PlaceholderRegistry) -> str:
    """Protect code from Markdown interpretation and resolve escapes.

    Runs, in order: fenced code extraction, inline code extraction, backslash
    escape resolution and comment stripping.

    Parameters
    ----------
    text : str
        Raw Markdown
    registry : PlaceholderRegistry
        Registry receiving the extracted code

    Returns
    -------
    str
        Markdown with code replaced by markers

    """
    text = _SENTINELS_RE.sub("", text)
    text = extract_fenced_code(text, registry)
    text = extract_inline_code(text, registry)
    text = resolve_backslash_escapes(text)
    text = strip_comments(text)

    logger.debug(
        f"Extracted {len(registry.code_blocks)} code block(s) and {len(registry.inline_code)} inline code span(s)"
    )
    return text


def _highlight_code(block: CodeBlock, highlighter: Highlighter) -> str:
    try:
        if block.language:
            return highlighter.highlight(block.code, block.language)
        return highlighter.highlight_auto(block.code)
    except Exception as e:
        logger.warning(f"Syntax highlighting failed for language '{block.language or 'auto'}': {e}")
        return block.code


def render_code_block(block: CodeBlock, highlighter: Highlighter | None = None) -> str:
    """Render a code block as ``<pre><code>`` markup.

    Parameters
    ----------
    block : CodeBlock
        Code block to render
    highlighter : Highlighter, optional
        Highlighter to run over the code. Failures fall back to the raw code.

    Returns
    -------
    str
        HTML for the block. With a language tag, ``<pre>`` carries a ``lang``
        attribute and ``<code>`` the classes ``hljs <lang> lang-<lang>``.

    """
    content = _highlight_code(block, highlighter) if highlighter is not None else block.code

    if not block.language:
        return f"<pre><code>{content}</code></pre>"

    lang = block.language
    classes = f"{HIGHLIGHT_CSS_CLASS} {lang} {LANGUAGE_CSS_PREFIX}{lang}"
    return f'<pre lang="{lang}"><code class="{classes}">{content}</code></pre>'


def reinsert(text: str, registry: PlaceholderRegistry, highlighter: Highlighter | None = None) -> str:
    """Replace every marker with the final markup for its registry entry.

    Markers whose index has no entry are replaced by the empty string.

    Parameters
    ----------
    text : str
        Transformed document containing markers
    registry : PlaceholderRegistry
        Registry populated by :func:`extract`
    highlighter : Highlighter, optional
        Highlighter for code blocks

    Returns
    -------
    str
        Document without markers

    """

    def _inline(match: re.Match[str]) -> str:
        code = registry.get_inline_code(int(match.group(1)))
        return f"<code>{code}</code>" if code else ""

    def _block(match: re.Match[str]) -> str:
        block = registry.get_code_block(int(match.group(1)))
        if block is None:
            return ""
        return render_code_block(block, highlighter)

    text = _CODE_INLINE_MARKER_RE.sub(_inline, text)
    return _CODE_BLOCK_MARKER_RE.sub(_block, text)
