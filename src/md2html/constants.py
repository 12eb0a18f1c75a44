#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the md2html library.

This module centralizes the static tables and defaults used across the
conversion pipeline. Constants are organized by category:

1. Type Definitions
2. Configuration Defaults
3. Placeholder Markers
4. Markdown Syntax Tables
5. Security Constants
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TableAlignment = Literal["left", "right", "center"]
MarkerKind = Literal["B", "I"]

# =============================================================================
# Configuration Defaults
# =============================================================================

DEFAULT_UNSAFE = False
DEFAULT_JOIN_CHARACTER = ""

# =============================================================================
# Placeholder Markers
# =============================================================================

# Private-use code points; stripped from input so markers cannot be forged
PLACEHOLDER_OPEN = "\ue000"
PLACEHOLDER_CLOSE = "\ue001"

MARKER_CODE_BLOCK: MarkerKind = "B"
MARKER_CODE_INLINE: MarkerKind = "I"

# CSS class shared by highlight.js and most highlighter stylesheets
HIGHLIGHT_CSS_CLASS = "hljs"
LANGUAGE_CSS_PREFIX = "lang-"

# =============================================================================
# Markdown Syntax Tables
# =============================================================================

# Characters that a backslash protects from structural interpretation
MARKDOWN_ESCAPABLE_CHARS = "\\*_{}[]()#+-.!`"

# Characters replaced by numeric character references when escaping HTML
HTML_SPECIAL_CHARS = "&<>\"'"

AUTOLINK_SCHEMES = ("http://", "https://", "ftp://", "mailto:", "tel:")

MAX_HEADING_LEVEL = 6

# =============================================================================
# Security Constants
# =============================================================================

# Tags rendered as visible text instead of markup
DANGEROUS_HTML_ELEMENTS = frozenset(
    {
        "script",
        "iframe",
        "object",
        "embed",
        "frame",
        "link",
        "meta",
        "style",
        "svg",
        "math",
    }
)

# Attribute values starting with these schemes are removed
DANGEROUS_SCHEMES = ("javascript:", "data:", "expression:")

# Attribute-name prefix exempt from scheme stripping (custom data attributes)
SAFE_ATTRIBUTE_PREFIX = "data-"

EVENT_HANDLER_PREFIX = "on"
