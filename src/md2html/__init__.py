"""md2html - Convert Markdown to safe HTML with a single call.

md2html turns user-authored Markdown (comments, docs, chat messages) into an
HTML string ready to embed in a page. Conversion is a fixed pipeline of text
rewrites: code spans are set aside, block structure and inline spans are
converted, code is reinserted (optionally highlighted) and the result is
sanitized.

Key Features
------------
- Headings, bullet/numbered/task lists, blockquotes, rules and pipe tables
- Emphasis, strikethrough, links, images and autolinks
- Fenced code blocks with pluggable syntax highlighting (Pygments adapter included)
- Output sanitization of dangerous tags, URL schemes and event handlers

Quick Start
-----------
    >>> from md2html import md2html
    >>> md2html("Hello *world*")
    '<p>Hello <em>world</em></p>'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from md2html.api import md2html
from md2html.exceptions import DependencyError, HighlightError, Md2HtmlError, ValidationError
from md2html.highlight import Highlighter, PygmentsHighlighter
from md2html.options import Md2HtmlOptions
from md2html.utils.escape import escape_html
from md2html.utils.html_sanitizer import sanitize_html

__version__ = "0.1.0"

__all__ = [
    "DependencyError",
    "HighlightError",
    "Highlighter",
    "Md2HtmlError",
    "Md2HtmlOptions",
    "PygmentsHighlighter",
    "ValidationError",
    "__version__",
    "escape_html",
    "md2html",
    "sanitize_html",
]
