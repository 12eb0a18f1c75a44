#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/inlines.py
"""Inline Markdown transformation.

Runs after block transformation over the whole text. Rules are applied in a
fixed order; later rules see the output of earlier ones.
"""

from __future__ import annotations

import re

from md2html.constants import AUTOLINK_SCHEMES

_STRONG_RE = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")

# A single ``*`` touching another ``*`` belongs to a ``**`` run; ``_`` inside
# a word (snake_case, URLs) is not emphasis.
_EMPHASIS_RE = re.compile(r"(?<![*\w])_(.+?)_(?![*\w])|(?<!\*)\*(.+?)\*(?!\*)")

_STRIKETHROUGH_RE = re.compile(r"~~(.+?)~~")

_EMAIL_AUTOLINK_RE = re.compile(r"<([^\s@<>:]+@[^\s@<>.]+(?:\.[^\s@<>.]+)+)>")

_URL_AUTOLINK_RE = re.compile(
    "<((?:" + "|".join(re.escape(scheme) for scheme in AUTOLINK_SCHEMES) + r")[^>\s]+)>"
)

_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")

_LINK_RE = re.compile(r'\[([^\]]+)\]\(([^) ]+) ?("[^)"]+")?\)')


def render_strong(text: str) -> str:
    """Convert ``**text**`` and ``__text__`` to ``<strong>``."""
    return _STRONG_RE.sub(lambda m: f"<strong>{m.group(1) or m.group(2)}</strong>", text)


def render_emphasis(text: str) -> str:
    """Convert ``*text*`` and ``_text_`` to ``<em>``."""
    return _EMPHASIS_RE.sub(lambda m: f"<em>{m.group(1) or m.group(2)}</em>", text)


def render_strikethrough(text: str) -> str:
    """Convert ``~~text~~`` to ``<del>``."""
    return _STRIKETHROUGH_RE.sub(r"<del>\1</del>", text)


def render_autolinks(text: str) -> str:
    """Convert ``<user@example.com>`` and ``<https://...>`` to anchors."""
    text = _EMAIL_AUTOLINK_RE.sub(r'<a href="mailto:\1">\1</a>', text)
    return _URL_AUTOLINK_RE.sub(r'<a href="\1">\1</a>', text)


def render_images(text: str) -> str:
    """Convert ``![alt](src)`` to ``<img>``."""
    return _IMAGE_RE.sub(r'<img src="\2" alt="\1">', text)


def render_links(text: str) -> str:
    """Convert ``[text](url "title")`` to anchors.

    The title keeps its surrounding quotes and is emitted as captured.
    """

    def _replace(match: re.Match[str]) -> str:
        label, url, title = match.groups()
        title_attr = f" title={title}" if title else ""
        return f'<a href="{url}"{title_attr}>{label}</a>'

    return _LINK_RE.sub(_replace, text)


def transform_inlines(text: str) -> str:
    """Apply every inline rule in order.

    Order: strong, emphasis, strikethrough, email autolinks, URL autolinks,
    images, links.

    Parameters
    ----------
    text : str
        Output of the block transformer

    Returns
    -------
    str
        Text with inline Markdown converted to HTML

    """
    text = render_strong(text)
    text = render_emphasis(text)
    text = render_strikethrough(text)
    text = render_autolinks(text)
    text = render_images(text)
    return render_links(text)
