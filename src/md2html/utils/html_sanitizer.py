#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/html_sanitizer.py
"""HTML sanitization for rendered output.

This module defangs the final HTML string produced by the pipeline. It is not
an HTML parser: it recognizes tags and attribute assignments lexically and
applies three independent passes:

- dangerous elements (``script``, ``iframe``, ...) are escaped so they render
  as visible text
- attribute values using a dangerous scheme (``javascript:``, ``data:``,
  ``expression:``) are removed, except on ``data-*`` attributes
- ``on*`` event-handler attributes are stripped from every tag
"""

from __future__ import annotations

import logging
import re

from md2html.constants import (
    DANGEROUS_HTML_ELEMENTS,
    DANGEROUS_SCHEMES,
    EVENT_HANDLER_PREFIX,
    SAFE_ATTRIBUTE_PREFIX,
)
from md2html.utils.escape import escape_html

logger = logging.getLogger(__name__)

_ELEMENTS_ALTERNATION = "|".join(sorted(DANGEROUS_HTML_ELEMENTS))
_SCHEMES_ALTERNATION = "|".join(re.escape(scheme) for scheme in DANGEROUS_SCHEMES)

_DANGEROUS_TAG_RE = re.compile(rf"<(/?)\s*(?:{_ELEMENTS_ALTERNATION})\b[^>]*>", re.IGNORECASE)

# An attribute starts after whitespace, a '/' or directly after a closing quote
_ATTRIBUTE_BOUNDARY = r"""(?:(?<![\s/])[\s/]+|(?<=["']))"""
_ATTRIBUTE_NAME = r"""[^\s"'<>/=]+"""

_DANGEROUS_ATTRIBUTE_RE = re.compile(
    rf"""{_ATTRIBUTE_BOUNDARY}(?!{re.escape(SAFE_ATTRIBUTE_PREFIX)}){_ATTRIBUTE_NAME}\s*=\s*
        (?:
            "\s*(?:{_SCHEMES_ALTERNATION})[^"]*"
          | '\s*(?:{_SCHEMES_ALTERNATION})[^']*'
          | (?:{_SCHEMES_ALTERNATION})[^\s>]*
        )""",
    re.IGNORECASE | re.VERBOSE,
)

_TAG_RE = re.compile(r"<[^>]+>")

_EVENT_HANDLER_RE = re.compile(
    rf"""{_ATTRIBUTE_BOUNDARY}{EVENT_HANDLER_PREFIX}{_ATTRIBUTE_NAME}\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]*)""",
    re.IGNORECASE,
)


def escape_dangerous_tags(content: str) -> str:
    """Escape start and end tags of denylisted elements.

    Parameters
    ----------
    content : str
        HTML content

    Returns
    -------
    str
        Content where every denylisted tag is rendered as escaped text

    Examples
    --------
        >>> escape_dangerous_tags("<script>x</script>")
        '&#60;script&#62;x&#60;/script&#62;'

    """
    return _DANGEROUS_TAG_RE.sub(lambda m: escape_html(m.group(0)), content)


def strip_dangerous_attributes(content: str) -> str:
    """Remove attribute assignments whose value uses a dangerous scheme.

    ``data-*`` attributes are exempt: they share a prefix with the ``data:``
    URI scheme but are never dereferenced by the browser.

    Parameters
    ----------
    content : str
        HTML content

    Returns
    -------
    str
        Content without ``javascript:``, ``data:`` or ``expression:`` attribute values

    Examples
    --------
        >>> strip_dangerous_attributes('<a href="javascript:alert(1)">x</a>')
        '<a>x</a>'
        >>> strip_dangerous_attributes('<div data-src="data:text">x</div>')
        '<div data-src="data:text">x</div>'

    """
    return _DANGEROUS_ATTRIBUTE_RE.sub("", content)


def strip_event_handlers(content: str) -> str:
    """Remove ``on*`` event-handler attributes from every tag.

    Parameters
    ----------
    content : str
        HTML content

    Returns
    -------
    str
        Content whose tags carry no event-handler attributes

    """
    return _TAG_RE.sub(lambda m: _EVENT_HANDLER_RE.sub("", m.group(0)), content)


def _sanitize_once(content: str) -> str:
    content = escape_dangerous_tags(content)
    content = strip_dangerous_attributes(content)
    return strip_event_handlers(content)


def sanitize_html(content: str) -> str:
    """Defang dangerous tags and attributes in an HTML string.

    The passes are repeated until the content stops changing, so removing one
    attribute can never splice the surrounding text into a new dangerous tag
    or attribute. Each round either leaves the content unchanged or removes
    characters or raw ``<`` signs, which bounds the number of rounds.

    Parameters
    ----------
    content : str
        HTML content to sanitize

    Returns
    -------
    str
        Sanitized HTML. Sanitizing the result again returns it unchanged.

    Examples
    --------
        >>> sanitize_html('<p onclick="x()">Hi</p><script>alert(1)</script>')
        '<p>Hi</p>&#60;script&#62;alert(1)&#60;/script&#62;'

    """
    rounds = 0
    while True:
        sanitized = _sanitize_once(content)
        rounds += 1
        if sanitized == content:
            break
        content = sanitized

    if rounds > 2:
        logger.debug(f"HTML sanitization reached a fixed point after {rounds} rounds")
    return content
