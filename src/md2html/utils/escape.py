#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/escape.py
"""HTML character escaping utilities.

Escaping uses decimal numeric character references (``&#60;``) rather than
named entities, so the output carries no raw HTML-significant characters.

"""

from __future__ import annotations

import re

from md2html.constants import HTML_SPECIAL_CHARS

_HTML_SPECIAL_RE = re.compile(f"[{re.escape(HTML_SPECIAL_CHARS)}]")


def numeric_entity(char: str) -> str:
    """Return the decimal numeric character reference for a single character.

    Parameters
    ----------
    char : str
        A single character

    Returns
    -------
    str
        Character reference such as ``&#42;``

    Examples
    --------
        >>> numeric_entity("*")
        '&#42;'

    """
    return f"&#{ord(char)};"


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` as numeric character references.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text safe for inclusion in HTML content and attribute values

    Examples
    --------
        >>> escape_html('<a href="x">')
        '&#60;a href=&#34;x&#34;&#62;'

    """
    if not text:
        return text

    return _HTML_SPECIAL_RE.sub(lambda m: numeric_entity(m.group(0)), text)
