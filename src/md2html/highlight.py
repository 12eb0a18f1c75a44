#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/highlight.py
"""Syntax highlighting capability for fenced code blocks.

A highlighter is any object with two methods, ``highlight(code, language)``
and ``highlight_auto(code)``, each returning an HTML fragment. Either method
may raise; the pipeline treats highlighting as best-effort and falls back to
the raw code.

:class:`PygmentsHighlighter` adapts Pygments to this interface. Pygments is an
optional dependency (``pip install 'md2html[highlight]'``).
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from md2html.constants import HIGHLIGHT_CSS_CLASS
from md2html.exceptions import HighlightError
from md2html.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


@runtime_checkable
class Highlighter(Protocol):
    """Interface for syntax highlighters used when rendering code blocks."""

    def highlight(self, code: str, language: str) -> str:
        """Highlight ``code`` written in ``language`` and return HTML."""
        ...

    def highlight_auto(self, code: str) -> str:
        """Highlight ``code`` in a detected language and return HTML."""
        ...


class PygmentsHighlighter:
    """Highlighter backed by Pygments.

    Output is a sequence of ``<span>`` elements carrying Pygments token
    classes, without any enclosing ``<pre>``/``<div>``; the pipeline supplies
    the ``<pre><code>`` wrapper.

    Parameters
    ----------
    style : str, default "default"
        Pygments style name, used by :meth:`get_style_defs`
    classprefix : str, default ""
        Prefix prepended to every token CSS class

    Raises
    ------
    DependencyError
        If Pygments is not installed

    Examples
    --------
        >>> from md2html import md2html
        >>> html = md2html("```python\\nprint(1)\\n```", highlighter=PygmentsHighlighter())

    """

    @requires_dependencies("highlight", {"pygments": ">=2.15"})
    def __init__(self, style: str = "default", classprefix: str = "") -> None:
        from pygments.formatters import HtmlFormatter

        self.style = style
        self.classprefix = classprefix
        self._formatter: Any = HtmlFormatter(nowrap=True, style=style, classprefix=classprefix)

    def highlight(self, code: str, language: str) -> str:
        """Highlight code using the lexer registered for ``language``.

        Raises
        ------
        HighlightError
            If Pygments has no lexer for ``language``

        """
        from pygments.lexers import get_lexer_by_name
        from pygments.util import ClassNotFound

        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound as e:
            raise HighlightError(f"No lexer found for language '{language}'", language=language, original_error=e) from e

        return self._render(code, lexer)

    def highlight_auto(self, code: str) -> str:
        """Highlight code using the lexer Pygments guesses from its content.

        Raises
        ------
        HighlightError
            If no lexer can be guessed for the code

        """
        from pygments.lexers import guess_lexer
        from pygments.util import ClassNotFound

        try:
            lexer = guess_lexer(code)
        except ClassNotFound as e:
            raise HighlightError("Could not guess a lexer for code block", original_error=e) from e

        logger.debug(f"Guessed lexer {lexer.name!r} for code block")
        return self._render(code, lexer)

    def get_style_defs(self, selector: str = f".{HIGHLIGHT_CSS_CLASS}") -> str:
        """Return the CSS rules for the configured style scoped to ``selector``."""
        return self._formatter.get_style_defs(selector)

    def _render(self, code: str, lexer: Any) -> str:
        from pygments import highlight

        return highlight(code, lexer, self._formatter).rstrip("\n")
