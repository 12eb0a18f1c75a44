#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown to HTML conversion."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2html.constants import DEFAULT_JOIN_CHARACTER, DEFAULT_UNSAFE
from md2html.exceptions import ValidationError
from md2html.highlight import Highlighter
from md2html.options.base import CloneFrozenMixin


# src/md2html/options/html.py
@dataclass(frozen=True)
class Md2HtmlOptions(CloneFrozenMixin):
    """Configuration options for converting Markdown to HTML.

    Parameters
    ----------
    unsafe : bool, default False
        Skip output sanitization. Only for trusted input: raw ``<script>``
        tags and event handlers are passed through.
    join_character : str, default ""
        String placed between top-level blocks (paragraphs, lists, tables...)
    highlighter : Highlighter or None, default None
        Syntax highlighter for fenced code blocks. Any object with
        ``highlight(code, language)`` and ``highlight_auto(code)`` methods
        returning HTML; exceptions it raises are caught and the code is
        rendered unhighlighted.

    Examples
    --------
    Separate paragraphs with newlines:

        >>> options = Md2HtmlOptions(join_character="\\n")

    """

    unsafe: bool = field(
        default=DEFAULT_UNSAFE,
        metadata={"help": "Pass HTML through without sanitization (trusted input only)", "importance": "security"},
    )
    join_character: str = field(
        default=DEFAULT_JOIN_CHARACTER,
        metadata={"help": "String inserted between top-level blocks", "importance": "core"},
    )
    highlighter: Highlighter | None = field(
        default=None,
        metadata={"help": "Syntax highlighter used for fenced code blocks", "importance": "advanced"},
        compare=False,
    )

    def __post_init__(self) -> None:
        """Validate option types.

        Raises
        ------
        ValidationError
            If a field holds a value of the wrong type

        """
        if not isinstance(self.unsafe, bool):
            raise ValidationError(
                f"unsafe must be a bool, got {type(self.unsafe).__name__}",
                parameter_name="unsafe",
                parameter_value=self.unsafe,
            )
        if not isinstance(self.join_character, str):
            raise ValidationError(
                f"join_character must be a str, got {type(self.join_character).__name__}",
                parameter_name="join_character",
                parameter_value=self.join_character,
            )
        if self.highlighter is not None and not isinstance(self.highlighter, Highlighter):
            raise ValidationError(
                "highlighter must provide highlight(code, language) and highlight_auto(code) methods",
                parameter_name="highlighter",
                parameter_value=self.highlighter,
            )
