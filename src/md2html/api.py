"""The exported conversion entry point."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2html/api.py
from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Mapping

from md2html.blocks import transform_blocks
from md2html.exceptions import ValidationError
from md2html.inlines import transform_inlines
from md2html.options import Md2HtmlOptions
from md2html.placeholders import PlaceholderRegistry, extract, reinsert
from md2html.utils.decorators import debug_timer
from md2html.utils.html_sanitizer import sanitize_html

logger = logging.getLogger(__name__)


def _resolve_options(options: Md2HtmlOptions | Mapping[str, Any] | None, kwargs: dict[str, Any]) -> Md2HtmlOptions:
    """Merge an options object or mapping and keyword overrides over the defaults.

    Parameters
    ----------
    options : Md2HtmlOptions, mapping or None
        Base options. A mapping is treated like keyword arguments.
    kwargs : dict
        Keyword overrides; they take precedence over ``options``.

    Returns
    -------
    Md2HtmlOptions
        Resolved options

    Raises
    ------
    ValidationError
        If ``options`` has an unsupported type or a value fails validation

    """
    if options is None:
        base = Md2HtmlOptions()
    elif isinstance(options, Md2HtmlOptions):
        base = options
    elif isinstance(options, Mapping):
        base = Md2HtmlOptions()
        kwargs = {**options, **kwargs}
    else:
        raise ValidationError(
            f"options must be Md2HtmlOptions or a mapping, got {type(options).__name__}",
            parameter_name="options",
            parameter_value=options,
        )

    if not kwargs:
        return base

    option_names = {f.name for f in fields(Md2HtmlOptions)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown options: {missing}")
    return base.create_updated(**valid_kwargs)


def md2html(markdown: Any, options: Md2HtmlOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> str:
    """Convert Markdown text to an HTML string.

    The conversion runs once through a fixed pipeline:

    1. code extraction (fenced blocks, inline code, backslash escapes, ``%%`` comments)
    2. block transform (headings, lists, rules, quotes, tables, paragraphs)
    3. inline transform (emphasis, strikethrough, autolinks, images, links)
    4. code reinsertion, with optional syntax highlighting
    5. sanitization, unless ``unsafe`` is set

    Parameters
    ----------
    markdown : str
        Markdown source. Any non-``str`` value converts to ``""``.
    options : Md2HtmlOptions or mapping, optional
        Conversion options. Defaults to ``Md2HtmlOptions()``.
    **kwargs
        Individual option overrides (``unsafe``, ``join_character``,
        ``highlighter``), applied over ``options``. Unknown names are ignored.

    Returns
    -------
    str
        Rendered HTML. Never raises for ``str`` input: malformed constructs
        pass through as text and highlighter failures fall back to plain code.

    Raises
    ------
    ValidationError
        If the options are invalid. Options are only resolved for ``str`` input

    Examples
    --------
        >>> md2html("# Title\\n\\nSome **bold** text")
        '<h1>Title</h1><p>Some <strong>bold</strong> text</p>'

        >>> md2html("<script>alert(1)</script>", unsafe=True)
        '<script>alert(1)</script>'

    """
    if not isinstance(markdown, str):
        logger.debug(f"Expected str input, got {type(markdown).__name__}; returning empty output")
        return ""

    resolved = _resolve_options(options, kwargs)

    registry = PlaceholderRegistry()
    text = markdown.replace("\r\n", "\n").replace("\r", "\n")

    with debug_timer(logger, "Code extraction"):
        text = extract(text, registry)
    with debug_timer(logger, "Block transform"):
        text = transform_blocks(text, resolved.join_character)
    with debug_timer(logger, "Inline transform"):
        text = transform_inlines(text)
    with debug_timer(logger, "Code reinsertion"):
        text = reinsert(text, registry, resolved.highlighter)

    if resolved.unsafe:
        return text

    with debug_timer(logger, "Sanitization"):
        return sanitize_html(text)
