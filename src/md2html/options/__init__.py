#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for md2html."""

from md2html.options.base import CloneFrozenMixin
from md2html.options.html import Md2HtmlOptions

__all__ = ["CloneFrozenMixin", "Md2HtmlOptions"]
