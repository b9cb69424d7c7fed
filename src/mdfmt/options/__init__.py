#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/options/__init__.py
"""Options dataclasses for the mdfmt parser and renderer."""

from mdfmt.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdfmt.options.markdown import MarkdownParserOptions, MarkdownRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
]
