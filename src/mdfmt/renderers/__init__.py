#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/renderers/__init__.py
"""Renderers turning the mdfmt AST back into markdown."""

from mdfmt.renderers.base import BaseRenderer
from mdfmt.renderers.markdown import NOT_HANDLED, HookResult, MarkdownRenderer, render_markdown

__all__ = ["BaseRenderer", "HookResult", "MarkdownRenderer", "NOT_HANDLED", "render_markdown"]
