#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/options/markdown.py
"""Configuration options for markdown parsing and rendering.

This module defines the frozen options dataclasses consumed by
``MarkdownToAstConverter`` and ``MarkdownRenderer``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from mdfmt.constants import (
    DEFAULT_FORMAT_CODE_BLOCKS,
    DEFAULT_HEADING_STYLE,
    DEFAULT_LIST_INDENT,
    DEFAULT_TERMINAL,
    HeadingStyle,
)
from mdfmt.options.base import BaseParserOptions, BaseRendererOptions

if TYPE_CHECKING:
    from mdfmt.ast.nodes import Node
    from mdfmt.renderers.markdown import HookResult, MarkdownRenderer

    RenderNodeHook = Callable[[MarkdownRenderer, Node, bool], HookResult]


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Markdown rendering options.

    Parameters
    ----------
    terminal : bool, default False
        Wrap strong text in ANSI bold/reset sequences and discount those
        sequences when measuring text width.
    render_node_hook : callable, optional
        Called as ``hook(renderer, node, entering)`` before the built-in
        handling of every node. When the returned ``HookResult`` reports
        ``handled=True`` the built-in handling is skipped and the result's
        status is passed to the walker. Hooks emit text through
        ``renderer.write()``.
    heading_style : {"atx", "setext"}, default "atx"
        ``"atx"`` writes ``#`` prefixes for every level. ``"setext"`` underlines
        levels 1 and 2 with ``=`` and ``-``; deeper levels stay ATX.
    list_indent : str, default "\\t"
        Indent unit prefixed to each line of a list item's content.
    format_code_blocks : bool, default True
        Run fenced code through a registered source formatter when its
        language tag is recognized.

    """

    terminal: bool = field(
        default=DEFAULT_TERMINAL,
        metadata={"help": "Emit ANSI bold sequences around strong text", "importance": "core"},
    )
    render_node_hook: Optional[RenderNodeHook] = field(
        default=None,
        compare=False,
        metadata={"help": "Callable overriding rendering of individual nodes", "exclude_from_cli": True},
    )
    heading_style: HeadingStyle = field(
        default=DEFAULT_HEADING_STYLE,
        metadata={
            "help": "Heading style for levels 1-2: atx (#) or setext (underlined)",
            "choices": ["atx", "setext"],
            "importance": "core",
        },
    )
    list_indent: str = field(
        default=DEFAULT_LIST_INDENT,
        metadata={"help": "Whitespace used to indent list item content", "importance": "advanced"},
    )
    format_code_blocks: bool = field(
        default=DEFAULT_FORMAT_CODE_BLOCKS,
        metadata={"help": "Reformat fenced code blocks in supported languages", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        if self.heading_style not in ("atx", "setext"):
            raise ValueError(f"heading_style must be 'atx' or 'setext', got {self.heading_style!r}")
        if not self.list_indent or self.list_indent.strip(" \t") or "\n" in self.list_indent:
            raise ValueError(f"list_indent must be a non-empty run of spaces or tabs, got {self.list_indent!r}")
        if self.render_node_hook is not None and not callable(self.render_node_hook):
            raise ValueError("render_node_hook must be callable")


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Markdown parsing options.

    Fenced code, autolinks, strikethrough and tables are all enabled by
    default. ATX headings always require a space after the ``#`` run and
    blocks never require a preceding blank line.

    """

    parse_tables: bool = field(
        default=True, metadata={"help": "Parse GitHub-style tables", "importance": "core"}
    )
    parse_strikethrough: bool = field(
        default=True, metadata={"help": "Parse ~~strikethrough~~ spans", "importance": "core"}
    )
    parse_autolinks: bool = field(
        default=True, metadata={"help": "Turn bare URLs into links", "importance": "core"}
    )
