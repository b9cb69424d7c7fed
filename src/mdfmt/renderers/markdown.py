#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/renderers/markdown.py
"""Markdown rendering from AST.

This module re-emits a parsed document as canonical markdown. The renderer
is a ``NodeVisitor`` driven by ``walk``: it receives one callback per leaf
and two per container, and writes markdown tokens as it goes.

Output conventions
------------------
- Blocks are separated by one blank line, with none before the first block.
- ATX headings (``#``) by default; setext underlines for levels 1-2 on request.
- ``-`` bullets and ``N.`` ordinals renumbered from 1, item content indented
  by one indent unit (a tab by default).
- Fenced code blocks with triple backticks and the first info word as tag.
- ``*em*``, ``**strong**``, ``~~strike~~``, `` `code` ``.
- A text fragment that is a lone structural character is backslash-escaped,
  and so is a ``.`` that follows a numeric fragment.

Nested content (list items, block quotes, inline spans, links) is rendered
into a temporary buffer and emitted in one piece when the container is left,
so the container can prefix, indent or wrap it.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import StringIO
from typing import Optional

from mdfmt.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    NodeVisitor,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    Text,
    ThematicBreak,
    WalkStatus,
    walk,
)
from mdfmt.constants import ANSI_BOLD, ANSI_RESET, CODE_FENCE, SETEXT_UNDERLINES, THEMATIC_BREAK
from mdfmt.exceptions import RenderingError
from mdfmt.options.markdown import MarkdownRendererOptions
from mdfmt.renderers.base import BaseRenderer
from mdfmt.utils.code_format import format_code, is_formattable
from mdfmt.utils.text import (
    clean_without_trim,
    escape_url,
    expand_leading_tabs,
    fence_language,
    indent_lines,
    needs_escaping,
    string_width,
    terminal_string_width,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HookResult:
    """Outcome of a render node hook.

    Parameters
    ----------
    handled : bool
        True if the hook rendered the node itself and the built-in handling
        must be skipped
    status : WalkStatus, default GO_TO_NEXT
        Signal passed to the walker when ``handled`` is True

    """

    handled: bool
    status: WalkStatus = WalkStatus.GO_TO_NEXT


NOT_HANDLED = HookResult(handled=False)


@dataclass
class _ListLevel:
    """Per-depth list state, pushed on entering a List and popped on leaving it."""

    ordered: bool = False
    counter: int = 1
    paragraph: bool = False
    last_item: Optional[ListItem] = None
    current_item: Optional[ListItem] = None


class MarkdownRenderer(NodeVisitor, BaseRenderer):
    """Render an AST Document as canonical markdown.

    One renderer instance serves one traversal at a time. All walk state is
    reset at the start of ``render_to_string``, so an instance may be reused
    for consecutive documents but not for nested or concurrent renders.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options

    Examples
    --------
    >>> from mdfmt.ast import Document, Paragraph, Strong, Text
    >>> doc = Document(children=[Paragraph(content=[Strong(content=[Text("bold")])])])
    >>> MarkdownRenderer().render_to_string(doc)
    '**bold**\\n'

    """

    def __init__(self, options: Optional[MarkdownRendererOptions] = None):
        """Initialize the markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._string_width = terminal_string_width if options.terminal else string_width
        self._rendering = False
        self._reset_state()

    def _reset_state(self) -> None:
        self._sinks: list[tuple[StringIO, int]] = [(StringIO(), 0)]
        self._levels: list[_ListLevel] = [_ListLevel()]
        self._last_normal_text = ""
        self._last_output_len = 0

    @property
    def list_depth(self) -> int:
        """Current list nesting depth, 0 outside any list."""
        return len(self._levels) - 1

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a markdown string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        RenderingError
            If called while this renderer is already walking a document

        """
        if self._rendering:
            raise RenderingError("MarkdownRenderer is already rendering a document", rendering_stage="walk")

        self._rendering = True
        try:
            self._reset_state()
            walk(doc, self)
            # A terminated walk can leave nested buffers open
            while len(self._sinks) > 1:
                self._out(self._pop_sink())
            return self._sinks[0][0].getvalue()
        finally:
            self._rendering = False

    def visit(self, node: Node, entering: bool) -> WalkStatus:
        """Render one node, giving the render node hook the first chance.

        Parameters
        ----------
        node : Node
            Node being visited
        entering : bool
            True on the way down, False on the way back up

        Returns
        -------
        WalkStatus
            The hook's status if it handled the node, otherwise ``GO_TO_NEXT``

        """
        hook = self.options.render_node_hook
        if hook is not None:
            result = hook(self, node, entering)
            if result is not None and result.handled:
                return result.status

        node.accept(self, entering)
        return WalkStatus.GO_TO_NEXT

    def write(self, text: str) -> None:
        """Write raw text to the current output buffer.

        This is the output channel for render node hooks.
        """
        self._out(text)

    def _out(self, text: str) -> None:
        self._sinks[-1][0].write(text)
        self._last_output_len = len(text)

    def _cr(self) -> None:
        """Write a newline unless nothing has been written to the current buffer."""
        if self._last_output_len > 0:
            self._out("\n")

    def _drop_trailing_space(self) -> None:
        """Remove one space at the end of the current buffer, if present."""
        buffer = self._sinks[-1][0]
        value = buffer.getvalue()
        if value.endswith(" "):
            buffer.seek(len(value) - 1)
            buffer.truncate()

    def _push_sink(self) -> None:
        self._sinks.append((StringIO(), self._last_output_len))
        self._last_output_len = 0

    def _pop_sink(self) -> str:
        if len(self._sinks) == 1:
            raise RenderingError("Unbalanced container visits: no nested buffer to close", rendering_stage="walk")
        buffer, saved_len = self._sinks.pop()
        self._last_output_len = saved_len
        return buffer.getvalue()

    def visit_document(self, node: Document, entering: bool) -> None:
        pass

    def visit_paragraph(self, node: Paragraph, entering: bool) -> None:
        if entering:
            self._cr()
            level = self._levels[-1]
            # Only a paragraph directly inside the current item makes the list loose
            if level.current_item is not None and any(child is node for child in level.current_item.children):
                level.paragraph = True
        else:
            self._out("\n")

    def visit_heading(self, node: Heading, entering: bool) -> None:
        if entering:
            self._cr()
            self._push_sink()
            return

        text = self._pop_sink()
        if text and self.options.heading_style == "setext" and node.level in SETEXT_UNDERLINES:
            underline = SETEXT_UNDERLINES[node.level] * max(self._string_width(text), 1)
            self._out(f"{text}\n{underline}\n")
            return

        # An ATX heading is a single line
        text = " ".join(part.strip() for part in text.split("\n"))
        self._out(f"{'#' * node.level} {text}\n" if text else "#" * node.level + "\n")

    def visit_thematic_break(self, node: ThematicBreak, entering: bool) -> None:
        self._cr()
        self._out(THEMATIC_BREAK + "\n")

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> None:
        if entering:
            self._cr()
            self._push_sink()
            return

        lines = self._pop_sink().split("\n")
        if lines[-1] == "":
            lines.pop()
        if not lines:
            self._out(">\n")
            return
        for line in lines:
            # Tabs after "> " do not land on a tab stop, so indents are spelled out as spaces
            line = expand_leading_tabs(line)
            self._out(f"> {line}\n" if line else ">\n")

    def visit_html_block(self, node: HTMLBlock, entering: bool) -> None:
        self._cr()
        self._out(node.content)
        self._out("\n")

    def visit_code_block(self, node: CodeBlock, entering: bool) -> None:
        self._cr()
        language = fence_language(node.info)
        self._out(CODE_FENCE + language + "\n")

        code = node.content
        if self.options.format_code_blocks and is_formattable(language):
            code, formatted = format_code(language, code)
            if formatted:
                logger.debug(f"Reformatted {language} code block")

        self._out(code)
        if code and not code.endswith("\n"):
            self._out("\n")
        self._out(CODE_FENCE + "\n")

    def visit_list(self, node: List, entering: bool) -> None:
        if entering:
            self._cr()
            last_item = node.items[-1] if node.items else None
            self._levels.append(_ListLevel(ordered=node.ordered, last_item=last_item))
            return

        if len(self._levels) == 1:
            raise RenderingError("Unbalanced list visits: left a list that was never entered", rendering_stage="walk")
        self._levels.pop()

    def visit_list_item(self, node: ListItem, entering: bool) -> None:
        level = self._levels[-1]
        if entering:
            level.current_item = node
            self._push_sink()
            return

        body = self._pop_sink().rstrip("\n")
        level.current_item = None
        if level.ordered:
            marker = f"{level.counter}."
            level.counter += 1
        else:
            marker = "-"

        self._out(marker + indent_lines(body, self.options.list_indent))
        self._out("\n")

        if level.paragraph:
            if node is not level.last_item:
                self._out("\n")
            level.paragraph = False

    def visit_text(self, node: Text, entering: bool) -> None:
        literal = node.content
        if needs_escaping(literal, self._last_normal_text):
            literal = "\\" + literal
        self._last_normal_text = node.content

        if self.list_depth > 0 and literal == "\n":
            return

        cleaned = clean_without_trim(literal)
        if cleaned:
            self._out(cleaned)

    def visit_table(self, node: Table, entering: bool) -> None:
        if entering:
            self._cr()
        else:
            self._out("\n")

    def visit_line_break(self, node: LineBreak, entering: bool) -> None:
        if node.soft:
            self._drop_trailing_space()
            self._cr()
        else:
            self._out("  \n")

    def visit_emphasis(self, node: Emphasis, entering: bool) -> None:
        if entering:
            self._push_sink()
            return
        content = self._pop_sink()
        if content:
            self._out(f"*{content}*")

    def visit_strong(self, node: Strong, entering: bool) -> None:
        if entering:
            self._push_sink()
            return
        content = f"**{self._pop_sink()}**"
        if self.options.terminal:
            content = ANSI_BOLD + content + ANSI_RESET
        self._out(content)

    def visit_strikethrough(self, node: Strikethrough, entering: bool) -> None:
        if entering:
            self._push_sink()
            return
        self._out(f"~~{self._pop_sink()}~~")

    def visit_code(self, node: Code, entering: bool) -> None:
        self._out(f"`{node.content}`")

    def visit_html_inline(self, node: HTMLInline, entering: bool) -> None:
        self._out(node.content)

    def visit_link(self, node: Link, entering: bool) -> None:
        if entering:
            self._push_sink()
            return
        self._out(f"[{self._pop_sink()}]{self._destination(node.url, node.title)}")

    def visit_image(self, node: Image, entering: bool) -> None:
        if entering:
            self._push_sink()
            return
        self._out(f"![{self._pop_sink()}]{self._destination(node.url, node.title)}")

    @staticmethod
    def _destination(url: str, title: Optional[str]) -> str:
        if title:
            return f'({escape_url(url)} "{title}")'
        return f"({escape_url(url)})"


def render_markdown(doc: Document, options: Optional[MarkdownRendererOptions] = None) -> str:
    """Render a document AST to a markdown string.

    Parameters
    ----------
    doc : Document
        The document to render
    options : MarkdownRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        Markdown text

    """
    return MarkdownRenderer(options).render_to_string(doc)
