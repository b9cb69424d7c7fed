#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/parsers/markdown.py
"""Markdown to AST converter.

This module parses markdown with mistune and converts the resulting token
stream into mdfmt AST nodes. Text tokens are kept as separate fragments so
the renderer can make its escaping decisions per fragment.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

import mistune

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
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from mdfmt.exceptions import ParsingError
from mdfmt.options.markdown import MarkdownParserOptions
from mdfmt.parsers.base import BaseParser, ParserInput

logger = logging.getLogger(__name__)


class MarkdownToAstConverter(BaseParser):
    """Convert markdown to the mdfmt AST using mistune.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Examples
    --------
    >>> doc = MarkdownToAstConverter().parse("# Title\\n\\nSome *text*.")
    >>> [type(child).__name__ for child in doc.children]
    ['Heading', 'Paragraph']

    """

    def __init__(self, options: Optional[MarkdownParserOptions] = None):
        """Initialize the markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self._markdown = mistune.create_markdown(plugins=self._plugins(), renderer=None)

    def _plugins(self) -> list[str]:
        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_autolinks:
            plugins.append("url")
        return plugins

    def parse(self, input_data: ParserInput) -> Document:
        """Parse markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, bytes, Path or IO[bytes]
            Markdown content, a path to a markdown file, or a binary stream

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = self._load_text_content(input_data)

        try:
            tokens, _state = self._markdown.parse(markdown_content)
        except Exception as e:
            raise ParsingError(f"Failed to parse markdown: {e}", parsing_stage="tokenize", original_error=e) from e

        if not isinstance(tokens, list):
            raise ParsingError("mistune returned rendered output instead of tokens", parsing_stage="tokenize")

        children = self._process_tokens(tokens)
        logger.debug(f"Parsed markdown into {len(children)} top-level blocks")
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is None:
                continue
            if isinstance(node, list):
                nodes.extend(node)
            else:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Convert one block-level token.

        ``block_text`` (the content of a tight list item) is returned as a
        bare list of inline nodes so it does not count as a paragraph.
        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type == "paragraph":
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_text":
            return self._process_inline_tokens(token.get("children", []))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", "").rstrip("\n"))
        elif token_type == "blank_line":
            return None

        logger.debug(f"Skipping unsupported block token: {token_type}")
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        level = token.get("attrs", {}).get("level", 1)
        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        info = token.get("attrs", {}).get("info") or ""
        return CodeBlock(content=token.get("raw", ""), info=info)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if child.get("type") == "list_item"
        ]
        return List(
            ordered=attrs.get("ordered", False),
            items=items,
            start=attrs.get("start", 1),
            tight=token.get("tight", True),
        )

    def _process_table(self, token: dict[str, Any]) -> Table:
        header = None
        rows = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                header = TableRow(cells=self._process_table_cells(section.get("children", [])), is_header=True)
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        return [
            TableCell(
                content=self._process_inline_tokens(cell_token.get("children", [])),
                alignment=cell_token.get("attrs", {}).get("align"),
            )
            for cell_token in cell_tokens
        ]

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the alt text arrives as inline children."""
        attrs = token.get("attrs", {})
        return Image(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug(f"Skipping unsupported inline token: {token_type}")
        return None


def markdown_to_ast(source: ParserInput, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert markdown to an AST Document.

    Parameters
    ----------
    source : str, bytes, Path or IO[bytes]
        Markdown to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(source)
