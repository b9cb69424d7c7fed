#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/ast/nodes.py
"""AST node classes for markdown document representation.

This module defines the node hierarchy produced by the markdown parser and
consumed by the markdown renderer. Each node represents a structural or
inline element of the document.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern
through ``accept(visitor, entering)``.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, HTMLBlock

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Strikethrough, Code
    - Link, Image, LineBreak, HTMLInline

Container nodes (``is_container = True``) are visited twice by the walker,
once when entering and once when leaving. Leaf nodes are visited once, with
``entering=True``.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Literal, Optional

if TYPE_CHECKING:
    from mdfmt.ast.visitors import NodeVisitor, WalkStatus

Alignment = Literal["left", "center", "right"]


class Node:
    """Base class for all AST nodes.

    Subclasses override ``accept`` to dispatch to their ``visit_*`` method.
    A node kind that a visitor has no method for falls through to
    ``visitor.generic_visit``.

    """

    is_container: ClassVar[bool] = False

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : NodeVisitor
            A visitor object with visit_* methods
        entering : bool
            True when the walker enters the node, False when it leaves

        Returns
        -------
        WalkStatus or None
            Traversal signal returned by the visitor

        """
        return visitor.generic_visit(self, entering)


@dataclass
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes of the document

    """

    is_container: ClassVar[bool] = True

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self, entering)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text

    """

    is_container: ClassVar[bool] = True

    level: int
    content: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self, entering)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    is_container: ClassVar[bool] = True

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self, entering)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    content : str
        Literal code, usually newline-terminated
    info : str, default = ''
        Raw info string following the opening fence

    """

    content: str
    info: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self, entering)


@dataclass
class BlockQuote(Node):
    """Block quote containing block-level children."""

    is_container: ClassVar[bool] = True

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self, entering)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number found in the source for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)

    """

    is_container: ClassVar[bool] = True

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self, entering)


@dataclass
class ListItem(Node):
    """List item node.

    Items of loose lists hold Paragraph children. Items of tight lists hold
    their inline nodes directly.

    """

    is_container: ClassVar[bool] = True

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, entering)


@dataclass
class Table(Node):
    """Table node (GFM extension).

    Parameters
    ----------
    header : TableRow or None, default = None
        Header row
    rows : list of TableRow, default = empty list
        Body rows

    """

    is_container: ClassVar[bool] = True

    header: Optional[TableRow] = None
    rows: list[TableRow] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self, entering)


@dataclass
class TableRow(Node):
    """Table row node."""

    is_container: ClassVar[bool] = True

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self, entering)


@dataclass
class TableCell(Node):
    """Table cell node holding inline content."""

    is_container: ClassVar[bool] = True

    content: list[Node] = field(default_factory=list)
    alignment: Optional[Alignment] = None

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self, entering)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_thematic_break``."""
        return visitor.visit_thematic_break(self, entering)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, kept verbatim."""

    content: str

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_html_block``."""
        return visitor.visit_html_block(self, entering)


@dataclass
class Text(Node):
    """Plain text fragment.

    The parser does not merge adjacent fragments, so an escaped character
    such as ``\\.`` in the source arrives as its own Text node.

    """

    content: str

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self, entering)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) span."""

    is_container: ClassVar[bool] = True

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self, entering)


@dataclass
class Strong(Node):
    """Strong (bold) span."""

    is_container: ClassVar[bool] = True

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self, entering)


@dataclass
class Strikethrough(Node):
    """Strikethrough span (GFM extension)."""

    is_container: ClassVar[bool] = True

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_strikethrough``."""
        return visitor.visit_strikethrough(self, entering)


@dataclass
class Code(Node):
    """Inline code span."""

    content: str

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self, entering)


@dataclass
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    url : str
        Link destination
    content : list of Node, default = empty list
        Inline nodes representing the link text
    title : str or None, default = None
        Optional link title

    """

    is_container: ClassVar[bool] = True

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self, entering)


@dataclass
class Image(Node):
    """Embedded image.

    Parameters
    ----------
    url : str
        Image source URL
    content : list of Node, default = empty list
        Inline nodes making up the alternative text
    title : str or None, default = None
        Optional image title

    """

    is_container: ClassVar[bool] = True

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self, entering)


@dataclass
class LineBreak(Node):
    """Line break.

    Parameters
    ----------
    soft : bool, default = False
        True for a soft break (a plain newline in the source), False for a
        hard break

    """

    soft: bool = False

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_line_break``."""
        return visitor.visit_line_break(self, entering)


@dataclass
class HTMLInline(Node):
    """Inline raw HTML, kept verbatim."""

    content: str

    def accept(self, visitor: NodeVisitor, entering: bool) -> Optional[WalkStatus]:
        """Dispatch to ``visitor.visit_html_inline``."""
        return visitor.visit_html_inline(self, entering)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node in document order.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, (Document, BlockQuote, ListItem)):
        return list(node.children)

    if isinstance(node, (Heading, Paragraph, Emphasis, Strong, Strikethrough, Link, Image, TableCell)):
        return list(node.content)

    if isinstance(node, List):
        return list(node.items)

    if isinstance(node, Table):
        children: list[Node] = []
        if node.header:
            children.append(node.header)
        children.extend(node.rows)
        return children

    if isinstance(node, TableRow):
        return list(node.cells)

    return []
