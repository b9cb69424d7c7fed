#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/ast/visitors.py
"""Visitor pattern and tree walker for AST traversal.

The walker drives a depth-first traversal and calls back into a visitor once
per leaf node and twice per container node (entering and leaving). Visitors
steer the walk with the ``WalkStatus`` they return.

"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from mdfmt.ast.nodes import (
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
    get_node_children,
)


class WalkStatus(Enum):
    """Traversal signal returned from a visit."""

    GO_TO_NEXT = "go_to_next"
    SKIP_CHILDREN = "skip_children"
    TERMINATE = "terminate"


class NodeVisitor:
    """Base class for AST node visitors.

    Every ``visit_*`` method defaults to ``generic_visit``, which does
    nothing, so subclasses only implement the node kinds they care about.
    A ``visit_*`` method may return ``None`` to mean ``GO_TO_NEXT``.

    Examples
    --------
    Collecting heading levels:

        >>> class HeadingCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.levels = []
        ...     def visit_heading(self, node, entering):
        ...         if entering:
        ...             self.levels.append(node.level)
        >>> collector = HeadingCollector()
        >>> walk(Document(children=[Heading(level=2)]), collector)
        <WalkStatus.GO_TO_NEXT: 'go_to_next'>
        >>> collector.levels
        [2]

    """

    def visit(self, node: Node, entering: bool) -> WalkStatus:
        """Visit a node by dispatching through ``node.accept``.

        Parameters
        ----------
        node : Node
            Node being visited
        entering : bool
            True on the way down, False on the way back up

        Returns
        -------
        WalkStatus
            Signal for the walker

        """
        status = node.accept(self, entering)
        return WalkStatus.GO_TO_NEXT if status is None else status

    def generic_visit(self, node: Node, entering: bool) -> Optional[WalkStatus]:
        """Handle a node kind without a dedicated method; a no-op."""
        return WalkStatus.GO_TO_NEXT

    def visit_document(self, node: Document, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_heading(self, node: Heading, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_paragraph(self, node: Paragraph, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_code_block(self, node: CodeBlock, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_list(self, node: List, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_list_item(self, node: ListItem, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_table(self, node: Table, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_table_row(self, node: TableRow, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_table_cell(self, node: TableCell, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_thematic_break(self, node: ThematicBreak, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_html_block(self, node: HTMLBlock, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_text(self, node: Text, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_emphasis(self, node: Emphasis, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_strong(self, node: Strong, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_strikethrough(self, node: Strikethrough, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_code(self, node: Code, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_link(self, node: Link, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_image(self, node: Image, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_line_break(self, node: LineBreak, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)

    def visit_html_inline(self, node: HTMLInline, entering: bool) -> Optional[WalkStatus]:
        return self.generic_visit(node, entering)


def walk(node: Node, visitor: NodeVisitor) -> WalkStatus:
    """Walk a tree depth-first, calling ``visitor.visit`` for each node.

    Leaf nodes are visited once with ``entering=True``. Container nodes are
    visited on entry, then their children are walked, then they are visited
    again with ``entering=False``. ``SKIP_CHILDREN`` on entry skips straight
    to the leaving visit. ``TERMINATE`` stops the whole walk.

    Parameters
    ----------
    node : Node
        Root of the subtree to walk
    visitor : NodeVisitor
        Visitor receiving the callbacks

    Returns
    -------
    WalkStatus
        ``TERMINATE`` if the walk was stopped early, else ``GO_TO_NEXT``

    """
    status = visitor.visit(node, True)
    if status is WalkStatus.TERMINATE:
        return WalkStatus.TERMINATE
    if not node.is_container:
        return WalkStatus.GO_TO_NEXT

    if status is not WalkStatus.SKIP_CHILDREN:
        for child in get_node_children(node):
            if walk(child, visitor) is WalkStatus.TERMINATE:
                return WalkStatus.TERMINATE

    if visitor.visit(node, False) is WalkStatus.TERMINATE:
        return WalkStatus.TERMINATE
    return WalkStatus.GO_TO_NEXT
