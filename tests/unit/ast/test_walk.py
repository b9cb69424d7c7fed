#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_walk.py
"""Unit tests for AST nodes, visitors and the tree walker."""

import pytest

from mdfmt.ast import (
    Document,
    Emphasis,
    Heading,
    List,
    ListItem,
    NodeVisitor,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    WalkStatus,
    get_node_children,
    walk,
)


class RecordingVisitor(NodeVisitor):
    """Record every visit as a (node type, entering) pair."""

    def __init__(self, statuses=None):
        self.events = []
        self.statuses = statuses or {}

    def generic_visit(self, node, entering):
        self.events.append((type(node).__name__, entering))
        return self.statuses.get((type(node).__name__, entering))


@pytest.mark.unit
class TestWalk:
    """Tests for walk() traversal order and status handling."""

    def test_leaves_visited_once_containers_twice(self):
        tree = Document(children=[Paragraph(content=[Text(content="a")]), ThematicBreak()])
        visitor = RecordingVisitor()

        assert walk(tree, visitor) is WalkStatus.GO_TO_NEXT
        assert visitor.events == [
            ("Document", True),
            ("Paragraph", True),
            ("Text", True),
            ("Paragraph", False),
            ("ThematicBreak", True),
            ("Document", False),
        ]

    def test_skip_children_still_visits_leaving(self):
        tree = Document(children=[Paragraph(content=[Text(content="a")])])
        visitor = RecordingVisitor({("Paragraph", True): WalkStatus.SKIP_CHILDREN})

        walk(tree, visitor)

        assert ("Text", True) not in visitor.events
        assert ("Paragraph", False) in visitor.events

    def test_terminate_stops_walk(self):
        tree = Document(children=[Paragraph(content=[Text(content="a")]), ThematicBreak()])
        visitor = RecordingVisitor({("Text", True): WalkStatus.TERMINATE})

        assert walk(tree, visitor) is WalkStatus.TERMINATE
        assert visitor.events[-1] == ("Text", True)
        assert ("ThematicBreak", True) not in visitor.events

    def test_terminate_on_leave(self):
        tree = Document(children=[Paragraph(content=[]), ThematicBreak()])
        visitor = RecordingVisitor({("Paragraph", False): WalkStatus.TERMINATE})

        assert walk(tree, visitor) is WalkStatus.TERMINATE
        assert ("ThematicBreak", True) not in visitor.events

    def test_dedicated_visit_method_used(self):
        class HeadingCollector(NodeVisitor):
            def __init__(self):
                self.levels = []

            def visit_heading(self, node, entering):
                if entering:
                    self.levels.append(node.level)

        collector = HeadingCollector()
        walk(Document(children=[Heading(level=2), Heading(level=5)]), collector)
        assert collector.levels == [2, 5]


@pytest.mark.unit
class TestNodes:
    """Tests for node construction and child access."""

    def test_heading_level_validated(self):
        with pytest.raises(ValueError, match="Heading level"):
            Heading(level=7)

    def test_list_children_are_items(self):
        items = [ListItem(children=[Text(content="a")]), ListItem()]
        assert get_node_children(List(ordered=False, items=items)) == items

    def test_table_children_include_header_first(self):
        header = TableRow(cells=[TableCell(content=[Text(content="h")])], is_header=True)
        row = TableRow(cells=[TableCell(content=[Text(content="v")])])
        table = Table(header=header, rows=[row])
        assert get_node_children(table) == [header, row]

    def test_leaf_has_no_children(self):
        assert get_node_children(Text(content="x")) == []

    def test_container_flags(self):
        assert Emphasis.is_container
        assert not Text.is_container
        assert not ThematicBreak.is_container
