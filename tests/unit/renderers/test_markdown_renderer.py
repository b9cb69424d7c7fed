#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_markdown_renderer.py
"""Unit tests for MarkdownRenderer.

Tests cover:
- Block spacing and per-node emission rules
- Escaping of structural text fragments
- List numbering, nesting and loose item spacing
- Terminal styling, heading styles and code block formatting
- Render node hooks and renderer state handling

"""

from io import BytesIO, StringIO

import pytest
from ast_helpers import doc, item, para

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
    WalkStatus,
)
from mdfmt.exceptions import InvalidOptionsError, RenderingError
from mdfmt.options import MarkdownParserOptions, MarkdownRendererOptions
from mdfmt.renderers.markdown import NOT_HANDLED, HookResult, MarkdownRenderer, render_markdown


def render(document: Document, **options) -> str:
    return MarkdownRenderer(MarkdownRendererOptions(**options)).render_to_string(document)


@pytest.mark.unit
class TestBlockRendering:
    """Tests for block-level emission rules."""

    def test_empty_document(self):
        assert render(Document()) == ""

    def test_single_paragraph(self):
        assert render(doc(para("Hello world"))) == "Hello world\n"

    def test_paragraphs_separated_by_blank_line(self):
        assert render(doc(para("a"), para("b"))) == "a\n\nb\n"

    def test_atx_headings_at_every_level(self):
        result = render(doc(Heading(level=1, content=[Text("Title")]), Heading(level=3, content=[Text("Deep")])))
        assert result == "# Title\n\n### Deep\n"

    def test_setext_headings_for_levels_one_and_two(self):
        document = doc(
            Heading(level=1, content=[Text("Title")]),
            Heading(level=2, content=[Text("Sub")]),
            Heading(level=3, content=[Text("Deep")]),
        )
        assert render(document, heading_style="setext") == "Title\n=====\n\nSub\n---\n\n### Deep\n"

    def test_setext_underline_ignores_ansi_sequences(self):
        document = doc(Heading(level=1, content=[Strong(content=[Text("ab")])]))
        result = render(document, heading_style="setext", terminal=True)
        assert result == "\x1b[1m**ab**\x1b[0m\n======\n"

    def test_thematic_break_between_paragraphs(self):
        assert render(doc(para("a"), ThematicBreak(), para("b"))) == "a\n\n---\n\nb\n"

    def test_block_quote_prefixes_every_line(self):
        quote = BlockQuote(children=[para("a"), para("b")])
        assert render(doc(quote)) == "> a\n>\n> b\n"

    def test_block_quote_after_paragraph(self):
        quote = BlockQuote(children=[para("quoted")])
        assert render(doc(para("intro"), quote)) == "intro\n\n> quoted\n"

    def test_empty_block_quote_keeps_marker(self):
        assert render(doc(para("a"), BlockQuote(), para("b"))) == "a\n\n>\n\nb\n"

    def test_block_quote_indent_tabs_become_spaces(self):
        lst = List(ordered=True, items=[ListItem(children=[CodeBlock(content="z\n")]), item("two")])
        result = render(doc(BlockQuote(children=[lst])))
        assert result == "> 1.\t```\n>     z\n>     ```\n> 2.\ttwo\n"

    def test_empty_setext_heading_falls_back_to_atx(self):
        assert render(doc(Heading(level=1)), heading_style="setext") == "#\n"

    def test_empty_atx_heading(self):
        assert render(doc(Heading(level=2), para("x"))) == "##\n\nx\n"

    def test_atx_heading_folds_soft_breaks(self):
        heading = Heading(level=1, content=[Text("a"), LineBreak(soft=True), Text("b")])
        assert render(doc(heading)) == "# a b\n"

    def test_html_block_verbatim(self):
        assert render(doc(HTMLBlock(content="<div>\n  x\n</div>"))) == "<div>\n  x\n</div>\n"


@pytest.mark.unit
class TestCodeBlocks:
    """Tests for fenced code block rendering."""

    def test_fence_with_language(self):
        block = CodeBlock(content="echo hi\n", info="bash")
        assert render(doc(block)) == "```bash\necho hi\n```\n"

    def test_fence_without_language(self):
        assert render(doc(CodeBlock(content="plain\n"))) == "```\nplain\n```\n"

    def test_language_tag_is_first_info_word_without_dot(self):
        block = CodeBlock(content="x\n", info=".rust {linenos=true}")
        assert render(doc(block)) == "```rust\nx\n```\n"

    def test_missing_trailing_newline_is_added(self):
        assert render(doc(CodeBlock(content="print(1)", info="text"))) == "```text\nprint(1)\n```\n"

    def test_python_block_is_reformatted(self):
        block = CodeBlock(content="x=1\n", info="python")
        assert render(doc(block)) == "```python\nx = 1\n```\n"

    def test_invalid_python_falls_back_to_original(self):
        block = CodeBlock(content="def broken(:\n    pass\n", info="python")
        assert render(doc(block)) == "```python\ndef broken(:\n    pass\n```\n"

    def test_formatting_can_be_disabled(self):
        block = CodeBlock(content="x=1\n", info="python")
        assert render(doc(block), format_code_blocks=False) == "```python\nx=1\n```\n"

    def test_unrecognized_language_untouched(self):
        block = CodeBlock(content="x=1\n", info="PYTHON")
        assert render(doc(block)) == "```PYTHON\nx=1\n```\n"


@pytest.mark.unit
class TestLists:
    """Tests for list numbering, nesting and spacing."""

    def test_unordered_list(self):
        assert render(doc(List(ordered=False, items=[item("a"), item("b")]))) == "-\ta\n-\tb\n"

    def test_ordered_list_renumbers_from_one(self):
        lst = List(ordered=True, start=7, items=[item("a"), item("b"), item("c")])
        assert render(doc(lst)) == "1.\ta\n2.\tb\n3.\tc\n"

    def test_nested_list_keeps_parent_counter(self):
        nested = List(ordered=True, items=[item("x"), item("y")])
        parent = List(
            ordered=True,
            items=[item("a"), ListItem(children=[Text("b"), nested]), item("c")],
        )
        assert render(doc(parent)) == "1.\ta\n2.\tb\n\t1.\tx\n\t2.\ty\n3.\tc\n"

    def test_sibling_lists_restart_numbering(self):
        first = List(ordered=True, items=[item("a"), item("b")])
        second = List(ordered=True, items=[item("c")])
        assert render(doc(first, para("between"), second)) == "1.\ta\n2.\tb\n\nbetween\n\n1.\tc\n"

    def test_loose_items_separated_except_after_last(self):
        lst = List(
            ordered=False,
            tight=False,
            items=[ListItem(children=[para("a")]), ListItem(children=[para("b")])],
        )
        assert render(doc(lst)) == "-\ta\n\n-\tb\n"

    def test_multi_paragraph_item_indents_every_line(self):
        lst = List(ordered=False, tight=False, items=[ListItem(children=[para("a"), para("b")])])
        assert render(doc(lst)) == "-\ta\n\n\tb\n"

    def test_custom_indent_unit(self):
        lst = List(ordered=False, items=[item("a")])
        assert render(doc(lst), list_indent="  ") == "-  a\n"

    def test_lone_newline_text_suppressed_in_list(self):
        lst = List(ordered=False, items=[item("a", "\n", "b")])
        assert render(doc(lst)) == "-\tab\n"

    def test_list_after_paragraph(self):
        lst = List(ordered=False, items=[item("a")])
        assert render(doc(para("intro"), lst)) == "intro\n\n-\ta\n"

    def test_quote_paragraph_does_not_loosen_tight_item(self):
        quoted = ListItem(children=[Text("a"), BlockQuote(children=[para("q")])])
        lst = List(ordered=False, items=[quoted, item("b")])
        assert render(doc(lst)) == "-\ta\n\t> q\n-\tb\n"

    def test_empty_list_item(self):
        assert render(doc(List(ordered=False, items=[ListItem()]))) == "-\n"


@pytest.mark.unit
class TestEscaping:
    """Tests for escaping of structural text fragments."""

    @pytest.mark.parametrize("char", list("\\`*_{}[]()#+-<>"))
    def test_lone_structural_character_escaped(self, char):
        assert render(doc(para(char))) == f"\\{char}\n"

    def test_exclamation_mark_not_escaped(self):
        assert render(doc(para("!"))) == "!\n"

    def test_dot_after_number_escaped(self):
        assert render(doc(para("5", ".", "x"))) == "5\\.x\n"

    def test_dot_after_word_not_escaped(self):
        assert render(doc(para("a", ".", "b"))) == "a.b\n"

    def test_multi_character_fragment_not_escaped(self):
        assert render(doc(para("a*b_c"))) == "a*b_c\n"

    def test_link_destination_backslashes_doubled(self):
        link = Link(url="C:\\docs", content=[Text("d")])
        assert render(doc(Paragraph(content=[link]))) == "[d](C:\\\\docs)\n"


@pytest.mark.unit
class TestInlineRendering:
    """Tests for inline emission rules."""

    def test_whitespace_runs_collapsed(self):
        assert render(doc(para("a  \t b"))) == "a b\n"

    def test_emphasis(self):
        paragraph = Paragraph(content=[Emphasis(content=[Text("it")])])
        assert render(doc(paragraph)) == "*it*\n"

    def test_empty_emphasis_renders_nothing(self):
        paragraph = Paragraph(content=[Text("a"), Emphasis(), Text("b")])
        assert render(doc(paragraph)) == "ab\n"

    def test_strong(self):
        paragraph = Paragraph(content=[Strong(content=[Text("hi")])])
        assert render(doc(paragraph)) == "**hi**\n"

    def test_strong_in_terminal_mode(self):
        paragraph = Paragraph(content=[Strong(content=[Text("hi")])])
        assert render(doc(paragraph), terminal=True) == "\x1b[1m**hi**\x1b[0m\n"

    def test_strikethrough(self):
        paragraph = Paragraph(content=[Strikethrough(content=[Text("old")])])
        assert render(doc(paragraph)) == "~~old~~\n"

    def test_inline_code_verbatim(self):
        paragraph = Paragraph(content=[Code(content="*  x  *")])
        assert render(doc(paragraph)) == "`*  x  *`\n"

    def test_inline_html_verbatim(self):
        paragraph = Paragraph(content=[HTMLInline(content="<br/>"), Text("x")])
        assert render(doc(paragraph)) == "<br/>x\n"

    def test_link_with_title(self):
        link = Link(url="http://x", content=[Text("hello")], title="t")
        assert render(doc(Paragraph(content=[link]))) == '[hello](http://x "t")\n'

    def test_link_without_title(self):
        link = Link(url="http://x", content=[Text("hello")])
        assert render(doc(Paragraph(content=[link]))) == "[hello](http://x)\n"

    def test_image_keeps_alt_text(self):
        image = Image(url="cat.png", content=[Text("a cat")], title="Cat")
        assert render(doc(Paragraph(content=[image]))) == '![a cat](cat.png "Cat")\n'

    def test_soft_break(self):
        paragraph = Paragraph(content=[Text("a"), LineBreak(soft=True), Text("b")])
        assert render(doc(paragraph)) == "a\nb\n"

    def test_soft_break_before_any_output_dropped(self):
        paragraph = Paragraph(content=[LineBreak(soft=True), Text("b")])
        assert render(doc(paragraph)) == "b\n"

    def test_soft_break_after_empty_emphasis(self):
        paragraph = Paragraph(content=[Text("a"), Emphasis(), LineBreak(soft=True), Text("b")])
        assert render(doc(paragraph)) == "a\nb\n"

    def test_soft_break_drops_trailing_space(self):
        paragraph = Paragraph(content=[Strong(content=[Text("b")]), Text(" "), LineBreak(soft=True), Text("12")])
        assert render(doc(paragraph)) == "**b**\n12\n"

    def test_hard_break(self):
        paragraph = Paragraph(content=[Text("a"), LineBreak(soft=False), Text("b")])
        assert render(doc(paragraph)) == "a  \nb\n"


@pytest.mark.unit
class TestUnknownNodes:
    """Tests for node kinds without rendering rules."""

    def test_table_children_still_walked(self):
        table = Table(
            header=TableRow(cells=[TableCell(content=[Text("h")])], is_header=True),
            rows=[TableRow(cells=[TableCell(content=[Text("v")])])],
        )
        assert render(doc(table)) == "hv\n"

    def test_table_does_not_swallow_next_paragraph(self):
        table = Table(header=TableRow(cells=[TableCell(content=[Text("h")])], is_header=True))
        assert render(doc(table, para("after"))) == "h\n\nafter\n"

    def test_custom_node_kind_skipped(self):
        class Widget(Node):
            pass

        assert render(doc(para("a"), Widget())) == "a\n"


@pytest.mark.unit
class TestRenderNodeHook:
    """Tests for the render node hook."""

    def test_hook_replaces_node_rendering(self):
        def hook(renderer, node, entering):
            if isinstance(node, Code):
                renderer.write(f"<code>{node.content}</code>")
                return HookResult(handled=True)
            return NOT_HANDLED

        document = doc(Paragraph(content=[Text("a "), Code(content="x")]))
        assert render(document, render_node_hook=hook) == "a <code>x</code>\n"

    def test_hook_can_skip_children(self):
        def hook(renderer, node, entering):
            if isinstance(node, Strong):
                if entering:
                    renderer.write("[redacted]")
                    return HookResult(handled=True, status=WalkStatus.SKIP_CHILDREN)
                return HookResult(handled=True)
            return NOT_HANDLED

        document = doc(Paragraph(content=[Text("a "), Strong(content=[Text("secret")])]))
        assert render(document, render_node_hook=hook) == "a [redacted]\n"

    def test_hook_can_terminate(self):
        def hook(renderer, node, entering):
            if isinstance(node, ThematicBreak):
                return HookResult(handled=True, status=WalkStatus.TERMINATE)
            return NOT_HANDLED

        document = doc(para("a"), ThematicBreak(), para("b"))
        assert render(document, render_node_hook=hook) == "a\n"

    def test_hook_returning_none_falls_through(self):
        assert render(doc(para("a")), render_node_hook=lambda renderer, node, entering: None) == "a\n"

    def test_nested_render_from_hook_rejected(self):
        inner = doc(para("inner"))

        def hook(renderer, node, entering):
            if isinstance(node, Text):
                renderer.render_to_string(inner)
            return NOT_HANDLED

        with pytest.raises(RenderingError):
            render(doc(para("outer")), render_node_hook=hook)


@pytest.mark.unit
class TestRendererState:
    """Tests for renderer reuse and output plumbing."""

    def test_renderer_reusable_between_documents(self):
        renderer = MarkdownRenderer()
        document = doc(List(ordered=True, items=[item("a"), item("b")]))
        assert renderer.render_to_string(document) == renderer.render_to_string(document)

    def test_wrong_options_type_rejected(self):
        with pytest.raises(InvalidOptionsError):
            MarkdownRenderer(MarkdownParserOptions())  # type: ignore[arg-type]

    def test_render_to_bytes_is_utf8(self):
        assert MarkdownRenderer().render_to_bytes(doc(para("café"))) == "café\n".encode("utf-8")

    def test_render_to_text_stream(self):
        output = StringIO()
        MarkdownRenderer().render(doc(para("a")), output)
        assert output.getvalue() == "a\n"

    def test_render_to_binary_stream(self):
        output = BytesIO()
        MarkdownRenderer().render(doc(para("a")), output)
        assert output.getvalue() == b"a\n"

    def test_render_to_path(self, tmp_path):
        target = tmp_path / "out.md"
        MarkdownRenderer().render(doc(para("a")), target)
        assert target.read_text(encoding="utf-8") == "a\n"

    def test_render_markdown_helper(self):
        assert render_markdown(doc(para("a"))) == "a\n"
