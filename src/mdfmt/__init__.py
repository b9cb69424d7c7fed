#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/__init__.py
"""mdfmt - a Markdown to Markdown formatter.

mdfmt parses Markdown into a document tree and re-emits it in a canonical,
minimal form: consistent block spacing, ``-`` bullets, renumbered ordered
lists, ``*``/``**`` emphasis markers and escaping limited to characters that
would otherwise turn into markup. Fenced code blocks in supported languages
are reformatted with the language's source formatter.

Examples
--------
Format a string:

    >>> from mdfmt import format_markdown
    >>> format_markdown("Title\\n=====\\n\\n* one\\n* two\\n")
    '# Title\\n\\n-\\tone\\n-\\ttwo\\n'

Format a file or a buffer of bytes:

    >>> from mdfmt import process
    >>> process(src=b"__bold__")
    b'**bold**\\n'

Work with the document tree directly:

    >>> from mdfmt import markdown_to_ast, render_markdown
    >>> doc = markdown_to_ast("Some *text*")
    >>> render_markdown(doc)
    'Some *text*\\n'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from mdfmt.exceptions import (
    FileAccessError,
    FileError,
    FileNotFoundError,
    MdfmtError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdfmt.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from mdfmt.parsers.markdown import markdown_to_ast
from mdfmt.renderers.markdown import HookResult, MarkdownRenderer, render_markdown
from mdfmt.utils.decorators import debug_timer
from mdfmt.utils.io_utils import read_source

__version__ = "0.3.0"

logger = logging.getLogger(__name__)


def process(
    filename: Union[str, Path, None] = None,
    src: Union[bytes, str, None] = None,
    options: Optional[MarkdownRendererOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> bytes:
    """Format markdown from a buffer or a file.

    Parameters
    ----------
    filename : str or Path, optional
        File to read when ``src`` is not supplied
    src : bytes or str, optional
        Markdown source. When given, ``filename`` is ignored.
    options : MarkdownRendererOptions, optional
        Rendering options; defaults are used when omitted
    parser_options : MarkdownParserOptions, optional
        Parser options; defaults are used when omitted

    Returns
    -------
    bytes
        Formatted markdown, UTF-8 encoded

    Raises
    ------
    FileNotFoundError, FileAccessError, FileError
        If ``filename`` cannot be read. No output is produced.
    ValidationError
        If neither ``filename`` nor ``src`` is supplied

    """
    source = read_source(filename, src)
    if src is None:
        logger.debug(f"Read {len(source)} bytes from {filename}")

    with debug_timer(logger, "Parsing markdown"):
        doc = markdown_to_ast(source, parser_options)
    with debug_timer(logger, "Rendering markdown"):
        return MarkdownRenderer(options).render_to_bytes(doc)


def format_markdown(
    text: str,
    options: Optional[MarkdownRendererOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> str:
    """Format a markdown string.

    Parameters
    ----------
    text : str
        Markdown source
    options : MarkdownRendererOptions, optional
        Rendering options
    parser_options : MarkdownParserOptions, optional
        Parser options

    Returns
    -------
    str
        Formatted markdown

    """
    doc = markdown_to_ast(text, parser_options)
    return render_markdown(doc, options)


__all__ = [
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "HookResult",
    "MarkdownParserOptions",
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    "MdfmtError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "__version__",
    "format_markdown",
    "markdown_to_ast",
    "process",
    "render_markdown",
]
