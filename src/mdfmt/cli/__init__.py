#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/cli/__init__.py
"""Command-line interface for mdfmt.

Usage mirrors gofmt: with no paths, markdown is read from standard input and
the formatted result is written to standard output. With paths, each file (or
every markdown file under a directory) is formatted and printed, unless one of
the ``-l``, ``-w`` or ``-d`` modes says otherwise.

Examples
--------
Format a file to stdout::

    mdfmt README.md

Rewrite all markdown files under docs/ in place::

    mdfmt -w docs/

List files that are not formatted, showing diffs::

    mdfmt -l -d .

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

from mdfmt import __version__, process
from mdfmt.cli.config import load_config_with_priority, split_config
from mdfmt.cli.diff import colorize_diff, unified_diff
from mdfmt.constants import (
    CONFIG_ENV_VAR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    MARKDOWN_EXTENSIONS,
)
from mdfmt.exceptions import FileError, FileNotFoundError, MdfmtError, ValidationError
from mdfmt.logging_utils import configure_logging, resolve_log_level
from mdfmt.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from mdfmt.utils.io_utils import read_source, write_content

logger = logging.getLogger(__name__)

STDIN_NAME = "<standard input>"


def _parse_indent(value: str) -> str:
    """Convert a --list-indent argument into an indent string."""
    if value.lower() == "tab":
        return "\t"
    if value.isdigit() and int(value) > 0:
        return " " * int(value)
    raise argparse.ArgumentTypeError(f"List indent must be 'tab' or a positive number of spaces, got {value!r}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdfmt command."""
    parser = argparse.ArgumentParser(
        prog="mdfmt",
        description="Format Markdown files into a canonical, minimal form.",
    )
    parser.add_argument("paths", nargs="*", help="Files or directories to format (default: standard input)")

    mode_group = parser.add_argument_group("modes")
    mode_group.add_argument(
        "-l", "--list", action="store_true", help="List files whose formatting differs from mdfmt's"
    )
    mode_group.add_argument(
        "-w", "--write", action="store_true", help="Write result to the source file instead of stdout"
    )
    mode_group.add_argument("-d", "--diff", action="store_true", help="Display diffs instead of rewriting files")
    mode_group.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Colorize diffs (default: auto, when stdout is a terminal)",
    )

    format_group = parser.add_argument_group("formatting options")
    format_group.add_argument(
        "--terminal", action="store_true", default=None, help="Emit ANSI bold sequences around strong text"
    )
    format_group.add_argument(
        "--heading-style", choices=["atx", "setext"], default=None, help="Style for level 1-2 headings"
    )
    format_group.add_argument(
        "--list-indent", type=_parse_indent, default=None, help="'tab' or a number of spaces (default: tab)"
    )
    format_group.add_argument(
        "--no-format-code",
        dest="format_code_blocks",
        action="store_false",
        default=None,
        help="Do not reformat fenced code blocks",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or discovered)")
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log output to this file")
    log_group.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence, then --verbose, then --log-level
    if parsed_args.trace or parsed_args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = resolve_log_level(parsed_args.log_level)

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(
    parsed_args: argparse.Namespace, config: dict[str, Any]
) -> tuple[MarkdownRendererOptions, MarkdownParserOptions]:
    """Combine config file values with command-line overrides.

    Raises
    ------
    ValidationError
        If a configured value is invalid

    """
    renderer_values, parser_values = split_config(config)
    for name in ("terminal", "heading_style", "list_indent", "format_code_blocks"):
        value = getattr(parsed_args, name)
        if value is not None:
            renderer_values[name] = value

    try:
        return MarkdownRendererOptions(**renderer_values), MarkdownParserOptions(**parser_values)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid formatting options: {e}", original_error=e) from e


def collect_markdown_files(paths: list[str]) -> list[Path]:
    """Expand the given paths into the list of files to format.

    Files are taken as given. Directories are searched recursively for
    markdown files, skipping hidden directories.

    Raises
    ------
    FileNotFoundError
        If a path does not exist

    """
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(
                sorted(
                    candidate
                    for candidate in path.rglob("*")
                    if candidate.is_file()
                    and candidate.suffix.lower() in MARKDOWN_EXTENSIONS
                    and not any(part.startswith(".") for part in candidate.relative_to(path).parts[:-1])
                )
            )
        elif path.exists():
            files.append(path)
        else:
            raise FileNotFoundError(str(path))
    return files


def _use_color(parsed_args: argparse.Namespace) -> bool:
    if parsed_args.color == "always":
        return True
    if parsed_args.color == "never":
        return False
    return sys.stdout.isatty()


def format_source(
    name: str,
    original: bytes,
    parsed_args: argparse.Namespace,
    options: MarkdownRendererOptions,
    parser_options: MarkdownParserOptions,
    path: Optional[Path] = None,
) -> bool:
    """Format one source and report it according to the selected modes.

    Parameters
    ----------
    name : str
        Display name of the source
    original : bytes
        Source bytes
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    options, parser_options
        Formatting options
    path : Path, optional
        File to rewrite in ``--write`` mode

    Returns
    -------
    bool
        True if the formatted output differs from the source

    """
    formatted = process(src=original, options=options, parser_options=parser_options)
    changed = formatted != original

    if changed:
        if parsed_args.list:
            print(name)
        if parsed_args.write and path is not None:
            write_content(formatted, path)
            logger.info(f"Formatted {name}")
        if parsed_args.diff:
            diff_lines = unified_diff(
                original.decode("utf-8", errors="replace"), formatted.decode("utf-8"), name
            )
            for line in colorize_diff(diff_lines, use_color=_use_color(parsed_args)):
                print(line)

    if not (parsed_args.list or parsed_args.write or parsed_args.diff):
        sys.stdout.flush()
        sys.stdout.buffer.write(formatted)
        sys.stdout.buffer.flush()

    return changed


def main(args: list[str] | None = None) -> int:
    """Execute the mdfmt command line."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    config: dict[str, Any] = {}
    if not parsed_args.no_config:
        try:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        except argparse.ArgumentTypeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_VALIDATION_ERROR

    try:
        options, parser_options = build_options(parsed_args, config)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if not parsed_args.paths:
        if parsed_args.write:
            print("Error: cannot use -w with standard input", file=sys.stderr)
            return EXIT_VALIDATION_ERROR
        try:
            format_source(STDIN_NAME, sys.stdin.buffer.read(), parsed_args, options, parser_options)
        except MdfmtError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_ERROR
        return EXIT_SUCCESS

    try:
        files = collect_markdown_files(parsed_args.paths)
    except FileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    exit_code = EXIT_SUCCESS
    for path in files:
        try:
            format_source(str(path), read_source(path), parsed_args, options, parser_options, path=path)
        except FileError as e:
            print(f"Error: {e}", file=sys.stderr)
            exit_code = exit_code or EXIT_FILE_ERROR
        except MdfmtError as e:
            print(f"Error: {path}: {e}", file=sys.stderr)
            exit_code = exit_code or EXIT_ERROR

    return exit_code


__all__ = ["create_parser", "main"]
