#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/cli/diff.py
"""Unified diffs between a source file and its formatted output.

Diff lines can be colorized with ANSI codes for terminal display:

- Red for deletions (lines starting with -)
- Green for additions (lines starting with +)
- Cyan for hunk headers (lines starting with @@)
- Bold for file headers (lines starting with --- or +++)
"""

from __future__ import annotations

import difflib
from typing import Iterable, Iterator

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
BOLD = "\033[1m"
RESET = "\033[0m"


def unified_diff(original: str, formatted: str, path: str) -> Iterator[str]:
    """Yield unified diff lines (without newlines) from ``original`` to ``formatted``.

    Parameters
    ----------
    original : str
        Source text as read
    formatted : str
        Formatted text
    path : str
        Name shown in the file headers

    Yields
    ------
    str
        Diff lines, gofmt style: ``--- path.orig`` / ``+++ path``

    """
    yield from difflib.unified_diff(
        original.splitlines(),
        formatted.splitlines(),
        fromfile=f"{path}.orig",
        tofile=path,
        lineterm="",
    )


def colorize_diff(diff_lines: Iterable[str], use_color: bool = True) -> Iterator[str]:
    """Colorize unified diff output.

    Parameters
    ----------
    diff_lines : Iterable[str]
        Lines of unified diff output
    use_color : bool, default = True
        If False, lines are passed through unchanged

    Yields
    ------
    str
        Colorized diff lines

    """
    if not use_color:
        yield from diff_lines
        return

    for line in diff_lines:
        if line.startswith("---") or line.startswith("+++"):
            yield f"{BOLD}{line}{RESET}"
        elif line.startswith("@@"):
            yield f"{CYAN}{line}{RESET}"
        elif line.startswith("+"):
            yield f"{GREEN}{line}{RESET}"
        elif line.startswith("-"):
            yield f"{RED}{line}{RESET}"
        else:
            yield line
