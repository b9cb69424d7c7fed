#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/utils/text.py
"""Text normalization, escaping and width helpers used by the markdown renderer."""

from __future__ import annotations

from rich.cells import cell_len

from mdfmt.constants import ANSI_SEQUENCES, STRUCTURAL_CHARACTERS


def clean_without_trim(text: str) -> str:
    """Collapse whitespace runs to single spaces without trimming the ends.

    Newlines, carriage returns and tabs become spaces, and a space directly
    following another space is dropped.

    Parameters
    ----------
    text : str
        Text fragment to normalize

    Returns
    -------
    str
        Normalized fragment

    Examples
    --------
    >>> clean_without_trim("  a\\n\\tb  ")
    ' a b '

    """
    chars: list[str] = []
    previous = ""
    for char in text:
        if char in "\n\r\t":
            char = " "
        if char != " " or previous != " ":
            chars.append(char)
            previous = char
    return "".join(chars)


def is_number(text: str) -> bool:
    """Return True if every character of ``text`` is an ASCII digit.

    The empty string counts as a number, so a ``.`` at the very start of a
    document is escaped.
    """
    return all("0" <= char <= "9" for char in text)


def needs_escaping(text: str, last_normal_text: str) -> bool:
    """Decide whether a whole text fragment needs a leading backslash.

    The check is made on the fragment as a unit. Only a fragment consisting of
    exactly one structural character is escaped; longer fragments never are.

    Parameters
    ----------
    text : str
        The fragment about to be emitted
    last_normal_text : str
        The previously emitted text fragment

    Returns
    -------
    bool
        True if the fragment must be written as ``\\`` + fragment

    Examples
    --------
    >>> needs_escaping("*", "")
    True
    >>> needs_escaping(".", "5")
    True
    >>> needs_escaping(".", "a")
    False

    """
    if text == "!":
        return False
    if text == ".":
        return is_number(last_normal_text)
    return text in STRUCTURAL_CHARACTERS


def escape_url(url: str) -> str:
    """Double every backslash in a link or image destination."""
    return url.replace("\\", "\\\\")


def fence_language(info: str) -> str:
    """Extract the language tag from a code fence info string.

    The first whitespace-separated token is used, minus one leading ``.``.
    Tokens that are empty after stripping the dot are skipped.

    >>> fence_language(".python {linenos}")
    'python'
    """
    for token in info.split():
        if token.startswith("."):
            token = token[1:]
        if token:
            return token
    return ""


def indent_lines(text: str, indent: str) -> str:
    """Prefix every non-empty line of ``text`` with ``indent``."""
    return "\n".join(indent + line if line else line for line in text.split("\n"))


def expand_leading_tabs(line: str, tab_size: int = 4) -> str:
    """Replace tabs in the leading whitespace of ``line`` with spaces up to the next tab stop.

    >>> expand_leading_tabs("\\t-\\tx")
    '    -\\tx'
    >>> expand_leading_tabs("  \\tx")
    '    x'
    """
    column = 0
    for index, char in enumerate(line):
        if char == " ":
            column += 1
        elif char == "\t":
            column += tab_size - column % tab_size
        else:
            return " " * column + line[index:]
    return " " * column


def string_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies."""
    return cell_len(text)


def terminal_string_width(text: str) -> int:
    """Return the cell width of ``text``, discounting ANSI bold and reset sequences."""
    width = cell_len(text)
    for sequence in ANSI_SEQUENCES:
        width -= text.count(sequence) * cell_len(sequence)
    return width
