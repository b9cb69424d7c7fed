#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/utils/code_format.py
"""Source formatting for fenced code blocks.

Formatters are looked up by the exact fence language tag. Python blocks are
formatted with black out of the box. A formatter that raises is treated as a
failed attempt: the caller receives the original code and ``False``.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

import black

logger = logging.getLogger(__name__)

CodeFormatter = Callable[[str], str]

_FORMATTERS: dict[str, CodeFormatter] = {}


def register_code_formatter(languages: Iterable[str], formatter: CodeFormatter) -> None:
    """Register a formatter for one or more fence language tags.

    Tags are matched exactly, so register every spelling that should trigger
    the formatter.

    Parameters
    ----------
    languages : iterable of str
        Language tags, e.g. ``("python", "Python")``
    formatter : callable
        Function taking source code and returning the formatted source. Any
        exception it raises is logged and the code is left unchanged.

    """
    for language in languages:
        _FORMATTERS[language] = formatter


def unregister_code_formatter(language: str) -> None:
    """Remove the formatter registered for ``language``, if any."""
    _FORMATTERS.pop(language, None)


def is_formattable(language: str) -> bool:
    """Return True if a formatter is registered for ``language``."""
    return language in _FORMATTERS


def format_code(language: str, code: str) -> tuple[str, bool]:
    """Format ``code`` written in ``language``.

    Parameters
    ----------
    language : str
        Fence language tag
    code : str
        Source code from the block

    Returns
    -------
    tuple of (str, bool)
        The formatted code and True on success, otherwise the unchanged code
        and False.

    """
    formatter = _FORMATTERS.get(language)
    if formatter is None:
        return code, False

    try:
        return formatter(code), True
    except Exception as e:
        logger.debug(f"Could not format {language} code block, keeping original: {e}")
        return code, False


def _format_python(code: str) -> str:
    return black.format_str(code, mode=black.Mode())


register_code_formatter(("python", "Python"), _format_python)
