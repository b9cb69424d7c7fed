#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/utils/decorators.py
"""Timing helpers for DEBUG-level diagnostics."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time the enclosed block and log the duration at DEBUG level.

    Nothing is measured when the logger is not enabled for DEBUG.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Parsing markdown")

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Rendering markdown"):
        ...     text = renderer.render_to_string(document)
        ... # Logs: "Rendering markdown completed in 0.01s" at DEBUG level

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
