#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/logging_utils.py
"""Logging setup for the mdfmt command line.

Messages from mdfmt's own modules are shown at the requested level. The
libraries mdfmt drives (chardet while sniffing encodings, black and its
blib2to3 parser while formatting code blocks) log heavily at DEBUG, so they
stay at WARNING unless trace mode asks for everything.

Handlers installed here are named ``mdfmt.*`` and only those are replaced on
reconfiguration; handlers owned by an embedding application are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "mdfmt"
THIRD_PARTY_LOGGERS = ("chardet", "black", "blib2to3")

_CONSOLE_HANDLER = "mdfmt.console"
_FILE_HANDLER = "mdfmt.file"
_CONSOLE_FORMAT = "mdfmt: %(levelname)s: %(message)s"
_TRACE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s:%(lineno)d %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a numeric level or a level name into a logging level.

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def _remove_mdfmt_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if handler.get_name() in (_CONSOLE_HANDLER, _FILE_HANDLER):
            root.removeHandler(handler)
            handler.close()


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Route mdfmt's log records to stderr and, optionally, a file.

    Parameters
    ----------
    log_level : int | str
        Level for mdfmt's loggers, as a number or a name such as ``"INFO"``.
    log_file : str, optional
        Also append records to this file. A file that cannot be opened is
        reported as a warning and console logging continues.
    trace_mode : bool, default False
        Timestamp every record with its logger and line number, and let the
        third-party loggers through at ``log_level`` too.

    Returns
    -------
    logging.Logger
        The ``mdfmt`` package logger.

    """
    level = resolve_log_level(log_level)
    formatter = logging.Formatter(_TRACE_FORMAT if trace_mode else _CONSOLE_FORMAT, datefmt="%H:%M:%S")

    root = logging.getLogger()
    _remove_mdfmt_handlers(root)

    console = logging.StreamHandler(sys.stderr)
    console.set_name(_CONSOLE_HANDLER)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(level if trace_mode else max(level, logging.WARNING))

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not open log file {log_file}: {e}")
        else:
            file_handler.set_name(_FILE_HANDLER)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
            logger.debug(f"Logging to file: {log_file}")

    return package_logger
