#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/constants.py
"""Constants shared by the mdfmt parser, renderer and CLI."""

from typing import Literal

# ANSI terminal styling. The reset restores every attribute, not just bold.
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"
ANSI_SEQUENCES = (ANSI_BOLD, ANSI_RESET)

# Text fragments that would turn into markdown syntax if emitted bare.
STRUCTURAL_CHARACTERS = frozenset("\\`*_{}[]()#+-<>")

HeadingStyle = Literal["atx", "setext"]

DEFAULT_HEADING_STYLE: HeadingStyle = "atx"
DEFAULT_LIST_INDENT = "\t"
DEFAULT_TERMINAL = False
DEFAULT_FORMAT_CODE_BLOCKS = True

# Setext underlines only exist for the first two heading levels
SETEXT_UNDERLINES = {1: "=", 2: "-"}

THEMATIC_BREAK = "---"
CODE_FENCE = "```"

MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd")

CONFIG_FILENAMES = [".mdfmt.toml", ".mdfmt.yaml", ".mdfmt.yml", ".mdfmt.json"]
CONFIG_ENV_VAR = "MDFMT_CONFIG"

# CLI exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
