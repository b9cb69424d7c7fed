#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/parsers/base.py
"""Base class for markdown parsers.

The BaseParser provides the shared input loading and options validation used
by concrete parsers that build the mdfmt AST.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Union

from mdfmt.ast import Document
from mdfmt.exceptions import InvalidOptionsError, ValidationError
from mdfmt.options.base import BaseParserOptions
from mdfmt.utils.encoding import decode_markdown_bytes
from mdfmt.utils.io_utils import read_source

logger = logging.getLogger(__name__)

ParserInput = Union[str, bytes, Path, IO[bytes]]


class BaseParser(ABC):
    """Abstract base class for parsers producing an mdfmt Document.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser options

    """

    def __init__(self, options: Optional[BaseParserOptions] = None):
        """Initialize the parser with options."""
        self.options = options

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input into an AST Document."""

    @staticmethod
    def _validate_options_type(
        options: Optional[BaseParserOptions], expected_type: type[BaseParserOptions], parser_name: str
    ) -> None:
        """Raise InvalidOptionsError if ``options`` is not an ``expected_type``."""
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=f"{parser_name} parser",
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load text from a string, bytes, a path or a binary stream.

        A ``str`` is always treated as markdown content, never as a path.

        Parameters
        ----------
        input_data : str, bytes, Path or IO[bytes]
            Source to load

        Returns
        -------
        str
            Decoded markdown text

        Raises
        ------
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, (bytes, bytearray)):
            return decode_markdown_bytes(bytes(input_data))
        if isinstance(input_data, Path):
            return decode_markdown_bytes(read_source(filename=input_data))
        if hasattr(input_data, "read"):
            data = input_data.read()
            if isinstance(data, str):
                return data
            return decode_markdown_bytes(data)

        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )
