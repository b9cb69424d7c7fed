#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/renderers/base.py
"""Base class for AST renderers.

The BaseRenderer provides the output plumbing shared by text renderers:
writing to paths or streams and producing bytes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Union

from mdfmt.ast import Document
from mdfmt.exceptions import InvalidOptionsError
from mdfmt.options.base import BaseRendererOptions
from mdfmt.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for renderers turning an AST into text.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer options

    """

    def __init__(self, options: Optional[BaseRendererOptions] = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string."""

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the AST to UTF-8 encoded bytes."""
        return self.render_to_string(doc).encode("utf-8")

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to a path or file-like object.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If rendering fails or the output file cannot be written

        """
        write_content(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(
        options: Optional[BaseRendererOptions], expected_type: type[BaseRendererOptions], renderer_name: str
    ) -> None:
        """Raise InvalidOptionsError if ``options`` is not an ``expected_type``."""
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=f"{renderer_name} renderer",
                expected_type=expected_type,
                received_type=type(options),
            )
