#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/utils/io_utils.py
"""I/O utilities for reading markdown sources and writing formatted output."""

from __future__ import annotations

import builtins
import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Optional, Union, cast

from mdfmt.exceptions import FileAccessError, FileError, FileNotFoundError, OutputWriteError, ValidationError


def read_source(filename: Union[str, Path, None] = None, src: Union[bytes, str, None] = None) -> bytes:
    """Obtain raw markdown bytes from a buffer or a file.

    When ``src`` is supplied it is used as-is and ``filename`` is ignored.

    Parameters
    ----------
    filename : str or Path, optional
        File to read when no buffer is supplied
    src : bytes or str, optional
        Markdown source; str is encoded as UTF-8

    Returns
    -------
    bytes
        The raw source

    Raises
    ------
    ValidationError
        If neither argument is supplied
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the path cannot be read (permissions, directory)
    FileError
        For any other read failure

    """
    if src is not None:
        return src.encode("utf-8") if isinstance(src, str) else bytes(src)

    if filename is None:
        raise ValidationError("Either a filename or source bytes must be provided", parameter_name="filename")

    path = Path(filename)
    try:
        return path.read_bytes()
    except builtins.FileNotFoundError as e:
        raise FileNotFoundError(str(path), original_error=e) from e
    except (PermissionError, IsADirectoryError) as e:
        raise FileAccessError(str(path), original_error=e) from e
    except OSError as e:
        raise FileError(f"Failed to read {path}: {e}", file_path=str(path), original_error=e) from e


def write_content(content: Union[str, bytes], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write content to a file path or a file-like object.

    Parameters
    ----------
    content : str or bytes
        Content to write. Text is encoded as UTF-8 for binary destinations.
    output : str, Path, IO[bytes] or IO[str]
        Output destination

    Raises
    ------
    OutputWriteError
        If writing to a file path fails
    TypeError
        If the output type is not supported

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        data = content.encode("utf-8") if isinstance(content, str) else content
        try:
            output_path.write_bytes(data)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        binary_output = cast(IO[bytes], output)
        binary_output.write(content.encode("utf-8") if isinstance(content, str) else content)
    else:
        text_output = cast(IO[str], output)
        text_output.write(content.decode("utf-8") if isinstance(content, bytes) else content)


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode: Optional[str] = getattr(output, "mode", None)
    return isinstance(mode, str) and "b" in mode


__all__ = ["read_source", "write_content"]
