#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_io_and_encoding.py
"""Unit tests for source reading, output writing and byte decoding."""

from io import BytesIO, StringIO

import pytest

from mdfmt.exceptions import FileAccessError, FileNotFoundError, OutputWriteError, ValidationError
from mdfmt.utils.encoding import decode_markdown_bytes, detect_encoding
from mdfmt.utils.io_utils import read_source, write_content


@pytest.mark.unit
class TestReadSource:
    """Tests for read_source()."""

    def test_buffer_wins_over_filename(self, tmp_path):
        assert read_source(filename=tmp_path / "missing.md", src=b"# hi") == b"# hi"

    def test_str_buffer_encoded(self):
        assert read_source(src="café") == "café".encode("utf-8")

    def test_reads_file(self, tmp_path):
        path = tmp_path / "a.md"
        path.write_bytes(b"content")
        assert read_source(filename=path) == b"content"
        assert read_source(filename=str(path)) == b"content"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError) as exc_info:
            read_source(filename=tmp_path / "nope.md")
        assert exc_info.value.file_path.endswith("nope.md")

    def test_directory(self, tmp_path):
        with pytest.raises(FileAccessError):
            read_source(filename=tmp_path)

    def test_nothing_supplied(self):
        with pytest.raises(ValidationError):
            read_source()


@pytest.mark.unit
class TestWriteContent:
    """Tests for write_content()."""

    def test_text_stream(self):
        buffer = StringIO()
        write_content(b"caf\xc3\xa9", buffer)
        assert buffer.getvalue() == "café"

    def test_binary_stream(self):
        buffer = BytesIO()
        write_content("café", buffer)
        assert buffer.getvalue() == "café".encode("utf-8")

    def test_path(self, tmp_path):
        path = tmp_path / "out.md"
        write_content("x\n", path)
        assert path.read_text(encoding="utf-8") == "x\n"

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(OutputWriteError):
            write_content("x", tmp_path / "missing-dir" / "out.md")

    def test_unsupported_output(self):
        with pytest.raises(TypeError):
            write_content("x", 42)  # type: ignore[arg-type]


@pytest.mark.unit
class TestDecoding:
    """Tests for byte decoding with encoding detection."""

    def test_utf8(self):
        assert decode_markdown_bytes("naïve".encode("utf-8")) == "naïve"

    def test_bom_dropped(self):
        assert decode_markdown_bytes(b"\xef\xbb\xbf# Title") == "# Title"

    def test_non_utf8_never_raises(self):
        text = decode_markdown_bytes(b"caf\xe9 au lait " * 20)
        assert text.startswith("caf")
        assert "au lait" in text

    def test_detect_encoding_below_threshold(self, monkeypatch):
        monkeypatch.setattr(
            "mdfmt.utils.encoding.chardet.detect", lambda data: {"encoding": "Windows-1252", "confidence": 0.3}
        )
        assert detect_encoding(b"\xe9") is None

    def test_detect_encoding_confident(self, monkeypatch):
        monkeypatch.setattr(
            "mdfmt.utils.encoding.chardet.detect", lambda data: {"encoding": "Windows-1252", "confidence": 0.95}
        )
        assert detect_encoding(b"\xe9") == "Windows-1252"
