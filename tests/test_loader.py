"""Tests for template loaders."""

import logging
from unittest.mock import patch

import pytest

from tmpl.errors import TemplateNotFoundError, TemplateReadError
from tmpl.loader import DictLoader, FileSystemLoader


class TestFileSystemLoader:
    """Test reading templates from disk."""

    def test_reads_text(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("Hello {{name}}", encoding="utf-8")
        assert FileSystemLoader().read(str(path)) == "Hello {{name}}"

    def test_missing_file(self, tmp_path):
        missing = str(tmp_path / "nope.txt")
        with pytest.raises(TemplateNotFoundError) as exc_info:
            FileSystemLoader().read(missing)
        assert exc_info.value.path == missing
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_is_not_found(self, tmp_path):
        with pytest.raises(TemplateNotFoundError):
            FileSystemLoader().read(str(tmp_path))

    def test_bad_encoding(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes("caf\xe9".encode("latin-1"))
        with pytest.raises(TemplateReadError) as exc_info:
            FileSystemLoader().read(str(path))
        assert "utf-8" in str(exc_info.value)

    def test_custom_encoding(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes("caf\xe9".encode("latin-1"))
        assert FileSystemLoader(encoding="latin-1").read(str(path)) == "caf\xe9"

    def test_line_endings_preserved(self, tmp_path):
        """CRLF and lone CR come back exactly as stored."""
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"line one\r\nline two\rthree\r\n")
        assert FileSystemLoader().read(str(path)) == "line one\r\nline two\rthree\r\n"

    @patch("pathlib.Path.open")
    def test_os_error_is_read_error(self, mock_open, tmp_path, caplog):
        denied = PermissionError(13, "Permission denied")
        mock_open.side_effect = denied
        path = str(tmp_path / "locked.txt")

        with caplog.at_level(logging.WARNING, logger="tmpl.loader"):
            with pytest.raises(TemplateReadError) as exc_info:
                FileSystemLoader().read(path)

        assert exc_info.value.path == path
        assert exc_info.value.__cause__ is denied
        assert "Permission denied" in str(exc_info.value)
        assert "Failed to read template" in caplog.text


class TestDictLoader:
    """Test in-memory templates."""

    def test_reads(self):
        assert DictLoader({"root/a": "x"}).read("root/a") == "x"

    def test_missing(self):
        with pytest.raises(TemplateNotFoundError):
            DictLoader({}).read("root/a")

    def test_copies_mapping(self):
        templates = {"root/a": "x"}
        loader = DictLoader(templates)
        templates["root/a"] = "changed"
        assert loader.read("root/a") == "x"
