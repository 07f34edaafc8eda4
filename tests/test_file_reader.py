"""
Tests for reading raw CSV text from disk.
"""
import pytest

from csv_preview.core.errors import ReadError
from csv_preview.utils.file_reader import read_file_content


class TestReadFileContent:
    """Test decoding and failures."""

    def test_utf8(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("city\nMontréal\n", encoding="utf-8")

        assert read_file_content(path) == "city\nMontréal\n"

    def test_bom_stripped(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_bytes(b"\xef\xbb\xbfa,b\n1,2\n")

        assert read_file_content(path) == "a,b\n1,2\n"

    def test_windows_encoding(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_bytes("city\nMontréal\n".encode("cp1252"))

        assert read_file_content(path) == "city\nMontréal\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReadError):
            read_file_content(tmp_path / "missing.csv")

    def test_directory(self, tmp_path):
        with pytest.raises(ReadError):
            read_file_content(tmp_path)
