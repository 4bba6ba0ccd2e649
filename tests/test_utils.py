"""Tests for file decoding helpers."""

import pytest

from llm_context.utils import decode_text, detect_encoding, read_file_text


class TestDetectEncoding:
    def test_empty(self):
        assert detect_encoding(b"") == "utf-8"

    def test_utf8(self):
        assert detect_encoding("héllo wörld".encode("utf-8")) == "utf-8"

    def test_bom(self):
        assert detect_encoding(b"\xef\xbb\xbfhello") == "utf-8-sig"


class TestDecodeText:
    def test_strips_bom(self):
        assert decode_text(b"\xef\xbb\xbfhello") == "hello"

    def test_non_utf8_does_not_raise(self):
        data = "Ünïcödé façade naïve café résumé".encode("latin-1")

        text = decode_text(data)

        assert "fa" in text
        assert isinstance(text, str)


class TestReadFileText:
    def test_reads_content_verbatim(self, tmp_path):
        path = tmp_path / "a.go"
        path.write_bytes(b"package main\n\nfunc main() {\n\tprintln(\"hi\")\n}\n")

        assert read_file_text(path) == "package main\n\nfunc main() {\n\tprintln(\"hi\")\n}\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_file_text(tmp_path / "nope.txt")
