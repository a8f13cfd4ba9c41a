# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os

import pytest

from myersdiff.utils import read_lines, split_lines, EXPLICIT_MISSING_FILE


@pytest.mark.parametrize("text, lines", [
    ("", []),
    ("\n", [""]),
    ("a", ["a"]),
    ("a\n", ["a"]),
    ("a\nb", ["a", "b"]),
    ("a\n\nb\n", ["a", "", "b"]),
    ("a\r\nb\r\n", ["a", "b"]),
    ("a\rb\n", ["a\rb"]),
    ("a\x0cb\n", ["a\x0cb"]),
])
def test_split_lines(text, lines):
    assert split_lines(text) == lines


def test_read_lines(filespath):
    lines = read_lines(os.path.join(filespath, "base.txt"))
    assert lines == ["The quick brown fox", "jumps over", "the lazy dog.", "The end."]


def test_read_lines_crlf_without_final_newline(filespath):
    assert read_lines(os.path.join(filespath, "crlf.txt")) == ["first", "second", "third"]


def test_read_lines_empty_file(filespath):
    assert read_lines(os.path.join(filespath, "empty.txt")) == []


def test_read_lines_null_file():
    assert read_lines(EXPLICIT_MISSING_FILE) == []


def test_read_lines_file_objects():
    assert read_lines(io.StringIO("x\ny\n")) == ["x", "y"]
    assert read_lines(io.BytesIO("æ\nø\n".encode("utf8"))) == ["æ", "ø"]


def test_read_lines_missing_file(tmpdir):
    with pytest.raises(OSError):
        read_lines(str(tmpdir.join("nonexistent.txt")))


def test_read_lines_invalid_utf8(tmpdir):
    fn = tmpdir.join("latin1.txt")
    fn.write_binary(b"caf\xe9\nna\xefve\r\n")
    lines = read_lines(str(fn))
    assert lines == ["caf\udce9", "na\udcefve"]
    # The original bytes can be recovered
    assert lines[0].encode("utf8", "surrogateescape") == b"caf\xe9"

    assert read_lines(io.BytesIO(b"caf\xe9\n")) == lines[:1]
