import pytest

from pngchunk.utils import strutils


def test_escape_control_characters():
    assert strutils.escape_control_characters("one") == "one"
    assert strutils.escape_control_characters("\00ne") == ".ne"
    assert strutils.escape_control_characters("\nne") == ".ne"
    assert strutils.escape_control_characters("★") == "★"
    with pytest.raises(ValueError):
        strutils.escape_control_characters(b"foo")


def test_bytes_to_escaped_str():
    assert strutils.bytes_to_escaped_str(b"foo") == "foo"
    assert strutils.bytes_to_escaped_str(b"\b") == r"\x08"
    assert strutils.bytes_to_escaped_str(b"&!?=\\)") == r"&!?=\\)"
    assert strutils.bytes_to_escaped_str(b"\xc3\xbc") == r"\xc3\xbc"
    assert strutils.bytes_to_escaped_str(b"'") == r"\'"
    assert strutils.bytes_to_escaped_str(b'"') == r'"'
    with pytest.raises(ValueError):
        strutils.bytes_to_escaped_str("such unicode")


def test_is_mostly_bin():
    assert not strutils.is_mostly_bin(b"")
    assert not strutils.is_mostly_bin(b"foo\xff")
    assert strutils.is_mostly_bin(b"foo\x00\x01\x02\x03\x04\x05\x06")


def test_preview():
    assert strutils.preview(b"hello") == "hello"
    assert strutils.preview(b"a\nb") == r"a\nb"
    assert strutils.preview(b"\x00\x01\x02") == "00 01 02"
    assert strutils.preview(b"x" * 50, limit=10) == "xxxxxxxxxx..."


def test_hexdump():
    assert list(strutils.hexdump(b"")) == []
    lines = list(strutils.hexdump(b"one\x00" * 5))
    assert len(lines) == 2
    offset, hexa, s = lines[0]
    assert offset == "0000000000"
    assert hexa.startswith("6f 6e 65 00 6f")
    assert len(hexa) == 47
    assert s == "one.one.one.one."
    assert lines[1][0] == "0000000010"
    assert list(strutils.hexdump(b"\xff"))[0][2] == "."
