# tests/test_validate.py
"""Tests for the bulk validator."""

from __future__ import annotations

import pytest

from runedfa.tables import TEXT, UTF8, WTF8
from runedfa.validate import validate, validate_cursor


def test_empty_is_valid(tables):
    assert validate(b"", tables)
    assert validate_cursor(b"", 0, tables) == (True, 0)


def test_samples_are_valid(sample: str, tables):
    assert validate(sample.encode(), tables)


def test_long_ascii_run():
    data = b"x" * 10_000
    assert validate_cursor(data) == (True, 10_000)


def test_overlong_rejected():
    assert not validate(b"\xc0\x80")
    assert validate_cursor(b"\xc0\x80") == (False, 0)


def test_lone_continuation_rejected():
    assert validate_cursor(b"abc\x80") == (False, 3)


def test_surrogate_rejected_under_utf8_only():
    data = b"a\xed\xa0\x80"
    assert validate_cursor(data, 0, UTF8) == (False, 2)
    assert validate_cursor(data, 0, WTF8) == (True, 4)


def test_wtf8_still_rejects_overlongs():
    assert not validate(b"\xe0\x80\x80", WTF8)
    assert not validate(b"\xc1\xbf", WTF8)


def test_above_u10ffff_rejected():
    assert validate_cursor(b"\xf4\x90\x80\x80") == (False, 1)
    assert not validate(b"\xf5\x80\x80\x80")


def test_truncated_tail_reports_lead():
    assert validate_cursor(b"ab\xe2\x88") == (False, 2)
    assert validate_cursor(b"\xe0") == (False, 0)


def test_whole_input_scanned_before_success():
    data = "€".encode() * 1000 + b"\xff"
    assert validate_cursor(data) == (False, len(data) - 1)


def test_start_cursor():
    data = b"\xff" + "é".encode()
    assert not validate(data)
    assert validate_cursor(data, 1) == (True, 3)


def test_start_cursor_at_end():
    assert validate_cursor(b"abc", 3) == (True, 3)


def test_start_cursor_out_of_range():
    with pytest.raises(ValueError, match="out of range"):
        validate_cursor(b"abc", 4)


def test_text_controls():
    assert validate(b"line one\tx\r\nline two\n", TEXT)
    assert validate_cursor(b"ok\x00", 0, TEXT) == (False, 2)
    assert validate_cursor(b"ok\x7f", 0, TEXT) == (False, 2)
    assert validate(b"ok\x00", UTF8)


def test_text_rejects_what_utf8_rejects():
    assert not validate(b"\xed\xa0\x80", TEXT)
    assert not validate(b"\xc0\x80", TEXT)


def test_accepts_bytearray_and_memoryview():
    data = "αβγ".encode()
    assert validate(bytearray(data))
    assert validate(memoryview(data))
