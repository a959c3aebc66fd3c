# tests/test_view.py
"""Tests for RuneView and RuneIterator."""

from __future__ import annotations

import pytest

from runedfa.cursor import decode_one
from runedfa.errors import MalformedEncodingError
from runedfa.tables import WTF8
from runedfa.view import RuneIterator, RuneView

_MIXED = "aé∅🤓"


def test_from_validated_rejects_bad_input():
    with pytest.raises(MalformedEncodingError) as exc_info:
        RuneView.from_validated(b"ok\xc0\x80")
    assert exc_info.value.offset == 2


def test_from_validated_rejects_truncated_input():
    with pytest.raises(MalformedEncodingError) as exc_info:
        RuneView.from_validated(b"ok\xe0")
    assert exc_info.value.offset == 2


def test_iteration_yields_codepoints(sample: str):
    view = RuneView.from_validated(sample.encode())
    assert list(view) == [ord(c) for c in sample]


def test_view_is_restartable():
    view = RuneView.from_validated(_MIXED.encode())
    assert list(view) == list(view)
    it = view.iterator()
    next(it)
    assert list(view.iterator()) == [ord(c) for c in _MIXED]


def test_iterators_are_independent():
    view = RuneView.from_validated(_MIXED.encode())
    a = view.iterator()
    b = view.iterator()
    assert a.next_rune() == ord("a")
    assert a.next_rune() == 0xE9
    assert b.next_rune() == ord("a")


def test_empty_view():
    view = RuneView.from_validated(b"")
    assert len(view) == 0
    it = view.iterator()
    assert it.next_rune() is None
    assert it.next_bytes() is None
    assert bytes(it.peek(3)) == b""


def test_next_rune_exhaustion():
    it = RuneView.from_validated(b"a").iterator()
    assert it.next_rune() == 0x61
    assert it.next_rune() is None
    with pytest.raises(StopIteration):
        next(it)


def test_next_bytes():
    it = RuneView.from_validated(_MIXED.encode()).iterator()
    chunks = []
    while (chunk := it.next_bytes()) is not None:
        chunks.append(bytes(chunk))
    assert chunks == [c.encode() for c in _MIXED]


def test_peek_does_not_advance():
    it = RuneView.from_validated(_MIXED.encode()).iterator()
    assert bytes(it.peek(2)) == "aé".encode()
    assert it.offset == 0
    assert it.next_rune() == ord("a")
    assert bytes(it.peek(2)) == "é∅".encode()
    assert it.offset == 1


def test_peek_stops_at_end():
    it = RuneView.from_validated(_MIXED.encode()).iterator()
    assert bytes(it.peek(10)) == _MIXED.encode()
    assert bytes(it.peek(0)) == b""


def test_peek_negative():
    it = RuneView.from_validated(b"abc").iterator()
    with pytest.raises(ValueError, match="negative"):
        it.peek(-1)


def test_matches_cursor_decoding(sample: str):
    data = ("x" + sample + _MIXED).encode()
    it = RuneView.from_validated(data).iterator()
    cursor = 0
    while cursor < len(data):
        assert it.offset == cursor
        rune, cursor = decode_one(data, cursor)
        assert next(it) == rune
    assert it.next_rune() is None


def test_from_trusted_skips_validation():
    view = RuneView.from_trusted(b"\xed\xa0\x80")
    assert len(view) == 3


def test_wtf8_view():
    view = RuneView.from_validated(b"a\xed\xa0\x80", WTF8)
    assert view.tables is WTF8
    assert list(view) == [0x61, 0xD800]


def test_view_does_not_copy():
    data = bytearray(b"abc")
    view = RuneView.from_validated(data)
    with pytest.raises(BufferError):
        data.extend(b"d")
    assert bytes(view) == b"abc"


def test_view_buffer_is_read_only():
    view = RuneView.from_validated(bytearray(b"abc"))
    assert view.buffer.readonly


def test_iter_returns_rune_iterator():
    view = RuneView.from_validated(b"ab")
    it = iter(view)
    assert isinstance(it, RuneIterator)
    assert iter(it) is it
    assert it.view is view


def test_repr():
    assert repr(RuneView.from_validated(b"ab")) == "RuneView('utf-8', 2 bytes)"


def test_public_properties_are_documented():
    for prop in (RuneView.tables, RuneView.buffer, RuneIterator.view, RuneIterator.offset):
        assert prop.__doc__
