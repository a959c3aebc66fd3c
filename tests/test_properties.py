# tests/test_properties.py
"""Cross-checks of every operation against CPython's codecs."""

from __future__ import annotations

import random

import pytest

from runedfa import (
    MalformedEncodingError,
    RuneView,
    count_codepoints,
    decode_one,
    to_utf16le,
    validate,
    validate_cursor,
)
from runedfa.tables import TEXT, UTF8, WTF8, Tables

_CONTINUATIONS = (0x00, 0x41, 0x7F, 0x80, 0x8F, 0x90, 0x9F, 0xA0, 0xBF, 0xC0, 0xFF)
_TEXT_CONTROLS = {chr(b) for b in range(0x20) if b not in (0x09, 0x0A, 0x0D)} | {"\x7f"}


def _reference(data: bytes, tables: Tables) -> str | None:
    """Decode *data* with CPython, or return None if it is malformed."""
    errors = "surrogatepass" if tables is WTF8 else "strict"
    try:
        text = data.decode("utf-8", errors)
    except UnicodeDecodeError:
        return None
    if tables is TEXT and any(c in _TEXT_CONTROLS for c in text):
        return None
    return text


def _random_buffers(seed: int, count: int) -> list[bytes]:
    rng = random.Random(seed)
    pieces = [
        b"a",
        b"\n",
        b"\x00",
        "é".encode(),
        "∅".encode(),
        "🤓".encode(),
        b"\xed\xa0\x80",
        b"\xed\xb3\xbf",
        b"\xc0\x80",
        b"\xe0\x80",
        b"\xf4\x90\x80\x80",
        b"\x80",
        b"\xff",
    ]
    buffers = [b""]
    for _ in range(count):
        if rng.random() < 0.5:
            buf = b"".join(rng.choice(pieces) for _ in range(rng.randrange(1, 12)))
        else:
            buf = bytes(rng.randrange(256) for _ in range(rng.randrange(1, 8)))
        buffers.append(buf)
    return buffers


_BUFFERS = _random_buffers(seed=1234, count=400)


@pytest.mark.parametrize("tables", [UTF8, WTF8, TEXT], ids=lambda t: t.name)
def test_operations_agree_with_reference(tables: Tables):
    for data in _BUFFERS:
        expected = _reference(data, tables)
        assert validate(data, tables) == (expected is not None), data
        if expected is None:
            with pytest.raises(MalformedEncodingError):
                count_codepoints(data, tables)
            with pytest.raises(MalformedEncodingError):
                to_utf16le(data, tables)
            with pytest.raises(MalformedEncodingError):
                RuneView.from_validated(data, tables)
            continue
        runes = [ord(c) for c in expected]
        assert count_codepoints(data, tables) == len(runes)
        assert list(RuneView.from_validated(data, tables)) == runes
        assert to_utf16le(data, tables) == expected.encode(
            "utf-16-le", "surrogatepass"
        )


@pytest.mark.parametrize("tables", [UTF8, WTF8], ids=lambda t: t.name)
def test_every_two_byte_input(tables: Tables):
    for first in range(256):
        for second in range(256):
            data = bytes((first, second))
            assert validate(data, tables) == (_reference(data, tables) is not None)


@pytest.mark.parametrize("tables", [UTF8, WTF8], ids=lambda t: t.name)
def test_three_byte_leads(tables: Tables):
    for lead in range(0xE0, 0xF0):
        for second in range(256):
            for third in _CONTINUATIONS:
                data = bytes((lead, second, third))
                expected = _reference(data, tables)
                assert validate(data, tables) == (expected is not None), data
                if expected is not None and len(expected) == 1:
                    assert decode_one(data, 0, tables) == (ord(expected), 3)


def test_four_byte_leads():
    for lead in range(0xF0, 0xF8):
        for second in range(256):
            for third in _CONTINUATIONS[3:9]:
                for fourth in (0x41, 0x80, 0xBF, 0xC0):
                    data = bytes((lead, second, third, fourth))
                    expected = _reference(data, UTF8)
                    assert validate(data) == (expected is not None), data
                    if expected is not None and len(expected) == 1:
                        assert decode_one(data) == (ord(expected), 4)


def test_every_single_byte_text():
    for byte in range(256):
        data = bytes((byte,))
        assert validate(data, TEXT) == (_reference(data, TEXT) is not None)


def test_reject_offset_never_precedes_first_bad_byte():
    for data in _BUFFERS:
        try:
            data.decode("utf-8")
        except UnicodeDecodeError as e:
            ok, offset = validate_cursor(data)
            assert not ok
            assert offset >= e.start
