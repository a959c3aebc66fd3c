"""UTF-8 / WTF-8 to UTF-16LE transcoding."""

from __future__ import annotations

from typing import NoReturn

from runedfa._utils import ByteBuffer
from runedfa.errors import MalformedEncodingError
from runedfa.tables import ACCEPT, REJECT, UTF8, Tables


def utf16_capacity(source: ByteBuffer) -> int:
    """Return the most UTF-16 code units *source* can transcode to.

    No sequence produces more code units than it has bytes: ASCII is one
    byte per unit and a four-byte sequence becomes a surrogate pair.
    """
    return len(source)


def transcode_to_utf16(
    dest: bytearray | memoryview, source: ByteBuffer, tables: Tables = UTF8
) -> int:
    """Transcode *source* into UTF-16LE code units written to *dest*.

    Each code unit takes two bytes of *dest*.  Codepoints above U+FFFF are
    written as a surrogate pair.  Under WTF-8 an encoded surrogate half is
    written as the single unit it encodes.

    :param dest: Writable buffer of at least ``2 * utf16_capacity(source)``
        bytes, or just enough for the actual output.
    :param source: The encoded input.
    :param tables: Table set of the encoding variant.
    :returns: The number of code units written.
    :raises MalformedEncodingError: If *source* is not well-formed.
        ``offset`` is the source offset of the failure and ``written`` the
        number of units already written to *dest*.
    :raises ValueError: If *dest* is too small for the output.
    """
    classes = tables.classes
    masks = tables.masks
    transitions = tables.transitions
    fast = 0x80 if tables.ascii_fast_path else 0
    limit = len(dest)
    out = 0
    state = ACCEPT
    codepoint = 0
    lead = 0
    for pos, byte in enumerate(source):
        if state == ACCEPT and byte < fast:
            if out + 2 > limit:
                _too_small(limit)
            dest[out] = byte
            dest[out + 1] = 0
            out += 2
            continue
        cls = classes[byte]
        if state == ACCEPT:
            lead = pos
            codepoint = byte & masks[cls]
        else:
            codepoint = (codepoint << 6) | (byte & 0x3F)
        state = transitions[state + cls]
        if state == REJECT:
            raise MalformedEncodingError(pos, out // 2)
        if state != ACCEPT:
            continue
        if codepoint <= 0xFFFF:
            if out + 2 > limit:
                _too_small(limit)
            dest[out] = codepoint & 0xFF
            dest[out + 1] = codepoint >> 8
            out += 2
        else:
            if out + 4 > limit:
                _too_small(limit)
            high = ((codepoint - 0x10000) >> 10) + 0xD800
            low = (codepoint & 0x3FF) + 0xDC00
            dest[out] = high & 0xFF
            dest[out + 1] = high >> 8
            dest[out + 2] = low & 0xFF
            dest[out + 3] = low >> 8
            out += 4
    if state != ACCEPT:
        raise MalformedEncodingError(lead, out // 2)
    return out // 2


def to_utf16le(source: ByteBuffer, tables: Tables = UTF8) -> bytes:
    """Return *source* transcoded to UTF-16LE.

    :raises MalformedEncodingError: If *source* is not well-formed.
    """
    dest = bytearray(2 * utf16_capacity(source))
    units = transcode_to_utf16(dest, source, tables)
    return bytes(dest[: 2 * units])


def _too_small(limit: int) -> NoReturn:
    msg = f"destination buffer of {limit} bytes is too small"
    raise ValueError(msg)
