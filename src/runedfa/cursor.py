"""Decode a single codepoint at a cursor position."""

from __future__ import annotations

from runedfa._utils import ByteBuffer, _validate_cursor
from runedfa.decoder import decode_step
from runedfa.errors import MalformedEncodingError
from runedfa.tables import ACCEPT, REJECT, SEQUENCE_LENGTH, UTF8, Tables


def decode_one(
    buffer: ByteBuffer, cursor: int = 0, tables: Tables = UTF8
) -> tuple[int, int]:
    """Decode the codepoint that starts at *cursor*.

    The number of bytes the lead byte announces is checked against the end
    of *buffer* before any continuation byte is read.

    :param buffer: The encoded input.
    :param cursor: Offset of the first byte of the codepoint.  Must be less
        than ``len(buffer)``.
    :param tables: Table set of the encoding variant.
    :returns: ``(codepoint, next_cursor)`` where *next_cursor* is one past
        the last byte consumed.
    :raises MalformedEncodingError: If the bytes at *cursor* do not form a
        valid sequence.  The offset is the byte that was rejected, which
        may lie after the first byte of the sequence, or the lead byte when
        the sequence runs past the end of *buffer*.
    :raises ValueError: If *cursor* is out of range.
    """
    _validate_cursor(buffer, cursor)
    byte = buffer[cursor]
    state, codepoint = decode_step(ACCEPT, 0, byte, tables)
    if state == ACCEPT:
        return codepoint, cursor + 1
    if state == REJECT:
        raise MalformedEncodingError(cursor)
    if cursor + SEQUENCE_LENGTH[tables.classes[byte]] > len(buffer):
        raise MalformedEncodingError(cursor)

    pos = cursor + 1
    while True:
        state, codepoint = decode_step(state, codepoint, buffer[pos], tables)
        if state == REJECT:
            raise MalformedEncodingError(pos)
        pos += 1
        if state == ACCEPT:
            return codepoint, pos


def decode_one_assume_valid(
    buffer: ByteBuffer, cursor: int, tables: Tables = UTF8
) -> tuple[int, int]:
    """Decode the codepoint at *cursor* without any checks.

    The caller guarantees that *buffer* is well-formed from *cursor* on
    (for example because it was validated when a
    :class:`~runedfa.view.RuneView` was built).  Malformed input produces
    an unspecified codepoint or an :class:`IndexError`.

    :returns: ``(codepoint, next_cursor)``.
    """
    byte = buffer[cursor]
    if byte < 0x80:
        return byte, cursor + 1
    cls = tables.classes[byte]
    codepoint = byte & tables.masks[cls]
    end = cursor + SEQUENCE_LENGTH[cls]
    for pos in range(cursor + 1, end):
        codepoint = (codepoint << 6) | (buffer[pos] & 0x3F)
    return codepoint, end
