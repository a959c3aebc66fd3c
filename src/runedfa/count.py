"""Codepoint counting."""

from __future__ import annotations

from runedfa._utils import ByteBuffer
from runedfa.cursor import decode_one
from runedfa.tables import UTF8, Tables


def count_codepoints(buffer: ByteBuffer, tables: Tables = UTF8) -> int:
    """Return the number of codepoints encoded in *buffer*.

    :param buffer: The encoded input.
    :param tables: Table set of the encoding variant.
    :raises MalformedEncodingError: If *buffer* is not well-formed,
        including when it ends in the middle of a sequence.
    """
    count = 0
    cursor = 0
    length = len(buffer)
    while cursor < length:
        _, cursor = decode_one(buffer, cursor, tables)
        count += 1
    return count
