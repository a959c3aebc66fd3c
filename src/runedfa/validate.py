"""Well-formedness checks over whole buffers."""

from __future__ import annotations

from runedfa._utils import ByteBuffer, _validate_start
from runedfa.tables import ACCEPT, REJECT, UTF8, Tables


def validate(buffer: ByteBuffer, tables: Tables = UTF8) -> bool:
    """Return ``True`` if all of *buffer* is well-formed.

    :param buffer: The encoded input.  The empty buffer is valid.
    :param tables: Table set of the encoding variant.
    """
    return validate_cursor(buffer, 0, tables)[0]


def validate_cursor(
    buffer: ByteBuffer, cursor: int = 0, tables: Tables = UTF8
) -> tuple[bool, int]:
    """Check that ``buffer[cursor:]`` is well-formed.

    Runs the automaton without assembling codepoints.  While no sequence is
    open, ASCII bytes skip the tables entirely when the variant allows it.

    :param buffer: The encoded input.
    :param cursor: Offset to start at.
    :param tables: Table set of the encoding variant.
    :returns: ``(ok, offset)``.  On success *offset* is ``len(buffer)``.
        On failure it is the byte that was rejected, or the lead byte of a
        sequence left unfinished at the end of *buffer*.
    :raises ValueError: If *cursor* is out of range.
    """
    _validate_start(buffer, cursor)
    classes = tables.classes
    transitions = tables.transitions
    fast = 0x80 if tables.ascii_fast_path else 0
    state = ACCEPT
    lead = cursor
    for pos in range(cursor, len(buffer)):
        byte = buffer[pos]
        if state == ACCEPT:
            if byte < fast:
                continue
            lead = pos
        state = transitions[state + classes[byte]]
        if state == REJECT:
            return False, pos
    if state != ACCEPT:
        return False, lead
    return True, len(buffer)
