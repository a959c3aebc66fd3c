"""Internal shared utilities for runedfa."""

from __future__ import annotations

from runedfa.enums import Variant

#: Anything the engine can read bytes from by index.
ByteBuffer = bytes | bytearray | memoryview

#: Variant used by the command-line tool when none is given.
DEFAULT_VARIANT: Variant = Variant.UTF8


def _validate_cursor(buffer: ByteBuffer, cursor: int) -> None:
    """Raise ValueError if *cursor* does not index a byte of *buffer*."""
    if isinstance(cursor, bool) or not isinstance(cursor, int):
        msg = "cursor must be an integer"
        raise ValueError(msg)
    if not 0 <= cursor < len(buffer):
        msg = f"cursor {cursor} out of range for buffer of length {len(buffer)}"
        raise ValueError(msg)


def _validate_start(buffer: ByteBuffer, cursor: int) -> None:
    """Like :func:`_validate_cursor` but also allows ``len(buffer)``."""
    if isinstance(cursor, bool) or not isinstance(cursor, int):
        msg = "cursor must be an integer"
        raise ValueError(msg)
    if not 0 <= cursor <= len(buffer):
        msg = f"cursor {cursor} out of range for buffer of length {len(buffer)}"
        raise ValueError(msg)
