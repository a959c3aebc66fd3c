"""Validated views over encoded buffers and lazy codepoint iterators."""

from __future__ import annotations

import logging

from runedfa._utils import ByteBuffer
from runedfa.cursor import decode_one_assume_valid
from runedfa.errors import MalformedEncodingError
from runedfa.tables import SEQUENCE_LENGTH, UTF8, Tables
from runedfa.validate import validate_cursor

logger = logging.getLogger(__name__)


class RuneView:
    """An immutable view of a buffer known to be well-formed.

    The view holds a read-only :class:`memoryview` of the caller's buffer
    and copies nothing.  A ``bytearray`` cannot be resized while a view of
    it is alive.  Iterating the view starts a new :class:`RuneIterator`
    each time, so a view can be walked any number of times.
    """

    __slots__ = ("_buffer", "_tables")

    def __init__(self, buffer: ByteBuffer, tables: Tables = UTF8) -> None:
        self._buffer = memoryview(buffer).toreadonly()
        self._tables = tables

    @classmethod
    def from_validated(cls, buffer: ByteBuffer, tables: Tables = UTF8) -> RuneView:
        """Build a view after checking that *buffer* is well-formed.

        :raises MalformedEncodingError: If *buffer* is not well-formed.
        """
        ok, offset = validate_cursor(buffer, 0, tables)
        if not ok:
            logger.debug("%s: validation failed at offset %d", tables.name, offset)
            raise MalformedEncodingError(offset)
        return cls(buffer, tables)

    @classmethod
    def from_trusted(cls, buffer: ByteBuffer, tables: Tables = UTF8) -> RuneView:
        """Build a view without validating *buffer*.

        The caller asserts that *buffer* is well-formed.  Iterating a view of
        malformed input yields unspecified codepoints or raises
        :class:`IndexError`.
        """
        return cls(buffer, tables)

    @property
    def tables(self) -> Tables:
        """The table set the view was built with."""
        return self._tables

    @property
    def buffer(self) -> memoryview:
        """The read-only view of the underlying bytes."""
        return self._buffer

    def iterator(self) -> RuneIterator:
        """Return a new iterator positioned at the start of the view."""
        return RuneIterator(self)

    def __iter__(self) -> RuneIterator:
        return RuneIterator(self)

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return self._buffer.tobytes()

    def __repr__(self) -> str:
        return f"RuneView({self._tables.name!r}, {len(self._buffer)} bytes)"


class RuneIterator:
    """Lazy walk over the codepoints of a :class:`RuneView`."""

    __slots__ = ("_buffer", "_cursor", "_tables", "_view")

    def __init__(self, view: RuneView) -> None:
        self._view = view
        self._buffer = view.buffer
        self._tables = view.tables
        self._cursor = 0

    @property
    def view(self) -> RuneView:
        """The view this iterator walks."""
        return self._view

    @property
    def offset(self) -> int:
        """Byte offset of the next codepoint."""
        return self._cursor

    def __iter__(self) -> RuneIterator:
        return self

    def __next__(self) -> int:
        rune = self.next_rune()
        if rune is None:
            raise StopIteration
        return rune

    def next_rune(self) -> int | None:
        """Return the next codepoint, or ``None`` once the view is exhausted."""
        if self._cursor >= len(self._buffer):
            return None
        rune, self._cursor = decode_one_assume_valid(
            self._buffer, self._cursor, self._tables
        )
        return rune

    def next_bytes(self) -> memoryview | None:
        """Return the bytes of the next codepoint, or ``None`` when exhausted."""
        start = self._cursor
        if start >= len(self._buffer):
            return None
        self._cursor = start + self._sequence_length(start)
        return self._buffer[start : self._cursor]

    def peek(self, n: int) -> memoryview:
        """Return the bytes of the next *n* codepoints without consuming them.

        Fewer codepoints are covered when the view ends first.

        :raises ValueError: If *n* is negative.
        """
        if n < 0:
            msg = "peek count must not be negative"
            raise ValueError(msg)
        end = self._cursor
        length = len(self._buffer)
        for _ in range(n):
            if end >= length:
                break
            end += self._sequence_length(end)
        return self._buffer[self._cursor : end]

    def _sequence_length(self, pos: int) -> int:
        return SEQUENCE_LENGTH[self._tables.classes[self._buffer[pos]]]
