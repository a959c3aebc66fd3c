"""Exceptions raised by runedfa."""

from __future__ import annotations


class MalformedEncodingError(ValueError):
    """The input is not well-formed in the selected encoding variant.

    :param offset: Byte offset of the byte that drove the automaton into
        the reject state, or of the lead byte of a sequence cut short by
        the end of the input.
    :param written: For the UTF-16 transcoder, the number of code units
        written before the failure; ``None`` otherwise.
    """

    def __init__(self, offset: int, written: int | None = None) -> None:
        self.offset = offset
        self.written = written
        super().__init__(f"malformed encoding at byte offset {offset}")

    def __reduce__(self) -> tuple[type, tuple[int, int | None]]:
        return (type(self), (self.offset, self.written))
