"""The single-step decoder and the stateful wrappers built on it.

:func:`decode_step` is the one primitive of the engine.  Every other
operation is a loop that feeds it bytes.  :class:`DecoderState` keeps the
``(state, codepoint)`` pair for callers that decode one byte at a time, and
:class:`StreamDecoder` carries it across chunk boundaries.
"""

from __future__ import annotations

import dataclasses
import logging

from runedfa._utils import ByteBuffer
from runedfa.enums import StepStatus
from runedfa.errors import MalformedEncodingError
from runedfa.tables import ACCEPT, REJECT, UTF8, Tables


def decode_step(
    state: int, codepoint: int, byte: int, tables: Tables = UTF8
) -> tuple[int, int]:
    """Advance the automaton by one byte.

    :param state: Current state; :data:`~runedfa.tables.ACCEPT` before the
        first byte of a sequence.
    :param codepoint: Value accumulated so far.  Ignored when *state* is
        ``ACCEPT``.
    :param byte: The next input byte.
    :param tables: Table set of the encoding variant.
    :returns: The new ``(state, codepoint)`` pair.  The codepoint is complete
        only when the new state is ``ACCEPT``.
    """
    cls = tables.classes[byte]
    if state == ACCEPT:
        codepoint = byte & tables.masks[cls]
    else:
        codepoint = (codepoint << 6) | (byte & 0x3F)
    return tables.transitions[state + cls], codepoint


@dataclasses.dataclass(slots=True)
class DecoderState:
    """Mutable ``(state, codepoint)`` pair for byte-at-a-time decoding.

    Once :meth:`step` has returned :attr:`StepStatus.REJECTED` the decoder
    stays rejected until :meth:`reset` is called.
    """

    tables: Tables = UTF8
    state: int = ACCEPT
    codepoint: int = 0

    def step(self, byte: int) -> StepStatus:
        """Feed one byte.

        :returns: :attr:`StepStatus.ACCEPTED` when *byte* completed a
            codepoint (available as :attr:`codepoint`),
            :attr:`StepStatus.REJECTED` when the input is malformed, and
            :attr:`StepStatus.PENDING` otherwise.
        """
        if self.state == REJECT:
            return StepStatus.REJECTED
        self.state, self.codepoint = decode_step(
            self.state, self.codepoint, byte, self.tables
        )
        if self.state == ACCEPT:
            return StepStatus.ACCEPTED
        if self.state == REJECT:
            return StepStatus.REJECTED
        return StepStatus.PENDING

    def reset(self) -> None:
        """Return to the start state."""
        self.state = ACCEPT
        self.codepoint = 0

    @property
    def pending(self) -> bool:
        """Whether a sequence has been started but not finished."""
        return self.state not in (ACCEPT, REJECT)


class StreamDecoder:
    """Incremental decoder for input that arrives in chunks.

    Implements a feed/close pattern: a multi-byte sequence may be split
    across any number of :meth:`feed` calls.
    """

    def __init__(self, tables: Tables = UTF8) -> None:
        """Initialize the decoder.

        :param tables: Table set of the encoding variant.
        """
        self.logger = logging.getLogger(__name__)
        self._decoder = DecoderState(tables)
        self._offset = 0
        self._lead = 0
        self._failed = False
        self._closed = False

    def feed(self, chunk: ByteBuffer) -> list[int]:
        """Decode the next chunk of the stream.

        :param chunk: The next bytes of the stream.
        :returns: The codepoints completed by this chunk, in order.
        :raises MalformedEncodingError: If the stream is malformed.  The
            offset is counted from the start of the stream.  Codepoints
            completed earlier in the same chunk are not returned; the
            caller can recover them by decoding the chunk up to
            ``offset - (stream offset at the start of the chunk)``.
        :raises ValueError: If called after :meth:`close` or after a failure
            without a :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        if self._failed:
            msg = "feed() called after a decoding error without reset()"
            raise ValueError(msg)
        decoder = self._decoder
        codepoints: list[int] = []
        for byte in chunk:
            if not decoder.pending:
                self._lead = self._offset
            status = decoder.step(byte)
            if status is StepStatus.REJECTED:
                self._failed = True
                self.logger.debug(
                    "%s: rejected byte 0x%02x at offset %d",
                    decoder.tables.name,
                    byte,
                    self._offset,
                )
                raise MalformedEncodingError(self._offset)
            self._offset += 1
            if status is StepStatus.ACCEPTED:
                codepoints.append(decoder.codepoint)
        return codepoints

    def close(self) -> None:
        """Finish the stream.

        :raises MalformedEncodingError: If the stream ends in the middle of
            a sequence.  The offset is that of the sequence's lead byte.
        """
        if self._closed:
            return
        self._closed = True
        if self._decoder.pending:
            self._failed = True
            self.logger.debug(
                "%s: stream truncated after offset %d",
                self._decoder.tables.name,
                self._lead,
            )
            raise MalformedEncodingError(self._lead)

    def reset(self) -> None:
        """Reset the decoder to its initial state for reuse."""
        self._decoder.reset()
        self._offset = 0
        self._lead = 0
        self._failed = False
        self._closed = False

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._offset

    @property
    def pending(self) -> bool:
        """Whether the bytes fed so far end in the middle of a sequence."""
        return self._decoder.pending
