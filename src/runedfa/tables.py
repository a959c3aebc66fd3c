"""Byte class, class mask and state transition tables.

Every encoding variant is described by one :class:`Tables` value.  The
automaton state is always a multiple of :data:`STRIDE` so that the next
state is a single lookup, ``transitions[state + class]``.

The literals below are generated by ``scripts/generate_tables.py`` and must
not be edited by hand; ``tests/test_tables.py`` checks that they still
match the generator.
"""

from __future__ import annotations

import dataclasses

from runedfa.enums import ByteClass, Variant

#: Start state, and the state reached after every complete codepoint.
ACCEPT: int = 0

#: Permanent failure state.  Every transition out of it leads back to it.
REJECT: int = 12

#: Distance between two states in a transition table.
STRIDE: int = 12

#: Encoded length of a sequence, indexed by the class of its first byte.
#: Classes that can never start a sequence are given length 1 so that they
#: are rejected on the byte itself.
SEQUENCE_LENGTH: bytes = bytes((1, 1, 2, 3, 3, 4, 4, 1, 1, 1, 3, 4, 1))


@dataclasses.dataclass(frozen=True, slots=True)
class Tables:
    """The constant lookup tables for one encoding variant.

    :param name: Display name of the variant.
    :param classes: 256 entries mapping a byte to its :class:`ByteClass`.
    :param masks: Per-class mask applied to a lead byte to keep its payload.
    :param transitions: Next state, indexed by ``state + class``.
    :param ascii_fast_path: ``True`` when every byte below 0x80 is an
        identity transition out of :data:`ACCEPT`, which lets hot loops skip
        the tables for ASCII runs.
    """

    name: str
    classes: bytes
    masks: bytes
    transitions: bytes
    ascii_fast_path: bool

    def __repr__(self) -> str:
        return f"Tables({self.name!r})"

    def byte_class(self, byte: int) -> ByteClass:
        """Return the :class:`ByteClass` of *byte*."""
        return ByteClass(self.classes[byte])


# fmt: off
_UTF8_CLASSES = bytes((
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 00..0f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 10..1f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 20..2f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 30..3f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 40..4f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 50..5f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 60..6f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 70..7f
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,  # 80..8f
    9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9,  # 90..9f
    7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7,  # a0..af
    7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7,  # b0..bf
    8, 8, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2,  # c0..cf
    2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2,  # d0..df
    10, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 4, 3, 3,  # e0..ef
    11, 6, 6, 6, 5, 8, 8, 8, 8, 8, 8, 8, 8, 8, 8, 8,  # f0..ff
))

_TEXT_CLASSES = bytes((
    12, 12, 12, 12, 12, 12, 12, 12, 12, 0, 0, 12, 12, 0, 12, 12,  # 00..0f
    12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12,  # 10..1f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 20..2f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 30..3f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 40..4f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 50..5f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,  # 60..6f
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 12,  # 70..7f
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,  # 80..8f
    9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9,  # 90..9f
    7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7,  # a0..af
    7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7,  # b0..bf
    8, 8, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2,  # c0..cf
    2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2,  # d0..df
    10, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 4, 3, 3,  # e0..ef
    11, 6, 6, 6, 5, 8, 8, 8, 8, 8, 8, 8, 8, 8, 8, 8,  # f0..ff
))

_MASKS = bytes((
    0x7F, 0x00, 0x1F, 0x0F, 0x0F, 0x07, 0x07, 0x00, 0x00, 0x00, 0x0F, 0x07, 0x00,
))

_UTF8_TRANSITIONS = bytes((
     0, 12, 24, 36, 60, 96, 84, 12, 12, 12, 48, 72,  # s0   accept
    12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12,  # s12  reject
    12,  0, 12, 12, 12, 12, 12,  0, 12,  0, 12, 12,  # s24  1 more
    12, 24, 12, 12, 12, 12, 12, 24, 12, 24, 12, 12,  # s36  2 more
    12, 12, 12, 12, 12, 12, 12, 24, 12, 12, 12, 12,  # s48  after e0
    12, 24, 12, 12, 12, 12, 12, 12, 12, 24, 12, 12,  # s60  after ed
    12, 12, 12, 12, 12, 12, 12, 36, 12, 36, 12, 12,  # s72  after f0
    12, 36, 12, 12, 12, 12, 12, 36, 12, 36, 12, 12,  # s84  3 more
    12, 36, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12,  # s96  after f4
))

_WTF8_TRANSITIONS = bytes((
     0, 12, 24, 36, 60, 96, 84, 12, 12, 12, 48, 72,  # s0   accept
    12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12,  # s12  reject
    12,  0, 12, 12, 12, 12, 12,  0, 12,  0, 12, 12,  # s24  1 more
    12, 24, 12, 12, 12, 12, 12, 24, 12, 24, 12, 12,  # s36  2 more
    12, 12, 12, 12, 12, 12, 12, 24, 12, 12, 12, 12,  # s48  after e0
    12, 24, 12, 12, 12, 12, 12, 24, 12, 24, 12, 12,  # s60  after ed
    12, 12, 12, 12, 12, 12, 12, 36, 12, 36, 12, 12,  # s72  after f0
    12, 36, 12, 12, 12, 12, 12, 36, 12, 36, 12, 12,  # s84  3 more
    12, 36, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12,  # s96  after f4
))

# The control class is column 12, which lands on column 0 of the next row.
# Column 0 of every row but the first is REJECT, and the trailing s108 row
# exists only so that s96 + CONTROL stays inside the table.
_TEXT_TRANSITIONS = bytes((
     0, 12, 24, 36, 60, 96, 84, 12, 12, 12, 48, 72,  # s0   accept
    12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12,  # s12  reject
    12,  0, 12, 12, 12, 12, 12,  0, 12,  0, 12, 12,  # s24  1 more
    12, 24, 12, 12, 12, 12, 12, 24, 12, 24, 12, 12,  # s36  2 more
    12, 12, 12, 12, 12, 12, 12, 24, 12, 12, 12, 12,  # s48  after e0
    12, 24, 12, 12, 12, 12, 12, 12, 12, 24, 12, 12,  # s60  after ed
    12, 12, 12, 12, 12, 12, 12, 36, 12, 36, 12, 12,  # s72  after f0
    12, 36, 12, 12, 12, 12, 12, 36, 12, 36, 12, 12,  # s84  3 more
    12, 36, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12,  # s96  after f4
    12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12,  # s108 padding
))
# fmt: on

#: Strict UTF-8: no overlongs, no surrogates, nothing above U+10FFFF.
UTF8 = Tables(
    name="utf-8",
    classes=_UTF8_CLASSES,
    masks=_MASKS,
    transitions=_UTF8_TRANSITIONS,
    ascii_fast_path=True,
)

#: WTF-8: UTF-8 that also admits encoded surrogate halves (ED A0..BF xx).
WTF8 = Tables(
    name="wtf-8",
    classes=_UTF8_CLASSES,
    masks=_MASKS,
    transitions=_WTF8_TRANSITIONS,
    ascii_fast_path=True,
)

#: Strict UTF-8 that additionally rejects ASCII control bytes other than
#: tab, line feed and carriage return.
TEXT = Tables(
    name="text",
    classes=_TEXT_CLASSES,
    masks=_MASKS,
    transitions=_TEXT_TRANSITIONS,
    ascii_fast_path=False,
)

_BY_VARIANT: dict[Variant, Tables] = {
    Variant.UTF8: UTF8,
    Variant.WTF8: WTF8,
    Variant.TEXT: TEXT,
}


def get_tables(variant: Variant | str) -> Tables:
    """Return the table set for *variant*.

    :param variant: A :class:`Variant` or its string value (``"utf-8"``,
        ``"wtf-8"`` or ``"text"``).
    :raises ValueError: If *variant* names no known variant.
    """
    try:
        return _BY_VARIANT[Variant(variant)]
    except ValueError:
        msg = f"unknown encoding variant: {variant!r}"
        raise ValueError(msg) from None
