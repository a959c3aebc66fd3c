#!/usr/bin/env python
"""Generate the literal tables in ``src/runedfa/tables.py``.

The tables are derived from the byte-range rules of UTF-8 rather than
typed in: each byte gets a class from the range it falls in, and each
(state, class) pair that the rules do not allow collapses to REJECT.
Run with ``--variant`` to print the literals for one variant.
"""

from __future__ import annotations

import argparse

from runedfa.enums import ByteClass, Variant

C = ByteClass

ACCEPT = 0
REJECT = 12
STRIDE = 12

# Mid-sequence states, in table order.
ONE_MORE = 24
TWO_MORE = 36
AFTER_E0 = 48
AFTER_ED = 60
AFTER_F0 = 72
THREE_MORE = 84
AFTER_F4 = 96

# Rows past the last real state, kept so that ``state + class`` never
# indexes past the end for classes wider than STRIDE.
TEXT_PADDING_ROWS = 1

_CONTINUATIONS = frozenset({C.CONT_LOW, C.CONT_MID, C.CONT_HIGH})

_LEADS: dict[ByteClass, int] = {
    C.ASCII: ACCEPT,
    C.LEAD2: ONE_MORE,
    C.LEAD3: TWO_MORE,
    C.LEAD3_E0: AFTER_E0,
    C.LEAD3_ED: AFTER_ED,
    C.LEAD4_F0: AFTER_F0,
    C.LEAD4: THREE_MORE,
    C.LEAD4_F4: AFTER_F4,
}

# state -> (continuation classes allowed next, state reached)
_CONTINUE: dict[int, tuple[frozenset[ByteClass], int]] = {
    ONE_MORE: (_CONTINUATIONS, ACCEPT),
    TWO_MORE: (_CONTINUATIONS, ONE_MORE),
    # 0xE0 0x80..0x9F would be an overlong 3-byte form.
    AFTER_E0: (frozenset({C.CONT_HIGH}), ONE_MORE),
    # 0xED 0xA0..0xBF encodes U+D800..U+DFFF.
    AFTER_ED: (frozenset({C.CONT_LOW, C.CONT_MID}), ONE_MORE),
    # 0xF0 0x80..0x8F would be an overlong 4-byte form.
    AFTER_F0: (frozenset({C.CONT_MID, C.CONT_HIGH}), TWO_MORE),
    THREE_MORE: (_CONTINUATIONS, TWO_MORE),
    # 0xF4 0x90.. is above U+10FFFF.
    AFTER_F4: (frozenset({C.CONT_LOW}), TWO_MORE),
}

_MASKS: dict[ByteClass, int] = {
    C.ASCII: 0x7F,
    C.LEAD2: 0x1F,
    C.LEAD3: 0x0F,
    C.LEAD3_E0: 0x0F,
    C.LEAD3_ED: 0x0F,
    C.LEAD4: 0x07,
    C.LEAD4_F0: 0x07,
    C.LEAD4_F4: 0x07,
}

# Tab, line feed and carriage return are the only controls text may hold.
_TEXT_CONTROLS = frozenset(range(0x20)) - {0x09, 0x0A, 0x0D} | {0x7F}


def classify(byte: int, variant: Variant = Variant.UTF8) -> ByteClass:  # noqa: PLR0911
    """Return the class of *byte* under *variant*."""
    if variant is Variant.TEXT and byte in _TEXT_CONTROLS:
        return C.CONTROL
    if byte < 0x80:
        return C.ASCII
    if byte < 0x90:
        return C.CONT_LOW
    if byte < 0xA0:
        return C.CONT_MID
    if byte < 0xC0:
        return C.CONT_HIGH
    if byte < 0xC2 or byte > 0xF4:
        return C.INVALID
    if byte < 0xE0:
        return C.LEAD2
    if byte == 0xE0:
        return C.LEAD3_E0
    if byte == 0xED:
        return C.LEAD3_ED
    if byte < 0xF0:
        return C.LEAD3
    if byte == 0xF0:
        return C.LEAD4_F0
    if byte == 0xF4:
        return C.LEAD4_F4
    return C.LEAD4


def build_classes(variant: Variant) -> bytes:
    """Return the 256-entry byte class table."""
    return bytes(classify(b, variant) for b in range(256))


def build_masks() -> bytes:
    """Return the per-class lead byte masks."""
    return bytes(_MASKS.get(cls, 0) for cls in ByteClass)


def build_transitions(variant: Variant) -> bytes:
    """Return the transition table, indexed by ``state + class``."""
    rules = dict(_CONTINUE)
    if variant is Variant.WTF8:
        rules[AFTER_ED] = (_CONTINUATIONS, ONE_MORE)
    rows = AFTER_F4 // STRIDE + 1
    if variant is Variant.TEXT:
        rows += TEXT_PADDING_ROWS
    table = [REJECT] * (rows * STRIDE)
    for cls, target in _LEADS.items():
        table[ACCEPT + cls] = target
    for state, (allowed, target) in rules.items():
        for cls in allowed:
            table[state + cls] = target
    return bytes(table)


def _format(name: str, data: bytes, width: int) -> str:
    lines = [f"{name} = bytes(("]
    for start in range(0, len(data), width):
        row = ", ".join(f"{v:2d}" for v in data[start : start + width])
        lines.append(f"    {row},  # {start:02x}")
    lines.append("))")
    return "\n".join(lines)


def main() -> None:
    """Print the tables for one variant as Python literals."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=Variant.UTF8.value,
        help="Encoding variant (default: %(default)s)",
    )
    args = parser.parse_args()
    variant = Variant(args.variant)
    print(_format("classes", build_classes(variant), 16))
    print()
    print(_format("masks", build_masks(), 13))
    print()
    print(_format("transitions", build_transitions(variant), STRIDE))


if __name__ == "__main__":
    main()
