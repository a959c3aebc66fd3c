"""Enumerations for runedfa."""

import enum


class Variant(enum.Enum):
    """The encodings the engine has table sets for."""

    UTF8 = "utf-8"
    WTF8 = "wtf-8"
    TEXT = "text"


class ByteClass(enum.IntEnum):
    """Role of a single byte in a UTF-8 sequence.

    The numbering is the column order of the transition tables, so the
    values must not change.
    """

    ASCII = 0
    CONT_LOW = 1  # 0x80-0x8F
    LEAD2 = 2  # 0xC2-0xDF
    LEAD3 = 3  # 0xE1-0xEC, 0xEE-0xEF
    LEAD3_ED = 4
    LEAD4_F4 = 5
    LEAD4 = 6  # 0xF1-0xF3
    CONT_HIGH = 7  # 0xA0-0xBF
    INVALID = 8  # 0xC0-0xC1, 0xF5-0xFF
    CONT_MID = 9  # 0x90-0x9F
    LEAD3_E0 = 10
    LEAD4_F0 = 11
    CONTROL = 12  # text tables only


class StepStatus(enum.IntEnum):
    """Outcome of feeding one byte to a :class:`~runedfa.decoder.DecoderState`."""

    PENDING = 0
    ACCEPTED = 1
    REJECTED = 2
