"""Table-driven UTF-8, WTF-8 and text validation, decoding and transcoding."""

from __future__ import annotations

from runedfa.count import count_codepoints
from runedfa.cursor import decode_one, decode_one_assume_valid
from runedfa.decoder import DecoderState, StreamDecoder, decode_step
from runedfa.enums import ByteClass, StepStatus, Variant
from runedfa.errors import MalformedEncodingError
from runedfa.tables import ACCEPT, REJECT, TEXT, UTF8, WTF8, Tables, get_tables
from runedfa.utf16 import to_utf16le, transcode_to_utf16, utf16_capacity
from runedfa.validate import validate, validate_cursor
from runedfa.view import RuneIterator, RuneView

__version__ = "0.1.0"
__all__ = [
    "ACCEPT",
    "REJECT",
    "TEXT",
    "UTF8",
    "WTF8",
    "ByteClass",
    "DecoderState",
    "MalformedEncodingError",
    "RuneIterator",
    "RuneView",
    "StepStatus",
    "StreamDecoder",
    "Tables",
    "Variant",
    "count_codepoints",
    "decode_one",
    "decode_one_assume_valid",
    "decode_step",
    "get_tables",
    "to_utf16le",
    "transcode_to_utf16",
    "utf16_capacity",
    "validate",
    "validate_cursor",
]
