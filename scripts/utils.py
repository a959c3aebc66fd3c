"""Shared utilities for scripts and tests."""

from __future__ import annotations

#: One string per sequence length, five codepoints each.
SAMPLES: dict[str, str] = {
    "ascii": "abcde",
    "greek": "αβγδε",
    "math": "∅⊄⊅⊆⊇",
    "emoji": "🤓😎🥸🤩🤯",
}


def format_bytes(n: int) -> str:
    """Format byte count as human-readable string."""
    if n >= 1 << 20:
        return f"{n / (1 << 20):.1f} MiB"
    if n >= 1 << 10:
        return f"{n / (1 << 10):.1f} KiB"
    return f"{n} B"


def demo_text(repeat: int = 200) -> bytes:
    """Return a mixed-script UTF-8 document for benchmarks."""
    line = "The quick brown fox. " + " ".join(SAMPLES.values()) + "\n"
    return (line * repeat).encode("utf-8")
