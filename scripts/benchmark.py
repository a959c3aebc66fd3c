#!/usr/bin/env python
"""Time runedfa against CPython's built-in codec.

Runs validate, count, sum-of-codepoints and UTF-16 transcoding over one
input, once with runedfa and once with ``bytes.decode``/``str.encode``, and
prints the per-iteration time of each.
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable
from pathlib import Path

import runedfa

# Make scripts/ importable for utils
_SCRIPTS_DIR = str(Path(__file__).resolve().parent)
if _SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, _SCRIPTS_DIR)

from utils import demo_text, format_bytes  # noqa: E402


def _rune_sum(data: bytes) -> int:
    return sum(runedfa.RuneView.from_validated(data))


def _std_validate(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


_CASES: dict[str, tuple[Callable[[bytes], object], Callable[[bytes], object]]] = {
    "validate": (runedfa.validate, _std_validate),
    "count": (runedfa.count_codepoints, lambda d: len(d.decode("utf-8"))),
    "sum": (_rune_sum, lambda d: sum(map(ord, d.decode("utf-8")))),
    "transcode": (runedfa.to_utf16le, lambda d: d.decode("utf-8").encode("utf-16-le")),
}


def _time(func: Callable[[bytes], object], data: bytes, iterations: int) -> float:
    start = time.perf_counter()
    for _ in range(iterations):
        func(data)
    return (time.perf_counter() - start) / iterations


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark runedfa.")
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=None,
        help="UTF-8 input (default: built-in mixed-script sample)",
    )
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=20,
        help="Iterations per case (default: %(default)s)",
    )
    args = parser.parse_args()

    if args.file is not None:
        try:
            data = args.file.read_bytes()
        except OSError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        data = demo_text()

    print(f"input: {format_bytes(len(data))}, {args.iterations} iterations")
    print(f"{'case':<10} {'runedfa':>12} {'stdlib':>12} {'ratio':>8}")
    for name, (ours, theirs) in _CASES.items():
        if ours(data) != theirs(data):
            print(f"ERROR: {name} results disagree", file=sys.stderr)
            sys.exit(1)
        t_ours = _time(ours, data, args.iterations)
        t_theirs = _time(theirs, data, args.iterations)
        ratio = t_ours / t_theirs if t_theirs else float("inf")
        print(
            f"{name:<10} {t_ours * 1e3:>10.3f}ms {t_theirs * 1e3:>10.3f}ms {ratio:>7.1f}x"
        )


if __name__ == "__main__":
    main()
