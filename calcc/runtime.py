"""Runtime support called by compiled programs: reading inputs and writing the result."""

from __future__ import annotations

import re
import sys

_LINE_LIMIT = 63
_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _wrap32(value: int) -> int:
    return (value + (1 << 31)) % (1 << 32) - (1 << 31)


def calc_write(value: int) -> None:
    """Print the result of the computation."""
    print(f"The result is {value}")


def calc_read(name: str) -> int:
    """Prompt for the value of ``name`` and read it from standard input.

    Input that does not start with an integer is reported and ends the
    program with exit status 1.
    """
    sys.stdout.write(f"Enter a value for {name}: ")
    sys.stdout.flush()
    line = sys.stdin.readline(_LINE_LIMIT)
    match = _INTEGER.match(line)
    if match is None:
        sys.stdout.write(f"Value {line} is invalid\n")
        raise SystemExit(1)
    return _wrap32(int(match.group(1)))