"""Parsers for single lines of console input.

Each parser takes the raw line and returns a ``Result``.  None of them
prompt or loop; re-prompting is the controller's job.
"""

from __future__ import annotations

import re
from typing import Iterable

from shopsim.domain.model.result import ErrorKind, Result

_INTEGER = re.compile(r"[+-]?\d+")

# Far above any id or quantity; keeps int() clear of conversion limits.
MAX_DIGITS = 18


def parse_integer(raw: str, positive_only: bool = True) -> Result[int]:
    """Parse a whole line as an integer.

    Surrounding whitespace is ignored; anything else that is not part of
    the number (``"3.5"``, ``"4x"``) is rejected.
    """
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        return Result.failure(ErrorKind.INVALID_INPUT, f"Not a number: {raw!r}")
    digits = len(text.lstrip("+-"))
    if digits > MAX_DIGITS:
        return Result.failure(ErrorKind.INVALID_INPUT, f"Number too long: {digits} digits")
    value = int(text)
    if positive_only and value <= 0:
        return Result.failure(ErrorKind.INVALID_INPUT, f"Not positive: {value}")
    return Result.success(value)


def parse_quantity(raw: str) -> Result[int]:
    return parse_integer(raw, positive_only=True)


def parse_product_id(raw: str) -> Result[int]:
    """Any integer is a well-formed id; catalog membership is checked later."""
    return parse_integer(raw, positive_only=False)


def parse_choice(raw: str, allowed: Iterable[str]) -> Result[str]:
    """Accept exactly one character from *allowed*."""
    text = raw.strip()
    if len(text) == 1 and text in set(allowed):
        return Result.success(text)
    return Result.failure(ErrorKind.INVALID_INPUT, f"Invalid choice: {raw!r}")


def parse_yes_no(raw: str) -> Result[bool]:
    """``Y``/``N`` in either case; True means yes."""
    text = raw.strip().upper()
    if text == "Y":
        return Result.success(True)
    if text == "N":
        return Result.success(False)
    return Result.failure(ErrorKind.INVALID_INPUT, f"Expected Y or N: {raw!r}")
