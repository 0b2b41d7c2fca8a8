"""Explicit outcome values for operations that can fail in expected ways.

Looking up an unknown product, typing garbage at a prompt, checking out
an empty cart and running into a capacity ceiling are all normal events
in a shopping session.  They are reported as ``Result`` values carrying
an ``ErrorKind`` rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    EMPTY_CART = "EMPTY_CART"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a ``value`` or an ``error`` with a human-readable message."""

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def failure(error: ErrorKind, message: str) -> Result[T]:
        return Result(error=error, message=message)
