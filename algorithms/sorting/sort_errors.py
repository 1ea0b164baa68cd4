"""
Sorter errors.

The in-place sort never checks its inputs. These exceptions belong to the
outer surfaces (CLI arguments, variant selection) that validate user input
before handing it to the unchecked core.
"""

from __future__ import annotations

from typing import Any, Optional


class SortError(RuntimeError):
    """
    Base class for errors raised around the merge sort toolkit.
    """

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message)
        self.context = context


class InvalidRangeError(SortError):
    """
    Raised when a requested inclusive range does not fit the sequence.
    """

    def __init__(
        self,
        low: int,
        high: int,
        length: int,
        *,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(
            f"range [{low}, {high}] is outside a sequence of length {length}",
            context=context,
        )
        self.low = low
        self.high = high
        self.length = length


class UnknownVariantError(SortError):
    """Raised for a merge variant name nobody registered."""

    def __init__(self, name: Any, choices, *, context: Optional[str] = None) -> None:
        super().__init__(
            f"unknown merge variant {name!r} (choose from {', '.join(choices)})",
            context=context,
        )
        self.name = name
        self.choices = tuple(choices)


def check_range(seq, low: int, high: int) -> None:
    """
    Validate an inclusive range against *seq*.

    Empty and single element ranges (low >= high) are accepted as long as
    the indices themselves are not negative and, for a non-empty sequence,
    do not point past its end. An empty sequence only accepts (0, -1).
    """
    n = len(seq)
    if low < 0 or high < -1:
        raise InvalidRangeError(low, high, n)
    if n == 0:
        if low > 0 or high > -1:
            raise InvalidRangeError(low, high, n)
        return
    if low >= n or high >= n:
        raise InvalidRangeError(low, high, n)
