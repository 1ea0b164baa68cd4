"""
Merge Sort
==========
In-place, range-based merge sort (CLRS chapter 2).

``merge_sort(seq, low, high)`` sorts the inclusive range ``seq[low..high]``
by splitting it at ``mid = (low + high) // 2``, sorting both halves and
merging them back. Two merge techniques share one contract:

* ``merge``          copies each run into a scratch list ending in the
                     ``TOP`` sentinel, so the scan needs no bounds checks.
* ``merge_buffered`` merges both runs into a fresh buffer with explicit
                     bounds checks, then copies the buffer back.

Both are stable: on equal keys the left run wins. Indices are never
validated here; see ``sort_errors.check_range`` for user-facing input.
"""

from __future__ import annotations

from typing import (
    Any, Callable, Dict, Iterable, List, MutableSequence, Optional, TypeVar,
)

from algorithms.sorting.sort_config import resolve_variant
from algorithms.sorting.sort_metrics import SortStats

T = TypeVar("T")
KeyFn = Optional[Callable[[T], Any]]
MergeFn = Callable[..., None]


class _Top:
    """Compares greater than every other object and equal only to itself."""

    __slots__ = ()

    def __lt__(self, other):
        return False

    def __le__(self, other):
        return other is self

    def __gt__(self, other):
        return other is not self

    def __ge__(self, other):
        return True

    def __repr__(self):
        return "TOP"


TOP = _Top()


def merge(
    seq: MutableSequence[T],
    low: int,
    mid: int,
    high: int,
    *,
    key: KeyFn = None,
    stats: Optional[SortStats] = None,
) -> None:
    """
    Merge the sorted runs ``seq[low..mid]`` and ``seq[mid+1..high]`` in place.

    Performs exactly ``high - low + 1`` writes. Each scratch run ends in
    ``TOP``, so once one run is used up every remaining comparison picks
    from the other one.
    """
    left = [seq[i] for i in range(low, mid + 1)]
    right = [seq[i] for i in range(mid + 1, high + 1)]
    if key is None:
        left_keys, right_keys = left, right
    else:
        left_keys = [key(x) for x in left]
        right_keys = [key(x) for x in right]
    left_keys.append(TOP)
    right_keys.append(TOP)

    i = j = 0
    for k in range(low, high + 1):
        if left_keys[i] <= right_keys[j]:   # ties go left (stable)
            seq[k] = left[i]
            i += 1
        else:
            seq[k] = right[j]
            j += 1

    if stats is not None:
        n = high - low + 1
        stats.comparisons += n
        stats.writes += n
        stats.merges += 1


def merge_buffered(
    seq: MutableSequence[T],
    low: int,
    mid: int,
    high: int,
    *,
    key: KeyFn = None,
    stats: Optional[SortStats] = None,
) -> None:
    """Merge two adjacent sorted runs through a temporary buffer (stable)."""
    buffer: List[T] = []
    keys = None if key is None else [key(seq[x]) for x in range(low, high + 1)]
    i, j = low, mid + 1
    comparisons = 0

    while i <= mid and j <= high:
        a, b = seq[i], seq[j]
        comparisons += 1
        if keys is None:
            left_first = a <= b
        else:
            left_first = keys[i - low] <= keys[j - low]
        if left_first:
            buffer.append(a)
            i += 1
        else:
            buffer.append(b)
            j += 1

    # Append remaining tail
    while i <= mid:
        buffer.append(seq[i])
        i += 1
    while j <= high:
        buffer.append(seq[j])
        j += 1

    for offset, item in enumerate(buffer):
        seq[low + offset] = item

    if stats is not None:
        stats.comparisons += comparisons
        stats.writes += len(buffer)
        stats.merges += 1


MERGE_VARIANTS: Dict[str, MergeFn] = {
    "sentinel": merge,
    "buffered": merge_buffered,
}


def merge_sort(
    seq: MutableSequence[T],
    low: int = 0,
    high: Optional[int] = None,
    *,
    key: KeyFn = None,
    merge_fn: Optional[MergeFn] = None,
    stats: Optional[SortStats] = None,
) -> None:
    """
    Sort ``seq[low..high]`` (inclusive) in place.

    Parameters
    ----------
    seq : mutable sequence
        Sorted in place; indices outside the range are left alone.
    low, high : int
        Inclusive bounds. ``high`` defaults to ``len(seq) - 1``. A range
        with ``low >= high`` is already sorted.
    key : callable, optional
        Same meaning as ``sorted(..., key=...)``.
    merge_fn : callable, optional
        ``merge`` (default) or ``merge_buffered``.
    stats : SortStats, optional
        Receives operation counts for this call.
    """
    if high is None:
        high = len(seq) - 1
    if merge_fn is None:
        merge_fn = merge
    _merge_sort(seq, low, high, key, merge_fn, stats, 0)


def _merge_sort(seq, low, high, key, merge_fn, stats, depth):
    if stats is not None and depth > stats.max_depth:
        stats.max_depth = depth
    if low < high:
        mid = (low + high) // 2
        _merge_sort(seq, low, mid, key, merge_fn, stats, depth + 1)
        _merge_sort(seq, mid + 1, high, key, merge_fn, stats, depth + 1)
        merge_fn(seq, low, mid, high, key=key, stats=stats)


def merge_sort_buffered(
    seq: MutableSequence[T],
    low: int = 0,
    high: Optional[int] = None,
    *,
    key: KeyFn = None,
    stats: Optional[SortStats] = None,
) -> None:
    """``merge_sort`` using the temporary-buffer merge."""
    merge_sort(seq, low, high, key=key, merge_fn=merge_buffered, stats=stats)


def sorted_copy(
    items: Iterable[T],
    *,
    key: KeyFn = None,
    variant: Optional[str] = None,
) -> List[T]:
    """
    Return a new list containing *items* in ascending order.

    Accepts any iterable (list, tuple, set, dict_keys, ...); the input is
    never mutated. *variant* names the merge technique, falling back to
    ``MERGESORT_VARIANT`` and then the sentinel merge.
    """
    result: List[T] = list(items)
    merge_sort(result, key=key, merge_fn=MERGE_VARIANTS[resolve_variant(variant)])
    return result
