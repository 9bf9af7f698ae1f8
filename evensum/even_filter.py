"""Even-number predicate, sum and filter.

This module holds the only real logic of the app: given an ordered sequence
of integers, compute the sum of its even elements and the subsequence of its
even elements. Responsibilities:
- Decide parity of a single integer (:func:`is_even`).
- Sum and filter in a single in-order pass without mutating the input.

Design notes
- Every function is pure. Printing lives in :mod:`evensum.report` and
    orchestration in :mod:`evensum.main`, so these helpers can be tested
    against plain lists.
- Python integers never overflow, so the sum is exact for any input.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List


def is_even(x: int) -> bool:
    # -2 % 2 == 0 and -3 % 2 == 1, so negatives need no special case
    return x % 2 == 0


def sum_evens(seq: Iterable[int]) -> int:
    """Return the sum of the even elements of ``seq`` (``0`` when empty)."""
    total = 0
    for x in seq:
        if is_even(x):
            total += x
    return total


def filter_evens(seq: Iterable[int]) -> List[int]:
    """Return a new list with the even elements of ``seq`` in their original order."""
    return [x for x in seq if is_even(x)]


@dataclass(frozen=True)
class EvenPredicateResult:
    total: int = 0
    evens: List[int] = field(default_factory=list)


def summarize_evens(seq: Iterable[int]) -> EvenPredicateResult:
    """Compute the even total and the even subsequence in one pass.

    Equivalent to ``EvenPredicateResult(sum_evens(seq), filter_evens(seq))``
    but walks ``seq`` only once, so it also accepts one-shot iterators.
    """
    evens: List[int] = []
    total = 0
    for x in seq:
        if is_even(x):
            evens.append(x)
            total += x
    return EvenPredicateResult(total=total, evens=evens)
