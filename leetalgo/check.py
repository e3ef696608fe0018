"""Comparisons of results that may come back in any order."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import zip_longest
from typing import Optional

from .linked_list import ListNode

_TOLERANCE = 10e-5
_MISSING = object()


def lists_equal(head0: Optional[ListNode], head1: Optional[ListNode]) -> bool:
    """True if both linked lists hold the same values in the same order."""
    first = iter(head0) if head0 is not None else iter(())
    second = iter(head1) if head1 is not None else iter(())
    return all(
        a == b for a, b in zip_longest(first, second, fillvalue=_MISSING)
    )


def same_strings(val1: Sequence[str], val2: Sequence[str]) -> bool:
    """True if the sizes match and every string of val1 occurs in val2.

    Duplicates are not counted.
    """
    return len(val1) == len(val2) and all(item in val2 for item in val1)


def same_sequences(
    val1: Sequence[Sequence[int]], val2: Sequence[Sequence[int]]
) -> bool:
    """True if the sizes match and every inner sequence of val1 occurs in val2.

    Inner sequences are compared in order; the outer order does not matter.
    """
    if len(val1) != len(val2):
        return False
    wanted = [list(inner) for inner in val2]
    return all(list(inner) in wanted for inner in val1)


def same_members(val1: Sequence[int], val2: Sequence[int]) -> bool:
    """True if the sizes match and every number of val1 occurs in val2.

    Duplicates are not counted.
    """
    return len(val1) == len(val2) and all(item in val2 for item in val1)


def equal_in_order(val1: Sequence[int], val2: Sequence[int]) -> bool:
    """True if both sequences hold the same numbers in the same order."""
    return list(val1) == list(val2)


def approx_equal(vec1: Sequence[float], vec2: Sequence[float]) -> bool:
    """True if the sizes match and each pair differs by at most 10e-5."""
    return len(vec1) == len(vec2) and all(
        abs(a - b) <= _TOLERANCE for a, b in zip(vec1, vec2)
    )