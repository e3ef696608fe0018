"""Greedy allocation and ordering problems."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key


def candy(ratings: Sequence[int]) -> int:
    """Fewest candies so that each child gets one and higher-rated neighbours get more."""
    size = len(ratings)
    if size < 2:
        return size
    counts = [1] * size
    for i in range(1, size):
        if ratings[i] > ratings[i - 1]:
            counts[i] = counts[i - 1] + 1
    for i in range(size - 1, 0, -1):
        if ratings[i] < ratings[i - 1]:
            counts[i - 1] = max(counts[i - 1], counts[i] + 1)
    return sum(counts)


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Sequence[int]) -> str:
    """Arrange the numbers to form the largest number, as a string."""
    parts = sorted((str(n) for n in nums), key=cmp_to_key(_concat_order))
    result = "".join(parts)
    if result.startswith("0"):
        return "0"
    return result


def find_content_children(g: Sequence[int], s: Sequence[int]) -> int:
    """Count children whose greed g[i] can be met by a distinct cookie size s[j]."""
    greeds = sorted(g)
    sizes = iter(sorted(s))
    content = 0
    for greed in greeds:
        for size in sizes:
            if greed <= size:
                content += 1
                break
        else:
            break
    return content