"""Array lookups and simple sequences."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum(numbers: Sequence[int], target: int) -> list[int]:
    """Return the ascending indices of two numbers adding up to target, or []."""
    last_index = {value: index for index, value in enumerate(numbers)}
    for i, value in enumerate(numbers):
        j = last_index.get(target - value)
        if j is not None and j != i:
            return sorted((i, j))
    return []


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; 0 for n <= 0."""
    if n <= 0:
        return 0
    prev, cur = 0, 1
    for _ in range(n - 1):
        prev, cur = cur, prev + cur
    return cur