"""Sliding-window problems over strings and integer sequences."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring of s without repeated characters."""
    seen: set[str] = set()
    longest = 0
    left = 0
    for right, char in enumerate(s):
        while char in seen:
            seen.discard(s[left])
            left += 1
        seen.add(char)
        longest = max(longest, right - left + 1)
    return longest


def length_of_longest_substring_by_index(s: str) -> int:
    """Same result as length_of_longest_substring, tracking last positions.

    Each character remembers the 1-based position where it was last seen;
    the window jumps past a repeat instead of shrinking one step at a time.
    """
    if not s:
        return 0
    last_seen: dict[str, int] = {s[0]: 1}
    longest = 1
    window_mark = 1
    window_start = 0
    for position, char in enumerate(s[1:], start=1):
        previous = last_seen.get(char, 0)
        if previous >= window_mark:
            longest = max(longest, position - window_start)
            window_mark = previous
            window_start = previous
        last_seen[char] = position + 1
    return max(longest, len(s) - window_start)


def _min_window(s: str, t: str, *, record_on_exit: bool) -> str:
    if not t:
        return ""
    need = Counter(t)
    covered = 0
    left = 0
    best_len = len(s) + 1
    best_start = 0
    for right, char in enumerate(s):
        need[char] -= 1
        if need[char] >= 0:
            covered += 1
        while covered == len(t):
            width = right - left + 1
            if not record_on_exit and width < best_len:
                best_len, best_start = width, left
            need[s[left]] += 1
            if need[s[left]] > 0:
                if record_on_exit and width < best_len:
                    best_len, best_start = width, left
                covered -= 1
            left += 1
    if best_len == len(s) + 1:
        return ""
    return s[best_start:best_start + best_len]


def min_window(s: str, t: str) -> str:
    """Shortest substring of s holding every character of t (with counts), or ""."""
    return _min_window(s, t, record_on_exit=False)


def min_window_alt(s: str, t: str) -> str:
    """Like min_window, recording a candidate only when a needed character leaves."""
    return _min_window(s, t, record_on_exit=True)


def min_sub_array_len(s: int, nums: Sequence[int]) -> int:
    """Length of the shortest contiguous run of nums summing to at least s, or 0."""
    if s == 0 or not nums:
        return 0
    best: int | None = None
    total = 0
    begin = 0
    for end, value in enumerate(nums):
        total += value
        while begin <= end and total >= s:
            width = end - begin + 1
            best = width if best is None else min(best, width)
            total -= nums[begin]
            begin += 1
    return 0 if best is None else best


def median_sliding_window(nums: Sequence[int], k: int) -> list[float]:
    """Medians of every window of k consecutive numbers, left to right.

    Raises ValueError if k is not between 1 and len(nums).
    """
    if not 1 <= k <= len(nums):
        raise ValueError(f"window size {k} out of range for {len(nums)} numbers")

    lo = [-value for value in nums[:k]]  # max heap, stored negated
    heapq.heapify(lo)
    hi: list[int] = []  # min heap
    for _ in range(k // 2):
        heapq.heappush(hi, -heapq.heappop(lo))

    delayed: Counter[int] = Counter()
    medians: list[float] = []
    i = k
    while True:
        if k % 2:
            medians.append(float(-lo[0]))
        else:
            medians.append((-lo[0] + hi[0]) * 0.5)

        if i >= len(nums):
            break

        outgoing = nums[i - k]
        incoming = nums[i]
        i += 1

        balance = -1 if outgoing <= -lo[0] else 1
        delayed[outgoing] += 1

        if lo and incoming <= -lo[0]:
            balance += 1
            heapq.heappush(lo, -incoming)
        else:
            balance -= 1
            heapq.heappush(hi, incoming)

        if balance < 0:
            heapq.heappush(lo, -heapq.heappop(hi))
            balance += 1
        if balance > 0:
            heapq.heappush(hi, -heapq.heappop(lo))
            balance -= 1

        while lo and delayed[-lo[0]]:
            delayed[-lo[0]] -= 1
            heapq.heappop(lo)
        while hi and delayed[hi[0]]:
            delayed[hi[0]] -= 1
            heapq.heappop(hi)

    return medians