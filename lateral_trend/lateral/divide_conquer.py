from __future__ import annotations

from typing import Sequence

from lateral_trend.lateral.errors import EmptyInputError
from lateral_trend.models.window import Window


def find_longest_divide_and_conquer(prices: Sequence[int], max_pct_change: float) -> Window:
    """
    Divide-and-conquer search, shaped like the classic max-subarray split:
    the longest feasible window is either inside the left half, inside the
    right half, or crosses the midpoint.

    Halves are passed as index ranges over the same read-only sequence.
    Recursion depth is O(log n); the crossing scan keeps the worst case at
    O(n^2), same as the exhaustive search.
    """
    if len(prices) == 0:
        raise EmptyInputError()
    return _solve(prices, max_pct_change, 0, len(prices) - 1)


def _solve(prices: Sequence[int], max_pct_change: float, first: int, last: int) -> Window:
    if last - first + 1 <= 1:
        return Window.singleton(first, prices)

    mid = (first + last) // 2
    left = _solve(prices, max_pct_change, first, mid)
    right = _solve(prices, max_pct_change, mid + 1, last)
    cross = crossing_best(prices, max_pct_change, first, mid, last)

    # ties: crossing, then right, then left
    best = cross
    if right.length > best.length:
        best = right
    if left.length > best.length:
        best = left
    return best


def crossing_best(
    prices: Sequence[int],
    max_pct_change: float,
    first: int,
    mid: int,
    last: int,
) -> Window:
    """
    Longest feasible window in [first, last] that contains both mid and mid+1.

    The left anchor walks from mid down to first. For each anchor the window
    grows one price at a time to the right; the first infeasible merge ends
    that anchor's scan since growing further cannot bring it back under the
    bound.

    Returns the singleton at mid when no crossing window is feasible.
    """
    if not (first <= mid < last):
        raise ValueError(f"need first <= mid < last, got first={first} mid={mid} last={last}")

    best = Window.singleton(mid, prices)

    anchor = mid
    while anchor >= first:
        cur = Window.singleton(anchor, prices)
        for right in range(anchor + 1, last + 1):
            cur = cur.merge(Window.singleton(right, prices))
            if not cur.is_feasible(max_pct_change):
                break
            if right > mid and cur.length > best.length:
                best = cur
        anchor -= 1

    return best
