from __future__ import annotations

from typing import Sequence

from lateral_trend.lateral.errors import EmptyInputError
from lateral_trend.models.window import Window


def find_longest_exhaustive(prices: Sequence[int], max_pct_change: float) -> Window:
    """
    Reference search: try every start index and grow the window to the right
    until it breaks the bound.

    Once [i, j] is infeasible every [i, j'] with j' > j is too, so the inner
    scan stops at the first failure. Worst case O(n^2) on a flat series.

    Ties: among equal-length windows the last one found wins.
    """
    n = len(prices)
    if n == 0:
        raise EmptyInputError()

    best = Window.singleton(0, prices)

    for i in range(n - 1):
        cur = Window.singleton(i, prices)
        for j in range(i + 1, n):
            cur = cur.merge(Window.singleton(j, prices))
            if not cur.is_feasible(max_pct_change):
                break
            if cur.length >= best.length:
                best = cur

    return best
