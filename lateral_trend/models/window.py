from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from lateral_trend.lateral.errors import NonAdjacentMergeError


@dataclass(frozen=True)
class Window:
    """
    Window = a contiguous run of prices [start, end] (inclusive, 0-indexed).

    low/high: exact min/max of the prices inside the run (cents)

    Windows never change once built. Growing a window means building a new
    one with merge(), which keeps low/high exact without rescanning prices.
    """
    start: int
    end: int
    low: int
    high: int

    @classmethod
    def singleton(cls, index: int, prices: Sequence[int]) -> "Window":
        if index < 0 or index >= len(prices):
            raise IndexError(f"index {index} outside prices[0..{len(prices) - 1}]")
        price = prices[index]
        return cls(start=index, end=index, low=price, high=price)

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def pct_change(self) -> float:
        """Spread between high and low as a percentage of low."""
        return 100.0 * (self.high - self.low) / self.low

    def merge(self, other: "Window") -> "Window":
        """Window spanning self followed directly by other."""
        if self.end + 1 != other.start:
            raise NonAdjacentMergeError(
                f"cannot merge [{self.start}, {self.end}] with [{other.start}, {other.end}]"
            )
        return Window(
            start=self.start,
            end=other.end,
            low=min(self.low, other.low),
            high=max(self.high, other.high),
        )

    def is_feasible(self, max_pct_change: float) -> bool:
        # integer side stays exact: (high - low) / low * 100 <= t
        return (self.high - self.low) * 100 <= max_pct_change * self.low


def merge(a: Window, b: Window) -> Window:
    return a.merge(b)
