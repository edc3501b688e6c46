from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, List, Optional

CENT = Decimal("0.01")


def to_cents(value: Any) -> int:
    """
    Converts a price in currency units ("12.34", 12.34) to integer cents.

    Goes through Decimal so 1.15 becomes 115, not 114.
    """
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"not a price: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"not a price: {value!r}")
    return int((amount / CENT).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class PriceSource(ABC):
    """
    Price source contract (interface).

    Any source must implement:
    - load_prices(): closing prices in cents, oldest first
    """

    @abstractmethod
    def load_prices(self, symbol: str, limit: Optional[int] = None) -> List[int]:
        raise NotImplementedError

    def close(self) -> None:
        """Release any held resources. No-op by default."""


def apply_limit(prices: List[int], limit: Optional[int]) -> List[int]:
    """Keeps the last `limit` prices; None or 0 keeps everything."""
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    if limit and len(prices) > limit:
        return prices[-limit:]
    return prices
