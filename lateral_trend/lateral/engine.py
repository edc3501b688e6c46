from __future__ import annotations

import logging
import math
import time
from enum import Enum
from typing import Callable, Dict, Sequence

from lateral_trend.lateral.divide_conquer import find_longest_divide_and_conquer
from lateral_trend.lateral.errors import (
    EmptyInputError,
    InvalidThresholdError,
    NonPositivePriceError,
)
from lateral_trend.lateral.exhaustive import find_longest_exhaustive
from lateral_trend.models.window import Window

log = logging.getLogger("lateral_search")

DEFAULT_MAX_PCT_CHANGE = 5.0


class Strategy(str, Enum):
    EXHAUSTIVE = "exhaustive"
    DIVIDE_AND_CONQUER = "divide-and-conquer"

    @classmethod
    def parse(cls, raw: str | Strategy) -> Strategy:
        """Accepts enum values plus loose spellings like 'divide_and_conquer' or 'brute'."""
        if isinstance(raw, Strategy):
            return raw
        key = str(raw).strip().lower().replace("_", "-")
        if key in ("brute", "brute-force"):
            return cls.EXHAUSTIVE
        if key in ("dc", "divide-conquer"):
            return cls.DIVIDE_AND_CONQUER
        try:
            return cls(key)
        except ValueError:
            expected = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown strategy '{raw}'. Expected one of: {expected}") from None


_STRATEGIES: Dict[Strategy, Callable[[Sequence[int], float], Window]] = {
    Strategy.EXHAUSTIVE: find_longest_exhaustive,
    Strategy.DIVIDE_AND_CONQUER: find_longest_divide_and_conquer,
}


def validate_threshold(max_pct_change: float) -> float:
    try:
        value = float(max_pct_change)
    except (TypeError, ValueError):
        raise InvalidThresholdError(max_pct_change) from None
    if math.isnan(value) or value < 0:
        raise InvalidThresholdError(max_pct_change)
    return value


def validate_prices(prices: Sequence[int]) -> None:
    if len(prices) == 0:
        raise EmptyInputError()
    for i, p in enumerate(prices):
        if p <= 0:
            raise NonPositivePriceError(i, p)


def find_longest_lateral_trend(
    prices: Sequence[int],
    max_pct_change: float = DEFAULT_MAX_PCT_CHANGE,
    strategy: str | Strategy = Strategy.DIVIDE_AND_CONQUER,
) -> Window:
    """
    Longest run of prices whose high and low differ by at most
    max_pct_change percent of the low.

    prices: closing prices in cents, oldest first
    strategy: "exhaustive" or "divide-and-conquer"; both return a window of
      the same length, but may pick different windows when several tie.

    Raises EmptyInputError, InvalidThresholdError or NonPositivePriceError
    before any searching happens.
    """
    threshold = validate_threshold(max_pct_change)
    selected = Strategy.parse(strategy)
    validate_prices(prices)
    log.debug("Validated input n=%d max_pct_change=%s strategy=%s", len(prices), threshold, selected.value)

    t0 = time.perf_counter()
    window = _STRATEGIES[selected](prices, threshold)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    log.info(
        "Lateral trend strategy=%s n=%d max_pct_change=%s window=[%d, %d] length=%d elapsed_ms=%.1f",
        selected.value,
        len(prices),
        threshold,
        window.start,
        window.end,
        window.length,
        elapsed_ms,
    )
    return window
