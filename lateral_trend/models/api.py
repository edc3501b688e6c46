from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class LateralTrendRequest(BaseModel):
    """
    Body for POST /lateral-trend.

    prices:
      closing prices in cents, oldest first

    max_pct_change / strategy:
      fall back to MAX_PCT_CHANGE / STRATEGY from settings when omitted
    """

    prices: List[int]
    max_pct_change: Optional[float] = None
    strategy: Optional[str] = None
