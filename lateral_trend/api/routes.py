from __future__ import annotations

import logging
import time
from typing import Optional, Sequence

import httpx
from fastapi import APIRouter, HTTPException, Query

from lateral_trend.config import get_settings
from lateral_trend.lateral.engine import Strategy, find_longest_lateral_trend
from lateral_trend.models.api import LateralTrendRequest
from lateral_trend.providers.csv_file import InvalidSymbolError
from lateral_trend.providers.loader import get_provider
from lateral_trend.reporting import window_to_dict

router = APIRouter()
log = logging.getLogger("api")


def _run_search(prices: Sequence[int], max_pct_change: Optional[float], strategy: Optional[str]) -> dict:
    settings = get_settings()
    pct = settings.max_pct_change if max_pct_change is None else max_pct_change

    try:
        selected = Strategy.parse(strategy) if strategy else settings.strategy
        t0 = time.perf_counter()
        window = find_longest_lateral_trend(prices, pct, selected)
    except ValueError as e:  # LateralTrendError or an unknown strategy name
        raise HTTPException(status_code=422, detail=str(e)) from None
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    return {
        "window": window_to_dict(window),
        "max_pct_change": pct,
        "strategy": selected.value,
        "elapsed_ms": round(elapsed_ms, 3),
    }


@router.post("/lateral-trend")
def lateral_trend_from_body(req: LateralTrendRequest):
    """
    Runs the search over prices sent in the request body.
    """
    return _run_search(req.prices, req.max_pct_change, req.strategy)


@router.get("/lateral-trend")
def lateral_trend_for_symbol(
    symbol: str = Query(..., description="CSV file name in PRICES_DIR or provider symbol, e.g., SPY.US"),
    max_pct_change: Optional[float] = Query(None, description="Max high/low spread in percent"),
    strategy: Optional[str] = Query(None, description="exhaustive or divide-and-conquer"),
    limit: int = Query(0, ge=0, description="Only use the last N prices (0 = all)"),
):
    """
    Loads prices through the configured provider, then runs the search.
    """
    try:
        provider = get_provider()
    except (RuntimeError, ValueError) as e:
        raise HTTPException(status_code=503, detail=str(e)) from None

    try:
        prices = provider.load_prices(symbol, limit=limit or None)
    except InvalidSymbolError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"no price data for '{symbol}'") from None
    except httpx.HTTPError as e:
        log.error("Provider fetch failed symbol=%s error=%s", symbol, repr(e))
        raise HTTPException(status_code=502, detail=f"price provider failed: {e}") from None
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None
    finally:
        provider.close()

    result = _run_search(prices, max_pct_change, strategy)
    result["symbol"] = symbol
    result["count"] = len(prices)
    return result
