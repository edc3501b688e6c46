from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

import httpx

from lateral_trend.config import Settings, get_settings
from lateral_trend.providers.base import PriceSource, apply_limit, to_cents

log = logging.getLogger("eodhd_provider")


class EodhdProvider(PriceSource):
    """
    EODHD Provider (REST, end-of-day closes).

    load_prices() returns daily closes in cents, oldest first.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.Client] = None) -> None:
        settings = settings or get_settings()

        self.api_token = settings.eodhd_api_token
        if not self.api_token:
            raise RuntimeError("Missing EODHD API token. Set EODHD_API_TOKEN in your .env.")

        # IMPORTANT: EODHD REST endpoints live under https://eodhd.com/api
        raw_base = settings.eodhd_base_url.rstrip("/")
        if raw_base.endswith("eodhd.com"):
            raw_base = raw_base + "/api"
        self.base_url = raw_base

        self._client = client or httpx.Client(timeout=settings.eodhd_timeout_seconds)

    # -------------------------
    # Public interface used by the app
    # -------------------------
    def load_prices(self, symbol: str, limit: Optional[int] = None) -> List[int]:
        rows = self._fetch_daily(symbol.strip().upper())
        prices = [r["close"] for r in rows]
        return apply_limit(prices, limit)

    # -------------------------
    # REST: daily
    # -------------------------
    def _fetch_daily(self, symbol: str) -> list[dict]:
        """
        EODHD daily endpoint:
          GET {base_url}/eod/{symbol}?api_token=...&fmt=json

        Returns [{"ts": datetime, "close": cents}, ...] sorted by ts.
        """
        url = f"{self.base_url}/eod/{symbol}"
        params = {"api_token": self.api_token, "fmt": "json"}

        resp = self._client.get(url, params=params)
        resp.raise_for_status()

        data = resp.json()
        if isinstance(data, dict) and "data" in data:
            data = data["data"]
        if not isinstance(data, list):
            log.warning("Unexpected daily payload type symbol=%s type=%s", symbol, type(data))
            return []

        out: list[dict] = []
        skipped = 0
        for row in data:
            if not isinstance(row, dict):
                skipped += 1
                continue

            ts_raw = row.get("date")
            c = row.get("close")

            # Skip partial rows
            if ts_raw is None or c is None:
                skipped += 1
                continue

            try:
                out.append({"ts": self._parse_ts(ts_raw), "close": to_cents(c)})
            except ValueError:
                skipped += 1

        if skipped:
            log.warning("Skipped malformed daily rows symbol=%s skipped=%d", symbol, skipped)

        out.sort(key=lambda x: x["ts"])
        log.info("Fetched daily closes symbol=%s count=%d", symbol, len(out))
        return out

    # -------------------------
    # Date parsing
    # -------------------------
    def _parse_ts(self, ts_raw: str) -> datetime:
        """Daily rows carry "YYYY-MM-DD"; returned as midnight UTC."""
        dt = datetime.fromisoformat(str(ts_raw).strip())
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    def close(self) -> None:
        self._client.close()
