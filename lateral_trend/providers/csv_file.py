from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Optional

from lateral_trend.providers.base import PriceSource, apply_limit, to_cents

log = logging.getLogger("csv_provider")


class InvalidSymbolError(ValueError):
    """Symbol does not name a file inside the prices directory."""


class CsvPriceSource(PriceSource):
    """
    Reads closing prices from CSV files shaped like:

        date,close[,anything else]
        2020-01-02,300.35
        ...

    The close is the second column. A first row whose close is not a number
    is taken as a header. Rows are kept in file order.

    allow_paths:
      True for trusted callers (the CLI) that may pass any file path.
      False keeps lookups inside prices_dir.
    """

    def __init__(self, prices_dir: str = "data", allow_paths: bool = False) -> None:
        self.prices_dir = Path(prices_dir)
        self.allow_paths = allow_paths

    def resolve(self, symbol: str) -> Path:
        """
        "SPY"              -> <prices_dir>/SPY.csv
        "path/to/file.csv" -> as given (allow_paths only)
        """
        path = Path(symbol)
        if self.allow_paths:
            if path.suffix or path.is_absolute() or len(path.parts) > 1:
                return path
            return self.prices_dir / f"{symbol}.csv"

        if path.is_absolute() or len(path.parts) != 1:
            raise InvalidSymbolError(f"invalid symbol '{symbol}'")
        name = symbol if symbol.endswith(".csv") else f"{symbol}.csv"
        resolved = (self.prices_dir / name).resolve()
        if not resolved.is_relative_to(self.prices_dir.resolve()):
            raise InvalidSymbolError(f"invalid symbol '{symbol}'")
        return resolved

    def load_prices(self, symbol: str, limit: Optional[int] = None) -> List[int]:
        path = self.resolve(symbol)
        prices: List[int] = []

        with open(path, "r", encoding="utf-8", newline="") as f:
            for line_no, row in enumerate(csv.reader(f), start=1):
                if not row or all(not cell.strip() for cell in row):
                    continue
                if len(row) < 2:
                    raise ValueError(f"{path}:{line_no}: expected date,close but got {row!r}")

                try:
                    prices.append(to_cents(row[1]))
                except ValueError:
                    if line_no == 1:
                        log.debug("Skipping header row path=%s row=%s", path, row)
                        continue
                    raise ValueError(f"{path}:{line_no}: bad close value {row[1]!r}") from None

        log.info("Loaded prices path=%s count=%d", path, len(prices))
        return apply_limit(prices, limit)
