from __future__ import annotations

from typing import Optional

from lateral_trend.config import Settings, get_settings
from lateral_trend.providers.base import PriceSource
from lateral_trend.providers.csv_file import CsvPriceSource
from lateral_trend.providers.eodhd import EodhdProvider


def get_provider(settings: Optional[Settings] = None, allow_paths: bool = False) -> PriceSource:
    """
    Provider loader / factory.

    Reads PROVIDER from config and returns an instance of the selected provider.
    This is the single place that knows about concrete providers.

    allow_paths lets CSV symbols be arbitrary file paths (trusted callers only).
    """
    settings = settings or get_settings()
    provider_name = settings.provider.strip().upper()

    if provider_name == "CSV":
        return CsvPriceSource(prices_dir=settings.prices_dir, allow_paths=allow_paths)
    if provider_name == "EODHD":
        return EodhdProvider(settings)

    raise ValueError(f"Unknown PROVIDER='{settings.provider}'. Expected: CSV, EODHD")
