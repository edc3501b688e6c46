# lateral_trend/config.py
import os
from dataclasses import dataclass
from dotenv import load_dotenv

from lateral_trend.lateral.engine import DEFAULT_MAX_PCT_CHANGE, Strategy

# Loads variables from a local .env file into environment variables (dev only).
load_dotenv()


@dataclass(frozen=True)
class Settings:
    # App config
    app_env: str
    log_level: str
    provider: str

    # Search defaults
    max_pct_change: float
    strategy: Strategy

    # Provider config (CSV)
    prices_dir: str

    # Provider config (EODHD)
    eodhd_base_url: str
    eodhd_api_token: str
    eodhd_timeout_seconds: float


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name}={raw!r} is not a number") from None


def get_settings() -> Settings:
    """
    Reads env vars and returns a Settings object.

    The EODHD token may be empty here; the EODHD provider itself refuses to
    start without one.
    """
    try:
        strategy = Strategy.parse(os.getenv("STRATEGY", Strategy.DIVIDE_AND_CONQUER.value))
    except ValueError as e:
        raise RuntimeError(f"STRATEGY: {e}") from None

    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        provider=os.getenv("PROVIDER", "CSV"),
        max_pct_change=_float_env("MAX_PCT_CHANGE", DEFAULT_MAX_PCT_CHANGE),
        strategy=strategy,
        prices_dir=os.getenv("PRICES_DIR", "data"),
        eodhd_base_url=os.getenv("EODHD_BASE_URL", "https://eodhd.com/api"),
        eodhd_api_token=(os.getenv("EODHD_API_TOKEN") or os.getenv("EODHD_API_KEY") or "").strip(),
        eodhd_timeout_seconds=_float_env("EODHD_TIMEOUT_SECONDS", 20.0),
    )
