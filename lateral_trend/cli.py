from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

import httpx

from lateral_trend.config import get_settings
from lateral_trend.lateral.engine import Strategy, find_longest_lateral_trend
from lateral_trend.lateral.errors import LateralTrendError
from lateral_trend.providers.loader import get_provider
from lateral_trend.reporting import format_report

log = logging.getLogger("lateral_trend_cli")


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser(default_pct: float, default_strategy: Strategy) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lateral-trend",
        description="Find the longest lateral trend in closing price data.",
    )
    parser.add_argument("source", help="CSV file (date,close) or symbol for the configured provider")
    parser.add_argument(
        "--max-pct-change",
        type=float,
        default=default_pct,
        help=f"How far apart high and low may be, in percent of low (default {default_pct})",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--brute",
        action="store_true",
        help="Use the exhaustive search (same as --strategy exhaustive)",
    )
    group.add_argument(
        "--strategy",
        type=Strategy.parse,
        default=default_strategy,
        help="exhaustive or divide-and-conquer",
    )
    parser.add_argument("--limit", type=_non_negative_int, default=0, help="Only use the last N prices (0 = all)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args = build_parser(settings.max_pct_change, settings.strategy).parse_args(argv)
    strategy = Strategy.EXHAUSTIVE if args.brute else args.strategy

    try:
        provider = get_provider(settings, allow_paths=True)
    except (RuntimeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        prices = provider.load_prices(args.source, limit=args.limit or None)

        t0 = time.perf_counter()
        window = find_longest_lateral_trend(prices, args.max_pct_change, strategy)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
    except LateralTrendError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (OSError, ValueError, httpx.HTTPError) as e:
        log.error("Could not load prices source=%s error=%s", args.source, repr(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        provider.close()

    print(format_report(window, elapsed_ms))
    return 0


if __name__ == "__main__":
    sys.exit(main())
