from __future__ import annotations

from typing import Dict, Optional

from lateral_trend.models.window import Window


def format_report(window: Window, elapsed_ms: Optional[float] = None) -> str:
    lines = [
        f"Longest lateral trend has length {window.length}",
        "Price range is {low:.2f} to {high:.2f}, a {pct:.1f}% change".format(
            low=window.low / 100.0,
            high=window.high / 100.0,
            pct=window.pct_change,
        ),
    ]
    if elapsed_ms is not None:
        lines.append(f"Time: {elapsed_ms:.0f} ms")
    return "\n".join(lines)


def window_to_dict(window: Window) -> Dict:
    """JSON-friendly view of a window; prices stay in cents."""
    return {
        "start": window.start,
        "end": window.end,
        "length": window.length,
        "low": window.low,
        "high": window.high,
        "pct_change": round(window.pct_change, 4),
    }
