"""Month-by-month statistics derived from the market path and value trajectories."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from phasein.core.horizon import DAYS, MONTHS, month_bounds, round_half_up
from phasein.models import Frequency

# (upper bound in percent, exclusive) -> level name
VOLATILITY_LEVELS: List[Tuple[float, str]] = [
    (1.0, "Ingen/Ekstremt Lav"),
    (2.5, "Veldig Lav"),
    (3.5, "Lav/Gjennomsnittlig Langsiktig"),
    (5.0, "Moderat/Historisk Gjennomsnittlig"),
    (7.5, "Høy"),
    (12.0, "Veldig Høy"),
    (float("inf"), "Ekstremt Høy"),
]


def volatility_level(pct: float) -> Tuple[int, str]:
    """Map a volatility percentage onto the 1..7 scale."""
    for level, (upper, name) in enumerate(VOLATILITY_LEVELS, start=1):
        if pct < upper:
            return level, name
    # only reachable for NaN
    return 1, VOLATILITY_LEVELS[0][1]


def _pct_change(start: float, end: float) -> float:
    if start == 0:
        return 0.0
    return (end / start - 1) * 100


def monthly_volatility(path: Sequence[float]) -> Tuple[List[float], List[int], List[str]]:
    """
    Volatility per month from daily returns.

    Daily returns are bucketed with the evenly rounded month boundaries.
    Within a bucket the population standard deviation is scaled by
    sqrt(bucket length), i.e. to the span of that month, not to a year.
    Empty buckets report 0% / level 1.
    """
    path = np.asarray(path, dtype=float)
    returns = np.diff(path) / path[:-1]

    pcts: List[float] = []
    levels: List[int] = []
    names: List[str] = []
    for start, end in month_bounds(len(path)):
        bucket = returns[start:end]
        pct = float(np.std(bucket) * np.sqrt(bucket.size) * 100) if bucket.size else 0.0
        level, name = volatility_level(pct)
        pcts.append(pct)
        levels.append(level)
        names.append(name)
    return pcts, levels, names


def monthly_market_returns(path: Sequence[float]) -> List[float]:
    """Index change from each month's first to last rounded boundary day."""
    last = len(path) - 1
    out: List[float] = []
    for start, end in month_bounds(len(path)):
        start, end = min(start, last), min(end, last)
        out.append(_pct_change(float(path[start]), float(path[end])))
    return out


def _investments_in_month(frequency: Frequency, month: int) -> float:
    if frequency is Frequency.DAILY:
        return 365 / MONTHS
    if frequency is Frequency.WEEKLY:
        return 52 / MONTHS
    if frequency is Frequency.MONTHLY:
        return 1.0
    if frequency is Frequency.QUARTERLY:
        return 1.0 if month % 3 == 0 else 0.0
    if frequency is Frequency.HALF_YEARLY:
        return 1.0 if month % 6 == 0 else 0.0
    return 1.0 if month == 0 else 0.0


def monthly_allocation(frequency: Frequency, stock_allocation: float) -> List[float]:
    """
    Share of capital (in percent) placed in stocks by the end of each month.

    Contributions are assumed to land evenly per the frequency. The result
    is clamped to the target allocation, so the series is non-decreasing and
    never overshoots.
    """
    if stock_allocation <= 0:
        return [0.0] * MONTHS

    frequency = Frequency.parse(frequency)
    per_investment = stock_allocation / frequency.intervals_per_year

    out: List[float] = []
    cumulative = 0.0
    for month in range(MONTHS):
        cumulative += _investments_in_month(frequency, month) * per_investment
        out.append(min(cumulative, stock_allocation))
    return out


def moving_average(values: Sequence[float], window: int = 3) -> List[float]:
    """Trailing simple moving average; shorter windows at the start."""
    if window < 1:
        raise ValueError("window must be at least 1")
    out: List[float] = []
    for i in range(len(values)):
        chunk = values[max(0, i - window + 1): i + 1]
        out.append(sum(chunk) / len(chunk))
    return out


def _sampled_returns(values: Sequence[float], spacing: int) -> List[float]:
    out: List[float] = []
    for month in range(MONTHS):
        start = month * spacing
        end = (month + 1) * spacing - 1
        start_value = float(values[start]) if start < len(values) else 0.0
        end_value = float(values[end]) if end < len(values) else float(values[-1])
        out.append(_pct_change(start_value, end_value))
    return out


def monthly_returns(
    lump_sum: Sequence[float],
    periodic: Sequence[float],
) -> Tuple[List[float], List[float]]:
    """
    Per-strategy monthly returns, sampled every round(365/12) = 30 days.

    This deliberately ignores the rounded month boundaries used by the
    volatility and market-return series.
    """
    if len(lump_sum) != len(periodic):
        raise ValueError("trajectories must have the same length")
    spacing = round_half_up(DAYS / MONTHS)
    return _sampled_returns(lump_sum, spacing), _sampled_returns(periodic, spacing)
