"""Synthetic one-year market index path."""

from __future__ import annotations

from typing import Optional

import numpy as np

from phasein.core.horizon import BASE_INDEX, DAYS


def _check_days(days: int) -> None:
    if days < 2:
        raise ValueError(f"days must be at least 2, got {days}")


def detrended_noise(
    volatility: float,
    days: int = DAYS,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Zero-mean random walk that starts and ends at exactly 0.

    Each step adds U(-1, 1) scaled by the annual volatility converted to a
    daily shock (volatility / 100 / sqrt(365)). The walk is then tilted by a
    straight line through its end point so the noise carries no net drift.
    """
    _check_days(days)
    rng = rng if rng is not None else np.random.default_rng()

    daily_shock = volatility / 100 / np.sqrt(365)
    steps = rng.uniform(-1.0, 1.0, size=days - 1) * daily_shock
    walk = np.concatenate(([0.0], np.cumsum(steps)))

    slope = walk[-1] / (days - 1)
    return walk - slope * np.arange(days)


def simulate_market_path(
    market_growth: float,
    volatility: float,
    days: int = DAYS,
    rng: Optional[np.random.Generator] = None,
    base_index: float = BASE_INDEX,
) -> np.ndarray:
    """
    Daily index levels for the horizon.

      level[i] = base_index * (1 + growth)^(i / (days - 1)) * (1 + noise[i])

    The last level is exactly (1 + market_growth/100) times the first one;
    volatility only shapes the path in between.
    """
    _check_days(days)
    noise = detrended_noise(volatility, days, rng)

    final_factor = 1 + market_growth / 100
    trend = base_index * np.power(final_factor, np.arange(days) / (days - 1))
    return trend * (1 + noise)
