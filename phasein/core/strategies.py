"""Portfolio value trajectories for the two investment strategies."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from phasein.core.horizon import DAYS, round_half_up
from phasein.models import Frequency


def project_lump_sum(
    amount: float,
    path: Sequence[float],
    bank_rate: float,
    stock_allocation: float,
) -> np.ndarray:
    """
    Everything is deposited on day one and never rebalanced.

      value[i] = stock_share * path[i] / path[0] + cash_share * daily_factor^i

    The cash share compounds with a 365-day base.
    """
    path = np.asarray(path, dtype=float)
    stock_share = amount * (stock_allocation / 100)
    cash_share = amount * (1 - stock_allocation / 100)
    daily_factor = (1 + bank_rate / 100) ** (1 / DAYS)

    days = np.arange(len(path))
    return stock_share * (path / path[0]) + cash_share * np.power(daily_factor, days)


def contribution_schedule(
    amount: float,
    frequency: Frequency,
    stock_allocation: float,
    days: int = DAYS,
) -> List[Tuple[int, float]]:
    """Return the [(day, amount), ...] moves from cash into stock."""
    frequency = Frequency.parse(frequency)
    intervals = frequency.intervals_per_year
    per_interval = amount * (stock_allocation / 100) / intervals
    spacing = max(round_half_up(days / intervals), 1)

    schedule: List[Tuple[int, float]] = []
    day = 0
    while day < days and len(schedule) < intervals:
        schedule.append((day, per_interval))
        day += spacing
    return schedule


def project_periodic(
    amount: float,
    path: Sequence[float],
    frequency: Frequency,
    bank_rate: float,
    stock_allocation: float,
) -> np.ndarray:
    """
    Phase the stock allocation in at fixed intervals.

    Order of operations per day:
      1) On a contribution day, move one contribution from cash to stock.
      2) After day 0, grow stock by the day-over-day market move.
      3) Grow cash every day (day 0 included) at the bank rate, compounded
         over the horizon length rather than 365 days.
    """
    path = np.asarray(path, dtype=float)
    days = len(path)
    transfers = dict(contribution_schedule(amount, frequency, stock_allocation, days))
    daily_factor = (1 + bank_rate / 100) ** (1 / days)

    stock_value = 0.0
    cash_value = float(amount)
    values = np.empty(days)

    for i in range(days):
        contribution = transfers.get(i)
        if contribution is not None:
            cash_value -= contribution
            stock_value += contribution

        if i > 0:
            stock_value *= path[i] / path[i - 1]

        cash_value *= daily_factor
        values[i] = stock_value + cash_value

    return values
