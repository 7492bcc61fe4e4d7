"""Fixed one-year horizon and the month partitioning shared by the engine."""

import math
from typing import List, Tuple

DAYS = 365
BASE_INDEX = 10000.0
MONTHS = 12
MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Des"]


def round_half_up(value: float) -> int:
    """Round .5 upwards (182.5 -> 183), unlike the built-in round()."""
    return int(math.floor(value + 0.5))


def month_bounds(days: int = DAYS) -> List[Tuple[int, int]]:
    """Return [(start, endExclusive), ...] for the 12 months of a `days` long horizon."""
    return [
        (round_half_up(i * days / MONTHS), round_half_up((i + 1) * days / MONTHS))
        for i in range(MONTHS)
    ]
