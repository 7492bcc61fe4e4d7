"""Full recomputation: market path -> both strategies -> monthly statistics."""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from phasein.config import AppConfig
from phasein.core.analytics import (
    monthly_allocation,
    monthly_market_returns,
    monthly_returns,
    monthly_volatility,
    moving_average,
)
from phasein.core.horizon import MONTH_LABELS
from phasein.core.market import simulate_market_path
from phasein.core.strategies import project_lump_sum, project_periodic
from phasein.models import parse_inputs
from phasein.schemas.simulation import SimulationResult

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def run(
    inputs: Any,
    rng: Optional[np.random.Generator] = None,
    config: Optional[AppConfig] = None,
) -> SimulationResult:
    """
    Run one simulation.

    `inputs` may be a SimulationInputs or a raw mapping; raw input is
    validated first and InvalidInputError is raised before any work is done.
    Without an explicit `rng` a fresh generator is created from the
    configured seed (None -> a different path on every run).
    """
    inputs = parse_inputs(inputs)
    config = config or AppConfig()
    rng = rng if rng is not None else make_rng(config.random_seed)

    path = simulate_market_path(inputs.marketGrowth, inputs.volatility, config.days, rng)
    lump_sum = project_lump_sum(
        inputs.investmentAmount, path, inputs.bankRate, inputs.stockAllocation
    )
    periodic = project_periodic(
        inputs.investmentAmount,
        path,
        inputs.frequency,
        inputs.bankRate,
        inputs.stockAllocation,
    )

    vol_pcts, vol_levels, vol_names = monthly_volatility(path)
    lump_returns, periodic_returns = monthly_returns(lump_sum, periodic)

    result = SimulationResult(
        days=config.days,
        months=list(MONTH_LABELS),
        marketPath=path.tolist(),
        lumpSumTrajectory=lump_sum.tolist(),
        periodicTrajectory=periodic.tolist(),
        monthlyVolatilityPct=vol_pcts,
        monthlyVolatilityLevel=vol_levels,
        monthlyVolatilityLevelName=vol_names,
        monthlyAllocationPct=monthly_allocation(inputs.frequency, inputs.stockAllocation),
        monthlyMarketReturnPct=monthly_market_returns(path),
        monthlyLumpSumReturnPct=lump_returns,
        monthlyPeriodicReturnPct=periodic_returns,
        monthlyPeriodicReturnMovingAvgPct=moving_average(periodic_returns, window=3),
        finalLumpSumValue=float(lump_sum[-1]),
        finalPeriodicValue=float(periodic[-1]),
    )

    logger.debug(
        "simulated %s days (%s): lump sum %.2f, periodic %.2f",
        config.days,
        inputs.frequency.value,
        result.finalLumpSumValue,
        result.finalPeriodicValue,
    )
    return result
