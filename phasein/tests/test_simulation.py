from __future__ import annotations

from math import isclose

import numpy as np
import pytest

from phasein.config import AppConfig
from phasein.core.simulation import run
from phasein.models import InvalidInputError, SimulationInputs

MONTHLY_FIELDS = [
    "monthlyVolatilityPct",
    "monthlyVolatilityLevel",
    "monthlyVolatilityLevelName",
    "monthlyAllocationPct",
    "monthlyMarketReturnPct",
    "monthlyLumpSumReturnPct",
    "monthlyPeriodicReturnPct",
    "monthlyPeriodicReturnMovingAvgPct",
]


def scenario(**overrides) -> dict:
    inputs = {
        "investmentAmount": 100000,
        "marketGrowth": 5,
        "volatility": 0,
        "bankRate": 2,
        "stockAllocation": 60,
        "frequency": "yearly",
    }
    inputs.update(overrides)
    return inputs


def test_flat_yearly_scenario():
    result = run(scenario(), rng=np.random.default_rng(0))

    assert result.days == 365
    assert result.months[0] == "Jan" and result.months[-1] == "Des"
    assert len(result.marketPath) == len(result.lumpSumTrajectory) == len(result.periodicTrajectory) == 365
    for i in (0, 100, 364):
        assert isclose(result.marketPath[i], 10000 * 1.05 ** (i / 364), rel_tol=1e-12)

    assert result.finalLumpSumValue == pytest.approx(103800.0, rel=1e-4)
    assert result.finalPeriodicValue == pytest.approx(result.finalLumpSumValue, rel=1e-4)
    assert result.monthlyAllocationPct == pytest.approx([60.0] * 12)
    assert result.monthlyVolatilityLevel == [1] * 12
    assert result.finalDifference == pytest.approx(
        result.finalLumpSumValue - result.finalPeriodicValue
    )


@pytest.mark.parametrize("frequency", ["daily", "weekly", "monthly", "quarterly", "half-yearly", "yearly"])
def test_every_monthly_series_has_twelve_entries(frequency, rng):
    result = run(scenario(volatility=20, frequency=frequency), rng=rng)

    for name in MONTHLY_FIELDS:
        assert len(getattr(result, name)) == 12, name
    assert all(1 <= level <= 7 for level in result.monthlyVolatilityLevel)
    assert result.monthlyAllocationPct == sorted(result.monthlyAllocationPct)
    assert max(result.monthlyAllocationPct) <= 60.0


def test_monthly_series_stay_twelve_long_on_a_shorter_horizon(rng):
    result = run(scenario(volatility=10), rng=rng, config=AppConfig(days=90))

    assert len(result.marketPath) == 90
    for name in MONTHLY_FIELDS:
        assert len(getattr(result, name)) == 12, name


def test_zero_allocation_run():
    result = run(scenario(stockAllocation=0, volatility=30), rng=np.random.default_rng(5))

    assert result.monthlyAllocationPct == [0.0] * 12
    assert result.finalPeriodicValue == pytest.approx(100000 * 1.02, rel=1e-9)


def test_moving_average_follows_periodic_returns(rng):
    result = run(scenario(volatility=25, frequency="monthly"), rng=rng)
    returns = result.monthlyPeriodicReturnPct
    averages = result.monthlyPeriodicReturnMovingAvgPct

    assert averages[0] == pytest.approx(returns[0])
    assert averages[1] == pytest.approx((returns[0] + returns[1]) / 2)
    assert averages[7] == pytest.approx(sum(returns[5:8]) / 3)


def test_seeded_runs_are_reproducible():
    config = AppConfig(random_seed=42)
    first = run(scenario(volatility=20), config=config)
    second = run(scenario(volatility=20), config=config)

    assert first.marketPath == second.marketPath
    assert first.finalPeriodicValue == second.finalPeriodicValue


def test_unseeded_runs_differ():
    first = run(scenario(volatility=20))
    second = run(scenario(volatility=20))
    assert first.marketPath != second.marketPath


def test_accepts_validated_inputs(rng):
    inputs = SimulationInputs(**scenario(frequency="weekly"))
    result = run(inputs, rng=rng)
    assert result.finalLumpSumValue > 0


def test_missing_input_produces_no_result():
    raw = scenario()
    del raw["bankRate"]

    with pytest.raises(InvalidInputError) as excinfo:
        run(raw)
    assert excinfo.value.fields == ["bankRate"]
