"""Data contracts for the simulation endpoint."""

from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from phasein.models import SimulationInputs


class SimulationRequest(SimulationInputs):
    """Simulation inputs plus an optional seed for a reproducible market path."""

    seed: Optional[int] = Field(None, ge=0, description="Seed for the random walk.")


class SimulationResult(BaseModel):
    """Everything the dashboard draws for one run."""

    days: int = Field(..., ge=2)
    months: List[str] = Field(..., min_length=12, max_length=12)

    marketPath: List[float]
    lumpSumTrajectory: List[float]
    periodicTrajectory: List[float]

    monthlyVolatilityPct: List[float] = Field(..., min_length=12, max_length=12)
    monthlyVolatilityLevel: List[int] = Field(..., min_length=12, max_length=12)
    monthlyVolatilityLevelName: List[str] = Field(..., min_length=12, max_length=12)
    monthlyAllocationPct: List[float] = Field(..., min_length=12, max_length=12)
    monthlyMarketReturnPct: List[float] = Field(..., min_length=12, max_length=12)
    monthlyLumpSumReturnPct: List[float] = Field(..., min_length=12, max_length=12)
    monthlyPeriodicReturnPct: List[float] = Field(..., min_length=12, max_length=12)
    monthlyPeriodicReturnMovingAvgPct: List[float] = Field(..., min_length=12, max_length=12)

    finalLumpSumValue: float
    finalPeriodicValue: float

    @computed_field
    @property
    def finalDifference(self) -> float:
        """Positive when the lump sum ended ahead."""
        return self.finalLumpSumValue - self.finalPeriodicValue
