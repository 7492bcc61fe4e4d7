from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class Frequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    HALF_YEARLY = "half-yearly"
    YEARLY = "yearly"

    @property
    def intervals_per_year(self) -> int:
        return _INTERVALS_PER_YEAR[self]

    @classmethod
    def parse(cls, value: Any) -> "Frequency":
        """Unknown values fall back to quarterly."""
        if isinstance(value, Frequency):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.QUARTERLY


_INTERVALS_PER_YEAR = {
    Frequency.DAILY: 365,
    Frequency.WEEKLY: 52,
    Frequency.MONTHLY: 12,
    Frequency.QUARTERLY: 4,
    Frequency.HALF_YEARLY: 2,
    Frequency.YEARLY: 1,
}


class InvalidInputError(ValueError):
    def __init__(self, errors: List[str], fields: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors
        self.fields = fields


class SimulationInputs(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    investmentAmount: float = Field(gt=0)
    marketGrowth: float = Field(gt=-100)
    volatility: float = Field(ge=0)
    bankRate: float = Field(ge=0)
    stockAllocation: float = Field(ge=0, le=100)
    frequency: Frequency = Frequency.QUARTERLY

    @field_validator("frequency", mode="before")
    @classmethod
    def default_unknown_frequency(cls, value: Any) -> Frequency:
        return Frequency.parse(value)


def _describe(error: Mapping[str, Any]) -> tuple[str, str]:
    field = ".".join(str(part) for part in error.get("loc", ())) or "input"
    if error.get("type") == "missing":
        return field, f"{field} is required"
    return field, f"{field}: {error.get('msg', 'invalid value')}"


def parse_inputs(raw: Any, model: type[SimulationInputs] = SimulationInputs) -> SimulationInputs:
    """Validate raw (e.g. JSON) inputs, naming every missing or invalid field."""
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidInputError(["simulation inputs must be an object"], fields=[])
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        described = [_describe(error) for error in exc.errors()]
        fields = list(dict.fromkeys(field for field, _ in described))
        raise InvalidInputError([message for _, message in described], fields=fields) from exc
