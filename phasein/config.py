"""Runtime configuration for the simulator service."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from phasein.core.horizon import DAYS

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


@dataclass
class AppConfig:
    """Configuration for simulation runs and the HTTP app.

    Attributes:
        days: Horizon length in days. Default 365.
        random_seed: Optional seed for reproducible market paths. Default None.
        cors_origins: Origins allowed to call the API.
        log_level: Level name passed to logging at startup.
    """
    days: int = DAYS
    random_seed: Optional[int] = None
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    def __post_init__(self):
        if self.days < 2:
            raise ValueError("days must be at least 2")
        if self.random_seed is not None and self.random_seed < 0:
            raise ValueError("random_seed must be non-negative")

    @classmethod
    def from_env(cls) -> "AppConfig":
        seed = os.environ.get("PHASEIN_RANDOM_SEED")
        origins = os.environ.get("PHASEIN_CORS_ORIGINS")
        return cls(
            random_seed=int(seed) if seed else None,
            cors_origins=(
                [origin.strip() for origin in origins.split(",") if origin.strip()]
                if origins
                else list(DEFAULT_CORS_ORIGINS)
            ),
            log_level=os.environ.get("PHASEIN_LOG_LEVEL", "INFO").upper(),
        )
