"""Configuration helpers for the timebenchy command line."""

import time
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .ledger import Clock

CLOCKS = {
    "perf_counter": time.perf_counter,
    "monotonic": time.monotonic,
    "time": time.time,
}


class Settings(BaseSettings):
    """Environment-driven defaults for reports produced by the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="TIMEBENCHY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    decimals: int = Field(
        default=4,
        ge=0,
        le=12,
        description="Maximum decimal places for elapsed-time columns.",
    )
    output_format: Literal["text", "html", "log"] = Field(
        default="text",
        description="Report rendering used when no --format is given.",
    )
    clock: Literal["perf_counter", "monotonic", "time"] = Field(
        default="perf_counter",
        description="Time source for marks; 'time' gives wall-clock epoch seconds.",
    )

    def clock_function(self) -> Clock:
        return CLOCKS[self.clock]


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load settings once per process."""

    return Settings()
