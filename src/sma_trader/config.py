from __future__ import annotations

import os
from datetime import date
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

from .errors import ConfigError
from .utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = os.path.join("config", "preferences.yaml")


class ChartConfig(BaseModel):
    theme: Literal["light", "dark"] = "light"
    height: int = Field(default=700, gt=0)
    width: int = Field(default=1200, gt=0)


class SimulationConfig(BaseModel):
    symbol: str = "BTC"
    days: int = Field(default=365, ge=1)
    start_date: date = date(2023, 1, 1)
    base_price: float = Field(default=5000.0, gt=0)
    drift: float = 2.0
    noise: float = Field(default=50.0, ge=0)
    seed: int | None = None
    short_window: int = Field(default=10, ge=1)
    long_window: int = Field(default=30, ge=1)
    initial_capital: float = Field(default=5.0, ge=0)
    initial_position: float = Field(default=0.0, ge=0)
    capital_step: float = Field(default=100.0, gt=0)
    buy_fraction: float = Field(default=0.1, gt=0, le=1)

    @model_validator(mode="after")
    def _windows_ordered(self) -> "SimulationConfig":
        if self.short_window >= self.long_window:
            raise ValueError("short_window must be smaller than long_window")
        return self


class AppConfig(BaseModel):
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)


def _env_overrides() -> dict:
    overrides = {}
    if os.getenv("DEFAULT_SYMBOL"):
        overrides["symbol"] = os.getenv("DEFAULT_SYMBOL")
    if os.getenv("SMA_TRADER_SEED"):
        overrides["seed"] = os.getenv("SMA_TRADER_SEED")
    return overrides


def load_config(path: str | None = None) -> AppConfig:
    """Load preferences from YAML, then apply .env / environment overrides.

    A missing file falls back to the built-in defaults.
    """
    load_dotenv()
    path = path or os.getenv("SMA_TRADER_CONFIG", DEFAULT_CONFIG_PATH)

    raw: dict = {}
    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"{path} must contain a mapping at the top level")
        logger.info(f"[load_config] Loaded preferences from {path}")
    else:
        logger.warning(f"[load_config] {path} not found, using defaults")

    simulation = dict(raw.get("simulation") or {})
    simulation.update(_env_overrides())
    try:
        return AppConfig(simulation=simulation, chart=raw.get("chart") or {})
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc
